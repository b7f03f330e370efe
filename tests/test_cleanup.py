# tests/test_cleanup.py
import os
import time
from pathlib import Path

from pyjhead.utils.cleanup import cleanup_once
from pyjhead.utils.signature import detect_extension, ext_equivalent


def _age(path: Path, seconds: int) -> None:
    past = time.time() - seconds
    os.utime(path, (past, past))


def test_cleanup_removes_only_expired(tmp_path: Path):
    old = tmp_path / "old.jpg"
    fresh = tmp_path / "fresh.jpg"
    old.write_bytes(b"x")
    fresh.write_bytes(b"x")
    _age(old, 3600)

    assert cleanup_once(dirs=(tmp_path,)) == 1
    assert not old.exists()
    assert fresh.exists()


def test_signature():
    assert detect_extension(b"\xff\xd8\xff\xe1\x00\x10Exif") == ".jpg"
    assert detect_extension(b"\x89PNG\r\n\x1a\n") is None
    assert ext_equivalent(".JPEG", ".jpg")
    assert not ext_equivalent(".png", ".jpg")
