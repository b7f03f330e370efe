# pyjhead/utils/signature.py
"""
Magic-number checks so that only real JPEGs are handed to jhead.
"""
from __future__ import annotations


def _starts(data: bytes, prefix: bytes) -> bool:
    return data.startswith(prefix)


def is_jpeg(data: bytes) -> bool:
    # SOI marker followed by the start of another marker
    return _starts(data, b"\xFF\xD8\xFF")


def detect_extension(data: bytes) -> str | None:
    """Return '.jpg' for JPEG data, None for anything else."""
    if is_jpeg(data):
        return ".jpg"
    return None


def ext_equivalent(a: str, b: str) -> bool:
    a = a.lstrip(".").lower()
    b = b.lstrip(".").lower()
    jpeg = {"jpg", "jpeg"}
    return a == b or (a in jpeg and b in jpeg)
