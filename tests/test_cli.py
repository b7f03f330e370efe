# tests/test_cli.py
import json

import pytest

from pyjhead import cli
from pyjhead.command import JheadError, JheadNotFound
from tests.reports import EXIF_REPORT, PLAIN_REPORT


@pytest.fixture(autouse=True)
def _jhead_installed(monkeypatch):
    monkeypatch.setattr(cli, "jhead_version", lambda: "3.04")


def test_show_table(fake_call, photos, capsys):
    fake_call.output = EXIF_REPORT.format(name="a.jpg")
    assert cli.main(["show", str(photos[0])]) == 0
    out = capsys.readouterr().out
    assert "camera_model  : Canon PowerShot G3" in out


def test_show_json_many(fake_call, photos, tmp_path, capsys):
    fake_call.output = EXIF_REPORT.format(name="a.jpg") + "\n\n" + PLAIN_REPORT.format(name="b.jpg")
    assert cli.main(["show", str(tmp_path / "*.jpg"), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["file_name"] for d in data] == ["a.jpg", "b.jpg"]
    assert data[0]["date_time"] == "2003-12-14 12:01:44"


@pytest.mark.parametrize("argv, expected", [
    (["strip"], ["-purejpg"]),
    (["comment", "{path}", "Hello"], ["-cl", "Hello"]),
    (["rename", "{path}", "--format", "%Y%m%d", "--force"], ["-nf%Y%m%d"]),
    (["autorotate"], ["-autorot"]),
])
def test_write_commands(fake_call, photos, argv, expected):
    path = str(photos[0])
    argv = [a.format(path=path) for a in argv]
    if path not in argv:
        argv.append(path)
    assert cli.main(argv) == 0
    assert fake_call.last == expected + [path]


def test_version(capsys):
    assert cli.main(["version"]) == 0
    assert "jhead 3.04" in capsys.readouterr().out


def test_failure_exit_status(fake_call, photos, capsys):
    fake_call.error = JheadError("Not JPEG")
    assert cli.main(["strip", str(photos[0])]) == 1
    assert "Not JPEG" in capsys.readouterr().err


def test_missing_jhead(monkeypatch, photos):
    def missing():
        raise JheadNotFound("jhead not found on PATH")

    monkeypatch.setattr(cli, "jhead_version", missing)
    with pytest.raises(SystemExit) as info:
        cli.main(["strip", str(photos[0])])
    assert info.value.code == 1
