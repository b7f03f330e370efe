# tests/conftest.py
import pytest


class FakeCall:
    """Stands in for pyjhead.command.call and records its arguments."""

    def __init__(self):
        self.calls = []
        self.output = ""
        self.error = None

    def __call__(self, *args):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.output

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def fake_call(monkeypatch):
    fake = FakeCall()
    monkeypatch.setattr("pyjhead.jhead.call", fake)
    return fake


@pytest.fixture
def photos(tmp_path):
    """Three empty .jpg files; jhead itself is faked."""
    paths = [tmp_path / name for name in ("a.jpg", "b.jpg", "c.jpg")]
    for p in paths:
        p.write_bytes(b"\xff\xd8\xff\xe0")
    return paths
