# pyjhead/command.py
"""
Low-level runner for the jhead binary.

Every operation of the wrapper ends up here: the argument vector is run
without a shell, stderr is folded into stdout and the combined text is
returned stripped. A non-zero exit status raises JheadError carrying the
tool's own message.
"""
from __future__ import annotations
import logging
import re
import subprocess
from functools import lru_cache

from pyjhead import settings

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+.\d+)")


class JheadError(RuntimeError):
    """jhead failed, or its output could not be understood."""

    def __init__(self, message: str = "", command: list[str] | None = None):
        super().__init__(message)
        self.command = command


class JheadNotFound(JheadError):
    """The jhead binary could not be started."""


def call(*args: str) -> str:
    cmd = [settings.JHEAD_BINARY] + [str(a) for a in args]
    logger.debug("running %s", cmd)
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=settings.JHEAD_TIMEOUT,
        )
    except FileNotFoundError as e:
        raise JheadNotFound(f"{settings.JHEAD_BINARY} not found on PATH", command=cmd) from e
    except subprocess.TimeoutExpired as e:
        raise JheadError(f"{settings.JHEAD_BINARY} timed out after {e.timeout}s", command=cmd) from e

    out = (proc.stdout or "").strip()
    if proc.returncode != 0:
        logger.warning("jhead exited with %s: %s", proc.returncode, out)
        raise JheadError(out, command=cmd)
    return out


@lru_cache(maxsize=1)
def jhead_version() -> str | None:
    """Version of the installed jhead, e.g. '3.04'."""
    m = _VERSION_RE.search(call("-V"))
    return m.group(1) if m else None
