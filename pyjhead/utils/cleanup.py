# pyjhead/utils/cleanup.py
"""
Removal of expired uploads and cleaned outputs.
Runs after every request and from a periodic background thread.
"""

from datetime import datetime
from pathlib import Path
import logging
import threading
import time

from pyjhead.settings import UPLOAD_DIR, OUTPUT_DIR, RETENTION

logger = logging.getLogger(__name__)


def _is_old(path: Path) -> bool:
    try:
        mtime = datetime.fromtimestamp(path.stat().st_mtime)
    except FileNotFoundError:
        return False
    return (datetime.now() - mtime) > RETENTION


def cleanup_once(dirs=(UPLOAD_DIR, OUTPUT_DIR)) -> int:
    removed = 0
    for root in dirs:
        for p in Path(root).glob("*"):
            try:
                if p.is_file() and _is_old(p):
                    p.unlink(missing_ok=True)
                    removed += 1
            except OSError as e:
                # A failed removal is retried on the next pass
                logger.warning("could not remove %s: %s", p, e)
    if removed:
        logger.debug("removed %d expired files", removed)
    return removed


def start_background_cleanup(interval_seconds: int = 120) -> threading.Thread:
    def _loop():
        while True:
            cleanup_once()
            time.sleep(interval_seconds)

    t = threading.Thread(target=_loop, name="cleanup-thread", daemon=True)
    t.start()
    return t
