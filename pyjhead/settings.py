# pyjhead/settings.py
from pathlib import Path
import os
import tempfile
from datetime import timedelta


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


# jhead binary and how long a single run may take
JHEAD_BINARY = os.getenv("JHEAD_BINARY", "jhead")
JHEAD_TIMEOUT = float(os.getenv("JHEAD_TIMEOUT", 60))

# Unknown tags in jhead output raise unless this is turned off
STRICT_TAGS = env_flag("PYJHEAD_STRICT_TAGS", True)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

# Server; an installed package dir may be read-only, so work under the temp dir
WORK_DIR = Path(tempfile.gettempdir()) / "pyjhead"
UPLOAD_DIR = Path(os.getenv("PYJHEAD_UPLOAD_DIR", WORK_DIR / "uploads"))
OUTPUT_DIR = Path(os.getenv("PYJHEAD_OUTPUT_DIR", WORK_DIR / "outputs"))

MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", 50 * 1024 * 1024))
RETENTION = timedelta(minutes=2)

# jhead only handles JPEG
ALLOWED_EXTENSIONS = {".jpg", ".jpeg"}
