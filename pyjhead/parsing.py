# pyjhead/parsing.py
"""
Turn jhead's plain-text report back into Python values.

jhead prints one block per file, blocks separated by a blank line:

    File name    : 0805-153933.jpg
    File size    : 463023 bytes
    Date/Time    : 2001:08:05 15:39:33
    Resolution   : 1600 x 1200
    Flash used   : No
"""
from __future__ import annotations
import re
from datetime import datetime

from pyjhead.command import JheadError

TAGS = (
    "file_name",
    "file_size",
    "file_date",
    "camera_make",
    "camera_model",
    "date_time",
    "resolution",
    "orientation",
    "color_bw",
    "flash_used",
    "focal_length",
    "digital_zoom",
    "ccd_width",
    "exposure_time",
    "aperture",
    "focus_dist",
    "iso_equiv",
    "exposure_bias",
    "whitebalance",
    "light_source",
    "metering_mode",
    "exposure",
    "exposure_mode",
    "focus_range",
    "jpeg_process",
    "jpeg_quality",
    "gps_latitude",
    "gps_longitude",
    "gps_altitude",
    "comment",
)

# Printed for any JPEG, whether or not it carries an Exif header
FILE_TAGS = frozenset({
    "file_name",
    "file_size",
    "file_date",
    "resolution",
    "jpeg_process",
    "jpeg_quality",
    "comment",
})

_LINE_RE = re.compile(r"(.+?)\s*:\s*(.+)")
_TIME_RE = re.compile(r"^(\d{4}):(\d\d):(\d\d) (\d\d):(\d\d):(\d\d)$")
_BOOL_RE = re.compile(r"^(No|Yes)$")
_SIZE_RE = re.compile(r"^(\d+) x (\d+)$")


def parse_tag(label: str, strict: bool = True) -> str:
    tag = re.sub(r"[\s/]", "_", label.lower())
    if tag.endswith("."):
        tag = tag[:-1]
    if strict and tag not in TAGS:
        raise JheadError(f"Tag {tag} (from {label}) not valid.")
    return tag


def parse_value(text: str):
    m = _TIME_RE.match(text)
    if m:
        try:
            return datetime(*(int(g) for g in m.groups()))
        except ValueError:
            return None
    m = _BOOL_RE.match(text)
    if m:
        return m.group(1) == "Yes"
    m = _SIZE_RE.match(text)
    if m:
        return int(m.group(1)), int(m.group(2))
    return text


def parse_block(lines: list[str], strict: bool = True) -> dict:
    record = {}
    for line in lines:
        m = _LINE_RE.match(line)
        if m:
            record[parse_tag(m.group(1), strict)] = parse_value(m.group(2))
    return record


def parse_output(text: str, strict: bool = True) -> list[dict]:
    """One dict per file reported in ``text``."""
    blocks = [b for b in text.split("\n\n") if b.strip()]
    return [parse_block(b.split("\n"), strict) for b in blocks]
