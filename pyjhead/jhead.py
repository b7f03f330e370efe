# pyjhead/jhead.py
"""
Object-oriented front end to jhead.

    photo = Jhead("photo.jpg")
    photo.date_time          # datetime(2010, 8, 27, 15, 53, 53)

    with Jhead("*.jpg") as photos:
        photos.rename("%Y%m%d-%H%M%S")

Every method builds a jhead argument list, appends the files matched by the
pattern and runs it through pyjhead.command.call.
"""
from __future__ import annotations
import glob
import logging
import os
import re
from datetime import date, datetime, timedelta

from pyjhead import settings
from pyjhead.command import JheadError, call
from pyjhead.parsing import FILE_TAGS, TAGS, parse_output

logger = logging.getLogger(__name__)

_TIMEDIFF_RE = re.compile(r"^[+-]?\d+(:\d\d){0,2}$")


def _format_timediff(timediff) -> str:
    if isinstance(timediff, timedelta):
        total = int(timediff.total_seconds())
        sign = "-" if total < 0 else "+"
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
    text = str(timediff).strip()
    if not _TIMEDIFF_RE.match(text):
        raise ValueError(f"invalid time difference: {timediff!r}")
    return text if text[0] in "+-" else "+" + text


def _format_date(value) -> str:
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.strftime("%Y:%m:%d/%H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y:%m:%d")
    return str(value)


class Jhead:
    """Wrapper around jhead for the files matching ``pattern``."""

    def __init__(self, pattern, strict: bool | None = None, options: tuple[str, ...] = ()):
        self.pattern = os.fspath(pattern)
        self.strict = settings.STRICT_TAGS if strict is None else strict
        self._options = tuple(options)

    def __enter__(self) -> "Jhead":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Jhead({self.pattern!r})"

    def __getattr__(self, name):
        if name in TAGS:
            return self._tag(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(TAGS))

    # --- plumbing ---

    def files(self) -> list[str]:
        """Files matched by the pattern, or the bare pattern if none match."""
        matches = sorted(glob.glob(os.path.expanduser(self.pattern)))
        return matches or [self.pattern]

    def _run(self, *args: str) -> str:
        return call(*self._options, *args, *self.files())

    def _run_quiet(self, *args: str) -> None:
        # With -q jhead stays silent unless something went wrong
        out = self._run(*args, "-q")
        if out:
            raise JheadError(out)

    def _records(self) -> list[dict]:
        return parse_output(self._run(), strict=self.strict)

    def _tag(self, name: str):
        data = self.data
        if isinstance(data, list):
            return [record.get(name) for record in data]
        return data.get(name)

    # --- reading ---

    @property
    def data(self):
        """Parsed jhead report: a dict for one file, a list of dicts for several."""
        records = self._records()
        if len(records) <= 1:
            return records[0] if records else {}
        return records

    def many(self) -> bool:
        return len(glob.glob(os.path.expanduser(self.pattern))) > 1

    def exif(self) -> bool:
        """True if jhead reports Exif fields for the file(s)."""
        records = self._records()
        if not records:
            return False
        return all(set(r) - FILE_TAGS for r in records)

    @property
    def width(self):
        if self.many():
            return None
        resolution = self.resolution
        return resolution[0] if resolution else None

    @property
    def height(self):
        if self.many():
            return None
        resolution = self.resolution
        return resolution[-1] if resolution else None

    def to_dict(self) -> dict | None:
        if self.many():
            return None
        data = dict(self.data)
        resolution = data.get("resolution")
        data["width"] = resolution[0] if resolution else None
        data["height"] = resolution[-1] if resolution else None
        return data

    # --- general metadata ---

    def transplant_exif(self, name) -> str:
        """Transplant the Exif header from image ``name`` into the matched files.

        A name containing '&i' has it replaced by each file's own name, e.g.
        ``Jhead("*.jpg").transplant_exif("originals/&i")``.
        """
        return self._run("-te", os.fspath(name))

    def delete_comment(self) -> str:
        return self._run("-dc")

    def delete_exif(self) -> str:
        """Delete the Exif header, leaving IPTC, XMP and comment sections."""
        return self._run("-de")

    def delete_iptc(self) -> str:
        return self._run("-di")

    def delete_xmp(self) -> str:
        return self._run("-dx")

    def delete_unknown(self) -> str:
        """Delete sections jhead doesn't know about."""
        return self._run("-du")

    def pure_jpg(self) -> str:
        """Delete every section not needed to render the image."""
        return self._run("-purejpg")

    def make_exif(self, thumbnail: bool = False) -> str:
        """Create a minimal Exif header, optionally with a thumbnail.

        The header only holds the date/time (file time by default) and
        thumbnail fields.
        """
        if thumbnail:
            return self._run("-mkexif", "-rgt")
        return self._run("-mkexif")

    def save_comment(self, name) -> str:
        return self._run("-cs", os.fspath(name))

    def load_comment(self, name) -> str:
        return self._run("-ci", os.fspath(name))

    @property
    def comment(self):
        return self._tag("comment")

    @comment.setter
    def comment(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"comment must be a str, not {type(text).__name__}")
        self._run("-cl", text)

    # --- date / time ---

    def update_system_time_stamp(self) -> None:
        """Set the file system time stamp from the Exif header."""
        self._run_quiet("-ft")

    def update_exif_time_stamp(self, mkexif: bool = False) -> None:
        """Set the Exif time stamp from the file time stamp.

        An Exif header must exist; pass mkexif=True to create one first.
        """
        if mkexif:
            self.make_exif()
        self._run_quiet("-dsft")

    def rename(self, format: str | None = None, force: bool = False, extension: bool = False) -> str:
        """Rename files after their Exif DateTimeOriginal.

        Without ``force`` only names consisting largely of digits are touched.
        ``format`` is a strftime pattern (default MMDD-HHMMSS by jhead) where
        '%f' is the original name and '%i' a sequence number ('%03i' pads).
        A '/' in the result moves the file to that path. ``extension`` also
        renames files sharing the name with another extension (jhead -a).
        """
        option = "-nf" if force else "-n"
        if format is not None:
            option += format
        args = [option]
        if extension:
            args.append("-a")
        logger.info("renaming %s with %s", self.pattern, args)
        return self._run(*args)

    def rename_like(self, format: str | None = None, force: bool = False) -> str:
        return self.rename(format=format, force=force)

    def adjust_time(self, timediff) -> str:
        """Shift the Exif time by ``timediff`` (timedelta or '+h:mm:ss')."""
        return self._run("-ta" + _format_timediff(timediff))

    def adjust_date(self, date1, date2) -> str:
        """Shift the Exif date by the difference ``date1`` minus ``date2``."""
        return self._run(f"-da{_format_date(date1)}-{_format_date(date2)}")

    @property
    def date_time(self):
        return self._tag("date_time")

    @date_time.setter
    def date_time(self, value) -> None:
        if not isinstance(value, date):
            raise TypeError(f"date_time must be a date or datetime, not {type(value).__name__}")
        self._run("-ts" + value.strftime("%Y:%m:%d-%H:%M:%S"))

    def set_date(self, year, month=None, day=None) -> str:
        """Set the date part of the Exif time, keeping the time of day."""
        if isinstance(year, date):
            stamp = year.strftime("%Y:%m:%d")
        else:
            stamp = f"{int(year):04d}"
            if month is not None:
                stamp += f":{int(month):02d}"
                if day is not None:
                    stamp += f":{int(day):02d}"
            elif day is not None:
                raise ValueError("day given without month")
        return self._run("-ds" + stamp)

    # --- thumbnails ---

    def delete_thumbnails(self) -> str:
        return self._run("-dt")

    def save_thumbnail(self, name) -> str:
        """Save the embedded thumbnail to ``name`` ('&i' expands to the file name)."""
        return self._run("-st", os.fspath(name))

    def replace_thumbnail(self, name) -> str:
        return self._run("-rt", os.fspath(name))

    def regenerate_thumbnail(self, size: int | None = None) -> str:
        """Rebuild the thumbnail from the image; needs ImageMagick's mogrify."""
        return self._run("-rgt" if size is None else f"-rgt{int(size)}")

    # --- rotation ---

    def autorotate(self) -> str:
        """Losslessly rotate the image upright according to the Exif orientation."""
        return self._run("-autorot")

    def clear_rotation_tag(self) -> str:
        return self._run("-norot")

    # --- file matching ---

    def match(self, model: str | None = None, exif_only: bool = False, orientation: str | None = None) -> "Jhead":
        """A Jhead on the same pattern restricted to files jhead selects.

        orientation is 'portrait' or 'landscape'.
        """
        options = list(self._options)
        if model is not None:
            options += ["-model", model]
        if exif_only:
            options.append("-exonly")
        if orientation is not None:
            flags = {"portrait": "-orp", "landscape": "-orl"}
            if orientation not in flags:
                raise ValueError(f"orientation must be 'portrait' or 'landscape', not {orientation!r}")
            options.append(flags[orientation])
        return Jhead(self.pattern, strict=self.strict, options=tuple(options))
