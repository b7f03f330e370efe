# pyjhead/cli.py
r"""
Command line front end to the jhead wrapper.

  pyjhead show photo.jpg
  pyjhead show "~/pictures/*.jpg" --json
  pyjhead strip photo.jpg
  pyjhead comment photo.jpg "Holidays"
  pyjhead rename "*.jpg" --format "%Y%m%d-%H%M%S"
  pyjhead autorotate "*.jpg"
  pyjhead version

Patterns are expanded by the wrapper, so quote them to keep the shell off.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys

from pyjhead import __version__
from pyjhead.command import JheadError, jhead_version
from pyjhead.jhead import Jhead
from pyjhead.settings import LOG_LEVEL

logger = logging.getLogger(__name__)


def check_jhead() -> str | None:
    """Ensure jhead is installed and on PATH."""
    try:
        return jhead_version()
    except JheadError:
        print("jhead is not available on your system. Please install it and try again.", file=sys.stderr)
        print("   Debian/Ubuntu: apt install jhead", file=sys.stderr)
        print("   macOS (Homebrew): brew install jhead", file=sys.stderr)
        sys.exit(1)


def _print_record(record: dict) -> None:
    for key, value in record.items():
        print(f"{key:<14}: {value}")


def cmd_show(args) -> None:
    data = Jhead(args.pattern).data
    if args.json:
        print(json.dumps(data, default=str, indent=2))
        return
    records = data if isinstance(data, list) else [data]
    for i, record in enumerate(records):
        if i:
            print()
        _print_record(record)


def cmd_strip(args) -> None:
    Jhead(args.pattern).pure_jpg()


def cmd_comment(args) -> None:
    Jhead(args.pattern).comment = args.text


def cmd_rename(args) -> None:
    out = Jhead(args.pattern).rename(format=args.format, force=args.force)
    if out:
        print(out)


def cmd_autorotate(args) -> None:
    out = Jhead(args.pattern).autorotate()
    if out:
        print(out)


def cmd_version(args) -> None:
    print(f"pyjhead {__version__}, jhead {jhead_version()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyjhead", description="Read and edit JPEG Exif data through jhead.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every jhead call")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("show", help="Print the Exif data of matching files")
    p.add_argument("pattern")
    p.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("strip", help="Remove every section not needed to render the image")
    p.add_argument("pattern")
    p.set_defaults(func=cmd_strip)

    p = sub.add_parser("comment", help="Replace the JPEG comment")
    p.add_argument("pattern")
    p.add_argument("text")
    p.set_defaults(func=cmd_comment)

    p = sub.add_parser("rename", help="Rename files after their Exif date")
    p.add_argument("pattern")
    p.add_argument("--format", default=None, help="strftime pattern, '%%f' for the old name, '%%i' for a counter")
    p.add_argument("--force", action="store_true", help="Rename files whatever their current name")
    p.set_defaults(func=cmd_rename)

    p = sub.add_parser("autorotate", help="Rotate images upright using the Exif orientation")
    p.add_argument("pattern")
    p.set_defaults(func=cmd_autorotate)

    p = sub.add_parser("version", help="Print wrapper and jhead versions")
    p.set_defaults(func=cmd_version)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    version = check_jhead()
    logger.debug("using jhead %s", version)

    try:
        args.func(args)
    except JheadError as e:
        print(f"jhead failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
