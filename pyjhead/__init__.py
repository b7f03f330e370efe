# pyjhead/__init__.py
"""Python wrapper for the jhead command line tool by Matthias Wandel."""
from pyjhead.command import JheadError, JheadNotFound, call, jhead_version
from pyjhead.jhead import Jhead
from pyjhead.parsing import TAGS

__version__ = "0.1.0"

__all__ = ["Jhead", "JheadError", "JheadNotFound", "TAGS", "call", "jhead_version", "__version__"]
