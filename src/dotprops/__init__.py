"""dotprops - dotted-key properties files.

Parses an INI-like text format into a hierarchical key tree addressed by
dotted keys, with typed accessors and structural queries.
"""
# ruff: noqa: F401

from .exceptions import (
    ConversionError,
    DotPropsError,
    InvalidBooleanError,
    NodeNotFoundError,
    NoValueError,
    ParseError,
)
from .parser import PropertiesParser
from .properties import Properties, load, load_file, loads
from .tree import PropertiesNode

__version__ = "0.1.0"
