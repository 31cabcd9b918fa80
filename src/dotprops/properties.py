"""Read-only properties facade with typed accessors."""

from __future__ import annotations

import io
import logging
import os
import re
from typing import Any, Dict, Iterable, Set, Union

from .exceptions import ConversionError, InvalidBooleanError, NodeNotFoundError, NoValueError
from .parser import PropertiesParser
from .tree import PropertiesNode

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "yes", "1")
FALSE_VALUES = ("false", "no", "0")
INT_EXPR = re.compile(r"[+-]?[0-9]+")


class Properties:
    """Typed, read-only access to a parsed properties tree."""

    def __init__(self, root: PropertiesNode):
        """Initialize properties facade.

        Args:
            root: Root node of a fully parsed tree
        """
        self._root = root

    def get_string(self, key: str) -> str:
        """Get the raw string value at a dotted key.

        Raises:
            NodeNotFoundError: If the key does not exist
            NoValueError: If the key exists but holds no value
        """
        node = self._root.find(key)
        if not node.value:
            raise NoValueError(key)
        return node.value

    def get_int(self, key: str) -> int:
        """Get an integer value at a dotted key.

        Raises:
            ConversionError: If the value is not a signed ASCII decimal literal
        """
        value = self.get_string(key)
        try:
            if not INT_EXPR.fullmatch(value):
                raise ValueError(f"invalid literal for int() with base 10: {value!r}")
            return int(value, 10)
        except ValueError as e:
            raise ConversionError(key, value, int) from e

    def get_float(self, key: str) -> float:
        """Get a float value at a dotted key.

        Raises:
            ConversionError: If the value is not a float literal
        """
        value = self.get_string(key)
        try:
            return float(value)
        except ValueError as e:
            raise ConversionError(key, value, float) from e

    def get_bool(self, key: str) -> bool:
        """Get a boolean value at a dotted key.

        Accepts ``true``/``yes``/``1`` and ``false``/``no``/``0`` in any case.

        Raises:
            InvalidBooleanError: If the value is not one of the accepted tokens
        """
        value = self.get_string(key)
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise InvalidBooleanError(key, value)

    def key_exists(self, key: str) -> bool:
        """Check whether a node exists at a dotted key, with or without a value."""
        try:
            self._root.find(key)
        except NodeNotFoundError:
            return False
        return True

    def subkeys(self, key: str) -> Set[str]:
        """Get the immediate child segment names of a node.

        Args:
            key: Dotted key  # ("" for the top level)

        Returns:
            Child segment names  # (not full paths)

        Raises:
            NodeNotFoundError: If the key does not exist
        """
        return set(self._root.find(key).children)

    def get(self, key: str, default: Any = None) -> str | Any:
        """Dict-style get returning default for missing or valueless keys."""
        try:
            return self.get_string(key)
        except (NodeNotFoundError, NoValueError):
            return default

    def pretty(self) -> Dict[str, str]:
        """Flattened view of every assigned value, keyed by full dotted key."""
        return self._root.flatten()

    def __getitem__(self, key: str) -> str:
        return self.get_string(key)

    def __contains__(self, key: str) -> bool:
        return self.key_exists(key)

    def __repr__(self) -> str:
        """String representation."""
        return f"Properties({self.pretty()})"


def load(stream: Iterable[str], strict_keys: bool = False) -> Properties:
    """Parse a stream of text lines into properties.

    Args:
        stream: Readable text stream or any iterable of lines
        strict_keys: Reject keys with empty segments

    Returns:
        Populated properties  # (nothing is returned if parsing fails)

    Raises:
        ParseError: If a line matches neither a section header nor an assignment
    """
    return Properties(PropertiesParser(strict_keys=strict_keys).parse(stream))


def loads(text: str, strict_keys: bool = False) -> Properties:
    """Parse properties from a string."""
    return load(io.StringIO(text), strict_keys=strict_keys)


def load_file(
    path: Union[str, os.PathLike], encoding: str = "utf-8", strict_keys: bool = False
) -> Properties:
    """Open, parse and close a properties file.

    Args:
        path: Path to the properties file
        encoding: Text encoding of the file
        strict_keys: Reject keys with empty segments

    Raises:
        OSError: If the file cannot be opened
        ParseError: If the file contains an invalid line
    """
    logger.debug("Loading properties from %s", path)
    with open(path, "r", encoding=encoding) as f:
        return load(f, strict_keys=strict_keys)
