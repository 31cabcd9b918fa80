"""Custom exceptions for dotprops."""

from typing import Type


class DotPropsError(Exception):
    """Base exception for dotprops errors."""

    pass


class NodeNotFoundError(DotPropsError, KeyError):
    """Raised when a dotted key does not resolve to a node in the tree."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"node '{self.key}' not found"


class NoValueError(DotPropsError):
    """Raised when a node exists but was never assigned a value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"node '{key}' has no value")


class ParseError(DotPropsError):
    """Raised when a line is neither blank, a section header nor an assignment."""

    def __init__(self, line: str, line_number: int):
        """Initialize parse error.

        Args:
            line: Raw text of the offending line
            line_number: 1-based position of the line in the input
        """
        self.line = line
        self.line_number = line_number
        super().__init__(f"parse error: invalid line: {line}")


class ConversionError(DotPropsError, ValueError):
    """Raised when a stored value is not a valid literal of the requested type."""

    def __init__(self, key: str, value: str, target: Type, message: str | None = None):
        self.key = key
        self.value = value
        self.target = target
        super().__init__(message or f"cannot convert value {value!r} of '{key}' to {target.__name__}")


class InvalidBooleanError(ConversionError):
    """Raised when a value is none of the accepted boolean tokens."""

    def __init__(self, key: str, value: str):
        super().__init__(key, value, bool, f'invalid boolean value "{value}"')
