"""
Error types raised by the codec.

Every decode failure carries the path of wire keys leading to the first
invalid field, e.g. ``content.value.title``.
"""

from typing import Tuple


class CodecError(Exception):
    """Base class for all conversion failures."""

    def __init__(self, message: str, path: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)

    def at(self, key) -> 'CodecError':
        """Prefix the error path with an enclosing key and return self."""
        self.path = (str(key),) + self.path
        return self

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(self.path)}: {self.message}"


class MalformedInputError(CodecError):
    """A required field is missing or has the wrong shape."""
    pass


class UnparsableNumberError(CodecError):
    """A numeric field does not hold a valid integer or decimal string."""
    pass


class UnrecognizedTypeError(CodecError):
    """A discriminator has no registered variant."""
    pass


class UnsupportedConversionError(CodecError):
    """A variant is not registered for the requested format."""
    pass


class ConfigurationError(Exception):
    """Invalid codec configuration."""
    pass
