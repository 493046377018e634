"""Exceptions raised outside the mapping core.

The builders and the byte/text codec never raise; these are only used by
the wire form (:mod:`mapscope.protocol.wire`) and the mapping context
configuration (:mod:`mapscope.config`).
"""


class MapscopeError(Exception):
    """Base class for all mapscope errors."""


class WireFormatError(MapscopeError, ValueError):
    """A serialized protocol message could not be decoded."""


class ConfigurationError(MapscopeError):
    """A mapping context is missing, unreadable, or malformed."""
