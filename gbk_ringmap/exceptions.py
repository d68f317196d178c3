"""
Custom exception hierarchy for gbk-ringmap.

Only configuration problems are raised as exceptions. Malformed
locations or qualifier values inside a feature table are not errors:
the offending line simply contributes nothing. A record without a
FEATURES table or without a ``/organism`` qualifier is reported as
``None`` by the parser, never by raising.

I/O failures (``OSError`` and friends) are propagated unmodified.
"""


class GbkRingmapError(Exception):
    """Base exception for all gbk-ringmap errors."""


class ConfigurationError(GbkRingmapError):
    """Raised when a reader component is constructed with invalid settings.

    For example, a ``ByteCursor`` with a non-positive buffer size, a
    source object that cannot be read from, or a layout name that has
    no matching layout file.
    """


class ConfigValidationError(GbkRingmapError):
    """Raised when a ringmap config file cannot be turned into a config.

    Field-level problems surface as ``pydantic.ValidationError``; this
    covers the cases pydantic never sees, such as an empty file or a
    top-level value that is not a mapping.
    """
