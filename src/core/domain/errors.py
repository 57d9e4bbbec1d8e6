"""Error taxonomy for color-namer.

Every failure in the pipeline is terminal. Adapters translate library
exceptions into these types so the CLI has a single place that formats the
message and picks the exit code.
"""

from __future__ import annotations


class ColorNamerError(Exception):
    """Base class for every user-facing failure."""

    exit_code: int = 1


class UsageError(ColorNamerError):
    """Neither or both of `--hex` / `--rgb` were supplied."""

    exit_code = 2


class ColorParseError(ColorNamerError):
    """The color text could not be turned into an `RGBValue`."""


class InvalidFormat(ColorParseError):
    pass


class InvalidNumber(ColorParseError):
    pass


class NetworkError(ColorNamerError):
    """The naming service could not be reached."""


class ResponseFormatError(ColorNamerError):
    """The naming service answered with something we cannot read."""


class ClipboardError(ColorNamerError):
    """The OS clipboard is not available."""


class ConfigError(ColorNamerError):
    """A `COLOR_NAMER_*` setting (env var or `.env`) has an invalid value."""
