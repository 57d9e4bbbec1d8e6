"""Parsing of the two accepted color notations.

Both parsers return the same normalized `RGBValue` or raise a
`ColorParseError` subclass:

- hex: `#f0a`, `f0a`, `#ff00aa`, `FF00AA`
- rgb: `rgb(255,0,170)`, `rgb( 255 , 0 , 170 )`

The hex form is matched against a full-string regex so partial matches
(`ff00`, `#ff00aa0`) fail instead of silently decoding a prefix.
"""

from __future__ import annotations

import logging
import re

from core.domain.errors import InvalidFormat, InvalidNumber
from core.domain.models import RGBValue

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#?(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# ASCII only: `str.isdigit` and `int` would also accept other Unicode digits.
_UINT_RE = re.compile(r"\+?[0-9]+")

_RGB_PREFIX = "rgb("
_RGB_SUFFIX = ")"


def parse_hex(text: str) -> RGBValue:
    """Parse `#rgb` / `#rrggbb` (the `#` is optional, case-insensitive)."""

    match = _HEX_RE.fullmatch(text)
    if match is None:
        raise InvalidFormat(
            f"{text!r} is not a valid hexadecimal color (expected 3 or 6 hex digits, optionally prefixed by '#')"
        )

    digits = match.group("digits")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    red, green, blue = bytes.fromhex(digits)
    return RGBValue(red=red, green=green, blue=blue)


def _parse_component(field: str, *, label: str) -> int:
    value = field.strip()
    if not _UINT_RE.fullmatch(value):
        raise InvalidNumber(f"{label} component {value!r} is not an integer between 0 and 255")

    # A byte has at most 3 significant digits; longer strings never reach `int`.
    digits = value.lstrip("+").lstrip("0") or "0"
    if len(digits) > 3 or int(digits) > 255:
        shown = digits if len(digits) <= 12 else f"{digits[:6]}...({len(digits)} digits)"
        raise InvalidNumber(f"{label} component {shown} is out of range (0..255)")
    return int(digits)


def parse_rgb(text: str) -> RGBValue:
    """Parse `rgb(r,g,b)`.

    Fields beyond the third are ignored.
    """

    if not (text.startswith(_RGB_PREFIX) and text.endswith(_RGB_SUFFIX)):
        raise InvalidFormat(f"{text!r} is not a valid rgb() color (expected rgb(<r>,<g>,<b>))")

    fields = text[len(_RGB_PREFIX) : -len(_RGB_SUFFIX)].split(",")
    if len(fields) < 3:
        raise InvalidFormat(f"{text!r} has {len(fields)} component(s), expected 3")
    if len(fields) > 3:
        logger.debug("Ignoring %d extra rgb() field(s) in %r", len(fields) - 3, text)

    return RGBValue(
        red=_parse_component(fields[0], label="red"),
        green=_parse_component(fields[1], label="green"),
        blue=_parse_component(fields[2], label="blue"),
    )
