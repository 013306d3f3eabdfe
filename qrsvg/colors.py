# -*- coding: utf-8 -*-
"""
QR SVG Color Resolver Module

Normalizes color settings to the single representation the document assembler
works with: a ``#RRGGBB`` string, or an already formed SVG color token.

Classes:
    Hex: Explicit color token
    Rgb: Color as an (r, g, b) triple

Functions:
    encode_channel: Encode one 0-255 channel as two uppercase hex digits
    to_hex: Resolve a color value to its canonical string
    check_opacity: Validate an optional opacity value
"""

import re
from typing import NamedTuple, Optional, Union

from .exceptions import InvalidColorError, InvalidOpacityError

_HEX_TOKEN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Hex(NamedTuple):
    """An already formed color token such as ``"#11aa88"`` or ``"teal"``."""
    value: str


class Rgb(NamedTuple):
    """A color given as red, green and blue channels, each 0-255."""
    r: int
    g: int
    b: int


Color = Union[Hex, Rgb, str, tuple]


def encode_channel(channel: int) -> str:
    """
    Encode a single color channel as two uppercase hexadecimal digits.

    Args:
        channel (int): Channel value, 0-255

    Returns:
        str: Two character hex string, e.g. ``"0A"``

    Raises:
        InvalidColorError: If the channel is not an int in [0, 255]
    """
    if isinstance(channel, bool) or not isinstance(channel, int):
        raise InvalidColorError(f"invalid color channel {channel!r}: expected an integer")
    if not 0 <= channel <= 255:
        raise InvalidColorError(f"invalid color channel {channel}: expected 0-255")
    return f"{channel:02X}"


def to_hex(color: Color) -> str:
    """
    Resolve a color value into the string written to a ``fill`` attribute.

    Triples become ``#RRGGBB``. Hex tokens are upper-cased; any other string
    token (``"red"``, ``"none"``) is passed through unchanged.

    Example:
        >>> to_hex((255, 0, 128))
        '#FF0080'
        >>> to_hex("#ffffff")
        '#FFFFFF'
    """
    if isinstance(color, Hex):
        color = color.value
    if isinstance(color, str):
        if not color:
            raise InvalidColorError("invalid color: empty string")
        if _HEX_TOKEN.match(color):
            return color.upper()
        return color
    if isinstance(color, (Rgb, tuple, list)) and len(color) == 3:
        r, g, b = color
        return "#" + encode_channel(r) + encode_channel(g) + encode_channel(b)
    raise InvalidColorError(f"invalid color {color!r}: expected a color token or (r, g, b)")


def check_opacity(opacity: Optional[float]) -> Optional[float]:
    """Return the opacity unchanged if it is None or within [0.0, 1.0]."""
    if opacity is None:
        return None
    if isinstance(opacity, bool) or not isinstance(opacity, (int, float)):
        raise InvalidOpacityError(f"invalid opacity {opacity!r}: expected a number")
    if not 0.0 <= opacity <= 1.0:
        raise InvalidOpacityError(f"invalid opacity {opacity}: expected 0.0-1.0")
    return opacity
