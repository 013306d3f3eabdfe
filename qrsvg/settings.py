# -*- coding: utf-8 -*-
"""
QR SVG Settings Module

Immutable rendering configuration and its parsing from string parameters
(query strings, form values, environment-like mappings).

Classes:
    Format: Whitespace formatting of the serialized document
    SvgSettings: Resolved settings for one render call

Functions:
    settings_from_mapping: Build SvgSettings from string values
"""

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .colors import Color, Hex, Rgb, check_opacity, to_hex
from .exceptions import QRSvgError


class Format(enum.Enum):
    """Output formatting: compact (``none``) or indented (``indent``)."""
    NONE = "none"
    INDENT = "indent"


@dataclass(frozen=True)
class SvgSettings:
    """
    Settings for rendering a module matrix as SVG.

    Attributes:
        scale (int): Pixel size of one module
        background_opacity (Optional[float]): Opacity of the background rect,
            None omits the ``fill-opacity`` attribute
        background_color (Color): Background fill
        qrcode_color (Color): Fill of the dark modules
        format (Format): Whitespace formatting of the output text

    Example:
        >>> settings = SvgSettings(qrcode_color=(17, 170, 136), scale=4)
        >>> settings.format
        <Format.NONE: 'none'>
    """
    scale: int = 10
    background_opacity: Optional[float] = None
    background_color: Color = "#ffffff"
    qrcode_color: Color = "#000000"
    format: Format = Format.NONE

    def __post_init__(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 1:
            raise QRSvgError(f"invalid scale {self.scale!r}: expected a positive integer")
        check_opacity(self.background_opacity)
        # Colors are validated eagerly so a bad triple fails at construction.
        to_hex(self.background_color)
        to_hex(self.qrcode_color)
        if not isinstance(self.format, Format):
            object.__setattr__(self, "format", _parse_format(self.format))

    def replace(self, **changes: Any) -> "SvgSettings":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


def _parse_format(value: Any) -> Format:
    if value is None:
        return Format.NONE
    try:
        return Format(str(value).strip().lower())
    except ValueError:
        raise QRSvgError(f"invalid format {value!r}: expected 'none' or 'indent'") from None


def _parse_color(value: str) -> Color:
    """Parse ``"r,g,b"`` integers into an Rgb, anything else into a Hex token."""
    value = value.strip()
    parts = value.split(",")
    if len(parts) == 3:
        try:
            return Rgb(*(int(p) for p in parts))
        except ValueError:
            pass
    return Hex(value)


def settings_from_mapping(values: Mapping[str, Any], base: Optional[SvgSettings] = None) -> SvgSettings:
    """
    Build settings from a mapping of string parameters.

    Missing or empty keys keep the value from ``base`` (or the defaults).
    Recognized keys: ``scale``, ``background_opacity``, ``background_color``,
    ``qrcode_color`` and ``format``.

    Raises:
        QRSvgError: If a value cannot be parsed or is out of range
    """
    base = base or SvgSettings()
    changes = {}

    scale = values.get("scale")
    if scale not in (None, ""):
        try:
            changes["scale"] = int(scale)
        except (TypeError, ValueError):
            raise QRSvgError(f"invalid scale {scale!r}: expected a positive integer") from None

    opacity = values.get("background_opacity")
    if opacity not in (None, ""):
        try:
            changes["background_opacity"] = float(opacity)
        except (TypeError, ValueError):
            raise QRSvgError(f"invalid opacity {opacity!r}: expected a number") from None

    for key in ("background_color", "qrcode_color"):
        color = values.get(key)
        if color not in (None, ""):
            changes[key] = _parse_color(str(color))

    fmt = values.get("format")
    if fmt not in (None, ""):
        changes["format"] = _parse_format(fmt)

    return base.replace(**changes)
