# -*- coding: utf-8 -*-
"""
QR SVG Exceptions Module

Errors raised for caller defects: a malformed module matrix, an out of range
color channel or an out of range opacity. Storage failures are not raised;
they are reported through :class:`qrsvg.storage.SaveResult`.
"""


class QRSvgError(ValueError):
    """Base class for all input defects detected while rendering."""


class InvalidMatrixError(QRSvgError):
    """The module matrix is not square."""


class InvalidModuleValueError(QRSvgError):
    """A matrix cell holds something other than 0 or 1."""

    def __init__(self, row: int, col: int, value) -> None:
        super().__init__(f"invalid module value {value!r} at row {row}, column {col}")
        self.row = row
        self.col = col
        self.value = value


class InvalidColorError(QRSvgError):
    """A color is neither a color token nor an (r, g, b) triple in range."""


class InvalidOpacityError(QRSvgError):
    """Opacity is outside [0.0, 1.0]."""
