# -*- coding: utf-8 -*-
"""
QR SVG Renderer Module

Renders a QR module matrix as an SVG document. Each dark module becomes a
``rect`` inside a single ``g`` carrying the fill color, drawn over a full size
background ``rect``.

Functions:
    build_document: Assemble the SVG element tree
    create: Render the matrix to SVG text
    to_base64: Render and base64-encode for inline use
    to_data_uri: Render as a ``data:image/svg+xml`` URI
    save_as: Render and write to a file
"""

import base64
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .colors import check_opacity, to_hex
from .matrix import Matrix, Rect, create_rect, find_nonzero_elements, matrix_size
from .settings import SvgSettings
from .storage import SaveResult, write_file
from .tree import Element, Percent, serialize

logger = logging.getLogger(__name__)

XMLNS = "http://www.w3.org/2000/svg"
XLINK = "http://www.w3.org/1999/xlink"

# Not a user setting; every document is written with this stroke-opacity.
STROKE_OPACITY = 0


@dataclass
class Svg:
    """Intermediate state of one render call."""
    xmlns: str = XMLNS
    xlink: str = XLINK
    width: Optional[int] = None
    height: Optional[int] = None
    stroke_opacity: int = STROKE_OPACITY
    body: List[Rect] = field(default_factory=list)
    rank: Optional[int] = None


def _construct_body(matrix: Matrix, settings: SvgSettings) -> Svg:
    rank, _ = matrix_size(matrix)
    body = [create_rect(pos, settings.scale) for pos in find_nonzero_elements(matrix)]
    return Svg(
        width=rank * settings.scale,
        height=rank * settings.scale,
        body=body,
        rank=rank,
    )


def _background_rect(color, opacity: Optional[float]) -> Element:
    attributes = {"width": Percent(100), "height": Percent(100), "fill": to_hex(color)}
    if check_opacity(opacity) is not None:
        attributes["fill-opacity"] = opacity
    return Element("rect", attributes)


def _to_group(body: List[Rect], color) -> Element:
    rects = tuple(Element("rect", rect._asdict()) for rect in body)
    return Element("g", {"fill": to_hex(color)}, rects)


def build_document(matrix: Matrix, settings: Optional[SvgSettings] = None) -> Element:
    """
    Assemble the SVG element tree for a module matrix.

    Args:
        matrix (Matrix): Square matrix of 0/1 modules
        settings (Optional[SvgSettings]): Rendering settings, defaults if None

    Returns:
        Element: ``svg`` root holding the background rect and the module group

    Raises:
        QRSvgError: If the matrix, a color or the opacity is invalid
    """
    settings = settings or SvgSettings()
    svg = _construct_body(matrix, settings)
    logger.debug("Built SVG body: rank=%d, %d dark modules", svg.rank, len(svg.body))

    return Element(
        "svg",
        {
            "xmlns": svg.xmlns,
            "xmlns:xlink": svg.xlink,
            "width": svg.width,
            "height": svg.height,
            "stroke-opacity": svg.stroke_opacity,
        },
        (
            _background_rect(settings.background_color, settings.background_opacity),
            _to_group(svg.body, settings.qrcode_color),
        ),
    )


def create(matrix: Matrix, settings: Optional[SvgSettings] = None) -> str:
    """
    Render a module matrix as SVG text.

    Example:
        >>> svg_text = create([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
        >>> svg_text.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        True
    """
    settings = settings or SvgSettings()
    return serialize(build_document(matrix, settings), settings.format)


def to_base64(matrix: Matrix, settings: Optional[SvgSettings] = None) -> str:
    """
    Render the matrix and base64-encode the UTF-8 SVG text.

    The result can be embedded in HTML as
    ``<img src="data:image/svg+xml;base64,...">``.
    """
    return base64.b64encode(create(matrix, settings).encode("utf-8")).decode("ascii")


def to_data_uri(matrix: Matrix, settings: Optional[SvgSettings] = None) -> str:
    return "data:image/svg+xml;base64," + to_base64(matrix, settings)


def save_as(
    matrix: Matrix,
    path,
    settings: Optional[SvgSettings] = None,
    opener: Callable = open,
) -> SaveResult:
    """
    Render the matrix and write the SVG to ``path``.

    Invalid input raises before the file is opened. Storage failures are not
    raised; they come back as ``SaveResult.error``.

    Example:
        >>> result = save_as(matrix, "/tmp/qr.svg", SvgSettings(qrcode_color=(17, 170, 136)))
        >>> result.ok, result.path
        (True, '/tmp/qr.svg')
    """
    data = create(matrix, settings).encode("utf-8")
    result = write_file(path, data, opener=opener)
    if result.ok:
        logger.info("Saved SVG QR code to %s (%d bytes)", path, len(data))
    return result
