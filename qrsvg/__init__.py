# -*- coding: utf-8 -*-
"""
QR SVG - Core Module

Renders QR code module matrices as SVG documents, as text, base64 or files.

Modules:
    svg: Document assembly and output (text, base64, file)
    settings: Rendering settings and their parsing
    colors: Color and opacity resolution
    matrix: Dark module extraction and rectangle mapping
    tree: Element tree and serialization
    storage: File writing with typed results
    qr_generator: segno bridge producing module matrices
"""

__version__ = "1.0.0"

from .colors import Hex, Rgb, to_hex
from .exceptions import (
    InvalidColorError,
    InvalidMatrixError,
    InvalidModuleValueError,
    InvalidOpacityError,
    QRSvgError,
)
from .qr_generator import make_qr, matrix_from_symbol
from .settings import Format, SvgSettings, settings_from_mapping
from .storage import SaveResult, StorageError, StoragePhase
from .svg import build_document, create, save_as, to_base64, to_data_uri

__all__ = [
    'Format',
    'Hex',
    'InvalidColorError',
    'InvalidMatrixError',
    'InvalidModuleValueError',
    'InvalidOpacityError',
    'QRSvgError',
    'Rgb',
    'SaveResult',
    'StorageError',
    'StoragePhase',
    'SvgSettings',
    'build_document',
    'create',
    'make_qr',
    'matrix_from_symbol',
    'save_as',
    'settings_from_mapping',
    'to_base64',
    'to_data_uri',
    'to_hex',
]
