# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Bridges the segno encoder to the SVG renderer: builds a QR symbol from text
and exposes its modules as the plain 0/1 matrix the renderer consumes.

Functions:
    make_qr: Generate a QR code symbol with segno
    matrix_from_symbol: Extract the module matrix of a symbol
"""

from typing import List, Optional, Union

import segno


def make_qr(
    text: str,
    ecc: str = 'M',
    version: Optional[Union[int, str]] = None,
    mode: Optional[str] = None,
    encoding: Optional[str] = None,
    mask: Union[str, int, None] = 'auto',
    boost_error: bool = False,
    micro: bool = False
) -> segno.QRCode:
    """
    Generate a QR code symbol.

    Args:
        text (str): The data to encode
        ecc (str): Error correction level ('L', 'M', 'Q', 'H')
        version (Optional[Union[int, str]]): QR version 1-40, or 'auto'/None
            for the smallest version that fits
        mode (Optional[str]): 'numeric', 'alphanumeric', 'byte', 'kanji' or
            None to let segno choose
        encoding (Optional[str]): Character encoding for byte mode
        mask (Union[str, int, None]): Mask pattern 0-7, or 'auto'/None
        boost_error (bool): Raise the ECC level if the version allows it
        micro (bool): Allow Micro QR symbols

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        ValueError: If parameters are invalid
        segno.DataOverflowError: If data doesn't fit in the requested version
    """
    mask_arg = None if mask in (None, 'auto') else int(mask)
    ver_arg = None if version in (None, '', 'auto') else int(version)

    return segno.make(
        text,
        error=ecc,
        version=ver_arg,
        mode=mode,
        encoding=encoding,
        mask=mask_arg,
        boost_error=bool(boost_error),
        micro=bool(micro)
    )


def matrix_from_symbol(symbol: segno.QRCode, border: int = 0) -> List[List[int]]:
    """
    Return the symbol's modules as rows of 0/1 ints.

    Args:
        symbol (segno.QRCode): Encoded symbol
        border (int): Quiet zone in modules added on every side

    Example:
        >>> matrix = matrix_from_symbol(make_qr("hello", version=1))
        >>> len(matrix), len(matrix[0])
        (21, 21)
    """
    return [[1 if module else 0 for module in row] for row in symbol.matrix_iter(border=border)]
