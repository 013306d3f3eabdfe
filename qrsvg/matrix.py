# -*- coding: utf-8 -*-
"""
QR Matrix Module

Reads the binary module matrix produced by a QR encoder and maps its dark
modules to SVG rectangles.

Functions:
    matrix_size: Size of a square module matrix
    find_nonzero_elements: Positions of all dark modules
    create_rect: Rectangle descriptor for one module
"""

from typing import List, NamedTuple, Sequence, Tuple

from .exceptions import InvalidMatrixError, InvalidModuleValueError

Matrix = Sequence[Sequence[int]]


class Rect(NamedTuple):
    """Position and size of one dark module in pixels."""
    width: int
    height: int
    x: int
    y: int


def matrix_size(matrix: Matrix) -> Tuple[int, int]:
    """
    Return ``(rank, rank)`` for a square matrix.

    Raises:
        InvalidMatrixError: If any row length differs from the number of rows
    """
    rank = len(matrix)
    for i, row in enumerate(matrix):
        if len(row) != rank:
            raise InvalidMatrixError(
                f"matrix must be square: row {i} has {len(row)} modules, expected {rank}"
            )
    return rank, rank


def find_nonzero_elements(matrix: Matrix) -> List[Tuple[int, int]]:
    """
    Collect the ``(row, col)`` position of every dark module.

    Args:
        matrix (Matrix): Rows of 0/1 module values (True/False also accepted)

    Returns:
        List[Tuple[int, int]]: Zero-indexed positions in row-major order

    Raises:
        InvalidModuleValueError: If a cell holds anything but 0 or 1

    Example:
        >>> find_nonzero_elements([[0, 1], [1, 0]])
        [(0, 1), (1, 0)]
    """
    positions = []
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 1:
                positions.append((i, j))
            elif value != 0:
                raise InvalidModuleValueError(i, j, value)
    return positions


def create_rect(position: Tuple[int, int], scale: int) -> Rect:
    """Map a ``(row, col)`` position to a square of side ``scale``."""
    row, col = position
    return Rect(width=scale, height=scale, x=scale * col, y=scale * row)
