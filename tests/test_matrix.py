"""Dark module extraction and rectangle mapping."""

import pytest

from qrsvg.exceptions import InvalidMatrixError, InvalidModuleValueError
from qrsvg.matrix import Rect, create_rect, find_nonzero_elements, matrix_size

CROSS = [[0, 1, 0], [1, 1, 1], [0, 1, 0]]


def test_matrix_size_square() -> None:
    assert matrix_size(CROSS) == (3, 3)
    assert matrix_size([]) == (0, 0)


def test_matrix_size_rejects_non_square() -> None:
    with pytest.raises(InvalidMatrixError, match="square"):
        matrix_size([[0, 1], [1]])
    with pytest.raises(InvalidMatrixError):
        matrix_size([[0, 1, 0], [1, 0, 1]])


def test_find_nonzero_elements() -> None:
    assert find_nonzero_elements(CROSS) == [(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)]


def test_find_nonzero_elements_accepts_bools_and_bytearrays() -> None:
    assert find_nonzero_elements([[True, False], [False, True]]) == [(0, 0), (1, 1)]
    assert find_nonzero_elements([bytearray(b"\x00\x01"), bytearray(b"\x01\x00")]) == [(0, 1), (1, 0)]


def test_find_nonzero_elements_empty() -> None:
    assert find_nonzero_elements([[0, 0], [0, 0]]) == []


@pytest.mark.parametrize("value", [2, -1, "1", None])
def test_find_nonzero_elements_rejects_invalid_values(value) -> None:
    with pytest.raises(InvalidModuleValueError, match="invalid module value") as info:
        find_nonzero_elements([[0, 0], [0, value]])
    assert (info.value.row, info.value.col) == (1, 1)


def test_create_rect() -> None:
    assert create_rect((2, 3), 10) == Rect(width=10, height=10, x=30, y=20)
    assert create_rect((0, 0), 1) == Rect(1, 1, 0, 0)


def test_one_rect_per_dark_module() -> None:
    matrix = [[(r * 7 + c * 3) % 2 for c in range(9)] for r in range(9)]
    rects = [create_rect(pos, 4) for pos in find_nonzero_elements(matrix)]
    assert len(rects) == sum(sum(row) for row in matrix)
    assert len({(r.x, r.y) for r in rects}) == len(rects)
