"""segno bridge."""

import pytest
import segno

from qrsvg.qr_generator import make_qr, matrix_from_symbol
from qrsvg.svg import create
from qrsvg.settings import SvgSettings


def test_make_qr_version_and_ecc() -> None:
    qr = make_qr("hello", ecc="Q", version=2)
    assert qr.version == 2
    assert qr.error == "Q"


def test_make_qr_auto_version() -> None:
    assert make_qr("hello", version="auto").version == 1


def test_make_qr_data_overflow() -> None:
    with pytest.raises(segno.DataOverflowError):
        make_qr("x" * 100, version=1)


def test_matrix_from_symbol_is_square_binary() -> None:
    matrix = matrix_from_symbol(make_qr("hello", version=1))
    assert len(matrix) == 21
    assert all(len(row) == 21 for row in matrix)
    assert {value for row in matrix for value in row} == {0, 1}
    # Top-left finder pattern starts with a full dark row of seven modules.
    assert matrix[0][:8] == [1, 1, 1, 1, 1, 1, 1, 0]


def test_matrix_from_symbol_with_border() -> None:
    matrix = matrix_from_symbol(make_qr("hello", version=1), border=4)
    assert len(matrix) == 29
    assert matrix[0] == [0] * 29
    assert matrix[4][4] == 1


def test_render_encoded_symbol() -> None:
    matrix = matrix_from_symbol(make_qr("https://example.com"), border=4)
    text = create(matrix, SvgSettings(scale=2))
    assert f'width="{len(matrix) * 2}"' in text
