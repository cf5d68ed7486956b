"""Element access through get/set and the [row, column] indexer."""
import pytest

from densematrix import InvalidIndexError, Matrix


def test_get_and_set_roundtrip():
    m = Matrix(2, 3)
    m.set(1, 2, 4.25)
    assert m.get(1, 2) == 4.25
    assert m[1, 2] == 4.25

    m[0, 0] = -1
    assert m.get(0, 0) == -1.0
    assert isinstance(m.get(0, 0), float)


@pytest.mark.parametrize("row,column", [(-1, 0), (0, -1), (-1, -1)])
def test_negative_indices_rejected(row, column):
    m = Matrix(2, 2)
    with pytest.raises(InvalidIndexError):
        m.get(row, column)
    with pytest.raises(InvalidIndexError):
        m.set(row, column, 1.0)
    with pytest.raises(InvalidIndexError):
        m[row, column]


@pytest.mark.parametrize("row,column", [(2, 0), (0, 3), (2, 3), (10, 0)])
def test_indices_at_or_past_extent_rejected(row, column):
    m = Matrix(2, 3)
    with pytest.raises(InvalidIndexError):
        m.get(row, column)
    with pytest.raises(InvalidIndexError):
        m[row, column] = 1.0


def test_invalid_index_is_index_error():
    with pytest.raises(IndexError):
        Matrix(1, 1)[1, 0]


def test_empty_matrix_has_no_valid_index():
    with pytest.raises(InvalidIndexError):
        Matrix(0, 3).get(0, 0)


@pytest.mark.parametrize("key", [0, (0,), (0, 0, 0), "a"])
def test_indexer_requires_pair(key):
    m = Matrix(2, 2)
    with pytest.raises(TypeError):
        m[key]


def test_float_index_rejected():
    with pytest.raises(TypeError):
        Matrix(2, 2).get(0.5, 0)


def test_failed_set_leaves_matrix_unchanged():
    m = Matrix(2, 2)
    with pytest.raises(InvalidIndexError):
        m.set(2, 2, 9.0)
    assert m.to_list() == [[0.0, 0.0], [0.0, 0.0]]
