import numpy as np
import pytest

from coomat.errors import DuplicateEntry, OutOfBounds, SparseMatrixError
from coomat.sparse import COO, Entry


def make_simple_coo():
    # A = [[1,0,2],[0,3,0]] in COO
    return COO(2, 3, [(0, 0, 1), (0, 2, 2), (1, 1, 3)], check=False)


def test_coo_basic_attributes():
    A = make_simple_coo()
    assert A.shape == (2, 3)
    assert (A.rows, A.cols) == (2, 3)
    assert A.ndim == 2
    assert A.nnz == 3
    assert A.dtype == np.int64
    assert A.entries[1] == Entry(0, 2, 2)
    assert list(A) == [(0, 0, 1), (0, 2, 2), (1, 1, 3)]
    assert repr(A) == "COO(shape=(2, 3), nnz=3)"


def test_coo_arrays_and_toarray():
    A = make_simple_coo()
    np.testing.assert_array_equal(A.row, np.array([0, 0, 1], dtype=np.int64))
    np.testing.assert_array_equal(A.col, np.array([0, 2, 1], dtype=np.int64))
    np.testing.assert_array_equal(A.data, np.array([1, 2, 3], dtype=np.int64))
    np.testing.assert_array_equal(A.toarray(), np.array([[1, 0, 2], [0, 3, 0]]))


def test_coo_empty():
    E = COO(0, 0)
    assert E.nnz == 0
    assert E.row.size == 0 and E.data.dtype == np.int64
    assert E.toarray().shape == (0, 0)
    assert COO(2, 4).toarray().shape == (2, 4)


def test_coo_toarray_accumulates_duplicates():
    D = COO(1, 3, [(0, 1, 2), (0, 1, 3)], check=False)
    np.testing.assert_array_equal(D.toarray(), np.array([[0, 5, 0]]))


def test_coo_from_arrays_and_dense():
    A = make_simple_coo()
    B = COO.from_arrays(A.row, A.col, A.data, A.shape)
    assert B == A
    C = COO.from_dense(A.toarray())
    assert C == A
    with pytest.raises(ValueError):
        COO.from_arrays([0, 1], [0], [1, 2], (2, 2))
    with pytest.raises(ValueError):
        COO.from_dense(np.zeros(3, dtype=np.int64))
    with pytest.raises(TypeError):
        COO.from_dense(np.zeros((2, 2), dtype=np.float64))


def test_coo_rejects_non_integer_values():
    with pytest.raises(TypeError):
        COO(2, 2, [(0, 0, 1.5)])
    with pytest.raises(ValueError):
        COO(-1, 2)


def test_coo_permissive_by_default():
    A = COO(2, 2, [(5, 5, 1), (0, 0, 1), (0, 0, 2), (1, 1, 0)])
    assert A.nnz == 4


@pytest.mark.parametrize(
    "entries,exc",
    [
        ([(2, 0, 1)], OutOfBounds),
        ([(0, 2, 1)], OutOfBounds),
        ([(-1, 0, 1)], OutOfBounds),
        ([(0, 0, 1), (0, 0, 2)], DuplicateEntry),
        ([(1, 1, 0)], SparseMatrixError),
    ],
)
def test_coo_check_mode(entries, exc):
    with pytest.raises(exc):
        COO(2, 2, entries, check=True)
    A = COO(2, 2, entries, check=False)
    with pytest.raises(exc):
        A.validate()


def test_coo_indexing():
    A = make_simple_coo()
    assert A[0, 0] == 1
    assert A[0, 1] == 0
    assert A[1, 1] == 3
    with pytest.raises(OutOfBounds):
        A[2, 0]


def test_coo_set_returns_copy():
    A = make_simple_coo()
    B = A.set(1, 0, 7)
    assert A.nnz == 3
    assert B[1, 0] == 7
    assert B.is_sorted()
    C = B.set(0, 0, 0)
    assert C[0, 0] == 0
    assert C.nnz == 3
    D = A.set(0, 2, 9)
    assert D.entries == ((0, 0, 1), (0, 2, 9), (1, 1, 3))
    with pytest.raises(OutOfBounds):
        A.set(0, 3, 1)


def test_coo_sorted():
    U = COO(3, 3, [(2, 0, 1), (0, 2, 2), (0, 1, 3)])
    assert not U.is_sorted()
    S = U.sorted()
    assert S.is_sorted()
    assert S.entries == ((0, 1, 3), (0, 2, 2), (2, 0, 1))
    assert U.entries[0] == (2, 0, 1)


def test_coo_equality():
    A = make_simple_coo()
    assert A == make_simple_coo()
    assert A != COO(2, 4, A.entries)
    assert A != A.set(0, 0, 5)
    assert A != "not a matrix"
