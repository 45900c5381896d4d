"""Coordinate (COO) sparse integer matrix.

Entries are kept as an immutable tuple of ``(row, col, value)`` triples in the
order they were given. Arithmetic lives in :mod:`coomat.arithmetic`; the
operators defined here delegate to it.

Notes
-----
- With ``check=False`` (the default unless changed through
  :func:`coomat.set_check_mode` or ``COOMAT_CHECK``) construction accepts
  out-of-range, duplicate and zero-valued entries as given.
- With ``check=True`` those conditions raise :class:`~coomat.errors.OutOfBounds`,
  :class:`~coomat.errors.DuplicateEntry` or
  :class:`~coomat.errors.SparseMatrixError` respectively.
"""

import operator
from typing import NamedTuple

import numpy as np

from .._runtime import resolve_check
from ..errors import DuplicateEntry, OutOfBounds, SparseMatrixError
from .base import SparseMatrix


class Entry(NamedTuple):
    """A single stored ``(row, col, value)`` triple."""

    row: int
    col: int
    value: int


def _as_entry(item):
    r, c, v = item
    return Entry(operator.index(r), operator.index(c), operator.index(v))


def _key(entry):
    return (entry.row, entry.col)


class COO(SparseMatrix):
    """Coordinate (COO) sparse integer matrix.

    Parameters
    ----------
    rows, cols : int
        Matrix shape ``(rows, cols)``; both must be non-negative.
    entries : iterable of (int, int, int), optional
        Stored ``(row, col, value)`` triples. Order is preserved.
    check : bool or None, optional
        Validate bounds, duplicates and explicit zeros. ``None`` uses the
        runtime default.

    Attributes
    ----------
    entries : tuple[Entry, ...]
        Stored triples.
    shape : tuple[int, int]
        Matrix dimensions.
    dtype : numpy.dtype
        Always ``np.int64``.
    nnz : int
        Number of stored entries.

    Examples
    --------
    Construct a small COO and run basic ops::

        >>> from coomat.sparse import COO
        >>> a = COO(2, 3, [(0, 0, 1), (0, 2, 2), (1, 1, 3)])
        >>> a.nnz
        3
        >>> a[0, 2]
        2
        >>> (a + a).entries
        (Entry(row=0, col=0, value=2), Entry(row=0, col=2, value=4), Entry(row=1, col=1, value=6))
        >>> (a - a).nnz
        0
    """

    def __init__(self, rows, cols, entries=(), check=None):
        super().__init__(shape=(operator.index(rows), operator.index(cols)), dtype=np.int64)
        self.entries = tuple(_as_entry(e) for e in entries)
        if resolve_check(check):
            self.validate()

    @classmethod
    def from_arrays(cls, row, col, data, shape, check=None):
        """Construct from index/value arrays.

        Parameters
        ----------
        row, col, data : array_like of int
            Coordinate indices and values, all of length ``nnz``.
        shape : tuple[int, int]
            Matrix shape.
        check : bool or None, optional
            See :class:`COO`.
        """
        row = np.asarray(row)
        col = np.asarray(col)
        data = np.asarray(data)
        if not (row.shape == col.shape == data.shape) or row.ndim != 1:
            raise ValueError("row, col and data must be 1D arrays of equal length")
        nrows, ncols = shape
        return cls(nrows, ncols, zip(row.tolist(), col.tolist(), data.tolist()), check=check)

    @classmethod
    def from_dense(cls, array):
        """Construct from a dense 2D array, keeping non-zero cells in row-major order."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError("from_dense requires a 2D array")
        if arr.dtype.kind not in "iub":
            raise TypeError("from_dense requires an integer array")
        rr, cc = np.nonzero(arr)
        vv = arr[rr, cc]
        return cls(arr.shape[0], arr.shape[1], zip(rr.tolist(), cc.tolist(), vv.tolist()), check=False)

    @property
    def nnz(self):
        """Number of stored entries (including duplicates)."""
        return len(self.entries)

    @property
    def row(self):
        return np.array([e.row for e in self.entries], dtype=np.int64)

    @property
    def col(self):
        return np.array([e.col for e in self.entries], dtype=np.int64)

    @property
    def data(self):
        return np.array([e.value for e in self.entries], dtype=np.int64)

    def _check_index(self, r, c):
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise OutOfBounds(r, c, self.shape)

    def validate(self):
        """Check bounds, duplicate coordinates and explicit zeros.

        Raises
        ------
        OutOfBounds
            If an entry lies outside ``shape``.
        DuplicateEntry
            If a coordinate is stored twice.
        SparseMatrixError
            If an entry holds an explicit zero.
        """
        seen = set()
        for r, c, v in self.entries:
            self._check_index(r, c)
            if v == 0:
                raise SparseMatrixError(f"explicit zero stored at ({r}, {c})")
            if (r, c) in seen:
                raise DuplicateEntry(r, c)
            seen.add((r, c))

    def is_sorted(self):
        """True if entries are strictly increasing in row-major order."""
        return all(_key(a) < _key(b) for a, b in zip(self.entries, self.entries[1:]))

    def sorted(self):
        """Return a new :class:`COO` with entries in row-major order."""
        return COO(self.rows, self.cols, sorted(self.entries, key=_key), check=False)

    def __getitem__(self, key):
        r, c = (operator.index(k) for k in key)
        self._check_index(r, c)
        return sum(e.value for e in self.entries if e.row == r and e.col == c)

    def set(self, row, col, value):
        """Return a copy with cell ``(row, col)`` set to ``value``.

        A zero ``value`` removes the cell. The result is in row-major order.
        """
        row, col, value = operator.index(row), operator.index(col), operator.index(value)
        self._check_index(row, col)
        kept = [e for e in self.entries if (e.row, e.col) != (row, col)]
        if value != 0:
            kept.append(Entry(row, col, value))
        return COO(self.rows, self.cols, sorted(kept, key=_key), check=False)

    def toarray(self):
        """Convert to a dense NumPy ``ndarray`` of shape ``(rows, cols)``."""
        out = np.zeros(self.shape, dtype=np.int64)
        # accumulate duplicates
        for r, c, v in self.entries:
            self._check_index(r, c)
            out[r, c] += v
        return out

    def __iter__(self):
        return iter(self.entries)

    def __eq__(self, other):
        if not isinstance(other, COO):
            return NotImplemented
        return self.shape == other.shape and self.entries == other.entries

    __hash__ = None

    def __repr__(self):
        return f"COO(shape={self.shape}, nnz={self.nnz})"

    def __neg__(self):
        from ..arithmetic import negate

        return negate(self)

    def __add__(self, other):
        if not isinstance(other, COO):
            return NotImplemented
        from ..arithmetic import add

        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, COO):
            return NotImplemented
        from ..arithmetic import subtract

        return subtract(self, other)

    def __matmul__(self, other):
        """Sparse matrix product ``self @ other``; see :func:`coomat.arithmetic.multiply`."""
        if not isinstance(other, COO):
            return NotImplemented
        from ..arithmetic import multiply

        return multiply(self, other)
