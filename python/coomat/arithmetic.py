"""Sparse arithmetic on :class:`~coomat.sparse.COO` matrices.

All functions are pure: operands are never modified and a new matrix is
returned. Results never store zero values and are always in row-major order.

Notes
-----
- :func:`add` and :func:`subtract` merge two row-major entry lists in
  ``O(nnz(a) + nnz(b))``. An operand that is not strictly row-major, or that
  holds explicit zeros, is first rebuilt into a sorted copy with duplicate
  coordinates summed and zeros dropped.
- :func:`multiply` visits only contracting pairs ``a.col == b.row`` and
  accumulates partial products in a coordinate-keyed dict.
"""

import logging
from collections import defaultdict

from .errors import DimensionMismatch
from .sparse.coo import COO, Entry

logger = logging.getLogger(__name__)


def _canonical(m, which):
    if m.is_sorted() and all(e.value for e in m.entries):
        return m.entries
    logger.debug("%s operand %r is not canonical; sorting a copy", which, m)
    acc = {}
    for r, c, v in m.entries:
        acc[(r, c)] = acc.get((r, c), 0) + v
    return tuple(Entry(r, c, v) for (r, c), v in sorted(acc.items()) if v != 0)


def _merge(x, y):
    out = []
    i = j = 0
    while i < len(x) and j < len(y):
        ka = (x[i].row, x[i].col)
        kb = (y[j].row, y[j].col)
        if ka < kb:
            out.append(x[i])
            i += 1
        elif ka > kb:
            out.append(y[j])
            j += 1
        else:
            total = x[i].value + y[j].value
            if total != 0:
                out.append(Entry(x[i].row, x[i].col, total))
            i += 1
            j += 1
    out.extend(x[i:])
    out.extend(y[j:])
    return out


def negate(a):
    """Return ``-a`` as a new :class:`COO`, keeping entry order."""
    return COO(a.rows, a.cols, [Entry(r, c, -v) for r, c, v in a.entries], check=False)


def add(a, b):
    """Elementwise sum ``a + b``.

    Parameters
    ----------
    a, b : COO
        Operands of identical shape.

    Returns
    -------
    COO
        Union of both coordinate sets with overlapping values summed;
        cancelled coordinates are dropped.

    Raises
    ------
    DimensionMismatch
        If ``a.shape != b.shape``.
    """
    if a.shape != b.shape:
        raise DimensionMismatch("add", a.shape, b.shape)
    x = _canonical(a, "left")
    y = _canonical(b, "right")
    out = _merge(x, y)
    logger.debug("add %r + %r -> nnz=%d", a, b, len(out))
    return COO(a.rows, a.cols, out, check=False)


def subtract(a, b):
    """Elementwise difference ``a - b``, computed as ``add(a, negate(b))``.

    ``b`` is left untouched.

    Raises
    ------
    DimensionMismatch
        If ``a.shape != b.shape``.
    """
    if a.shape != b.shape:
        raise DimensionMismatch("subtract", a.shape, b.shape)
    return add(a, negate(b))


def multiply(a, b):
    """Matrix product ``a @ b``.

    Parameters
    ----------
    a : COO
        Left operand of shape ``(m, k)``.
    b : COO
        Right operand of shape ``(k, n)``.

    Returns
    -------
    COO
        Product of shape ``(m, n)`` in row-major order. Coordinates whose
        partial products cancel to zero are not stored.

    Raises
    ------
    DimensionMismatch
        If ``a.cols != b.rows``.
    """
    if a.cols != b.rows:
        raise DimensionMismatch("multiply", a.shape, b.shape)
    by_row = defaultdict(list)
    for e in b.entries:
        by_row[e.row].append(e)
    acc = {}
    for ea in a.entries:
        for eb in by_row.get(ea.col, ()):
            key = (ea.row, eb.col)
            acc[key] = acc.get(key, 0) + ea.value * eb.value
    out = [Entry(r, c, v) for (r, c), v in sorted(acc.items()) if v != 0]
    logger.debug("multiply %r @ %r -> nnz=%d (%d pruned)", a, b, len(out), len(acc) - len(out))
    return COO(a.rows, b.cols, out, check=False)
