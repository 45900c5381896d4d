"""Plain-text codec for sparse matrices.

The format is a two-line header followed by one line per stored entry::

    rows=3
    cols=3
    (0, 0, 1)
    (1, 1, 2)

Blank lines and surrounding whitespace are ignored when parsing. Entry lines
with a zero value are dropped.
"""

import logging
import re

from ..errors import ParseError
from ..sparse.coo import COO, Entry

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"^(\w+)\s*=\s*(\d+)$")
_ENTRY = re.compile(r"^\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)$")


def _header(item, name):
    lineno, line = item
    m = _HEADER.match(line)
    if m is None or m.group(1) != name:
        raise ParseError(f"expected '{name}=<int>'", lineno, line)
    return int(m.group(2))


def parse(text, check=None):
    """Parse ``text`` into a :class:`~coomat.sparse.COO`.

    Parameters
    ----------
    text : str
        Matrix in the text format.
    check : bool or None, optional
        Passed to :class:`~coomat.sparse.COO`.

    Raises
    ------
    ParseError
        If the header is missing or malformed, or an entry line does not
        match ``(<row>, <col>, <value>)``.
    """
    lines = [(n, raw.strip()) for n, raw in enumerate(text.splitlines(), 1)]
    lines = [(n, s) for n, s in lines if s]
    if not lines:
        raise ParseError("missing 'rows=' header")
    if len(lines) < 2:
        raise ParseError("missing 'cols=' header")
    rows = _header(lines[0], "rows")
    cols = _header(lines[1], "cols")

    entries = []
    for lineno, line in lines[2:]:
        m = _ENTRY.match(line)
        if m is None:
            raise ParseError("expected '(<row>, <col>, <value>)'", lineno, line)
        r, c, v = (int(g) for g in m.groups())
        if v == 0:
            logger.debug("dropping zero entry on line %d", lineno)
            continue
        entries.append(Entry(r, c, v))
    return COO(rows, cols, entries, check=check)


def format(matrix):
    """Render ``matrix`` in the text format, entries in their current order."""
    lines = [f"rows={matrix.rows}", f"cols={matrix.cols}"]
    lines.extend(f"({r}, {c}, {v})" for r, c, v in matrix.entries)
    return "\n".join(lines) + "\n"


def load(path, check=None):
    """Read and parse a matrix file."""
    with open(path, "r", encoding="utf-8") as f:
        matrix = parse(f.read(), check=check)
    logger.debug("loaded %s: %r", path, matrix)
    return matrix


def save(matrix, path):
    """Write ``matrix`` to ``path`` in the text format."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(format(matrix))
    logger.debug("saved %r to %s", matrix, path)
