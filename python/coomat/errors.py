"""Exception types raised by ``coomat``.

All errors derive from :class:`SparseMatrixError`, itself a ``ValueError``,
so code written against the usual NumPy convention of catching
``ValueError`` for shape and input problems keeps working.
"""


class SparseMatrixError(ValueError):
    """Base class for all ``coomat`` errors."""


class DimensionMismatch(SparseMatrixError):
    """Operand shapes are incompatible for the requested operation.

    Attributes
    ----------
    operation : str
        Name of the operation (``"add"``, ``"subtract"``, ``"multiply"``).
    left, right : tuple[int, int]
        Shapes of the two operands.
    """

    def __init__(self, operation, left, right):
        self.operation = operation
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(
            f"dimensions do not match for {operation}: {self.left} and {self.right}"
        )


class ParseError(SparseMatrixError):
    """Malformed header or entry line in the text format.

    Attributes
    ----------
    lineno : int or None
        1-based line number of the offending line, if known.
    line : str or None
        The offending line with surrounding whitespace stripped.
    """

    def __init__(self, message, lineno=None, line=None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


class OutOfBounds(SparseMatrixError):
    """An entry or index lies outside the matrix shape."""

    def __init__(self, row, col, shape):
        self.row = row
        self.col = col
        self.shape = tuple(shape)
        super().__init__(f"index ({row}, {col}) out of bounds for shape {self.shape}")


class DuplicateEntry(SparseMatrixError):
    """The same ``(row, col)`` coordinate is stored more than once."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"duplicate entry at ({row}, {col})")
