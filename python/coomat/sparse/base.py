"""Base classes for sparse arrays and matrices.

These classes define the minimal interface shared by concrete sparse types in
`coomat.sparse`, including shape/dtype bookkeeping and dimension checks.
"""


class SparseArray:
    """Abstract base class for sparse N-dimensional arrays.

    Parameters
    ----------
    shape : tuple[int, ...]
        Array shape. Stored as a tuple.
    dtype : Any, optional
        Element dtype metadata (informational for base class).

    Attributes
    ----------
    shape : tuple[int, ...]
        Array shape.
    ndim : int
        Number of dimensions, equal to ``len(shape)``.
    dtype : Any
        Element type metadata.
    """

    def __init__(self, shape, dtype=None):
        self.shape = tuple(shape)
        self.ndim = len(self.shape)
        self.dtype = dtype


class SparseMatrix(SparseArray):
    """Abstract base class for 2D sparse matrices.

    Parameters
    ----------
    shape : tuple[int, int]
        Matrix shape. Must be two-dimensional with non-negative extents.
    dtype : Any, optional
        Element dtype metadata.

    Raises
    ------
    ValueError
        If ``shape`` is not 2D or has a negative extent.
    """

    def __init__(self, shape, dtype=None):
        if len(shape) != 2:
            raise ValueError("SparseMatrix requires 2D shape")
        if shape[0] < 0 or shape[1] < 0:
            raise ValueError("SparseMatrix dimensions must be non-negative")
        super().__init__(shape, dtype=dtype)

    @property
    def rows(self):
        return self.shape[0]

    @property
    def cols(self):
        return self.shape[1]
