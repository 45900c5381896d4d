from ._runtime import get_check_mode, set_check_mode
from . import io as io
from .arithmetic import add, multiply, negate, subtract
from .errors import (
    DimensionMismatch,
    DuplicateEntry,
    OutOfBounds,
    ParseError,
    SparseMatrixError,
)
from .sparse import COO, Entry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "set_check_mode",
    "get_check_mode",
    "io",
    "COO",
    "Entry",
    "add",
    "subtract",
    "negate",
    "multiply",
    "SparseMatrixError",
    "DimensionMismatch",
    "ParseError",
    "OutOfBounds",
    "DuplicateEntry",
]
