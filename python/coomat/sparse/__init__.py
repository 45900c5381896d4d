from .base import SparseArray, SparseMatrix
from .coo import COO, Entry

__all__ = [
    "SparseArray",
    "SparseMatrix",
    "COO",
    "Entry",
]
