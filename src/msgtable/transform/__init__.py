"""Tree/table transformation engine.

Pure, synchronous functions with no I/O:

    flatten           - MessageTree -> ordered {flat key: message}
    merge_key_orders  - per-locale key orders -> global key order
    build_matrix      - global key order + flat mappings -> MessageMatrix
    unflatten         - {flat key: message} -> MessageTree

Python 3.13+.
"""

from .flattener import flatten
from .matrix import MessageMatrix, RowRecord, build_matrix, split_flat_key
from .merger import KeyOrder, merge_key_orders
from .unflattener import unflatten

__all__ = [
    "KeyOrder",
    "MessageMatrix",
    "RowRecord",
    "build_matrix",
    "flatten",
    "merge_key_orders",
    "split_flat_key",
    "unflatten",
]
