"""Groupings of numeric types accepted as coordinates, and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "is_real_number"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]

REAL_NUMBER_TYPES = (int, float, np.integer, np.floating)


def is_real_number(obj: Any) -> bool:
    """Determine whether the given object may be used as a real number (bool excluded)."""
    return isinstance(obj, REAL_NUMBER_TYPES) and not isinstance(obj, (bool, np.bool_))
