"""
Utils Package

Serialization and array export helpers.
"""

from .serialization import (
    serialize_value,
    deserialize_value,
    dumps,
    loads,
)
from .arrays import vector_to_array, matrix_to_array, value_arrays

__all__ = [
    "serialize_value",
    "deserialize_value",
    "dumps",
    "loads",
    "vector_to_array",
    "matrix_to_array",
    "value_arrays",
]
