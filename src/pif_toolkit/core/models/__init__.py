"""
Core Models Package

Record types of the PIF document model.

| Type | Role |
|------|------|
| `ExtensibleRecord` | Base of every record, keeps unknown JSON properties |
| `Value` | Named container of scalars, vectors and matrices |
| `Scalar` | Default leaf datum stored inside a Value |
"""

from .record import ExtensibleRecord
from .scalar import Scalar
from .value import Value

__all__ = [
    "ExtensibleRecord",
    "Scalar",
    "Value",
]
