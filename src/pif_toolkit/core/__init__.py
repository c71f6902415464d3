"""
PIF Core Package

Document model for physical information object (PIF) JSON records.

1. **Forward-compatible records**
   - Every record keeps JSON properties it does not declare and writes
     them back out, so newer documents survive older code

2. **Shape-polymorphic numeric data**
   - `vectors` and `matrices` accept one item or a list of items; the
     nesting depth decides which, and output always uses the list form

3. **Pluggable leaf parsing**
   - Leaves are parsed by a callable `(node, context) -> leaf`; `Scalar.parse`
     is the default
"""

from .errors import PifError, ParseError, ShapeError, LeafParseError, IndexOutOfRange
from .context import ParseContext
from .config import SerializationConfig, DEFAULT_CONFIG
from .models import ExtensibleRecord, Scalar, Value

__all__ = [
    "PifError",
    "ParseError",
    "ShapeError",
    "LeafParseError",
    "IndexOutOfRange",
    "ParseContext",
    "SerializationConfig",
    "DEFAULT_CONFIG",
    "ExtensibleRecord",
    "Scalar",
    "Value",
]
