"""
Serialization Utilities

Provides to/from JSON utilities for PIF records.

- `serialize_value` / `deserialize_value` convert between Value and plain
  dictionaries
- `dumps` / `loads` convert between records and JSON text
- Leaf parsing is pluggable through the `leaf_parser` argument; Scalar.parse
  is used when none is given
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..config import DEFAULT_CONFIG, SerializationConfig
from ..errors import ParseError
from ..models.record import ExtensibleRecord
from ..models.value import Value
from ..context import ParseContext
from ..shapes import LeafParser

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Dictionary Conversion
# ─────────────────────────────────────────────────────────────────────────────

def serialize_value(value: Value, config: Optional[SerializationConfig] = None) -> dict[str, Any]:
    """
    Serialize a Value to a dictionary.

    Args:
        value: Value instance to serialize
        config: Output settings (DEFAULT_CONFIG if None)

    Returns:
        Dictionary suitable for JSON serialization

    Note:
        vectors and matrices are always written as lists, even when the
        Value was parsed from a single flat vector or a single matrix.
    """
    config = config or DEFAULT_CONFIG
    return value.to_dict(compact_scalars=config.compact_scalars)


def deserialize_value(
    data: Any,
    *,
    leaf_parser: Optional[LeafParser] = None,
    source: Optional[str] = None,
) -> Value:
    """
    Deserialize a Value from a dictionary.

    Args:
        data: Dictionary from JSON
        leaf_parser: Parser for leaf nodes (Scalar.parse if None)
        source: Label of the document, used in error messages

    Returns:
        Value instance

    Raises:
        ParseError: If data is not an object or a field is malformed
        ShapeError: If vectors/matrices have an unrecognized nesting depth
    """
    return Value.from_dict(data, ParseContext(source=source), leaf_parser=leaf_parser)


# ─────────────────────────────────────────────────────────────────────────────
# JSON Text
# ─────────────────────────────────────────────────────────────────────────────

def dumps(record: ExtensibleRecord, config: Optional[SerializationConfig] = None) -> str:
    """
    Serialize a record to JSON text.

    Args:
        record: Any ExtensibleRecord (Value or a bare record)
        config: Output settings (DEFAULT_CONFIG if None)

    Returns:
        JSON string
    """
    config = config or DEFAULT_CONFIG
    data = record.to_dict(compact_scalars=config.compact_scalars)
    return json.dumps(
        data,
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
    )


def loads(
    text: str,
    *,
    leaf_parser: Optional[LeafParser] = None,
    source: Optional[str] = None,
) -> Value:
    """
    Parse JSON text into a Value.

    Args:
        text: JSON document holding one Value object
        leaf_parser: Parser for leaf nodes (Scalar.parse if None)
        source: Label of the document, used in error messages

    Returns:
        Value instance

    Raises:
        ParseError: If text is not valid JSON or does not describe a Value
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        prefix = f"{source}: " if source else ""
        logger.debug(f"{prefix}invalid JSON at line {e.lineno} column {e.colno}")
        raise ParseError(
            f"{prefix}Invalid JSON: {e}",
            path="",
            errors=[str(e)],
        ) from e
    return deserialize_value(data, leaf_parser=leaf_parser, source=source)
