"""
Module: core.config

Purpose:
    Configuration dataclass for JSON output. Provides immutable settings
    for layout and leaf encoding used by the serialization helpers.

Key Classes:
    - SerializationConfig: Settings for dumps()/serialize_value()

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - core.utils.serialization: Uses SerializationConfig for output settings
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SerializationConfig:
    """
    Configuration for serializing records to JSON.

    Attributes:
        indent: Indentation passed to json.dumps (None = single line)
        sort_keys: Sort object keys in the output (default False)
        ensure_ascii: Escape non-ASCII characters (default False)
        compact_scalars: Write a scalar that only carries a value as the
            bare value instead of {"value": ...} (default True)
    """
    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    compact_scalars: bool = True


DEFAULT_CONFIG = SerializationConfig()
