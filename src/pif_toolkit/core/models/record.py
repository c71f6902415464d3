"""
Module: record

Purpose:
    Provides ExtensibleRecord - the base class of every PIF object. It keeps
    any JSON property the concrete type does not declare and writes it back
    out on serialization, so documents written against a newer schema
    survive a round trip through this version without data loss.

Key Functions:
    - ExtensibleRecord.put_unsupported_field(key, value): Capture a field
    - ExtensibleRecord.get_unsupported_field(key): Look up a captured field
    - ExtensibleRecord.unsupported_fields(): Snapshot of captured fields
    - ExtensibleRecord.to_dict() / ExtensibleRecord.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - logging (std)
    - core.context.ParseContext

Used By:
    - core.models.value.Value
    - core.utils.serialization

Parsing is an explicit two-pass procedure: declared keys (FIELD_NAMES) are
drained into typed fields by the subclass, every remaining key is routed
into the unsupported-field map. Nothing is rejected at this level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..context import ParseContext

logger = logging.getLogger(__name__)


@dataclass
class ExtensibleRecord:
    """
    Record that preserves JSON properties outside its declared schema.

    Subclasses list their serialized property names in FIELD_NAMES and
    implement ``_fields_to_dict`` / ``_from_fields`` for those properties.
    The base class itself declares nothing, so a bare ExtensibleRecord
    captures every property it is given.

    The unsupported-field map starts absent and is allocated on first
    capture. An absent map and a cleared map serialize the same way:
    neither emits anything.

    Example:
        >>> rec = ExtensibleRecord.from_dict({"futureField": {"a": 1}})
        >>> rec.get_unsupported_field("futureField")
        {'a': 1}
        >>> rec.to_dict()
        {'futureField': {'a': 1}}
    """

    FIELD_NAMES: ClassVar[Tuple[str, ...]] = ()

    _unsupported_fields: Optional[Dict[str, Any]] = field(default=None, init=False, repr=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Unsupported Fields
    # ─────────────────────────────────────────────────────────────────────────

    def put_unsupported_field(self, key: str, value: Any) -> None:
        """
        Insert or overwrite an unsupported field.

        Args:
            key: Property name
            value: Raw JSON value, stored as given
        """
        if self._unsupported_fields is None:
            self._unsupported_fields = {}
        self._unsupported_fields[key] = value

    def with_unsupported_field(self, key: str, value: Any) -> ExtensibleRecord:
        """Chaining form of put_unsupported_field()."""
        self.put_unsupported_field(key, value)
        return self

    def get_unsupported_field(self, key: str, default: Any = None) -> Any:
        """Return the raw value stored under key, or default if missing."""
        if self._unsupported_fields is None:
            return default
        return self._unsupported_fields.get(key, default)

    def has_unsupported_field(self, key: str) -> bool:
        """Check whether an unsupported field named key exists."""
        return self._unsupported_fields is not None and key in self._unsupported_fields

    def num_unsupported_fields(self) -> int:
        """Number of unsupported fields (0 when none were ever captured)."""
        return 0 if self._unsupported_fields is None else len(self._unsupported_fields)

    def unsupported_fields(self) -> List[Tuple[str, Any]]:
        """
        Snapshot of the unsupported fields as (key, value) pairs.

        Returns:
            New list; empty when no fields were captured. Mutating the
            record while holding the snapshot does not affect it.
        """
        if self._unsupported_fields is None:
            return []
        return list(self._unsupported_fields.items())

    def remove_unsupported_field(self, key: str) -> ExtensibleRecord:
        """Drop an unsupported field if present."""
        if self._unsupported_fields is not None:
            self._unsupported_fields.pop(key, None)
        return self

    def clear_unsupported_fields(self) -> ExtensibleRecord:
        """Remove every unsupported field. The map stays allocated."""
        if self._unsupported_fields is not None:
            self._unsupported_fields.clear()
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self, **options: Any) -> Dict[str, Any]:
        """
        Serialize to a dictionary for JSON storage.

        Declared fields come first, followed by every unsupported field as
        a top-level sibling. When an unsupported field has the same name as
        a declared field, the declared field wins.

        Args:
            **options: Encoding options forwarded to ``_fields_to_dict``

        Returns:
            Dict suitable for json.dumps
        """
        data = self._fields_to_dict(**options)
        for key, value in self.unsupported_fields():
            if key in self.FIELD_NAMES:
                logger.warning(
                    f"{type(self).__name__}: unsupported field {key!r} "
                    f"shadowed by declared field, not written"
                )
                continue
            data[key] = value
        return data

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        context: Optional[ParseContext] = None,
        **options: Any,
    ) -> ExtensibleRecord:
        """
        Deserialize from a dictionary.

        Args:
            data: JSON object
            context: Location of data within its document (root if None)
            **options: Parsing options forwarded to ``_from_fields``

        Returns:
            Instance of cls

        Raises:
            ParseError: If data is not a JSON object, or a declared field
                cannot be parsed
        """
        if context is None:
            context = ParseContext()
        if not isinstance(data, dict):
            raise context.error(
                f"expected object for {cls.__name__}, got {type(data).__name__}"
            )

        declared = {key: value for key, value in data.items() if key in cls.FIELD_NAMES}
        record = cls._from_fields(declared, context, **options)

        for key, value in data.items():
            if key in cls.FIELD_NAMES:
                continue
            logger.debug(f"{cls.__name__} at {context.location}: captured unsupported field {key!r}")
            record.put_unsupported_field(key, value)
        return record

    def _fields_to_dict(self, **options: Any) -> Dict[str, Any]:
        return {}

    @classmethod
    def _from_fields(
        cls,
        fields: Dict[str, Any],
        context: ParseContext,
        **options: Any,
    ) -> ExtensibleRecord:
        return cls()
