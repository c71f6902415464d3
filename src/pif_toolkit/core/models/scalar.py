"""
Module: scalar

Purpose:
    Provides the Scalar dataclass - the default leaf datum stored in the
    scalars, vectors and matrices of a Value. A Scalar is an immutable value
    object; the containers never look inside it except through parse(),
    to_json() and as_float().

Key Functions:
    - Scalar.parse(node, context): Build a Scalar from one JSON node
    - Scalar.of(value): Create a Scalar holding just a value
    - Scalar.to_json(): Serialize for JSON
    - Scalar.as_float(): Numeric view of the value
    - encode_leaf(leaf): Serialize any leaf datum

Dependencies:
    - dataclasses (std)
    - core.context.ParseContext
    - core.errors.LeafParseError

Used By:
    - core.models.value.Value
    - core.utils.arrays
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from ..errors import LeafParseError
from ..context import ParseContext

ScalarValue = Union[str, int, float, bool]

_SCALAR_FIELDS = ("value", "minimum", "maximum", "inequality", "uncertainty", "approximate")


@dataclass(frozen=True)
class Scalar:
    """
    Single numeric or categorical datum.

    Written in JSON either as a bare number/string/boolean, or as an object
    with any of the attributes below. Object keys outside that set are kept
    in ``extras`` and written back unchanged.

    Attributes:
        value: The datum itself (number, string or boolean)
        minimum: Lower bound when the datum is a range
        maximum: Upper bound when the datum is a range
        inequality: Relation to value, e.g. "<" or ">="
        uncertainty: Uncertainty of the value, as written by the producer
        approximate: Whether the value is approximate
        extras: Object properties not listed above

    Example:
        >>> Scalar.parse(1.5)
        Scalar(1.5)
        >>> Scalar.parse({"value": "2.0", "uncertainty": "0.1"}).as_float()
        2.0
    """

    value: Optional[ScalarValue] = None
    minimum: Optional[ScalarValue] = None
    maximum: Optional[ScalarValue] = None
    inequality: Optional[str] = None
    uncertainty: Optional[ScalarValue] = None
    approximate: Optional[bool] = None
    extras: Dict[str, Any] = field(default_factory=dict, hash=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def of(cls, value: ScalarValue) -> Scalar:
        """Create a Scalar that only carries a value."""
        return cls(value=value)

    @classmethod
    def parse(cls, node: Any, context: Optional[ParseContext] = None) -> Scalar:
        """
        Parse one JSON node into a Scalar.

        Args:
            node: A JSON number, string, boolean or object
            context: Location of the node (root if None)

        Returns:
            Scalar instance

        Raises:
            LeafParseError: If node is null, an array, or any other
                non-JSON-scalar type
        """
        if context is None:
            context = ParseContext()

        if isinstance(node, (str, int, float)):
            return cls(value=node)

        if isinstance(node, dict):
            extras = {key: val for key, val in node.items() if key not in _SCALAR_FIELDS}
            return cls(
                value=node.get("value"),
                minimum=node.get("minimum"),
                maximum=node.get("maximum"),
                inequality=node.get("inequality"),
                uncertainty=node.get("uncertainty"),
                approximate=node.get("approximate"),
                extras=extras,
            )

        kind = "null" if node is None else type(node).__name__
        raise context.error(f"cannot parse {kind} as a scalar", LeafParseError)

    # ─────────────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_simple(self) -> bool:
        """True when only ``value`` is set."""
        return (
            self.minimum is None
            and self.maximum is None
            and self.inequality is None
            and self.uncertainty is None
            and self.approximate is None
            and not self.extras
        )

    def as_float(self) -> float:
        """
        Numeric view of the value.

        Raises:
            ValueError: If there is no value or it is not numeric
        """
        if self.value is None:
            raise ValueError("Scalar has no value")
        return float(self.value)

    def to_json(self, compact: bool = True) -> Any:
        """
        Serialize for JSON storage.

        Args:
            compact: Write a value-only scalar as the bare value

        Returns:
            Bare value, or dict with the attributes that are set
        """
        if compact and self.is_simple and self.value is not None:
            return self.value
        data: Dict[str, Any] = {}
        for name in _SCALAR_FIELDS:
            attr = getattr(self, name)
            if attr is not None:
                data[name] = attr
        data.update(self.extras)
        return data

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        if self.is_simple:
            return f"Scalar({self.value!r})"
        parts = [f"{name}={getattr(self, name)!r}" for name in _SCALAR_FIELDS if getattr(self, name) is not None]
        if self.extras:
            parts.append(f"extras={self.extras!r}")
        return f"Scalar({', '.join(parts)})"


def encode_leaf(leaf: Any, compact: bool = True) -> Any:
    """
    Serialize a leaf datum.

    Leaves that provide ``to_json`` are asked to encode themselves, anything
    else is assumed to already be a JSON value.
    """
    to_json = getattr(leaf, "to_json", None)
    if to_json is not None:
        return to_json(compact=compact)
    return leaf
