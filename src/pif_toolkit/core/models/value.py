"""
Module: value

Purpose:
    Provides the Value record - a named, optionally united container of
    scalars, vectors and matrices. Value is the numeric payload carried by
    properties, conditions and other PIF objects.

Key Functions:
    - Value.add_scalar() / add_vector() / add_matrix(): Append data
    - Value.num_scalars() / num_vectors() / num_matrices(): Counts
    - Value.get_scalar() / get_vector() / get_matrix(): Indexed access
    - Value.iter_scalars() / iter_vectors() / iter_matrices(): Iteration
    - Value.to_dict() / Value.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .record.ExtensibleRecord
    - .scalar.Scalar (default leaf datum)
    - core.shapes: Vector and matrix shape normalization

Used By:
    - core.utils.serialization
    - core.utils.arrays

Round-trip note:
    "vectors" accepts a single flat vector and "matrices" a single matrix
    on input, but output always uses the general form. A document holding
    ``"vectors": [1, 2]`` is written back as ``"vectors": [[1, 2]]``. The
    content is preserved, the original nesting is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple

from ..errors import IndexOutOfRange
from ..context import ParseContext
from ..shapes import LeafParser, normalize_matrices, normalize_vectors, parse_scalars
from .record import ExtensibleRecord
from .scalar import Scalar, encode_leaf

Vector = List[Any]
Matrix = List[List[Any]]


def _check_index(items: Optional[list], index: int, kind: str) -> None:
    count = 0 if items is None else len(items)
    if not 0 <= index < count:
        raise IndexOutOfRange(
            f"Attempting to access {kind} {index} of {count}",
            path=f"{kind}[{index}]",
        )


def _parse_text(node: Any, context: ParseContext) -> Optional[str]:
    if node is None or isinstance(node, str):
        return node
    if isinstance(node, bool):
        return "true" if node else "false"
    if isinstance(node, (int, float)):
        return str(node)
    raise context.error(f"expected string, got {type(node).__name__}")


@dataclass
class Value(ExtensibleRecord):
    """
    Container for scalar, vector and matrix data.

    The three lists are independent: a Value may hold any combination of
    them. Each list starts absent (None) and is created by the first
    matching add_* call; once created it is never reset to absent, and an
    empty list is written to JSON as ``[]`` while an absent one is omitted.

    Vectors in one Value may have different lengths.

    Attributes:
        name: Optional name of the value
        units: Optional units string
        scalars: List of leaf datums, or None
        vectors: List of vectors (lists of leaf datums), or None
        matrices: List of matrices (lists of row vectors), or None

    Example:
        >>> v = Value(name="x", units="m").add_vector([Scalar.of(1), Scalar.of(2)])
        >>> v.num_vectors()
        1
        >>> v.to_dict()
        {'name': 'x', 'units': 'm', 'vectors': [[1, 2]]}
    """

    FIELD_NAMES: ClassVar[Tuple[str, ...]] = ("name", "units", "scalars", "vectors", "matrices")

    name: Optional[str] = None
    units: Optional[str] = None
    scalars: Optional[List[Any]] = None
    vectors: Optional[List[Vector]] = None
    matrices: Optional[List[Matrix]] = None

    def with_name(self, name: Optional[str]) -> Value:
        self.name = name
        return self

    def with_units(self, units: Optional[str]) -> Value:
        self.units = units
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Scalars
    # ─────────────────────────────────────────────────────────────────────────

    def add_scalar(self, scalar: Any) -> Value:
        """Append a scalar, creating the list on first use."""
        if self.scalars is None:
            self.scalars = []
        self.scalars.append(scalar)
        return self

    def num_scalars(self) -> int:
        return 0 if self.scalars is None else len(self.scalars)

    def get_scalar(self, index: int) -> Any:
        """
        Get the scalar at index.

        Raises:
            IndexOutOfRange: If index is not in [0, num_scalars())
        """
        _check_index(self.scalars, index, "scalar")
        return self.scalars[index]

    def iter_scalars(self) -> Sequence[Any]:
        return () if self.scalars is None else self.scalars

    # ─────────────────────────────────────────────────────────────────────────
    # Vectors
    # ─────────────────────────────────────────────────────────────────────────

    def add_vector(self, vector: Sequence[Any]) -> Value:
        """Append a copy of vector, creating the list on first use."""
        if self.vectors is None:
            self.vectors = []
        self.vectors.append(list(vector))
        return self

    def num_vectors(self) -> int:
        return 0 if self.vectors is None else len(self.vectors)

    def get_vector(self, index: int) -> Vector:
        """
        Get the vector at index.

        Raises:
            IndexOutOfRange: If index is not in [0, num_vectors())
        """
        _check_index(self.vectors, index, "vector")
        return self.vectors[index]

    def iter_vectors(self) -> Sequence[Vector]:
        return () if self.vectors is None else self.vectors

    # ─────────────────────────────────────────────────────────────────────────
    # Matrices
    # ─────────────────────────────────────────────────────────────────────────

    def add_matrix(self, matrix: Sequence[Sequence[Any]]) -> Value:
        """Append a copy of matrix (row by row), creating the list on first use."""
        if self.matrices is None:
            self.matrices = []
        self.matrices.append([list(row) for row in matrix])
        return self

    def num_matrices(self) -> int:
        return 0 if self.matrices is None else len(self.matrices)

    def get_matrix(self, index: int) -> Matrix:
        """
        Get the matrix at index.

        Raises:
            IndexOutOfRange: If index is not in [0, num_matrices())
        """
        _check_index(self.matrices, index, "matrix")
        return self.matrices[index]

    def iter_matrices(self) -> Sequence[Matrix]:
        return () if self.matrices is None else self.matrices

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def _fields_to_dict(self, compact_scalars: bool = True, **options: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        if self.units is not None:
            data["units"] = self.units
        if self.scalars is not None:
            data["scalars"] = [encode_leaf(s, compact_scalars) for s in self.scalars]
        if self.vectors is not None:
            data["vectors"] = [
                [encode_leaf(s, compact_scalars) for s in vector]
                for vector in self.vectors
            ]
        if self.matrices is not None:
            data["matrices"] = [
                [[encode_leaf(s, compact_scalars) for s in row] for row in matrix]
                for matrix in self.matrices
            ]
        return data

    @classmethod
    def _from_fields(
        cls,
        fields: Dict[str, Any],
        context: ParseContext,
        leaf_parser: Optional[LeafParser] = None,
        **options: Any,
    ) -> Value:
        if leaf_parser is None:
            leaf_parser = Scalar.parse

        value = cls(
            name=_parse_text(fields.get("name"), context.child("name")),
            units=_parse_text(fields.get("units"), context.child("units")),
        )
        if fields.get("scalars") is not None:
            value.scalars = parse_scalars(fields["scalars"], leaf_parser, context.child("scalars"))
        if fields.get("vectors") is not None:
            value.vectors = normalize_vectors(fields["vectors"], leaf_parser, context.child("vectors"))
        if fields.get("matrices") is not None:
            value.matrices = normalize_matrices(fields["matrices"], leaf_parser, context.child("matrices"))
        return value
