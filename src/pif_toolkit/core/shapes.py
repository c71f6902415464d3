"""
Module: shapes

Purpose:
    Shape normalization for the numeric fields of a Value. The wire format
    has no tag saying whether an array holds one vector or many, one matrix
    or many; the only discriminator is nesting depth. These functions look
    at that depth and always return the general form (a list of vectors, a
    list of matrices).

Key Functions:
    - parse_vector(): Flat array -> list of leaves
    - parse_scalars(): The "scalars" property -> list of leaves
    - normalize_vectors(): Vector or list of vectors -> list of vectors
    - normalize_matrices(): Matrix or list of matrices -> list of matrices

Dependencies:
    - logging (std)
    - core.context.ParseContext
    - core.errors.ShapeError

Used By:
    - core.models.value.Value

Accepted shapes:

    vectors:   [1, 2, 3]               -> one vector
               [[1, 2], [3, 4]]        -> two vectors
    matrices:  [[1, 2], [3, 4]]        -> one matrix (two rows)
               [[[1], [2]], [[3]]]     -> two matrices

Only the first element (and for matrices, the first element's first
element) is inspected to pick a shape. Later elements must then follow
that shape or parsing fails.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from .errors import ShapeError
from .context import ParseContext

logger = logging.getLogger(__name__)

LeafParser = Callable[[Any, ParseContext], Any]


def _require_array(node: Any, context: ParseContext, what: str) -> list:
    if not isinstance(node, list):
        kind = "null" if node is None else type(node).__name__
        raise context.error(f"expected array for {what}, got {kind}", ShapeError)
    return node


# ─────────────────────────────────────────────────────────────────────────────
# Flat Arrays
# ─────────────────────────────────────────────────────────────────────────────

def parse_vector(node: Any, leaf_parser: LeafParser, context: ParseContext) -> List[Any]:
    """
    Parse a flat array as a single vector.

    Each element is handed to leaf_parser individually, with a context
    pointing at that element.

    Args:
        node: JSON array of leaf values
        leaf_parser: Callable(node, context) -> leaf datum
        context: Location of node

    Returns:
        Parsed leaves, same length and order as node

    Raises:
        ShapeError: If node is not an array
    """
    items = _require_array(node, context, "vector")
    return [leaf_parser(item, context.child(i)) for i, item in enumerate(items)]


def parse_scalars(node: Any, leaf_parser: LeafParser, context: ParseContext) -> List[Any]:
    """Parse the "scalars" property; a flat array with no shape ambiguity."""
    items = _require_array(node, context, "scalars")
    return [leaf_parser(item, context.child(i)) for i, item in enumerate(items)]


# ─────────────────────────────────────────────────────────────────────────────
# Vectors
# ─────────────────────────────────────────────────────────────────────────────

def normalize_vectors(node: Any, leaf_parser: LeafParser, context: ParseContext) -> List[List[Any]]:
    """
    Normalize a vector or a list of vectors into a list of vectors.

    Args:
        node: JSON array, either flat (one vector) or an array of arrays
        leaf_parser: Callable(node, context) -> leaf datum
        context: Location of node

    Returns:
        List of vectors (empty for an empty array)

    Raises:
        ShapeError: If node is not an array, or a member of a list of
            vectors is not an array

    Example:
        >>> normalize_vectors([1, 2], lambda n, c: n, ParseContext())
        [[1, 2]]
        >>> normalize_vectors([[1, 2], [3]], lambda n, c: n, ParseContext())
        [[1, 2], [3]]
    """
    items = _require_array(node, context, "vectors")
    if not items:
        return []

    if isinstance(items[0], list):
        logger.debug(f"{context.location}: list of {len(items)} vectors")
        return [
            parse_vector(item, leaf_parser, context.child(i))
            for i, item in enumerate(items)
        ]

    logger.debug(f"{context.location}: single vector of length {len(items)}")
    return [parse_vector(items, leaf_parser, context)]


# ─────────────────────────────────────────────────────────────────────────────
# Matrices
# ─────────────────────────────────────────────────────────────────────────────

def normalize_matrices(node: Any, leaf_parser: LeafParser, context: ParseContext) -> List[List[List[Any]]]:
    """
    Normalize a matrix or a list of matrices into a list of matrices.

    A matrix needs at least two levels of nesting. Three levels at the
    first position mean a list of matrices. An empty first row gives no
    third level to detect, so the input is read as a single matrix.

    Args:
        node: JSON array of arrays (one matrix) or of arrays of arrays
        leaf_parser: Callable(node, context) -> leaf datum
        context: Location of node

    Returns:
        List of matrices, each a list of row vectors (empty for an
        empty array)

    Raises:
        ShapeError: If node is not an array, its first element is not an
            array, or a member of a list of matrices is malformed

    Example:
        >>> normalize_matrices([[1], [2]], lambda n, c: n, ParseContext())
        [[[1], [2]]]
    """
    items = _require_array(node, context, "matrices")
    if not items:
        return []

    first = items[0]
    if not isinstance(first, list):
        raise context.error("expected array-of-arrays for matrices", ShapeError)

    if first and isinstance(first[0], list):
        logger.debug(f"{context.location}: list of {len(items)} matrices")
        return [
            normalize_vectors(
                _require_array(item, context.child(i), "matrix"),
                leaf_parser,
                context.child(i),
            )
            for i, item in enumerate(items)
        ]

    logger.debug(f"{context.location}: single matrix with {len(items)} rows")
    return [normalize_vectors(items, leaf_parser, context)]
