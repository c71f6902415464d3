"""
Module: arrays

Purpose:
    Export the numeric lists of a Value as numpy arrays for analysis code.
    Leaves are converted with their ``as_float()`` method when they have
    one, otherwise with ``float()``.

Key Functions:
    - vector_to_array(): One vector -> 1-D float array
    - matrix_to_array(): One matrix -> 2-D float array
    - value_arrays(): Every allocated list of a Value

Dependencies:
    - numpy: Array construction

Used By:
    - Callers that compute on PIF data
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

import numpy as np
import numpy.typing as npt

from ..models.value import Value


def _leaf_to_float(leaf: Any) -> float:
    as_float = getattr(leaf, "as_float", None)
    if as_float is not None:
        return as_float()
    return float(leaf)


def vector_to_array(vector: Sequence[Any]) -> npt.NDArray[np.float64]:
    """
    Convert a vector of leaves to a 1-D float64 array.

    Raises:
        ValueError: If a leaf has no numeric value
    """
    return np.array([_leaf_to_float(leaf) for leaf in vector], dtype=np.float64)


def matrix_to_array(matrix: Sequence[Sequence[Any]]) -> npt.NDArray[np.float64]:
    """
    Convert a matrix (list of rows) to a 2-D float64 array.

    An empty matrix gives an array of shape (0, 0).

    Raises:
        ValueError: If rows have different lengths or a leaf has no
            numeric value
    """
    rows = [vector_to_array(row) for row in matrix]
    if not rows:
        return np.empty((0, 0), dtype=np.float64)
    lengths = sorted({len(row) for row in rows})
    if len(lengths) > 1:
        raise ValueError(f"Matrix rows are ragged: lengths {lengths}")
    return np.vstack(rows)


def value_arrays(value: Value) -> Dict[str, Any]:
    """
    Convert every allocated numeric list of a Value.

    Returns:
        Dict with "scalars" (1-D array), "vectors" (list of 1-D arrays)
        and "matrices" (list of 2-D arrays); absent lists are left out.
    """
    arrays: Dict[str, Any] = {}
    if value.scalars is not None:
        arrays["scalars"] = vector_to_array(value.scalars)
    if value.vectors is not None:
        arrays["vectors"] = [vector_to_array(v) for v in value.vectors]
    if value.matrices is not None:
        arrays["matrices"] = [matrix_to_array(m) for m in value.matrices]
    return arrays
