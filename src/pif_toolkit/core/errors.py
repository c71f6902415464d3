"""
Module: errors

Purpose:
    Exception hierarchy for the PIF core. Every error carries the location
    of the offending node so failures deep inside a nested array can be
    traced back to the source document.

Key Classes:
    - PifError: Base class, carries path and detail list
    - ParseError: Deserialization failure
    - ShapeError: Array nesting does not match a recognized shape
    - LeafParseError: Leaf parser rejected a JSON node
    - IndexOutOfRange: Accessor index outside the stored list

Used By:
    - core.context.ParseContext (error construction)
    - core.shapes
    - core.models.value.Value
    - core.models.scalar.Scalar
"""

from __future__ import annotations


class PifError(Exception):
    """Base class for all PIF errors."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class ParseError(PifError):
    """Raised when a JSON document cannot be turned into a record."""
    pass


class ShapeError(ParseError):
    """
    Raised when an array-valued field has a nesting depth that matches
    none of the recognized vector or matrix shapes.
    """
    pass


class LeafParseError(ParseError):
    """Raised by the default leaf parser for nodes it cannot represent."""
    pass


class IndexOutOfRange(PifError, IndexError):
    """Raised when an indexed accessor is called outside [0, count)."""
    pass
