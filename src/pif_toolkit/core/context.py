"""
Module: context

Purpose:
    Provides ParseContext - the position tracker handed to every parser
    while walking a JSON tree. Its only job is to build errors that point
    at the node being parsed.

Key Functions:
    - ParseContext.child(segment): Context one level deeper
    - ParseContext.location: Rendered path, e.g. "vectors[1][0]"
    - ParseContext.error(message): Build an error at this location

Dependencies:
    - dataclasses (std)
    - core.errors

Used By:
    - core.models.record.ExtensibleRecord
    - core.models.scalar.Scalar
    - core.shapes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Type, Union

from .errors import ParseError, PifError

PathSegment = Union[str, int]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """
    Immutable location within a JSON document.

    Attributes:
        path: Keys and indexes from the document root to the current node
        source: Optional label of the document (file name, URL) used as
            a message prefix

    Example:
        >>> ctx = ParseContext().child("vectors").child(1).child(0)
        >>> ctx.location
        'vectors[1][0]'
    """

    path: Tuple[PathSegment, ...] = ()
    source: Optional[str] = None

    def child(self, segment: PathSegment) -> ParseContext:
        """Return a context for a member key or array index of this node."""
        return ParseContext(path=self.path + (segment,), source=self.source)

    @property
    def location(self) -> str:
        """Render the path as text; the document root is ``<root>``."""
        if not self.path:
            return "<root>"
        text = ""
        for segment in self.path:
            if isinstance(segment, int):
                text += f"[{segment}]"
            elif text:
                text += f".{segment}"
            else:
                text = segment
        return text

    def error(self, message: str, error_cls: Type[PifError] = ParseError) -> PifError:
        """
        Build (but do not raise) an error attributed to this location.

        Args:
            message: Description of what was wrong with the node
            error_cls: Error type to construct

        Returns:
            Error instance, ready for ``raise``
        """
        prefix = f"{self.source}: " if self.source else ""
        return error_cls(
            f"{prefix}{self.location}: {message}",
            path=self.location,
            errors=[message],
        )
