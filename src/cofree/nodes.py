"""
Node domain for annotated recursive structures.

An ``AnnotatedNode`` pairs a value with a shape of child nodes. The shape
alone decides the branching, so the same node type encodes naturals, lists
and rose trees. Nodes are immutable; nothing points back up the tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from cofree.shapes import Shape

# =============================================================================
# Core Types
# =============================================================================


@dataclass(frozen=True)
class AnnotatedNode[A]:
    """A value ``head`` annotating a shape of child nodes ``tail``."""

    head: A
    tail: Shape[AnnotatedNode[A]]

    def __post_init__(self):
        if not isinstance(self.tail, Shape):
            raise TypeError(
                f"AnnotatedNode tail must be a Shape, got {type(self.tail).__name__}"
            )

    @property
    def children(self) -> tuple[AnnotatedNode[A], ...]:
        """Child nodes in shape order. Forces lazy shapes."""
        return tuple(self.tail)
