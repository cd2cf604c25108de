"""
Naturals, lists and rose trees as annotated nodes.

    Natural number   Option shape, head is None
    Non-empty list   Option shape, head is the element
    Rose tree        Many shape, head is the payload
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from cofree.fold import ana, cata
from cofree.nodes import AnnotatedNode
from cofree.shapes import OPTION, SEQUENCE, Just, Many, Nothing, Option

type Nat = AnnotatedNode[None]
type NonEmptyList[T] = AnnotatedNode[T]
type Rose[T] = AnnotatedNode[T]

# =============================================================================
# Natural Numbers
# =============================================================================


def zero() -> Nat:
    return AnnotatedNode(None, Nothing())


def succ(n: Nat) -> Nat:
    return AnnotatedNode(None, Just(n))


def nat(k: int) -> Nat:
    """Encode ``k`` as ``k`` successors of zero."""
    if k < 0:
        raise ValueError(f"Natural numbers are non-negative, got {k}")

    def step(i: int) -> tuple[None, Option[int]]:
        return None, (Just(i - 1) if i > 0 else Nothing())

    return ana(OPTION, step, k)


def _count(_: None, predecessor: Option[int]) -> int:
    match predecessor:
        case Just(value=n):
            return n + 1
        case Nothing():
            return 0
        case _:
            raise TypeError(f"Unexpected shape for a natural: {predecessor!r}")


def to_int(n: Nat) -> int:
    return cata(OPTION, _count, n)


# =============================================================================
# Non-empty Lists
# =============================================================================


def singleton[T](x: T) -> NonEmptyList[T]:
    return AnnotatedNode(x, Nothing())


def cons[T](x: T, xs: NonEmptyList[T]) -> NonEmptyList[T]:
    return AnnotatedNode(x, Just(xs))


def from_list[T](items: Iterable[T]) -> NonEmptyList[T]:
    """Encode ``items`` with the first element at the root."""
    values = tuple(items)
    if not values:
        raise ValueError("Cannot encode an empty list: every node carries an element")

    def step(i: int) -> tuple[T, Option[int]]:
        return values[i], (Just(i + 1) if i + 1 < len(values) else Nothing())

    return ana(OPTION, step, 0)


def _add(value: Any, rest: Option[Any]) -> Any:
    match rest:
        case Just(value=subtotal):
            return value + subtotal
        case _:
            return value


def total(xs: NonEmptyList[Any]) -> Any:
    """Sum of every element in the list."""
    return cata(OPTION, _add, xs)


# =============================================================================
# Rose Trees
# =============================================================================


def rose[T](payload: T, *children: Rose[T]) -> Rose[T]:
    return AnnotatedNode(payload, Many(children))


def tree_sum(tree: Rose[Any]) -> Any:
    return cata(SEQUENCE, lambda value, results: value + sum(results), tree)
