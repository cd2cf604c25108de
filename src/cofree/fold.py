"""
Fold domain: generalized folds and unfolds over annotated nodes.

Each function takes the shape's map capability explicitly as ``fmap``: a
``Functor`` from ``cofree.shapes`` or any callable ``(f, shape) -> shape``.

    cata   reduce a node bottom-up
    ana    grow a node top-down from a seed
    hylo   grow and reduce in one pass without building the node

Recursion depth follows the depth of the structure; very deep input raises
``RecursionError`` like any other recursive Python code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from cofree.nodes import AnnotatedNode
from cofree.shapes import Shape

logger = logging.getLogger(__name__)

type Fmap = Callable[[Callable[[Any], Any], Shape[Any]], Shape[Any]]
type Reducer[A, B] = Callable[[A, Shape[B]], B]
type Unfolder[A, S] = Callable[[S], tuple[A, Shape[S]]]


def _require_callable(name: str, value: Any) -> None:
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


# =============================================================================
# Folds
# =============================================================================


def cata[A, B](fmap: Fmap, reduce: Reducer[A, B], node: AnnotatedNode[A]) -> B:
    """
    Collapse ``node`` to a single value, children first.

    Every child in ``node.tail`` is folded by mapping this same fold over the
    shape, then ``reduce(node.head, folded_tail)`` combines the result. The
    folded tail keeps the shape and order of the original children.

    Args:
        fmap: Map capability for the node's shape
        reduce: Combines a head with its already-folded children
        node: Root of the structure to fold

    Returns:
        The reducer's result at the root

    Raises:
        TypeError: If ``fmap`` or ``reduce`` is not callable, or ``node`` is
            not an AnnotatedNode
    """
    _require_callable("fmap", fmap)
    _require_callable("reduce", reduce)
    if not isinstance(node, AnnotatedNode):
        raise TypeError(f"cata expects an AnnotatedNode, got {type(node).__name__}")

    logger.debug("cata over %s-shaped node", type(node.tail).__name__)

    def fold(n: AnnotatedNode[A]) -> B:
        return reduce(n.head, fmap(fold, n.tail))

    return fold(node)


def cata_f(fmap: Fmap) -> Callable[[Reducer[Any, Any]], Callable[[AnnotatedNode[Any]], Any]]:
    """Curried ``cata``: fix the shape first, then the reducer, then the node."""
    _require_callable("fmap", fmap)

    def with_reducer(reduce):
        def run(node):
            return cata(fmap, reduce, node)
        return run

    return with_reducer


# =============================================================================
# Unfolds
# =============================================================================


def ana[A, S](fmap: Fmap, unfold: Unfolder[A, S], seed: S) -> AnnotatedNode[A]:
    """
    Grow a structure from ``seed``, parent first.

    ``unfold(seed)`` returns the node's head and a shape of child seeds; each
    child seed is grown the same way. With a lazy shape the children are
    only grown when iterated.
    """
    _require_callable("fmap", fmap)
    _require_callable("unfold", unfold)

    logger.debug("ana from seed of type %s", type(seed).__name__)

    def grow(s: S) -> AnnotatedNode[A]:
        head, seeds = unfold(s)
        return AnnotatedNode(head, fmap(grow, seeds))

    return grow(seed)


def hylo[A, S, B](
    fmap: Fmap,
    reduce: Reducer[A, B],
    unfold: Unfolder[A, S],
    seed: S,
) -> B:
    """
    Unfold ``seed`` and fold the result in a single pass.

    Equivalent to ``cata(fmap, reduce, ana(fmap, unfold, seed))`` but never
    allocates the intermediate nodes.
    """
    _require_callable("fmap", fmap)
    _require_callable("reduce", reduce)
    _require_callable("unfold", unfold)

    logger.debug("hylo from seed of type %s", type(seed).__name__)

    def fused(s: S) -> B:
        head, seeds = unfold(s)
        return reduce(head, fmap(fused, seeds))

    return fused(seed)
