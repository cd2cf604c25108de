"""
Naturals, Lists and Trees Example
=================================

This example demonstrates one fold working across three recursive structures
built from the same node type. It covers:

1. Building naturals, lists and rose trees by hand
2. Folding each with an arithmetic reducer
3. Passing the shape's map capability explicitly
4. Growing structures from a seed with ana

Each check prints PASS or FAIL; the script exits non-zero on any failure.
"""

import logging
import sys

from cofree import (
    OPTION,
    SEQUENCE,
    AnnotatedNode,
    Just,
    Many,
    Nothing,
    cata,
    nat,
    to_int,
)

logger = logging.getLogger("cofree.examples")


# ============================================================================
# Step 1: Reducers
# ============================================================================
# A reducer sees the node's head and the already-folded children, wrapped in
# the same shape the node used.


def count_nodes(_, child):
    match child:
        case Just(value=n):
            return 1 + n
        case _:
            return 1


def add_rest(value, rest):
    match rest:
        case Just(value=subtotal):
            return value + subtotal
        case _:
            return value


def add_children(value, results):
    return value + sum(results)


# ============================================================================
# Step 2: Structures Built by Hand
# ============================================================================


def chain(length):
    node = AnnotatedNode(None, Nothing())
    for _ in range(length - 1):
        node = AnnotatedNode(None, Just(node))
    return node


def numbers(*values):
    """Nest values so the first one ends up innermost."""
    node = AnnotatedNode(values[0], Nothing())
    for value in values[1:]:
        node = AnnotatedNode(value, Just(node))
    return node


def sample_tree():
    leaf = AnnotatedNode(0, Many())
    return AnnotatedNode(1, Many([
        AnnotatedNode(2, Many([leaf])),
        AnnotatedNode(3, Many([leaf])),
    ]))


# ============================================================================
# Step 3: Run the Checks
# ============================================================================


def run_checks() -> int:
    checks = [
        ("1-deep chain", cata(OPTION, count_nodes, chain(1)), 1),
        ("4-deep chain", cata(OPTION, count_nodes, chain(4)), 4),
        ("sum [1, 2, 3, 4]", cata(OPTION, add_rest, numbers(1, 2, 3, 4)), 10),
        ("sum [1]", cata(OPTION, add_rest, numbers(1)), 1),
        ("tree sum", cata(SEQUENCE, add_children, sample_tree()), 6),
        ("leaf sum", cata(SEQUENCE, add_children, AnnotatedNode(0, Many())), 0),
        ("nat(7) round trip", to_int(nat(7)), 7),
    ]

    failures = 0
    for name, actual, expected in checks:
        status = "PASS" if actual == expected else "FAIL"
        if status == "FAIL":
            failures += 1
            logger.warning("%s: expected %r, got %r", name, expected, actual)
        print(f"{status}  {name}: {actual}")

    print()
    print(f"{len(checks) - failures}/{len(checks)} checks passed")
    return failures


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(1 if run_checks() else 0)
