"""
Shape domain for the branching layer of recursive structures.

A shape is a container that says how many children a node has and how they
are arranged. Every shape supports ``map``, which transforms each contained
value while preserving size and order. That is the only operation the folds
in ``cofree.fold`` ask of it.

Shapes are immutable and registered by tag, the same way node classes are.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import dataclass_transform, Any, ClassVar

# =============================================================================
# Shape Base
# =============================================================================


@dataclass_transform(frozen_default=True)
class Shape[T]:
    """Base for shape containers. T is the type of the contained elements."""

    _tag: ClassVar[str]
    _registry: ClassVar[dict[str, type[Shape]]] = {}

    def __init_subclass__(cls, tag: str | None = None, eq: bool = True, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True, eq=eq, repr=True)(cls)

        cls._tag = tag or cls.__name__.lower()

        if existing := Shape._registry.get(cls._tag):
            if existing is not cls:
                raise ValueError(
                    f"Tag '{cls._tag}' already registered to {existing}. "
                    f"Choose a different tag."
                )

        Shape._registry[cls._tag] = cls

    @classmethod
    def registry(cls) -> dict[str, type[Shape]]:
        """Return a copy of the tag to shape class mapping."""
        return dict(Shape._registry)

    def map[U](self, f: Callable[[T], U]) -> Shape[U]:
        raise NotImplementedError(f"{type(self).__name__} does not define map")

    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError(f"{type(self).__name__} is not iterable")


# =============================================================================
# Option: zero or one child
# =============================================================================


class Nothing[T](Shape[T], tag="nothing"):
    """The empty option. Mapping over it never calls the function."""

    def map[U](self, f: Callable[[T], U]) -> Nothing[U]:
        return Nothing()

    def __iter__(self) -> Iterator[T]:
        return iter(())


class Just[T](Shape[T], tag="just"):
    """An option holding exactly one value."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Just[U]:
        return Just(f(self.value))

    def __iter__(self) -> Iterator[T]:
        yield self.value


type Option[T] = Nothing[T] | Just[T]


# =============================================================================
# Sequences: zero or more ordered children
# =============================================================================


class Many[T](Shape[T], tag="many"):
    """
    Strict, finite, ordered sequence of arbitrary arity.

    Any iterable is accepted and frozen into a tuple, so iteration order is
    fixed at construction and replays identically.

    Examples:
        Many([1, 2, 3]).map(str) == Many(("1", "2", "3"))
        Many(()) is the leaf shape
    """

    items: tuple[T, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def map[U](self, f: Callable[[T], U]) -> Many[U]:
        return Many(tuple(f(item) for item in self.items))

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


class LazyMany[T](Shape[T], tag="lazy_many", eq=False):
    """
    Deferred, restartable sequence.

    ``source`` is called afresh on every iteration, so the sequence can be
    replayed from the start. ``map`` composes without forcing anything;
    elements are produced only as a consumer pulls them. Equality is by
    identity since the elements are not known until forced.
    """

    source: Callable[[], Iterator[T]]

    @classmethod
    def of(cls, items: Iterable[T]) -> LazyMany[T]:
        """Build a lazy sequence over a snapshot of ``items``."""
        snapshot = tuple(items)
        return cls(lambda: iter(snapshot))

    def map[U](self, f: Callable[[T], U]) -> LazyMany[U]:
        source = self.source
        return LazyMany(lambda: (f(item) for item in source()))

    def __iter__(self) -> Iterator[T]:
        return iter(self.source())

    def force(self) -> Many[T]:
        """Evaluate every element into a strict sequence."""
        return Many(self)


# =============================================================================
# Map Capabilities
# =============================================================================


@dataclass(frozen=True)
class Functor:
    """
    Explicit map capability for a family of shapes.

    Passed to the folds alongside the reducer instead of being looked up
    from the value. Calling it with a shape outside its family raises
    ``TypeError`` rather than mapping the wrong structure.
    """

    name: str
    accepts: tuple[type[Shape], ...]

    def __call__(self, f: Callable[[Any], Any], fa: Shape[Any]) -> Shape[Any]:
        if not isinstance(fa, self.accepts):
            expected = ", ".join(t.__name__ for t in self.accepts)
            raise TypeError(
                f"{self.name} functor cannot map {type(fa).__name__}; "
                f"expected one of: {expected}"
            )
        return fa.map(f)


OPTION = Functor("option", (Nothing, Just))
SEQUENCE = Functor("sequence", (Many,))
LAZY_SEQUENCE = Functor("lazy_sequence", (LazyMany,))
SHAPE = Functor("shape", (Shape,))
