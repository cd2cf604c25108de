"""cofree - Annotated recursive structures and generalized folds for Python 3.12+."""

from cofree.fold import (
    Fmap,
    Reducer,
    Unfolder,
    ana,
    # Folds
    cata,
    cata_f,
    hylo,
)
from cofree.instances import (
    cons,
    from_list,
    nat,
    rose,
    singleton,
    succ,
    to_int,
    total,
    tree_sum,
    zero,
)
from cofree.nodes import AnnotatedNode
from cofree.shapes import (
    LAZY_SEQUENCE,
    OPTION,
    SEQUENCE,
    SHAPE,
    # Map capabilities
    Functor,
    Just,
    LazyMany,
    Many,
    Nothing,
    Option,
    # Shapes
    Shape,
)

__all__ = [
    "LAZY_SEQUENCE",
    "OPTION",
    "SEQUENCE",
    "SHAPE",
    # Core types
    "AnnotatedNode",
    "Fmap",
    # Map capabilities
    "Functor",
    "Just",
    "LazyMany",
    "Many",
    "Nothing",
    "Option",
    "Reducer",
    # Shapes
    "Shape",
    "Unfolder",
    "ana",
    # Folds
    "cata",
    "cata_f",
    # Encodings
    "cons",
    "from_list",
    "hylo",
    "nat",
    "rose",
    "singleton",
    "succ",
    "to_int",
    "total",
    "tree_sum",
    "zero",
]
