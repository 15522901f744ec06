"""
rosetree.foldable

Folding every value of a tree into one: with an accumulator, or with a
monoid.
"""
import functools
import operator
from typing import Any, Callable, NamedTuple

from rosetree import tree_f
from rosetree.schemes import tree_cata
from rosetree.tree import get_forest
from rosetree.util import identity


class Monoid(NamedTuple):
    "combine must be associative and have empty as its identity"
    empty: Any
    combine: Callable[[Any, Any], Any]


MONOID_EVERY = Monoid(True, lambda a, b: a and b)
MONOID_SOME = Monoid(False, lambda a, b: a or b)
MONOID_XOR = Monoid(False, operator.ne)
MONOID_EQV = Monoid(True, operator.eq)
MONOID_SUM = Monoid(0, operator.add)


def reduce(self, initial, reducer):
    """
    Thread an accumulator through every value: the node first, then each
    child subtree in order.
    """
    return functools.reduce(
        lambda acc, child: reduce(child, acc, reducer),
        get_forest(self),
        reducer(initial, self.node),
    )


def monoid_fold(monoid, f=identity):
    "a folder combining f(value) with the already folded children"
    empty, combine = monoid
    return tree_f.match(
        on_leaf=lambda node: combine(empty, f(node)),
        on_branch=lambda node, forest: functools.reduce(
            combine, forest, combine(empty, f(node))
        ),
    )


def fold_map(monoid, f=identity):
    "Tree[A] -> M, combining f(a) for every value, depth-first, left to right"
    return tree_cata(monoid_fold(monoid, f))


def predicate_fold(monoid):
    """
    predicate_fold(monoid)(predicate) is a folder into a boolean, combining
    predicate(value) with the children's results using the boolean monoid.
    """
    empty, combine = monoid

    def with_predicate(predicate):
        def fold(self):
            value, forest = tree_f.destruct(self)
            return combine(
                predicate(value), functools.reduce(combine, forest, empty)
            )
        return fold
    return with_predicate


every_fold = predicate_fold(MONOID_EVERY)
some_fold = predicate_fold(MONOID_SOME)
xor_fold = predicate_fold(MONOID_XOR)
eqv_fold = predicate_fold(MONOID_EQV)


# Folds over boolean trees
every = fold_map(MONOID_EVERY)
some = fold_map(MONOID_SOME)
xor = fold_map(MONOID_XOR)
eqv = fold_map(MONOID_EQV)


def every_of(predicate):
    "true if predicate holds for every value of the tree"
    return tree_cata(every_fold(predicate))


def some_of(predicate):
    "true if predicate holds for at least one value of the tree"
    return tree_cata(some_fold(predicate))
