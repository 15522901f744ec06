"""
rosetree.monad

flat_map replaces every value with a whole tree and then flattens.

Flattening keeps the shape of the outer tree. A branch in the outer tree
takes only the root value of the tree it holds and keeps its own children,
so the children of that inner tree are dropped. A leaf in the outer tree
is replaced by the inner tree as a whole:

    flatten(branch(branch(x, [y]), [c1, c2])) == branch(x, [c1, c2])
    flatten(leaf(branch(x, [y]))) == branch(x, [y])
"""
from rosetree.data import Branch, BranchF, Leaf, LeafF
from rosetree.either import get_or_raise, succeed_by
from rosetree.schemes import tree_cata, tree_cata_effect
from rosetree.traversable import map_effect


def of(value):
    return Leaf(value)


def flatten_fold(self):
    "flatten a single level of a tree of trees"
    match self:
        case BranchF(inner, forest):
            return Branch(inner.node, forest)
        case LeafF(inner):
            return inner
    raise TypeError(f'not a tree level: {self!r}')


def flatten(self):
    "Tree[Tree[A]] -> Tree[A]"
    return tree_cata(flatten_fold)(self)


def flatten_effect(self):
    "Tree[Tree[A]] -> Either[E, Tree[A]]"
    return tree_cata_effect(succeed_by(flatten_fold))(self)


def flat_map_effect(f):
    """
    f :: A -> Either[E, Tree[B]]
    returns :: Tree[A] -> Either[E, Tree[B]]
    """
    return lambda self: map_effect(f)(self).flat_map(flatten_effect)


def flat_map(self, f):
    return get_or_raise(flat_map_effect(succeed_by(f))(self))
