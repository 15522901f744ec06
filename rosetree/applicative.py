"""
rosetree.applicative

Cartesian products of trees, built from flat_map and fmap.
"""
from rosetree.data import Leaf
from rosetree.foldable import Monoid
from rosetree.monad import flat_map
from rosetree.traversable import fmap


def product(self, that):
    "every value of self paired with every value of that"
    return flat_map(self, lambda a: fmap(lambda b: (a, b), that))


def product_many(self, others):
    "Tree[A], [Tree[A]] -> Tree[(A, ...)]"
    out = fmap(lambda a: (a,), self)
    for that in others:
        out = fmap(lambda pair: (*pair[0], pair[1]), product(out, that))
    return out


def product_all(trees):
    """
    the product of all the given trees into a tree of tuples. No trees gives
    a leaf holding an empty tuple.
    """
    trees = list(trees)
    if not trees:
        return Leaf(())
    return product_many(trees[0], trees[1:])


def get_semigroup(combine):
    "lift a combine on values to one on trees"
    def combine_trees(self, that):
        return fmap(lambda pair: combine(*pair), product(self, that))
    return combine_trees


def get_monoid(monoid):
    "lift a Monoid on values to one on trees, with a leaf as the empty tree"
    return Monoid(Leaf(monoid.empty), get_semigroup(monoid.combine))
