"""
rosetree.levels

Working with tree levels: annotating nodes with their depth or position,
cropping and growing trees, grouping values breadth-first.
"""
from dataclasses import dataclass
from itertools import chain
from typing import Callable

from rosetree import tree_f
from rosetree.data import Branch, BranchF, Leaf, LeafF, fix
from rosetree.schemes import by_parent_unfold, tree_ana, tree_cata
from rosetree.traversable import fmap
from rosetree.util import const, transpose


# ----------------
#  Level trees
# ----------------


@dataclass(frozen=True)
class LevelTreeSettings:
    """
    depth: the depth of the unfolded tree
    degree: called with the depth of a node, returns its child count
    """
    depth: int
    degree: Callable[[int], int] = const(1)


def level_tree_unfold(settings):
    """
    An unfolder of a numeric level tree, where every node's value is its
    depth, starting at 1 for the root.
    """
    depth, degree = settings.depth, settings.degree
    return by_parent_unfold(
        lambda n: [] if n >= depth else [n + 1] * degree(n)
    )


def unfold_level_tree(settings):
    "int -> Tree[int], a perfectly balanced level tree"
    return tree_ana(level_tree_unfold(settings))


def binary_tree(depth):
    """
    A binary level tree of the given depth:

    ┬1
    ├┬2
    │├─3
    │└─3
    └┬2
     ├─3
     └─3

    A depth below 2 gives leaf(1).
    """
    return unfold_level_tree(LevelTreeSettings(depth, const(2)))(1)


# ----------------
#  Annotations
# ----------------


def annotate_depth_unfold(seed):
    "(Tree[A], depth) -> TreeF[(A, depth), (Tree[A], depth)]"
    match seed:
        case (Leaf(value), depth):
            return tree_f.leaf_f((value, depth))
        case (Branch(value, forest), depth):
            return tree_f.branch_f(
                (value, depth), [(child, depth + 1) for child in forest]
            )
    raise TypeError(f'not a (tree, depth) seed: {seed!r}')


def annotate_depth(self):
    "pair every value with its distance from the root, which is 0"
    return tree_ana(annotate_depth_unfold)((self, 0))


def annotate_level_labels_unfold(seed):
    """
    (label, Tree[A]) -> TreeF[(label, A), (label, Tree[A])]

    The label of the ith child, counting from 1, is its parent's label
    followed by "i."
    """
    match seed:
        case (label, Leaf(value)):
            return tree_f.leaf_f((label, value))
        case (label, Branch(value, forest)):
            return tree_f.branch_f(
                (label, value),
                [(f'{label}{i}.', child) for i, child in enumerate(forest, 1)],
            )
    raise TypeError(f'not a (label, tree) seed: {seed!r}')


def annotate_level_labels(self):
    """
    Pair every value with a label like "1.3.2.": the root is "1.", its
    third child "1.3.", and the second child of that "1.3.2."
    Dropping the leading 1 and subtracting 1 from each number gives the
    path drill() takes to reach the node.
    """
    return tree_ana(annotate_level_labels_unfold)(('1.', self))


def add_level_labels(self):
    "Tree[str] -> Tree[str], each value prefixed with its level label"
    return fmap(lambda pair: f'{pair[0]} {pair[1]}', annotate_level_labels(self))


# ----------------
#  Crop and grow
# ----------------


def crop_depth_unfold(seed):
    "(depth, Tree[A]) -> TreeF[A, (depth, Tree[A])]"
    depth, self = seed
    match self:
        case Branch(value, forest) if depth > 1:
            return tree_f.branch_f(
                value, [(depth - 1, child) for child in forest]
            )
        case _:
            return tree_f.leaf_f(self.node)


def crop_depth(self, depth):
    """
    Remove all nodes deeper than depth, the root being at depth 1. A depth
    below 1 keeps just the root.

        crop_depth(branch(1, [branch(2, [leaf(3)])]), 2)
        == branch(1, [leaf(2)])
    """
    return tree_ana(crop_depth_unfold)((depth, self))


def grow_leaves_fold(grow):
    "a folder that replaces each leaf with grow(value), a whole new tree"
    def fold(self):
        if tree_f.is_branch(self):
            return fix(self)
        return grow(self.node)
    return fold


def grow_leaves(self, grow):
    "replace every leaf with grow(leaf value). Branches are kept"
    return tree_cata(grow_leaves_fold(grow))(self)


# ----------------
#  Levels
# ----------------


def levels_fold(self):
    """
    Group a single level by depth. A branch's children each give a list of
    rows; row i of all of them, in child order, is row i + 1 here.
    """
    match self:
        case BranchF(node, forest):
            return [[node]] + [
                list(chain.from_iterable(rows)) for rows in transpose(forest)
            ]
        case LeafF(node):
            return [[node]]
    raise TypeError(f'not a tree level: {self!r}')


# Tree[A] -> [[A]], the values of each depth, top to bottom
levels = tree_cata(levels_fold)
