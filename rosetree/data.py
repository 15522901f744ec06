from dataclasses import dataclass
from typing import Generic, TypeVar

from rosetree.exceptions import EmptyForestError


A = TypeVar('A')
C = TypeVar('C')


# ------------------------
#  One level of a tree
# ------------------------
#
# TreeF[A, C] is a single node: a value of type A and, for a branch, a
# non-empty tuple of children of the carrier type C. Nothing here is
# recursive, the carrier is filled in by whoever builds the shape.


@dataclass(frozen=True, slots=True)
class LeafF(Generic[A]):
    node: A

    def __repr__(self):
        return f'leaf_f({self.node!r})'


@dataclass(frozen=True, slots=True)
class BranchF(Generic[A, C]):
    node: A
    forest: tuple[C, ...]

    def __post_init__(self):
        if not isinstance(self.forest, tuple):
            object.__setattr__(self, 'forest', tuple(self.forest))
        if not self.forest:
            raise EmptyForestError(self.node)

    def __repr__(self):
        return f'branch_f({self.node!r}, [{", ".join(map(repr, self.forest))}])'


TreeF = LeafF[A] | BranchF[A, C]


# ----------------
#  Trees
# ----------------


class Tree(Generic[A]):
    """
    A rose tree: the fixed point of TreeF. Either a Leaf or a Branch.
    Trees are never mutated, so children are freely shared between parents.
    """
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Leaf(Tree[A]):
    node: A

    def __repr__(self):
        return f'leaf({self.node!r})'


@dataclass(frozen=True, slots=True)
class Branch(Tree[A]):
    node: A
    forest: 'tuple[Tree[A], ...]'

    def __post_init__(self):
        if not isinstance(self.forest, tuple):
            object.__setattr__(self, 'forest', tuple(self.forest))
        if not self.forest:
            raise EmptyForestError(self.node)
        assert all(isinstance(t, Tree) for t in self.forest), self.forest

    def __repr__(self):
        return f'branch({self.node!r}, [{", ".join(map(repr, self.forest))}])'


def fix(tree_f):
    "TreeF[A, Tree[A]] -> Tree[A]"
    match tree_f:
        case LeafF(node):
            return Leaf(node)
        case BranchF(node, forest):
            return Branch(node, forest)
    raise TypeError(f'not a tree level: {tree_f!r}')


def unfix(tree):
    "Tree[A] -> TreeF[A, Tree[A]]"
    match tree:
        case Leaf(node):
            return LeafF(node)
        case Branch(node, forest):
            return BranchF(node, forest)
    raise TypeError(f'not a tree: {tree!r}')
