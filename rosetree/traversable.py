"""
rosetree.traversable

Rebuild a tree of the same shape, running an effectful function over every
value. The effect is an Either, and effects are always run one after the
other: the order is picked with DepthFirst.
"""
from enum import Enum

from rosetree.data import Leaf, Branch
from rosetree.either import Left, Right, get_or_raise, succeed_by
from rosetree.util import identity


class DepthFirst(Enum):
    PRE = 'pre'     # parent before its children
    POST = 'post'   # children, left to right, before their parent


def traverse_effect(f, order=DepthFirst.POST):
    """
    f :: A -> Either[E, B]
    returns :: Tree[A] -> Either[E, Tree[B]]

    The tree is walked with an explicit stack of unfinished branches
    instead of recursing.
    """
    order = DepthFirst(order)

    def run(self):
        # (branch, its new value or None until post-order reaches it, the
        #  children rebuilt so far)
        stack = []
        while True:
            if not isinstance(self, (Leaf, Branch)):
                raise TypeError(f'not a tree: {self!r}')
            value = None
            if order is DepthFirst.PRE or isinstance(self, Leaf):
                result = f(self.node)
                if isinstance(result, Left):
                    return result
                value = result.r
            if isinstance(self, Branch):
                stack.append((self, value, []))
                self = self.forest[0]
                continue
            done = Leaf(value)
            while stack:
                parent, value, built = stack[-1]
                built.append(done)
                if len(built) < len(parent.forest):
                    self = parent.forest[len(built)]
                    break
                stack.pop()
                if order is DepthFirst.POST:
                    result = f(parent.node)
                    if isinstance(result, Left):
                        return result
                    value = result.r
                done = Branch(value, built)
            else:
                return Right(done)
    return run


def map_effect(f):
    "post-order: the parent's effect runs after its children's"
    return traverse_effect(f, DepthFirst.POST)


def map_effect_pre(f):
    "pre-order: the parent's effect runs before its children's"
    return traverse_effect(f, DepthFirst.PRE)


def traverse(self, f, order=DepthFirst.POST):
    return traverse_effect(f, order)(self)


def sequence_effect(order=DepthFirst.POST):
    "returns :: Tree[Either[E, A]] -> Either[E, Tree[A]]"
    return traverse_effect(identity, order)


def sequence(self, order=DepthFirst.POST):
    return sequence_effect(order)(self)


def fmap(f, self):
    "map f over every value of the tree"
    return get_or_raise(map_effect_pre(succeed_by(f))(self))


def flap(self, value):
    "apply a tree of functions to a single value"
    return fmap(lambda f: f(value), self)
