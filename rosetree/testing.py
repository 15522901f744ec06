"""
Trees for tests.

Random trees are grown from a `random.Random`, so a seed always gives the
same tree. A few fixed trees are here too, for tests that want to know
exactly what they are looking at.
"""
import itertools
import logging
import random
from dataclasses import dataclass

from rosetree import tree_f
from rosetree.exceptions import ArbitraryOptionsError
from rosetree.schemes import tree_ana
from rosetree.traversable import fmap
from rosetree.tree import branch, leaf


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArbitraryOptions:
    """Settings for random trees.

    max_depth: nodes this deep are always leaves, the root being at 0
    max_children: most children of any branch
    branch_bias: chance of a node being a branch, 0 <= branch_bias < 1
    only_branches: the root is always a branch
    """
    max_depth: int = 3
    max_children: int = 5
    branch_bias: float = 0.25
    only_branches: bool = False

    def __post_init__(self):
        if self.only_branches and self.max_depth == 0:
            raise ArbitraryOptionsError('cannot create a branch at max_depth=0')
        if not 0 <= self.branch_bias < 1:
            raise ArbitraryOptionsError(
                f'out-of-bounds branch_bias ({self.branch_bias!r} not in '
                'range 0 <= branch_bias < 1)'
            )
        if self.max_children <= 0:
            raise ArbitraryOptionsError(
                f'out-of-bounds max_children ({self.max_children!r} <= 0)'
            )


def random_tree(rng=None, value=None, options=ArbitraryOptions()):
    """
    A random tree. value(rng) makes each node value, random ints in
    -100..100 by default. Values are drawn in pre-order.
    """
    rng = rng if rng is not None else random.Random()
    if value is None:
        def value(rng):
            return rng.randint(-100, 100)
    logger.debug('growing a random tree with %r', options)

    def unfold(depth):
        node = value(rng)
        must_branch = depth == 0 and options.only_branches
        if depth < options.max_depth and (
            must_branch or rng.random() < options.branch_bias
        ):
            degree = rng.randint(1, options.max_children)
            return tree_f.branch_f(node, [depth + 1] * degree)
        return tree_f.leaf_f(node)

    return tree_ana(unfold)(0)


def random_numbered_tree(rng=None, options=ArbitraryOptions(), initialize=1):
    """
    A random tree with the values initialize, initialize + 1, ... numbered
    in pre-order, so every value is unique and the root is initialize.
    """
    shape = random_tree(rng, lambda _: None, options)
    numbers = itertools.count(initialize)
    return fmap(lambda _: next(numbers), shape)


def random_string_tree(rng=None, options=ArbitraryOptions()):
    rng = rng if rng is not None else random.Random()
    return random_tree(
        rng,
        lambda rng: ''.join(rng.choices('abcdefghij', k=rng.randint(1, 3))),
        options,
    )


def chain_tree(length):
    """
    A tree of length nodes valued 0, 1, ... from the root down, each the
    only child of the one before. Built with a loop, so it can be deeper
    than the recursive folds can go.
    """
    self = leaf(length - 1)
    for value in range(length - 2, -1, -1):
        self = branch(value, [self])
    return self


# ┬1
# ├┬2
# │├─3
# │├─4
# │└─5
# ├┬6
# │├─7
# │├─8
# │└┬11
# │ └─9
# └─10
NUMERIC_TREE = branch(1, [
    branch(2, [leaf(3), leaf(4), leaf(5)]),
    branch(6, [leaf(7), leaf(8), branch(11, [leaf(9)])]),
    leaf(10),
])

# ┬a
# ├─b
# ├┬c
# │├─d
# │└─e
# └┬f
#  ├─g
#  ├┬h
#  │├─i
#  │└─j
#  └─k
STRING_TREE = branch('a', [
    leaf('b'),
    branch('c', [leaf('d'), leaf('e')]),
    branch('f', [leaf('g'), branch('h', [leaf('i'), leaf('j')]), leaf('k')]),
])
