import random

from rosetree.either import Left, Right
from rosetree.equivalence import get_equivalence
from rosetree.levels import annotate_depth
from rosetree.testing import (
    ArbitraryOptions, NUMERIC_TREE, STRING_TREE, chain_tree,
    random_numbered_tree,
)
from rosetree.traversable import fmap
from rosetree.tree import leaf, branch
from rosetree.zip import zip_trees, zip_with, zip_with_effect, unzip


def test_zip_trees__same_shape():
    assert zip_trees(NUMERIC_TREE, fmap(str, NUMERIC_TREE)) == \
        fmap(lambda n: (n, str(n)), NUMERIC_TREE)


def test_zip_trees__crops_to_the_common_shape():
    abc = branch('a', [branch('b', [leaf('c')])])
    assert zip_trees(abc, leaf(1)) == leaf(('a', 1))
    assert zip_trees(leaf(1), abc) == leaf((1, 'a'))
    assert zip_trees(abc, branch(1, [leaf(2)])) == \
        branch(('a', 1), [leaf(('b', 2))])

    # extra children on either side are dropped
    assert zip_trees(
        branch(1, [leaf(2), leaf(3)]), branch('a', [leaf('b')])
    ) == branch((1, 'a'), [leaf((2, 'b'))])


def test_zip_with():
    assert zip_with(NUMERIC_TREE, NUMERIC_TREE, lambda a, b: a * b) == \
        fmap(lambda n: n * n, NUMERIC_TREE)


def test_zip_with_effect__stops_at_the_first_left():
    seen = []

    def f(a, b):
        seen.append(a)
        return Left(a) if a == 6 else Right(a + b)

    assert zip_with_effect(f)(NUMERIC_TREE, NUMERIC_TREE) == Left(6)
    # parents before their children
    assert seen == [1, 2, 3, 4, 5, 6]


def test_unzip():
    assert unzip(leaf((1, 'a'))) == (leaf(1), leaf('a'))
    assert unzip(branch((1, 'a'), [leaf((2, 'b'))])) == \
        (branch(1, [leaf(2)]), branch('a', [leaf('b')]))
    assert unzip(annotate_depth(STRING_TREE))[0] == STRING_TREE


def test_unzip_of_zip():
    rng = random.Random(5)
    options = ArbitraryOptions(max_depth=3, max_children=3, branch_bias=0.5)

    for _ in range(10):
        t = random_numbered_tree(rng, options)
        doubled = fmap(lambda n: n * 2, t)
        assert unzip(zip_trees(t, doubled)) == (t, doubled)


def test_zip_with__deep_tree():
    t = chain_tree(2000)
    summed = zip_with(t, t, lambda a, b: a + b)
    assert get_equivalence()(summed, fmap(lambda n: n * 2, t))

    # cropped to the shorter chain
    short = zip_trees(t, chain_tree(1500))
    assert get_equivalence()(short, fmap(lambda n: (n, n), chain_tree(1500)))
