import pytest

from rosetree import tree_f
from rosetree.data import LeafF, BranchF
from rosetree.either import Left, Right
from rosetree.exceptions import EmptyForestError, NotABranchError


def test_constructors():
    assert tree_f.leaf_f(1) == LeafF(1)
    assert tree_f.branch_f(1, [2, 3]) == BranchF(1, (2, 3))
    assert tree_f.tree_f(1) == LeafF(1)
    assert tree_f.tree_f(1, []) == LeafF(1)
    assert tree_f.tree_f(1, ['seed']) == BranchF(1, ('seed',))
    assert tree_f.with_forest(['seed'], 1) == BranchF(1, ('seed',))

    with pytest.raises(EmptyForestError):
        tree_f.branch_f(1, [])


def test_destructuring():
    level = tree_f.branch_f('a', ['x', 'y'])

    assert tree_f.is_branch(level)
    assert not tree_f.is_leaf(level)
    assert tree_f.get_value(level) == 'a'
    assert tree_f.get_forest(level) == ('x', 'y')
    assert tree_f.get_forest(tree_f.leaf_f('a')) == ()
    assert tree_f.get_branch_forest(level) == ('x', 'y')
    with pytest.raises(NotABranchError):
        tree_f.get_branch_forest(tree_f.leaf_f('a'))
    assert tree_f.length(level) == 2
    assert tree_f.length(tree_f.leaf_f('a')) == 0
    assert tree_f.destruct(level) == ('a', ('x', 'y'))

    describe = tree_f.match(
        lambda v: f'leaf {v}',
        lambda v, forest: f'branch {v} of {len(forest)}',
    )
    assert describe(level) == 'branch a of 2'
    assert describe(tree_f.leaf_f('b')) == 'leaf b'


def test_updates():
    level = tree_f.branch_f(1, ['x'])

    assert tree_f.set_value(level, 2) == BranchF(2, ('x',))
    assert tree_f.set_value(LeafF(1), 2) == LeafF(2)
    assert tree_f.set_forest(LeafF(1), ['y']) == BranchF(1, ('y',))
    assert tree_f.set_forest(level, []) == LeafF(1)
    assert tree_f.map_value(level, str) == BranchF('1', ('x',))


def test_fmap():
    assert tree_f.fmap(str.upper, BranchF(1, ('x', 'y'))) == \
        BranchF(1, ('X', 'Y'))
    # the value is not a child
    assert tree_f.fmap(str.upper, LeafF('x')) == LeafF('x')

    with pytest.raises(TypeError):
        tree_f.fmap(str, 'x')


def test_traverse():
    seen = []

    def f(c):
        seen.append(c)
        return Left(c) if c == 'y' else Right(c * 2)

    assert tree_f.traverse(f, BranchF(1, ('x',))) == Right(BranchF(1, ('xx',)))
    assert tree_f.traverse(f, LeafF(1)) == Right(LeafF(1))

    seen.clear()
    assert tree_f.traverse(f, BranchF(1, ('x', 'y', 'z'))) == Left('y')
    assert seen == ['x', 'y']
