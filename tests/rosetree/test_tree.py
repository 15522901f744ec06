import pytest

from rosetree.data import Leaf, Branch
from rosetree.exceptions import EmptyForestError, NotABranchError
from rosetree.testing import NUMERIC_TREE, STRING_TREE
from rosetree.tree import (
    leaf, branch, tree, with_forest, is_leaf, is_branch, match,
    get_value, get_forest, get_branch_forest, length, destruct,
    set_value, set_forest, mod_value, mod_forest, mod_branch,
    mod_branch_forest, first_child, last_child, nth_child, drill,
)


ABC = branch('a', [leaf('b'), leaf('c'), leaf('d')])


# -------------
#  Constructors
# -------------


def test_leaf_and_branch():
    assert leaf(1) == Leaf(1)
    assert branch(1, [leaf(2)]) == Branch(1, [Leaf(2)])

    with pytest.raises(EmptyForestError) as exc_info:
        branch('x', [])
    assert exc_info.value.value == 'x'


def test_tree():
    assert tree(1) == leaf(1)
    assert tree(1, []) == leaf(1)
    assert tree(1, [leaf(2)]) == branch(1, [leaf(2)])
    assert with_forest([], 1) == leaf(1)
    assert with_forest([leaf(2)], 1) == branch(1, [leaf(2)])


# ----------------
#  Destructuring
# ----------------


def test_predicates():
    assert is_leaf(leaf(1))
    assert not is_leaf(ABC)
    assert is_branch(ABC)
    assert not is_branch(leaf(1))


def test_match():
    count_children = match(lambda v: 0, lambda v, forest: len(forest))
    assert count_children(leaf(1)) == 0
    assert count_children(ABC) == 3

    with pytest.raises(TypeError):
        count_children('not a tree')


def test_accessors():
    assert get_value(ABC) == 'a'
    assert get_value(leaf(1)) == 1
    assert get_forest(ABC) == (leaf('b'), leaf('c'), leaf('d'))
    assert get_forest(leaf(1)) == ()
    assert get_branch_forest(ABC) == get_forest(ABC)
    assert length(ABC) == 3
    assert length(leaf(1)) == 0
    assert destruct(leaf(1)) == (1, ())
    assert destruct(ABC) == ('a', get_forest(ABC))

    with pytest.raises(NotABranchError):
        get_branch_forest(leaf(1))


# --------------------
#  Single node updates
# --------------------


def test_set_value():
    assert set_value(leaf(1), 2) == leaf(2)
    assert set_value(ABC, 'z') == branch('z', get_forest(ABC))
    # the input tree is untouched
    assert get_value(ABC) == 'a'


def test_set_forest():
    assert set_forest(leaf(1), [leaf(2)]) == branch(1, [leaf(2)])
    assert set_forest(ABC, [leaf('x')]) == branch('a', [leaf('x')])

    with pytest.raises(EmptyForestError):
        set_forest(ABC, [])


def test_mod_value():
    assert mod_value(ABC, str.upper) == branch('A', get_forest(ABC))
    assert mod_value(leaf(1), lambda x: x + 1) == leaf(2)


def test_mod_forest():
    assert mod_forest(ABC, lambda f: f[::-1]) == \
        branch('a', [leaf('d'), leaf('c'), leaf('b')])
    assert mod_forest(ABC, lambda f: ()) == leaf('a')
    assert mod_forest(leaf(1), lambda f: f + (leaf(2),)) == \
        branch(1, [leaf(2)])


def test_mod_branch():
    def drop_first(t):
        return mod_forest(t, lambda f: f[1:])

    assert mod_branch(ABC, drop_first) == \
        branch('a', [leaf('c'), leaf('d')])
    assert mod_branch(leaf(1), drop_first) == leaf(1)

    assert mod_branch_forest(ABC, lambda f: f[:1]) == \
        branch('a', [leaf('b')])
    with pytest.raises(NotABranchError):
        mod_branch_forest(leaf(1), lambda f: f)


# ------------
#  Navigation
# ------------


def test_first_and_last_child():
    assert first_child(ABC) == leaf('b')
    assert last_child(ABC) == leaf('d')
    only_child = branch(1, [leaf(2)])
    assert first_child(only_child) == last_child(only_child)

    with pytest.raises(NotABranchError):
        first_child(leaf(1))
    with pytest.raises(NotABranchError):
        last_child(leaf(1))


def test_nth_child():
    assert nth_child(0, ABC) == leaf('b')
    assert nth_child(2, ABC) == leaf('d')
    assert nth_child(3, ABC) is None

    assert nth_child(-1, ABC) == leaf('d')
    assert nth_child(-3, ABC) == leaf('b')
    assert nth_child(-4, ABC) is None

    assert nth_child(0, leaf(1)) is None
    assert nth_child(-1, leaf(1)) is None


def test_drill():
    assert drill([], STRING_TREE) is STRING_TREE
    assert drill([], leaf(1)) == leaf(1)

    assert get_value(drill([2, 1], STRING_TREE)) == 'h'
    assert get_value(drill([2, 1, 1], STRING_TREE)) == 'j'
    assert get_value(drill([1, 2, 0], NUMERIC_TREE)) == 9
    assert drill([-2, -1], NUMERIC_TREE) == branch(11, [leaf(9)])

    assert drill([5], NUMERIC_TREE) is None
    assert drill([0, 0, 0], NUMERIC_TREE) is None
    assert drill([0], leaf(1)) is None
