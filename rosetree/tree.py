"""
rosetree.tree

Building, taking apart and navigating trees one node at a time. Nothing in
here recurses into descendants: see rosetree.schemes for that.
"""
from typing import Optional, Sequence

from rosetree.data import Tree, Leaf, Branch
from rosetree.exceptions import NotABranchError


# -------------
#  Constructors
# -------------


def leaf(value) -> Leaf:
    return Leaf(value)


def branch(value, forest) -> Branch:
    "raises EmptyForestError if forest is empty"
    return Branch(value, forest)


def tree(value, forest=()) -> Tree:
    "a branch if there are any children, else a leaf"
    forest = tuple(forest)
    if forest:
        return Branch(value, forest)
    return Leaf(value)


def with_forest(forest, value) -> Tree:
    "tree with its arguments flipped"
    return tree(value, forest)


# ----------------
#  Destructuring
# ----------------


def is_leaf(self: Tree) -> bool:
    return isinstance(self, Leaf)


def is_branch(self: Tree) -> bool:
    return isinstance(self, Branch)


def match(on_leaf, on_branch):
    """
    Build a function that calls on_leaf(value) for a leaf or
    on_branch(value, forest) for a branch.
    """
    def dispatch(self):
        match self:
            case Branch(node, forest):
                return on_branch(node, forest)
            case Leaf(node):
                return on_leaf(node)
        raise TypeError(f'not a tree: {self!r}')
    return dispatch


def get_value(self: Tree):
    return self.node


def get_forest(self: Tree) -> 'tuple[Tree, ...]':
    "the children, an empty tuple for a leaf"
    if isinstance(self, Branch):
        return self.forest
    return ()


def get_branch_forest(self: Branch) -> 'tuple[Tree, ...]':
    if not isinstance(self, Branch):
        raise NotABranchError(f'a leaf has no forest: {self!r}')
    return self.forest


def length(self: Tree) -> int:
    "the number of children"
    return len(get_forest(self))


def destruct(self: Tree):
    return self.node, get_forest(self)


# --------------------
#  Single node updates
# --------------------


def set_value(self: Tree, value) -> Tree:
    match self:
        case Branch(_, forest):
            return Branch(value, forest)
        case _:
            return Leaf(value)


def set_forest(self: Tree, forest) -> Branch:
    "replace the children. A leaf becomes a branch"
    return Branch(self.node, forest)


def mod_value(self: Tree, f) -> Tree:
    return set_value(self, f(self.node))


def mod_forest(self: Tree, f) -> Tree:
    """
    replace the children with f(children). f gets an empty tuple for a leaf
    and may return an empty forest, which gives a leaf.
    """
    return tree(self.node, f(get_forest(self)))


def mod_branch(self: Tree, f) -> Tree:
    "f(self) for a branch, a leaf is returned unchanged"
    if isinstance(self, Branch):
        return f(self)
    return self


def mod_branch_forest(self: Branch, f) -> Branch:
    "like mod_forest but only for branches, f always gets a non-empty forest"
    return Branch(self.node, f(get_branch_forest(self)))


# ------------
#  Navigation
# ------------


def first_child(self: Branch) -> Tree:
    return get_branch_forest(self)[0]


def last_child(self: Branch) -> Tree:
    return get_branch_forest(self)[-1]


def nth_child(n: int, self: Tree) -> Optional[Tree]:
    """
    The nth child of the tree, or None if n is out of range or the tree is
    a leaf. Negative n counts from the end: -1 is the last child.
    """
    forest = get_forest(self)
    if n < 0:
        n += len(forest)
    if 0 <= n < len(forest):
        return forest[n]
    return None


def drill(path: Sequence[int], self: Tree) -> Optional[Tree]:
    """
    Follow the child indices in path down from the root. An empty path gives
    the tree itself, a step that falls off the tree gives None.
    """
    for n in path:
        self = nth_child(n, self)
        if self is None:
            return None
    return self
