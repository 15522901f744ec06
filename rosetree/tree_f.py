"""
rosetree.tree_f

Functions over a single tree level, TreeF[A, C]. Folders and unfolders are
written against these, never against the recursive Tree.
"""
from rosetree.data import LeafF, BranchF
from rosetree.either import Right, for_each
from rosetree.exceptions import NotABranchError


def leaf_f(value):
    return LeafF(value)


def branch_f(value, forest):
    "raises EmptyForestError if forest is empty"
    return BranchF(value, forest)


def tree_f(value, forest=()):
    "a branch if there are any children, else a leaf"
    forest = tuple(forest)
    if forest:
        return BranchF(value, forest)
    return LeafF(value)


def with_forest(forest, value):
    "tree_f with its arguments flipped"
    return tree_f(value, forest)


def is_leaf(self):
    return isinstance(self, LeafF)


def is_branch(self):
    return isinstance(self, BranchF)


def match(on_leaf, on_branch):
    """
    Build a function that calls on_leaf(value) for a leaf level or
    on_branch(value, forest) for a branch level.
    """
    def dispatch(self):
        match self:
            case BranchF(node, forest):
                return on_branch(node, forest)
            case LeafF(node):
                return on_leaf(node)
        raise TypeError(f'not a tree level: {self!r}')
    return dispatch


def get_value(self):
    return self.node


def get_forest(self):
    "the children, an empty tuple for a leaf"
    if isinstance(self, BranchF):
        return self.forest
    return ()


def get_branch_forest(self: BranchF):
    if not isinstance(self, BranchF):
        raise NotABranchError(f'a leaf has no forest: {self!r}')
    return self.forest


def length(self):
    return len(get_forest(self))


def destruct(self):
    "(value, possibly empty forest)"
    return self.node, get_forest(self)


def set_value(self, value):
    match self:
        case BranchF(_, forest):
            return BranchF(value, forest)
        case _:
            return LeafF(value)


def set_forest(self, forest):
    "an empty forest turns the level into a leaf"
    return tree_f(self.node, forest)


def map_value(self, f):
    return set_value(self, f(self.node))


# ------------------------------------
#  TreeF as a functor in its carrier
# ------------------------------------


def fmap(f, self):
    "map over the children, left to right. The value is untouched"
    match self:
        case BranchF(node, forest):
            return BranchF(node, tuple(map(f, forest)))
        case LeafF():
            return self
    raise TypeError(f'not a tree level: {self!r}')


def traverse(f, self):
    """
    like fmap, but f returns an Either. The children are visited left to
    right and the first Left is returned without visiting the rest.
    """
    match self:
        case BranchF(node, forest):
            return for_each(forest, f).map(lambda fs: BranchF(node, fs))
        case LeafF():
            return Right(self)
    raise TypeError(f'not a tree level: {self!r}')
