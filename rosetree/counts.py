"""
rosetree.counts

Counting nodes and measuring trees. Each measure is a folder, and a fold
made from it with tree_cata.
"""
from rosetree import tree_f
from rosetree.either import Left, Right
from rosetree.schemes import tree_cata, tree_cata_effect


# -------------
#  Folders
# -------------


# the subtree's node count
descendant_count_fold = tree_f.match(
    on_leaf=lambda _: 1,
    on_branch=lambda _, forest: sum(forest) + 1,
)

# the height of the subtree, a leaf has height 1
maximum_height_fold = tree_f.match(
    on_leaf=lambda _: 1,
    on_branch=lambda _, forest: max(forest) + 1,
)

# the largest child count in the subtree
maximum_degree_fold = tree_f.match(
    on_leaf=lambda _: 0,
    on_branch=lambda _, forest: max(len(forest), *forest),
)

# the child count of the node itself
degree_fold = tree_f.length


def count_of_fold(predicate):
    "the number of values in the subtree that satisfy predicate"
    return tree_f.match(
        on_leaf=lambda value: 1 if predicate(value) else 0,
        on_branch=lambda value, forest:
            (1 if predicate(value) else 0) + sum(forest),
    )


def node_count_at_least_fold(at_least):
    """
    an effectful descendant_count_fold that fails with the count as soon
    as any subtree has at least at_least nodes
    """
    def fold(self):
        count = descendant_count_fold(self)
        if count >= at_least:
            return Left(count)
        return Right(count)
    return fold


# -------------
#  Folds
# -------------


node_count = tree_cata(descendant_count_fold)
maximum_node_height = tree_cata(maximum_height_fold)
maximum_node_degree = tree_cata(maximum_degree_fold)


def count_of(predicate):
    return tree_cata(count_of_fold(predicate))


def node_count_at_least(at_least):
    """
    Tree[A] -> bool. Stops counting once the count is reached instead of
    visiting the whole tree.
    """
    fold = tree_cata_effect(node_count_at_least_fold(at_least))
    return lambda self: isinstance(fold(self), Left)
