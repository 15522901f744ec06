"""
rosetree

Immutable rose trees, and the folds and unfolds to work with them.
"""
import logging

from rosetree.data import Tree, Leaf, Branch, LeafF, BranchF, fix, unfix  # noqa: F401
from rosetree.either import Left, Right  # noqa: F401
from rosetree.exceptions import (  # noqa: F401
    RoseTreeError, EmptyForestError, NotABranchError, ArbitraryOptionsError,
    DecodeError,
)
from rosetree.tree import (  # noqa: F401
    leaf, branch, tree, with_forest, is_leaf, is_branch, match, length,
    get_value, get_forest, get_branch_forest, destruct, set_value, set_forest,
    mod_value, mod_forest, mod_branch, mod_branch_forest, first_child,
    last_child, nth_child, drill,
)
from rosetree.schemes import (  # noqa: F401
    tree_cata, tree_ana, tree_hylo, tree_apo, tree_zygo, tree_cata_effect,
    tree_ana_effect, annotate_folder, by_parent_unfold,
)
from rosetree.traversable import (  # noqa: F401
    DepthFirst, traverse_effect, map_effect, map_effect_pre, traverse,
    sequence, sequence_effect, fmap, flap,
)
from rosetree.equivalence import get_equivalence  # noqa: F401
from rosetree.order import get_order  # noqa: F401
from rosetree.monad import of, flatten, flat_map, flat_map_effect  # noqa: F401
from rosetree.applicative import product, product_many, product_all  # noqa: F401
from rosetree.foldable import Monoid, reduce, fold_map, every, some, xor, eqv  # noqa: F401
from rosetree.counts import (  # noqa: F401
    node_count, maximum_node_height, maximum_node_degree, count_of,
    node_count_at_least,
)
from rosetree.levels import (  # noqa: F401
    annotate_depth, annotate_level_labels, add_level_labels, crop_depth,
    levels, grow_leaves, binary_tree,
)
from rosetree.zip import zip_trees, zip_with, zip_with_effect, unzip  # noqa: F401


logging.getLogger(__name__).addHandler(logging.NullHandler())
