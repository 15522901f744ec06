"""
rosetree.codec

Trees as nested lists, a format that is easy to write by hand and to put
through json:

    leaf(1)                          <-> [1]
    branch(1, [leaf(2), leaf(3)])    <-> [1, [[2], [3]]]

Like any codec, it is a single level encoder, a folder, and a single level
decoder, an unfolder. The recursion is left to tree_cata and tree_ana.
"""
from rosetree import tree_f
from rosetree.data import BranchF
from rosetree.either import Left, Right, get_or_raise
from rosetree.exceptions import DecodeError
from rosetree.schemes import tree_ana, tree_ana_effect, tree_cata


def encode_fold(self):
    "TreeF[A, list] -> list"
    match self:
        case BranchF(node, forest):
            return [node, list(forest)]
        case _:
            return [self.node]


def decode_effect_unfold(encoded):
    "list -> Either[DecodeError, TreeF[A, list]]"
    match encoded:
        case [node]:
            return Right(tree_f.leaf_f(node))
        case [node, [_, *_] as forest]:
            return Right(tree_f.branch_f(node, forest))
        case [_, []]:
            return Left(DecodeError('a branch needs children', encoded))
    return Left(DecodeError(
        'expected [value] or [value, [child, ...]]', encoded
    ))


def decode_unfold(encoded):
    "list -> TreeF[A, list], raises DecodeError for a malformed level"
    return get_or_raise(decode_effect_unfold(encoded))


# Tree[A] -> list
encode = tree_cata(encode_fold)

# list -> Tree[A]
decode = tree_ana(decode_unfold)

# list -> Either[DecodeError, Tree[A]], nothing is raised
decode_effect = tree_ana_effect(decode_effect_unfold)
