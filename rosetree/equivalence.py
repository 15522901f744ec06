"""
rosetree.equivalence

Structural equivalence of trees given an equivalence of their values.
"""
import operator

from rosetree.either import Left, Right
from rosetree.tree import destruct


def get_equivalence_effect(equals=operator.eq):
    """
    (Tree[A], Tree[A]) -> Either[None, None]

    Compares the values, then the number of children, then the children in
    order, parents before their children. The first mismatch, at any depth,
    is a Left and nothing after it is compared.
    """
    def compare(self, that):
        pairs = [(self, that)]
        while pairs:
            self, that = pairs.pop()
            self_value, self_forest = destruct(self)
            that_value, that_forest = destruct(that)
            if not equals(self_value, that_value):
                return Left(None)
            if len(self_forest) != len(that_forest):
                return Left(None)
            # reversed, so the leftmost pair is compared next
            pairs.extend(reversed(tuple(zip(self_forest, that_forest))))
        return Right(None)
    return compare


def get_equivalence(equals=operator.eq):
    "(Tree[A], Tree[A]) -> bool"
    compare = get_equivalence_effect(equals)

    def equivalent(self, that):
        return isinstance(compare(self, that), Right)
    return equivalent
