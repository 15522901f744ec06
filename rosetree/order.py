"""
rosetree.order

A total order on trees given an order on their values. Orders are plain
comparison functions returning -1, 0 or 1, the kind functools.cmp_to_key
accepts.
"""
from rosetree.data import Leaf, Branch
from rosetree.either import Left, Right


def default_compare(a, b):
    return (a > b) - (a < b)


def _sign(n):
    return (n > 0) - (n < 0)


def get_order_effect(compare=default_compare):
    """
    (Tree[A], Tree[A]) -> Either[-1 | 1, None]

    Equal so far is a Right. The first difference found is a Left holding
    -1 or 1 and ends the comparison.
    """
    def compare_pair(self, that):
        match self, that:
            case Leaf(a), Leaf(b):
                return _sign(compare(a, b))
            case Leaf(), Branch():
                return -1
            case Branch(), Leaf():
                return 1
            case Branch(a, self_forest), Branch(b, that_forest):
                return (
                    _sign(compare(a, b))
                    or _sign(len(self_forest) - len(that_forest))
                )
        raise TypeError(f'not trees: {self!r}, {that!r}')

    def order(self, that):
        pairs = [(self, that)]
        while pairs:
            self, that = pairs.pop()
            c = compare_pair(self, that)
            if c != 0:
                return Left(c)
            if isinstance(self, Branch):
                pairs.extend(reversed(tuple(zip(self.forest, that.forest))))
        return Right(None)
    return order


def get_order(compare=default_compare):
    "(Tree[A], Tree[A]) -> -1 | 0 | 1"
    order = get_order_effect(compare)

    def compare_trees(self, that):
        match order(self, that):
            case Left(c):
                return c
            case _:
                return 0
    return compare_trees
