"""
rosetree.zip

Zipping a pair of trees position by position, and unzipping a tree of
pairs.

Where the shapes differ the zip is cropped to the nodes both trees have:
if either tree has a leaf at a position, the zipped tree has a leaf there.

    zip_trees(branch('a', [leaf('b')]), leaf(1)) == leaf(('a', 1))
"""
from rosetree.data import Branch, BranchF, Leaf, LeafF
from rosetree.either import Left, Right, get_or_raise, succeed_by
from rosetree.schemes import tree_cata
from rosetree.tree import get_forest


def zip_with_effect(f):
    """
    f :: (A, B) -> Either[E, C]
    returns :: (Tree[A], Tree[B]) -> Either[E, Tree[C]]

    f runs on the parent pair before the child pairs, left to right, and
    the first Left ends the zip.
    """
    def zip_with(self, that):
        # (value, child pairs, children zipped so far) of unfinished nodes
        stack = []
        while True:
            result = f(self.node, that.node)
            if isinstance(result, Left):
                return result
            pairs = tuple(zip(get_forest(self), get_forest(that)))
            if pairs:
                stack.append((result.r, pairs, []))
                self, that = pairs[0]
                continue
            done = Leaf(result.r)
            while stack:
                value, pairs, built = stack[-1]
                built.append(done)
                if len(built) < len(pairs):
                    self, that = pairs[len(built)]
                    break
                stack.pop()
                done = Branch(value, built)
            else:
                return Right(done)
    return zip_with


def zip_with(self, that, f):
    "zip the two trees, combining values with f(a, b)"
    return get_or_raise(zip_with_effect(succeed_by(f))(self, that))


def zip_trees(self, that):
    "Tree[A], Tree[B] -> Tree[(A, B)]"
    return zip_with(self, that, lambda a, b: (a, b))


def unzip_fold(self):
    "TreeF[(A, B), (Tree[A], Tree[B])] -> (Tree[A], Tree[B])"
    match self:
        case LeafF((a, b)):
            return Leaf(a), Leaf(b)
        case BranchF((a, b), forest):
            lefts, rights = zip(*forest)
            return Branch(a, lefts), Branch(b, rights)
    raise TypeError(f'not a level of pairs: {self!r}')


# Tree[(A, B)] -> (Tree[A], Tree[B]), always of the same shape
unzip = tree_cata(unzip_fold)
