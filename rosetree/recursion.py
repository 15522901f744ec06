"""
rosetree.recursion

Recursion schemes over any functor. Each combinator takes the functor's
`fmap(f, fa)` (and, for the effectful ones, its `traverse(f, fa)` into
`Either`) and returns the scheme. `rosetree.schemes` instantiates them for
TreeF.

Most of these are derived from the slides of Tim Williams' talk
https://github.com/willtim/recursion-schemes/
"""
from rosetree.either import Left, Right, fan_in
from rosetree.util import identity


def fan_out(f, g):
    """
    (&&&) :: (b -> c) -> (b -> c’) -> b -> (c, c’)
    (f &&& g) x = (f x, g x)
    """
    return lambda x: (f(x), g(x))


def cata_f(fmap, unfix=identity):
    """
    generalised fold-right over any functor.

    cata alg = alg . fmap (cata alg) . unfix

    The children are folded in the order fmap visits them, before alg
    sees the level they belong to.
    """
    def cata(alg):
        def run(fa):
            return alg(fmap(run, unfix(fa)))
        return run
    return cata


def ana_f(fmap, fix=identity):
    """
    generalised unfold.

    ana :: Functor f => (a -> f a) -> a -> Fix f
    ana coalg = Fix . fmap (ana coalg) . coalg

    coalg decides the shape of a level before any of the seeds it
    returns are unfolded.
    """
    def ana(coalg):
        def run(a):
            return fix(fmap(run, coalg(a)))
        return run
    return ana


def hylo_f(fmap):
    """
    unfold and then fold

    hylo :: Functor f => (f b -> b) -> (a -> f a) -> a -> b
    hylo g h = cata g . ana h
    <=>
    hylo f g = f . fmap (hylo f g) . g
    """
    # the second, fused version never builds the intermediate structure
    def hylo(alg, coalg):
        def run(a):
            return alg(fmap(run, coalg(a)))
        return run
    return hylo


def apo_f(fmap, fix=identity):
    """
    shortcutting anamorphism: coa may return a finished subtree in a Right
    instead of a seed in a Left.

    apo :: Fixpoint f t => (a -> f (Either a t)) -> a -> t
    apo coa = inF . fmap (apo coa ||| id) . coa
    """
    def apo(coa):
        def run(a):
            return fix(fmap(fan_in(run, identity), coa(a)))
        return run
    return apo


def zygo_f(fmap, unfix=identity):
    """
    zygomorphism: a catamorphism with a helper fold running alongside.

    zygo :: Functor f =>
            (f b -> b) -> (f (a, b) -> a) -> Fix f -> a
    zygo f g = fst . cata (g &&& f . fmap snd)
    """
    cata = cata_f(fmap, unfix)

    def snd(pair):
        return pair[1]

    def zygo(helper, alg):
        both = cata(fan_out(alg, lambda fab: helper(fmap(snd, fab))))
        return lambda fa: both(fa)[0]
    return zygo


# The effectful schemes below keep an explicit stack of unfinished levels
# instead of recursing. A level waits on the stack as its holes: the level
# with every child replaced by its index.


def _holes(traverse, fa):
    "(fa with each child replaced by its index, [child, ...])"
    children = []

    def collect(child):
        children.append(child)
        return Right(len(children) - 1)
    return traverse(collect, fa).r, children


def _fill(traverse, holes, results):
    return traverse(lambda i: Right(results[i]), holes).r


def cata_m_f(traverse, unfix=identity):
    """
    monadic catamorphism into Either.

    cataM alg = alg <=< traverse (cataM alg) . unfix

    Children are folded left to right, each finished before the next is
    started. The first Left from alg is the result and nothing more is
    folded.
    """
    def cata(alg):
        def run(fa):
            stack = []
            while True:
                holes, children = _holes(traverse, unfix(fa))
                if children:
                    stack.append((holes, children, []))
                    fa = children[0]
                    continue
                result = alg(_fill(traverse, holes, []))
                while True:
                    if isinstance(result, Left) or not stack:
                        return result
                    holes, children, results = stack[-1]
                    results.append(result.r)
                    if len(results) < len(children):
                        fa = children[len(results)]
                        break
                    stack.pop()
                    result = alg(_fill(traverse, holes, results))
        return run
    return cata


def ana_m_f(traverse, fix=identity):
    """
    monadic anamorphism into Either.

    anaM coalg = fmap fix . traverse (anaM coalg) <=< coalg

    coalg sees a seed before any of the seeds it returns, and those are
    unfolded left to right. The first Left from coalg is the result.
    """
    def ana(coalg):
        def run(a):
            stack = []
            while True:
                fa = coalg(a)
                if isinstance(fa, Left):
                    return fa
                holes, seeds = _holes(traverse, fa.r)
                if seeds:
                    stack.append((holes, seeds, []))
                    a = seeds[0]
                    continue
                done = fix(_fill(traverse, holes, []))
                while stack:
                    holes, seeds, built = stack[-1]
                    built.append(done)
                    if len(built) < len(seeds):
                        a = seeds[len(built)]
                        break
                    stack.pop()
                    done = fix(_fill(traverse, holes, built))
                else:
                    return Right(done)
        return run
    return ana
