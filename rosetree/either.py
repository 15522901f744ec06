"""
rosetree.either

The effect used by the effect-aware runners: a computation either failed
with a `Left` or succeeded with a `Right`. Sequencing stops at the first
`Left`, which is all the short-circuiting in this library comes down to.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar


L = TypeVar('L')
R = TypeVar('R')


@dataclass(frozen=True, slots=True)
class Left(Generic[L, R]):
    l: L

    def is_left(self):
        return True

    def is_right(self):
        return False

    def map(self, f):
        return self

    def flat_map(self, f):
        return self

    def map_left(self, f):
        return Left(f(self.l))

    def get_or_else(self, default):
        return default


@dataclass(frozen=True, slots=True)
class Right(Generic[L, R]):
    r: R

    def is_left(self):
        return False

    def is_right(self):
        return True

    def map(self, f):
        return Right(f(self.r))

    def flat_map(self, f):
        return f(self.r)

    def map_left(self, f):
        return self

    def get_or_else(self, default):
        return self.r


Either = Left[L, R] | Right[L, R]


def succeed(r):
    return Right(r)


def fail(l=None):
    return Left(l)


def succeed_by(f):
    "lift a plain function into one that always succeeds"
    return lambda *args: Right(f(*args))


def fan_in(on_left, on_right):
    """
    (|||) ::: (b -> d) -> (c -> d) -> Either b c -> d
    (|||) = either
    """
    def aux(either_b_or_c):
        match either_b_or_c:
            case Left(b):
                return on_left(b)
            case Right(c):
                return on_right(c)
        raise TypeError(f'not an Either: {either_b_or_c!r}')
    return aux


def for_each(xs, f):
    """
    run f over xs left to right, collecting the successes into a tuple.
    The first Left is returned as is and the remaining xs are never looked at.
    """
    results = []
    for x in xs:
        match f(x):
            case Right(r):
                results.append(r)
            case Left() as failure:
                return failure
            case other:
                raise TypeError(f'not an Either: {other!r}')
    return Right(tuple(results))


def get_or_raise(either):
    "unwrap a Right, raise for a Left. For effects that are known not to fail."
    match either:
        case Right(r):
            return r
        case Left(l) if isinstance(l, BaseException):
            raise l
        case Left(l):
            raise ValueError(f'unexpected failure: {l!r}')
