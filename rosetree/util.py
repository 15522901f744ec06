from itertools import zip_longest


def identity(x):
    return x


def const(x):
    "const(x)(anything) == x"
    return lambda *_, **__: x


_MISSING = object()


def transpose(rows):
    """
    transpose a ragged list of rows, skipping the holes:
    [[1, 2], [3], [4, 5, 6]] -> [[1, 3, 4], [2, 5], [6]]
    """
    return [
        [x for x in column if x is not _MISSING]
        for column in zip_longest(*rows, fillvalue=_MISSING)
    ]
