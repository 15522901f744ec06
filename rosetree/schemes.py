"""
rosetree.schemes

The recursion schemes of rosetree.recursion, instantiated for trees.

A folder is a function of a single level, TreeF[A, R] -> R, where the
children have already been folded into R. An unfolder goes the other way,
Seed -> TreeF[A, Seed], and says what the node at a seed looks like and
which seeds its children grow from.
"""
import logging

from rosetree import tree_f
from rosetree.data import fix, unfix
from rosetree.either import Left
from rosetree.recursion import (
    cata_f, ana_f, hylo_f, apo_f, zygo_f, cata_m_f, ana_m_f
)


logger = logging.getLogger(__name__)


# -------------------
#  Pure schemes
# -------------------


def tree_cata(folder):
    """
    Fold a tree bottom up: Tree[A] -> R.

    Children are folded depth-first, left to right, each subtree finished
    before its next sibling is started.
    """
    return cata_f(tree_f.fmap, unfix)(folder)


def tree_ana(unfolder):
    """
    Unfold a tree top down from a seed: Seed -> Tree[A].
    """
    return ana_f(tree_f.fmap, fix)(unfolder)


def tree_hylo(folder, unfolder):
    "tree_cata(folder) . tree_ana(unfolder), without building the tree"
    return hylo_f(tree_f.fmap)(folder, unfolder)


def tree_apo(unfolder):
    """
    Like tree_ana, but the unfolder returns its children as Left(seed) to
    keep unfolding or Right(tree) for a subtree that is already done.
    """
    return apo_f(tree_f.fmap, fix)(unfolder)


def tree_zygo(helper, folder):
    """
    Fold with a helper fold running alongside. folder sees each child as a
    (result, helper_result) pair.
    """
    return zygo_f(tree_f.fmap, unfix)(helper, folder)


# -------------------
#  Effectful schemes
# -------------------


def _logging_failures(name, run):
    def aux(x):
        result = run(x)
        if isinstance(result, Left):
            logger.debug('%s stopped early: %r', name, result.l)
        return result
    return aux


def tree_cata_effect(folder):
    """
    tree_cata for a folder that returns an Either: Tree[A] -> Either[E, R].

    The first Left from the folder ends the fold. No more siblings or
    descendants are folded and the Left is returned as the result.
    """
    return _logging_failures(
        'tree_cata_effect', cata_m_f(tree_f.traverse, unfix)(folder)
    )


def tree_ana_effect(unfolder):
    """
    tree_ana for an unfolder that returns an Either:
    Seed -> Either[E, Tree[A]]. Stops at the first Left.
    """
    return _logging_failures(
        'tree_ana_effect', ana_m_f(tree_f.traverse, fix)(unfolder)
    )


# ------------------------
#  Building folders
# ------------------------


def annotate_folder(folder):
    """
    Turn a folder into one that keeps the tree and pairs every node with
    what folder computed for its subtree: Tree[A] -> Tree[(A, R)]
    """
    def annotate(self):
        result = folder(tree_f.fmap(lambda t: t.node[1], self))
        return fix(tree_f.set_value(self, (self.node, result)))
    return annotate


def by_parent_unfold(children):
    "an unfolder from a function that lists the children of a value"
    return lambda value: tree_f.tree_f(value, children(value))
