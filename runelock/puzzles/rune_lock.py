"""
Puzzle: the Rune Lock.

Twelve runes on two rings, twelve activations to place. Runes:

    outer   Z S V C S V      (slots 0..5)
    inner   C S V Z S V      (slots 6..11)

Thirteen rules, numbered from 0 in the order below; justifications cite
them by that number.
"""

from ..core.lock import RuneLock
from ..core.rules import (
    alwanese, antakian_conjugates, alwanese_conjugates, different_runes,
    antakian_twins, increase_santor, rune_follows,
)


Z, V, S, C = 0, 1, 2, 3

RUNE_LOCK_LABELS = (
    Z, S, V, C, S, V,
    C, S, V, Z, S, V,
)

RUNE_LOCK_RULES = (
    alwanese(1, 2),
    antakian_conjugates(2, 3),
    alwanese(3, 4),
    alwanese_conjugates(6, 7),
    antakian_conjugates(6, 8),
    different_runes(7, 8),
    alwanese(9, 10),
    antakian_twins(9, 10),
    increase_santor(10, 11),
    increase_santor(11, 12),
    antakian_twins(8, 10),
    alwanese(1, 12),
    rune_follows(Z, V),
)


def make_rune_lock() -> RuneLock:
    return RuneLock(labels=RUNE_LOCK_LABELS, rules=RUNE_LOCK_RULES, name="Rune Lock")


def make_open_lock() -> RuneLock:
    """Same runes, no rules: only the one-value-per-slot logic applies."""
    return RuneLock(labels=RUNE_LOCK_LABELS, rules=(), name="Open Lock")
