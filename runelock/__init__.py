"""
runelock: a justification-keeping deduction assistant for the Rune Lock.

Twelve activations go into twelve rune slots on two rings. Every fact the
engine learns remembers why it holds; every assumption branches a tree of
fact databases that can be revisited, and every fact can be explained
back to rules and assumptions.

Usage:
    python -m runelock                        interactive session
    python -m runelock --script moves.txt     replay commands from a file
    python -m runelock --puzzle open          no rules, permutation logic only
"""

from .core.lock import RuneLock
from .core.facts import FactDb, Fact, FactKind, ContradictionKind, Outcome
from .core.explain import extract_explanation, format_explanation, print_explanation
from .core.view import SLOT_VIEW, VALUE_VIEW
from .solver import FactualSolver, NodeStatus
from .commands import parse, execute
from .puzzles import PUZZLES

__all__ = [
    "RuneLock",
    "FactDb", "Fact", "FactKind", "ContradictionKind", "Outcome",
    "extract_explanation", "format_explanation", "print_explanation",
    "SLOT_VIEW", "VALUE_VIEW",
    "FactualSolver", "NodeStatus",
    "parse", "execute",
    "PUZZLES",
]
