"""
Puzzle registry.

Each puzzle is a dict:
    make_lock:    () -> RuneLock
    description:  str
"""

from .rune_lock import make_rune_lock, make_open_lock


PUZZLES = {
    "rune_lock": {
        "make_lock":   make_rune_lock,
        "description": "The Rune Lock: twelve activations, thirteen rules",
    },
    "open": {
        "make_lock":   make_open_lock,
        "description": "Rune Lock labels without rules: pure permutation logic",
    },
}
