"""
Tests for the Rune Lock instance and the puzzle registry.

Core claims:
    - the instance carries twelve runes and thirteen rules in fixed order
    - a first assumption propagates through rules and rune labels
    - an assumption no rule can live with dies on propagation alone
"""

from runelock.core.facts import ContradictionKind, FactKind, because_of, by_rule
from runelock.core.lock import RuneLock
from runelock.core.view import VALUE_VIEW
from runelock.puzzles import PUZZLES
from runelock.puzzles.rune_lock import (
    RUNE_LOCK_LABELS, RUNE_LOCK_RULES, Z, V, S, C, make_rune_lock, make_open_lock,
)
from runelock.solver import FactualSolver, NodeStatus


class TestInstance:
    def test_labels(self):
        assert RUNE_LOCK_LABELS == (Z, S, V, C, S, V, C, S, V, Z, S, V)

    def test_rules_in_order(self):
        names = [rule.name for rule in RUNE_LOCK_RULES]
        assert len(names) == 13
        assert names[0] == "#1 & #2 are Alwanese"
        assert names[8] == "#10 & #11 increase Santor"
        assert names[12] == "V immediately follows Z"

    def test_describe(self):
        text = make_rune_lock().describe()
        assert text.startswith("Rune Lock: labels Z S V C S V C S V Z S V")
        assert "  Rule 12: V immediately follows Z" in text

    def test_open_lock_has_no_rules(self):
        assert make_open_lock().rules == ()

    def test_registry(self):
        assert set(PUZZLES) == {"rune_lock", "open"}
        for puzzle in PUZZLES.values():
            assert isinstance(puzzle["make_lock"](), RuneLock)
            assert puzzle["description"]


class TestPropagation:
    def test_first_activation_on_z(self):
        """#1 on slot 0: #2 must follow closely and sit on a V rune."""
        solver = FactualSolver(make_rune_lock())
        assert solver.assume(0, 0) is NodeStatus.ALIVE
        facts = solver.facts
        assert set(facts.candidates(VALUE_VIEW, 1)) == {2, 8}
        # slot 7 follows closely but carries an S
        assert facts.fact_at(7, 1).reasons == (because_of(0), by_rule(12))
        assert facts.fact_at(5, 1).reasons == (because_of(0), by_rule(0))

    def test_heaviest_slot_cannot_start_an_increase(self):
        solver = FactualSolver(make_rune_lock())
        assert solver.assume(9, 0) is NodeStatus.CONTRADICTED
        fact = solver.facts.get(solver.node.contradiction)
        assert fact.kind is FactKind.CONTRADICTION
        assert fact.contradiction is ContradictionKind.NO_OPTIONS_LEFT
        assert fact.value == 10
