"""
Tests for explanation extraction.

Core claims:
    - The first step is the explained fact itself, at depth 0
    - Every branch ends in a rule, an assumption, or a truncation marker
    - No step goes deeper than max_depth + 1
    - Sibling facts sharing kind, value and reasons collapse into one step
    - Unknown handles raise UnknownFactError
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from runelock.core.errors import UnknownFactError
from runelock.core.explain import (
    ExplanationStep, extract_explanation, format_explanation, print_explanation,
)
from runelock.core.facts import FactDb, cannot_be, must_be
from runelock.core.lock import RuneLock
from runelock.core.rules import alwanese
from runelock.puzzles.rune_lock import RUNE_LOCK_LABELS, make_rune_lock


# ── Helpers ──────────────────────────────────────────────────────────────────

NO_RULES = RuneLock(labels=RUNE_LOCK_LABELS)


def leaves(steps):
    """Steps not followed by a deeper one."""
    found = []
    for i, step in enumerate(steps):
        nxt = steps[i + 1] if i + 1 < len(steps) else None
        if nxt is None or nxt.depth <= step.depth:
            found.append(step)
    return found


def kinds(steps):
    return [step.kind for step in steps]


def kinds_text(steps, kind):
    return " ".join(s.text for s in steps if s.kind == kind)


# ── Shapes ───────────────────────────────────────────────────────────────────

class TestShapes:
    def test_assumption_explains_itself(self):
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), NO_RULES)
        steps = extract_explanation(db, 0, NO_RULES)
        assert kinds(steps) == ["fact", "assumption"]
        assert steps[0].handles == (0,)
        assert steps[0].text == "F0: 0 must be on #1"

    def test_uniqueness_chain(self):
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), NO_RULES)
        handle = db.handle_at(1, 0)
        steps = extract_explanation(db, handle, NO_RULES)
        assert kinds(steps) == ["fact", "fact", "assumption"]
        assert [s.depth for s in steps] == [0, 1, 2]

    def test_rule_is_named(self):
        lock = RuneLock(labels=RUNE_LOCK_LABELS, rules=(alwanese(1, 2),))
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), lock)
        steps = extract_explanation(db, db.handle_at(3, 1), lock)
        rule_steps = [s for s in steps if s.kind == "rule"]
        assert [s.text for s in rule_steps] == ["Rule 0: '#1 & #2 are Alwanese'"]

    def test_rule_without_lock(self):
        lock = RuneLock(labels=RUNE_LOCK_LABELS, rules=(alwanese(1, 2),))
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), lock)
        steps = extract_explanation(db, db.handle_at(3, 1))
        assert "Rule 0" in kinds_text(steps, "rule")

    def test_siblings_are_grouped(self):
        db = FactDb()
        for slot in range(12):
            db.integrate_fact(cannot_be(slot, 5))
        outcome = db.consolidate(NO_RULES)
        steps = extract_explanation(db, outcome.contradiction, NO_RULES)
        assert kinds(steps) == ["fact", "fact", "assumption"]
        assert steps[1].handles == tuple(range(12))
        assert "#6 cannot be on 0, 1, 2" in steps[1].text

    def test_unknown_handle(self):
        with pytest.raises(UnknownFactError):
            extract_explanation(FactDb(), 3)


# ── Depth limit ──────────────────────────────────────────────────────────────

class TestDepthLimit:
    def test_zero_depth_truncates_at_once(self):
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), NO_RULES)
        steps = extract_explanation(db, db.handle_at(1, 0), NO_RULES, max_depth=0)
        assert kinds(steps) == ["fact", "truncated"]
        assert steps[1].depth == 1
        assert steps[1].handles == (0,)

    def test_leaf_reasons_survive_truncation(self):
        lock = RuneLock(labels=RUNE_LOCK_LABELS, rules=(alwanese(1, 2),))
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), lock)
        steps = extract_explanation(db, db.handle_at(3, 1), lock, max_depth=0)
        assert kinds(steps) == ["fact", "rule", "truncated"]

    @given(
        st.lists(st.tuples(st.integers(0, 11), st.integers(0, 11)), min_size=1, max_size=5),
        st.integers(min_value=0, max_value=3),
    )
    @settings(max_examples=25, deadline=None)
    def test_every_fact_explains_within_bounds(self, placements, max_depth):
        lock = make_rune_lock()
        db = FactDb()
        for slot, value in placements:
            db.integrate_and_consolidate(must_be(slot, value), lock)
        for handle in range(len(db)):
            steps = extract_explanation(db, handle, lock, max_depth)
            assert steps[0].depth == 0 and steps[0].kind == "fact"
            assert all(step.depth <= max_depth + 1 for step in steps)
            assert all(step.is_leaf_kind for step in leaves(steps))


# ── Formatting ───────────────────────────────────────────────────────────────

class TestFormatting:
    def test_format_indents_by_depth(self):
        steps = [
            ExplanationStep(0, "fact", "F2: top"),
            ExplanationStep(1, "fact", "F1: middle"),
            ExplanationStep(2, "assumption", "Fact assumed."),
        ]
        assert format_explanation(steps).splitlines() == [
            "F2: top",
            "  -> F1: middle",
            "      -> Fact assumed.",
        ]

    def test_print_explanation(self, capsys):
        db = FactDb()
        db.integrate_and_consolidate(must_be(0, 0), NO_RULES)
        print_explanation(db, 1, NO_RULES, max_depth=4)
        out = capsys.readouterr().out
        assert "EXPLANATION of F1 (depth limit 4)" in out
        assert "Fact assumed." in out
