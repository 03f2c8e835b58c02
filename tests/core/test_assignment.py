"""
Tests for Assignment.

Core claims:
    - value_at and slot_of are always mutual inverses
    - assign() evicts the old pairing on either side
    - from_pairs() refuses a repeated value or slot (AssignmentError)
    - probe() is lenient: later pairs win
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from runelock.core.assignment import Assignment
from runelock.core.errors import AssignmentError, InvariantViolation


pairs = st.lists(
    st.tuples(st.integers(min_value=0, max_value=11), st.integers(min_value=0, max_value=11)),
    max_size=30,
)


def assert_inverse(assignment):
    for slot, value in enumerate(assignment.value_at):
        if value is not None:
            assert assignment.slot_of[value] == slot
    for value, slot in enumerate(assignment.slot_of):
        if slot is not None:
            assert assignment.value_at[slot] == value


class TestAssign:
    def test_empty(self):
        a = Assignment()
        assert len(a) == 0
        assert a[0] is None
        assert a.position_of(0) is None
        assert not a.is_complete

    def test_assign_both_directions(self):
        a = Assignment()
        a.assign(3, 7)
        assert a[3] == 7
        assert a.position_of(7) == 3
        assert 7 in a
        assert 6 not in a

    def test_reassigning_value_evicts_old_slot(self):
        a = Assignment()
        a.assign(3, 7)
        a.assign(5, 7)
        assert a[3] is None
        assert a[5] == 7
        assert len(a) == 1

    def test_assigning_occupied_slot_evicts_old_value(self):
        a = Assignment()
        a.assign(3, 7)
        a.assign(3, 8)
        assert a.position_of(7) is None
        assert a[3] == 8

    @given(pairs)
    def test_assign_keeps_arrays_inverse(self, ps):
        a = Assignment()
        for slot, value in ps:
            a.assign(slot, value)
            assert_inverse(a)

    def test_complete(self):
        a = Assignment.from_pairs((s, 11 - s) for s in range(12))
        assert a.is_complete
        assert len(a) == 12


class TestFromPairs:
    def test_duplicate_value_raises(self):
        with pytest.raises(AssignmentError):
            Assignment.from_pairs([(0, 4), (1, 4)])

    def test_duplicate_slot_raises(self):
        with pytest.raises(AssignmentError):
            Assignment.from_pairs([(0, 4), (0, 5)])

    def test_assignment_error_is_an_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            Assignment.from_pairs([(2, 1), (3, 1)])

    def test_pairs_round_trip(self):
        a = Assignment.from_pairs([(0, 4), (6, 1)])
        assert a.pairs() == [(0, 4), (6, 1)]

    def test_probe_later_pair_wins(self):
        a = Assignment.probe([(0, 4), (0, 5)])
        assert a[0] == 5
        assert 4 not in a
