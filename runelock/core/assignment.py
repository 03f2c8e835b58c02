"""
Assignment: a partial, injective slot <-> value mapping.

Kept as two inverse arrays so both directions are O(1):
    value_at[slot]  -> value or None
    slot_of[value]  -> slot or None

Two ways in:
    from_pairs()  strict. A repeated slot or value is a broken invariant
                  and raises AssignmentError.
    probe()       lenient. Later pairs evict earlier ones, like assign().
                  Only for throwaway validity checks.
"""

from .errors import AssignmentError
from .ring import NUM_SLOTS, NUM_VALUES, value_name


class Assignment:
    def __init__(self, num_slots: int = NUM_SLOTS, num_values: int = NUM_VALUES):
        self.value_at = [None] * num_slots
        self.slot_of = [None] * num_values

    @classmethod
    def from_pairs(cls, pairs) -> "Assignment":
        assignment = cls()
        for slot, value in pairs:
            if assignment.slot_of[value] is not None:
                raise AssignmentError(
                    f"Value {value_name(value)} was assigned twice, to "
                    f"{assignment.slot_of[value]} and {slot}"
                )
            if assignment.value_at[slot] is not None:
                raise AssignmentError(
                    f"Slot {slot} was assigned twice, to "
                    f"{value_name(assignment.value_at[slot])} and {value_name(value)}"
                )
            assignment.value_at[slot] = value
            assignment.slot_of[value] = slot
        return assignment

    @classmethod
    def probe(cls, pairs) -> "Assignment":
        assignment = cls()
        for slot, value in pairs:
            assignment.assign(slot, value)
        return assignment

    def assign(self, slot: int, value: int):
        """Place value at slot, evicting whatever either side held before."""
        old_slot = self.slot_of[value]
        if old_slot is not None:
            self.value_at[old_slot] = None
        old_value = self.value_at[slot]
        if old_value is not None:
            self.slot_of[old_value] = None
        self.slot_of[value] = slot
        self.value_at[slot] = value

    def position_of(self, value: int):
        return self.slot_of[value]

    def pairs(self) -> list:
        return [(slot, value) for slot, value in enumerate(self.value_at)
                if value is not None]

    @property
    def is_complete(self) -> bool:
        return all(value is not None for value in self.value_at)

    def __getitem__(self, slot: int):
        return self.value_at[slot]

    def __contains__(self, value) -> bool:
        return 0 <= value < len(self.slot_of) and self.slot_of[value] is not None

    def __len__(self) -> int:
        return sum(1 for value in self.value_at if value is not None)

    def __eq__(self, other):
        return isinstance(other, Assignment) and self.value_at == other.value_at

    def __repr__(self):
        placed = ", ".join(f"{s}={value_name(v)}" for s, v in self.pairs())
        return f"Assignment({placed})"
