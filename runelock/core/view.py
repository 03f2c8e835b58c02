"""
Views: read the fact grid along either axis.

The grid is indexed grid[slot][value]. A line is one row or one column:

    SLOT_VIEW   line = a slot,  offsets run over values
    VALUE_VIEW  line = a value, offsets run over slots

Uniqueness reasoning is the same on both axes ("each slot holds exactly
one value", "each value sits in exactly one slot"), so it is written once
against a View and run twice.
"""

from dataclasses import dataclass

from .ring import value_name


@dataclass(frozen=True)
class View:
    axis: str  # "slot" or "value"

    def cell(self, line: int, offset: int) -> tuple:
        """(slot, value) of the offset-th cell along a line."""
        if self.axis == "slot":
            return line, offset
        return offset, line

    def count_lines(self, num_slots: int, num_values: int) -> int:
        return num_slots if self.axis == "slot" else num_values

    def line_length(self, num_slots: int, num_values: int) -> int:
        return num_values if self.axis == "slot" else num_slots

    def describe(self, index: int) -> str:
        if self.axis == "slot":
            return f"slot {index}"
        return value_name(index)


SLOT_VIEW = View("slot")
VALUE_VIEW = View("value")
