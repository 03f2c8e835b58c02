from .errors import (
    RuneLockError, InputError, SlotOutOfRange, ValueOutOfRange, CommandError,
    TerminalNodeError, InvariantViolation, AssignmentError,
    UnknownHandleError, UnknownFactError, UnknownNodeError,
)
from .ring import (
    NUM_SLOTS, NUM_VALUES, RING_SIZE, WEIGHTS,
    check_slot, check_value, value_from_human, value_name, label_name,
    same_ring, opposite, is_opposite, is_mirror, follows_closely,
    weight, rises, conductive,
)
from .assignment import Assignment
from .rules import Rule, Verdict
from .lock import RuneLock
from .view import View, SLOT_VIEW, VALUE_VIEW
from .facts import (
    Fact, FactKind, ContradictionKind, FactDb, Outcome,
    ASSUMPTION, because_of, by_rule, must_be, cannot_be,
)
from .explain import extract_explanation, format_explanation, print_explanation
from .tree import AssumptionTree

__all__ = [
    "RuneLockError", "InputError", "SlotOutOfRange", "ValueOutOfRange", "CommandError",
    "TerminalNodeError", "InvariantViolation", "AssignmentError",
    "UnknownHandleError", "UnknownFactError", "UnknownNodeError",
    "NUM_SLOTS", "NUM_VALUES", "RING_SIZE", "WEIGHTS",
    "check_slot", "check_value", "value_from_human", "value_name", "label_name",
    "same_ring", "opposite", "is_opposite", "is_mirror", "follows_closely",
    "weight", "rises", "conductive",
    "Assignment", "Rule", "Verdict", "RuneLock",
    "View", "SLOT_VIEW", "VALUE_VIEW",
    "Fact", "FactKind", "ContradictionKind", "FactDb", "Outcome",
    "ASSUMPTION", "because_of", "by_rule", "must_be", "cannot_be",
    "extract_explanation", "format_explanation", "print_explanation",
    "AssumptionTree",
]
