"""
Rules: named binary relations between two values (or two labels).

A value rule relates two values through the slots they end up in:
"#9 & #10 are Alwanese" holds when slot_of(#10) closely follows
slot_of(#9). The label rule "V immediately follows Z" looks at every
Z-labelled slot, takes the value there, and requires the next value up
to sit on a V slot.

Checking a rule against a partial assignment gives one of three verdicts:
    OK             nothing wrong yet
    VIOLATED       both ends placed and the relation fails
    UNFULFILLABLE  one end placed and the other end can no longer be
                   placed anywhere that satisfies the relation

Rule kinds and their relations (see ring.py):
    alwanese             follows_closely(first, second)
    antakian_conjugates  is_opposite      -- unfulfillable if partner slot taken
    alwanese_conjugates  is_mirror
    different_runes      labels differ
    antakian_twins       same_ring
    increase_santor      rises            -- unfulfillable at extreme weights
    max_0_conductive     conductive
    rune_follows         label adjacency over consecutive values
"""

from dataclasses import dataclass
from enum import Enum

from .assignment import Assignment
from .ring import (
    NUM_VALUES, MAX_WEIGHT, MIN_WEIGHT,
    follows_closely, is_opposite, is_mirror, same_ring, rises, conductive,
    opposite, weight, value_from_human, value_name, label_name,
)


class Verdict(Enum):
    OK = "ok"
    VIOLATED = "violated"
    UNFULFILLABLE = "unfulfillable"


ALWANESE = "alwanese"
ANTAKIAN_CONJUGATES = "antakian_conjugates"
ALWANESE_CONJUGATES = "alwanese_conjugates"
DIFFERENT_RUNES = "different_runes"
ANTAKIAN_TWINS = "antakian_twins"
INCREASE_SANTOR = "increase_santor"
MAX_0_CONDUCTIVE = "max_0_conductive"
RUNE_FOLLOWS = "rune_follows"


def _partner_taken(assignment, one, two) -> bool:
    placed = one if one is not None else two
    return assignment[opposite(placed)] is not None


def _weight_exhausted(assignment, one, two) -> bool:
    if one is not None:
        return weight(one) == MAX_WEIGHT
    return weight(two) == MIN_WEIGHT


# kind -> (relation(lock, slot_one, slot_two), template, blocker or None)
VALUE_RULE_KINDS = {
    ALWANESE: (
        lambda lock, one, two: follows_closely(one, two),
        "{} & {} are Alwanese", None),
    ANTAKIAN_CONJUGATES: (
        lambda lock, one, two: is_opposite(one, two),
        "{} & {} are Antakian Conjugates", _partner_taken),
    ALWANESE_CONJUGATES: (
        lambda lock, one, two: is_mirror(one, two),
        "{} & {} are Alwanese Conjugates", None),
    DIFFERENT_RUNES: (
        lambda lock, one, two: lock.label_of(one) != lock.label_of(two),
        "{} & {} are Different Runes", None),
    ANTAKIAN_TWINS: (
        lambda lock, one, two: same_ring(one, two),
        "{} & {} are Antakian Twins", None),
    INCREASE_SANTOR: (
        lambda lock, one, two: rises(one, two),
        "{} & {} increase Santor", _weight_exhausted),
    MAX_0_CONDUCTIVE: (
        lambda lock, one, two: conductive(one, two),
        "{} & {} are max 0 Conductive", None),
}


@dataclass(frozen=True)
class Rule:
    """
    One puzzle rule. For value rules first/second are value indices, for
    RUNE_FOLLOWS they are labels. Rules are cited in justifications by
    their index in the lock's rule list.
    """
    kind: str
    first: int
    second: int

    @property
    def is_label_rule(self) -> bool:
        return self.kind == RUNE_FOLLOWS

    @property
    def name(self) -> str:
        if self.is_label_rule:
            return f"{label_name(self.second)} immediately follows {label_name(self.first)}"
        template = VALUE_RULE_KINDS[self.kind][1]
        return template.format(value_name(self.first), value_name(self.second))

    def counterparts(self, value: int) -> list:
        """Values whose placement this rule constrains once `value` is placed."""
        if self.is_label_rule:
            return [v for v in (value - 1, value + 1) if 0 <= v < NUM_VALUES]
        if value == self.first:
            return [self.second]
        if value == self.second:
            return [self.first]
        return []

    def validate(self, lock, assignment: Assignment) -> Verdict:
        if self.is_label_rule:
            return self._validate_label_follows(lock, assignment)

        relation, _, blocker = VALUE_RULE_KINDS[self.kind]
        one = assignment.position_of(self.first)
        two = assignment.position_of(self.second)
        if one is not None and two is not None:
            return Verdict.OK if relation(lock, one, two) else Verdict.VIOLATED
        if one is None and two is None:
            return Verdict.OK
        if blocker is not None and blocker(assignment, one, two):
            return Verdict.UNFULFILLABLE
        return Verdict.OK

    def validate_pair(self, lock, a: tuple, b: tuple) -> Verdict:
        """Check the rule against just two (slot, value) placements."""
        return self.validate(lock, Assignment.probe([a, b]))

    def _validate_label_follows(self, lock, assignment) -> Verdict:
        for slot, label in enumerate(lock.labels):
            if label != self.first:
                continue
            value = assignment[slot]
            if value is None:
                continue
            if value + 1 >= NUM_VALUES:
                return Verdict.UNFULFILLABLE
            next_slot = assignment.position_of(value + 1)
            if next_slot is not None and lock.label_of(next_slot) != self.second:
                return Verdict.VIOLATED
        return Verdict.OK

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Rule({self.name})"


# ── Constructors (1-based, as puzzles are written down) ─────────────────────

def value_rule(kind: str, first: int, second: int) -> Rule:
    if kind not in VALUE_RULE_KINDS:
        raise ValueError(f"Unknown rule kind {kind!r}")
    return Rule(kind, value_from_human(first), value_from_human(second))


def alwanese(first, second):
    return value_rule(ALWANESE, first, second)


def antakian_conjugates(first, second):
    return value_rule(ANTAKIAN_CONJUGATES, first, second)


def alwanese_conjugates(first, second):
    return value_rule(ALWANESE_CONJUGATES, first, second)


def different_runes(first, second):
    return value_rule(DIFFERENT_RUNES, first, second)


def antakian_twins(first, second):
    return value_rule(ANTAKIAN_TWINS, first, second)


def increase_santor(first, second):
    return value_rule(INCREASE_SANTOR, first, second)


def max_0_conductive(first, second):
    return value_rule(MAX_0_CONDUCTIVE, first, second)


def rune_follows(first_label: int, second_label: int) -> Rule:
    """A value on a first_label slot is followed by a value on a second_label slot."""
    return Rule(RUNE_FOLLOWS, first_label, second_label)
