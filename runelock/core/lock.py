"""
RuneLock: one puzzle instance. Twelve slot labels plus an ordered rule list.

Both are fixed at construction. Rule indices are stable and are what
justifications cite.
"""

from dataclasses import dataclass

from .assignment import Assignment
from .errors import InputError
from .ring import NUM_SLOTS, label_name
from .rules import Rule, Verdict


@dataclass(frozen=True)
class RuneLock:
    labels: tuple
    rules: tuple = ()
    name: str = "rune lock"

    def __post_init__(self):
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "rules", tuple(self.rules))
        if len(self.labels) != NUM_SLOTS:
            raise InputError(f"A lock needs {NUM_SLOTS} labels, got {len(self.labels)}")
        for rule in self.rules:
            if not isinstance(rule, Rule):
                raise InputError(f"Not a rule: {rule!r}")

    def label_of(self, slot: int) -> int:
        return self.labels[slot]

    def rule(self, index: int) -> Rule:
        return self.rules[index]

    def validate(self, assignment: Assignment) -> list:
        """
        Check every rule. Returns the failures as (index, rule, verdict);
        an empty list means the assignment is consistent so far.
        """
        failures = []
        for index, rule in enumerate(self.rules):
            verdict = rule.validate(self, assignment)
            if verdict is not Verdict.OK:
                failures.append((index, rule, verdict))
        return failures

    def describe(self) -> str:
        labels = " ".join(label_name(label) for label in self.labels)
        lines = [f"{self.name}: labels {labels}"]
        for index, rule in enumerate(self.rules):
            lines.append(f"  Rule {index}: {rule.name}")
        return "\n".join(lines)
