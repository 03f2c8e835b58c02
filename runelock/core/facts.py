"""
The fact database: a small truth-maintenance system over the 12x12 grid.

Every cell (slot, value) holds at most one *active* fact:

    MUST_BE        the slot holds this value
    CANNOT_BE      the slot does not hold this value
    CONTRADICTION  the cell is impossible

Facts only move up the lattice  unknown < {MUST_BE, CANNOT_BE} < CONTRADICTION.
A contradiction is absorbing.

Facts live in an append-only log and are referred to by integer handle
(their index, shown as F<n>). The grid stores the handle of the active
fact per cell. Superseded facts stay in the log because later facts may
cite them, and since a fact can only cite facts logged before it, log
order is a topological order of the justification graph.

Each fact carries its reasons, written like clause literals:
    ("fact", handle)   follows from another fact
    ("rule", index)    follows from rule `index` of the lock
    ("assumption",)    the user said so

One write path: integrate_and_consolidate(). It stores the new fact and
then consolidates to a fixpoint, each pass running
    1. slot uniqueness   (one value per slot)
    2. value uniqueness  (one slot per value)
    3. rule propagation  (every MUST_BE against every rule)
Each step derives a batch of facts from the grid as it stood when the
step began, then integrates the batch. The loop stops when a full pass
integrates nothing new, or as soon as any contradiction appears.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .assignment import Assignment
from .errors import UnknownFactError
from .ring import NUM_SLOTS, NUM_VALUES, value_name
from .rules import Verdict
from .view import View, SLOT_VIEW, VALUE_VIEW


class FactKind(Enum):
    MUST_BE = "must be"
    CANNOT_BE = "cannot be"
    CONTRADICTION = "contradiction"


class ContradictionKind(Enum):
    CONTRADICTING_REQUIREMENTS = "contradicting requirements"
    NO_OPTIONS_LEFT = "no options left"


ASSUMPTION = ("assumption",)


def because_of(handle: int) -> tuple:
    return ("fact", handle)


def by_rule(index: int) -> tuple:
    return ("rule", index)


def handle_name(handle: int) -> str:
    return f"F{handle}"


@dataclass(frozen=True)
class Fact:
    kind: FactKind
    slot: int
    value: int
    reasons: tuple = ()
    contradiction: Optional[ContradictionKind] = None

    @property
    def is_contradiction(self) -> bool:
        return self.kind is FactKind.CONTRADICTION

    @property
    def cited_facts(self) -> list:
        return [reason[1] for reason in self.reasons if reason[0] == "fact"]

    @property
    def is_assumption(self) -> bool:
        return ASSUMPTION in self.reasons

    @property
    def name(self) -> str:
        if self.kind is FactKind.MUST_BE:
            return f"{self.slot} must be on {value_name(self.value)}"
        if self.kind is FactKind.CANNOT_BE:
            return f"{self.slot} cannot be on {value_name(self.value)}"
        return (f"{self.slot} caused a contradiction on {value_name(self.value)}"
                f" ({self.contradiction.value})")

    def __str__(self):
        return self.name


def must_be(slot: int, value: int, reasons=(ASSUMPTION,)) -> Fact:
    return Fact(FactKind.MUST_BE, slot, value, tuple(reasons))


def cannot_be(slot: int, value: int, reasons=(ASSUMPTION,)) -> Fact:
    return Fact(FactKind.CANNOT_BE, slot, value, tuple(reasons))


@dataclass(frozen=True)
class Outcome:
    """
    Result of a write. `changed` says whether anything new was integrated;
    `contradiction` is the handle of the contradiction that stopped it.
    """
    changed: bool
    contradiction: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.contradiction is None


class FactDb:
    def __init__(self, num_slots: int = NUM_SLOTS, num_values: int = NUM_VALUES):
        self.num_slots = num_slots
        self.num_values = num_values
        self.facts = []
        self.grid = [[None] * num_values for _ in range(num_slots)]

    def clone(self) -> "FactDb":
        """Independent copy. Facts are immutable so the log is shared item-wise."""
        twin = FactDb(self.num_slots, self.num_values)
        twin.facts = list(self.facts)
        twin.grid = [row[:] for row in self.grid]
        return twin

    def __len__(self):
        return len(self.facts)

    # ── Lookup ───────────────────────────────────────────────────────────

    def get(self, handle: int) -> Fact:
        if not isinstance(handle, int) or not 0 <= handle < len(self.facts):
            raise UnknownFactError(handle)
        return self.facts[handle]

    def handle_at(self, slot: int, value: int) -> Optional[int]:
        return self.grid[slot][value]

    def fact_at(self, slot: int, value: int) -> Optional[Fact]:
        handle = self.grid[slot][value]
        return None if handle is None else self.facts[handle]

    def kind_at(self, slot: int, value: int) -> Optional[FactKind]:
        fact = self.fact_at(slot, value)
        return None if fact is None else fact.kind

    def givens(self) -> list:
        """Every active MUST_BE as (slot, value, handle), slot-major."""
        found = []
        for slot, row in enumerate(self.grid):
            for value, handle in enumerate(row):
                if handle is not None and self.facts[handle].kind is FactKind.MUST_BE:
                    found.append((slot, value, handle))
        return found

    def contradictions(self) -> list:
        """Handles of the active contradictions, slot-major."""
        return [handle for row in self.grid for handle in row
                if handle is not None and self.facts[handle].is_contradiction]

    def fixed_assignment(self) -> Assignment:
        """
        Project the MUST_BE cells into an Assignment. Raises AssignmentError
        if two of them share a slot or a value, which propagation should
        never let happen.
        """
        return Assignment.from_pairs((slot, value) for slot, value, _ in self.givens())

    def candidates(self, view: View, index: int):
        """
        Cells along a line that are still allowed: no fact yet, or MUST_BE.
        Yields the complementary index (a value for a slot line, a slot for
        a value line).
        """
        length = view.line_length(self.num_slots, self.num_values)
        for offset in range(length):
            slot, value = view.cell(index, offset)
            kind = self.kind_at(slot, value)
            if kind is None or kind is FactKind.MUST_BE:
                yield offset

    def possibilities_for(self, view: View, index: int):
        """
        Open possibilities along a line: cells with no fact at all. A line
        already settled by a MUST_BE has none left to try.
        """
        length = view.line_length(self.num_slots, self.num_values)
        for offset in range(length):
            slot, value = view.cell(index, offset)
            if self.grid[slot][value] is None:
                yield offset

    def summary(self) -> dict:
        counts = {kind: 0 for kind in FactKind}
        unknown = 0
        for row in self.grid:
            for handle in row:
                if handle is None:
                    unknown += 1
                else:
                    counts[self.facts[handle].kind] += 1
        return {
            "facts_logged": len(self.facts),
            "must_be": counts[FactKind.MUST_BE],
            "cannot_be": counts[FactKind.CANNOT_BE],
            "contradiction": counts[FactKind.CONTRADICTION],
            "unknown": unknown,
        }

    # ── Writing ──────────────────────────────────────────────────────────

    def _log(self, fact: Fact) -> int:
        self.facts.append(fact)
        return len(self.facts) - 1

    def integrate_fact(self, fact: Fact) -> tuple:
        """
        Store one fact in its cell, no reasoning beyond the cell itself.

        Returns (integrated, handle) where handle is the cell's active fact
        afterwards. A MUST_BE meeting a CANNOT_BE (either way round) logs
        the incoming fact and then a CONTRADICTION citing both.
        """
        existing_handle = self.grid[fact.slot][fact.value]

        if existing_handle is None:
            handle = self._log(fact)
            self.grid[fact.slot][fact.value] = handle
            return True, handle

        existing = self.facts[existing_handle]
        if existing.is_contradiction:
            return False, existing_handle

        if fact.is_contradiction:
            handle = self._log(fact)
            self.grid[fact.slot][fact.value] = handle
            return True, handle

        if existing.kind is fact.kind:
            return False, existing_handle

        incoming = self._log(fact)
        handle = self._log(Fact(
            FactKind.CONTRADICTION, fact.slot, fact.value,
            reasons=(because_of(existing_handle), because_of(incoming)),
            contradiction=ContradictionKind.CONTRADICTING_REQUIREMENTS,
        ))
        self.grid[fact.slot][fact.value] = handle
        return True, handle

    def integrate_and_consolidate(self, fact: Fact, lock, verbose: bool = False) -> Outcome:
        integrated, handle = self.integrate_fact(fact)
        if verbose and integrated:
            print(f"  [integrated] {handle_name(handle)}: {self.facts[handle].name}")
        if self.facts[handle].is_contradiction:
            return Outcome(integrated, handle)
        if not integrated:
            return Outcome(False)
        outcome = self.consolidate(lock, verbose=verbose)
        return Outcome(True, outcome.contradiction)

    def consolidate(self, lock, verbose: bool = False) -> Outcome:
        """
        Run uniqueness and rule propagation until nothing changes.
        Calling it again on a settled database changes nothing.
        """
        steps = (
            lambda: self._derive_uniqueness(SLOT_VIEW),
            lambda: self._derive_uniqueness(VALUE_VIEW),
            lambda: self._derive_from_rules(lock),
        )
        changed_any = False
        passes = 0
        while True:
            passes += 1
            changed = False
            for derive in steps:
                step_changed, contradiction = self._integrate_all(derive(), verbose)
                changed = changed or step_changed
                if contradiction is not None:
                    if verbose:
                        print(f"  [contradiction] {handle_name(contradiction)}: "
                              f"{self.facts[contradiction].name}")
                    return Outcome(True, contradiction)
            if not changed:
                break
            changed_any = True
        if verbose:
            print(f"  [fixpoint] after {passes} pass(es), {len(self.facts)} facts logged")
        return Outcome(changed_any)

    def _integrate_all(self, derived: list, verbose: bool) -> tuple:
        """
        Integrate one step's batch. The batch is finished even after a
        contradiction so a dead line is marked in full; the first
        contradiction met is reported.
        """
        changed = False
        first_contradiction = None
        for fact in derived:
            integrated, handle = self.integrate_fact(fact)
            if integrated:
                changed = True
                if verbose:
                    print(f"  [derived] {handle_name(handle)}: {self.facts[handle].name}")
            if first_contradiction is None and self.facts[handle].is_contradiction:
                first_contradiction = handle
        return changed, first_contradiction

    # ── Derivation ───────────────────────────────────────────────────────

    def _derive_uniqueness(self, view: View) -> list:
        """
        Per line:
            one MUST_BE      -> every other live cell CANNOT_BE, citing it
            one open cell    -> that cell MUST_BE, citing all the CANNOT_BEs
            no open cell and
            no MUST_BE       -> NO_OPTIONS_LEFT on every cell of the line
        Contradicted cells count as neither open nor ruled out.
        """
        derived = []
        lines = view.count_lines(self.num_slots, self.num_values)
        length = view.line_length(self.num_slots, self.num_values)

        for line in range(lines):
            cells = [view.cell(line, offset) for offset in range(length)]
            must = None
            open_cells = []
            ruled_out = []
            for slot, value in cells:
                handle = self.grid[slot][value]
                if handle is None:
                    open_cells.append((slot, value))
                    continue
                kind = self.facts[handle].kind
                if kind is FactKind.MUST_BE and must is None:
                    must = (slot, value, handle)
                elif kind is FactKind.CANNOT_BE:
                    ruled_out.append(because_of(handle))

            if must is not None:
                must_slot, must_value, must_handle = must
                for slot, value in cells:
                    if (slot, value) == (must_slot, must_value):
                        continue
                    kind = self.kind_at(slot, value)
                    if kind is None or kind is FactKind.MUST_BE:
                        derived.append(cannot_be(slot, value, (because_of(must_handle),)))
            elif len(open_cells) == 1:
                slot, value = open_cells[0]
                derived.append(must_be(slot, value, ruled_out))
            elif not open_cells:
                for slot, value in cells:
                    derived.append(Fact(
                        FactKind.CONTRADICTION, slot, value, tuple(ruled_out),
                        contradiction=ContradictionKind.NO_OPTIONS_LEFT,
                    ))
        return derived

    def _derive_from_rules(self, lock) -> list:
        """
        For every MUST_BE (slot, value) and every rule tying value to some
        other value, rule out each candidate slot of the other value that
        the rule rejects when paired with the given placement.
        """
        derived = []
        for slot, value, handle in self.givens():
            for index, rule in enumerate(lock.rules):
                for other in rule.counterparts(value):
                    for candidate in list(self.candidates(VALUE_VIEW, other)):
                        verdict = rule.validate_pair(lock, (slot, value), (candidate, other))
                        if verdict is not Verdict.OK:
                            derived.append(cannot_be(
                                candidate, other,
                                (because_of(handle), by_rule(index)),
                            ))
        return derived
