"""
FactualSolver: the search controller.

Holds the puzzle, an AssumptionTree of fact databases and a cursor. Each
assumption clones the cursor node's database, integrates a MUST_BE tagged
as an assumption, records the result as a new child and moves there.

Node status:
    ALIVE         consistent so far, can take further assumptions
    CONTRADICTED  propagation hit a contradiction, or every candidate
                  tried from here contradicted
    SOLVED        every slot fixed and every rule satisfied
CONTRADICTED and SOLVED are terminal: no new children below them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .core.assignment import Assignment
from .core.errors import TerminalNodeError
from .core.explain import DEFAULT_EXPLAIN_DEPTH, extract_explanation
from .core.facts import FactDb, Outcome, must_be, handle_name
from .core.ring import check_slot, check_value, value_name
from .core.tree import AssumptionTree, ROOT
from .core.view import View


class NodeStatus(Enum):
    ALIVE = "alive"
    CONTRADICTED = "contradicted"
    SOLVED = "solved"


@dataclass
class SolverNode:
    facts: FactDb
    action: Optional[tuple] = None  # (slot, value); None for the root
    status: NodeStatus = NodeStatus.ALIVE
    contradiction: Optional[int] = None
    note: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.status is not NodeStatus.ALIVE

    @property
    def action_name(self) -> str:
        if self.action is None:
            return "Root"
        slot, value = self.action
        return f"Assume {slot} = {value_name(value)}"

    @property
    def name(self) -> str:
        if self.status is NodeStatus.CONTRADICTED:
            cause = handle_name(self.contradiction) if self.contradiction is not None else self.note
            mark = f"x ({cause})"
        elif self.status is NodeStatus.SOLVED:
            mark = "solved"
        else:
            mark = " "
        return f"[{mark}] {self.action_name}"

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Peek:
    """Read-only projection of one node for display."""
    node: int
    assignment: Assignment
    failures: list
    summary: dict

    @property
    def valid(self) -> bool:
        return not self.failures


class FactualSolver:
    def __init__(self, lock, verbose: bool = False):
        self.lock = lock
        self.verbose = verbose
        self.tree = AssumptionTree(SolverNode(FactDb()))
        self.current = ROOT

    @property
    def node(self) -> SolverNode:
        return self.tree[self.current]

    @property
    def facts(self) -> FactDb:
        return self.node.facts

    def _is_solved(self, facts: FactDb) -> bool:
        assignment = facts.fixed_assignment()
        return assignment.is_complete and not self.lock.validate(assignment)

    def assume(self, value: int, slot: int) -> NodeStatus:
        """
        Assume `value` (0-based) sits at `slot`, as a new child of the
        current node. The cursor moves to the child.
        """
        check_value(value)
        check_slot(slot)
        parent = self.node
        if parent.is_terminal:
            raise TerminalNodeError(self.current, parent.status.value)

        facts = parent.facts.clone()
        outcome: Outcome = facts.integrate_and_consolidate(
            must_be(slot, value), self.lock, verbose=self.verbose,
        )
        if not outcome.ok:
            status = NodeStatus.CONTRADICTED
        elif self._is_solved(facts):
            status = NodeStatus.SOLVED
        else:
            status = NodeStatus.ALIVE

        child = SolverNode(facts, action=(slot, value), status=status,
                           contradiction=outcome.contradiction)
        self.current = self.tree.insert_child(self.current, child)
        if self.verbose:
            print(f"[assume] node {self.current}: {child.name}")
        return status

    def try_possibilities(self, view: View, index: int) -> list:
        """
        Assume each open candidate of one slot (or value) in turn, each as
        a sibling under the current node, and come back. Returns
        [(node, status), ...]. If there were candidates and all of them
        contradict, the current node is marked contradicted too.
        """
        if view.axis == "slot":
            check_slot(index)
        else:
            check_value(index)
        origin = self.current
        if self.node.is_terminal:
            raise TerminalNodeError(origin, self.node.status.value)

        results = []
        for other in list(self.facts.possibilities_for(view, index)):
            slot, value = view.cell(index, other)
            status = self.assume(value, slot)
            results.append((self.current, status))
            self.current = origin

        if results and all(status is NodeStatus.CONTRADICTED for _, status in results):
            node = self.tree[origin]
            node.status = NodeStatus.CONTRADICTED
            node.note = f"every candidate for {view.describe(index)} contradicts"
            if self.verbose:
                print(f"[exhausted] node {origin}: {node.note}")
        return results

    # ── Navigation ───────────────────────────────────────────────────────

    def get_handle(self, node_id: int) -> int:
        return self.tree.get_handle(node_id)

    def set_current(self, handle: int):
        self.current = self.tree.get_handle(handle)

    def back(self) -> int:
        """Move the cursor to the parent; stays put at the root."""
        parent = self.tree.parent_of(self.current)
        if parent is not None:
            self.current = parent
        return self.current

    # ── Read-only projections ────────────────────────────────────────────

    def peek(self) -> Peek:
        if self.node.status is NodeStatus.CONTRADICTED:
            # A dead branch may have been cut off mid-pass with two MUST_BEs
            # still sharing a line; show it without the injectivity check.
            assignment = Assignment.probe((s, v) for s, v, _ in self.facts.givens())
        else:
            assignment = self.facts.fixed_assignment()
        return Peek(
            node=self.current,
            assignment=assignment,
            failures=self.lock.validate(assignment),
            summary=self.facts.summary(),
        )

    def explain(self, handle: int, max_depth: int = DEFAULT_EXPLAIN_DEPTH) -> list:
        return extract_explanation(self.facts, handle, self.lock, max_depth)

    def format_tree(self) -> str:
        return self.tree.format(marker=self.current)
