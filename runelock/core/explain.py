"""
Explanation extraction and display.

Walks back from a fact through its reasons, the way proof extraction
walks back through clause sources, and produces a list of steps:

    ExplanationStep(depth, kind, text, handles)

    kind "fact"        one fact, or a group of facts that differ only in slot
    kind "rule"        a rule citation (leaf)
    kind "assumption"  an assumption marker (leaf)
    kind "truncated"   the depth limit cut the walk here (leaf)

Uniqueness deductions cite one fact per sibling cell, and those siblings
usually share their own reasons ("#4 cannot be on 1", "... on 2", ...,
all because of the same MUST_BE). Cited facts with equal kind, value and
reasons are therefore grouped into one step listing all their slots, and
their shared reasons are expanded once.

No visited-set is needed: a fact only cites earlier facts, so every walk
moves strictly back through the log.
"""

from dataclasses import dataclass

from .facts import FactDb, FactKind, ContradictionKind, handle_name
from .ring import value_name


DEFAULT_EXPLAIN_DEPTH = 10


@dataclass(frozen=True)
class ExplanationStep:
    depth: int
    kind: str
    text: str
    handles: tuple = ()

    @property
    def is_leaf_kind(self) -> bool:
        return self.kind in ("rule", "assumption", "truncated")


def _describe_group(db: FactDb, handles: list) -> str:
    facts = [db.get(h) for h in handles]
    first = facts[0]
    names = ", ".join(handle_name(h) for h in handles)
    if len(facts) == 1:
        return f"{names}: {first.name}"

    slots = ", ".join(str(f.slot) for f in facts)
    value = value_name(first.value)
    if first.kind is FactKind.MUST_BE:
        text = f"{value} must be on {slots}"
    elif first.kind is FactKind.CANNOT_BE:
        text = f"{value} cannot be on {slots}"
    elif first.contradiction is ContradictionKind.NO_OPTIONS_LEFT:
        text = f"{value} has no options left (slots {slots})"
    else:
        text = f"{value} has contradicting facts regarding slots {slots}"
    return f"{names}: {text}"


def _describe_reason(reason: tuple, lock) -> tuple:
    if reason[0] == "rule":
        index = reason[1]
        if lock is not None and 0 <= index < len(lock.rules):
            return "rule", f"Rule {index}: '{lock.rule(index).name}'"
        return "rule", f"Rule {index}"
    return "assumption", "Fact assumed."


def _group_key(fact) -> tuple:
    return (fact.kind, fact.contradiction, fact.value, fact.reasons)


def extract_explanation(db: FactDb, handle: int, lock=None,
                        max_depth: int = DEFAULT_EXPLAIN_DEPTH) -> list:
    """
    Explain one fact as a list of ExplanationSteps, root first.

    Raises UnknownFactError if the handle is not in the log. Steps never
    go deeper than max_depth + 1.
    """
    db.get(handle)
    steps = []

    def walk(handles, depth):
        steps.append(ExplanationStep(depth, "fact", _describe_group(db, handles),
                                     tuple(handles)))
        reasons = db.get(handles[0]).reasons

        for reason in reasons:
            if reason[0] != "fact":
                kind, text = _describe_reason(reason, lock)
                steps.append(ExplanationStep(depth + 1, kind, text))

        cited = [reason[1] for reason in reasons if reason[0] == "fact"]
        if not cited:
            return
        if depth >= max_depth:
            steps.append(ExplanationStep(
                depth + 1, "truncated",
                f"... {len(cited)} supporting fact(s) not shown (depth limit {max_depth})",
                tuple(cited),
            ))
            return

        groups = {}
        for cited_handle in cited:
            groups.setdefault(_group_key(db.get(cited_handle)), []).append(cited_handle)
        for members in groups.values():
            walk(members, depth + 1)

    walk([handle], 0)
    return steps


def format_explanation(steps: list) -> str:
    lines = []
    for step in steps:
        if step.depth == 0:
            lines.append(step.text)
        else:
            lines.append(f"{'    ' * (step.depth - 1)}  -> {step.text}")
    return "\n".join(lines)


def print_explanation(db: FactDb, handle: int, lock=None,
                      max_depth: int = DEFAULT_EXPLAIN_DEPTH):
    """Pretty-print the causal chain behind one fact."""
    steps = extract_explanation(db, handle, lock, max_depth)
    print(f"\n{'='*60}")
    print(f"EXPLANATION of {handle_name(handle)} (depth limit {max_depth})")
    print(f"{'='*60}")
    print(format_explanation(steps))
    print(f"{'='*60}")
