"""
Visualization and reporting utilities.
"""

from .core.facts import FactDb, FactKind, handle_name
from .core.ring import NUM_VALUES, RING_SIZE, label_name, value_name


GRID_MARKS = {
    None: "?",
    FactKind.MUST_BE: "O",
    FactKind.CANNOT_BE: ".",
    FactKind.CONTRADICTION: "X",
}


def format_assignment(assignment, lock) -> str:
    """Both rings, one line each: slot:value+rune, '--' where nothing is fixed."""
    lines = []
    for ring_name, base in (("outer", 0), ("inner", RING_SIZE)):
        cells = []
        for slot in range(base, base + RING_SIZE):
            value = assignment[slot]
            shown = value_name(value) if value is not None else "--"
            cells.append(f"{slot:>2}:{shown:>3} {label_name(lock.label_of(slot))}")
        lines.append(f"  {ring_name}  " + "   ".join(cells))
    return "\n".join(lines)


def format_knowledge(db: FactDb) -> str:
    """The 12x12 grid, slots down, values across."""
    header = "  slot " + "".join(f"{value_name(v):>4}" for v in range(NUM_VALUES))
    lines = [header]
    for slot in range(db.num_slots):
        marks = "".join(f"{GRID_MARKS[db.kind_at(slot, v)]:>4}" for v in range(db.num_values))
        lines.append(f"  {slot:>4} {marks}")
    return "\n".join(lines)


def print_tree(solver):
    print(f"\n{'='*60}")
    print("Assumption tree:")
    print(f"{'='*60}")
    print(solver.format_tree())


def print_knowledge(db: FactDb):
    summary = db.summary()
    print(f"\n{'='*60}")
    print(f"Knowledge ({summary['facts_logged']} facts logged)")
    print(f"  must be: {summary['must_be']} | cannot be: {summary['cannot_be']} | "
          f"contradictions: {summary['contradiction']} | unknown: {summary['unknown']}")
    print(f"{'='*60}")
    print(format_knowledge(db))
    for handle in db.contradictions():
        print(f"  {handle_name(handle)}: {db.get(handle).name}")


def print_state(solver):
    """Tree, cursor, fixed assignment and how it fares against the rules."""
    peek = solver.peek()
    print_tree(solver)
    print(f"Current node: {peek.node} {solver.node.name}")
    print(format_assignment(peek.assignment, solver.lock))
    if peek.valid:
        print("Valid state.")
    else:
        for index, rule, verdict in peek.failures:
            print(f"Invalid assignment: rule {index} ({rule.name}) is {verdict.value}")
    print(f"Facts: {peek.summary['facts_logged']} logged, "
          f"{peek.summary['unknown']} cells unknown")


def export_dot(db: FactDb, path="runelock_facts.dot"):
    """Export the justification graph as a DOT file for Graphviz."""
    colors = {
        FactKind.MUST_BE: "lightblue",
        FactKind.CANNOT_BE: "lightgray",
        FactKind.CONTRADICTION: "salmon",
    }
    with open(path, "w") as f:
        f.write("digraph runelock {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")
        for handle, fact in enumerate(db.facts):
            label = f"{handle_name(handle)}: {fact.name}".replace('"', '\\"')
            f.write(f'  "{handle_name(handle)}" [label="{label}", '
                    f'fillcolor={colors[fact.kind]}, style=filled];\n')
            for reason in fact.reasons:
                if reason[0] == "fact":
                    f.write(f'  "{handle_name(reason[1])}" -> "{handle_name(handle)}";\n')
                elif reason[0] == "rule":
                    f.write(f'  "Rule {reason[1]}" -> "{handle_name(handle)}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
