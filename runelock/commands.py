"""
The line-oriented command language (see HELP).

parse() turns text into a Command with validated 0-based arguments, or
raises CommandError (or SlotOutOfRange / ValueOutOfRange). execute() runs
a Command against a FactualSolver and prints what happened.
"""

from dataclasses import dataclass

from .core.errors import CommandError
from .core.explain import DEFAULT_EXPLAIN_DEPTH, print_explanation
from .core.ring import check_slot, value_from_human, value_name
from .core.view import SLOT_VIEW, VALUE_VIEW
from .visualization import print_knowledge, print_tree


ALIASES = {
    "assume": "assume", "a": "assume",
    "view": "view", "v": "view",
    "explain": "explain", "e": "explain",
    "tryslot": "tryslot", "tp": "tryslot", "tryposition": "tryslot",
    "tryvalue": "tryvalue", "ta": "tryvalue", "tryactivation": "tryvalue",
    "back": "back", "b": "back",
    "tree": "tree", "t": "tree",
    "dump": "dump", "d": "dump",
    "help": "help", "h": "help", "?": "help",
    "quit": "quit", "q": "quit", "exit": "quit",
}

HELP = """\
    assume|a SLOT VALUE     assume VALUE (1-based) sits at SLOT (0-based)
    view|v NODE             move the cursor to a tree node
    explain|e FACT [DEPTH]  explain fact F<FACT> in the current node
    tryslot|tp SLOT         try every open value at SLOT
    tryvalue|ta VALUE       try every open slot for VALUE
    back|b                  move the cursor to the parent node
    tree|t                  show the assumption tree
    dump|d                  show the knowledge grid
    help|h                  this text
    quit|q                  leave"""

# action -> (min args, max args)
ARITY = {
    "assume": (2, 2),
    "view": (1, 1),
    "explain": (1, 2),
    "tryslot": (1, 1),
    "tryvalue": (1, 1),
}


@dataclass(frozen=True)
class Command:
    action: str
    args: tuple = ()


def _number(word: str) -> int:
    text = word[1:] if word[:1] in ("F", "f") else word
    try:
        return int(text)
    except ValueError:
        raise CommandError(f"Argument could not be parsed as a number: {word!r}") from None


def parse(text: str) -> Command:
    words = text.split()
    if not words:
        raise CommandError("Empty command")

    action = ALIASES.get(words[0].lower())
    if action is None:
        raise CommandError(f"Unknown command: {words[0]}")

    raw = words[1:]
    low, high = ARITY.get(action, (0, 0))
    if len(raw) < low:
        raise CommandError(f"Not enough arguments for {action}. Expected {low}")
    if len(raw) > high:
        raise CommandError(f"Too many arguments for {action}. Expected at most {high}")
    numbers = [_number(word) for word in raw]

    if action == "assume":
        return Command(action, (check_slot(numbers[0]), value_from_human(numbers[1])))
    if action == "tryslot":
        return Command(action, (check_slot(numbers[0]),))
    if action == "tryvalue":
        return Command(action, (value_from_human(numbers[0]),))
    if action == "explain" and len(numbers) == 2 and numbers[1] < 0:
        raise CommandError(f"Depth must not be negative: {numbers[1]}")
    return Command(action, tuple(numbers))


def _report_tries(solver, results, what):
    if not results:
        print(f"Nothing left to try for {what}.")
        return
    for node, status in results:
        print(f"  ({node}) {solver.tree[node].name} -> {status.value}")


def execute(solver, command: Command, default_depth: int = DEFAULT_EXPLAIN_DEPTH) -> bool:
    """Run one command. Returns False when the session should end."""
    action, args = command.action, command.args

    if action == "quit":
        return False
    if action == "help":
        print(HELP)
    elif action == "assume":
        slot, value = args
        status = solver.assume(value, slot)
        print(f"Node {solver.current}: {solver.node.name} -> {status.value}")
    elif action == "view":
        solver.set_current(solver.get_handle(args[0]))
    elif action == "back":
        solver.back()
    elif action == "tryslot":
        _report_tries(solver, solver.try_possibilities(SLOT_VIEW, args[0]), f"slot {args[0]}")
    elif action == "tryvalue":
        _report_tries(solver, solver.try_possibilities(VALUE_VIEW, args[0]),
                      value_name(args[0]))
    elif action == "explain":
        depth = args[1] if len(args) > 1 else default_depth
        print(f"Explaining in node {solver.current}")
        print_explanation(solver.facts, args[0], solver.lock, depth)
    elif action == "tree":
        print_tree(solver)
    elif action == "dump":
        print_knowledge(solver.facts)
    return True
