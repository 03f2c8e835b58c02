"""
Exception taxonomy.

Three families, kept apart so callers can tell a typo from a bug:

    InputError           -- bad slot, value, command or node choice.
                            Rejected before anything changes; report it.
    InvariantViolation   -- the propagation logic broke its own contract.
                            Never expected; let it surface.
    UnknownHandleError   -- asked for a fact or tree node that isn't there.

Logical contradictions are not exceptions. They are Facts.
"""


class RuneLockError(Exception):
    """Root of everything this package raises."""


class InputError(RuneLockError, ValueError):
    pass


class SlotOutOfRange(InputError):
    def __init__(self, slot, size=12):
        super().__init__(f"Slot {slot} is out of range [0, {size})")
        self.slot = slot


class ValueOutOfRange(InputError):
    def __init__(self, value, size=12, one_based=False):
        if one_based:
            msg = f"Value #{value} is out of range [1, {size}]"
        else:
            msg = f"Value index {value} is out of range [0, {size})"
        super().__init__(msg)
        self.value = value


class CommandError(InputError):
    pass


class TerminalNodeError(InputError):
    def __init__(self, node, status):
        super().__init__(f"Node {node} is {status}; it takes no further assumptions")
        self.node = node
        self.status = status


class InvariantViolation(RuneLockError):
    pass


class AssignmentError(InvariantViolation):
    pass


class UnknownHandleError(RuneLockError, LookupError):
    pass


class UnknownFactError(UnknownHandleError):
    def __init__(self, handle):
        super().__init__(f"Unknown fact F{handle}")
        self.handle = handle


class UnknownNodeError(UnknownHandleError):
    def __init__(self, node):
        super().__init__(f"Node {node} does not exist")
        self.node = node
