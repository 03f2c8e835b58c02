"""
The lock's geometry: twelve slots on two concentric six-cycles.

Slots:
    0..5   outer ring, in order around the cycle
    6..11  inner ring, slot k+6 sits directly inside slot k

Values are the twelve items placed into slots, 0-based internally and
shown 1-based as "#1".."#12". Labels (runes) are small ints shown as
Z, V, S, C.

Every relation below is a pure function of two slot indices. Where a
relation is directional the docstring says which way round it reads.
"""

from .errors import SlotOutOfRange, ValueOutOfRange


NUM_SLOTS = 12
NUM_VALUES = 12
RING_SIZE = 6

# Positional weight per slot. Both slots of the "vertical" sector outweigh
# every slot of the side sectors, which holds while the rings are equally
# spaced.
WEIGHTS = (
    7, 5, 2, 0, 2, 5,   # outer
    6, 4, 3, 1, 3, 4,   # inner
)
MAX_WEIGHT = max(WEIGHTS)
MIN_WEIGHT = min(WEIGHTS)

LABEL_NAMES = {0: "Z", 1: "V", 2: "S", 3: "C"}


# ── Input boundary ───────────────────────────────────────────────────────────

def check_slot(slot: int) -> int:
    if not isinstance(slot, int) or not 0 <= slot < NUM_SLOTS:
        raise SlotOutOfRange(slot, NUM_SLOTS)
    return slot


def check_value(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value < NUM_VALUES:
        raise ValueOutOfRange(value, NUM_VALUES)
    return value


def value_from_human(one_based: int) -> int:
    """'#3' as typed by a person -> value index 2."""
    if not isinstance(one_based, int) or not 1 <= one_based <= NUM_VALUES:
        raise ValueOutOfRange(one_based, NUM_VALUES, one_based=True)
    return one_based - 1


def value_name(value: int) -> str:
    return f"#{value + 1}"


def label_name(label: int) -> str:
    return LABEL_NAMES.get(label, str(label))


# ── Relations ────────────────────────────────────────────────────────────────

def is_inner(slot: int) -> bool:
    return slot >= RING_SIZE


def same_ring(a: int, b: int) -> bool:
    """Both on the outer ring or both on the inner ring. Reflexive."""
    return is_inner(a) == is_inner(b)


def opposite(slot: int) -> int:
    """The slot half a turn away on the same ring."""
    base = RING_SIZE if is_inner(slot) else 0
    return (slot + 3) % RING_SIZE + base


def is_mirror(a: int, b: int) -> bool:
    """
    Point partners across the whole lock: half a turn apart, either ring.
    Symmetric. 0 mirrors 3 and 9.
    """
    return a % RING_SIZE == (b + 3) % RING_SIZE


def is_opposite(a: int, b: int) -> bool:
    """Half a turn apart on the same ring. Symmetric."""
    return same_ring(a, b) and is_mirror(a, b)


def follows_closely(a: int, b: int) -> bool:
    """
    b lies one or two steps after a going round the six-cycle, on either
    ring. Directional: follows_closely(0, 1) but not follows_closely(1, 0).
    """
    distance = (2 * RING_SIZE + b - a) % RING_SIZE
    return 0 < distance <= 2


def weight(slot: int) -> int:
    return WEIGHTS[slot]


def rises(a: int, b: int) -> bool:
    """Moving from a to b strictly increases the positional weight."""
    return weight(a) < weight(b)


def conductive(a: int, b: int) -> bool:
    """
    Adjacent in the doubled ring: neighbours on the same six-cycle, or the
    inner/outer pair of one sector. Symmetric, irreflexive.
    """
    if same_ring(a, b):
        return (a + 1) % RING_SIZE == b % RING_SIZE or (b + 1) % RING_SIZE == a % RING_SIZE
    return (a + RING_SIZE) % NUM_SLOTS == b
