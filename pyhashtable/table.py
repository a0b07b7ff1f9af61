from dataclasses import dataclass, field
from typing import Any, Iterator

from .shared import printf_err


TABLE_SIZE = 100000

HASH_MULTIPLIER = 37
HASH_MASK = 0xFFFFFFFFFFFFFFFF


_debug_trace_table = False


def set_debug_trace_table(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


def debug_trace_table() -> bool:
    return _debug_trace_table


@dataclass
class Entry:
    key: str
    value: str
    # repr and == stop at this node, chains can be thousands long
    next: "Entry | None" = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class AllocationFailure:
    pass


SetResult = Entry | AllocationFailure
GetResult = str | NotFound


def hash_string(key: str, capacity: int) -> int:
    hash = 0
    # bytes are unsigned, so non-ASCII keys land in other slots than in a
    # signed-char C build of the same hash
    for byte in key.encode("utf-8"):
        # wraps like an unsigned 64-bit accumulator
        hash = (hash * HASH_MULTIPLIER + byte) & HASH_MASK
    return hash % capacity


def copy_string(chars: str) -> str:
    check_text("string", chars)
    return str(chars)


def new_entry(key: str, value: str) -> Entry:
    return Entry(key=copy_string(key), value=copy_string(value))


def check_text(name: str, obj: Any):
    if not isinstance(obj, str):
        raise TypeError(f"{name} must be str, not {type(obj).__name__}")


@dataclass(repr=False)
class Table:
    """Fixed number of slots, each heading a chain of entries.

    Colliding keys are appended at the tail of their slot's chain, so a
    chain is always in insertion order. The table never grows and never
    forgets a key.
    """

    count: int
    slots: list[Entry | None]

    def __init__(self, capacity: int = TABLE_SIZE) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(
                f"capacity must be int, not {type(capacity).__name__}"
            )
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self.count = 0
        self.slots = [None for _ in range(capacity)]

    def __repr__(self) -> str:
        return f"Table(count={self.count}, capacity={self.capacity})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        if self.capacity != other.capacity:
            return False
        return list(self.entries()) == list(other.entries())

    def __len__(self) -> int:
        return self.count

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def slot_of(self, key: str) -> int:
        check_text("key", key)
        return hash_string(key, self.capacity)

    def set(self, key: str, value: str) -> SetResult:
        """Insert ``key`` or replace its value.

        Returns the entry now holding ``value``. If memory runs out while
        building the new entry or value, ``AllocationFailure`` is returned
        and the table is left exactly as it was.
        """
        check_text("value", value)
        slot = self.slot_of(key)
        entry = self.slots[slot]

        if entry is None:
            try:
                entry = new_entry(key, value)
            except MemoryError:
                return AllocationFailure()
            self.slots[slot] = entry
            self.count += 1
            self._trace("set", key, slot, 0)
            return entry

        depth = 0
        while True:
            if entry.key == key:
                try:
                    copy = copy_string(value)
                except MemoryError:
                    return AllocationFailure()
                entry.value = copy
                self._trace("update", key, slot, depth)
                return entry

            if entry.next is None:
                break
            entry = entry.next
            depth += 1

        try:
            tail = new_entry(key, value)
        except MemoryError:
            return AllocationFailure()
        entry.next = tail
        self.count += 1
        self._trace("set", key, slot, depth + 1)
        return tail

    def get(self, key: str) -> GetResult:
        slot = self.slot_of(key)
        for depth, entry in enumerate(self.chain(slot)):
            if entry.key == key:
                self._trace("get", key, slot, depth)
                return entry.value

        self._trace("miss", key, slot, -1)
        return NotFound()

    def chain(self, slot: int) -> Iterator[Entry]:
        if not 0 <= slot < self.capacity:
            raise IndexError(
                f"slot {slot} out of range for capacity {self.capacity}"
            )
        return self._walk(self.slots[slot])

    def _walk(self, entry: Entry | None) -> Iterator[Entry]:
        while entry is not None:
            yield entry
            entry = entry.next

    def entries(self) -> Iterator[tuple[int, str, str]]:
        for slot in range(self.capacity):
            for entry in self.chain(slot):
                yield slot, entry.key, entry.value

    def _trace(self, op: str, key: str, slot: int, depth: int):
        if _debug_trace_table:
            printf_err(
                "{0:<6s} slot[{1:d}] depth {2:d} '{3:s}'\n", op, slot, depth, key
            )


def init_table(capacity: int = TABLE_SIZE) -> Table:
    return Table(capacity)
