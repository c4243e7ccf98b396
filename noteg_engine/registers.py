"""
Note G Engine — Register File (the Store)

The Analytical Engine's store, reduced to the 25 variable columns the
Note G table touches. Each column holds one double. Addressing is
fixed: an index outside V0..V24 is a programming error and raises
OutOfRange immediately, it never wraps or grows the store.

Snapshots are plain tuples so two of them can be diffed after a step
to see which columns the step changed (used by the tracer).
"""

from typing import Dict, Mapping, Tuple

from .config import SLOT_COUNT


class OutOfRange(IndexError):
    """Raised on access to a slot outside V0..V24."""

    def __init__(self, index: int):
        super().__init__(f"Slot V{index} outside store V0..V{SLOT_COUNT - 1}")
        self.index = index


class RegisterFile:
    """Fixed-size store of SLOT_COUNT floating-point columns."""

    __slots__ = ('_slots',)

    def __init__(self):
        self._slots = [0.0] * SLOT_COUNT

    def _check(self, index: int):
        if not 0 <= index < SLOT_COUNT:
            raise OutOfRange(index)

    # --- Core read/write ---

    def get(self, index: int) -> float:
        self._check(index)
        return self._slots[index]

    def set(self, index: int, value: float):
        self._check(index)
        self._slots[index] = float(value)

    def load(self, inputs: Mapping[int, float]):
        """Write input cards into the store (done once, before step 1)."""
        for index, value in inputs.items():
            self.set(index, value)

    def __len__(self) -> int:
        return SLOT_COUNT

    # --- Snapshots ---

    def snapshot(self) -> Tuple[float, ...]:
        return tuple(self._slots)

    @staticmethod
    def diff_snapshots(snap_a: Tuple[float, ...],
                       snap_b: Tuple[float, ...]) -> Dict[int, tuple]:
        """Compare two snapshots, return {index: (old, new)} for changes."""
        changes = {}
        for i in range(min(len(snap_a), len(snap_b))):
            if snap_a[i] != snap_b[i]:
                changes[i] = (snap_a[i], snap_b[i])
        return changes

    # --- Display ---

    def dump(self) -> str:
        """Format the non-zero columns, one per line."""
        lines = []
        for index, value in enumerate(self._slots):
            if value != 0.0:
                lines.append(f"V{index:<3d} {value: .12g}")
        return '\n'.join(lines)
