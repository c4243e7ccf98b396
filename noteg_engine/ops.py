"""
Note G Engine — Operations and Step Records

The mill knows four operations. A step reads two columns, applies the
operation and writes the result to one or more columns:

    dest[, dest...] = src1 <op> src2

Both sources are read before any destination is written, so a step
may name the same column as source and destination (V4 = V4 - V1).
Only step 1 has more than one destination (V4 = V5 = V6 = V2 * V3).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .registers import RegisterFile


class Op(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @classmethod
    def from_symbol(cls, symbol: str) -> Op:
        for member in cls:
            if member.value == symbol:
                return member
        raise ValueError(f"Unknown operation: {symbol!r}")


_APPLY = {
    Op.ADD: operator.add,
    Op.SUB: operator.sub,
    Op.MUL: operator.mul,
    Op.DIV: operator.truediv,
}


@dataclass(frozen=True)
class Step:
    """One line of the table.

    number:    historical step number (1-24, 25 for the trailing increment)
    variant:   "" for the published form, "'" for a corrected form
    iteration: loop pass (0 or 1) for steps 13-23, None elsewhere
    """
    number: int
    op: Op
    src1: int
    src2: int
    dest: Tuple[int, ...]
    variant: str = ""
    iteration: Optional[int] = None

    @property
    def label(self) -> str:
        if self.iteration is None:
            return f"{self.number}{self.variant}"
        return f"{self.number}{self.variant}.{self.iteration}"

    def describe(self) -> str:
        targets = ' = '.join(f"V{d}" for d in self.dest)
        return f"{targets} = V{self.src1} {self.op.value} V{self.src2}"


def make_step(number: int, src1: int, symbol: str, src2: int, *dest: int,
              variant: str = "", iteration: Optional[int] = None) -> Step:
    """Build a step in table order: inputs, operation, then outputs."""
    if not dest:
        raise ValueError(f"Step {number} has no destination")
    return Step(number, Op.from_symbol(symbol), src1, src2, tuple(dest),
                variant, iteration)


def execute_step(step: Step, regs: RegisterFile) -> float:
    """Run one step against the store. Returns the value written."""
    a = regs.get(step.src1)
    b = regs.get(step.src2)
    result = _APPLY[step.op](a, b)
    for index in step.dest:
        regs.set(index, result)
    return result
