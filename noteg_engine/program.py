"""
Note G Engine — The Program as Data

Two encodings of the same table:

  LITERAL_PROGRAM   The published table for B7, transcribed step for
                    step including its three errors. Built once, never
                    parameterised.

  build_program()   The same skeleton with the four decision points
                    replaced by variant selectors driven by BugFlags.

The loop (steps 13-23) runs twice and is unrolled, so a program is a
flat, inspectable list of Step records. With every flag set,
build_program() returns a list equal to LITERAL_PROGRAM; the tests
check that step for step.

Decision points:
  step 4   division_bug  V11 = V5 / V4      vs  V11 = V4 / V5
  step 6   sign_bug      V13 = V13 - V11    vs  V13 = V13 + V11
  step 11  sign_bug      V13 = V12 + V13    vs  V13 = V13 - V12
  step 21  loop_bug      pass 1 uses V22    vs  pass 1 uses V23
  step 22  sign_bug      V13 = V12 + V13    vs  V13 = V13 - V12
"""

from dataclasses import dataclass
from typing import List

from .config import LOOP_ITERATIONS
from .ops import Step, make_step

CORRECTED = "'"


@dataclass(frozen=True)
class BugFlags:
    """Which historical errors to keep. True = keep the published form."""
    division_bug: bool = True
    sign_bug: bool = True
    loop_bug: bool = True

    @classmethod
    def historical(cls) -> 'BugFlags':
        return cls(True, True, True)

    @classmethod
    def corrected(cls) -> 'BugFlags':
        return cls(False, False, False)


# ══════════════════════════════════════════════
# Literal table
# ══════════════════════════════════════════════

def _literal_loop(i: int) -> List[Step]:
    return [
        make_step(13, 6, '-', 1, 6, iteration=i),
        make_step(14, 1, '+', 7, 7, iteration=i),
        make_step(15, 6, '/', 7, 8, iteration=i),
        make_step(16, 8, '*', 11, 11, iteration=i),
        make_step(17, 6, '-', 1, 6, iteration=i),
        make_step(18, 1, '+', 7, 7, iteration=i),
        make_step(19, 6, '/', 7, 9, iteration=i),
        make_step(20, 9, '*', 11, 11, iteration=i),
        make_step(21, 22, '*', 11, 12, iteration=i),   # V22 on both passes
        make_step(22, 12, '+', 13, 13, iteration=i),
        make_step(23, 10, '-', 1, 10, iteration=i),
    ]


LITERAL_PROGRAM = tuple(
    [
        make_step(1, 2, '*', 3, 4, 5, 6),
        make_step(2, 4, '-', 1, 4),
        make_step(3, 5, '+', 1, 5),
        make_step(4, 5, '/', 4, 11),
        make_step(5, 11, '/', 2, 11),
        make_step(6, 13, '-', 11, 13),
        make_step(7, 3, '-', 1, 10),
        make_step(8, 2, '+', 7, 7),
        make_step(9, 6, '/', 7, 11),
        make_step(10, 21, '*', 11, 12),
        make_step(11, 12, '+', 13, 13),
        make_step(12, 10, '-', 1, 10),
    ]
    + _literal_loop(0)
    + _literal_loop(1)
    + [
        make_step(24, 13, '+', 24, 24),
        make_step(25, 1, '+', 3, 3),     # n advances for the next Bernoulli number
    ]
)


# ══════════════════════════════════════════════
# Variant selectors
# ══════════════════════════════════════════════

def select_division(division_bug: bool) -> Step:
    """Step 4: (2n+1)/(2n-1) as published, (2n-1)/(2n+1) corrected."""
    if division_bug:
        return make_step(4, 5, '/', 4, 11)
    return make_step(4, 4, '/', 5, 11, variant=CORRECTED)


def select_first_term(sign_bug: bool) -> Step:
    """Step 6: fold A0 into the running sum."""
    if sign_bug:
        return make_step(6, 13, '-', 11, 13)
    return make_step(6, 13, '+', 11, 13, variant=CORRECTED)


def select_accumulate(sign_bug: bool, number: int, iteration=None) -> Step:
    """Steps 11 and 22: fold the current term V12 into V13."""
    if sign_bug:
        return make_step(number, 12, '+', 13, 13, iteration=iteration)
    return make_step(number, 13, '-', 12, 13, variant=CORRECTED,
                     iteration=iteration)


def coefficient_slot(loop_bug: bool, iteration: int) -> int:
    """Bernoulli column read by step 21 on the given pass."""
    if iteration == 0 or loop_bug:
        return 22
    return 23


def select_coefficient(loop_bug: bool, iteration: int) -> Step:
    """Step 21: multiply the Bernoulli number into the term."""
    slot = coefficient_slot(loop_bug, iteration)
    variant = "" if slot == 22 else CORRECTED
    return make_step(21, slot, '*', 11, 12, variant=variant,
                     iteration=iteration)


# ══════════════════════════════════════════════
# Configurable table
# ══════════════════════════════════════════════

def build_program(flags: BugFlags) -> List[Step]:
    """Assemble the table with each decision point chosen by `flags`."""
    program = [
        make_step(1, 2, '*', 3, 4, 5, 6),
        make_step(2, 4, '-', 1, 4),
        make_step(3, 5, '+', 1, 5),
        select_division(flags.division_bug),
        make_step(5, 11, '/', 2, 11),
        select_first_term(flags.sign_bug),
        make_step(7, 3, '-', 1, 10),
        make_step(8, 2, '+', 7, 7),
        make_step(9, 6, '/', 7, 11),
        make_step(10, 21, '*', 11, 12),
        select_accumulate(flags.sign_bug, 11),
        make_step(12, 10, '-', 1, 10),
    ]

    for i in range(LOOP_ITERATIONS):
        program += [
            make_step(13, 6, '-', 1, 6, iteration=i),
            make_step(14, 1, '+', 7, 7, iteration=i),
            make_step(15, 6, '/', 7, 8, iteration=i),
            make_step(16, 8, '*', 11, 11, iteration=i),
            make_step(17, 6, '-', 1, 6, iteration=i),
            make_step(18, 1, '+', 7, 7, iteration=i),
            make_step(19, 6, '/', 7, 9, iteration=i),
            make_step(20, 9, '*', 11, 11, iteration=i),
            select_coefficient(flags.loop_bug, i),
            select_accumulate(flags.sign_bug, 22, iteration=i),
            make_step(23, 10, '-', 1, 10, iteration=i),
        ]

    program += [
        make_step(24, 13, '+', 24, 24),
        make_step(25, 1, '+', 3, 3),
    ]
    return program
