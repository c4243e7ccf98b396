"""
Note G Engine — Interpreter

Runs a program (a sequence of Step records) against a fresh store.

Execution model:
  1. Load input cards (V1, V2, V3, V21-V23)
  2. Execute steps in order: read sources, apply op, write destinations
  3. Read the result from V24

No branches, no I/O. The only loop is already unrolled in the program,
so a run is always len(program) steps. Each NoteGEngine owns its store;
raw_note_g() and tweaked_note_g() build a new engine per call.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .config import INPUTS, OUTPUT_SLOT
from .ops import Step, execute_step
from .program import LITERAL_PROGRAM, BugFlags, build_program
from .registers import RegisterFile

log = logging.getLogger(__name__)


class ProgramFinished(Exception):
    """step() called after the last step of the program."""


class NoteGEngine:
    """Register-machine runner for the Note G table.

    Usage:
        engine = NoteGEngine(LITERAL_PROGRAM, trace=True)
        value = engine.run()
        print('\\n'.join(engine.trace_output))
    """

    def __init__(self, program: Sequence[Step],
                 inputs: Optional[Mapping[int, float]] = None,
                 trace: bool = False):
        self.program = tuple(program)
        self.regs = RegisterFile()
        self.regs.load(INPUTS if inputs is None else inputs)
        self.pc = 0

        self._trace = trace
        self.trace_output: List[str] = []

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)

    @property
    def result(self) -> float:
        return self.regs.get(OUTPUT_SLOT)

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    def step(self) -> Step:
        """Execute the next step. Returns the step that ran."""
        if self.finished:
            raise ProgramFinished(
                f"Program ended after {len(self.program)} steps")

        current = self.program[self.pc]
        if self._trace:
            before = self.regs.snapshot()

        execute_step(current, self.regs)
        self.pc += 1

        if self._trace:
            changes = RegisterFile.diff_snapshots(before, self.regs.snapshot())
            changed = ', '.join(f"V{i}: {old:g} -> {new:g}"
                                for i, (old, new) in changes.items())
            line = f"{current.label:>6s}: {current.describe():<24s} {changed}"
            self.trace_output.append(line)
            log.debug(line)

        return current

    def run(self) -> float:
        """Run to the end of the program and return V24."""
        while not self.finished:
            self.step()
        log.debug("Run complete: %d steps, V%d = %r",
                  len(self.program), OUTPUT_SLOT, self.result)
        return self.result


def raw_note_g() -> float:
    """B7 exactly as the published table computes it, errors included."""
    return NoteGEngine(LITERAL_PROGRAM).run()


def tweaked_note_g(division_bug: bool, sign_bug: bool, loop_bug: bool) -> float:
    """B7 from the configurable table. True keeps the historical error."""
    flags = BugFlags(division_bug=division_bug, sign_bug=sign_bug,
                     loop_bug=loop_bug)
    return NoteGEngine(build_program(flags)).run()
