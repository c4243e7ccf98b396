"""
Note G Engine
=============
A register-machine replica of Ada Lovelace's Note G (1843), the table
of operations that computes the Bernoulli number B7 on Babbage's
Analytical Engine, with switches for its three transcription errors.

Layout:
    ┌─────────────┐    ┌────────────┐    ┌─────────────┐
    │ program.py  │───>│ engine.py  │───>│ report.py   │
    │ (Step list) │    │ (run)      │    │ (table)     │
    └─────────────┘    └────────────┘    └─────────────┘
           │                 │
        ops.py          registers.py

    - registers.py: the store, V0..V24
    - ops.py:       Op enum, Step record, execute_step()
    - program.py:   LITERAL_PROGRAM, BugFlags, variant selectors
    - engine.py:    NoteGEngine, raw_note_g(), tweaked_note_g()
    - oracles.py:   closed-form B7 for validation
"""

__version__ = "0.1.0"

from .registers import RegisterFile, OutOfRange
from .ops import Op, Step, make_step, execute_step
from .program import LITERAL_PROGRAM, BugFlags, build_program
from .engine import NoteGEngine, ProgramFinished, raw_note_g, tweaked_note_g
from .oracles import series_note_g, analytical_note_g

__all__ = [
    "RegisterFile", "OutOfRange",
    "Op", "Step", "make_step", "execute_step",
    "LITERAL_PROGRAM", "BugFlags", "build_program",
    "NoteGEngine", "ProgramFinished", "raw_note_g", "tweaked_note_g",
    "series_note_g", "analytical_note_g",
]
