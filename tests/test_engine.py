"""
Interpreter tests: literal replica, configurable variants, tracing.

Pinned values were worked out by hand from the table in exact
fractions:
  raw / all bugs   -95/126
  no bugs          -1/30   (B7)
  division only    139/630
  loop only        1/2
  sign only        1/30    (exactly -B7: every term flips sign)
"""
import sys
import os
import itertools
import logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from noteg_engine.config import B1, INPUTS
from noteg_engine.engine import (
    NoteGEngine, ProgramFinished, raw_note_g, tweaked_note_g,
)
from noteg_engine.oracles import analytical_note_g, series_note_g
from noteg_engine.program import LITERAL_PROGRAM, BugFlags, build_program

RAW_NOTE_G = -95.0 / 126.0
B7 = -1.0 / 30.0


# ═══════════════════════════════════════════════
# Literal replica
# ═══════════════════════════════════════════════

class TestRawNoteG:
    def test_regression_value(self):
        """The published table's (wrong) answer."""
        assert raw_note_g() == pytest.approx(RAW_NOTE_G, rel=1e-12)

    def test_is_not_b7(self):
        assert raw_note_g() != pytest.approx(B7, rel=1e-3)

    def test_all_bugs_bit_identical(self):
        assert raw_note_g() == tweaked_note_g(True, True, True)

    def test_repeatable(self):
        assert raw_note_g() == raw_note_g() == raw_note_g()

    def test_intermediate_columns(self):
        """Spot-check the store after step 12 (V13 = B1*A1 - A0 = 1/42)."""
        engine = NoteGEngine(LITERAL_PROGRAM)
        for _ in range(12):
            engine.step()
        assert engine.regs.get(4) == 7.0
        assert engine.regs.get(5) == 9.0
        assert engine.regs.get(10) == 2.0
        assert engine.regs.get(11) == 4.0
        assert engine.regs.get(13) == pytest.approx(1.0 / 42.0, rel=1e-12)


# ═══════════════════════════════════════════════
# Configurable variants
# ═══════════════════════════════════════════════

class TestTweakedNoteG:
    def test_no_bugs_is_b7(self):
        assert tweaked_note_g(False, False, False) == pytest.approx(B7, rel=1e-12)

    def test_no_bugs_matches_oracles(self):
        corrected = tweaked_note_g(False, False, False)
        assert corrected == pytest.approx(series_note_g(), rel=1e-9)
        assert corrected == pytest.approx(analytical_note_g(), rel=1e-9)

    @pytest.mark.parametrize("flags,expected", [
        ({"division_bug": True, "sign_bug": False, "loop_bug": False}, 139.0 / 630.0),
        ({"division_bug": False, "sign_bug": False, "loop_bug": True}, 0.5),
        ({"division_bug": False, "sign_bug": True, "loop_bug": False}, 1.0 / 30.0),
    ])
    def test_single_bug_values(self, flags, expected):
        assert tweaked_note_g(**flags) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("flags", [
        (True, False, False), (False, True, False), (False, False, True),
    ])
    def test_each_bug_is_observable(self, flags):
        value = tweaked_note_g(*flags)
        assert value != pytest.approx(tweaked_note_g(False, False, False), rel=1e-9)
        assert value != pytest.approx(tweaked_note_g(True, True, True), rel=1e-9)

    def test_sign_only_negates_corrected(self):
        """Known coincidence: flipping every accumulation sign negates B7."""
        assert tweaked_note_g(False, True, False) == pytest.approx(
            -tweaked_note_g(False, False, False), rel=1e-12)

    def test_argument_order(self):
        """(division_bug, sign_bug, loop_bug), positional or keyword."""
        assert tweaked_note_g(False, False, True) == tweaked_note_g(
            division_bug=False, sign_bug=False, loop_bug=True)
        assert tweaked_note_g(False, False, True) == pytest.approx(0.5)

    @pytest.mark.parametrize("flags", list(itertools.product([True, False], repeat=3)))
    def test_repeatable(self, flags):
        assert tweaked_note_g(*flags) == tweaked_note_g(*flags)

    def test_all_combinations_distinct(self):
        values = {tweaked_note_g(*f) for f in itertools.product([True, False], repeat=3)}
        assert len(values) == 8


# ═══════════════════════════════════════════════
# Engine
# ═══════════════════════════════════════════════

class TestEngine:
    def test_inputs_loaded(self):
        engine = NoteGEngine(LITERAL_PROGRAM)
        for index, value in INPUTS.items():
            assert engine.regs.get(index) == value
        assert engine.regs.get(21) == B1
        assert engine.pc == 0
        assert not engine.finished

    def test_custom_inputs(self):
        engine = NoteGEngine(LITERAL_PROGRAM, inputs={1: 1.0, 2: 2.0, 3: 4.0})
        assert engine.regs.get(21) == 0.0

    def test_step_returns_step(self):
        engine = NoteGEngine(LITERAL_PROGRAM)
        assert engine.step() is LITERAL_PROGRAM[0]
        assert engine.pc == 1
        assert engine.regs.get(6) == 8.0

    def test_step_past_end(self):
        engine = NoteGEngine(LITERAL_PROGRAM)
        engine.run()
        assert engine.finished
        with pytest.raises(ProgramFinished):
            engine.step()

    def test_trailing_increment_side_effect(self):
        """Step 25 advances n to 5 and leaves V24 alone."""
        engine = NoteGEngine(LITERAL_PROGRAM)
        while engine.pc < len(LITERAL_PROGRAM) - 1:
            engine.step()
        before = engine.result
        assert engine.regs.get(3) == 4.0
        engine.step()
        assert engine.regs.get(3) == 5.0
        assert engine.result == before

    def test_fresh_store_per_engine(self):
        a = NoteGEngine(LITERAL_PROGRAM)
        a.run()
        b = NoteGEngine(LITERAL_PROGRAM)
        assert b.regs.get(3) == 4.0
        assert b.regs.get(24) == 0.0

    def test_run_matches_function(self):
        program = build_program(BugFlags(division_bug=False, sign_bug=True, loop_bug=True))
        assert NoteGEngine(program).run() == tweaked_note_g(False, True, True)


class TestTrace:
    def test_trace_off_by_default(self):
        engine = NoteGEngine(LITERAL_PROGRAM)
        engine.run()
        assert engine.trace_output == []

    def test_one_line_per_step(self):
        engine = NoteGEngine(LITERAL_PROGRAM, trace=True)
        engine.run()
        assert len(engine.trace_output) == len(LITERAL_PROGRAM)

    def test_trace_shows_changes(self):
        engine = NoteGEngine(LITERAL_PROGRAM, trace=True)
        engine.step()
        line = engine.trace_output[0]
        assert "V4 = V5 = V6 = V2 * V3" in line
        assert "V4: 0 -> 8" in line
        assert "V6: 0 -> 8" in line

    def test_trace_labels_corrected_steps(self):
        engine = NoteGEngine(build_program(BugFlags.corrected()), trace=True)
        engine.run()
        labels = [line.split(":")[0].strip() for line in engine.trace_output]
        assert "4'" in labels
        assert "21'.1" in labels
        assert "21.0" in labels

    def test_trace_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="noteg_engine.engine"):
            NoteGEngine(LITERAL_PROGRAM, trace=True).run()
        messages = [r.getMessage() for r in caplog.records]
        assert any("V11 = V5 / V4" in m for m in messages)
        assert any(m.startswith("Run complete") for m in messages)
