"""
Note G Engine — Machine Constants and Bug Profiles
===================================================

Fixed layout of the Analytical Engine store as used by Lovelace's table
for B7 (Note G, 1843). Variable columns are numbered V1..V24; V0 is
unused and stays zero.

  V1   1 (constant)
  V2   2 (constant)
  V3   n = 4
  V4-V6    working copies of 2n
  V7       running denominator
  V8, V9   loop factors
  V10      iteration counter (n - 1, counts down)
  V11      running coefficient A
  V12      current term
  V13      running sum
  V21-V23  B1, B3, B5
  V24      result (B7)
"""

# =============================================================================
#  STORE LAYOUT
# =============================================================================
SLOT_COUNT = 25           # V0..V24
OUTPUT_SLOT = 24

# Bernoulli numbers already computed by earlier runs of the table
B1 = 1.0 / 6.0
B3 = -1.0 / 30.0
B5 = 1.0 / 42.0

# Input cards, loaded before step 1
INPUTS = {
    1: 1.0,
    2: 2.0,
    3: 4.0,
    21: B1,
    22: B3,
    23: B5,
}

LOOP_ITERATIONS = 2


# =============================================================================
#  BUG PROFILES
#  raw = literal replica of the published table, others run the
#  configurable program with the listed flags.
# =============================================================================
BUG_PROFILES = {
    "raw": {
        "flags": None,
        "label": "Raw Note G",
        "description": "Published table, transcribed step for step",
    },
    "all": {
        "flags": {"division_bug": True, "sign_bug": True, "loop_bug": True},
        "label": "Note G (all bugs)",
        "description": "Configurable program with every historical error",
    },
    "division": {
        "flags": {"division_bug": True, "sign_bug": False, "loop_bug": False},
        "label": "Note G (division bug)",
        "description": "Step 4 divides V5 by V4",
    },
    "loop": {
        "flags": {"division_bug": False, "sign_bug": False, "loop_bug": True},
        "label": "Note G (loop bug)",
        "description": "Second pass reuses B3 instead of B5",
    },
    "sign": {
        "flags": {"division_bug": False, "sign_bug": True, "loop_bug": False},
        "label": "Note G (sign bug)",
        "description": "Accumulator signs inverted at steps 6, 11 and 22",
    },
    "none": {
        "flags": {"division_bug": False, "sign_bug": False, "loop_bug": False},
        "label": "Note G (no bugs)",
        "description": "Corrected program, computes B7 = -1/30",
    },
}
