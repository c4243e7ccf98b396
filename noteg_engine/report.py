"""
Comparison table: every variant of the table next to the two oracles.
"""

import json
from typing import Callable, Dict, List, Tuple

from .config import BUG_PROFILES
from .engine import raw_note_g, tweaked_note_g
from .oracles import analytical_note_g, series_note_g


def profile_runner(name: str) -> Callable[[], float]:
    """Zero-argument callable for a named entry of BUG_PROFILES."""
    profile = BUG_PROFILES[name]
    if profile["flags"] is None:
        return raw_note_g
    flags = profile["flags"]
    return lambda: tweaked_note_g(**flags)


VARIANTS: List[Tuple[str, Callable[[], float]]] = [
    (profile["label"], profile_runner(name))
    for name, profile in BUG_PROFILES.items()
] + [
    ("Series formula", series_note_g),
    ("Analytical formula", analytical_note_g),
]


def collect_results() -> List[Dict]:
    return [{"label": label, "value": run()} for label, run in VARIANTS]


def format_text(results: List[Dict]) -> str:
    width = max(len(r["label"]) for r in results) + 1
    lines = []
    for r in results:
        label = r["label"] + ":"
        lines.append(f"{label:<{width}}\t{r['value']:g}")
    return '\n'.join(lines)


def format_json(results: List[Dict]) -> str:
    return json.dumps(results, indent=2)
