#!/usr/bin/env python3
"""
noteg — run Lovelace's Note G table on a simulated store

Usage:
    python noteg.py [--profile raw|all|division|loop|sign|none]
                    [--division-bug] [--sign-bug] [--loop-bug]
                    [--trace] [--dump] [--format text|json] [-o FILE]
                    [-v | -q] [--log-file FILE]

With no profile or bug switch, prints the comparison table of every
variant and the two closed-form formulas.

Examples:
    python noteg.py                          # comparison table
    python noteg.py --profile raw --trace    # published table, step by step
    python noteg.py --loop-bug --dump        # one bug kept, final store
    python noteg.py --format json -o out.json
"""

import argparse
import json
import logging
import sys

from noteg_engine import __version__
from noteg_engine.config import BUG_PROFILES
from noteg_engine.engine import NoteGEngine
from noteg_engine.log_setup import setup_logging
from noteg_engine.program import LITERAL_PROGRAM, BugFlags, build_program
from noteg_engine.report import collect_results, format_json, format_text

log = logging.getLogger("noteg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noteg",
        description="Ada Lovelace's Note G (B7) on a simulated Analytical Engine store",
        epilog="Profiles: " + ", ".join(BUG_PROFILES.keys()),
    )
    parser.add_argument("--profile", choices=list(BUG_PROFILES.keys()),
                        help="Run a single named variant")
    parser.add_argument("--division-bug", action="store_true",
                        help="Keep the inverted division at step 4")
    parser.add_argument("--sign-bug", action="store_true",
                        help="Keep the inverted signs at steps 6, 11 and 22")
    parser.add_argument("--loop-bug", action="store_true",
                        help="Keep B3 on the second pass of step 21")
    parser.add_argument("--trace", action="store_true",
                        help="Print every step and the columns it changed")
    parser.add_argument("--dump", action="store_true",
                        help="Print the final store")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("-o", "--output",
                        help="Write results to a file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug details to the console")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log errors")
    parser.add_argument("--log-file", help="Also write a full log to this file")
    parser.add_argument("--version", action="version",
                        version=f"noteg {__version__}")
    return parser


def resolve_selection(args):
    """Return (label, flags dict or None), or None for the full table."""
    switches = args.division_bug or args.sign_bug or args.loop_bug
    if args.profile and switches:
        raise ValueError("--profile cannot be combined with bug switches")

    if args.profile:
        profile = BUG_PROFILES[args.profile]
        return profile["label"], profile["flags"]
    if switches:
        flags = {
            "division_bug": args.division_bug,
            "sign_bug": args.sign_bug,
            "loop_bug": args.loop_bug,
        }
        kept = [name for name, on in flags.items() if on]
        return "Note G (" + ", ".join(kept) + ")", flags
    if args.trace or args.dump:
        profile = BUG_PROFILES["raw"]
        return profile["label"], profile["flags"]
    return None


def run_single(label: str, flags, args) -> str:
    if flags is None:
        program = LITERAL_PROGRAM
    else:
        program = build_program(BugFlags(**flags))

    log.debug("Running %s: %d steps, flags=%s", label, len(program), flags)
    engine = NoteGEngine(program, trace=args.trace)
    value = engine.run()
    results = [{"label": label, "value": value}]

    if args.format == "json":
        payload = {"results": results}
        if args.trace:
            payload["trace"] = engine.trace_output
        if args.dump:
            payload["store"] = {i: engine.regs.get(i)
                                for i in range(len(engine.regs))
                                if engine.regs.get(i) != 0.0}
        return json.dumps(payload, indent=2)

    sections = []
    if args.trace:
        sections.append('\n'.join(engine.trace_output))
    if args.dump:
        sections.append(engine.regs.dump())
    sections.append(format_text(results))
    return '\n\n'.join(sections)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    setup_logging("noteg", console_level=level, log_file=args.log_file)

    try:
        selection = resolve_selection(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        if selection is None:
            results = collect_results()
            if args.format == "json":
                text = format_json(results)
            else:
                text = format_text(results)
        else:
            text = run_single(*selection, args)
    except Exception as e:
        log.error("Internal error: %s", e, exc_info=args.verbose)
        return 2

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")
        except OSError as e:
            log.error("Cannot write %s: %s", args.output, e)
            return 1
        log.info("Output written to %s", args.output)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
