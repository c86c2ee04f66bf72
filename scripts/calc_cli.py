#!/usr/bin/env python3
"""Drive the calculator engine from the command line.

Each argument is one key label. Non-ASCII labels have ASCII aliases
(``C`` for ``AC``, ``BS`` for ``⌫``, ``NEG`` for ``±``, ``x`` for ``×``).

Usage
-----
::

    python scripts/calc_cli.py 1 2 + 7 =
    python scripts/calc_cli.py --json 8 / 0 =
    python scripts/calc_cli.py --interactive

In interactive mode each stdin line holds whitespace-separated labels;
the display is printed after every line. ``quit`` or EOF exits.

Options::

    --json               Print display fields as JSON
    --interactive, -i    Read key labels from stdin
    --precision N        Significant digits for display (default: 12)
    --verbose, -v        Enable debug logging (traces every transition)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pycalc import KEYPAD_LABELS, CalcConfig, CalcConfigError, Calculator, DisplayFields  # noqa: E402

_ASCII_ALIASES: dict[str, str] = {
    "C": "AC",
    "BS": "⌫",
    "NEG": "±",
    "x": "×",
}


def _translate(labels: Iterable[str]) -> list[str]:
    return [_ASCII_ALIASES.get(label, label) for label in labels]


def _format(display: DisplayFields, json_mode: bool) -> str:
    if json_mode:
        return json.dumps(display.model_dump(), ensure_ascii=False)
    top = f"{display.previous} {display.operator}".strip()
    if top:
        return f"{top}\n{display.entry}"
    return display.entry


def _keypad_help() -> str:
    rows = ["  " + "  ".join(f"{label:>2}" for label in row) for row in KEYPAD_LABELS]
    aliases = ", ".join(f"{alias}={label}" for alias, label in _ASCII_ALIASES.items())
    return "keypad:\n" + "\n".join(rows) + f"\n\nASCII aliases: {aliases}"


def _interactive(calc: Calculator, json_mode: bool) -> None:
    for line in sys.stdin:
        labels = line.split()
        if labels == ["quit"]:
            return
        calc.press_many(_translate(labels))
        print(_format(calc.display, json_mode))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Press calculator keys and print the display.",
        epilog=_keypad_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("keys", nargs="*", help="Key labels to press, in order")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print display fields as JSON")
    parser.add_argument("--interactive", "-i", action="store_true", help="Read key labels from stdin")
    parser.add_argument("--precision", type=int, help="Significant digits for display")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, object] = {}
    if args.precision is not None:
        overrides["display_precision"] = args.precision
    if args.verbose:
        overrides["trace_enabled"] = True
    try:
        config = CalcConfig.from_env(**overrides)
    except CalcConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    calc = Calculator(config)
    if args.interactive:
        _interactive(calc, args.json_mode)
        return 0

    calc.press_many(_translate(args.keys))
    print(_format(calc.display, args.json_mode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
