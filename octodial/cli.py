"""
Command-line interface for octodial.

Usage:
    python -m octodial table --style unicode
    python -m octodial rules
    python -m octodial check
    python -m octodial play                   # commands from stdin
    python -m octodial play --script moves.txt
"""

import argparse
import logging
import math
import sys
from typing import Iterable, List, Optional, TextIO

from octodial.algebra.render import format_table, rule_formula
from octodial.algebra.table import (
    N_GENERATORS,
    TripleConfigurationError,
    build_table,
    check_anticommutativity,
)
from octodial.config.dial_config import RENDER_STYLES, get_setting, load_config, validate_config
from octodial.dial import Dial

logger = logging.getLogger(__name__)

PLAY_HELP = """\
Commands:
  next | prev              step the dial one position
  key <name>               press a key (ArrowRight, ArrowLeft, space, ...)
  drag <a1> <a2> ...       drag: begin at a1, move through the rest, release
  click <unit>             click a unit (ignored unless visible)
  show                     print the dial state
  help                     this text
  quit                     leave
"""


def _triples(config) -> List[List[int]]:
    return get_setting('algebra.triples', config=config)


def cmd_table(args: argparse.Namespace) -> int:
    """Print the full multiplication table."""
    table = build_table(_triples(args.config))
    style = args.style or get_setting('display.style', 'ascii', config=args.config)
    print(format_table(table, style))
    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """List the seven dial positions."""
    table = build_table(_triples(args.config))
    style = args.style or get_setting('display.style', 'ascii', config=args.config)
    print("Position  Visible    Rule")
    print("========  =========  ====")
    for position, triple in enumerate(_triples(args.config)):
        visible = ','.join(str(g) for g in triple)
        print(f"{position:>8}  {visible:<9}  {rule_formula(position, style, table, _triples(args.config))}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Verify config, covering, totality and anti-commutativity."""
    failures = []

    failures.extend(validate_config(args.config))

    try:
        table = build_table(_triples(args.config))
    except TripleConfigurationError:
        # already reported by validate_config
        table = None

    if table is not None:
        if len(table) != N_GENERATORS * N_GENERATORS:
            failures.append(f"totality: {len(table)} entries, expected {N_GENERATORS ** 2}")
        for a, b in check_anticommutativity(table):
            failures.append(f"anti-commutativity: i_{a} i_{b} vs i_{b} i_{a}")

    if failures:
        print("Check failed:")
        for f in failures:
            print(f"  - {f}")
        return 1

    print("Covering ✓  Totality ✓  Anti-commutativity ✓")
    return 0


def _print_state(dial: Dial, out: Optional[TextIO]) -> None:
    s = dial.snapshot()
    visible = ','.join(str(g) for g in s['visible'])
    display = s['display'] or '(empty)'
    print(f"position={s['position']} angle={s['angle']:.2f} visible={visible} display={display}",
          file=out)


def run_session(dial: Dial, lines: Iterable[str], out: Optional[TextIO] = None) -> int:
    """
    Drive a dial from text commands (see PLAY_HELP).

    Bad commands print an error and the session continues.
    Returns 0 when input runs out or on 'quit'. Output goes to `out`,
    or to the current sys.stdout when None.
    """
    for raw in lines:
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue

        command, *params = line.split()
        command = command.lower()

        try:
            if command in ('quit', 'exit'):
                break
            elif command == 'help':
                print(PLAY_HELP, file=out, end='')
                continue
            elif command == 'next':
                dial.step_next()
            elif command == 'prev':
                dial.step_previous()
            elif command == 'key':
                if not params:
                    raise ValueError("key needs a key name")
                name = ' ' if params[0].lower() == 'space' else params[0]
                if not dial.press_key(name):
                    print(f"  key {params[0]!r} is not bound", file=out)
            elif command == 'drag':
                if not params:
                    raise ValueError("drag needs at least one angle")
                angles = [float(p) for p in params]
                if not all(math.isfinite(a) for a in angles):
                    raise ValueError("drag angles must be finite")
                dial.begin_drag(angles[0])
                for angle in angles[1:]:
                    dial.continue_drag(angle)
                dial.end_drag()
            elif command == 'click':
                if len(params) != 1:
                    raise ValueError("click needs exactly one unit")
                unit = int(params[0])
                if dial.click_unit(unit) is None:
                    print(f"  unit {unit} is not visible", file=out)
            elif command == 'show':
                pass
            else:
                raise ValueError(f"unknown command {command!r} (try 'help')")
        except ValueError as e:
            print(f"  error: {e}", file=out)
            continue

        _print_state(dial, out)

    return 0


def cmd_play(args: argparse.Namespace) -> int:
    """Run a text-driven dial session."""
    dial = Dial(config=args.config)
    if args.script:
        with open(args.script) as f:
            return run_session(dial, f.readlines())
    if sys.stdin.isatty():
        print(PLAY_HELP, end='')
    return run_session(dial, sys.stdin)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='octodial',
        description="Octonion unit dial - rotate, pick two units, see the product",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full multiplication table with subscripts
  python -m octodial table --style unicode

  # Verify the triples and the sign rule
  python -m octodial check

  # Scripted session
  printf 'click 0\\nclick 1\\nnext\\n' | python -m octodial play
        """,
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file overriding default settings")

    subparsers = parser.add_subparsers(dest="command", required=True)

    table_parser = subparsers.add_parser("table", help="Print the multiplication table")
    table_parser.add_argument("--style", choices=RENDER_STYLES, default=None,
                              help="Label style (default: from config)")
    table_parser.set_defaults(func=cmd_table)

    rules_parser = subparsers.add_parser("rules", help="List the seven dial positions")
    rules_parser.add_argument("--style", choices=RENDER_STYLES, default=None,
                              help="Label style (default: from config)")
    rules_parser.set_defaults(func=cmd_rules)

    check_parser = subparsers.add_parser("check", help="Verify table invariants")
    check_parser.set_defaults(func=cmd_check)

    play_parser = subparsers.add_parser("play", help="Interactive text session")
    play_parser.add_argument("--script", type=str, default=None,
                             help="Read commands from a file instead of stdin")
    play_parser.set_defaults(func=cmd_play)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.config = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = 'DEBUG' if args.verbose else get_setting('logging.level', 'WARNING', config=args.config)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logger.debug(f"octodial {args.command}")

    try:
        return args.func(args)
    except (ValueError, TripleConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
    except KeyboardInterrupt:
        print("\nStopped.")
        return 0
