"""Command line front end: ``coomat add|subtract|multiply|menu``."""

import argparse
import logging
import os
import sys

from . import arithmetic
from .errors import DimensionMismatch, SparseMatrixError
from .io import text

logger = logging.getLogger(__name__)

# command -> (function, result file used by the menu, label)
OPERATIONS = {
    "add": (arithmetic.add, "addition.txt", "addition"),
    "subtract": (arithmetic.subtract, "difference.txt", "subtraction"),
    "multiply": (arithmetic.multiply, "multiplication.txt", "multiplication"),
}

MENU_CHOICES = {"1": "add", "2": "subtract", "3": "multiply"}

MENU = """
Choose an arithmetic operation or exit:
1. Addition (+)
2. Subtraction (-)
3. Multiplication (*)
4. Exit
"""


def run_operation(command, left_path, right_path, output=None, check=None):
    fn, _, label = OPERATIONS[command]
    left = text.load(left_path, check=check)
    right = text.load(right_path, check=check)
    result = fn(left, right)
    logger.info("%s: %r and %r -> %r", label, left, right, result)
    if output:
        text.save(result, output)
        logger.info("wrote %s", output)
    else:
        sys.stdout.write(text.format(result))
    return 0


def run_menu(left_path, right_path, result_dir, check=None, prompt=None):
    """Interactive loop writing each chosen result into ``result_dir``."""
    prompt = prompt or input
    if not os.path.isdir(result_dir):
        print(f"error: {result_dir} is not a directory or does not exist", file=sys.stderr)
        return 1
    left = text.load(left_path, check=check)
    right = text.load(right_path, check=check)

    while True:
        print(MENU)
        try:
            choice = prompt("Choose 1, 2, 3 or 4: ").strip()
        except EOFError:
            break
        if choice == "4":
            print("Exiting.")
            break
        command = MENU_CHOICES.get(choice)
        if command is None:
            print("Invalid choice, please try again.")
            continue
        fn, filename, label = OPERATIONS[command]
        try:
            result = fn(left, right)
        except DimensionMismatch as e:
            print(f"error: {e}", file=sys.stderr)
            continue
        path = os.path.join(result_dir, filename)
        text.save(result, path)
        print(f"The {label} result is saved in {path}")
    return 0


def _add_common_options(parser, verbose, check):
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=verbose, help="Enable debug logging"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        default=check,
        help="Reject out-of-bounds and duplicate entries when loading",
    )


def build_parser():
    p = argparse.ArgumentParser(
        prog="coomat", description="Sparse integer matrix arithmetic on coordinate text files"
    )
    _add_common_options(p, verbose=False, check=None)
    sub = p.add_subparsers(dest="command", required=True)
    for name, (_, _, label) in OPERATIONS.items():
        sp = sub.add_parser(name, help=f"Compute the {label} of two matrices")
        sp.add_argument("left", help="Path to the left operand")
        sp.add_argument("right", help="Path to the right operand")
        sp.add_argument("-o", "--output", help="Write the result here instead of stdout")
        # SUPPRESS so an option given before the subcommand is not reset
        _add_common_options(sp, verbose=argparse.SUPPRESS, check=argparse.SUPPRESS)
    m = sub.add_parser("menu", help="Choose operations interactively")
    m.add_argument("left", help="Path to the left operand")
    m.add_argument("right", help="Path to the right operand")
    m.add_argument("result_dir", help="Existing directory for result files")
    _add_common_options(m, verbose=argparse.SUPPRESS, check=argparse.SUPPRESS)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "menu":
            return run_menu(args.left, args.right, args.result_dir, check=args.check)
        return run_operation(args.command, args.left, args.right, args.output, check=args.check)
    except (SparseMatrixError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
