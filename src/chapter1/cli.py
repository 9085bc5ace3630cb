"""Command-line interface for the chapter1 exercises.

Provides the `chapter1` command with subcommands for:
- Listing the available exercises
- Running an exercise by name
"""

from __future__ import annotations

import argparse
import sys

from chapter1.catalog import load_catalog
from chapter1.config import APP_NAME, configure_logging


def cmd_list(args: argparse.Namespace) -> int:
    """List exercises."""
    catalog = load_catalog(args.catalog) if args.catalog else load_catalog()
    for ex in catalog.exercises:
        if ex.enabled:
            print(f"{ex.name:<12} {ex.title}")
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Run an exercise."""
    catalog = load_catalog(args.catalog) if args.catalog else load_catalog()
    try:
        exercise = catalog.get_exercise(args.name)
    except KeyError:
        print(f"Error: Unknown exercise: {args.name}")
        print(f"Available: {', '.join(catalog.names())}")
        return 1
    return exercise.load_main()()


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Chapter 1 exercises",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log section headers and results to stderr",
    )
    parser.add_argument(
        "--catalog",
        help="Path to an exercises.yaml catalog",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # list command
    list_parser = subparsers.add_parser("list", help="List exercises")
    list_parser.set_defaults(func=cmd_list)

    # run command
    run_parser = subparsers.add_parser("run", help="Run an exercise")
    run_parser.add_argument(
        "name",
        help="Exercise name (see `chapter1 list`)",
    )
    run_parser.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("INFO" if args.verbose else None)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


def exercise_1() -> int:
    """Entry point for the `chapter1-exercise-1` script."""
    from chapter1 import exercise_1 as program

    configure_logging()
    return program.main()


def exercise_2() -> int:
    """Entry point for the `chapter1-exercise-2` script."""
    from chapter1 import exercise_2 as program

    configure_logging()
    return program.main()


if __name__ == "__main__":
    sys.exit(main())
