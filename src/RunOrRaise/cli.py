"""
Command-line entry point: raise a matching window if one exists, otherwise
launch the application.
"""
import argparse
import logging
import sys

from .actions import ActionError, DryRunDispatcher, HyprctlDispatcher
from .run_or_raise import run_or_raise
from .window_detection import HyprctlSource
from .window_rules import ConfigurationError, build_conditions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-or-raise",
        description="Raise window if it exists, otherwise launch new window.",
    )
    parser.add_argument(
        "-e", "--launch", required=True, metavar="COMMAND",
        help="command to launch",
    )
    parser.add_argument(
        "-c", "--class", dest="class_name", metavar="CLASS",
        help="class to focus (shorthand for `--match class=...`)",
    )
    parser.add_argument(
        "-m", "--match", dest="matches", action="append", default=[],
        metavar="FIELD[:METHOD]=PATTERN",
        help="additional matchers in the form field[:method]=pattern (repeatable)",
    )
    parser.add_argument(
        "--hyprctl", default="hyprctl", metavar="PATH",
        help="hyprctl binary used for queries and dispatch (default: hyprctl)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="print the decided action instead of dispatching it",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv=None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Conditions are validated before the window manager is queried
    try:
        conditions = build_conditions(args.class_name, args.matches)
    except ConfigurationError as e:
        logging.error(f"{e}")
        return 1

    source = HyprctlSource(args.hyprctl)
    dispatcher = DryRunDispatcher() if args.dry_run else HyprctlDispatcher(args.hyprctl)

    try:
        action = run_or_raise(conditions, args.launch, source, dispatcher)
    except ActionError as e:
        logging.error(f"{e}")
        return 1

    if args.dry_run:
        print(action)
    return 0


if __name__ == "__main__":
    sys.exit(main())
