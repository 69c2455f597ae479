"""CLI entry point — ``python -m user_intake``."""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

load_dotenv()

from user_intake.engine import IntakeEngine, format_user, load_config
from user_intake.models import LOG_LEVELS
from user_intake.prompting import InputReadError
from user_intake.registry import list_registered


def _print_registered() -> None:
    """Print every registered predicate and parser, one per line."""
    for category, entries in list_registered().items():
        print(f"{category.upper()} ({len(entries)})")
        for key, func_name in entries.items():
            print(f"  {key:<16} -> {func_name}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="user-intake",
        description="Prompt for a user's name, email and age until each is valid.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Optional YAML file overriding prompts, validators and parsers.",
    )
    parser.add_argument(
        "-l", "--list-predicates",
        action="store_true",
        default=False,
        help="List all registered predicates and parsers, then exit.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override settings.log_level (logs go to stderr).",
    )

    args = parser.parse_args(argv)

    if args.list_predicates:
        _print_registered()
        return

    config = load_config(args.config)
    if args.log_level is not None:
        config.settings.log_level = args.log_level

    engine = IntakeEngine(config)
    try:
        user = engine.run()
    except InputReadError as exc:
        sys.exit(f"Failed to read input: {exc}")

    print(format_user(user))


if __name__ == "__main__":
    main()
