"""
Command Line Interface

Usage:
    python -m string_calculator "1,2,3"            # Evaluate inputs
    python -m string_calculator "//;\\n1;2"        # "\\n" is read as a newline
    python -m string_calculator --interactive      # Prompt loop
"""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .calculator import StringCalculator
from .config import load_config
from .errors import ConfigError
from .logging_config import setup_logging, get_logger

logger = get_logger("cli")

console = Console()


def decode_argument(raw: str) -> str:
    """Turn a typed two-character "\\n" into a real newline."""
    return raw.replace("\\n", "\n")


def evaluate(calculator: StringCalculator, raw: str) -> bool:
    """Print the result for one input. Returns True on success."""
    result = calculator.try_add(decode_argument(raw))
    if result.success:
        console.print(f"[bold green]{result.total}[/bold green]")
    else:
        console.print(f"[red]{escape(result.error)}[/red]")
    return result.success


def interactive(calculator: StringCalculator) -> int:
    """Run an interactive session. Returns the exit status."""
    console.print("[bold blue]STRING CALCULATOR[/bold blue]")
    console.print("Type numbers like 1,2 or //;\\n1;2 - 'q' to quit")

    failures = 0
    while True:
        try:
            user_input = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if user_input.lower() == "q":
            break
        if not evaluate(calculator, user_input):
            failures += 1

    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for `python -m string_calculator`."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        config = load_config()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 2

    setup_logging(level=config.log_level, log_file=config.log_file, json_format=config.json_logs)
    calculator = StringCalculator.from_config(config)
    logger.debug(f"Upper limit: {calculator.upper_limit}")

    interactive_mode = "--interactive" in args or "-i" in args
    inputs = [arg for arg in args if arg not in ("--interactive", "-i")]

    if interactive_mode or not inputs:
        return interactive(calculator)

    results = [evaluate(calculator, raw) for raw in inputs]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
