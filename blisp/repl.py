"""Interactive blisp shell.

Also provides the ``blisp`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Callable, Optional

try:
    import readline
except ImportError:  # not available on every platform; history is then skipped
    readline = None

from blisp import __version__, config
from blisp.errors import BlispNestingError, BlispSyntaxError
from blisp.interpreter import Interpreter
from blisp.reader.parser import parse

logger = logging.getLogger(__name__)

EXIT_COMMAND = ":q"


def banner() -> str:
    return f"Lispy Version {__version__}\nPress Ctrl+c or input {EXIT_COMMAND} to Exit\n"


def process_line(interp: Interpreter, line: str, dest: IO[str], show_ast: bool = False) -> bool:
    """Evaluate one input line and print the result.  Returns False when the session should end."""
    if line.startswith(EXIT_COMMAND):
        return False
    if not line.strip():
        return True

    try:
        if show_ast:
            print(str(parse(line)), end="", file=dest)
        else:
            print(interp.eval_to_str(line), file=dest)
    except BlispSyntaxError as err:
        print(err.describe(), file=dest)
    except BlispNestingError as err:
        print(f"Error: {err}", file=dest)
    return True


def load_history(path: Optional[Path]) -> None:
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(str(path))
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not read history file %s: %s", path, exc)


def save_history(path: Optional[Path]) -> None:
    if readline is None or path is None:
        return
    try:
        readline.write_history_file(str(path))
    except OSError as exc:
        logger.warning("Could not write history file %s: %s", path, exc)


def run_session(
    interp: Interpreter,
    dest: IO[str] = sys.stdout,
    prompt: str | None = None,
    read_line: Callable[[str], str] = input,
    show_ast: bool = False,
) -> None:
    """Read-eval-print until the exit command, EOF or Ctrl-C."""
    prompt = config.get_prompt() if prompt is None else prompt
    print(banner(), file=dest)
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=dest)
            break
        if not process_line(interp, line, dest, show_ast):
            break


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blisp",
        description="Lispy: a small S-expression calculator with quoted lists",
    )
    parser.add_argument(
        "-e", "--eval",
        metavar="EXPR",
        help="Evaluate EXPR, print the result and exit",
    )
    parser.add_argument(
        "--ast",
        action="store_true",
        help="Print the parse tree of each input instead of evaluating it",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level (overrides BLISP_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """blisp shell (``blisp`` / ``python -m blisp``)."""
    args = create_arg_parser().parse_args(argv)
    level = config.log_level_from_name(args.log_level) if args.log_level else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()

    if args.eval is not None:
        process_line(interp, args.eval, sys.stdout, args.ast)
        return 0

    history = config.get_history_file()
    load_history(history)
    try:
        run_session(interp, sys.stdout, show_ast=args.ast)
    finally:
        save_history(history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
