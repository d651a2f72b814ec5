"""Command-line front-end: run a script or start an interactive loop.

One failing form never ends the session: MalError is reported and the loop
asks for the next line.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from mal.errors import MalError
from mal.interpreter import Interpreter
from mal.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

PROMPT = "user> "


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mal", description="A small Lisp interpreter.")
    parser.add_argument("script", nargs="?", help="file to load instead of starting the REPL")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="values bound to *ARGV*")
    parser.add_argument("--no-prelude", action="store_true", help="skip loading the core prelude")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR (default from MAL_LOG_LEVEL)")
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stderr")
    return parser.parse_args(argv)


def _enable_history() -> None:
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass


def repl(interp: Interpreter, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """Read lines until EOF, printing each result or error."""
    interactive = stdin is sys.stdin and stdin.isatty()
    while True:
        if interactive:
            try:
                line = input(PROMPT)
            except EOFError:
                stdout.write("\n")
                break
        else:
            line = stdin.readline()
            if not line:
                break
        try:
            output = interp.rep(line)
        except MalError as e:
            logger.warning("%s: %s", type(e).__name__, e)
            stdout.write(f"Error: {e}\n")
            continue
        except RecursionError:
            logger.warning("Recursion limit reached evaluating %r", line)
            stdout.write("Error: maximum recursion depth exceeded\n")
            continue
        if output:
            stdout.write(output + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = parse_args(argv)
    setup_logging(options.log_level, options.log_file)

    interp = Interpreter(prelude=None if options.no_prelude else "auto", argv=options.args)
    if options.script:
        try:
            interp.load_file(options.script)
        except MalError as e:
            logger.error("%s: %s", type(e).__name__, e)
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    _enable_history()
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
