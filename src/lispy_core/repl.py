"""LispyRepl — line-at-a-time evaluation for programmatic and interactive use.

Also provides the ``lispy`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO

try:
    import readline
except ImportError:  # Windows: no line editing or history
    readline = None

from .config import ReplConfig
from .errors import LispyDepthError, LispyError, LispySyntaxError
from .evaluator import evaluate
from .grammar import parse
from .logging_config import setup_logging
from .reader import read
from .values import Value

logger = logging.getLogger(__name__)

VERSION = "0.0.0.0.1"
BANNER = f"Lispy Version {VERSION}\nPress Ctrl+c to Exit\n"


# ---------------------------------------------------------------------------
# LispyRepl class (programmatic use)
# ---------------------------------------------------------------------------

class LispyRepl:
    """Evaluates one line of Lispy at a time.

    Usage::

        repl = LispyRepl()
        repl.eval("(+ 1 (* 2 3))")   # → LNumber(7)
        repl.eval("(/ 10 0)")        # → LError("Division by zero!")

    Nothing is carried over from one call to the next.
    """

    def eval(self, text: str) -> Value:
        """Parse, read and reduce *text*.

        Raises LispySyntaxError when *text* does not parse, and
        LispyDepthError when it is nested too deeply to read or reduce.
        """
        tree = parse(text)
        try:
            return evaluate(read(tree))
        except RecursionError as exc:
            raise LispyDepthError("expression nested too deeply") from exc


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _process_line(repl: LispyRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    if line in (":q", ":quit"):
        return False

    try:
        result = repl.eval(line)
    except LispySyntaxError as exc:
        logger.info("rejected input %r: %s", line, exc)
        print(f"Parse error: {exc}", file=dest)
        return True
    except LispyError as exc:
        logger.info("cannot evaluate %r: %s", line, exc)
        print(f"Error: {exc}", file=dest)
        return True

    print(str(result), file=dest)
    return True


def _run_file(repl: LispyRepl, filepath: Path, dest: IO[str]) -> int:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                if not _process_line(repl, file_line.rstrip("\n"), dest):
                    break
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return 1
    return 0


def _load_history(path: Path | None) -> None:
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(str(path))
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("cannot read history file %s: %s", path, exc)


def _save_history(path: Path | None) -> None:
    if readline is None or path is None:
        return
    try:
        readline.write_history_file(str(path))
    except OSError as exc:
        logger.warning("cannot write history file %s: %s", path, exc)


def _interactive(repl: LispyRepl, config: ReplConfig, dest: IO[str]) -> None:
    print(BANNER, file=dest)
    _load_history(config.history_file)

    while True:
        try:
            line = input(config.prompt)
        except EOFError:
            print(file=dest)
            break
        except KeyboardInterrupt:
            print(file=dest)
            break

        if not _process_line(repl, line, dest):
            break

    _save_history(config.history_file)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lispy", description="Integer S-expression calculator.")
    p.add_argument("-c", dest="expr", metavar="EXPR", help="evaluate EXPR and exit")
    p.add_argument("file", nargs="?", type=Path, help="evaluate each line of FILE")
    return p


def main(argv: list[str] | None = None) -> int:
    """Lispy shell (``lispy`` / ``python -m lispy_core``)."""
    args = _build_arg_parser().parse_args(argv)
    config = ReplConfig.from_env()
    setup_logging(config.log_level)

    repl = LispyRepl()
    dest: IO[str] = sys.stdout

    if args.expr is not None:
        _process_line(repl, args.expr, dest)
        return 0

    if args.file is not None:
        return _run_file(repl, args.file, dest)

    _interactive(repl, config, dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
