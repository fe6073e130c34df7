from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kappa import config
from kappa.interpreter import Interpreter
from kappa.repl import Repl, describe_error
from kappa.types.errors import KappaError


def main_with_args(files: list[Path], interactive: bool = False, lenient_arity: bool = False) -> int:
    logging.basicConfig(level=config.get_log_level(), format="%(message)s", stream=sys.stderr)
    sys.setrecursionlimit(config.get_recursion_limit())

    interpreter = Interpreter(strict_arity=False if lenient_arity else None)
    sources = [p for p in [config.get_prelude_path()] if p is not None] + list(files)
    for path in sources:
        try:
            interpreter.load(path)
        except (KappaError, RecursionError) as e:
            logging.error("%s: %s", path, describe_error(e))
            return 1
        except OSError as e:
            logging.error("cannot read %s: %s", path, e)
            return 1

    if interactive or not files:
        Repl(interpreter, prompt=config.get_prompt()).run()
    return 0


def main():
    parser = argparse.ArgumentParser(
        prog="kappa",
        description="Evaluate Kappa Lisp source files or start an interactive session",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Source files to evaluate in order")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start the REPL after loading files",
    )
    parser.add_argument(
        "--lenient-arity",
        action="store_true",
        help="Bind closure arguments positionally without checking their count",
    )
    args = parser.parse_args()
    sys.exit(main_with_args(**vars(args)))


if __name__ == "__main__":
    main()
