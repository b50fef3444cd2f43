import sys
import os
import time
from typing import Iterable, List, Optional

from . import lexing, __version__
from .config import RisprConfig
from .errors import RisprError
from .parsing import parse, show_expr
from .runtime import evaluator as runtime_evaluator

PROMPT = "rispr> "
EXIT_COMMAND = "exit()"
EXIT_MESSAGE = "Exiting..."

def run_line(line: str, config: RisprConfig) -> str:
    root = parse(line, config)
    if config.evaluate:
        return str(runtime_evaluator.eval_program(root, config.strict))
    return show_expr(root)

def run_lines(lines: Iterable[str], config: RisprConfig):
    for line in lines:
        line = line.rstrip("\r\n")
        if line.strip() == EXIT_COMMAND:
            print(EXIT_MESSAGE)
            return
        if not line.strip():
            continue
        process(line, config)

def process(line: str, config: RisprConfig):
    start = time.time() * 1000
    try:
        print(run_line(line, config))
    except RisprError as e:
        print(f"Error: {e}")
    if config.debug:
        print(f"  Time: {int(time.time() * 1000 - start)}ms")

def prompt_lines() -> Iterable[str]:
    while True:
        try:
            yield input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            print(EXIT_MESSAGE)
            return

def print_usage():
    print("""Usage:
  python -m rispr [input-file] [options...]\n
Options:
  eval     - Evaluate each line instead of printing its tree
  lenient  - Unknown operators and malformed expressions evaluate to 0
  debug    - Enable debug output

Without an input file, lines are read from standard input.

Examples:
  python -m rispr
  python -m rispr eval
  python -m rispr lines.rispr eval debug
""")

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if any(a in ("-h", "--help") for a in args):
        print_usage()
        return 0
    try:
        config, input_path = RisprConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        print_usage()
        return 2

    if config.debug:
        lexing.DEBUG_LEX = True
        runtime_evaluator.DEBUG_EVAL = True
        print(f"Config: {config}")

    start = time.time() * 1000
    if input_path is not None:
        input_path = os.path.abspath(input_path)
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except OSError as e:
            print(f"Failed to read file: {input_path}")
            print(f"Error: {e}")
            return 1
        run_lines(lines, config)
    elif sys.stdin.isatty():
        print(f"Rispr v{__version__}")
        print("Use exit(), Ctrl-C, or Ctrl-D to exit prompt")
        run_lines(prompt_lines(), config)
    else:
        run_lines(sys.stdin, config)

    if config.debug:
        print(f"Total time: {int(time.time() * 1000 - start)}ms")
    return 0

if __name__ == "__main__":
    sys.exit(main())
