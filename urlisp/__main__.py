import logging
import sys

from urlisp import config
from urlisp.interpreter import Interpreter
from urlisp.repl import repl


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    # Deep user recursion still ends in a fatal RecursionError, just later
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))
    repl(Interpreter(), config.get_history_file())


if __name__ == "__main__":
    main()
