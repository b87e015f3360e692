"""Terminal REPL for UrLisp.

Each input line is read, its first expression evaluated and the transcript
printed. Commands start with '/':  /names lists the bound names, /exit quits.
"""

from __future__ import annotations

import logging
import readline
from pathlib import Path
from typing import Optional

from urlisp.interpreter import Interpreter

logger = logging.getLogger(__name__)

PROMPT = "urlisp> "


class REPL:
    def __init__(self, interp: Interpreter, history: Optional[Path] = None):
        self.interp = interp
        self.history = history
        self.hlen = 0

    def complete(self, text: str, state: int) -> Optional[str]:
        m = [k for k in self.interp.bound_names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def register(self) -> None:
        readline.set_history_length(1000)
        readline.set_completer(self.complete)
        readline.set_completer_delims(" ()'")
        readline.parse_and_bind("tab: complete")

    def start(self) -> None:
        self.register()
        if self.history is None:
            return
        try:
            readline.read_history_file(self.history)
            self.hlen = readline.get_current_history_length()
        except FileNotFoundError:
            self.history.touch()
            self.hlen = 0

    def input(self) -> str:
        line = input(PROMPT)
        if self.history is not None and line.strip():
            nhlen = readline.get_current_history_length()
            readline.append_history_file(nhlen - self.hlen, self.history)
            self.hlen = nhlen
        return line

    def handle(self, line: str) -> Optional[str]:
        """Output for one input line; None means the session should end."""
        match line.strip():
            case "":
                return ""
            case "/exit":
                return None
            case "/names":
                return "\n".join(self.interp.bound_names())
            case cmd if cmd.startswith("/"):
                return f"Unknown command {cmd}"
        return Interpreter.render(self.interp.eval_line(line))


def repl(interp: Interpreter, history: Optional[Path] = None) -> None:
    ctrl = REPL(interp, history)
    ctrl.start()
    logger.debug("repl started with %d bound names", len(interp.bound_names()))
    try:
        while True:
            try:
                line = ctrl.input()
            except EOFError:
                break
            output = ctrl.handle(line)
            if output is None:
                break
            if output:
                print(output)
    except KeyboardInterrupt:
        pass
    print()
