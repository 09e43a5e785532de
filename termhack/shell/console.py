"""
Text-stream front end for a session.

Data the player will act on (candidates, the recommended guess, the deduced
password) goes to `output`; prompts, headings and errors go to `errput`. That
way `termhack ... > answer.txt` captures only the useful lines.
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from termhack.solvers import Recommendation
from .commands import HELP_TEXT, Command, ParseError, parse_command


class TextConsole:
    def __init__(self, input: TextIO, output: TextIO, errput: TextIO, prompt: str = "> "):
        self.input = input
        self.output = output
        self.errput = errput
        self.prompt = prompt

    @classmethod
    def std(cls) -> "TextConsole":
        return cls(sys.stdin, sys.stdout, sys.stderr)

    def get_command(self) -> Optional[Command]:
        """
        Prompt until a well-formed command is read. Returns None at EOF.
        """
        while True:
            self.errput.write(self.prompt)
            self.errput.flush()
            line = self.input.readline()
            if not line:
                return None
            try:
                return parse_command(line)
            except ParseError as e:
                self.show_error(e)

    def show_passwords(self, passwords: Iterable[str]) -> None:
        passwords = list(passwords)
        self.errput.write(f"Remaining candidate passwords: ({len(passwords)})\n")
        for pw in passwords:
            self.output.write(f" * {pw}\n")
        self.output.flush()
        self.errput.write("\n")

    def show_recommended(self, rec: Recommendation) -> None:
        self.errput.write("Recommended: ")
        self.errput.flush()
        self.output.write(f"{rec.guess}\n")
        self.output.flush()
        self.errput.write(
            f"  expected remaining {float(rec.expected_remaining):.2f} "
            f"({rec.expected_remaining}), worst case {rec.worst_case}, "
            f"{rec.entropy_bits:.2f} bits [{rec.strategy}]\n\n"
        )

    def show_narrowed(self, size: int) -> None:
        self.errput.write(f"{size} candidates remain.\n\n")

    def show_answer(self, answer: str) -> None:
        self.errput.write("Password deduced: ")
        self.errput.flush()
        self.output.write(f"{answer}\n")
        self.output.flush()
        self.errput.write("\n")

    def show_contradiction(self, message: str) -> None:
        self.errput.write(f"Contradiction: {message}.\n")
        self.errput.write("Check the feedback you entered, then `reset` to start over.\n\n")

    def show_info(self, message: str) -> None:
        self.errput.write(f"{message}\n\n")

    def show_error(self, err: Exception) -> None:
        self.errput.write(f"Error: {err}\n\n")

    def show_help(self) -> None:
        self.errput.write("Commands:\n")
        for line in HELP_TEXT:
            self.errput.write(f"  {line}\n")
        self.errput.write("\n")
