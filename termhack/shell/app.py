"""
Interactive session loop.

- App.run():  read commands until the password is deduced, `exit`, or EOF.
- App.step(): execute one command against the pool.

Every HackError raised by the engine is shown to the player and the loop goes
on. After a contradiction the pool is empty ("stuck"): guesses keep
reporting the contradiction until `reset` rebuilds the pool from the startup
candidates.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from termhack.engine import (
    CandidatePool, Contradiction, EliminationOutcome, HackError, Narrowed, Solved,
)
from termhack.solvers import DEFAULT_STRATEGY, create_strategy
from . import commands as cmd
from .console import TextConsole

logger = logging.getLogger(__name__)


class App:
    def __init__(self, candidates: Sequence[str], console: TextConsole,
                 strategy: str = DEFAULT_STRATEGY):
        # startup list is kept for `reset`; the pool validates it
        self.startup: List[str] = list(candidates)
        self.pool = CandidatePool.initialize(self.startup)
        self.console = console
        self.strategy = create_strategy(strategy)
        self.finished = False

    def run(self) -> int:
        """
        Drive the session to completion. Returns the process exit status (0).
        """
        if self.pool.is_solved:
            self.console.show_answer(self.pool.answer())
            return 0

        while not self.finished:
            command = self.console.get_command()
            if command is None:  # EOF
                break
            self.step(command)
        return 0

    def step(self, command: cmd.Command) -> None:
        try:
            self._dispatch(command)
        except HackError as e:
            logger.debug("command %r rejected: %s", command, e)
            self.console.show_error(e)

    def _dispatch(self, command: cmd.Command) -> None:
        if isinstance(command, cmd.Exit):
            self.finished = True
        elif isinstance(command, cmd.View):
            self.console.show_passwords(self.pool.view())
        elif isinstance(command, cmd.Recommend):
            self.console.show_recommended(self.strategy.recommend(self.pool.view()))
        elif isinstance(command, cmd.Answer):
            self.console.show_answer(self.pool.answer())
        elif isinstance(command, cmd.Guess):
            self._report(self.pool.eliminate(command.guess, command.correctness))
        elif isinstance(command, cmd.Remove):
            self._report(self.pool.remove(command.password))
        elif isinstance(command, cmd.Reset):
            self.pool = CandidatePool.initialize(self.startup)
            self.console.show_info(f"Reset: {len(self.pool)} candidates restored.")
        elif isinstance(command, cmd.Help):
            self.console.show_help()
        else:
            raise TypeError(f"unhandled command: {command!r}")

    def _report(self, outcome: EliminationOutcome) -> None:
        if isinstance(outcome, Narrowed):
            self.console.show_narrowed(outcome.size)
        elif isinstance(outcome, Solved):
            self.console.show_answer(outcome.password)
            self.finished = True
        elif isinstance(outcome, Contradiction):
            self.console.show_contradiction(str(outcome))
        else:
            raise TypeError(f"unhandled outcome: {outcome!r}")
