"""
Textual command grammar for the interactive session.

One command per line, tokens separated by whitespace:

    view                          list remaining candidates
    guess <password> <likeness>   apply terminal feedback
    recommend                     suggest the next guess
    answer                        show the deduced password
    remove <password>             strike a candidate by hand
    reset                         start over with the startup candidates
    help                          list commands
    exit                          leave the session

parse_command() turns a line into one of the Command dataclasses below or
raises a ParseError subclass describing what was wrong with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Union


# ---- commands ----

@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class View:
    pass


@dataclass(frozen=True)
class Recommend:
    pass


@dataclass(frozen=True)
class Answer:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Guess:
    guess: str
    correctness: int


@dataclass(frozen=True)
class Remove:
    password: str


Command = Union[Exit, View, Recommend, Answer, Reset, Help, Guess, Remove]


# ---- parse errors ----

class ParseError(ValueError):
    """A line that is not a well-formed command."""


class Blank(ParseError):
    def __init__(self):
        super().__init__("expected command, found blank line")


class UnrecognisedCommand(ParseError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"command not recognised: {word}")


class UnexpectedToken(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unexpected token: {token}")


class MissingToken(ParseError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"expected token: <{what}>, found nothing")


class MalformedCorrectness(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"cannot parse correctness value - expected nonnegative integer, found {token}"
        )


# ---- parser ----

def _no_args(cmd: Command) -> Callable[[Iterator[str]], Command]:
    def parse(args: Iterator[str]) -> Command:
        extra = next(args, None)
        if extra is not None:
            raise UnexpectedToken(extra)
        return cmd
    return parse


def _parse_guess(args: Iterator[str]) -> Command:
    guess = next(args, None)
    if guess is None:
        raise MissingToken("guess")
    token = next(args, None)
    if token is None:
        raise MissingToken("correctness")
    extra = next(args, None)
    if extra is not None:
        raise UnexpectedToken(extra)
    # plain ASCII digits only; int() would also take "+3" or "³"
    if not (token.isascii() and token.isdigit()):
        raise MalformedCorrectness(token)
    return Guess(guess, int(token))


def _parse_remove(args: Iterator[str]) -> Command:
    pw = next(args, None)
    if pw is None:
        raise MissingToken("password to remove")
    extra = next(args, None)
    if extra is not None:
        raise UnexpectedToken(extra)
    return Remove(pw)


PARSERS: Dict[str, Callable[[Iterator[str]], Command]] = {
    "exit": _no_args(Exit()),
    "view": _no_args(View()),
    "recommend": _no_args(Recommend()),
    "answer": _no_args(Answer()),
    "reset": _no_args(Reset()),
    "help": _no_args(Help()),
    "guess": _parse_guess,
    "remove": _parse_remove,
}

HELP_TEXT: List[str] = [
    "view                          list remaining candidate passwords",
    "guess <password> <likeness>   keep candidates sharing <likeness> characters with <password>",
    "recommend                     suggest the candidate that narrows the list fastest",
    "answer                        show the deduced password",
    "remove <password>             strike a candidate from the list",
    "reset                         start over with the original candidates",
    "help                          show this message",
    "exit                          quit",
]


def parse_command(line: str) -> Command:
    tokens = iter(line.split())
    word = next(tokens, None)
    if word is None:
        raise Blank()
    try:
        parser = PARSERS[word]
    except KeyError:
        raise UnrecognisedCommand(word) from None
    return parser(tokens)
