from .app import App
from .console import TextConsole
from .commands import parse_command, ParseError

__all__ = ["App", "TextConsole", "parse_command", "ParseError"]
