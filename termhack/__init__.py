"""termhack: candidate elimination and guess recommendation for terminal hacking."""

__version__ = "0.1.0"
