"""Sort distinct integers with a restricted set of stack moves, plus small text, byte and list helpers."""

__version__ = "1.0.0"