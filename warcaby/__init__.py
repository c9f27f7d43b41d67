"""Checkers against a minimax AI, with console and pygame front ends."""

__version__ = "0.1.0"