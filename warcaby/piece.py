"""Checkers pieces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Piece:
    """A single man or king, owned either by the AI or by the player."""

    is_ai: bool
    is_king: bool = False

    def promote(self) -> None:
        """Turn this piece into a king."""
        self.is_king = True

    def symbol(self) -> str:
        """One-letter symbol: 'a'/'A' for the AI, 'p'/'P' for the player."""
        if self.is_ai:
            return "A" if self.is_king else "a"
        return "P" if self.is_king else "p"