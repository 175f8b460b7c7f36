"""Player command models."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Direction(str, Enum):
    """移动方向"""
    LEFT = "left"
    RIGHT = "right"


class Command(str, Enum):
    """玩家每回合的指令"""
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    INVALID = "invalid"

    @property
    def direction(self) -> Optional[Direction]:
        if self is Command.LEFT:
            return Direction.LEFT
        if self is Command.RIGHT:
            return Direction.RIGHT
        return None


_LETTERS = {
    "l": Command.LEFT,
    "r": Command.RIGHT,
    "q": Command.QUIT,
}


def parse_command(raw: Optional[str]) -> Command:
    """Classify raw player input by its first non-whitespace character.

    Matching is case-insensitive, so ``"L"``, ``"left"`` and ``"  Left"``
    all classify as ``Command.LEFT``. Anything unrecognised is
    ``Command.INVALID``.
    """
    if not raw:
        return Command.INVALID
    stripped = raw.lstrip()
    if not stripped:
        return Command.INVALID
    return _LETTERS.get(stripped[0].lower(), Command.INVALID)
