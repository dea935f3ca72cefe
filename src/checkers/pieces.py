"""Defines the two sides of the game and the pieces they own"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.shared_types import Side


class Direction(Enum):
    """A side is identified with the direction its pieces move in. FORWARD moves towards increasing row numbers."""

    FORWARD = auto()
    BACKWARD = auto()

    @property
    def step(self) -> int:
        """Row delta of a simple move"""
        return DIRECTION_RULES[self].step

    @property
    def jump(self) -> int:
        """Row delta of a capture (always twice the step)"""
        return DIRECTION_RULES[self].jump

    @property
    def glyph(self) -> str:
        return DIRECTION_RULES[self].glyph

    def opponent(self) -> Direction:
        return Direction.BACKWARD if self == Direction.FORWARD else Direction.FORWARD

    def to_side(self) -> Side:
        return Side[self.name]

    @classmethod
    def from_side(cls, side: Side) -> Self:
        return cls[side.name]


@dataclass(frozen=True)
class DirectionRule:
    step: int
    glyph: str

    @property
    def jump(self) -> int:
        return 2 * self.step


DIRECTION_RULES: dict[Direction, DirectionRule] = {
    Direction.FORWARD: DirectionRule(step=1, glyph="X"),
    Direction.BACKWARD: DirectionRule(step=-1, glyph="O"),
}

EMPTY_GLYPH = "_"

GLYPH_TO_DIRECTION: dict[str, Direction] = {
    rule.glyph: direction for direction, rule in DIRECTION_RULES.items()
}


@dataclass(frozen=True)
class Piece:
    """A piece never changes once created (no promotion in this variant)."""

    direction: Direction

    @classmethod
    def from_glyph(cls, character: str) -> Self:
        return cls(GLYPH_TO_DIRECTION[character.upper()])

    def to_glyph(self) -> str:
        return self.direction.glyph
