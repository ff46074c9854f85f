"""Value types shared by the game model: enums, positions and point arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple


class TypeBlock(IntEnum):
    """Kinds of tetromino."""

    NONE = 0
    I_BLOCK = 1
    J_BLOCK = 2
    L_BLOCK = 3
    O_BLOCK = 4
    S_BLOCK = 5
    T_BLOCK = 6
    Z_BLOCK = 7


class Command(IntEnum):
    """Player and timer commands."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    ROTATE_RIGHT = 3
    ROTATE_LEFT = 4


class TypeColor(IntEnum):
    """Colour of a board cell; NONE marks an empty cell."""

    NONE = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4


@dataclass(frozen=True)
class MapSize:
    """Board dimensions."""

    rows: int
    columns: int


@dataclass(frozen=True)
class Position:
    """A cell coordinate or a displacement on the board."""

    x: int
    y: int

    def __add__(self, other: object) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)


Points = Tuple[Position, ...]


def translate(points: Iterable[Position], delta: Position) -> Points:
    """Shift every point by ``delta``."""
    return tuple(point + delta for point in points)


def add_pointwise(lhs: Iterable[Position], rhs: Iterable[Position]) -> Points:
    """Add two equally long point sequences element by element."""
    return tuple(a + b for a, b in zip(lhs, rhs, strict=True))


def sub_pointwise(lhs: Iterable[Position], rhs: Iterable[Position]) -> Points:
    """Subtract two equally long point sequences element by element."""
    return tuple(a - b for a, b in zip(lhs, rhs, strict=True))