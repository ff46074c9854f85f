"""Base tetromino with orientation handling and SRS wall-kick tables."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Tuple

from multitetris.types import Command, Position, TypeBlock, TypeColor, sub_pointwise


class Orientation(IntEnum):
    """Rotation state of a block, clockwise from spawn."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


OffsetTable = Mapping[Orientation, Tuple[Position, ...]]


def _row(*pairs: tuple[int, int]) -> Tuple[Position, ...]:
    return tuple(Position(x, y) for x, y in pairs)


JLSTZ_OFFSETS: OffsetTable = MappingProxyType({
    Orientation.UP: _row((0, 0), (0, 0), (0, 0), (0, 0), (0, 0)),
    Orientation.RIGHT: _row((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    Orientation.DOWN: _row((0, 0), (0, 0), (0, 0), (0, 0), (0, 0)),
    Orientation.LEFT: _row((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
})

I_OFFSETS: OffsetTable = MappingProxyType({
    Orientation.UP: _row((0, 0), (-1, 0), (2, 0), (-1, 0), (2, 0)),
    Orientation.RIGHT: _row((-1, 0), (0, 0), (0, 0), (0, 1), (0, -2)),
    Orientation.DOWN: _row((-1, 1), (1, 1), (-2, 1), (1, 0), (-2, 0)),
    Orientation.LEFT: _row((0, 1), (0, 1), (0, 1), (0, -1), (0, 2)),
})

O_OFFSETS: OffsetTable = MappingProxyType({
    Orientation.UP: _row((0, 0), (0, 0), (0, 0), (0, 0), (0, 0)),
    Orientation.RIGHT: _row((0, -1), (0, -1), (0, -1), (0, -1), (0, -1)),
    Orientation.DOWN: _row((-1, -1), (-1, -1), (-1, -1), (-1, -1), (-1, -1)),
    Orientation.LEFT: _row((-1, 0), (-1, 0), (-1, 0), (-1, 0), (-1, 0)),
})


class Block:
    """A tetromino of one colour.

    Concrete shapes set ``BLOCK_TYPE``, ``POSITIONS`` (cells per orientation,
    relative to the pivot) and ``OFFSETS`` (wall-kick data per orientation).
    """

    BLOCK_TYPE: ClassVar[TypeBlock] = TypeBlock.NONE
    POSITIONS: ClassVar[OffsetTable] = MappingProxyType({})
    OFFSETS: ClassVar[OffsetTable] = MappingProxyType({})

    def __init__(self, color: TypeColor) -> None:
        self._color = color
        self._orientation = Orientation.UP

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(color={self._color.name}, "
            f"orientation={self._orientation.name})"
        )

    @property
    def color(self) -> TypeColor:
        """Colour of the block."""
        return self._color

    @property
    def block_type(self) -> TypeBlock:
        """Kind of tetromino."""
        return self.BLOCK_TYPE

    @property
    def orientation(self) -> Orientation:
        """Current rotation state."""
        return self._orientation

    def fields(self, orientation: Optional[Orientation] = None) -> Tuple[Position, ...]:
        """Cells of the block for ``orientation``, or for the current one.

        Raises KeyError if the shape has no cells for that orientation.
        """
        key = self._orientation if orientation is None else orientation
        return self.POSITIONS[key]

    def next_orientation(self, command: Optional[Command] = None) -> Orientation:
        """Orientation the block would have after ``command``."""
        if command is Command.ROTATE_RIGHT:
            return Orientation((self._orientation + 1) % len(Orientation))
        if command is Command.ROTATE_LEFT:
            return Orientation((self._orientation - 1) % len(Orientation))
        return self._orientation

    def offsets(self, start: Orientation, end: Orientation) -> Tuple[Position, ...]:
        """Wall-kick candidates for rotating from ``start`` to ``end``."""
        return sub_pointwise(self.OFFSETS[start], self.OFFSETS[end])

    def rotate(self, command: Command) -> None:
        """Apply a rotation command to the block."""
        self._orientation = self.next_orientation(command)