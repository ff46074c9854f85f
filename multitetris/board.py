"""Playing field: the settled cells plus the falling block."""

from __future__ import annotations

from typing import List, Optional

from multitetris.block import Block
from multitetris.types import Command, MapSize, Position, TypeBlock, TypeColor, translate

_SHIFTS = {
    Command.DOWN: Position(0, -1),
    Command.RIGHT: Position(1, 0),
    Command.LEFT: Position(-1, 0),
}


class Board:
    """A grid of coloured cells with one active block.

    Row 0 is the bottom. One hidden row above the visible area catches blocks
    that stick out of the top; anything settled there means the board is full.
    """

    def __init__(self, columns: int = 10, rows: int = 25) -> None:
        self._columns = columns
        self._rows = rows + 1
        self._data: List[TypeColor] = [TypeColor.NONE] * (self._rows * self._columns)
        self._active: Optional[Block] = None
        self._position = Position(0, 0)
        self._deleted = 0

    def cells(self) -> List[TypeColor]:
        """Visible cells row by row from the bottom, the active block drawn in."""
        visible = self._data[: (self._rows - 1) * self._columns]
        if self._active is not None:
            self._paint(visible, self._rows - 1)
        return visible

    @property
    def size(self) -> MapSize:
        """Visible size of the board."""
        return MapSize(self._rows - 1, self._columns)

    def is_full(self) -> bool:
        """True if anything has settled in the hidden top row."""
        top = self._data[(self._rows - 1) * self._columns:]
        return any(cell is not TypeColor.NONE for cell in top)

    def restart(self) -> None:
        """Clear the board and drop the active block."""
        self._data = [TypeColor.NONE] * len(self._data)
        self._active = None
        self._deleted = 0

    def set_block(self, block: Block) -> None:
        """Make ``block`` the active one at the spawn point; typeless blocks are ignored."""
        if block.block_type is TypeBlock.NONE:
            return
        self._active = block
        # half the width, rounded half up
        self._position = Position((self._columns + 1) // 2, self._rows - 2)

    def has_active_block(self) -> bool:
        """True while a block is falling."""
        return self._active is not None

    def move_block(self, command: Command) -> None:
        """Apply ``command`` to the active block, settling it if it cannot fall."""
        self._deleted = 0
        if self._active is None:
            return
        if command in (Command.ROTATE_RIGHT, Command.ROTATE_LEFT):
            self._rotate(command)
        elif command in _SHIFTS:
            self._shift(command)

    @property
    def deleted_lines(self) -> int:
        """Lines cleared by the last move."""
        return self._deleted

    def _index(self, pos: Position) -> int:
        return pos.y * self._columns + pos.x

    def _inside(self, pos: Position, rows: int) -> bool:
        return 0 <= pos.x < self._columns and 0 <= pos.y < rows

    def _can_place(self, points) -> bool:
        return all(
            self._inside(p, self._rows) and self._data[self._index(p)] is TypeColor.NONE
            for p in points
        )

    def _paint(self, target: List[TypeColor], rows: int) -> None:
        assert self._active is not None
        color = self._active.color
        for p in translate(self._active.fields(), self._position):
            if self._inside(p, rows):
                target[self._index(p)] = color

    def _rotate(self, command: Command) -> None:
        block = self._active
        assert block is not None
        start = block.orientation
        end = block.next_orientation(command)
        candidate = translate(block.fields(end), self._position)
        for kick in block.offsets(start, end):
            if self._can_place(translate(candidate, kick)):
                block.rotate(command)
                self._position = self._position + kick
                return

    def _shift(self, command: Command) -> None:
        block = self._active
        assert block is not None
        target = self._position + _SHIFTS[command]
        if self._can_place(translate(block.fields(), target)):
            self._position = target
        elif command is Command.DOWN:
            self._paint(self._data, self._rows)
            self._active = None
            self._delete_lines()

    def _delete_lines(self) -> None:
        width = self._columns
        rows = [self._data[r * width:(r + 1) * width] for r in range(self._rows)]
        top = rows[-1]
        kept = [row for row in rows if TypeColor.NONE in row]
        self._deleted += len(rows) - len(kept)
        # rows above a cleared line drop down; the top row is repeated to refill
        for _ in range(len(rows) - len(kept)):
            kept.append(list(top))
        self._data = [cell for row in kept for cell in row]