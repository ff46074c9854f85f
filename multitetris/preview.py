"""Small grids that show the next block in a preview pane."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from multitetris.types import MapSize, TypeBlock, TypeColor

# Rows are listed bottom first, matching the board's row order.
_TEMPLATES: Dict[TypeBlock, Tuple[str, ...]] = {
    TypeBlock.I_BLOCK: ("......", "......", ".####.", "......"),
    TypeBlock.J_BLOCK: (".....", ".###.", ".#...", "....."),
    TypeBlock.L_BLOCK: (".....", ".###.", "...#.", "....."),
    TypeBlock.O_BLOCK: ("....", ".##.", ".##.", "...."),
    TypeBlock.S_BLOCK: (".....", ".##..", "..##.", "....."),
    TypeBlock.T_BLOCK: (".....", ".###.", "..#..", "....."),
    TypeBlock.Z_BLOCK: (".....", "..##.", ".##..", "....."),
}


def preview_grid(block_type: TypeBlock, color: TypeColor) -> Tuple[List[TypeColor], MapSize]:
    """Cells and size of the preview picture of ``block_type`` in ``color``.

    Raises ValueError for a block type that has no picture.
    """
    try:
        rows = _TEMPLATES[block_type]
    except KeyError:
        raise ValueError(f"no preview for {block_type!r}") from None
    cells = [color if mark == "#" else TypeColor.NONE for row in rows for mark in row]
    return cells, MapSize(len(rows), len(rows[0]))


class PreviewState:
    """Keeps the preview picture in step with the announced next block."""

    def __init__(self) -> None:
        self._type = TypeBlock.NONE
        self.color = TypeColor.NONE
        self.cells: List[TypeColor] = []
        self.size: Optional[MapSize] = None

    @property
    def block_type(self) -> TypeBlock:
        """Type of the block last shown."""
        return self._type

    def set_block(self, block: Any) -> bool:
        """Show ``block``; return True if the picture changed.

        ``None``, a block identical in type and colour to the one shown, or a
        block type without a picture leave the picture as it is.
        """
        if block is None:
            return False
        if block.block_type is self._type and block.color is self.color:
            return False
        self._type = block.block_type
        self.color = block.color
        try:
            self.cells, self.size = preview_grid(self._type, self.color)
        except ValueError:
            return False
        return True