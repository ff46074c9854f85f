import pytest

from multitetris.preview import PreviewState, preview_grid
from multitetris.shapes import IBlock, OBlock, TBlock
from multitetris.block import Block
from multitetris.types import MapSize, TypeBlock, TypeColor

ALL_TYPES = [
    TypeBlock.I_BLOCK,
    TypeBlock.J_BLOCK,
    TypeBlock.L_BLOCK,
    TypeBlock.O_BLOCK,
    TypeBlock.S_BLOCK,
    TypeBlock.T_BLOCK,
    TypeBlock.Z_BLOCK,
]


@pytest.mark.parametrize("block_type", ALL_TYPES)
def test_every_grid_has_four_cells_of_the_color(block_type):
    cells, size = preview_grid(block_type, TypeColor.BLUE)
    assert len(cells) == size.rows * size.columns
    assert size.rows == 4
    colored = [cell for cell in cells if cell is not TypeColor.NONE]
    assert colored == [TypeColor.BLUE] * 4


def test_i_grid_layout():
    cells, size = preview_grid(TypeBlock.I_BLOCK, TypeColor.RED)
    assert size == MapSize(4, 6)
    row = cells[2 * 6:3 * 6]
    assert row == [TypeColor.NONE] + [TypeColor.RED] * 4 + [TypeColor.NONE]


def test_o_grid_size():
    _, size = preview_grid(TypeBlock.O_BLOCK, TypeColor.GREEN)
    assert size == MapSize(4, 4)


def test_none_type_has_no_grid():
    with pytest.raises(ValueError):
        preview_grid(TypeBlock.NONE, TypeColor.RED)


def test_state_ignores_missing_block():
    state = PreviewState()
    assert state.set_block(None) is False
    assert state.block_type is TypeBlock.NONE
    assert state.cells == []


def test_state_updates_on_new_block_only():
    state = PreviewState()
    assert state.set_block(TBlock(TypeColor.YELLOW)) is True
    assert state.block_type is TypeBlock.T_BLOCK
    expected, _ = preview_grid(TypeBlock.T_BLOCK, TypeColor.YELLOW)
    assert state.cells == expected
    assert state.set_block(TBlock(TypeColor.YELLOW)) is False


def test_state_updates_on_color_change():
    state = PreviewState()
    state.set_block(IBlock(TypeColor.RED))
    assert state.set_block(IBlock(TypeColor.GREEN)) is True
    assert state.color is TypeColor.GREEN
    assert TypeColor.RED not in state.cells


def test_state_keeps_picture_for_typeless_block():
    state = PreviewState()
    state.set_block(OBlock(TypeColor.BLUE))
    before = list(state.cells)
    assert state.set_block(Block(TypeColor.RED)) is False
    assert state.block_type is TypeBlock.NONE
    assert state.cells == before