import pytest

from multitetris.block import Orientation
from multitetris.factory import BlocksFactory
from multitetris.shapes import (
    IBlock,
    JBlock,
    LBlock,
    OBlock,
    SBlock,
    TBlock,
    ZBlock,
    register_blocks,
)
from multitetris.types import Command, Position, TypeBlock, TypeColor


@pytest.fixture
def factory():
    blocks = BlocksFactory()
    register_blocks(blocks)
    return blocks


def _offsets(*pairs):
    return tuple(Position(x, y) for x, y in pairs)


TRANSITIONS = [
    (Orientation.UP, Orientation.RIGHT),
    (Orientation.RIGHT, Orientation.DOWN),
    (Orientation.DOWN, Orientation.LEFT),
    (Orientation.LEFT, Orientation.UP),
]


def test_block_color(factory):
    block = factory.create(TypeBlock.I_BLOCK, TypeColor.GREEN)
    assert block.color == TypeColor.GREEN


def test_status_block_turning_clockwise(factory):
    block = factory.create(TypeBlock.I_BLOCK, TypeColor.GREEN)
    assert block.orientation == Orientation.UP
    for i in range(4):
        expected = Orientation((i + 1) % 4)
        assert block.next_orientation(Command.ROTATE_RIGHT) == expected
        block.rotate(Command.ROTATE_RIGHT)
        assert block.orientation == expected


def test_status_block_turning_counterclockwise(factory):
    block = factory.create(TypeBlock.I_BLOCK, TypeColor.GREEN)
    assert block.orientation == Orientation.UP
    for i in range(1, 5):
        expected = Orientation((4 - i) % 4)
        assert block.next_orientation(Command.ROTATE_LEFT) == expected
        block.rotate(Command.ROTATE_LEFT)
        assert block.orientation == expected


def test_jlstz_offsets(factory):
    block = factory.create(TypeBlock.L_BLOCK, TypeColor.GREEN)
    expected = [
        _offsets((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
        _offsets((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
        _offsets((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
        _offsets((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
    ]
    for (start, end), offsets in zip(TRANSITIONS, expected):
        assert block.offsets(start, end) == offsets


def test_i_offsets(factory):
    block = factory.create(TypeBlock.I_BLOCK, TypeColor.GREEN)
    expected = [
        _offsets((1, 0), (-1, 0), (2, 0), (-1, -1), (2, 2)),
        _offsets((0, -1), (-1, -1), (2, -1), (-1, 1), (2, -2)),
        _offsets((-1, 0), (1, 0), (-2, 0), (1, 1), (-2, -2)),
        _offsets((0, 1), (1, 1), (-2, 1), (1, -1), (-2, 2)),
    ]
    for (start, end), offsets in zip(TRANSITIONS, expected):
        assert block.offsets(start, end) == offsets


def test_o_offsets(factory):
    block = factory.create(TypeBlock.O_BLOCK, TypeColor.GREEN)
    expected = [
        _offsets(*[(0, 1)] * 5),
        _offsets(*[(1, 0)] * 5),
        _offsets(*[(0, -1)] * 5),
        _offsets(*[(-1, 0)] * 5),
    ]
    for (start, end), offsets in zip(TRANSITIONS, expected):
        assert block.offsets(start, end) == offsets


def test_register_blocks_registers_all_seven(factory):
    assert len(factory) == 7
    assert TypeBlock.NONE not in factory


@pytest.mark.parametrize(
    "kind, cls",
    [
        (TypeBlock.I_BLOCK, IBlock),
        (TypeBlock.J_BLOCK, JBlock),
        (TypeBlock.L_BLOCK, LBlock),
        (TypeBlock.O_BLOCK, OBlock),
        (TypeBlock.S_BLOCK, SBlock),
        (TypeBlock.T_BLOCK, TBlock),
        (TypeBlock.Z_BLOCK, ZBlock),
    ],
)
def test_factory_creates_matching_shape(factory, kind, cls):
    block = factory.create(kind, TypeColor.BLUE)
    assert isinstance(block, cls)
    assert block.block_type == kind
    assert block.color == TypeColor.BLUE


@pytest.mark.parametrize("cls", [IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock])
def test_every_orientation_has_four_distinct_cells_around_pivot(cls):
    block = cls(TypeColor.RED)
    for orientation in Orientation:
        cells = block.fields(orientation)
        assert len(set(cells)) == 4
        assert Position(0, 0) in cells


def test_fields_follow_rotation():
    block = TBlock(TypeColor.RED)
    block.rotate(Command.ROTATE_RIGHT)
    assert block.fields() == block.fields(Orientation.RIGHT)
    assert block.fields() == (Position(0, 1), Position(0, 0), Position(1, 0), Position(0, -1))