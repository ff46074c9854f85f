"""The seven standard tetrominoes and their registration in a factory."""

from __future__ import annotations

from types import MappingProxyType
from typing import Tuple

from multitetris.block import I_OFFSETS, JLSTZ_OFFSETS, O_OFFSETS, Block, OffsetTable, Orientation
from multitetris.factory import ObjectFactory
from multitetris.types import Position, TypeBlock


def _cells(*pairs: tuple[int, int]) -> Tuple[Position, ...]:
    return tuple(Position(x, y) for x, y in pairs)


def _table(up, right, down, left) -> OffsetTable:
    return MappingProxyType({
        Orientation.UP: _cells(*up),
        Orientation.RIGHT: _cells(*right),
        Orientation.DOWN: _cells(*down),
        Orientation.LEFT: _cells(*left),
    })


class IBlock(Block):
    """Straight tetromino."""

    BLOCK_TYPE = TypeBlock.I_BLOCK
    POSITIONS = _table(
        up=((-1, 0), (0, 0), (1, 0), (2, 0)),
        right=((0, 1), (0, 0), (0, -1), (0, -2)),
        down=((1, 0), (0, 0), (-1, 0), (-2, 0)),
        left=((0, -1), (0, 0), (0, 1), (0, 2)),
    )
    OFFSETS = I_OFFSETS


class JBlock(Block):
    """J tetromino."""

    BLOCK_TYPE = TypeBlock.J_BLOCK
    POSITIONS = _table(
        up=((-1, 1), (-1, 0), (0, 0), (1, 0)),
        right=((1, 1), (0, 1), (0, 0), (0, -1)),
        down=((1, -1), (1, 0), (0, 0), (-1, 0)),
        left=((-1, -1), (0, -1), (0, 0), (0, 1)),
    )
    OFFSETS = JLSTZ_OFFSETS


class LBlock(Block):
    """L tetromino."""

    BLOCK_TYPE = TypeBlock.L_BLOCK
    POSITIONS = _table(
        up=((1, 1), (1, 0), (0, 0), (-1, 0)),
        right=((1, -1), (0, -1), (0, 0), (0, 1)),
        down=((-1, -1), (-1, 0), (0, 0), (1, 0)),
        left=((-1, 1), (0, 1), (0, 0), (0, -1)),
    )
    OFFSETS = JLSTZ_OFFSETS


class OBlock(Block):
    """Square tetromino."""

    BLOCK_TYPE = TypeBlock.O_BLOCK
    POSITIONS = _table(
        up=((0, 1), (1, 1), (1, 0), (0, 0)),
        right=((1, 0), (1, -1), (0, -1), (0, 0)),
        down=((0, -1), (-1, -1), (-1, 0), (0, 0)),
        left=((0, 1), (-1, 1), (-1, 0), (0, 0)),
    )
    OFFSETS = O_OFFSETS


class SBlock(Block):
    """S tetromino."""

    BLOCK_TYPE = TypeBlock.S_BLOCK
    POSITIONS = _table(
        up=((-1, -1), (0, -1), (0, 0), (1, 0)),
        right=((-1, 1), (-1, 0), (0, 0), (0, -1)),
        down=((1, 1), (0, 1), (0, 0), (-1, 0)),
        left=((1, -1), (1, 0), (0, 0), (0, 1)),
    )
    OFFSETS = JLSTZ_OFFSETS


class TBlock(Block):
    """T tetromino."""

    BLOCK_TYPE = TypeBlock.T_BLOCK
    POSITIONS = _table(
        up=((-1, 0), (0, 0), (0, 1), (1, 0)),
        right=((0, 1), (0, 0), (1, 0), (0, -1)),
        down=((1, 0), (0, 0), (0, -1), (-1, 0)),
        left=((0, -1), (0, 0), (-1, 0), (0, 1)),
    )
    OFFSETS = JLSTZ_OFFSETS


class ZBlock(Block):
    """Z tetromino."""

    BLOCK_TYPE = TypeBlock.Z_BLOCK
    POSITIONS = _table(
        up=((-1, 1), (0, 1), (0, 0), (1, 0)),
        right=((1, 1), (1, 0), (0, 0), (0, -1)),
        down=((1, -1), (0, -1), (0, 0), (-1, 0)),
        left=((-1, -1), (-1, 0), (0, 0), (0, 1)),
    )
    OFFSETS = JLSTZ_OFFSETS


ALL_SHAPES: Tuple[type[Block], ...] = (IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock)


def register_blocks(factory: ObjectFactory) -> None:
    """Register every standard tetromino in ``factory`` under its block type."""
    for shape in ALL_SHAPES:
        factory.add(shape.BLOCK_TYPE, shape)