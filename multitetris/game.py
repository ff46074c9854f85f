"""Game model: state snapshots, widget interface and the threaded model loop."""

from __future__ import annotations

import random
import threading
import weakref
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List, Optional

from multitetris.block import Block
from multitetris.board import Board
from multitetris.factory import BlocksFactory
from multitetris.shapes import register_blocks
from multitetris.types import Command, MapSize, TypeBlock, TypeColor

_SCORE_POINTS = (0, 100, 300, 700, 1500)

_SHAPE_ORDER = (
    TypeBlock.I_BLOCK,
    TypeBlock.J_BLOCK,
    TypeBlock.L_BLOCK,
    TypeBlock.O_BLOCK,
    TypeBlock.S_BLOCK,
    TypeBlock.T_BLOCK,
    TypeBlock.Z_BLOCK,
)

_COLOR_ORDER = (TypeColor.RED, TypeColor.GREEN, TypeColor.YELLOW, TypeColor.BLUE)


@dataclass(frozen=True)
class MementoModel:
    """Snapshot of the game handed to widgets."""

    cells: List[TypeColor] = field(default_factory=list)
    size: MapSize = MapSize(0, 0)
    next_block: Optional[Block] = None
    score: int = 0


class AbstractWidget(ABC):
    """A view that receives model snapshots and can be closed by the model."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._memento: Any = None

    @abstractmethod
    def is_open(self) -> bool:
        """True while the widget is shown."""

    @abstractmethod
    def close_widget(self) -> None:
        """Close the widget."""

    def update_widget(self, memento: Any) -> None:
        """Store the latest snapshot of the model."""
        with self._lock:
            self._memento = memento

    def memento(self) -> Any:
        """The latest snapshot received, or None before the first one."""
        with self._lock:
            return self._memento


class AbstractModel(ABC):
    """A model that processes queued commands on its own worker thread.

    Commands are taken newest first. Each processed command produces a
    snapshot that is sent to every registered widget still alive.
    """

    def __init__(self) -> None:
        self._pending: Deque[Command] = deque()
        self._cond = threading.Condition()
        self._finished = False
        self._closed = False
        self._widgets: List[weakref.ReferenceType] = []
        self._widgets_lock = threading.Lock()
        self._worker = threading.Thread(
            target=self._run, name=f"{type(self).__name__}-worker", daemon=True
        )
        self._worker.start()

    def submit(self, command: Command) -> None:
        """Queue ``command`` for the worker thread.

        Raises RuntimeError once the model has been closed.
        """
        with self._cond:
            if self._finished:
                raise RuntimeError("model is closed")
            self._pending.append(command)
            self._cond.notify()

    def add_widget(self, widget: AbstractWidget) -> None:
        """Send snapshots to ``widget`` and close it with the model.

        The widget is held weakly: once it is gone it is silently dropped.
        """
        with self._widgets_lock:
            self._widgets.append(weakref.ref(widget))

    @abstractmethod
    def update_model(self, command: Command) -> Any:
        """Apply ``command`` and return a snapshot of the model."""

    def close(self) -> None:
        """Stop the worker thread and close every live widget."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._finished = True
            self._cond.notify_all()
        if self._worker is not threading.current_thread():
            self._worker.join()
        for widget in self._live_widgets():
            widget.close_widget()

    def __enter__(self) -> AbstractModel:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _live_widgets(self) -> List[AbstractWidget]:
        with self._widgets_lock:
            alive = [(ref, ref()) for ref in self._widgets]
            self._widgets = [ref for ref, widget in alive if widget is not None]
            return [widget for _, widget in alive if widget is not None]

    def _run(self) -> None:
        while True:
            with self._cond:
                while not self._pending and not self._finished:
                    self._cond.wait()
                if self._finished:
                    return
                command = self._pending.pop()
            memento = self.update_model(command)
            for widget in self._live_widgets():
                widget.update_widget(memento)


class GameModel(AbstractModel):
    """Tetris on a 10 by 22 board with a preview of the next block."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._board = Board(10, 22)
        self._factory = BlocksFactory()
        register_blocks(self._factory)
        self._score = 0
        self._current: Optional[Block] = None
        self._next: Block = self._random_block()
        super().__init__()

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    def update_model(self, command: Command) -> MementoModel:
        """Apply ``command`` to the game and return a snapshot.

        A full board is reset first; a new block is spawned when none is falling.
        """
        if self._board.is_full():
            self._reset()
        if not self._board.has_active_block():
            self._spawn()
        self._board.move_block(command)
        if self._board.deleted_lines > 0:
            self._update_score()
        return MementoModel(
            cells=self._board.cells(),
            size=self._board.size,
            next_block=self._next,
            score=self._score,
        )

    def _reset(self) -> None:
        self._board.restart()
        self._score = 0

    def _spawn(self) -> None:
        self._current = self._next
        self._next = self._random_block(self._next)
        self._board.set_block(self._current)

    def _update_score(self) -> None:
        lines = self._board.deleted_lines
        if lines > 0:
            self._score += _SCORE_POINTS[min(lines, len(_SCORE_POINTS) - 1)]

    def _random_block(self, without: Optional[Block] = None) -> Block:
        shape = self._rng.randint(0, len(_SHAPE_ORDER) - 1)
        color = self._rng.randint(0, len(_COLOR_ORDER) - 1)
        if without is not None:
            if without.color is _COLOR_ORDER[color]:
                color = (color + 1) % len(_COLOR_ORDER)
            if without.block_type is _SHAPE_ORDER[shape]:
                shape = (shape + 1) % len(_SHAPE_ORDER)
        return self._factory.create(_SHAPE_ORDER[shape], _COLOR_ORDER[color])