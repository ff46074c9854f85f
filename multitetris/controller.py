"""Controllers that turn player input and elapsed time into model commands."""

from __future__ import annotations

import time
import weakref
from datetime import timedelta
from typing import Any, Callable, Union

from multitetris.types import Command


class MoveController:
    """Forwards movement commands to a model while that model is alive."""

    def __init__(self, model: Any) -> None:
        self._model = weakref.ref(model)

    def move(self, command: Command) -> None:
        """Send ``command`` to the model; does nothing once the model is gone."""
        model = self._model()
        if model is not None:
            model.submit(command)


class TimeController:
    """Moves the falling block down each time ``interval`` has elapsed."""

    def __init__(
        self,
        model: Any,
        interval: Union[float, timedelta] = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        self._interval = float(interval)
        self._clock = clock
        self._mover = MoveController(model)
        self._start = clock()

    def check(self) -> bool:
        """Send a DOWN command if the interval has elapsed; return whether one was sent."""
        now = self._clock()
        if now - self._start < self._interval:
            return False
        self._mover.move(Command.DOWN)
        self._start = now
        return True