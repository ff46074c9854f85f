"""Base class for front ends that run on their own thread."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional


class AbstractApplication(ABC):
    """A front end whose main loop runs on a background thread.

    The application counts as running from construction until ``stop`` is
    called or ``run`` returns.
    """

    def __init__(self) -> None:
        self._running = threading.Event()
        self._running.set()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Launch ``run`` on a new thread.

        Raises RuntimeError if the application was already started.
        """
        if self._thread is not None:
            raise RuntimeError("application already started")
        self._thread = threading.Thread(
            target=self._main, name=f"{type(self).__name__}-thread", daemon=True
        )
        self._thread.start()

    def is_running(self) -> bool:
        """True while the application is executing."""
        return self._running.is_set()

    @abstractmethod
    def run(self) -> None:
        """The application's main loop."""

    def stop(self) -> None:
        """Ask the main loop to finish and wait for its thread."""
        self._running.clear()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _main(self) -> None:
        try:
            self.run()
        finally:
            self._running.clear()