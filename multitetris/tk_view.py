"""Tkinter front end: one window per game view, each with board, preview and score."""

from __future__ import annotations

import tkinter as tk
from typing import Any, List, Optional, Sequence, Tuple

from multitetris.application import AbstractApplication
from multitetris.controller import MoveController
from multitetris.game import AbstractWidget
from multitetris.preview import PreviewState
from multitetris.types import Command, MapSize, TypeColor

Rect = Tuple[int, int, int, int, TypeColor]

MAP_SIZE = (420, 800)
PREVIEW_SIZE = (180, 150)
SCORE_SIZE = (180, 100)
SCORE_FONT = ("Arial", 24, "bold")
POLL_MS = 30

_COLORS = {
    TypeColor.BLUE: "blue",
    TypeColor.GREEN: "green",
    TypeColor.RED: "red",
    TypeColor.YELLOW: "yellow",
}

_KEYSYMS = {
    "a": Command.LEFT,
    "left": Command.LEFT,
    "w": Command.ROTATE_RIGHT,
    "up": Command.ROTATE_RIGHT,
    "d": Command.RIGHT,
    "right": Command.RIGHT,
    "s": Command.DOWN,
    "down": Command.DOWN,
}


def color_for(color: TypeColor) -> str:
    """Tk colour name of a cell colour; empty cells are black."""
    return _COLORS.get(color, "black")


def command_for_keysym(keysym: str) -> Optional[Command]:
    """Command bound to a Tk key symbol, or None if the key is unbound."""
    return _KEYSYMS.get(keysym.lower())


def cell_rectangles(
    cells: Sequence[TypeColor], size: MapSize, width: int, height: int
) -> List[Rect]:
    """Rectangles ``(x, y, w, h, colour)`` of the filled cells, bottom row first.

    Cell sizes are whole pixels; row 0 is drawn at the bottom of the area.
    Empty input or a size without rows or columns yields no rectangles.
    """
    if not cells or size.rows <= 0 or size.columns <= 0:
        return []
    off_x = width // size.columns
    off_y = height // size.rows
    rects: List[Rect] = []
    for index, color in enumerate(cells[: size.rows * size.columns]):
        if color is TypeColor.NONE:
            continue
        row, column = divmod(index, size.columns)
        rects.append((column * off_x, height - row * off_y - off_y, off_x, off_y, color))
    return rects


def _canvas_size(canvas: tk.Canvas) -> Tuple[int, int]:
    width = canvas.winfo_width()
    height = canvas.winfo_height()
    if width <= 1 or height <= 1:
        return int(canvas["width"]), int(canvas["height"])
    return width, height


def _paint(canvas: tk.Canvas, cells: Sequence[TypeColor], size: Optional[MapSize]) -> None:
    canvas.delete("all")
    if size is None:
        return
    width, height = _canvas_size(canvas)
    for x, y, w, h, color in cell_rectangles(cells, size, width, height):
        canvas.create_rectangle(x, y, x + w, y + h, fill=color_for(color), outline="black")


class TkWidget(tk.Toplevel):
    """A game window: the board on the left, next block and score on the right."""

    def __init__(self, model: Any, master: Optional[tk.Misc] = None) -> None:
        super().__init__(master)
        self.title("Tetris")
        self._controller = MoveController(model)
        self._memento: Any = None
        self._preview = PreviewState()
        self.visible = True

        self._map = tk.Canvas(
            self, width=MAP_SIZE[0], height=MAP_SIZE[1], bg="black", highlightthickness=0
        )
        self._map.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        side = tk.Frame(self, width=PREVIEW_SIZE[0])
        side.pack(side=tk.LEFT, fill=tk.Y)
        self._preview_canvas = tk.Canvas(
            side, width=PREVIEW_SIZE[0], height=PREVIEW_SIZE[1], bg="black",
            highlightthickness=0,
        )
        self._preview_canvas.pack(side=tk.TOP)
        score_box = tk.Frame(side, width=SCORE_SIZE[0], height=SCORE_SIZE[1])
        score_box.pack_propagate(False)
        score_box.pack(side=tk.TOP)
        self._score = tk.Label(score_box, text="Score:\n0", font=SCORE_FONT, justify=tk.CENTER)
        self._score.pack(fill=tk.BOTH, expand=True)

        self.bind("<KeyPress>", self._on_key)
        self.bind("<Button-1>", lambda _event: self.focus_set())
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_key(self, event: tk.Event) -> None:
        command = command_for_keysym(event.keysym)
        if command is not None:
            self._controller.move(command)

    def _on_close(self) -> None:
        self.visible = False
        self.withdraw()

    def set_memento(self, memento: Any) -> None:
        """Show ``memento`` and redraw."""
        self._memento = memento
        self.refresh()

    def refresh(self) -> None:
        """Redraw the board, preview and score from the latest snapshot."""
        memento = self._memento
        if memento is None:
            return
        _paint(self._map, memento.cells, memento.size)
        self._preview.set_block(memento.next_block)
        _paint(self._preview_canvas, self._preview.cells, self._preview.size)
        self._score.configure(text=f"Score:\n{memento.score}")


class TkAdapterWidget(AbstractWidget):
    """Connects a Tk game window to the model.

    Snapshots arrive on the model's thread and are stored; the application's
    event loop hands them to the window.
    """

    def __init__(self, model: Any, master: Optional[tk.Misc] = None) -> None:
        super().__init__()
        self.widget = TkWidget(model, master)
        self._open = True

    def is_open(self) -> bool:
        return self._open

    def close_widget(self) -> None:
        self._open = False

    def update_widget(self, memento: Any) -> None:
        """Store ``memento`` while the window is shown."""
        if self.widget.visible:
            super().update_widget(memento)


class TkApplication(AbstractApplication):
    """Runs ``count`` Tk game windows until all of them are closed."""

    def __init__(self, model: Any, count: int) -> None:
        super().__init__()
        self._model = model
        self._count = count
        self._widgets: List[TkAdapterWidget] = []
        self._shown: dict = {}

    def run(self) -> None:
        try:
            if self._count > 0:
                root = tk.Tk()
                root.withdraw()
                try:
                    for _ in range(self._count):
                        adapter = TkAdapterWidget(self._model, root)
                        self._widgets.append(adapter)
                        self._model.add_widget(adapter)
                    root.after(POLL_MS, self._poll, root)
                    root.mainloop()
                finally:
                    self._widgets = []
                    self._shown = {}
                    root.destroy()
        finally:
            self._running.clear()

    def _poll(self, root: tk.Tk) -> None:
        alive: List[TkAdapterWidget] = []
        for adapter in self._widgets:
            if not adapter.is_open() or not adapter.widget.visible:
                adapter.widget.destroy()
                self._shown.pop(id(adapter), None)
                continue
            memento = adapter.memento()
            if memento is not None and self._shown.get(id(adapter)) is not memento:
                self._shown[id(adapter)] = memento
                adapter.widget.set_memento(memento)
            alive.append(adapter)
        self._widgets = alive
        if not alive or not self.is_running():
            root.quit()
            return
        root.after(POLL_MS, self._poll, root)