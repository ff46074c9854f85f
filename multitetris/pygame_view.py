"""Pygame front end: board and preview drawing, the game widget and its application."""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

import pygame

from multitetris.application import AbstractApplication
from multitetris.controller import MoveController
from multitetris.game import AbstractWidget
from multitetris.preview import PreviewState
from multitetris.types import Command, MapSize, TypeColor

RGB = Tuple[int, int, int]
RectF = Tuple[float, float, float, float]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

WIDGET_SIZE = (600, 800)
BOARD_SIZE = (420, 800)
PREVIEW_SIZE = (180, 150)
PREVIEW_ORIGIN = (420, 0)
SCORE_ORIGIN = (460, 400)
SCORE_FONT_SIZE = 30

_COLORS = {
    TypeColor.BLUE: (0, 0, 255),
    TypeColor.GREEN: (0, 255, 0),
    TypeColor.RED: (255, 0, 0),
    TypeColor.YELLOW: (255, 255, 0),
}

_KEYS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE_RIGHT,
    pygame.K_DOWN: Command.DOWN,
}


def color_for(color: TypeColor) -> RGB:
    """Screen colour of a cell colour; empty cells are black."""
    return _COLORS.get(color, BLACK)


def command_for_key(key: int) -> Optional[Command]:
    """Command bound to a pygame key code, or None if the key is unbound."""
    return _KEYS.get(key)


class _Tile(NamedTuple):
    rect: RectF
    color: RGB


def _to_rect(rect: RectF, origin: Tuple[float, float]) -> pygame.Rect:
    x, y, w, h = rect
    left = round(x + origin[0])
    top = round(y + origin[1])
    right = round(x + w + origin[0])
    bottom = round(y + h + origin[1])
    return pygame.Rect(left, top, max(1, right - left), max(1, bottom - top))


class BoardView:
    """Draws a grid of cells, optionally framed by a white border."""

    def __init__(self, window_size: Tuple[float, float], with_border: bool = False) -> None:
        self.window_size = (float(window_size[0]), float(window_size[1]))
        self.border_width = 0.0
        self.borders: List[RectF] = []
        self.cells: List[TypeColor] = []
        self.fields: List[_Tile] = []
        self._rows = 0
        self._columns = 0
        self._offset = (0.0, 0.0)
        if with_border:
            self._init_borders()

    def _init_borders(self) -> None:
        width, height = self.window_size
        bw = height / 100
        self.border_width = bw
        self.borders = [
            (0.0, 0.0, bw, height),
            (width - bw, 0.0, bw, height),
            (0.0, 0.0, width, bw),
            (0.0, height - bw, width, bw),
        ]

    def set_map(self, cells: Sequence[TypeColor], size: MapSize) -> None:
        """Show ``cells`` laid out bottom row first; empty or sizeless input is ignored."""
        if not cells or size.rows <= 0 or size.columns <= 0:
            return
        self.cells = list(cells)
        if len(self.cells) != len(self.fields):
            width, height = self.window_size
            bw = self.border_width
            self._rows = size.rows
            self._columns = size.columns
            self._offset = ((width - 2 * bw) / self._columns, (height - 2 * bw) / self._rows)
        self._update_view()

    def _update_view(self) -> None:
        off_x, off_y = self._offset
        bw = self.border_width
        height = self.window_size[1]
        tiles = []
        for index, cell in enumerate(self.cells[: self._rows * self._columns]):
            row, column = divmod(index, self._columns)
            rect = (bw + column * off_x, height - (row + 1) * off_y - bw, off_x, off_y)
            tiles.append(_Tile(rect, color_for(cell)))
        self.fields = tiles

    def draw(self, surface: pygame.Surface, origin: Tuple[float, float] = (0, 0)) -> None:
        """Paint the border and the cells onto ``surface`` at ``origin``."""
        for rect in self.borders:
            pygame.draw.rect(surface, WHITE, _to_rect(rect, origin))
        if not self.cells or not self.fields:
            return
        for tile in self.fields:
            pygame.draw.rect(surface, tile.color, _to_rect(tile.rect, origin))


class PreviewView:
    """Shows a picture of the next block."""

    def __init__(self, window_size: Tuple[float, float], with_border: bool = False) -> None:
        self.board = BoardView(window_size, with_border)
        self.state = PreviewState()

    def set_block(self, block: Any) -> bool:
        """Show ``block``; return True if the picture changed."""
        if not self.state.set_block(block):
            return False
        assert self.state.size is not None
        self.board.set_map(self.state.cells, self.state.size)
        return True

    def draw(self, surface: pygame.Surface, origin: Tuple[float, float] = (0, 0)) -> None:
        """Paint the preview onto ``surface`` at ``origin``."""
        self.board.draw(surface, origin)


def _load_font(path: Optional[str], size: int) -> pygame.font.Font:
    pygame.font.init()
    try:
        font = pygame.font.Font(path, size)
    except OSError as exc:
        raise ValueError("Invalid path to font") from exc
    font.set_bold(True)
    font.set_underline(True)
    return font


class PygameWidget(AbstractWidget):
    """One game view: board, next-block preview and score.

    ``font_path`` of None selects pygame's default font; a path that cannot be
    loaded raises ValueError.
    """

    def __init__(self, model: Any, font_path: Optional[str] = None) -> None:
        super().__init__()
        self._controller = MoveController(model)
        self.board = BoardView(BOARD_SIZE, True)
        self.preview = PreviewView(PREVIEW_SIZE, True)
        self._font = _load_font(font_path, SCORE_FONT_SIZE)
        self.score_text = "Score:\n0"
        self._open = True

    def is_open(self) -> bool:
        return self._open

    def close_widget(self) -> None:
        self._open = False

    def handle_key(self, key: int) -> Optional[Command]:
        """Send the command bound to ``key`` to the model and return it."""
        command = command_for_key(key)
        if command is not None:
            self._controller.move(command)
        return command

    def render(self, surface: pygame.Surface) -> bool:
        """Draw the latest snapshot onto ``surface``; return False if nothing was drawn."""
        if not self._open:
            return False
        memento = self.memento()
        if memento is None:
            return False
        self.board.set_map(memento.cells, memento.size)
        self.preview.set_block(memento.next_block)
        self.score_text = f"Score:\n{memento.score}"

        surface.fill(BLACK)
        self.board.draw(surface, (0, 0))
        x, y = SCORE_ORIGIN
        for line in self.score_text.split("\n"):
            surface.blit(self._font.render(line, True, WHITE), (x, y))
            y += self._font.get_linesize()
        self.preview.draw(surface, PREVIEW_ORIGIN)
        return True


class PygameApplication(AbstractApplication):
    """Runs ``count`` game widgets side by side in one pygame window."""

    def __init__(self, model: Any, count: int, font_path: Optional[str] = None) -> None:
        super().__init__()
        self._model = model
        self._count = count
        self._font_path = font_path
        self._widgets: List[Tuple[int, PygameWidget]] = []

    def run(self) -> None:
        if self._count > 0:
            pygame.init()
            try:
                self._create_widgets()
                width, height = WIDGET_SIZE
                screen = pygame.display.set_mode((width * self._count, height))
                pygame.display.set_caption("Tetris")
                clock = pygame.time.Clock()
                while self.is_running() and self._update(screen):
                    clock.tick(60)
            finally:
                self._widgets = []
                pygame.quit()
        self._running.clear()

    def _create_widgets(self) -> None:
        for slot in range(self._count):
            widget = PygameWidget(self._model, self._font_path)
            self._widgets.append((slot, widget))
            self._model.add_widget(widget)

    def _widget_at(self, x: int) -> Optional[PygameWidget]:
        slot = x // WIDGET_SIZE[0]
        for widget_slot, widget in self._widgets:
            if widget_slot == slot and widget.is_open():
                return widget
        return next((w for _, w in self._widgets if w.is_open()), None)

    def _update(self, screen: pygame.Surface) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                for _, widget in self._widgets:
                    widget.close_widget()
            elif event.type == pygame.KEYDOWN:
                target = self._widget_at(pygame.mouse.get_pos()[0])
                if target is not None:
                    target.handle_key(event.key)

        self._widgets = [(slot, w) for slot, w in self._widgets if w.is_open()]
        if not self._widgets:
            return False

        width, height = WIDGET_SIZE
        for slot, widget in self._widgets:
            widget.render(screen.subsurface(pygame.Rect(slot * width, 0, width, height)))
        pygame.display.flip()
        return True