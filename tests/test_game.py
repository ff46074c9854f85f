import random
import threading

import pytest

from multitetris.game import AbstractModel, AbstractWidget, GameModel, MementoModel
from multitetris.types import Command, MapSize, TypeBlock, TypeColor


class RecordingWidget(AbstractWidget):
    def __init__(self):
        super().__init__()
        self.open = True
        self.received = []
        self.event = threading.Event()

    def is_open(self):
        return self.open

    def close_widget(self):
        self.open = False

    def update_widget(self, memento):
        super().update_widget(memento)
        self.received.append(memento)
        self.event.set()


class EchoModel(AbstractModel):
    def update_model(self, command):
        return MementoModel(score=int(command))


def filled(cells):
    return sum(1 for cell in cells if cell is not TypeColor.NONE)


def test_widget_memento_starts_empty_and_stores_update():
    widget = RecordingWidget()
    assert widget.memento() is None
    snapshot = MementoModel(score=5)
    widget.update_widget(snapshot)
    assert widget.memento() is snapshot


def test_memento_defaults():
    memento = MementoModel()
    assert memento.cells == []
    assert memento.size == MapSize(0, 0)
    assert memento.next_block is None
    assert memento.score == 0


def test_first_update_snapshot_shape():
    with GameModel(random.Random(3)) as model:
        memento = model.update_model(Command.DOWN)
    assert memento.size == MapSize(22, 10)
    assert len(memento.cells) == 22 * 10
    assert memento.score == 0
    assert memento.next_block.block_type is not TypeBlock.NONE


def test_active_block_color_differs_from_next():
    with GameModel(random.Random(7)) as model:
        memento = model.update_model(Command.DOWN)
    colors = {cell for cell in memento.cells if cell is not TypeColor.NONE}
    assert len(colors) == 1
    assert memento.next_block.color not in colors


def test_consecutive_next_blocks_differ_in_type_and_color():
    with GameModel(random.Random(11)) as model:
        sequence = []
        for _ in range(600):
            memento = model.update_model(Command.DOWN)
            if not sequence or sequence[-1] is not memento.next_block:
                sequence.append(memento.next_block)
    assert len(sequence) > 3
    for previous, current in zip(sequence, sequence[1:]):
        assert previous.color is not current.color
        assert previous.block_type is not current.block_type


def test_full_board_resets():
    with GameModel(random.Random(5)) as model:
        previous = 0
        reset_seen = False
        for _ in range(3000):
            memento = model.update_model(Command.DOWN)
            count = filled(memento.cells)
            if previous > 20 and count <= 4:
                reset_seen = True
                break
            previous = count
    assert reset_seen
    assert memento.score == 0
    assert model.score == 0


def test_submitted_command_reaches_widget_and_close_closes_it():
    widget = RecordingWidget()
    with GameModel(random.Random(2)) as model:
        model.add_widget(widget)
        model.submit(Command.DOWN)
        assert widget.event.wait(5)
        memento = widget.memento()
        assert memento.size == MapSize(22, 10)
        assert widget.is_open()
    assert not widget.is_open()


def test_echo_model_delivers_commands():
    widget = RecordingWidget()
    model = EchoModel()
    try:
        model.add_widget(widget)
        model.submit(Command.LEFT)
        assert widget.event.wait(5)
    finally:
        model.close()
    assert widget.received == [MementoModel(score=int(Command.LEFT))]


def test_submit_after_close_raises():
    model = GameModel(random.Random(1))
    model.close()
    with pytest.raises(RuntimeError):
        model.submit(Command.DOWN)


def test_close_is_idempotent():
    widget = RecordingWidget()
    model = GameModel(random.Random(4))
    model.add_widget(widget)
    model.close()
    assert not widget.is_open()
    widget.open = True
    model.close()
    assert widget.is_open()