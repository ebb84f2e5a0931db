import pytest

from beadgrid.grid import CannotShrink, Side, Size
from beadgrid.history import (Action, CommandLog, GridAction, Log, Resize,
                              Restore, SetColor, inverse)
from beadgrid.model import BeadModel


@pytest.fixture
def model():
    return BeadModel(Size(2, 2), 'A')


@pytest.fixture
def log(model):
    return CommandLog(model)


def test_inverse_of_set_color(model):
    assert inverse(SetColor(0, 1, 'C'), model) == SetColor(0, 1, 'A')
    assert inverse(SetColor(0, 1, 'A'), model) is None


@pytest.mark.parametrize("side", list(Side))
def test_inverse_of_grid_action(model, side):
    assert inverse(GridAction.add(side), model) == GridAction(Action.REMOVE, side)
    assert inverse(GridAction.remove(side), model) == GridAction(Action.ADD, side, ('A', 'A'))


def test_inverse_of_resize(model):
    assert inverse(Resize(Size(2, 2)), model) is None
    assert inverse(Resize(Size(3, 1)), model) == Restore((('A', 'A'), ('A', 'A')), True)


def test_inverse_rejects_unknown_commands(model):
    with pytest.raises(TypeError):
        inverse(object(), model)


def test_apply_records_into_chosen_queue(log):
    log.apply(SetColor(0, 0, 'B'), Log.REDO)
    assert list(log.redo_queue) == [SetColor(0, 0, 'A')]
    assert not log.can_undo()


def test_noop_is_not_logged(log):
    assert log.push(SetColor(1, 1, 'A')) is None
    assert not log.can_undo()


def test_grow_right_then_undo(model, log):
    log.push(GridAction.add(Side.RIGHT))
    log.push(SetColor(0, 2, 'B'))
    log.push(SetColor(1, 2, 'B'))
    assert model.grid_color().as_table() == (('A', 'A', 'B'), ('A', 'A', 'B'))
    for _ in range(3):
        log.undo()
    assert model.grid_color().as_table() == (('A', 'A'), ('A', 'A'))
    assert log.undo() is None


def test_undo_then_redo_reproduces_every_state(model, log):
    commands = [
        SetColor(0, 0, 'B'),
        GridAction.add(Side.LEFT),
        SetColor(1, 2, 'C'),
        GridAction.add(Side.TOP),
        GridAction.remove(Side.BOTTOM),
        Resize(Size(4, 1)),
        SetColor(0, 3, 'D'),
        GridAction.remove(Side.LEFT),
    ]
    states = [model.snapshot()]
    for command in commands:
        assert log.push(command) is not None
        states.append(model.snapshot())

    for state in reversed(states[:-1]):
        assert log.undo() is not None
        assert model.snapshot() == state
    assert not log.can_undo()

    for state in states[1:]:
        assert log.redo() is not None
        assert model.snapshot() == state
    assert not log.can_redo()


def test_new_edit_clears_redo(log):
    log.push(SetColor(0, 0, 'B'))
    log.push(SetColor(0, 1, 'B'))
    log.undo()
    assert log.can_redo()
    log.push(SetColor(1, 1, 'C'))
    assert not log.can_redo()


def test_replay_does_not_clear_redo(log):
    log.push(SetColor(0, 0, 'B'))
    log.push(SetColor(0, 1, 'B'))
    log.undo()
    log.undo()
    log.redo()
    assert log.can_redo()
    assert len(log.redo_queue) == 1


def test_failed_command_is_not_logged():
    model = BeadModel(Size(1, 1), 'A')
    log = CommandLog(model)
    with pytest.raises(CannotShrink):
        log.push(GridAction.remove(Side.LEFT))
    assert not log.can_undo()
    assert model.size == Size(1, 1)


def test_oldest_entries_are_evicted(model):
    log = CommandLog(model, limit=3)
    for i, color in enumerate('BCDEF'):
        log.push(SetColor(0, 0, color))
    assert len(log.undo_queue) == 3
    while log.undo():
        pass
    # the first two edits fell off the back of the queue
    assert model.get(0, 0).color == 'C'


def test_clear(log):
    log.push(SetColor(0, 0, 'B'))
    log.undo()
    log.clear()
    assert not log.can_undo()
    assert not log.can_redo()


def test_undo_remove_puts_back_the_removed_beads(model, log):
    log.push(SetColor(1, 0, 'B'))
    log.push(SetColor(1, 1, 'C'))
    log.push(GridAction.remove(Side.BOTTOM))
    assert model.grid_color().as_table() == (('A', 'A'),)
    assert log.undo_queue[0] == GridAction(Action.ADD, Side.BOTTOM, ('B', 'C'))
    log.undo()
    assert model.grid_color().as_table() == (('A', 'A'), ('B', 'C'))
    log.redo()
    assert model.grid_color().as_table() == (('A', 'A'),)
