from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging

from .grid import DenseGrid, Side, Size

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 1000


class Command(object):
    def execute(self, model):
        raise NotImplementedError()

    def description(self):
        return "Command"


@dataclass(frozen=True)
class SetColor(Command):
    row: int
    col: int
    color: object

    def execute(self, model):
        model.set(self.row, self.col, self.color)

    def description(self):
        return f"Set ({self.row}, {self.col}) to {self.color}"


class Action(Enum):
    ADD = 'add'
    REMOVE = 'remove'


@dataclass(frozen=True)
class GridAction(Command):
    action: Action
    side: Side
    # Colors of an added line, one per bead; None paints the default color
    colors: tuple = None

    @classmethod
    def add(cls, side, colors=None):
        return cls(Action.ADD, Side(side), colors)

    @classmethod
    def remove(cls, side):
        return cls(Action.REMOVE, Side(side))

    def execute(self, model):
        if self.action == Action.ADD:
            model.grow(self.side, model.default_color, self.colors)
        else:
            model.shrink(self.side)

    def description(self):
        return f"{self.action.value.title()} {self.side.value}"


@dataclass(frozen=True)
class Resize(Command):
    size: Size

    def execute(self, model):
        model.resize(self.size)

    def description(self):
        return f"Resize to {self.size}"


@dataclass(frozen=True)
class Restore(Command):
    """Put back a whole pattern, the inverse of edits that drop beads."""
    table: tuple
    first_offset: bool

    def execute(self, model):
        model.replace_grid(DenseGrid.from_table(self.table), self.first_offset)

    def description(self):
        return "Restore pattern"


def inverse(command, model):
    '''
    Command that undoes command, computed from the model before command runs.
    None means command will not change anything.
    '''
    if isinstance(command, SetColor):
        prev = model.get(command.row, command.col)
        if prev.color == command.color:
            return None
        return SetColor(command.row, command.col, prev.color)
    if isinstance(command, GridAction):
        if command.action == Action.ADD:
            return GridAction(Action.REMOVE, command.side)
        return GridAction(Action.ADD, command.side, model.edge_colors(command.side))
    if isinstance(command, Resize):
        if tuple(command.size) == model.size:
            return None
        return Restore(*model.snapshot())
    if isinstance(command, Restore):
        return Restore(*model.snapshot())
    raise TypeError("No inverse for %r" % (command,))


class Log(Enum):
    UNDO = 'undo'
    REDO = 'redo'


class CommandLog(object):
    '''
    Undo and redo queues holding inverse commands, newest at the front.
    Each queue keeps at most limit entries; the oldest is dropped first.
    '''
    def __init__(self, model, limit=HISTORY_LIMIT):
        self.model = model
        self.limit = limit
        self.undo_queue = deque(maxlen=limit)
        self.redo_queue = deque(maxlen=limit)

    def apply(self, command, record_into=Log.UNDO):
        undo = inverse(command, self.model)
        if undo is None:
            logger.debug("%s: no change", command.description())
            return None
        command.execute(self.model)
        queue = self.undo_queue if record_into == Log.UNDO else self.redo_queue
        queue.appendleft(undo)
        return undo

    def push(self, command):
        """Run a fresh user edit. A change drops the redo branch."""
        undo = self.apply(command, Log.UNDO)
        if undo is not None:
            self.redo_queue.clear()
        return undo

    def _replay(self, source, record_into):
        command = source.popleft()
        try:
            self.apply(command, record_into)
        except Exception:
            source.appendleft(command)
            raise
        return command

    def undo(self):
        if not self.undo_queue:
            return None
        return self._replay(self.undo_queue, Log.REDO)

    def redo(self):
        if not self.redo_queue:
            return None
        return self._replay(self.redo_queue, Log.UNDO)

    def can_undo(self):
        return len(self.undo_queue) > 0

    def can_redo(self):
        return len(self.redo_queue) > 0

    def clear(self):
        self.undo_queue.clear()
        self.redo_queue.clear()
