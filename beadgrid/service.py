"""
BeadService owns the pattern.

Every panel of a front end (the plate, the bead summary, the resize form) talks
to the same service: writes go through dispatch() one message at a time, reads
get tuples that cannot be written through.
"""
from dataclasses import dataclass
import logging

from .config import Config
from .grid import DenseGrid, GridError, Side, Size
from .history import CommandLog, GridAction, Resize, SetColor
from .model import BeadModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Undo:
    pass

@dataclass(frozen=True)
class Redo:
    pass

@dataclass(frozen=True)
class ToggleFilled:
    index: int

@dataclass(frozen=True)
class Rotate:
    delta: int

@dataclass(frozen=True)
class Load:
    grid: DenseGrid
    first_offset: bool = None


def normalize_rotation(rotation, width):
    return rotation % width


class BeadService(object):
    def __init__(self, config=None):
        self.config = config if config is not None else Config()
        self.model = BeadModel(Size(self.config.width, self.config.height),
                               self.config.default_color,
                               first_offset=self.config.first_offset)
        self.history = CommandLog(self.model, limit=self.config.history_limit)
        self.rotation = 0

    def dispatch(self, message):
        '''
        Handle one front end message. Returns False if the pattern rejected it,
        e.g. removing the last row or painting outside the grid.
        '''
        try:
            self._dispatch(message)
        except GridError as e:
            logger.warning("Rejected %r: %s", message, e)
            return False
        return True

    def _dispatch(self, message):
        if isinstance(message, (SetColor, GridAction, Resize)):
            if self.history.push(message) is not None:
                logger.debug(message.description())
        elif isinstance(message, Undo):
            if self.history.undo() is None:
                logger.info("Nothing to Undo")
        elif isinstance(message, Redo):
            if self.history.redo() is None:
                logger.info("Nothing to Redo")
        elif isinstance(message, ToggleFilled):
            self.model.toggle_filled(message.index)
        elif isinstance(message, Rotate):
            self.rotation += message.delta
        elif isinstance(message, Load):
            self.model.replace_grid(message.grid, message.first_offset)
            self.history.clear()
            self.rotation = 0
            logger.info("Loaded %s pattern", self.model.size)
        else:
            raise TypeError("Unknown message %r" % (message,))

    def set_color(self, row, col, color):
        return self.dispatch(SetColor(row, col, color))

    def add_line(self, side):
        return self.dispatch(GridAction.add(side))

    def remove_line(self, side):
        return self.dispatch(GridAction.remove(side))

    def resize(self, width, height):
        try:
            size = Size(width, height)
        except GridError as e:
            logger.warning("Bad size: %s", e)
            return False
        return self.dispatch(Resize(size))

    def undo(self):
        return self.dispatch(Undo())

    def redo(self):
        return self.dispatch(Redo())

    def toggle_filled(self, index):
        return self.dispatch(ToggleFilled(index))

    def rotate(self, delta):
        return self.dispatch(Rotate(delta))

    def load(self, grid, first_offset=None):
        return self.dispatch(Load(grid, first_offset))

    @property
    def size(self):
        return self.model.size

    @property
    def first_offset(self):
        return self.model.first_offset

    def table(self):
        return self.model.grid_color().as_table()

    def filled_table(self):
        return self.model.grid.map(lambda bead: bead.filled).as_table()

    def rotated_table(self, table=None):
        if table is None:
            table = self.table()
        shift = normalize_rotation(self.rotation, self.size.width)
        return tuple(row[shift:] + row[:shift] for row in table)

    def line(self):
        return self.model.line.runs

    def summary(self):
        return self.model.line_color().summary()

    def can_undo(self):
        return self.history.can_undo()

    def can_redo(self):
        return self.history.can_redo()


__all__ = ['BeadService', 'Undo', 'Redo', 'ToggleFilled', 'Rotate', 'Load',
           'SetColor', 'GridAction', 'Resize', 'Side', 'normalize_rotation']
