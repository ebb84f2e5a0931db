import logging

from .beads import Bead, KnitLine, grid_from_projection
from .grid import DenseGrid, Side

logger = logging.getLogger(__name__)


class BeadModel(object):
    '''
    A grid of beads plus the knit line derived from it.

    The grid is authoritative. The line is rebuilt after every change, except in
    toggle_filled() where the line is edited first and the grid regenerated from it.
    '''
    def __init__(self, size, color, *, first_offset=True):
        self.default_color = color
        self.first_offset = first_offset
        self.grid = DenseGrid(size, Bead(color), default=Bead(color))
        self.line = None
        self._rebuild_line()

    def _rebuild_line(self):
        self.line = KnitLine.build(self.grid.as_table(), self.first_offset)

    def _unfill_grid(self):
        self.grid = self.grid.map(Bead.unfilled)
        self.grid.default = Bead(self.default_color)

    def _any_filled(self):
        return any(bead.filled for bead in self.grid)

    @property
    def size(self):
        return self.grid.size

    def grid_color(self):
        return self.grid.map(lambda bead: bead.color)

    def line_color(self):
        return self.line.map(lambda bead: bead.color)

    def get(self, row, col):
        return self.grid.get(row, col)

    def set(self, row, col, color):
        """
        Paint one bead. Returns the replaced Bead, or None when the color
        did not change.
        """
        prev = self.grid.get(row, col)
        if prev.color == color:
            return None
        was_filled = self._any_filled()
        self.grid.set(row, col, Bead(color))
        if was_filled:
            self._unfill_grid()
        self._rebuild_line()
        return prev

    def toggle_filled(self, index):
        """Flip the filled flag of one line run and return the previous flag."""
        bead, _count = self.line[index]
        self.line.replace(index, bead.toggled())
        self.grid = grid_from_projection(self.line)
        self.grid.default = Bead(self.default_color)
        return bead.filled

    def grow(self, side, color, colors=None):
        """Add a row or column of color, or of colors when given one per bead."""
        side = Side(side)
        if colors is None:
            self.grid.grow(side, Bead(color))
        else:
            self.grid.grow_line(side, [Bead(c) for c in colors])
        self._unfill_grid()
        if side == Side.TOP:
            self.first_offset = not self.first_offset
        self._rebuild_line()
        logger.debug("grow %s -> %s", side.value, self.size)

    def shrink(self, side):
        side = Side(side)
        self.grid.shrink(side)
        self._unfill_grid()
        if side == Side.TOP:
            self.first_offset = not self.first_offset
        self._rebuild_line()
        logger.debug("shrink %s -> %s", side.value, self.size)

    def resize(self, size):
        self.grid.resize(size, Bead(self.default_color))
        self._unfill_grid()
        self._rebuild_line()

    def replace_grid(self, grid, first_offset=None):
        '''Swap in a whole grid of colors, e.g. a loaded file'''
        new = grid.map(Bead)
        new.default = Bead(self.default_color)
        self.grid = new
        if first_offset is not None:
            self.first_offset = first_offset
        self._rebuild_line()

    def edge_colors(self, side):
        return tuple(bead.color for bead in self.grid.edge(side))

    def snapshot(self):
        return self.grid_color().as_table(), self.first_offset
