from collections import namedtuple
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class GridError(Exception):
    pass

class OutOfBounds(GridError, IndexError):
    pass

class InvalidDataSize(GridError, ValueError):
    pass

class CannotShrink(GridError):
    pass


class Side(Enum):
    TOP = 'top'
    BOTTOM = 'bottom'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def horizontal(self):
        """True for the edges that add or remove a row."""
        return self in (Side.TOP, Side.BOTTOM)


class Size(namedtuple('Size', ['width', 'height'])):
    __slots__ = ()

    def __new__(cls, width, height):
        width, height = int(width), int(height)
        if width < 1 or height < 1:
            raise InvalidDataSize("Size must be at least 1x1, got %dx%d" % (width, height))
        return super(Size, cls).__new__(cls, width, height)

    def __str__(self):
        return "%dx%d" % (self.width, self.height)


class DenseGrid(object):
    '''
    Row-major buffer of width*height values.

    Structural edits (grow, shrink, resize) build a new buffer and swap it in,
    so a failing edit never leaves a half-rebuilt grid behind.
    '''
    def __init__(self, size, fill_value=None, *, default=None):
        size = Size(*size)
        self._width = size.width
        self._height = size.height
        self._data = [fill_value] * (size.width * size.height)
        # Filler for resize() when none is given
        self.default = fill_value if default is None else default

    @classmethod
    def from_raw(cls, width, data, *, default=None):
        data = list(data)
        if width < 1 or not data or len(data) % width:
            raise InvalidDataSize("%d items do not fill rows of width %d" % (len(data), width))
        grid = cls.__new__(cls)
        grid._width = width
        grid._height = len(data) // width
        grid._data = data
        grid.default = default
        return grid

    @classmethod
    def from_table(cls, rows, *, default=None):
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise InvalidDataSize("Empty table")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDataSize("Row %d has %d items, expected %d" % (i, len(row), width))
        return cls.from_raw(width, [item for row in rows for item in row], default=default)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def size(self):
        return Size(self._width, self._height)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, DenseGrid):
            return NotImplemented
        return (self._width, self._height, self._data) == \
               (other._width, other._height, other._data)

    def __repr__(self):
        return "DenseGrid(%s, %r)" % (self.size, self.as_table())

    def copy(self):
        return DenseGrid.from_raw(self._width, self._data, default=self.default)

    def _index(self, row, col):
        if not 0 <= row < self._height:
            raise OutOfBounds("row %d out of bounds (height %d)" % (row, self._height))
        if not 0 <= col < self._width:
            raise OutOfBounds("column %d out of bounds (width %d)" % (col, self._width))
        return row * self._width + col

    def get(self, row, col):
        return self._data[self._index(row, col)]

    def set(self, row, col, value):
        """Store value at (row, col) and return the value it replaced."""
        i = self._index(row, col)
        prev = self._data[i]
        self._data[i] = value
        return prev

    def iter_rows(self):
        w = self._width
        for start in range(0, len(self._data), w):
            yield self._data[start:start + w]

    def as_table(self):
        return tuple(tuple(row) for row in self.iter_rows())

    def edge(self, side):
        """Values along one edge: a row for top/bottom, a column for left/right."""
        side = Side(side)
        w = self._width
        if side == Side.TOP:
            return tuple(self._data[:w])
        if side == Side.BOTTOM:
            return tuple(self._data[-w:])
        col = 0 if side == Side.LEFT else w - 1
        return tuple(self._data[col::w])

    def grow(self, side, value):
        side = Side(side)
        n = self._width if side.horizontal else self._height
        self.grow_line(side, [value] * n)

    def grow_line(self, side, values):
        '''Add one row or column holding values on side'''
        side = Side(side)
        values = list(values)
        w = self._width
        if len(values) != (w if side.horizontal else self._height):
            raise InvalidDataSize("%d values do not fit the %s edge of a %s grid" %
                                  (len(values), side.value, self.size))
        if side == Side.TOP:
            data = values + self._data
            self._height += 1
        elif side == Side.BOTTOM:
            data = self._data + values
            self._height += 1
        else:
            data = []
            for row, value in zip(self.iter_rows(), values):
                if side == Side.LEFT:
                    data.append(value)
                    data.extend(row)
                else:
                    data.extend(row)
                    data.append(value)
            self._width += 1
        self._data = data

    def shrink(self, side):
        side = Side(side)
        w = self._width
        if side.horizontal:
            if self._height < 2:
                raise CannotShrink("Cannot remove row from %s grid" % (self.size,))
            data = self._data[w:] if side == Side.TOP else self._data[:-w]
            self._height -= 1
        else:
            if w < 2:
                raise CannotShrink("Cannot remove column from %s grid" % (self.size,))
            keep = slice(1, w) if side == Side.LEFT else slice(0, w - 1)
            data = []
            for row in self.iter_rows():
                data.extend(row[keep])
            self._width -= 1
        self._data = data

    def resize(self, size, fill_value=None):
        '''
        Grow or shrink the right and bottom edges until the grid is size.
        The top-left corner is always preserved. Raises CannotShrink, leaving the
        grid alone, when size is below 1x1.
        '''
        width, height = size
        if width < 1 or height < 1:
            raise CannotShrink("Cannot resize %s grid to %dx%d" % (self.size, width, height))
        size = Size(width, height)
        if fill_value is None:
            fill_value = self.default
        work = self.copy()
        while work.width < size.width:
            work.grow(Side.RIGHT, fill_value)
        while work.width > size.width:
            work.shrink(Side.RIGHT)
        while work.height < size.height:
            work.grow(Side.BOTTOM, fill_value)
        while work.height > size.height:
            work.shrink(Side.BOTTOM)
        logger.debug("resize %s -> %s", self.size, size)
        self._width, self._height, self._data = work._width, work._height, work._data

    def map(self, func):
        default = None if self.default is None else func(self.default)
        return DenseGrid.from_raw(self._width, [func(item) for item in self._data],
                                  default=default)

    def unique_items(self):
        return set(self._data)
