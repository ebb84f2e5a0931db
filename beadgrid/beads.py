"""
Beads and the knit line.

A pattern is strung on the thread starting from the bottom row and working up.
Rows alternate direction with the stagger: the rows that are pushed half a bead
right (the top row when ``first_offset`` is set, then every second row down)
are read right-to-left. Rows are counted from the top, so adding or removing a
bottom row leaves the direction of every other row alone.

Consecutive equal beads are collapsed into runs, which is what the bead summary
panel lists and what the fill checkboxes index.
"""
from collections import Counter
from dataclasses import dataclass, replace

from .grid import DenseGrid, OutOfBounds


@dataclass(frozen=True)
class Bead:
    color: object
    filled: bool = False

    def unfilled(self):
        return self if not self.filled else replace(self, filled=False)

    def toggled(self):
        return replace(self, filled=not self.filled)


def _right_to_left(row, first_offset):
    return (row % 2 == 0) == bool(first_offset)


class KnitLine(object):
    def __init__(self, runs, width, height, first_offset):
        self._runs = runs
        self.width = width
        self.height = height
        self.first_offset = first_offset

    @classmethod
    def build(cls, table, first_offset):
        runs = []
        for r in reversed(range(len(table))):
            row = table[r]
            items = reversed(row) if _right_to_left(r, first_offset) else row
            for item in items:
                if runs and runs[-1][0] == item:
                    runs[-1] = (item, runs[-1][1] + 1)
                else:
                    runs.append((item, 1))
        width = len(table[0]) if table else 0
        return cls(runs, width, len(table), first_offset)

    @property
    def runs(self):
        return tuple(self._runs)

    def __len__(self):
        return len(self._runs)

    def __getitem__(self, index):
        return self._runs[self._check(index)]

    def __eq__(self, other):
        if not isinstance(other, KnitLine):
            return NotImplemented
        return (self._runs, self.width, self.height, self.first_offset) == \
               (other._runs, other.width, other.height, other.first_offset)

    def __repr__(self):
        return "KnitLine(%r, width=%d, first_offset=%r)" % (self._runs, self.width, self.first_offset)

    def _check(self, index):
        if not 0 <= index < len(self._runs):
            raise OutOfBounds("line index %d out of bounds (%d runs)" % (index, len(self._runs)))
        return index

    def replace(self, index, item):
        """Swap the item of run ``index`` keeping its count. Returns the old item."""
        prev, count = self._runs[self._check(index)]
        self._runs[index] = (item, count)
        return prev

    def beads(self):
        for item, count in self._runs:
            for _ in range(count):
                yield item

    def summary(self):
        total = Counter()
        for item, count in self._runs:
            total[item] += count
        return total

    def map(self, func):
        return KnitLine([(func(item), count) for item, count in self._runs],
                        self.width, self.height, self.first_offset)


def grid_from_projection(line):
    """Rebuild the row-major grid a line was knitted from."""
    flat = list(line.beads())
    w = line.width
    rows = []
    for k in range(line.height):
        chunk = flat[k * w:(k + 1) * w]
        if _right_to_left(line.height - 1 - k, line.first_offset):
            chunk.reverse()
        rows.append(chunk)
    rows.reverse()
    return DenseGrid.from_table(rows)
