from collections import Counter

import pytest

from beadgrid.beads import Bead, KnitLine, grid_from_projection
from beadgrid.grid import OutOfBounds

TABLE = (('a', 'b', 'c'),
         ('d', 'e', 'f'))


def flat(line):
    return list(line.beads())


def test_build_reads_shifted_rows_right_to_left():
    # the top row is shifted, so it runs right-to-left
    line = KnitLine.build(TABLE, True)
    assert flat(line) == ['d', 'e', 'f', 'c', 'b', 'a']


def test_build_without_offset():
    line = KnitLine.build(TABLE, False)
    assert flat(line) == ['f', 'e', 'd', 'a', 'b', 'c']


def test_equal_neighbours_collapse_into_runs():
    line = KnitLine.build((('A', 'A'), ('A', 'B')), False)
    assert line.runs == (('B', 1), ('A', 3))
    assert line.summary() == Counter({'A': 3, 'B': 1})


@pytest.mark.parametrize("first_offset", [True, False])
def test_grid_from_projection_inverts_build(first_offset):
    table = (('a', 'a', 'b'), ('c', 'b', 'b'), ('a', 'c', 'c'))
    line = KnitLine.build(table, first_offset)
    assert grid_from_projection(line).as_table() == table


def test_replace_keeps_count():
    line = KnitLine.build((('A', 'A'), ('A', 'B')), False)
    assert line.replace(1, 'C') == 'A'
    assert line.runs == (('B', 1), ('C', 3))


def test_replace_out_of_bounds():
    line = KnitLine.build(TABLE, True)
    with pytest.raises(OutOfBounds):
        line.replace(6, 'x')
    with pytest.raises(OutOfBounds):
        line[-1]


def test_map_keeps_runs():
    line = KnitLine.build(((Bead('A'), Bead('A')),), True)
    colors = line.map(lambda bead: bead.color)
    assert colors.runs == (('A', 2),)


def test_bead_toggle_and_unfill():
    bead = Bead('A')
    assert bead.toggled() == Bead('A', True)
    assert bead.toggled().unfilled() == bead


def test_bottom_row_keeps_other_rows_direction():
    line = KnitLine.build(TABLE + (('g', 'h', 'i'),), True)
    # new bottom row first, then the old rows read as before
    assert flat(line) == ['i', 'h', 'g'] + flat(KnitLine.build(TABLE, True))


def test_direction_follows_stagger_after_top_row():
    # a new top row flips the offset; the old rows keep their direction
    line = KnitLine.build((('x', 'y', 'z'),) + TABLE, False)
    assert flat(line)[:6] == flat(KnitLine.build(TABLE, True))
