"""
Pattern files.

A pattern is stored as JSON: the color table row by row, its size, the stagger
flag and the config it was edited with.
"""
import json
import logging
import pathlib

from .colors import normalize_hex
from .grid import DenseGrid, InvalidDataSize

logger = logging.getLogger(__name__)


def dump_pattern(table, first_offset=True, config=None):
    j = {
        'width': len(table[0]),
        'height': len(table),
        'first_offset': bool(first_offset),
        'data': [list(row) for row in table],
    }
    if config is not None:
        j['config'] = config.to_json()
    return j


def parse_pattern(j):
    '''Returns (color grid, first_offset) from a decoded pattern file'''
    if not isinstance(j, dict) or not isinstance(j.get('data'), list):
        raise ValueError("Pattern has no 'data' table")
    grid = DenseGrid.from_table([[normalize_hex(c) for c in row] for row in j['data']])
    if (grid.width, grid.height) != (j.get('width', grid.width), j.get('height', grid.height)):
        raise InvalidDataSize("Table is %s but file says %sx%s" %
                              (grid.size, j.get('width'), j.get('height')))
    return grid, bool(j.get('first_offset', True))


def write(path, table, first_offset=True, config=None):
    path = pathlib.Path(path)
    with path.open('w') as f:
        json.dump(dump_pattern(table, first_offset, config), f, indent=4, sort_keys=True)
    logger.info("Saved %dx%d pattern to %s", len(table[0]), len(table), path)


def read(path):
    path = pathlib.Path(path)
    with path.open('r') as f:
        j = json.load(f)
    grid, first_offset = parse_pattern(j)
    logger.info("Loaded %s pattern from %s", grid.size, path)
    return grid, first_offset


def read_config(path):
    """Config section of a pattern file, or {} if it has none."""
    with pathlib.Path(path).open('r') as f:
        return json.load(f).get('config', {})
