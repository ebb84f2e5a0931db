#! /usr/bin/env python3
import argparse
import logging
import sys

from . import storage
from .colors import normalize_hex
from .config import Config
from .grid import Side
from .render_image import render_image, write_image
from .service import BeadService
from .util import exit_message, json_load_exit_bad

logger = logging.getLogger(__name__)


def parse_set(s):
    try:
        row, col, color = s.split(",")
        return int(row), int(col), normalize_hex(color)
    except ValueError:
        raise argparse.ArgumentTypeError("expected ROW,COL,#RRGGBB, got %r" % (s,))


def parse_size(s):
    try:
        w, h = s.lower().split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError("expected WIDTHxHEIGHT, got %r" % (s,))


def parse_side(s):
    try:
        return Side(s.lower())
    except ValueError:
        raise argparse.ArgumentTypeError("side must be one of top, bottom, left, right")


def tagged(tag, parse=None):
    '''Keep the edits in command line order: every edit lands in args.edits'''
    return lambda s: (tag, parse(s) if parse else None)


def build_parser():
    parser = argparse.ArgumentParser(description='Edit a bead weaving pattern')
    parser.add_argument('--load', help='Load saved pattern file')
    parser.add_argument('--width', type=int, help='Width of a new pattern')
    parser.add_argument('--height', type=int, help='Height of a new pattern')
    parser.add_argument('--color', type=normalize_hex, help='Background color of a new pattern')
    parser.add_argument('--set', dest='edits', action='append', type=tagged('set', parse_set),
                        metavar='ROW,COL,COLOR', help='Paint one bead')
    parser.add_argument('--add', dest='edits', action='append', type=tagged('add', parse_side),
                        metavar='SIDE', help='Add a row or column on SIDE')
    parser.add_argument('--remove', dest='edits', action='append', type=tagged('remove', parse_side),
                        metavar='SIDE', help='Remove the row or column on SIDE')
    parser.add_argument('--resize', dest='edits', action='append', type=tagged('resize', parse_size),
                        metavar='WxH', help='Resize from the bottom right corner')
    parser.add_argument('--undo', dest='edits', action='append_const', const=('undo', None),
                        help='Undo the previous edit')
    parser.add_argument('--redo', dest='edits', action='append_const', const=('redo', None),
                        help='Redo the previous undo')
    parser.add_argument('--rotate', type=int, default=0, help='Rotate rows in the exported image by N beads')
    parser.add_argument('--save', help='Write the pattern to this file')
    parser.add_argument('--render', help='Export the pattern as an image')
    parser.add_argument('--cell-px', type=int, help='Bead size in the exported image')
    parser.add_argument('--summary', action='store_true', help='Print bead counts per color')
    parser.add_argument('--debug', action='store_true', help='')
    return parser


def apply_edits(service, edits):
    for tag, arg in edits or ():
        if tag == 'set':
            ok = service.set_color(*arg)
        elif tag == 'add':
            ok = service.add_line(arg)
        elif tag == 'remove':
            ok = service.remove_line(arg)
        elif tag == 'resize':
            ok = service.resize(*arg)
        elif tag == 'undo':
            ok = service.undo()
        else:
            ok = service.redo()
        if not ok:
            logger.warning("Skipped --%s %s", tag, arg if arg is not None else "")


def print_summary(service, f=None):
    f = f or sys.stdout
    size = service.size
    print("Width: %d" % size.width, file=f)
    print("Summary", file=f)
    for color, count in sorted(service.summary().items()):
        print("  %s %d" % (color, count), file=f)
    print("Scheme", file=f)
    for bead, count in service.line():
        print("  %s %d%s" % (bead.color, count, " *" if bead.filled else ""), file=f)


def run(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        datefmt='%H:%M:%S')

    config = Config()
    grid = first_offset = None
    if args.load:
        j = json_load_exit_bad(args.load, "--load")
        try:
            config.update(j.get('config', {}))
            grid, first_offset = storage.parse_pattern(j)
        except (AttributeError, ValueError) as e:
            exit_message("Bad pattern in --load %s: %s" % (args.load, e))
    if args.width:
        config.width = args.width
    if args.height:
        config.height = args.height
    if args.color:
        config.default_color = args.color
    if args.cell_px:
        config.cell_px = args.cell_px

    try:
        service = BeadService(config)
    except ValueError as e:
        exit_message(str(e))
    if grid is not None:
        service.load(grid, first_offset)

    apply_edits(service, args.edits)
    if args.rotate:
        service.rotate(args.rotate)

    if args.summary:
        print_summary(service)
    if args.save:
        config.width, config.height = service.size
        config.first_offset = service.first_offset
        storage.write(args.save, service.table(), service.first_offset, config)
    if args.render:
        img = render_image(service.rotated_table(), config.cell_px, service.first_offset,
                           filled_table=service.rotated_table(service.filled_table()),
                           outline_color=config.fill_outline_color)
        write_image(args.render, img)
    return 0


def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
