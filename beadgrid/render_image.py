import logging
import time

import cv2 as cv
import numpy

from .colors import BLACK, to_bgr

logger = logging.getLogger(__name__)


def render_image(table, cell_px=20, first_offset=True, filled_table=None,
                 outline_color="#FF0000", background=BLACK):
    '''
    Draw the pattern as a BGR image. Alternate rows are pushed right by half a
    bead; first_offset selects whether that starts with the top row.
    '''
    t = time.time()
    height = len(table)
    width = len(table[0])
    half = cell_px // 2
    img = numpy.zeros((height * cell_px, width * cell_px + half, 3), numpy.uint8)
    img[:] = to_bgr(background)

    outline = to_bgr(outline_color)
    for row, colors in enumerate(table):
        shifted = (row % 2 == 0) == bool(first_offset)
        x0 = half if shifted else 0
        y = row * cell_px
        for col, color in enumerate(colors):
            x = x0 + col * cell_px
            p1 = (x, y)
            p2 = (x + cell_px - 1, y + cell_px - 1)
            cv.rectangle(img, p1, p2, to_bgr(color), -1)
            cv.rectangle(img, p1, p2, to_bgr(BLACK), 1)
            if filled_table is not None and filled_table[row][col]:
                cv.rectangle(img, (x + 2, y + 2), (p2[0] - 2, p2[1] - 2), outline, 2)

    logger.debug("render_image time: %.3f", time.time() - t)
    return img


def write_image(path, img):
    if not cv.imwrite(str(path), img):
        raise IOError("OpenCV could not write %s" % (path,))
    logger.info("Wrote %dx%d image to %s", img.shape[1], img.shape[0], path)
