import logging

from .colors import WHITE, normalize_hex

logger = logging.getLogger(__name__)


class Config(object):
    def __init__(self):
        # Pattern created at startup
        self.width = 10
        self.height = 10
        self.default_color = WHITE
        self.first_offset = True

        # Entries kept in each of the undo and redo queues
        self.history_limit = 1000

        # Image export
        self.cell_px = 20
        self.fill_outline_color = "#FF0000"

    def update(self, j):
        for k, v in j.items():
            if not hasattr(self, k):
                logger.warning("Ignoring unknown config key %r", k)
                continue
            if k in ('default_color', 'fill_outline_color'):
                v = normalize_hex(v)
            setattr(self, k, v)

    def to_json(self):
        return dict(vars(self))
