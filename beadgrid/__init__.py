from .config import Config
from .grid import (DenseGrid, Side, Size, GridError, OutOfBounds,
                   InvalidDataSize, CannotShrink)
from .beads import Bead, KnitLine, grid_from_projection
from .model import BeadModel
from .history import (CommandLog, Command, SetColor, GridAction, Action,
                      Resize, Restore, Log, inverse)
from .service import BeadService
