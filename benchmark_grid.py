import time

from beadgrid.grid import DenseGrid, Side, Size
from beadgrid.history import CommandLog, GridAction, SetColor
from beadgrid.model import BeadModel
from beadgrid.render_image import render_image

def benchmark_grid():
    # Large pattern, e.g. a full rope of beads
    W, H = 400, 400
    n_edits = 2000

    print(f"Benchmarking grid edits on {W}x{H} beads")

    # 1. Raw buffer: row edges are cheap, column edges rebuild every row
    grid = DenseGrid(Size(W, H), "#FFFFFF")
    for side in (Side.BOTTOM, Side.TOP, Side.RIGHT, Side.LEFT):
        start = time.time()
        for _ in range(20):
            grid.grow(side, "#000000")
        print(f"grow {side.value:6s} x20: {time.time() - start:.4f}s")

    # 2. Model: every effective edit rebuilds the knit line
    model = BeadModel(Size(W, H), "#FFFFFF")
    log = CommandLog(model)
    start = time.time()
    for i in range(n_edits):
        log.push(SetColor(i % H, (i * 7) % W, "#E74C3C" if i % 2 else "#000000"))
    print(f"{n_edits} set colors: {time.time() - start:.4f}s")

    log.push(GridAction.add(Side.LEFT))
    start = time.time()
    while log.undo():
        pass
    print(f"Undo everything: {time.time() - start:.4f}s")

    # 3. Export
    start = time.time()
    render_image(model.grid_color().as_table(), cell_px=8, first_offset=model.first_offset)
    print(f"render_image: {time.time() - start:.4f}s")

if __name__ == "__main__":
    benchmark_grid()
