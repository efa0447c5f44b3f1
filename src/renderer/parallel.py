# renderer/parallel.py
import logging
import multiprocessing as mp
import time
from typing import List, Optional, Tuple

import numpy as np

from core.config import ROWS_PER_CHUNK, resolve_workers
from renderer.canvas import Canvas

logger = logging.getLogger(__name__)

# Per-process scene, installed once by the pool initializer.
_worker_camera = None
_worker_world = None


def _init_worker(camera, world):
    global _worker_camera, _worker_world
    _worker_camera = camera
    _worker_world = world


def render_rows(camera, world, row_start: int, row_end: int) -> np.ndarray:
    """
    Render rows [row_start, row_end) into a (rows, hsize, 3) array.
    """
    rows = np.zeros((row_end - row_start, camera.hsize, 3), dtype=np.float64)
    for y in range(row_start, row_end):
        for x in range(camera.hsize):
            color = world.color_at(camera.ray_for_pixel(x, y))
            rows[y - row_start, x] = (color.red, color.green, color.blue)
    return rows


def _render_chunk(bounds: Tuple[int, int]) -> Tuple[int, np.ndarray]:
    row_start, row_end = bounds
    return row_start, render_rows(_worker_camera, _worker_world, row_start, row_end)


def split_rows(height: int, rows_per_chunk: int) -> List[Tuple[int, int]]:
    return [(y, min(y + rows_per_chunk, height)) for y in range(0, height, rows_per_chunk)]


def render(camera, world, workers: Optional[int] = None, rows_per_chunk: Optional[int] = None) -> Canvas:
    """
    Render ``world`` as seen by ``camera``.

    The world and camera are frozen first. Pixels are independent, so rows
    are split into chunks and farmed out to a process pool; each chunk is
    written back to its own rows, so the image does not depend on the order
    in which workers finish.
    """
    world.freeze()
    camera.freeze()
    workers = resolve_workers(workers)
    chunks = split_rows(camera.vsize, rows_per_chunk or ROWS_PER_CHUNK)
    canvas = Canvas(camera.hsize, camera.vsize)

    start = time.time()
    logger.info("Rendering %dx%d with %d worker(s), %d chunk(s)",
                camera.hsize, camera.vsize, workers, len(chunks))

    if workers == 1 or len(chunks) == 1:
        for row_start, row_end in chunks:
            canvas.write_rows(row_start, render_rows(camera, world, row_start, row_end))
    else:
        with mp.Pool(min(workers, len(chunks)), initializer=_init_worker,
                     initargs=(camera, world)) as pool:
            for row_start, rows in pool.imap_unordered(_render_chunk, chunks):
                canvas.write_rows(row_start, rows)
                logger.debug("Chunk at row %d done", row_start)

    logger.info("Rendering complete in %.2fs", time.time() - start)
    return canvas
