"""Row-band parallel map over square grids."""

import threading
from collections.abc import Callable
from concurrent import futures

import numpy as np
from numpy.typing import NDArray

from ..exceptions import GenerationCancelledError

# Bands per worker, so uneven bands still keep every worker busy
_BANDS_PER_WORKER = 4


def row_bands(map_size: int, workers: int) -> list[tuple[int, int]]:
    """Split rows [0, map_size) into contiguous (start, stop) bands."""
    if map_size <= 0:
        return []
    count = max(1, min(map_size, workers * _BANDS_PER_WORKER))
    edges = np.linspace(0, map_size, count + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:]) if b > a]


def map_row_bands(
    fn: Callable[[int, int], NDArray],
    map_size: int,
    workers: int = 1,
) -> NDArray:
    """Evaluate fn over row bands and stack the results.

    Each call computes rows [start, stop) from read-only inputs and returns
    them as a fresh array. The result is only assembled once every band has
    finished, so callers get a full barrier between passes.

    Args:
        fn: Band function taking (start, stop) and returning rows.
        map_size: Number of rows in the grid.
        workers: Worker threads; 1 runs every band inline.

    Returns:
        Array of all rows in order.
    """
    bands = row_bands(map_size, workers)
    if workers <= 1 or len(bands) <= 1:
        return fn(0, map_size)

    with futures.ThreadPoolExecutor(max_workers=workers) as pool:
        parts = list(pool.map(lambda band: fn(*band), bands))
    return np.concatenate(parts, axis=0)


def check_cancelled(cancel: threading.Event | None) -> None:
    """Raise if the cancel event has been set."""
    if cancel is not None and cancel.is_set():
        raise GenerationCancelledError("Generation cancelled")
