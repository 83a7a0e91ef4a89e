"""Noise field construction from an ordered list of noise layers."""

import logging
import threading
from functools import partial

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidConfigError
from ..rng import view_point
from .config import NoiseLayerConfig
from .noise import merge_noise, sample_noise
from .parallel import check_cancelled, map_row_bands

logger = logging.getLogger(__name__)

# Cells holding this value are excluded zones left untouched by later layers
EXCLUDED = -1.0


def sampling_offset(map_size: int) -> float:
    """Offset that centers the sampling window on the view point.

    Half the map size, truncated towards zero.
    """
    return float(-(map_size // 2))


def _layer_pass(
    start: int,
    stop: int,
    field: NDArray[np.float32],
    layer: NoiseLayerConfig,
    origin: tuple[float, float],
    offset: float,
) -> NDArray[np.float32]:
    """Apply one layer to rows [start, stop) of a field snapshot."""
    map_size = field.shape[1]
    ys, xs = np.mgrid[start:stop, 0:map_size].astype(np.float64)

    sx = origin[0] + offset / layer.scale + xs / layer.scale
    sy = origin[1] + offset / layer.scale + ys / layer.scale

    current = field[start:stop]
    merged = merge_noise(layer.operation, current, sample_noise(layer.kind, sx, sy))
    return np.where(current == EXCLUDED, current, merged).astype(np.float32)


def build_noise_field(
    seed: int,
    map_size: int,
    layers: list[NoiseLayerConfig],
    initial: NDArray[np.float32] | None = None,
    workers: int = 1,
    cancel: threading.Event | None = None,
) -> NDArray[np.float32]:
    """Build a noise field by applying layers in order.

    Every cell samples its layer at view_point + offset/scale + (x, y)/scale
    and merges the sample into its current value. Cells holding EXCLUDED
    keep it through every layer.

    Args:
        seed: Generation seed, used to derive the sampling origin.
        map_size: Side length of the square field.
        layers: Noise layers, applied first to last.
        initial: Optional prior field to start from (copied, not modified).
        workers: Worker threads used within each layer pass.
        cancel: Optional event checked before every layer pass.

    Returns:
        2D float32 array of shape (map_size, map_size).

    Raises:
        InvalidConfigError: If the initial field has the wrong shape.
        GenerationCancelledError: If cancel is set between passes.
    """
    if initial is None:
        field = np.zeros((map_size, map_size), dtype=np.float32)
    else:
        field = np.array(initial, dtype=np.float32, copy=True)
        if field.shape != (map_size, map_size):
            raise InvalidConfigError(
                f"Initial field shape {field.shape} does not match map size {map_size}"
            )

    origin = view_point(seed)
    offset = sampling_offset(map_size)

    for index, layer in enumerate(layers):
        check_cancelled(cancel)
        band_fn = partial(_layer_pass, field=field, layer=layer, origin=origin, offset=offset)
        field = map_row_bands(band_fn, map_size, workers)
        logger.debug(
            f"Layer {index} ({layer.kind.value}, scale={layer.scale}, "
            f"{layer.operation.value}) applied to {map_size}x{map_size} field"
        )

    return field
