"""Coherent noise primitives and layer merge operations.

Provides classic Perlin, 2D simplex and cellular (Worley) noise evaluated
on numpy coordinate arrays. The primitives are hash based (no permutation
table), so they are fully deterministic; seeds decorrelate samples by
shifting the sampling origin instead.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import MergeOperation, NoiseKind


def _mod289(x: NDArray[np.float64]) -> NDArray[np.float64]:
    return x - np.floor(x * (1.0 / 289.0)) * 289.0


def _mod7(x: NDArray[np.float64]) -> NDArray[np.float64]:
    return x - np.floor(x * (1.0 / 7.0)) * 7.0


def _permute(x: NDArray[np.float64]) -> NDArray[np.float64]:
    return _mod289((34.0 * x + 1.0) * x)


def _taylor_inv_sqrt(r: NDArray[np.float64]) -> NDArray[np.float64]:
    return 1.79284291400159 - 0.85373472095314 * r


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def perlin_noise(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Classic Perlin gradient noise.

    Args:
        x: X coordinates.
        y: Y coordinates (broadcast against x).

    Returns:
        Noise values roughly in [-1, 1].
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

    x0 = np.floor(x)
    y0 = np.floor(y)
    fx0 = x - x0
    fy0 = y - y0
    fx1 = fx0 - 1.0
    fy1 = fy0 - 1.0

    ix0 = _mod289(x0)
    iy0 = _mod289(y0)
    ix1 = _mod289(x0 + 1.0)
    iy1 = _mod289(y0 + 1.0)

    def corner(ix, iy, fx, fy):
        # Hash the lattice point into a gradient on the unit diamond
        h = _permute(_permute(ix) + iy)
        gx = (h * (1.0 / 41.0)) % 1.0 * 2.0 - 1.0
        gy = np.abs(gx) - 0.5
        gx = gx - np.floor(gx + 0.5)
        norm = _taylor_inv_sqrt(gx * gx + gy * gy)
        return (gx * fx + gy * fy) * norm

    n00 = corner(ix0, iy0, fx0, fy0)
    n10 = corner(ix1, iy0, fx1, fy0)
    n01 = corner(ix0, iy1, fx0, fy1)
    n11 = corner(ix1, iy1, fx1, fy1)

    u = _fade(fx0)
    v = _fade(fy0)
    nx0 = n00 + u * (n10 - n00)
    nx1 = n01 + u * (n11 - n01)
    return 2.3 * (nx0 + v * (nx1 - nx0))


# Skew/unskew constants for the 2D simplex grid
_C0 = 0.211324865405187  # (3 - sqrt(3)) / 6
_C1 = 0.366025403784439  # (sqrt(3) - 1) / 2
_C2 = -0.577350269189626  # 2 * _C0 - 1
_C3 = 0.024390243902439  # 1 / 41


def simplex_noise(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """2D simplex noise.

    Args:
        x: X coordinates.
        y: Y coordinates (broadcast against x).

    Returns:
        Noise values roughly in [-1, 1].
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

    skew = (x + y) * _C1
    ix = np.floor(x + skew)
    iy = np.floor(y + skew)
    unskew = (ix + iy) * _C0
    x0 = x - ix + unskew
    y0 = y - iy + unskew

    # Pick the triangle containing the point
    upper = x0 > y0
    i1x = np.where(upper, 1.0, 0.0)
    i1y = 1.0 - i1x

    x1 = x0 + _C0 - i1x
    y1 = y0 + _C0 - i1y
    x2 = x0 + _C2
    y2 = y0 + _C2

    ix = _mod289(ix)
    iy = _mod289(iy)
    p0 = _permute(_permute(iy) + ix)
    p1 = _permute(_permute(iy + i1y) + ix + i1x)
    p2 = _permute(_permute(iy + 1.0) + ix + 1.0)

    total = np.zeros_like(x)
    for p, dx, dy in ((p0, x0, y0), (p1, x1, y1), (p2, x2, y2)):
        m = np.maximum(0.5 - (dx * dx + dy * dy), 0.0)
        m = m * m
        m = m * m
        gx = 2.0 * ((p * _C3) % 1.0) - 1.0
        h = np.abs(gx) - 0.5
        a0 = gx - np.floor(gx + 0.5)
        m = m * _taylor_inv_sqrt(a0 * a0 + h * h)
        total += m * (a0 * dx + h * dy)

    return 130.0 * total


# Feature point jitter for cellular noise
_K = 1.0 / 7.0
_KO = 3.0 / 7.0
_JITTER = 1.0


def cellular_noise(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Cellular (Worley) noise, distance to the nearest feature point (F1).

    Searches the 3x3 neighbourhood of cells around each point.

    Args:
        x: X coordinates.
        y: Y coordinates (broadcast against x).

    Returns:
        F1 distances, in [0, 1] for almost all inputs.
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

    cell_x = np.floor(x)
    cell_y = np.floor(y)
    frac_x = x - cell_x
    frac_y = y - cell_y
    cell_x = _mod289(cell_x)
    cell_y = _mod289(cell_y)

    nearest = np.full(x.shape, np.inf)
    for i in (-1, 0, 1):
        px = _permute(cell_x + i)
        for j in (-1, 0, 1):
            p = _permute(px + cell_y + j)
            ox = (p * _K) % 1.0 - _KO
            oy = _mod7(np.floor(p * _K)) * _K - _KO
            dx = frac_x - (i + 0.5) + _JITTER * ox
            dy = frac_y - (j + 0.5) + _JITTER * oy
            nearest = np.minimum(nearest, dx * dx + dy * dy)

    return np.sqrt(nearest)


def sample_noise(kind: NoiseKind, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Sample a named noise primitive normalized to [0, 1].

    Perlin and simplex are rescaled from [-1, 1]; cellular is used as is.

    Raises:
        ValueError: If the kind is not a known noise primitive.
    """
    if kind == NoiseKind.PERLIN:
        return (perlin_noise(x, y) + 1.0) / 2.0
    if kind == NoiseKind.CELLULAR:
        return cellular_noise(x, y)
    if kind == NoiseKind.SIMPLEX:
        return (simplex_noise(x, y) + 1.0) / 2.0
    raise ValueError(f"Unknown noise kind: {kind!r}")


def merge_noise(
    operation: MergeOperation,
    value1: ArrayLike,
    value2: ArrayLike,
) -> NDArray[np.float64]:
    """Merge a new sample into the running field value.

    Args:
        operation: Merge operation to apply.
        value1: Running field value.
        value2: Newly sampled value.

    Returns:
        Merged values.
    """
    value1 = np.asarray(value1, dtype=np.float64)
    value2 = np.asarray(value2, dtype=np.float64)

    if operation == MergeOperation.INTERSECT:
        return np.minimum(value1, value2)
    if operation == MergeOperation.UNION:
        return np.maximum(value1, value2)
    if operation == MergeOperation.MULTIPLY:
        return value1 * value2
    if operation == MergeOperation.MIX:
        return (value1 + value2) / 2.0
    if operation == MergeOperation.REPLACE:
        return np.broadcast_to(value2, np.broadcast(value1, value2).shape).copy()
    raise ValueError(f"Unknown merge operation: {operation!r}")
