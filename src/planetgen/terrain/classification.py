"""Terrain classification: empty space, caves and best-matching descriptors."""

from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import DegenerateGeometryError, InvalidConfigError, NoCandidatesError
from ..terrain_types import TerrainTag, tag_value
from .config import ShapeConfig, TerrainDescriptor
from .parallel import map_row_bands
from .shape import angle_of, grid_center, surface_radius

# Caves are only carved above this depth; the core stays solid
CAVE_MAX_DEPTH = 0.8

DEPTH_WEIGHT = 1.0
NOISE_WEIGHT = 0.5


def compute_depth(
    surface: ArrayLike,
    distance: ArrayLike,
) -> NDArray[np.float64]:
    """Normalized signed depth below the surface.

    Negative outside the planet, 0 on the surface, 1 at the center.

    Raises:
        DegenerateGeometryError: If any surface radius is zero or not finite.
    """
    surface = np.asarray(surface, dtype=np.float64)
    distance = np.asarray(distance, dtype=np.float64)
    if not np.all(np.isfinite(surface)) or np.any(surface == 0.0):
        raise DegenerateGeometryError(
            "Surface radius evaluated to zero or a non-finite value"
        )
    return (surface - distance) / surface


def descriptor_scores(
    descriptors: list[TerrainDescriptor],
    depth: ArrayLike,
    noise: ArrayLike,
) -> NDArray[np.float64]:
    """Penalty score of every descriptor for every cell (lower is better).

    Args:
        descriptors: Candidate descriptors.
        depth: Normalized depths, any shape.
        noise: Rescaled noise values, same shape as depth.

    Returns:
        Array of shape (len(descriptors), *depth.shape).

    Raises:
        NoCandidatesError: If descriptors is empty.
    """
    if not descriptors:
        raise NoCandidatesError("Cannot classify terrain without descriptors")

    depth = np.asarray(depth, dtype=np.float64)
    noise = np.asarray(noise, dtype=np.float64)
    extra_dims = (1,) * depth.ndim

    low = np.array([d.depth_range[0] for d in descriptors]).reshape(-1, *extra_dims)
    high = np.array([d.depth_range[1] for d in descriptors]).reshape(-1, *extra_dims)
    target = np.array([d.noise for d in descriptors]).reshape(-1, *extra_dims)

    outside = (depth < low) | (depth > high)
    depth_penalty = np.where(
        outside, np.minimum(np.abs(depth - low), np.abs(depth - high)), 0.0
    )
    noise_penalty = np.abs(target - noise)

    return DEPTH_WEIGHT * depth_penalty + NOISE_WEIGHT * noise_penalty


def select_best_descriptor(
    descriptors: list[TerrainDescriptor],
    depth: float,
    noise: float,
) -> TerrainTag:
    """Pick the descriptor with the lowest penalty score.

    Ties go to the descriptor listed first.

    Raises:
        NoCandidatesError: If descriptors is empty.
    """
    scores = descriptor_scores(descriptors, depth, noise)
    return descriptors[int(np.argmin(scores))].tag


def classify_cells(
    depth: ArrayLike,
    noise: ArrayLike,
    cave_density: float,
    descriptors: list[TerrainDescriptor],
) -> NDArray[np.uint8]:
    """Classify cells from their depth and raw noise value.

    Cells outside the planet are empty; shallow cells whose noise falls
    below the cave density are hollow background; every other cell takes the
    best descriptor for its depth and density-rescaled noise.

    Args:
        depth: Normalized depths.
        noise: Raw noise field values, same shape as depth.
        cave_density: Noise threshold for caves, in [0, 1).
        descriptors: Candidate descriptors.

    Returns:
        uint8 tag codes, same shape as depth.

    Raises:
        NoCandidatesError: If descriptors is empty.
        InvalidConfigError: If cave_density is 1, making rescaling undefined.
    """
    if cave_density == 1.0:
        raise InvalidConfigError("Cave density must be below 1")

    depth = np.asarray(depth, dtype=np.float64)
    noise = np.asarray(noise, dtype=np.float64)
    scaled_noise = (noise - cave_density) / (1.0 - cave_density)

    codes = np.array([tag_value(d.tag) for d in descriptors], dtype=np.uint8)
    best = codes[np.argmin(descriptor_scores(descriptors, depth, scaled_noise), axis=0)]

    cave = (noise < cave_density) & (depth < CAVE_MAX_DEPTH)
    result = np.where(cave, np.uint8(tag_value(TerrainTag.BACKGROUND)), best)
    result = np.where(depth < 0.0, np.uint8(tag_value(TerrainTag.EMPTY)), result)
    return result.astype(np.uint8)


def _classify_rows(
    start: int,
    stop: int,
    noise_field: NDArray[np.float32],
    seed: int,
    shape: ShapeConfig,
    cave_density: float,
    descriptors: list[TerrainDescriptor],
) -> NDArray[np.uint8]:
    """Classify rows [start, stop) of the planet."""
    map_size = noise_field.shape[1]
    center = grid_center(map_size)
    ys, xs = np.mgrid[start:stop, 0:map_size].astype(np.float64)

    angle = angle_of(center, xs, ys)
    surface = surface_radius(seed, angle, shape)
    distance = np.hypot(xs - center[0], ys - center[1])

    depth = compute_depth(surface, distance)
    return classify_cells(depth, noise_field[start:stop], cave_density, descriptors)


def classify_planet(
    noise_field: NDArray[np.float32],
    seed: int,
    shape: ShapeConfig,
    cave_density: float,
    descriptors: list[TerrainDescriptor],
    workers: int = 1,
) -> NDArray[np.uint8]:
    """Classify every cell of a square noise field into a terrain tag code.

    Args:
        noise_field: Square noise field.
        seed: Generation seed (drives the surface outline).
        shape: Planet shape parameters.
        cave_density: Noise threshold for caves.
        descriptors: Candidate descriptors.
        workers: Worker threads for the per-cell pass.

    Returns:
        2D uint8 array of tag codes, same shape as noise_field.
    """
    if not descriptors:
        raise NoCandidatesError("Cannot classify terrain without descriptors")

    band_fn = partial(
        _classify_rows,
        noise_field=noise_field,
        seed=seed,
        shape=shape,
        cave_density=cave_density,
        descriptors=descriptors,
    )
    return map_row_bands(band_fn, noise_field.shape[0], workers)
