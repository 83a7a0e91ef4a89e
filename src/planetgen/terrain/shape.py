"""Planet outline: radial angle and deformed surface radius."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..rng import view_point
from .config import ShapeConfig
from .noise import sample_noise

# Shift between the two boundary samples so they are decorrelated
SECOND_SAMPLE_OFFSET = 100.0


def angle_of(
    origin: tuple[float, float],
    x: ArrayLike,
    y: ArrayLike,
) -> NDArray[np.float64]:
    """Angle of points around an origin, in [0, 2*pi).

    Zero points along +x and angles grow towards +y. Points straight above
    or below the origin get pi/2 and 3*pi/2; the origin itself gets 0.

    Args:
        origin: (x, y) of the center.
        x: X coordinates of the points.
        y: Y coordinates of the points.

    Returns:
        Angles in radians.
    """
    dx = np.asarray(x, dtype=np.float64) - origin[0]
    dy = np.asarray(y, dtype=np.float64) - origin[1]
    angle = np.arctan2(dy, dx)
    angle = np.where(angle < 0.0, angle + 2.0 * np.pi, angle)
    # arctan2 of a tiny negative dy can round up to exactly 2*pi
    return np.where(angle >= 2.0 * np.pi, 0.0, angle)


def surface_radius(
    seed: int,
    angle: ArrayLike,
    shape: ShapeConfig,
) -> NDArray[np.float64]:
    """Distance from the planet center to its surface along an angle.

    Samples the boundary noise at two decorrelated points on a circle whose
    size follows the deformation frequency. The outline bulges by the squared
    product of the two samples.

    Args:
        seed: Generation seed; the sampling origin is derived from it afresh.
        angle: Angles in radians.
        shape: Planet shape parameters.

    Returns:
        Surface radius per angle.
    """
    angle = np.asarray(angle, dtype=np.float64)
    r = shape.radius * shape.deformation_frequency / 100.0
    origin_x, origin_y = view_point(seed)

    sx = origin_x + np.cos(angle) * r
    sy = origin_y + np.sin(angle) * r

    noise1 = sample_noise(shape.kind, sx, sy)
    noise2 = sample_noise(
        shape.kind, sx + SECOND_SAMPLE_OFFSET, sy + SECOND_SAMPLE_OFFSET
    )
    noise = noise1 * noise2
    noise = noise * noise

    return shape.radius + shape.deformation * noise


def map_size_for(shape: ShapeConfig) -> int:
    """Side length of the square grid that fits the deformed planet."""
    return int(np.floor(2.0 * shape.radius + 2.0 * shape.deformation))


def grid_center(map_size: int) -> tuple[float, float]:
    """Center of a map_size x map_size grid in cell coordinates."""
    return map_size / 2.0, map_size / 2.0
