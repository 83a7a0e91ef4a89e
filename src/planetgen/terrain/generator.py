"""Main planet generation orchestration."""

import logging
import math
import threading

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidConfigError
from ..terrain_types import TerrainTag, tag_value
from .classification import classify_planet
from .config import PlanetConfig
from .fields import build_noise_field
from .parallel import check_cancelled
from .shape import map_size_for

logger = logging.getLogger(__name__)

MAX_SEED = 0xFFFFFFFF


class GenerationResult:
    """Result of planet generation: the terrain map and its noise field."""

    def __init__(
        self,
        planet_map: NDArray[np.uint8],
        noise_field: NDArray[np.float32],
        map_size: int,
        config: PlanetConfig,
    ):
        self.planet_map = planet_map
        self.noise_field = noise_field
        self.map_size = map_size
        self.config = config


def validate_config(config: PlanetConfig) -> None:
    """Check a configuration can be generated.

    Raises:
        InvalidConfigError: For unusable layer, descriptor, shape or seed
            settings.
    """
    if not 1 <= config.seed <= MAX_SEED:
        raise InvalidConfigError(f"Seed must be in [1, {MAX_SEED}], got {config.seed}")
    if not config.noise_layers:
        raise InvalidConfigError("At least one noise layer is required")
    for index, layer in enumerate(config.noise_layers):
        if not layer.scale > 0:
            raise InvalidConfigError(
                f"Noise layer {index} scale must be positive, got {layer.scale}"
            )
    if not config.elements:
        raise InvalidConfigError("At least one terrain descriptor is required")

    shape = config.shape
    if not (math.isfinite(shape.radius) and shape.radius > 0):
        raise InvalidConfigError(f"Radius must be positive, got {shape.radius}")
    if not (math.isfinite(shape.deformation) and shape.deformation >= 0):
        raise InvalidConfigError(
            f"Deformation must be non-negative, got {shape.deformation}"
        )
    if not (math.isfinite(shape.deformation_frequency) and shape.deformation_frequency >= 0):
        raise InvalidConfigError(
            f"Deformation frequency must be non-negative, got {shape.deformation_frequency}"
        )
    if not 0.0 <= config.cave_density < 1.0:
        raise InvalidConfigError(
            f"Cave density must be in [0, 1), got {config.cave_density}"
        )
    if map_size_for(shape) < 1:
        raise InvalidConfigError(f"Shape {shape} produces an empty map")


def generate_planet(
    config: PlanetConfig,
    workers: int | None = None,
    cancel: threading.Event | None = None,
) -> GenerationResult:
    """Generate a planet from configuration.

    Builds the noise field layer by layer, then classifies every cell.
    Nothing is returned unless both passes complete.

    Args:
        config: Planet generation configuration.
        workers: Worker threads; defaults to config.workers.
        cancel: Optional event checked between passes.

    Returns:
        GenerationResult with the planet map and noise field.

    Raises:
        PlanetError: Any subclass, on invalid input, degenerate geometry or
            cancellation.
    """
    validate_config(config)
    workers = config.workers if workers is None else workers
    if workers < 1:
        raise InvalidConfigError(f"Workers must be at least 1, got {workers}")
    map_size = map_size_for(config.shape)

    logger.info(
        f"Generating planet {map_size}x{map_size} with seed {config.seed} "
        f"({len(config.noise_layers)} layers, {len(config.elements)} elements)"
    )

    noise_field = build_noise_field(
        config.seed,
        map_size,
        config.noise_layers,
        workers=workers,
        cancel=cancel,
    )

    check_cancelled(cancel)
    planet_map = classify_planet(
        noise_field,
        config.seed,
        config.shape,
        config.cave_density,
        config.elements,
        workers=workers,
    )

    _log_planet_stats(planet_map)

    return GenerationResult(
        planet_map=planet_map,
        noise_field=noise_field,
        map_size=map_size,
        config=config,
    )


def _log_planet_stats(planet_map: NDArray[np.uint8]) -> None:
    """Log how many cells each terrain tag covers."""
    total = planet_map.size
    if total == 0:
        return

    logger.debug(f"Planet stats ({total:,} cells):")
    for tag in TerrainTag:
        count = int(np.sum(planet_map == tag_value(tag)))
        if count:
            logger.debug(f"  {tag.value}: {count:,} ({count / total * 100:.1f}%)")
