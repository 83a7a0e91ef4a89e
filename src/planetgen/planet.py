"""Stateful planet generator exposing normalized parameters to a UI."""

import threading

import numpy as np
import structlog

from .exceptions import InvalidConfigError
from .rng import (
    CAVE_DENSITY_RANGE,
    DEFORMATION_FREQUENCY_RANGE,
    DEFORMATION_RANGE,
    RADIUS_RANGE,
    derive_parameters,
)
from .terrain.config import NoiseLayerConfig, PlanetConfig, ShapeConfig, TerrainDescriptor
from .terrain.generator import MAX_SEED, GenerationResult, generate_planet

logger = structlog.get_logger()

# Range drawn from by set_random_seed, inclusive
RANDOM_SEED_MIN = 1
RANDOM_SEED_MAX = 999999


class PlanetGenerator:
    """Holds the current planet parameters and generates on request.

    Nothing regenerates implicitly: callers change parameters through
    configure(), set_seed() or the ratio setters, then call generate().
    """

    def __init__(self, config: PlanetConfig | None = None):
        """Initialize PlanetGenerator.

        Args:
            config: Starting configuration; copied, never modified.
        """
        self._config = (config or PlanetConfig()).model_copy(deep=True)
        self._config.seed = max(1, self._config.seed)

    @property
    def config(self) -> PlanetConfig:
        """Copy of the current configuration."""
        return self._config.model_copy(deep=True)

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def shape(self) -> ShapeConfig:
        return self._config.shape.model_copy()

    @property
    def cave_density(self) -> float:
        return self._config.cave_density

    def configure(
        self,
        *,
        seed: int | None = None,
        shape: ShapeConfig | None = None,
        cave_density: float | None = None,
        noise_layers: list[NoiseLayerConfig] | None = None,
        elements: list[TerrainDescriptor] | None = None,
        background_color: tuple[int, int, int, int] | None = None,
        workers: int | None = None,
    ) -> None:
        """Replace any subset of the configuration.

        Unlike set_seed(), passing a seed here keeps the current shape and
        cave density.
        """
        if seed is not None:
            self._config.seed = max(1, seed)
        if shape is not None:
            self._config.shape = shape.model_copy()
        if cave_density is not None:
            self._config.cave_density = cave_density
        if noise_layers is not None:
            self._config.noise_layers = list(noise_layers)
        if elements is not None:
            self._config.elements = list(elements)
        if background_color is not None:
            self._config.background_color = background_color
        if workers is not None:
            self._config.workers = workers

    def generate(self, cancel: threading.Event | None = None) -> GenerationResult:
        """Generate the planet for the current configuration.

        Raises:
            PlanetError: If the configuration cannot be generated; the
                generator's state is left untouched.
        """
        config = self.config
        result = generate_planet(config, cancel=cancel)
        logger.info(
            "planet_generated",
            seed=config.seed,
            map_size=result.map_size,
            radius=round(config.shape.radius, 3),
            deformation=round(config.shape.deformation, 3),
        )
        return result

    def set_seed(self, seed: int) -> None:
        """Set the seed and re-derive shape parameters and cave density from it.

        Overwrites any ratio set beforehand.

        Raises:
            InvalidConfigError: If the seed does not fit in 32 bits.
        """
        seed = max(1, seed)
        if seed > MAX_SEED:
            raise InvalidConfigError(f"Seed must be in [1, {MAX_SEED}], got {seed}")
        radius, deformation, deformation_frequency, cave_density = derive_parameters(seed)

        self._config.seed = seed
        self._config.shape.radius = radius
        self._config.shape.deformation = deformation
        self._config.shape.deformation_frequency = deformation_frequency
        self._config.cave_density = cave_density

        logger.debug(
            "seed_set",
            seed=seed,
            radius=radius,
            deformation=deformation,
            deformation_frequency=deformation_frequency,
            cave_density=cave_density,
        )

    def set_random_seed(self, rng: np.random.Generator | None = None) -> int:
        """Draw a seed in [1, 999999] and apply it with set_seed().

        Args:
            rng: Random number generator; a fresh unseeded one by default.

        Returns:
            The seed that was drawn.
        """
        rng = rng if rng is not None else np.random.default_rng()
        seed = int(rng.integers(RANDOM_SEED_MIN, RANDOM_SEED_MAX + 1))
        self.set_seed(seed)
        return seed

    # Ratio accessors for sliders. Ratios outside [0, 1] extrapolate.

    def get_radius_ratio(self) -> float:
        return RADIUS_RANGE.to_ratio(self._config.shape.radius)

    def set_radius_ratio(self, ratio: float) -> None:
        self._config.shape.radius = RADIUS_RANGE.from_ratio(ratio)

    def get_deformation_ratio(self) -> float:
        return DEFORMATION_RANGE.to_ratio(self._config.shape.deformation)

    def set_deformation_ratio(self, ratio: float) -> None:
        self._config.shape.deformation = DEFORMATION_RANGE.from_ratio(ratio)

    def get_deformation_frequency_ratio(self) -> float:
        return DEFORMATION_FREQUENCY_RANGE.to_ratio(self._config.shape.deformation_frequency)

    def set_deformation_frequency_ratio(self, ratio: float) -> None:
        self._config.shape.deformation_frequency = DEFORMATION_FREQUENCY_RANGE.from_ratio(ratio)

    def get_cave_density_ratio(self) -> float:
        return CAVE_DENSITY_RANGE.to_ratio(self._config.cave_density)

    def set_cave_density_ratio(self, ratio: float) -> None:
        self._config.cave_density = CAVE_DENSITY_RANGE.from_ratio(ratio)
