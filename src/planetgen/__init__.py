"""Deterministic procedural planet generation."""

from .config import find_config, list_configs, load_config
from .exceptions import (
    DegenerateGeometryError,
    GenerationCancelledError,
    InvalidConfigError,
    NoCandidatesError,
    PlanetError,
)
from .planet import PlanetGenerator
from .rng import DeterministicRandom, ParameterRange, derive_parameters, view_point
from .terrain_types import TerrainTag, tag_from_value, tag_value

__all__ = [
    # Generator
    "PlanetGenerator",
    # Random source
    "DeterministicRandom",
    "ParameterRange",
    "derive_parameters",
    "view_point",
    # Tags
    "TerrainTag",
    "tag_value",
    "tag_from_value",
    # Config
    "load_config",
    "find_config",
    "list_configs",
    # Exceptions
    "PlanetError",
    "InvalidConfigError",
    "NoCandidatesError",
    "DegenerateGeometryError",
    "GenerationCancelledError",
]
