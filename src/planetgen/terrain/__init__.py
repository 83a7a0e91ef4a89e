"""Procedural planet terrain generation package.

This package implements layered noise fields, the deformed planet outline,
per-cell terrain classification, rendering and map persistence.
"""

from .classification import classify_cells, classify_planet, select_best_descriptor
from .config import (
    MergeOperation,
    NoiseKind,
    NoiseLayerConfig,
    PlanetConfig,
    ShapeConfig,
    TerrainDescriptor,
)
from .fields import EXCLUDED, build_noise_field
from .generator import GenerationResult, generate_planet, validate_config
from .persistence import load_map, save_map
from .render import build_color_table, render_noise, render_planet, save_image
from .shape import angle_of, map_size_for, surface_radius

__all__ = [
    "EXCLUDED",
    "GenerationResult",
    "MergeOperation",
    "NoiseKind",
    "NoiseLayerConfig",
    "PlanetConfig",
    "ShapeConfig",
    "TerrainDescriptor",
    "angle_of",
    "build_color_table",
    "build_noise_field",
    "classify_cells",
    "classify_planet",
    "generate_planet",
    "load_map",
    "map_size_for",
    "render_noise",
    "render_planet",
    "save_image",
    "save_map",
    "select_best_descriptor",
    "surface_radius",
    "validate_config",
]
