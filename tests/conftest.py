"""Shared test fixtures for planet generation tests."""

import pytest

from planetgen.terrain.config import (
    MergeOperation,
    NoiseKind,
    NoiseLayerConfig,
    PlanetConfig,
    ShapeConfig,
    TerrainDescriptor,
)
from planetgen.terrain_types import TerrainTag


@pytest.fixture
def rock_descriptor() -> TerrainDescriptor:
    """Rock spanning every depth, preferring mid noise."""
    return TerrainDescriptor(
        tag=TerrainTag.ROCK, depth_range=(0.0, 1.0), noise=0.5, color=(110, 110, 118, 255)
    )


@pytest.fixture
def tiny_config(rock_descriptor: TerrainDescriptor) -> PlanetConfig:
    """4x4 planet: one perlin layer, undeformed radius 2, single rock element."""
    return PlanetConfig(
        seed=1,
        shape=ShapeConfig(radius=2.0, deformation=0.0, deformation_frequency=0.0),
        cave_density=0.3,
        noise_layers=[
            NoiseLayerConfig(
                kind=NoiseKind.PERLIN, scale=10.0, operation=MergeOperation.REPLACE
            )
        ],
        elements=[rock_descriptor],
    )


@pytest.fixture
def small_config() -> PlanetConfig:
    """Default layers and elements on a planet small enough for fast tests."""
    return PlanetConfig(
        seed=42,
        shape=ShapeConfig(radius=20.0, deformation=6.0, deformation_frequency=4.0),
        cave_density=0.35,
    )
