"""Planet generation configuration models."""

from enum import Enum

from pydantic import BaseModel, Field

from ..terrain_types import TerrainTag


class NoiseKind(str, Enum):
    """Coherent noise primitives available to layers and shape profiles."""

    PERLIN = "perlin"
    CELLULAR = "cellular"
    SIMPLEX = "simplex"


class MergeOperation(str, Enum):
    """How a freshly sampled layer value combines with the running field."""

    INTERSECT = "intersect"
    UNION = "union"
    MULTIPLY = "multiply"
    MIX = "mix"
    REPLACE = "replace"


class NoiseLayerConfig(BaseModel, frozen=True):
    """A single noise layer applied to the noise field."""

    kind: NoiseKind = Field(default=NoiseKind.PERLIN, description="Noise primitive")
    scale: float = Field(default=10.0, description="Cells per noise unit")
    operation: MergeOperation = Field(
        default=MergeOperation.REPLACE, description="Merge with the running field"
    )


class ShapeConfig(BaseModel):
    """Planet outline: base radius and angular deformation."""

    radius: float = Field(default=150.0, description="Base radius in cells")
    deformation: float = Field(
        default=30.0, description="Maximum outward boundary offset in cells"
    )
    deformation_frequency: float = Field(
        default=3.0, description="How fast the boundary oscillates with angle"
    )
    kind: NoiseKind = Field(
        default=NoiseKind.SIMPLEX, description="Noise primitive for the boundary"
    )


class TerrainDescriptor(BaseModel, frozen=True):
    """Candidate terrain category scored against each planet cell."""

    tag: TerrainTag
    depth_range: tuple[float, float] = Field(
        default=(0.0, 1.0), description="Preferred normalized depth interval"
    )
    noise: float = Field(default=0.5, description="Preferred rescaled noise value")
    color: tuple[int, int, int, int] = Field(
        default=(255, 255, 255, 255), description="RGBA colour used when rendering"
    )


def _default_noise_layers() -> list[NoiseLayerConfig]:
    return [
        NoiseLayerConfig(kind=NoiseKind.PERLIN, scale=40.0, operation=MergeOperation.REPLACE),
        NoiseLayerConfig(kind=NoiseKind.SIMPLEX, scale=15.0, operation=MergeOperation.MIX),
        NoiseLayerConfig(kind=NoiseKind.CELLULAR, scale=25.0, operation=MergeOperation.UNION),
    ]


def _default_elements() -> list[TerrainDescriptor]:
    return [
        TerrainDescriptor(tag=TerrainTag.GRASS, depth_range=(0.0, 0.05), noise=0.6, color=(86, 160, 60, 255)),
        TerrainDescriptor(tag=TerrainTag.GRASS2, depth_range=(0.0, 0.05), noise=0.2, color=(64, 130, 48, 255)),
        TerrainDescriptor(tag=TerrainTag.DIRT, depth_range=(0.03, 0.3), noise=0.4, color=(120, 84, 52, 255)),
        TerrainDescriptor(tag=TerrainTag.WATER, depth_range=(0.05, 0.35), noise=0.05, color=(52, 104, 180, 255)),
        TerrainDescriptor(tag=TerrainTag.ROCK, depth_range=(0.25, 0.7), noise=0.5, color=(110, 110, 118, 255)),
        TerrainDescriptor(tag=TerrainTag.GOLD, depth_range=(0.4, 0.7), noise=0.95, color=(224, 190, 40, 255)),
        TerrainDescriptor(tag=TerrainTag.MAGMA_ROCK, depth_range=(0.65, 0.9), noise=0.5, color=(96, 40, 32, 255)),
        TerrainDescriptor(tag=TerrainTag.LAVA, depth_range=(0.8, 1.0), noise=0.3, color=(240, 96, 24, 255)),
    ]


class PlanetConfig(BaseModel):
    """Complete planet generation configuration."""

    seed: int = Field(default=1, description="Seed for reproducibility (>= 1)")
    shape: ShapeConfig = Field(default_factory=ShapeConfig)
    cave_density: float = Field(
        default=0.4, description="Noise below this hollows the interior into caves"
    )
    background_color: tuple[int, int, int, int] = Field(
        default=(40, 28, 24, 255), description="RGBA colour of hollow caves"
    )
    noise_layers: list[NoiseLayerConfig] = Field(default_factory=_default_noise_layers)
    elements: list[TerrainDescriptor] = Field(default_factory=_default_elements)

    # Execution options
    workers: int = Field(
        default=1, description="Worker threads for per-cell passes (1 = inline)"
    )
