"""Rasterize planet maps and noise fields into RGBA images."""

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..terrain_types import TerrainTag, tag_value
from .config import TerrainDescriptor

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


def build_color_table(
    elements: list[TerrainDescriptor],
    background_color: tuple[int, int, int, int],
) -> NDArray[np.uint8]:
    """Build a lookup table from tag code to RGBA colour.

    Empty space is transparent and caves use the background colour. When
    several descriptors share a tag the last one wins. Tags without a colour
    stay transparent.

    Args:
        elements: Terrain descriptors carrying display colours.
        background_color: RGBA colour for hollow caves.

    Returns:
        Array of shape (256, 4) indexed by tag code.
    """
    table = np.zeros((256, 4), dtype=np.uint8)
    for element in elements:
        table[tag_value(element.tag)] = element.color
    table[tag_value(TerrainTag.EMPTY)] = TRANSPARENT
    table[tag_value(TerrainTag.BACKGROUND)] = background_color
    return table


def render_planet(
    planet_map: NDArray[np.uint8],
    color_table: NDArray[np.uint8],
    block_size: int = 1,
) -> NDArray[np.uint8]:
    """Convert a planet map to an RGBA image.

    Args:
        planet_map: 2D array of tag codes.
        color_table: Table from build_color_table().
        block_size: Pixels per cell along each axis.

    Returns:
        uint8 array of shape (height * block_size, width * block_size, 4).
    """
    if block_size < 1:
        raise ValueError(f"Block size must be at least 1, got {block_size}")

    image = color_table[planet_map]
    if block_size > 1:
        image = np.repeat(np.repeat(image, block_size, axis=0), block_size, axis=1)
    return image


def render_noise(
    noise_field: NDArray[np.float32],
    block_size: int = 1,
) -> NDArray[np.uint8]:
    """Convert a noise field to an opaque grayscale RGBA image.

    Values are interpolated from black at 0 to white at 1; excluded cells
    and other out-of-range values are clamped.
    """
    if block_size < 1:
        raise ValueError(f"Block size must be at least 1, got {block_size}")

    gray = np.round(np.clip(noise_field, 0.0, 1.0) * 255.0).astype(np.uint8)
    image = np.empty((*gray.shape, 4), dtype=np.uint8)
    image[..., 0] = gray
    image[..., 1] = gray
    image[..., 2] = gray
    image[..., 3] = 255
    if block_size > 1:
        image = np.repeat(np.repeat(image, block_size, axis=0), block_size, axis=1)
    return image


def save_image(path: Path, image: NDArray[np.uint8]) -> None:
    """Write an RGBA image array as a PNG file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(image)).save(path)
    logger.info(f"Saved {image.shape[1]}x{image.shape[0]} image to {path}")
