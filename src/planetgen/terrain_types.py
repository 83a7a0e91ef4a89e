"""Terrain tags and their compact storage codes."""

from enum import Enum


class TerrainTag(str, Enum):
    """Terrain categories a planet cell can be classified into.

    ``EMPTY`` and ``BACKGROUND`` are implicit: they are never listed as
    descriptors but are produced by the classifier for cells outside the
    planet and for hollow caves.
    """

    GRASS = "grass"
    GRASS2 = "grass2"
    DIRT = "dirt"
    ROCK = "rock"
    GOLD = "gold"
    WATER = "water"
    MAGMA_ROCK = "magma_rock"
    LAVA = "lava"
    EMPTY = "empty"
    BACKGROUND = "background"

    @property
    def implicit(self) -> bool:
        """Whether the tag is produced by the classifier rather than a descriptor."""
        return self in _IMPLICIT_TAGS

    @property
    def code(self) -> int:
        """uint8 code used in planet map arrays."""
        return _TAG_TO_CODE[self]


_IMPLICIT_TAGS = frozenset({
    TerrainTag.EMPTY,
    TerrainTag.BACKGROUND,
})

_TAG_TO_CODE: dict[TerrainTag, int] = {
    TerrainTag.EMPTY: 0,
    TerrainTag.BACKGROUND: 1,
    TerrainTag.GRASS: 2,
    TerrainTag.GRASS2: 3,
    TerrainTag.DIRT: 4,
    TerrainTag.ROCK: 5,
    TerrainTag.GOLD: 6,
    TerrainTag.WATER: 7,
    TerrainTag.MAGMA_ROCK: 8,
    TerrainTag.LAVA: 9,
}

_CODE_TO_TAG: dict[int, TerrainTag] = {code: tag for tag, code in _TAG_TO_CODE.items()}


def tag_value(tag: TerrainTag) -> int:
    """Convert a TerrainTag to its uint8 code."""
    return _TAG_TO_CODE[tag]


def tag_from_value(value: int) -> TerrainTag:
    """Convert a uint8 code back to its TerrainTag.

    Raises:
        ValueError: If the code is not assigned to any tag.
    """
    try:
        return _CODE_TO_TAG[int(value)]
    except KeyError:
        raise ValueError(f"Unknown terrain code: {value}") from None
