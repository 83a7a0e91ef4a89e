"""Map persistence: save and load generated planets."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from .generator import GenerationResult

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_map(path: Path, result: GenerationResult) -> None:
    """Save a generated planet to disk.

    Uses numpy's compressed .npz format for efficient storage.

    Args:
        path: Output path (should end with .npz).
        result: Generation result to store.
    """
    config = result.config
    metadata = {
        "version": FORMAT_VERSION,
        "seed": config.seed,
        "map_size": result.map_size,
        "shape": config.shape.model_dump(mode="json"),
        "cave_density": config.cave_density,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez_compressed(
        path,
        planet_map=result.planet_map,
        noise_field=result.noise_field,
        metadata=np.frombuffer(json.dumps(metadata).encode("utf-8"), dtype=np.uint8),
    )

    file_size = path.stat().st_size / 1024
    logger.info(f"Saved planet to {path} ({file_size:.1f} KB)")


def load_map(
    path: Path,
) -> tuple[NDArray[np.uint8], NDArray[np.float32], dict]:
    """Load a planet from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (planet map, noise field, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    with np.load(path) as data:
        for key in ("planet_map", "noise_field"):
            if key not in data:
                raise ValueError(f"Invalid map file: missing '{key}' array")
        planet_map = data["planet_map"]
        noise_field = data["noise_field"]

        if "metadata" in data:
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        else:
            metadata = {}

    if planet_map.shape != noise_field.shape:
        raise ValueError(
            f"Invalid map file: planet map {planet_map.shape} and noise field "
            f"{noise_field.shape} differ in shape"
        )

    logger.info(f"Loaded planet from {path}: {planet_map.shape[1]}x{planet_map.shape[0]}")
    return planet_map, noise_field, metadata
