"""Deterministic seeded random source.

A 32-bit xorshift generator. Identical seeds always produce identical draw
sequences, so everything derived from a seed (sampling origins, shape
parameters) is reproducible across runs and platforms.
"""

from dataclasses import dataclass

_MASK_32 = 0xFFFFFFFF

# Upper bound for sampling-origin draws
VIEW_POINT_EXTENT = 999999.0


@dataclass(frozen=True)
class ParameterRange:
    """Closed physical range a normalized [0, 1] ratio maps onto."""

    minimum: float
    maximum: float

    def magnitude(self) -> float:
        return self.maximum - self.minimum

    def to_ratio(self, value: float) -> float:
        """Map a physical value to its ratio within the range."""
        return (value - self.minimum) / self.magnitude()

    def from_ratio(self, ratio: float) -> float:
        """Map a ratio to a physical value.

        Ratios outside [0, 1] are not rejected; they extrapolate past the range.
        """
        return ratio * self.magnitude() + self.minimum


RADIUS_RANGE = ParameterRange(100.0, 250.0)
DEFORMATION_RANGE = ParameterRange(0.0, 100.0)
DEFORMATION_FREQUENCY_RANGE = ParameterRange(0.0, 8.0)
CAVE_DENSITY_RANGE = ParameterRange(0.25, 0.6)


class DeterministicRandom:
    """Seeded xorshift32 generator producing floats in caller-given ranges."""

    def __init__(self, seed: int):
        """Initialize the generator.

        Args:
            seed: Non-zero unsigned 32-bit seed.

        Raises:
            ValueError: If the seed is zero or does not fit in 32 bits.
        """
        if not 0 < seed <= _MASK_32:
            raise ValueError(f"Seed must be in [1, {_MASK_32}], got {seed}")
        self._state = seed
        # The first state is discarded so nearby seeds diverge sooner
        self._next_state()

    def _next_state(self) -> int:
        current = self._state
        state = current
        state ^= (state << 13) & _MASK_32
        state ^= state >> 17
        state ^= (state << 5) & _MASK_32
        self._state = state
        return current

    def next_float(self, minimum: float = 0.0, maximum: float = 1.0) -> float:
        """Draw a float in [minimum, maximum)."""
        unit = (self._next_state() >> 9) / float(1 << 23)
        return unit * (maximum - minimum) + minimum


def view_point(seed: int) -> tuple[float, float]:
    """Derive the noise sampling origin for a seed.

    Uses a fresh generator so the result never depends on other draws.
    """
    generator = DeterministicRandom(seed)
    x = generator.next_float(0.0, VIEW_POINT_EXTENT)
    y = generator.next_float(0.0, VIEW_POINT_EXTENT)
    return x, y


def derive_parameters(seed: int) -> tuple[float, float, float, float]:
    """Derive (radius, deformation, deformation_frequency, cave_density).

    The four draws happen in this fixed order; reordering them would change
    the planet every existing seed maps to.
    """
    generator = DeterministicRandom(seed)
    radius = generator.next_float(RADIUS_RANGE.minimum, RADIUS_RANGE.maximum)
    deformation = generator.next_float(
        DEFORMATION_RANGE.minimum, DEFORMATION_RANGE.maximum
    )
    deformation_frequency = generator.next_float(
        DEFORMATION_FREQUENCY_RANGE.minimum, DEFORMATION_FREQUENCY_RANGE.maximum
    )
    cave_density = generator.next_float(
        CAVE_DENSITY_RANGE.minimum, CAVE_DENSITY_RANGE.maximum
    )
    return radius, deformation, deformation_frequency, cave_density
