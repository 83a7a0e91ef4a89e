"""Custom exceptions for planet generation."""


class PlanetError(Exception):
    """Base exception for planet generation errors."""

    pass


class InvalidConfigError(PlanetError):
    """Raised when a generation configuration cannot be used."""

    pass


class NoCandidatesError(PlanetError):
    """Raised when classification is asked to choose from zero descriptors."""

    pass


class DegenerateGeometryError(PlanetError):
    """Raised when a surface radius is zero or not finite."""

    pass


class GenerationCancelledError(PlanetError):
    """Raised when a generation is cancelled between passes."""

    pass
