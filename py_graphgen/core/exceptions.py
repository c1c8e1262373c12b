"""Errors raised by graph generation."""


class GraphGenerationError(Exception):
    """Base class for graph generation failures."""


class CapacityExceededError(GraphGenerationError):
    """The field cannot fit the requested points at the minimum separation."""

    def __init__(self, placed: int, requested: int, attempts: int):
        self.placed = placed
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"Could not place point {placed + 1} of {requested} "
            f"after {attempts} attempts; field is too small for the requested count"
        )


class DegenerateAngleError(GraphGenerationError, ValueError):
    """Angle requested at a vertex that coincides with one of its arms."""


class InvalidParametersError(GraphGenerationError, ValueError):
    """Generation parameters rejected before any work is done."""
