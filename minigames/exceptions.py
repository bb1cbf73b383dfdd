"""Errors raised by the puzzle engine."""


class PuzzleInputError(ValueError):
    """The caller passed a grid, size, difficulty or selection the engine cannot accept."""


class PuzzleGenerationError(RuntimeError):
    """Generation could not complete a grid. Indicates a broken board geometry."""
