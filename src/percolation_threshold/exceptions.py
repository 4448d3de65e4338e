"""Exceptions raised by percolation_threshold."""


class InvalidArgumentError(ValueError):
    """Argument outside the valid domain (grid size, trial count or site coordinate)."""
    def __init__(self, message="Invalid argument."):
        super().__init__(message)
