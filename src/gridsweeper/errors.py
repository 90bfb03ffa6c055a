"""
Exceptions raised by the gridsweeper engine.
"""


class InvalidConfiguration(ValueError):
    """Board dimensions, hazard count or hazard layout are not playable."""
