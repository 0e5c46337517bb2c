"""FridgeBud: meal suggestions from what is already in the kitchen."""

__version__ = "0.1.0"
