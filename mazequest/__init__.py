"""Game logic for a first-person maze with a wandering tiger, notices and an exit."""

__version__ = "0.1.0"