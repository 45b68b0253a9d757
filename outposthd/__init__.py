"""Game logic for a colony-management simulation: constants, signals, state and UI models."""

__version__ = "0.7.11"