"""Controller logic for an 8x8x8 RGB LED cube: layout, light shows, state and an in-memory board."""

__version__ = "0.1.0"