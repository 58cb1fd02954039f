"""Game list, metadata and DAT container tools for a disc-image game menu."""

__version__ = "0.1.0"