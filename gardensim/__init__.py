"""A turn-based garden simulator: soil, plants, a gardener and a text prompt."""

__version__ = "0.1.0"