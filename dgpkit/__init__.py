"""Tokenizer, bounding box, rotation and loader/saver registry utilities for 3D geometry."""

__version__ = "0.1.0"
__all__ = ["tokenizer", "bbox", "rotation", "registry"]