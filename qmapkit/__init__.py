"""Quake map entities, coordinate and rotation helpers, and special-texture rules."""

__version__ = "0.8.1"
__all__ = ["entities", "mathutil", "special_textures"]