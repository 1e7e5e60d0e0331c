"""Quake map entities, coordinate and rotation helpers, and special texture helpers."""

__version__ = "0.8.1"
__all__ = ["util", "qmap", "special_textures"]