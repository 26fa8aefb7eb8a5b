"""A small scene-graph game engine with cameras, controllers and polygons, and a demo game."""

__version__ = "0.1.0"