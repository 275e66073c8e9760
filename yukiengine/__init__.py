"""Core pieces of a small 3D engine: errors, logging, clock, camera, images, input, meshes, models, entities and the application loop."""

__version__ = "0.1.0"