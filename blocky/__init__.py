"""Headless core of a small 2D game engine: logging, frame timing, camera, modules, input dispatch, scenes, audio and layered rendering."""

__version__ = "0.1.0"