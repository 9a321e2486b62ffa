"""Component-style UI demos that keep state in Python objects and render to HTML strings."""

__version__ = "0.1.0"