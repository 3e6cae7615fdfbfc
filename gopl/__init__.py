"""Small teaching programs and libraries: text tools, formatting, images, display, equality and compression."""

__version__ = "0.1.0"