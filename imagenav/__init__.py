"""imagenav - step through a directory of images from the window or the terminal."""

__version__ = "0.1.0"
