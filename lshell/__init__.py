"""An interactive command shell with text, directory, history and camera utilities."""

__version__ = "0.1.0"