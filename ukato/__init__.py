"""Create and manage markdown notes with your favorite text editor."""

__version__ = "0.1.0"
