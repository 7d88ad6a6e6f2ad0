"""Map loading and validation for a tile-based collect-and-escape puzzle, with ASCII, byte-buffer, string and number helpers."""

__version__ = "0.1.0"