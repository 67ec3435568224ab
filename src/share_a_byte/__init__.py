"""Share-a-Byte: food sharing marketplace API."""

__version__ = "0.1.0"
