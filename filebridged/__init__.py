"""filebridged - HTTP daemon exposing a path-confined filesystem."""

__version__ = "0.1.0"
