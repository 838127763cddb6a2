"""Scripture reference detection with verse previews."""

__version__ = "0.1.0"
