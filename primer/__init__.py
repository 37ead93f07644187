"""Small command-line tools and supporting library modules."""

__version__ = "0.1.0"