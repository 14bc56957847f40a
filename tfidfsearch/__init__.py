"""TF-IDF document indexing and keyword search with tolerant term counting."""

__version__ = "0.1.0"