"""Extract media streams from web pages, with helpers for selection, naming and merging."""

__version__ = "0.1.0"