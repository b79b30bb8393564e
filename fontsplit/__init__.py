"""Web font subsetting and CSS generation."""

__version__ = "0.1.0"
