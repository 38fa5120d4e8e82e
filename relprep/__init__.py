"""relprep: changelog preparation before a release."""

__version__ = "0.1.0"
