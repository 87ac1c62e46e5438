"""TubeTrends backend: YouTube title scoring, rewriting and trend research API."""

__version__ = "1.0.0"
