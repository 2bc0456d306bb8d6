"""Client for the Twitter v1.1 REST, media upload and streaming APIs."""

__version__ = "0.1.0"