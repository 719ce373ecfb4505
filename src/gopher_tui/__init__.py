"""Terminal client for browsing Gopher space."""

__version__ = "0.1.0"
