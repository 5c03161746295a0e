"""tuneview: presentation-state core for a terminal music player client."""

__version__ = "0.1.0"
