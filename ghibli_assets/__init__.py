"""Download and optimize film artwork for the static Ghibli site."""

__version__ = "0.1.0"
