"""Menu-driven command-line front end for the mechanic shop database."""

__version__ = "0.1.0"
