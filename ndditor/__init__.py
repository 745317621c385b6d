"""A small modal terminal text editor with tabs and a box layout system."""

__version__ = "0.1.0"