"""Cycle-Autocomplete: inline word completion from words in the current document."""

__version__ = "1.0.0"
