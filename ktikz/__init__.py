"""Core logic of a TikZ picture editor: settings, log highlighting, editing helpers and sessions."""

__version__ = "0.13.2"