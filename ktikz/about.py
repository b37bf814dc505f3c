"""Texts of the about dialog."""

from __future__ import annotations

DESCRIPTION = "This is a program for creating TikZ (from the LaTeX pgf package) diagrams."


def about_text(application_name: str, version: str) -> str:
    """Return the HTML heading and description shown in the about dialog."""
    return f"<h1>{application_name} {version}</h1><p>{DESCRIPTION}</p>"


def about_title(application_name: str) -> str:
    """Return the window title of the about dialog."""
    return f"About {application_name}"