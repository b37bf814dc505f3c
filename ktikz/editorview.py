"""Interfaces of the editor view and of the main widget."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, TypeVar

_Stream = TypeVar("_Stream")


class TextCodecProfile:
    """Configures text streams used to read and write TeX files."""

    def configure_stream_encoding(self, stream: _Stream) -> _Stream:
        """Prepare *stream* for writing a TeX file and return it."""
        return stream

    def configure_stream_decoding(self, stream: _Stream) -> _Stream:
        """Prepare *stream* for reading a TeX file and return it."""
        return stream


class MainWidget(TextCodecProfile):
    """The part of the main window that holds a TikZ document."""

    def tikz_code(self) -> str:
        """Return the TikZ code of the document."""
        return ""

    def url(self) -> str:
        """Return the location of the document, empty when it has none."""
        return ""


class TikzEditorView(ABC):
    """The text editor in which TikZ code is written."""

    @abstractmethod
    def text(self) -> str:
        """Return the whole text."""

    @abstractmethod
    def update_completer(self, use_completion: bool, words: Iterable[str]) -> None:
        """Enable or disable completion over *words*."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all text."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return whether there is no text."""

    @abstractmethod
    def is_modified(self) -> bool:
        """Return whether the text changed since it was last saved."""

    @abstractmethod
    def set_modified(self, value: bool) -> None:
        """Mark the text as modified or unmodified."""