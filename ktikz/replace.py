"""Models of the find/replace bar and the "replace this occurrence?" prompt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Callable

from .gotoline import Key


class FindFlags(Flag):
    """Options of a search."""

    NONE = 0
    CASE_SENSITIVE = auto()
    WHOLE_WORDS = auto()
    BACKWARD = auto()


def _as_key(key) -> Key:
    return key if isinstance(key, Key) else Key(key)


@dataclass
class ReplaceForm:
    """Text to find, its replacement, search options and the history of both.

    ``on_search`` receives the text and the flags; ``on_replace`` receives the
    text, the replacement and the flags; ``on_focus_editor`` is called when
    the form is hidden.
    """

    on_search: Callable[[str, FindFlags], None] | None = None
    on_replace: Callable[[str, str, FindFlags], None] | None = None
    on_focus_editor: Callable[[], None] | None = None
    find_text: str = ""
    replace_text: str = ""
    case_sensitive: bool = False
    whole_words: bool = False
    forward: bool = True
    visible: bool = True
    find_history: list[str] = field(default_factory=list)
    replace_history: list[str] = field(default_factory=list)

    def set_forward(self, forward: bool = True) -> None:
        self.forward = forward

    def set_text(self, text: str) -> None:
        """Put *text* into the find field."""
        self.find_text = text

    @property
    def flags(self) -> FindFlags:
        flags = FindFlags.NONE
        if self.case_sensitive:
            flags |= FindFlags.CASE_SENSITIVE
        if self.whole_words:
            flags |= FindFlags.WHOLE_WORDS
        if not self.forward:
            flags |= FindFlags.BACKWARD
        return flags

    @staticmethod
    def _remember(history: list[str], text: str) -> None:
        if text not in history:
            history.append(text)

    def do_find(self) -> tuple[str, FindFlags] | None:
        """Search for the find text; return what was searched, or None if it is empty."""
        text = self.find_text
        if not text:
            return None
        self._remember(self.find_history, text)
        flags = self.flags
        if self.on_search is not None:
            self.on_search(text, flags)
        return text, flags

    def do_replace(self) -> tuple[str, str, FindFlags] | None:
        """Request a replacement; return what was requested, or None if the find text is empty."""
        text = self.find_text
        if not text:
            return None
        replacement = self.replace_text
        self._remember(self.find_history, text)
        self._remember(self.replace_history, replacement)
        flags = self.flags
        if self.on_replace is not None:
            self.on_replace(text, replacement, flags)
        return text, replacement, flags

    def hide(self) -> None:
        self.visible = False
        if self.on_focus_editor is not None:
            self.on_focus_editor()

    def key_press(self, key) -> None:
        """Escape hides the form, Return searches."""
        key = _as_key(key)
        if key is Key.ESCAPE:
            self.hide()
        elif key is Key.RETURN:
            self.do_find()


@dataclass
class ReplaceCurrentPrompt:
    """Asks whether the current occurrence should be replaced."""

    on_search: Callable[[], None] | None = None
    on_replace: Callable[[], None] | None = None
    on_replace_all: Callable[[], None] | None = None
    on_hidden: Callable[[], None] | None = None
    label: str = ""
    visible: bool = True

    def set_replacement(self, text: str, replacement: str) -> None:
        self.label = f"Replace {text} by {replacement}?"

    def replace(self) -> None:
        if self.on_replace is not None:
            self.on_replace()

    def replace_all(self) -> None:
        if self.on_replace_all is not None:
            self.on_replace_all()

    def dont_replace(self) -> None:
        """Skip this occurrence and search for the next one."""
        if self.on_search is not None:
            self.on_search()

    def hide(self) -> None:
        self.visible = False
        if self.on_hidden is not None:
            self.on_hidden()

    def key_press(self, key) -> None:
        """Escape hides the prompt, Return replaces."""
        key = _as_key(key)
        if key is Key.ESCAPE:
            self.hide()
        elif key is Key.RETURN:
            self.replace()