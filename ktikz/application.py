"""The application: its windows, session saving and restoring."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import PurePath
from typing import Callable, Iterable, Protocol

from .settings import Settings

SESSION_PREFIX = "Session"
WINDOW_LIST = "MainWindowList"


def application_name() -> str:
    """Return the name shown to the user."""
    return "KtikZ"


class SaveChoice(Enum):
    """Answer to the question whether a modified document is saved."""

    SAVE = "save"
    DISCARD = "discard"
    CANCEL = "cancel"


class Window(Protocol):
    """What the application needs from a document window."""

    def show(self) -> None: ...

    def load_url(self, path: str) -> None: ...

    def set_line_number(self, line: int) -> None: ...

    def line_number(self) -> int: ...

    def url(self) -> str: ...

    def is_document_modified(self) -> bool: ...

    def save(self) -> bool: ...

    def close(self) -> None: ...


def modified_message(window: Window) -> str:
    """Return the question asked for a modified document."""
    name = PurePath(window.url()).name if window.url() else ""
    return (
        f'The document "{name}" has been modified.\n'
        "Do you want to save your changes?"
    )


class KtikzApplication:
    """Keeps the open windows and stores them in, and restores them from, a session.

    *window_factory* creates a new window; *session_id* identifies the
    session managed by the session manager, or is None when there is none.
    """

    def __init__(
        self,
        settings: Settings,
        window_factory: Callable[[], Window],
        session_id: str | None = None,
    ) -> None:
        self.settings = settings
        self.window_factory = window_factory
        self.session_id = session_id
        self.windows: list[Window] = []

    @property
    def _session_group(self) -> str:
        if self.session_id is None:
            raise ValueError("there is no session")
        return SESSION_PREFIX + self.session_id

    def _new_window(self) -> Window:
        window = self.window_factory()
        self.windows.append(window)
        window.show()
        return window

    def restore_session(self) -> list[Window]:
        """Open the windows stored in the session, then forget the session."""
        restored = []
        with self.settings.group(self._session_group):
            size = int(self.settings.value(f"{WINDOW_LIST}/size", 0))
            for index in range(1, size + 1):
                entry = f"{WINDOW_LIST}/{index}"
                file_name = self.settings.value(f"{entry}/CurrentFile")
                line = int(self.settings.value(f"{entry}/LineNumber", 1))
                window = self._new_window()
                if file_name:
                    window.load_url(str(file_name))
                    window.set_line_number(line)
                restored.append(window)
            self.settings.remove("")
        return restored

    def open_files(self, paths: Iterable[str | os.PathLike[str]]) -> Window:
        """Open one window and load every path into it, as an absolute path."""
        window = self._new_window()
        for path in paths:
            window.load_url(os.path.abspath(os.fspath(path)))
        return window

    def commit_data(
        self,
        ask: Callable[[Window, str], SaveChoice],
        allows_interaction: bool = True,
    ) -> bool:
        """Ask which modified documents to save and save them.

        Return False when the user cancels or a document cannot be saved.
        """
        if not allows_interaction:
            return True
        accepted = True
        to_save = []
        for window in self.windows:
            if not window.is_document_modified():
                continue
            choice = ask(window, modified_message(window))
            if choice is SaveChoice.SAVE:
                to_save.append(window)
            elif choice is SaveChoice.CANCEL:
                accepted = False
        for window in to_save:
            if not window.save():
                accepted = False
        return accepted

    def save_state(self, executable: str) -> list[str] | None:
        """Store the open windows in the session.

        Return the command that discards the stored session, or None when
        there is no window to store.
        """
        if not self.windows:
            return None
        group = self._session_group
        discard = [executable, "--discard", self.session_id]
        with self.settings.group(group):
            self.settings.remove(WINDOW_LIST)
            for index, window in enumerate(self.windows, start=1):
                entry = f"{WINDOW_LIST}/{index}"
                self.settings.set_value(f"{entry}/CurrentFile", window.url())
                self.settings.set_value(f"{entry}/LineNumber", window.line_number())
            self.settings.set_value(f"{WINDOW_LIST}/size", len(self.windows))
        return discard

    def close(self) -> None:
        """Close every window."""
        while self.windows:
            self.windows.pop(0).close()

    def __enter__(self) -> "KtikzApplication":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()