"""Launching and remote-controlling the documentation browser."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Sequence

COLLECTION_FILE = "qtikz.qhc"
SOURCE_PREFIX = b"setSource qthelp://hackenberger.qtikz/doc/"
TERMINATE_TIMEOUT = 3.0


class AssistantError(RuntimeError):
    """The documentation browser could not be used."""


def _default_program() -> list[str]:
    return [shutil.which("assistant") or "assistant"]


class AssistantController:
    """Starts the documentation browser on demand and shows pages in it.

    *program* is the command that starts the browser; the collection file
    and remote-control options are appended to it. *popen* creates the
    process and defaults to :class:`subprocess.Popen`.
    """

    def __init__(
        self,
        documentation_dir: str | os.PathLike[str],
        program: Sequence[str] | None = None,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
    ) -> None:
        self.documentation_dir = Path(documentation_dir)
        self.program = list(program) if program is not None else _default_program()
        self._popen = popen
        self._process: subprocess.Popen | None = None

    @property
    def collection_file(self) -> Path:
        return self.documentation_dir / COLLECTION_FILE

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def _start(self) -> None:
        if self.running:
            return
        doc_file = self.collection_file
        if not (doc_file.is_file() and os.access(doc_file, os.R_OK)):
            raise AssistantError(f"Unable to open the help file ({doc_file})")
        args = [*self.program, "-collectionFile", str(doc_file), "-enableRemoteControl"]
        try:
            self._process = self._popen(args, stdin=subprocess.PIPE)
        except OSError as error:
            self._process = None
            raise AssistantError(
                f"Unable to launch Qt Assistant ({self.program[0]})"
            ) from error

    def show_documentation(self, page: str = "") -> None:
        """Start the browser if needed and, when *page* is given, show it."""
        self._start()
        if page and self._process is not None and self._process.stdin is not None:
            self._process.stdin.write(SOURCE_PREFIX + os.fsencode(page) + b"\0")
            self._process.stdin.flush()

    def close(self) -> None:
        """Terminate the browser if it is running."""
        process, self._process = self._process, None
        if process is None:
            return
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=TERMINATE_TIMEOUT)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()

    def __enter__(self) -> "AssistantController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()