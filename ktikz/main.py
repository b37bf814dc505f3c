"""Command-line entry point: translations, session discarding and opening files."""

from __future__ import annotations

import argparse
import locale
import os
import sys
from pathlib import Path

from .application import KtikzApplication, application_name
from .settings import Settings

VERSION = "0.13.2"
APP_NAME = "ktikz"
TRANSLATION_NAME = "qtikz"


def find_translation(name: str, directory: str | os.PathLike[str] | None) -> Path | None:
    """Return the translation file *name*.qm in *directory*, if it exists."""
    base = Path(directory) if directory else Path(".")
    candidate = base / f"{name}.qm"
    return candidate if candidate.is_file() else None


def create_translator(
    name: str,
    directory: str | os.PathLike[str] | None,
    locale: str,
    install_dir: str | os.PathLike[str] | None = None,
) -> Path | None:
    """Find the translation of *name* for *locale*.

    The directories searched are *directory*, *install_dir* and the working
    directory; in each, the full locale is preferred to its language part.
    """
    short = locale[:2].lower()
    directories = [directory]
    if install_dir is not None:
        directories.append(os.path.abspath(os.fspath(install_dir)))
    directories.append("")
    for candidate_dir in directories:
        for suffix in (locale, short):
            found = find_translation(f"{name}_{suffix}", candidate_dir)
            if found is not None:
                return found
    return None


def discard_session(settings: Settings, session_id: str) -> None:
    """Remove a stored session and write the settings."""
    settings.remove(f"Session{session_id}")
    settings.sync()


def _settings_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(base) / APP_NAME / f"{APP_NAME}.json"


def _system_locale() -> str:
    name = locale.getlocale()[0] or os.environ.get("LANG", "C")
    return name.split(".")[0]


class _DocumentWindow:
    """A window without a display that holds one document."""

    def __init__(self) -> None:
        self.path = ""
        self.text = ""
        self.line = 1
        self.modified = False
        self.visible = False

    def show(self) -> None:
        self.visible = True

    def load_url(self, path: str) -> None:
        self.text = Path(path).read_text(encoding="utf-8")
        self.path = path
        self.modified = False

    def set_line_number(self, line: int) -> None:
        self.line = line

    def line_number(self) -> int:
        return self.line

    def url(self) -> str:
        return self.path

    def is_document_modified(self) -> bool:
        return self.modified

    def save(self) -> bool:
        if not self.path:
            return False
        try:
            Path(self.path).write_text(self.text, encoding="utf-8")
        except OSError:
            return False
        self.modified = False
        return True

    def close(self) -> None:
        self.visible = False


def main(argv: list[str] | None = None) -> int:
    """Run the program; return the exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = Settings(_settings_path())

    if len(argv) == 2 and argv[0] == "--discard":
        discard_session(settings, argv[1])
        return 0

    parser = argparse.ArgumentParser(
        prog=APP_NAME, description=f"{application_name()} - A TikZ Editor"
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    parser.add_argument("--session", help="restore the session with this identifier")
    parser.add_argument("urls", nargs="*", metavar="URL", help="TikZ document to open")
    args = parser.parse_args(argv)

    create_translator(
        TRANSLATION_NAME,
        os.environ.get("KTIKZ_TRANSLATIONS_DIR", ""),
        _system_locale(),
    )

    app = KtikzApplication(settings, _DocumentWindow, args.session)
    try:
        if args.session is not None:
            windows = app.restore_session()
            settings.sync()
        else:
            windows = [app.open_files(args.urls)]
    except OSError as error:
        print(f"{application_name()}: {error}", file=sys.stderr)
        return 1
    with app:
        for window in windows:
            if window.url():
                print(window.url())
    return 0


if __name__ == "__main__":
    sys.exit(main())