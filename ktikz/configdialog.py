"""The configuration dialog that gathers all configuration pages."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

from .appearance import AppearanceConfig, CharFormat
from .editorconfig import EditorConfig
from .generalconfig import GeneralConfig
from .settings import PreviewConfig, Settings

GENERAL_GROUP = ""
EDITOR_GROUP = "Editor"
HIGHLIGHTING_GROUP = "Highlighting"
PREVIEW_GROUP = "Preview"

GENERAL_PAGE = ("&General", "preferences-desktop-theme")
EDITOR_PAGE = ("&Editor", "accessories-text-editor")
HIGHLIGHTING_PAGE = ("&Highlighting", "preferences-desktop-color")
PREVIEW_PAGE = ("&Preview", "preferences-desktop-theme")


class ConfigDialog:
    """Reads and writes the general, editor, highlighting and preview pages.

    When *show_editor_config* is None, the editor page is shown only if the
    ``EditorWidget`` setting selects the built-in editor (value 0).
    ``on_settings_changed`` is called after the dialog is accepted.
    """

    def __init__(self, settings: Settings, show_editor_config: bool | None = None) -> None:
        self.settings = settings
        if show_editor_config is None:
            show_editor_config = int(settings.value("EditorWidget", 0)) == 0
        self.general = GeneralConfig()
        self.editor: EditorConfig | None = EditorConfig() if show_editor_config else None
        self.appearance = AppearanceConfig()
        self.preview = PreviewConfig()
        self.on_settings_changed: Callable[[], None] | None = None
        self.accepted = False

    @property
    def pages(self) -> list[tuple[str, str]]:
        """Return the title and icon name of every page, in display order."""
        pages = [GENERAL_PAGE]
        if self.editor is not None:
            pages.append(EDITOR_PAGE)
        pages.extend([HIGHLIGHTING_PAGE, PREVIEW_PAGE])
        return pages

    def read_settings(self) -> None:
        self.general.read_settings(self.settings, GENERAL_GROUP)
        if self.editor is not None:
            self.editor.read_settings(self.settings, EDITOR_GROUP)
        self.appearance.read_settings(self.settings, HIGHLIGHTING_GROUP)
        self.preview.read_settings(self.settings, PREVIEW_GROUP)

    def write_settings(self) -> None:
        self.general.write_settings(self.settings, GENERAL_GROUP)
        if self.editor is not None:
            self.editor.write_settings(self.settings, EDITOR_GROUP)
        self.appearance.write_settings(self.settings, HIGHLIGHTING_GROUP)
        self.preview.write_settings(self.settings, PREVIEW_GROUP)

    def set_translated_highlight_type_names(self, names: Iterable[str]) -> None:
        """Add a highlighting item for every translated type name."""
        for name in names:
            self.appearance.add_item(name)

    def set_highlight_type_names(self, names: Iterable[str]) -> None:
        self.appearance.set_type_names(names)

    def set_default_highlight_formats(self, formats: Mapping[str, CharFormat]) -> None:
        self.appearance.set_default_formats(formats)

    def accept(self) -> None:
        """Store every page and announce that the settings changed."""
        self.write_settings()
        if self.on_settings_changed is not None:
            self.on_settings_changed()
        self.accepted = True