"""Configuration of the general page: commands, templates and the window."""

from __future__ import annotations

from dataclasses import dataclass

from .settings import Settings

MAIN_WINDOW_GROUP = "MainWindow"


def normalize_location(path: str) -> str:
    """Return *path* with backslashes turned into forward slashes."""
    return path.replace("\\", "/")


@dataclass
class GeneralConfig:
    """Options of the general page."""

    recent_files_number: int = 10
    editor_widget: int = 0
    commands_in_dock: bool = False
    latex_command: str = "pdflatex"
    pdftops_command: str = "pdftops"
    template_editor: str = ""
    template_replace_text: str = "<>"
    toolbar_style: int = 0

    def read_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            self.recent_files_number = int(settings.value("RecentFilesNumber", 10))
            self.editor_widget = int(settings.value("EditorWidget", 0))
            self.commands_in_dock = bool(settings.value("CommandsInDock", False))
            self.latex_command = str(settings.value("LatexCommand", "pdflatex"))
            self.pdftops_command = str(settings.value("PdftopsCommand", "pdftops"))
            self.template_editor = str(settings.value("TemplateEditor", ""))
            self.template_replace_text = str(settings.value("TemplateReplaceText", "<>"))
        with settings.group(MAIN_WINDOW_GROUP):
            self.toolbar_style = int(settings.value("ToolBarStyle", 0))

    def write_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            settings.set_value("RecentFilesNumber", self.recent_files_number)
            settings.set_value("EditorWidget", self.editor_widget)
            settings.set_value("CommandsInDock", self.commands_in_dock)
            settings.set_value("LatexCommand", self.latex_command)
            settings.set_value("PdftopsCommand", self.pdftops_command)
            settings.set_value("TemplateEditor", self.template_editor)
            settings.set_value("TemplateReplaceText", self.template_replace_text)
        with settings.group(MAIN_WINDOW_GROUP):
            settings.set_value("ToolBarStyle", self.toolbar_style)