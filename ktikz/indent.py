"""Options for indenting and unindenting a selection of text."""

from __future__ import annotations

from dataclasses import dataclass

from .settings import Settings

SETTINGS_GROUP = "Editor"


@dataclass(frozen=True)
class IndentRequest:
    """An indent or unindent by ``count`` copies of ``insert_char``."""

    insert_char: str
    count: int
    unindenting: bool


@dataclass
class IndentOptions:
    """Whether to indent with spaces or tabs, and how many of them."""

    use_spaces: bool = False
    spaces: int = 2
    tabs: int = 1
    unindenting: bool = False

    def read_settings(self, settings: Settings) -> None:
        with settings.group(SETTINGS_GROUP):
            self.use_spaces = str(settings.value("Indent/InsertChar", "\t")) == " "
            self.spaces = int(settings.value("Indent/NumberOfSpaces", 2))
            self.tabs = int(settings.value("Indent/NumberOfTabs", 1))

    def write_settings(self, settings: Settings) -> None:
        with settings.group(SETTINGS_GROUP):
            settings.set_value("Indent/InsertChar", self.insert_char())
            settings.set_value("Indent/NumberOfSpaces", self.spaces)
            settings.set_value("Indent/NumberOfTabs", self.tabs)

    def set_unindenting(self, unindenting: bool = True) -> None:
        self.unindenting = unindenting

    @property
    def title(self) -> str:
        return "Unindent" if self.unindenting else "Indent"

    @property
    def button_text(self) -> str:
        return "Unin&dent" if self.unindenting else "In&dent"

    def insert_char(self) -> str:
        return " " if self.use_spaces else "\t"

    def num_of_inserts(self) -> int:
        return self.spaces if self.use_spaces else self.tabs

    def request(self, settings: Settings) -> IndentRequest:
        """Build the request for the current options and remember them in *settings*."""
        result = IndentRequest(self.insert_char(), self.num_of_inserts(), self.unindenting)
        self.write_settings(settings)
        return result