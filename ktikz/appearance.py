"""Configuration of the highlighting appearance: a font and a colour per item."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .settings import Settings


@dataclass(frozen=True)
class CharFormat:
    """Default character format of a highlighting type."""

    foreground: str
    font: str


@dataclass
class AppearanceConfig:
    """Per-item fonts and colours of the highlighting page.

    ``titles`` are the translated names shown to the user; ``type_names`` are
    the untranslated names under which items are stored in the settings. Both
    lists, as well as ``fonts`` and ``colors``, are indexed by item row.
    """

    titles: list[str] = field(default_factory=list)
    fonts: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    type_names: list[str] = field(default_factory=list)
    custom: bool = True

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self.titles):
            raise IndexError(f"no item in row {row}")

    def add_item(self, title: str) -> None:
        """Add an item row with the given title."""
        self.titles.append(title)

    def add_items(self, titles) -> None:
        """Add an item row for every title."""
        for title in titles:
            self.add_item(title)

    def add_item_font(self, font: str) -> None:
        """Set the font of the next item that has no font yet."""
        self._check_row(len(self.fonts))
        self.fonts.append(font)

    def add_item_color(self, color: str) -> None:
        """Set the colour of the next item that has no colour yet."""
        self._check_row(len(self.colors))
        self.colors.append(color)

    def set_type_names(self, names) -> None:
        self.type_names = list(names)

    def set_default_formats(self, formats: Mapping[str, CharFormat]) -> None:
        """Extend the fonts and colours with the defaults of the known type names."""
        self.colors.extend("" for _ in formats)
        self.fonts.extend("" for _ in formats)
        for name, fmt in formats.items():
            if name in self.type_names:
                row = self.type_names.index(name)
                self.colors[row] = fmt.foreground
                self.fonts[row] = fmt.font

    def set_font(self, index: int, font: str) -> None:
        """Replace the font of the item at *index*."""
        if not 0 <= index < len(self.fonts):
            raise IndexError(f"no font for item {index}")
        self.fonts[index] = font

    def set_color(self, index: int, color: str) -> None:
        """Replace the colour of the item at *index*."""
        if not 0 <= index < len(self.colors):
            raise IndexError(f"no colour for item {index}")
        self.colors[index] = color

    def read_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            self.custom = bool(settings.value("Customize", True))
            count = int(settings.value("Number", 0))
            for i in range(count):
                name = settings.value(f"Item{i}/Name")
                name = "" if name is None else str(name)
                if name not in self.type_names:
                    continue
                row = self.type_names.index(name)
                color = settings.value(f"Item{i}/Color")
                font = settings.value(f"Item{i}/Font")
                self.colors[row] = "" if color is None else str(color)
                self.fonts[row] = "" if font is None else str(font)

    def write_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            settings.set_value("Customize", self.custom)
            if not self.custom:
                return
            for i, name in enumerate(self.type_names):
                settings.set_value(f"Item{i}/Name", name)
                settings.set_value(f"Item{i}/Color", self.colors[i])
                settings.set_value(f"Item{i}/Font", self.fonts[i])
            settings.set_value("Number", len(self.type_names))