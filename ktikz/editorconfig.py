"""Configuration of the editor page: display options, colours and text encodings."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from encodings.aliases import aliases
from typing import Any

from .settings import Settings

DEFAULT_FONT = "Monospace,10"

PRESET_SYSTEM = "System"
PRESET_UTF8_BOM = "UTF-8 BOM"
PRESET_UTF8 = "UTF-8"
PRESET_ADVANCED = ""
PRESETS = (PRESET_SYSTEM, PRESET_UTF8_BOM, PRESET_UTF8, PRESET_ADVANCED)

_DEFAULTS: dict[str, Any] = {
    "ShowLineNumberArea": True,
    "Font": DEFAULT_FONT,
    "ShowWhiteSpaces": False,
    "ShowTabulators": False,
    "ShowMatchingBrackets": True,
    "ColorWhiteSpaces": "#a0a0a4",
    "ColorTabulators": "#a0a0a4",
    "ColorMatchingBrackets": "#008000",
    "ShowHighlightCurrentLine": True,
    "ColorHighlightCurrentLine": "#f2f2f2",
    "UseCompletion": True,
}

# (attribute, settings key, conversion)
_FIELDS = (
    ("show_line_number_area", "ShowLineNumberArea", bool),
    ("font", "Font", str),
    ("show_white_spaces", "ShowWhiteSpaces", bool),
    ("show_tabulators", "ShowTabulators", bool),
    ("show_matching_brackets", "ShowMatchingBrackets", bool),
    ("color_white_spaces", "ColorWhiteSpaces", str),
    ("color_tabulators", "ColorTabulators", str),
    ("color_matching_brackets", "ColorMatchingBrackets", str),
    ("show_highlight_current_line", "ShowHighlightCurrentLine", bool),
    ("color_highlight_current_line", "ColorHighlightCurrentLine", str),
    ("use_completion", "UseCompletion", bool),
)


def default_setting(key: str) -> Any:
    """Return the default value of an editor setting, or None for an unknown key."""
    return _DEFAULTS.get(key)


def _text_codec_name(name: str) -> str | None:
    """Return the canonical name of a text encoding, or None if there is none."""
    try:
        info = codecs.lookup(name)
        "".encode(info.name)
    except (LookupError, TypeError, ValueError):
        return None
    return info.name


def available_codecs() -> list[str]:
    """Return the names of the available text encodings, sorted case-insensitively."""
    names = {_text_codec_name(name) for name in set(aliases.values())}
    names.discard(None)
    return sorted(names, key=str.casefold)


@dataclass
class EditorConfig:
    """Options of the editor page.

    ``default_encoding``, ``decoder`` and ``encoder`` hold a codec name or None,
    where None means the locale codec, "locale or unicode" and "same as
    reading" respectively.
    """

    show_line_number_area: bool = True
    font: str = DEFAULT_FONT
    show_white_spaces: bool = False
    show_tabulators: bool = False
    show_matching_brackets: bool = True
    color_white_spaces: str = "#a0a0a4"
    color_tabulators: str = "#a0a0a4"
    color_matching_brackets: str = "#008000"
    show_highlight_current_line: bool = True
    color_highlight_current_line: str = "#f2f2f2"
    use_completion: bool = True
    default_encoding: str | None = None
    decoder: str | None = None
    encoder: str | None = None
    bom: bool = True
    preset: str = PRESET_ADVANCED
    advanced_visible: bool = True

    @staticmethod
    def _codec_or(value: Any, current: str | None) -> str | None:
        if value is None:
            return None
        name = _text_codec_name(str(value))
        return current if name is None else name

    def apply_preset(self, preset: str) -> bool:
        """Select an encoding preset and return whether the advanced options show."""
        if preset not in PRESETS:
            raise ValueError(f"unknown encoding preset {preset!r}")
        self.preset = preset
        if preset == PRESET_ADVANCED:
            self.advanced_visible = True
            return True
        if preset == "UTF-8+BOM":
            encoding, bom = "UTF-8", True
        elif preset == PRESET_UTF8:
            encoding, bom = "UTF-8", False
        else:
            encoding, bom = None, True
        self.default_encoding = self._codec_or(encoding, self.default_encoding)
        self.decoder = None
        self.encoder = self._codec_or(encoding, self.encoder)
        self.bom = bom
        self.advanced_visible = False
        return False

    def _select_preset(self, value: Any) -> None:
        preset = "" if value is None else str(value)
        if preset in PRESETS and preset != self.preset:
            self.apply_preset(preset)

    def read_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            for attribute, key, convert in _FIELDS:
                setattr(self, attribute, convert(settings.value(key, default_setting(key))))
            with settings.group("encoding"):
                self.default_encoding = self._codec_or(
                    settings.value("default"), self.default_encoding
                )
                self.decoder = self._codec_or(settings.value("decoder"), self.decoder)
                self.encoder = self._codec_or(settings.value("encoder"), self.encoder)
                self.bom = bool(settings.value("bom", True))
                self._select_preset(settings.value("preset", PRESET_SYSTEM))

    def write_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            for attribute, key, _ in _FIELDS:
                settings.set_value(key, getattr(self, attribute))
            with settings.group("encoding"):
                settings.set_value("default", self.default_encoding)
                settings.set_value("encoder", self.encoder)
                settings.set_value("decoder", self.decoder)
                settings.set_value("bom", self.bom)
                settings.set_value("preset", self.preset)