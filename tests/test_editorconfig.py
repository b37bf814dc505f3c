import pytest

from ktikz.editorconfig import (
    PRESET_ADVANCED,
    PRESET_SYSTEM,
    PRESET_UTF8,
    EditorConfig,
    available_codecs,
    default_setting,
)
from ktikz.settings import Settings


def test_default_setting_known_keys():
    assert default_setting("ShowLineNumberArea") is True
    assert default_setting("ShowWhiteSpaces") is False
    assert default_setting("UseCompletion") is True
    assert default_setting("ColorWhiteSpaces") == default_setting("ColorTabulators")


def test_default_setting_unknown_key():
    assert default_setting("NoSuchKey") is None


def test_read_empty_settings_uses_defaults():
    config = EditorConfig(show_white_spaces=True, use_completion=False)
    config.read_settings(Settings(), "Editor")
    assert config.show_white_spaces is False
    assert config.use_completion is True
    assert config.color_matching_brackets == default_setting("ColorMatchingBrackets")
    assert config.preset == PRESET_SYSTEM
    assert config.bom is True
    assert config.advanced_visible is False


def test_write_uses_group_keys():
    settings = Settings()
    EditorConfig(bom=False).write_settings(settings, "Editor")
    assert settings.value("Editor/encoding/bom") is False
    assert settings.value("Editor/ShowLineNumberArea") is True


def test_apply_utf8_preset():
    config = EditorConfig(decoder="latin_1")
    assert config.apply_preset(PRESET_UTF8) is False
    assert config.default_encoding == "utf-8"
    assert config.encoder == config.default_encoding
    assert config.decoder is None
    assert config.bom is False


def test_apply_system_preset_clears_encodings():
    config = EditorConfig(default_encoding="latin_1", encoder="latin_1", bom=False)
    config.apply_preset(PRESET_SYSTEM)
    assert config.default_encoding is None
    assert config.encoder is None
    assert config.bom is True


def test_apply_advanced_preset_keeps_encodings():
    config = EditorConfig(default_encoding="latin_1", bom=False)
    assert config.apply_preset(PRESET_ADVANCED) is True
    assert config.default_encoding == "latin_1"
    assert config.bom is False


def test_apply_unknown_preset_raises():
    with pytest.raises(ValueError):
        EditorConfig().apply_preset("nonsense")


def test_unknown_stored_codec_keeps_current():
    settings = Settings()
    with settings.group("Editor"):
        settings.set_value("encoding/decoder", "not-a-codec")
        settings.set_value("encoding/preset", PRESET_ADVANCED)
    config = EditorConfig(decoder="latin_1")
    config.read_settings(settings, "Editor")
    assert config.decoder == "latin_1"


def test_stored_preset_overrides_stored_encodings():
    settings = Settings()
    with settings.group("Editor/encoding"):
        settings.set_value("default", "latin_1")
        settings.set_value("preset", PRESET_UTF8)
    config = EditorConfig()
    config.read_settings(settings, "Editor")
    assert config.preset == PRESET_UTF8
    assert config.default_encoding == config.encoder
    assert config.bom is False