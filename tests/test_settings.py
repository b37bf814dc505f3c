import pytest

from ktikz.settings import PreviewConfig, Settings


def test_value_returns_default_when_missing():
    settings = Settings()
    assert settings.value("Missing", 42) == 42
    assert settings.value("Missing") is None


def test_set_and_get_value():
    settings = Settings()
    settings.set_value("LatexCommand", "pdflatex")
    assert settings.value("LatexCommand") == "pdflatex"


def test_group_prefixes_keys():
    settings = Settings()
    with settings.group("Editor"):
        settings.set_value("Font", "Mono")
        assert settings.value("Font") == "Mono"
    assert settings.value("Editor/Font") == "Mono"
    assert settings.value("Font") is None


def test_nested_groups_and_empty_group():
    settings = Settings()
    with settings.group("Editor"):
        with settings.group("encoding"):
            settings.set_value("bom", True)
        with settings.group(""):
            settings.set_value("Font", "Mono")
    assert settings.value("Editor/encoding/bom") is True
    assert settings.value("Editor/Font") == "Mono"


def test_keys_relative_to_group():
    settings = Settings()
    settings.set_value("Top", 1)
    settings.set_value("Editor/B", 2)
    settings.set_value("Editor/A", 3)
    with settings.group("Editor"):
        assert settings.keys() == ["A", "B"]
    assert settings.keys() == ["Editor/A", "Editor/B", "Top"]


def test_remove_prefix_and_children():
    settings = Settings()
    settings.set_value("Session1/MainWindowList/1/CurrentFile", "a.pgf")
    settings.set_value("Session1", "x")
    settings.set_value("Session10/Other", "kept")
    settings.remove("Session1")
    assert settings.keys() == ["Session10/Other"]


def test_remove_empty_inside_group_clears_group_only():
    settings = Settings()
    settings.set_value("Keep", 1)
    settings.set_value("Session/A", 2)
    with settings.group("Session"):
        settings.remove("")
        assert settings.keys() == []
    assert settings.value("Keep") == 1


def test_empty_key_cannot_be_set():
    with pytest.raises(KeyError):
        Settings().set_value("", 1)


def test_sync_round_trip(tmp_path):
    path = tmp_path / "conf" / "ktikz.json"
    settings = Settings(path)
    settings.set_value("Preview/ShowCoordinatesPrecision", 3)
    settings.set_value("Editor/Indent/InsertChar", "\t")
    settings.sync()
    reloaded = Settings(path)
    assert reloaded.value("Preview/ShowCoordinatesPrecision") == 3
    assert reloaded.value("Editor/Indent/InsertChar") == "\t"


def test_invalid_file_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        Settings(path)


def test_preview_defaults_from_empty_settings():
    config = PreviewConfig(build_automatically=False, show_coordinates=False)
    config.read_settings(Settings(), "Preview")
    assert config.build_automatically is True
    assert config.show_coordinates is True
    assert config.best_precision is True
    assert config.background_color is None


def test_preview_round_trip():
    settings = Settings()
    written = PreviewConfig(False, True, 4, "#ffffff")
    written.write_settings(settings, "Preview")
    read = PreviewConfig()
    read.read_settings(settings, "Preview")
    assert read == written


def test_preview_best_precision_written_as_negative():
    settings = Settings()
    PreviewConfig(coordinates_precision=-7).write_settings(settings, "Preview")
    assert settings.value("Preview/ShowCoordinatesPrecision") == -1