from ktikz.appearance import CharFormat
from ktikz.configdialog import ConfigDialog
from ktikz.settings import Settings


def test_editor_page_shown_by_default():
    dialog = ConfigDialog(Settings())
    assert dialog.editor is not None
    assert [title for title, _ in dialog.pages] == [
        "&General",
        "&Editor",
        "&Highlighting",
        "&Preview",
    ]


def test_editor_page_hidden_when_requested():
    dialog = ConfigDialog(Settings(), False)
    assert dialog.editor is None
    assert "&Editor" not in [title for title, _ in dialog.pages]


def test_editor_page_hidden_by_editor_widget_setting():
    settings = Settings()
    settings.set_value("EditorWidget", 1)
    dialog = ConfigDialog(settings)
    assert dialog.editor is None
    assert len(dialog.pages) == 3


def test_round_trip_through_settings():
    settings = Settings()
    dialog = ConfigDialog(settings, True)
    dialog.general.latex_command = "lualatex"
    dialog.editor.show_white_spaces = True
    dialog.preview.build_automatically = False
    dialog.preview.coordinates_precision = 3
    dialog.write_settings()

    other = ConfigDialog(settings, True)
    other.read_settings()
    assert other.general.latex_command == "lualatex"
    assert other.editor.show_white_spaces is True
    assert other.preview.build_automatically is False
    assert other.preview.coordinates_precision == 3


def test_groups_used_for_pages():
    settings = Settings()
    dialog = ConfigDialog(settings, True)
    dialog.write_settings()
    keys = settings.keys()
    assert "LatexCommand" in keys
    assert "Editor/Font" in keys
    assert "Highlighting/Customize" in keys
    assert "Preview/BuildAutomatically" in keys


def test_highlight_names_and_formats():
    dialog = ConfigDialog(Settings(), True)
    dialog.set_translated_highlight_type_names(["Commands", "Comments"])
    dialog.set_highlight_type_names(["Commands", "Comments"])
    dialog.set_default_highlight_formats(
        {"Comments": CharFormat("#808080", "Mono,9"), "Commands": CharFormat("#000080", "Mono,10")}
    )
    assert dialog.appearance.titles == ["Commands", "Comments"]
    assert dialog.appearance.colors == ["#000080", "#808080"]
    assert dialog.appearance.fonts == ["Mono,10", "Mono,9"]


def test_accept_writes_and_notifies():
    settings = Settings()
    dialog = ConfigDialog(settings, True)
    calls = []
    dialog.on_settings_changed = lambda: calls.append(True)
    dialog.preview.show_coordinates = False
    dialog.accept()
    assert calls == [True]
    assert dialog.accepted is True
    assert settings.value("Preview/ShowCoordinates") is False