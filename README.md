# ktikz

The core of an editor for TikZ pictures. TikZ is the drawing language of the
LaTeX pgf package. This package has no widgets. It holds the parts of the
editor that work and can be tested without a graphical toolkit. It has no
dependencies outside the standard library.

## Modules

- `ktikz.settings`: `Settings` is a key/value store. Keys are separated by
  slashes, and `group()` is a context manager that makes keys relative to a
  group. `sync()` writes the values as JSON when a path was given.
  `PreviewConfig` holds the preview options: build automatically, show
  coordinates, coordinate precision (negative means best precision) and
  background colour.
- `ktikz.loghighlighter`: `LogHighlighter` marks errors and warnings,
  `[...]` command lines and the memory statistics at the end of a LaTeX log.
  It returns `FormatRange` values that carry a `TextFormat`. `LogView` holds
  the log text and sets a red background after a failed run.
- `ktikz.indent`: `IndentOptions` chooses spaces or tabs and how many of
  them. It builds an `IndentRequest` and saves the choice under the `Editor`
  group.
- `ktikz.appearance`: `AppearanceConfig` keeps a font and a colour for each
  highlighting item. Default formats come as `CharFormat` values.
- `ktikz.gotoline`: `GoToLine` is the "go to line" bar. It takes one-based
  line numbers and reports zero-based ones. `Key` names the keys it responds
  to.
- `ktikz.replace`: `ReplaceForm` is the find/replace form. It keeps a
  history of the texts used and passes `FindFlags` with each search.
  `ReplaceCurrentPrompt` asks whether to replace the current occurrence.
- `ktikz.editorconfig`: `EditorConfig` holds the editor options, their
  defaults (`default_setting`) and the text encoding presets.
  `available_codecs()` lists the text encodings.
- `ktikz.generalconfig`: `GeneralConfig` holds the LaTeX and pdftops
  commands, the template editor and the window options.
  `normalize_location()` turns backslashes into forward slashes.
- `ktikz.configdialog`: `ConfigDialog` reads and writes the general, editor,
  highlighting and preview pages together.
- `ktikz.about`: `about_text()` and `about_title()` give the texts of the
  about dialog.
- `ktikz.assistant`: `AssistantController` starts the documentation browser
  with a `qtikz.qhc` collection file and sends it pages to show. It raises
  `AssistantError` when the file is missing or the program cannot start.
- `ktikz.editorview`: the `TikzEditorView` abstract interface,
  `MainWidget` and `TextCodecProfile`.
- `ktikz.application`: `KtikzApplication` keeps the open windows. It saves
  them to a session and restores them from one. It asks through a callback
  returning a `SaveChoice` whether each modified document should be saved.
  `application_name()` returns `"KtikZ"`.
- `ktikz.main`: the command-line entry point. It also provides
  `find_translation()`, `create_translator()` and `discard_session()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
ktikz [FILE ...]
```

This reads each file as UTF-8 into a document window that has no display.
It prints the path of the loaded document and exits. If a file cannot be
read, it reports the error and exits with status 1.

Other forms:

```
ktikz --session SESSION_ID     # reopen the windows stored in a session, then forget it
ktikz --discard SESSION_ID     # remove the stored state of a session
ktikz --version
```

Settings are kept in `$XDG_CONFIG_HOME/ktikz/ktikz.json`. When
`XDG_CONFIG_HOME` is not set, they are kept in `~/.config/ktikz/ktikz.json`.

## Example

```python
from ktikz.loghighlighter import LogHighlighter

highlighter = LogHighlighter()
ranges, state = highlighter.highlight_block("! LaTeX Error: File not found.")
for fmt_range in ranges:
    print(fmt_range.start, fmt_range.length, fmt_range.format.foreground)
```

## What this package does not do

There is no graphical editor, no TikZ preview, and no running of LaTeX or
rendering of PDF. The `ktikz` command does not show or edit documents. It
only loads the files and manages session state. `create_translator()` finds
a `.qm` translation file but does not load it.