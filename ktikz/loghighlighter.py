"""Highlighting of LaTeX log output and a simple log view model."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextFormat:
    """Character format applied to a stretch of log text."""

    foreground: str
    bold: bool = False


@dataclass(frozen=True)
class FormatRange:
    """A format applied to ``length`` characters starting at ``start``."""

    start: int
    length: int
    format: TextFormat


KEYWORD_FORMAT = TextFormat("#ff0000", bold=True)
COMMAND_FORMAT = TextFormat("#000080", bold=True)
STATISTICS_FORMAT = TextFormat("#808080")

KEYWORD_PATTERNS = (
    r"\S*:\d+:.*$",
    "Undefined control sequence",
    "LaTeX Warning:",
    "LaTeX Error:",
    "Runaway argument?",
    "Missing character: .*!",
    "Error:",
    "Error:",
    "Warning:",
    r"^\[.*\] Line \d+: .*",
    "This program will not work!",
)
COMMAND_PATTERN = r"^\[[^\]\d][^\]]*\]"
STATISTICS_START = "Here is how much of TeX's memory you used:"

IN_STATISTICS = 1
OUTSIDE_STATISTICS = 0


class LogHighlighter:
    """Highlights errors, commands and the memory statistics of a LaTeX log."""

    def __init__(self) -> None:
        self._rules: list[tuple[re.Pattern[str], TextFormat]] = [
            (re.compile(pattern), KEYWORD_FORMAT) for pattern in KEYWORD_PATTERNS
        ]
        self._rules.append((re.compile(COMMAND_PATTERN), COMMAND_FORMAT))

    def highlight_block(
        self, text: str, previous_state: int = OUTSIDE_STATISTICS
    ) -> tuple[list[FormatRange], int]:
        """Return the formats for one line and the state to pass to the next line."""
        ranges: list[FormatRange] = []
        for pattern, fmt in self._rules:
            match = pattern.search(text)
            while match:
                ranges.append(FormatRange(match.start(), match.end() - match.start(), fmt))
                position = match.end() if match.end() > match.start() else match.end() + 1
                if position > len(text):
                    break
                match = pattern.search(text, position)

        state = OUTSIDE_STATISTICS
        start = text.find(STATISTICS_START)
        if previous_state == IN_STATISTICS:
            start = 0
        if start >= 0:
            ranges.append(FormatRange(start, len(text) - start, STATISTICS_FORMAT))
            state = IN_STATISTICS
        return ranges, state

    def highlight(self, text: str) -> list[list[FormatRange]]:
        """Highlight every line of *text*, carrying state from line to line."""
        result = []
        state = OUTSIDE_STATISTICS
        for line in text.split("\n"):
            ranges, state = self.highlight_block(line, state)
            result.append(ranges)
        return result


FAILED_BACKGROUND = "#ff6666"
SIZE_HINT = (300, 90)


@dataclass
class LogView:
    """Read-only log text with a background that signals a failed run."""

    text: str = ""
    background: str | None = None
    highlighter: LogHighlighter = field(default_factory=LogHighlighter, repr=False)

    def update_log(self, text: str, run_failed: bool | None = None) -> None:
        """Replace the log; when *run_failed* is given, update the background."""
        self.text = text
        if run_failed is not None:
            self._set_failed(run_failed)

    def append_log(self, text: str, run_failed: bool | None = None) -> None:
        """Append to the log; when *run_failed* is given, update the background."""
        self.text += text
        if run_failed is not None:
            self._set_failed(run_failed)

    def _set_failed(self, run_failed: bool) -> None:
        self.background = FAILED_BACKGROUND if run_failed else None

    def highlighted(self) -> list[list[FormatRange]]:
        """Return the formats of every line of the current log."""
        return self.highlighter.highlight(self.text)