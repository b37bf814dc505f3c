"""Model of the "go to line" bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class Key(Enum):
    ESCAPE = "Escape"
    RETURN = "Return"
    OTHER = "Other"


@dataclass
class GoToLine:
    """A one-based line selector that reports zero-based line numbers.

    ``on_go_to_line`` receives the zero-based line; ``on_focus_editor`` is
    called when the bar is hidden.
    """

    on_go_to_line: Callable[[int], None] | None = None
    on_focus_editor: Callable[[], None] | None = None
    minimum: int = 1
    maximum: int = 99
    value: int = 1
    visible: bool = field(default=True)

    def _clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))

    def set_maximum(self, maximum: int) -> None:
        """Set the highest selectable line, lowering the minimum if needed."""
        self.maximum = maximum
        self.minimum = min(self.minimum, maximum)
        self.value = self._clamp(self.value)

    def set_value(self, value: int) -> None:
        self.value = self._clamp(value)

    def go_to_line(self) -> int:
        """Report and return the zero-based line that is selected."""
        line = self.value - 1
        if self.on_go_to_line is not None:
            self.on_go_to_line(line)
        return line

    def hide(self) -> None:
        self.visible = False
        if self.on_focus_editor is not None:
            self.on_focus_editor()

    def key_press(self, key) -> None:
        """Escape hides the bar, Return jumps to the selected line."""
        key = Key(key) if not isinstance(key, Key) else key
        if key is Key.ESCAPE:
            self.hide()
        elif key is Key.RETURN:
            self.go_to_line()