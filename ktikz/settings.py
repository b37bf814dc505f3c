"""Hierarchical key/value settings store and the preview configuration page."""

from __future__ import annotations

import json
import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator


class Settings:
    """A persistent store of values under slash-separated keys.

    Keys are read and written relative to the groups entered with
    :meth:`group`. When *path* is given, existing values are loaded from it
    and :meth:`sync` writes them back as JSON.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._groups: list[str] = []
        self._values: dict[str, Any] = {}
        if self._path is not None and self._path.exists():
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"settings file {self._path} does not hold a mapping")
            self._values = dict(data)

    @staticmethod
    def _split(key: str) -> list[str]:
        return [part for part in key.split("/") if part]

    def _full_key(self, key: str) -> str:
        return "/".join([*self._groups, *self._split(key)])

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if there is none."""
        return self._values.get(self._full_key(key), default)

    def set_value(self, key: str, value: Any) -> None:
        """Store *value* under *key*."""
        full = self._full_key(key)
        if not full:
            raise KeyError("an empty key cannot hold a value")
        self._values[full] = value

    def remove(self, prefix: str = "") -> None:
        """Remove *prefix* and every key below it; an empty prefix clears the current group."""
        full = self._full_key(prefix)
        if not full:
            self._values.clear()
            return
        below = full + "/"
        self._values = {
            key: value
            for key, value in self._values.items()
            if key != full and not key.startswith(below)
        }

    @contextmanager
    def group(self, name: str) -> Iterator["Settings"]:
        """Make keys relative to *name* for the duration of the block."""
        parts = self._split(name) if name else []
        self._groups.extend(parts)
        try:
            yield self
        finally:
            del self._groups[len(self._groups) - len(parts):]

    def keys(self) -> list[str]:
        """Return the keys below the current group, relative to it, sorted."""
        if not self._groups:
            return sorted(self._values)
        prefix = "/".join(self._groups) + "/"
        return sorted(key[len(prefix):] for key in self._values if key.startswith(prefix))

    def sync(self) -> None:
        """Write all values to the backing file, if there is one."""
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8"
        )


@dataclass
class PreviewConfig:
    """Options of the preview page.

    A negative ``coordinates_precision`` means "best precision".
    """

    build_automatically: bool = True
    show_coordinates: bool = True
    coordinates_precision: int = -1
    background_color: str | None = None

    @property
    def best_precision(self) -> bool:
        return self.coordinates_precision < 0

    def read_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            self.build_automatically = bool(settings.value("BuildAutomatically", True))
            self.show_coordinates = bool(settings.value("ShowCoordinates", True))
            precision = int(settings.value("ShowCoordinatesPrecision", -1))
            self.coordinates_precision = -1 if precision < 0 else precision
            self.background_color = settings.value("PreviewBackgroundColor")

    def write_settings(self, settings: Settings, group: str) -> None:
        with settings.group(group):
            settings.set_value("BuildAutomatically", self.build_automatically)
            settings.set_value("ShowCoordinates", self.show_coordinates)
            settings.set_value(
                "ShowCoordinatesPrecision",
                -1 if self.best_precision else self.coordinates_precision,
            )
            settings.set_value("PreviewBackgroundColor", self.background_color)