"""Project files: the dictionary, wave directories, pitch and flags."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any

from .symbols import DEFAULT_PITCH, CVVCSymbol

EDITOR = "DVMT"

_KNOWN_KEYS = ("symbols", "paths", "pitch", "editor", "flags")


class ProjectError(Exception):
    """Raised when a project file cannot be read or written."""


def _as_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


class Project:
    """A marking project.

    ``symbols`` holds the dictionary lines, ``paths`` the wave directories,
    ``pitch`` the pitch being marked and ``flags`` the expanded symbols.
    Keys of a loaded file that the project does not use are kept and
    written back on save.
    """

    def __init__(self) -> None:
        self.editor: str = EDITOR
        self._extra: dict[str, Any] = {}
        self.clear()

    def clear(self) -> None:
        """Reset the dictionary, paths, pitch and flags to their defaults."""
        self.symbols: list[str] = []
        self.paths: list[str] = []
        self.pitch: str = DEFAULT_PITCH
        self.flags: list[CVVCSymbol] = []

    def _to_document(self) -> dict[str, Any]:
        document = dict(self._extra)
        document.update(
            symbols=list(self.symbols),
            paths=list(self.paths),
            pitch=self.pitch,
            editor=self.editor,
            flags=[{"name": flag.name, "isCV": flag.is_cv} for flag in self.flags],
        )
        return document

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the project as indented JSON, replacing any existing file."""
        text = json.dumps(self._to_document(), indent=4, sort_keys=True, ensure_ascii=False)
        try:
            if os.path.exists(path):
                os.remove(path)
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(text + "\n")
        except OSError as exc:
            raise ProjectError(f"cannot write project file {os.fspath(path)}: {exc}") from exc

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Project:
        """Read a project file written by this editor."""
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise ProjectError(f"cannot read project file {os.fspath(path)}: {exc}") from exc
        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ProjectError(f"project file {os.fspath(path)} is not valid JSON") from exc
        if not isinstance(document, dict):
            raise ProjectError(f"project file {os.fspath(path)} does not hold an object")
        if _as_string(document.get("editor")) != EDITOR:
            raise ProjectError(f"project file {os.fspath(path)} was not written by {EDITOR}")

        project = cls()
        project._extra = {k: v for k, v in document.items() if k not in _KNOWN_KEYS}
        project.editor = EDITOR
        project.symbols = [_as_string(item) for item in _as_list(document.get("symbols"))]
        project.paths = [_as_string(item) for item in _as_list(document.get("paths"))]
        project.pitch = _as_string(document.get("pitch"))
        project.flags = []
        for item in _as_list(document.get("flags")):
            entry = item if isinstance(item, dict) else {}
            project.flags.append(
                CVVCSymbol(name=_as_string(entry.get("name")), is_cv=_as_int(entry.get("isCV")))
            )
        return project

    def __eq__(self, other: object) -> bool:
        """Compare symbols, paths and pitch; flags are compared by count only."""
        if not isinstance(other, Project):
            return NotImplemented
        return (
            self.symbols == other.symbols
            and self.paths == other.paths
            and self.pitch == other.pitch
            and len(self.flags) == len(other.flags)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Project(symbols={self.symbols!r}, paths={self.paths!r}, "
            f"pitch={self.pitch!r}, flags={len(self.flags)})"
        )


def split_pitch(pitch: str) -> tuple[str, str]:
    """Split a pitch such as ``C#4`` into note and octave.

    Pitches of any length other than two or three give ``("C", "5")``.
    """
    if len(pitch) == 2:
        return pitch[0], pitch[1]
    if len(pitch) == 3:
        return pitch[:2], pitch[2]
    return "C", "5"


def dictionary_text(symbols: Iterable[str]) -> str:
    """Join dictionary lines into the text shown for editing."""
    return "\n".join(symbols)