"""Reading and writing the ``voice.dvcfg`` mark files of wave directories.

Each wave directory holds one JSON object whose keys have the form
``pitch->symbol`` and whose values describe one mark each.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any, Union

from .symbols import (
    DEFAULT_PITCH,
    SRC_CV,
    SRC_INDIE,
    SRC_VX,
    TIME_FORMAT,
    CVVCSymbol,
    DVSym,
)

CONFIG_NAME = "voice.dvcfg"

Mark = Union[DVSym, CVVCSymbol]


class VoiceConfigError(Exception):
    """Raised when a voice configuration file cannot be read or written."""


def mark_key(pitch: str, symbol: str) -> str:
    """The key a mark is stored under: ``pitch->symbol``."""
    return f"{pitch}->{symbol}"


def config_path(directory: str | os.PathLike[str]) -> str:
    """Path of the configuration file inside a wave directory."""
    return os.path.join(os.fspath(directory), CONFIG_NAME)


def load_config(directory: str | os.PathLike[str]) -> dict[str, Any]:
    """Read the configuration object of a directory.

    A directory without a configuration file gives an empty object.
    """
    path = config_path(directory)
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise VoiceConfigError(f"cannot read {path}: {exc}") from exc
    try:
        document = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise VoiceConfigError(f"{path} is not valid JSON") from exc
    if not isinstance(document, dict):
        raise VoiceConfigError(f"{path} does not hold a JSON object")
    return document


def _write_config(directory: str | os.PathLike[str], document: dict[str, Any]) -> None:
    path = config_path(directory)
    text = json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False)
    try:
        if os.path.exists(path):
            os.remove(path)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text + "\n")
    except OSError as exc:
        raise VoiceConfigError(f"cannot write {path}: {exc}") from exc


def _now_text() -> str:
    return datetime.now().strftime(TIME_FORMAT)


def _entry_for(mark: DVSym) -> dict[str, Any]:
    if mark.src_type == SRC_CV:
        return {
            "connectPoint": mark.connect_point,
            "endTime": mark.end_time,
            "pitch": mark.pitch,
            "preutterance": mark.preutterance,
            "srcType": SRC_CV,
            "startTime": mark.start_time,
            "symbol": mark.symbol,
            "tailPoint": mark.tail_point,
            "updateTime": _now_text(),
            "vowelEnd": mark.vowel_end,
            "vowelStart": mark.vowel_start,
            "wavName": mark.wav_name,
        }
    if mark.src_type == SRC_VX:
        return {
            "connectPoint": mark.connect_point,
            "endTime": mark.end_time,
            "pitch": mark.pitch,
            "srcType": SRC_VX,
            "startTime": mark.start_time,
            "symbol": mark.symbol,
            "tailPoint": mark.tail_point,
            "updateTime": _now_text(),
            "wavName": mark.wav_name,
        }
    return {
        "startPoint": mark.start_point,
        "endTime": mark.end_time,
        "pitch": mark.pitch,
        "srcType": SRC_INDIE,
        "startTime": mark.start_time,
        "symbol": mark.symbol,
        "endPoint": mark.end_point,
        "updateTime": _now_text(),
        "wavName": mark.wav_name,
    }


def set_mark(mark: DVSym) -> dict[str, Any]:
    """Store a mark in the configuration of its directory, replacing any old one.

    Marks whose type is neither CV nor VX are stored as INDIE.  The update
    time is set to now.  Returns the stored entry.
    """
    document = load_config(mark.path)
    entry = _entry_for(mark)
    key = mark.key()
    document.pop(key, None)
    document[key] = entry
    _write_config(mark.path, document)
    return entry


def _key_of(mark: Mark) -> str:
    if isinstance(mark, CVVCSymbol):
        return mark_key(mark.pitch, mark.name)
    return mark.key()


def remove_mark(mark: Mark) -> None:
    """Remove a mark from the configuration of its directory."""
    document = load_config(mark.path)
    document.pop(_key_of(mark), None)
    _write_config(mark.path, document)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _time(value: Any) -> datetime | None:
    try:
        return datetime.strptime(_text(value), TIME_FORMAT)
    except ValueError:
        return None


def _mark_from(directory: str, key: str, entry: Any) -> DVSym:
    fields = entry if isinstance(entry, dict) else {}
    pitch = _text(fields.get("pitch"))
    symbol = _text(fields.get("symbol"))
    mark = DVSym()
    if key != mark_key(pitch, symbol):
        return mark
    src_type = _text(fields.get("srcType"))
    mark.path = directory
    mark.symbol = symbol
    mark.pitch = pitch
    mark.wav_name = _text(fields.get("wavName"))
    mark.update_time = _time(fields.get("updateTime"))  # type: ignore[assignment]
    mark.src_type = src_type
    mark.start_time = _number(fields.get("startTime"))
    mark.end_time = _number(fields.get("endTime"))
    if src_type in (SRC_CV, SRC_VX):
        mark.connect_point = _number(fields.get("connectPoint"))
        mark.tail_point = _number(fields.get("tailPoint"))
        if src_type == SRC_CV:
            mark.preutterance = _number(fields.get("preutterance"))
            mark.vowel_start = _number(fields.get("vowelStart"))
            mark.vowel_end = _number(fields.get("vowelEnd"))
    else:
        mark.start_point = _number(fields.get("startPoint"))
        mark.end_point = _number(fields.get("endPoint"))
    return mark


def read_marks(directory: str | os.PathLike[str]) -> list[DVSym]:
    """Read every mark of a directory, in key order.

    An entry whose key does not match its own pitch and symbol yields a
    default mark.  An unparseable update time is read as None.
    """
    directory = os.fspath(directory)
    if not os.path.exists(config_path(directory)):
        raise VoiceConfigError(f"no configuration file in {directory}")
    document = load_config(directory)
    return [_mark_from(directory, key, document[key]) for key in sorted(document)]


def remove_pitch(directory: str | os.PathLike[str], pitch: str = DEFAULT_PITCH) -> None:
    """Remove every mark of one pitch from a directory's configuration."""
    document = load_config(directory)
    kept = {
        key: entry
        for key, entry in document.items()
        if not (isinstance(entry, dict) and entry.get("pitch") == pitch)
    }
    _write_config(directory, kept)


def has_mark(mark: DVSym, directory: str | os.PathLike[str]) -> bool:
    """Tell whether a directory's configuration holds a mark under this key."""
    if not os.path.exists(config_path(directory)):
        return False
    return mark.key() in load_config(directory)