"""Filtering of dictionary symbols and wave files for the pickers."""

from __future__ import annotations

import enum
import os
import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from .symbols import MESSAGE_CORRECT, MESSAGE_UNMARKED, CVVCSymbol

_WAV_SUFFIX = re.compile(re.escape(".wav"), re.IGNORECASE)


class SymbolStatus(enum.Enum):
    """How a symbol's marking state is shown in the symbol list."""

    CORRECT = "correct"
    UNMARKED = "unmarked"
    WARNING = "warning"


class WavEntry(NamedTuple):
    """A wave file found in one of the project's directories."""

    path: str
    file: str


def filter_symbols(symbols: Iterable[CVVCSymbol], text: str) -> list[CVVCSymbol]:
    """Symbols whose name contains ``text``, case-sensitively.

    Empty text keeps every symbol.  The order is preserved.
    """
    if not text:
        return list(symbols)
    return [symbol for symbol in symbols if text in symbol.name]


def symbol_status(message: str) -> SymbolStatus:
    """Classify a symbol's check message for display."""
    if message == MESSAGE_CORRECT:
        return SymbolStatus.CORRECT
    if message == MESSAGE_UNMARKED:
        return SymbolStatus.UNMARKED
    return SymbolStatus.WARNING


def _stem(filename: str) -> str:
    return _WAV_SUFFIX.sub("", filename)


def filter_wav_files(
    paths: Sequence[str | os.PathLike[str]],
    filelists: Sequence[Iterable[str]],
    text: str,
) -> list[WavEntry]:
    """Wave files whose name, with every ``.wav`` removed, contains ``text``.

    Matching ignores case; empty text keeps every file.  ``filelists``
    holds one list of file names per directory in ``paths``; the result
    lists the files directory by directory, in their given order.
    Raises ValueError if the two sequences differ in length.
    """
    needle = text.casefold()
    result: list[WavEntry] = []
    for path, files in zip(paths, filelists, strict=True):
        directory = os.fspath(path)
        for name in files:
            if not needle or needle in _stem(name).casefold():
                result.append(WavEntry(directory, name))
    return result