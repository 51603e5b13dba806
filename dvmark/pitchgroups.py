"""Grouping the marks of several wave directories by pitch."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .symbols import DVSym
from .voicecfg import VoiceConfigError, read_marks

PITCH_COUNT = 120

_NOTES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


def pitch_name(index: int) -> str:
    """Name of the pitch at a semitone index counted from C0, e.g. 57 is ``A4``."""
    octave, note = divmod(index, len(_NOTES))
    return f"{_NOTES[note]}{octave}"


def group_by_pitch(marks: Iterable[DVSym]) -> list[list[DVSym]]:
    """Sort marks into one list per pitch from C0 to B9.

    The marks of each pitch keep their order; marks whose pitch lies
    outside that range are dropped.
    """
    index_of = {pitch_name(index): index for index in range(PITCH_COUNT)}
    groups: list[list[DVSym]] = [[] for _ in range(PITCH_COUNT)]
    for mark in marks:
        index = index_of.get(mark.pitch)
        if index is not None:
            groups[index].append(mark)
    return groups


def collect_marks(paths: Iterable[str | os.PathLike[str]]) -> list[list[DVSym]]:
    """Read the marks of every directory and group them by pitch.

    Directories whose configuration is missing or unreadable are skipped.
    """
    marks: list[DVSym] = []
    for path in paths:
        try:
            marks.extend(read_marks(path))
        except VoiceConfigError:
            continue
    return group_by_pitch(marks)