"""Managing the marks of one pitch: counting, copying, deleting and display."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from .symbols import SRC_CV, SRC_VX, TIME_FORMAT, DVSym
from .voicecfg import remove_mark, set_mark

_PLACEHOLDER = "-"


class MarkError(Exception):
    """Raised when a mark cannot be copied or deleted."""


class TypeCounts(NamedTuple):
    """Number of marks of each source type."""

    cv: int
    vx: int
    indie: int

    @property
    def total(self) -> int:
        return self.cv + self.vx + self.indie


def count_by_type(marks: Iterable[DVSym]) -> TypeCounts:
    """Count CV, VX and other marks; every type besides CV and VX counts as INDIE."""
    cv = vx = indie = 0
    for mark in marks:
        if mark.src_type == SRC_CV:
            cv += 1
        elif mark.src_type == SRC_VX:
            vx += 1
        else:
            indie += 1
    return TypeCounts(cv, vx, indie)


def is_valid_target_name(src_type: str, name: str) -> bool:
    """Tell whether a mark of this type may be named so.

    VX names hold exactly one underscore; other names hold none.
    """
    if not name:
        return False
    if src_type == SRC_VX:
        return name.count("_") == 1
    return "_" not in name


def _check_index(marks: Sequence[DVSym], index: int) -> None:
    if not 0 <= index < len(marks):
        raise MarkError(f"no mark at position {index}")


def copy_mark(
    marks: Sequence[DVSym], index: int, target: str, overwrite: bool = False
) -> list[DVSym]:
    """Copy the mark at ``index`` under the symbol ``target`` and store it.

    An existing mark of that name in the list is replaced only when
    ``overwrite`` is true.  Returns the updated list of marks.
    """
    _check_index(marks, index)
    source = marks[index]
    if not target:
        raise MarkError("出错！目标标记不可为空！")
    if not is_valid_target_name(source.src_type, target):
        raise MarkError(f"出错！非法的标记名：{target}")
    existing = next((i for i, mark in enumerate(marks) if mark.symbol == target), None)
    if existing is not None and not overwrite:
        raise MarkError(f"目标标记{target}已存在")
    copy = dataclasses.replace(source, symbol=target)
    set_mark(copy)
    result = list(marks)
    if existing is None:
        result.append(copy)
    else:
        result[existing] = copy
    return result


def delete_mark(marks: Sequence[DVSym], index: int) -> list[DVSym]:
    """Remove the mark at ``index`` from its directory; return the remaining marks."""
    _check_index(marks, index)
    remove_mark(marks[index])
    return [mark for i, mark in enumerate(marks) if i != index]


def _number(value: float) -> str:
    return f"{value:g}"


def mark_fields(mark: DVSym | None) -> dict[str, str]:
    """Display text of every field of a mark; fields its type lacks show ``-``."""
    names = (
        "symbol", "path", "pitch", "src_type", "wav_name", "update_time",
        "connect_point", "preutterance", "start_time", "start_point",
        "end_time", "end_point", "tail_point", "vowel_start", "vowel_end",
    )
    if mark is None:
        return dict.fromkeys(names, _PLACEHOLDER)

    update = mark.update_time.strftime(TIME_FORMAT) if mark.update_time is not None else ""
    fields = {
        "symbol": mark.symbol,
        "path": mark.path,
        "pitch": mark.pitch,
        "src_type": mark.src_type,
        "wav_name": mark.wav_name,
        "update_time": update,
        "connect_point": _number(mark.connect_point),
        "preutterance": _number(mark.preutterance),
        "start_time": _number(mark.start_time),
        "start_point": _number(mark.start_point),
        "end_time": _number(mark.end_time),
        "end_point": _number(mark.end_point),
        "tail_point": _number(mark.tail_point),
        "vowel_start": _number(mark.vowel_start),
        "vowel_end": _number(mark.vowel_end),
    }
    if mark.src_type == SRC_CV:
        hidden = ("start_point", "end_point")
    elif mark.src_type == SRC_VX:
        hidden = ("preutterance", "start_point", "end_point", "vowel_start", "vowel_end")
    else:
        hidden = ("connect_point", "preutterance", "tail_point", "vowel_start", "vowel_end")
    for name in hidden:
        fields[name] = _PLACEHOLDER
    return fields