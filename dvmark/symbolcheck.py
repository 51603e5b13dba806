"""Validation and expansion of voice-bank dictionaries.

A dictionary is a list of lines.  Text after ``#`` is a comment and
spaces are ignored.  A line is either ``cv,start,end`` (a CV entry with
its start and end sounds), ``%tail`` (a tail sound) or a single name
(an independent entry).
"""

from __future__ import annotations

from collections.abc import Iterable

from .symbols import MESSAGE_CORRECT, CVVCSymbol


class DictionaryError(ValueError):
    """Raised when a dictionary does not pass validation."""


def normalize(lines: Iterable[str]) -> list[str]:
    """Strip comments and spaces from every line, keeping empty lines."""
    return [line.split("#", 1)[0].replace(" ", "") for line in lines]


def _syntax(number: int, line: str) -> str:
    return f"(第{number}条)句法有误：{line}"


def find_error(lines: Iterable[str]) -> str | None:
    """Return the message for the first problem in the dictionary, or None."""
    seen_single: list[str] = []
    seen_triple: list[str] = []
    starts: list[str] = []
    ends: list[str] = []
    cv_names: list[str] = []
    tails: list[str] = []

    for number, line in enumerate(normalize(lines), start=1):
        if not line:
            continue
        parts = line.split(",")
        if len(parts) not in (1, 3):
            return _syntax(number, line)

        if len(parts) == 3:
            name, start, end = parts
            if name in cv_names:
                return f'{_syntax(number, line)}:"{name}"CV标记重复'
            if name in seen_single:
                return f'{_syntax(number, line)}:"{name}"已是一个VX标记'
            cv_names.append(name)
            if start == "-":
                return f'{_syntax(number, line)}:"{start}"与固有标记("-")重复'
            if start not in starts:
                starts.append(start)
            if end not in ends:
                ends.append(end)
        else:
            name = parts[0]
            if not name.startswith("%"):
                if name in cv_names:
                    return f'{_syntax(number, line)}:"{name}"已是一个CV标记'
            else:
                if len(name) < 2:
                    return f'{_syntax(number, line)}:"{name}"空的尾音符号'
                tail = name[1:]
                if tail in starts:
                    return f'{_syntax(number, line)}:"{tail}"已是一个起始符号'
                if tail not in tails:
                    tails.append(tail)

        if line in seen_single or line in seen_triple:
            return f"(第{number}条)重复：{line}"
        (seen_single if len(parts) == 1 else seen_triple).append(line)

    return None


def validate(lines: Iterable[str]) -> None:
    """Raise DictionaryError if the dictionary has a problem."""
    message = find_error(lines)
    if message is not None:
        raise DictionaryError(message)


def check(lines: Iterable[str]) -> bool:
    """Tell whether the dictionary is free of problems."""
    return find_error(lines) is None


def error_text(lines: Iterable[str]) -> str:
    """The status text shown for a dictionary: the error or the correct mark."""
    message = find_error(lines)
    return MESSAGE_CORRECT if message is None else message


def split(lines: Iterable[str]) -> list[CVVCSymbol]:
    """Expand a dictionary into every symbol that needs a mark.

    Returns an empty list if the dictionary is invalid.
    """
    lines = list(lines)
    if not check(lines):
        return []

    cv_names: dict[str, None] = {}
    starts: dict[str, None] = {}
    ends: dict[str, None] = {}
    independents: dict[str, None] = {}
    tails: dict[str, None] = {}

    for line in normalize(lines):
        if not line:
            continue
        parts = line.split(",")
        if len(parts) == 3:
            name, start, end = parts
            cv_names.setdefault(name)
            starts.setdefault(start)
            ends.setdefault(end)
        elif line.startswith("%"):
            tails.setdefault(line[1:])
        else:
            independents.setdefault(line)

    result: list[CVVCSymbol] = []
    for name in cv_names:
        result.append(CVVCSymbol(name=name, is_cv=1))
        result.append(CVVCSymbol(name="-" + name, is_cv=1))
    for end in ends:
        for follower in (*starts, *tails):
            result.append(CVVCSymbol(name=f"{end}_{follower}", is_cv=0))
        result.append(CVVCSymbol(name=f"{end}_-", is_cv=0))
    for name in independents:
        result.append(CVVCSymbol(name=name, is_cv=-1))
    return result