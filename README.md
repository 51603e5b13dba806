# dvmark

Tools for preparing DeepVocal voice banks: checking a CVVC symbol
dictionary, keeping project files, and reading and editing the marks stored
in a recording folder's `voice.dvcfg`.

## Installation

```
pip install dvmark
```

## Checking a dictionary

A dictionary is a list of lines. A line `name,start,end` defines a CV
entry, a bare line defines an independent entry, and `%x` defines a tail
sound. Anything after `#` is a comment and spaces are ignored.

```python
from dvmark.symbolcheck import check, error_text, find_error, split, validate

lines = ["ka,k,a", "ki,k,i", "%n", "ng"]
check(lines)        # True
find_error(lines)   # None, or the message for the first problem
error_text(lines)   # "正确" when valid, otherwise the message
validate(lines)     # raises DictionaryError on a bad dictionary
for symbol in split(lines):
    print(symbol.name, symbol.is_cv)   # 1 = CV, 0 = VX transition, -1 = independent
```

`split` expands the dictionary into every symbol that needs a mark: each CV
entry and its `-` form, every `end_start`, `end_tail` and `end_-`
transition, and the independent entries. It returns an empty list for an
invalid dictionary.

## Projects

```python
from dvmark.project import Project, dictionary_text, split_pitch

project = Project()
project.symbols = ["ka,k,a", "%n"]
project.paths = ["/voices/C4"]
project.pitch = "C4"
project.save("bank.dvmtp")

same = Project.load("bank.dvmtp")   # raises ProjectError on a bad file
assert same == project

split_pitch("C#4")                  # ("C#", "4")
dictionary_text(project.symbols)    # lines joined with newlines
```

Projects compare equal when their symbols, paths and pitch match and they
hold the same number of flags.

## Voice configuration files

Marks live in `voice.dvcfg` inside each recording folder, keyed as
`pitch->symbol`. A mark is a `dvmark.symbols.DVSym`.

```python
from dvmark.voicecfg import has_mark, read_marks, remove_mark, remove_pitch, set_mark
from dvmark.pitchgroups import collect_marks, pitch_name

marks = read_marks("/voices/C4")      # raises VoiceConfigError if there is no file
set_mark(marks[0])                    # store or replace, update time set to now
has_mark(marks[0], "/voices/C4")      # True
remove_pitch("/voices/C4", "G4")

groups = collect_marks(["/voices/C4", "/voices/G4"])  # 120 lists, C0 … B9
pitch_name(57)                        # "A4"
```

`dvmark.marks` counts marks of one pitch by type (`count_by_type`), copies
one under a new name (`copy_mark`), deletes one (`delete_mark`) and gives
the display text of a mark's fields (`mark_fields`); errors raise
`MarkError`. `dvmark.filters` narrows symbol lists (`filter_symbols`,
`symbol_status`) and wave-file lists (`filter_wav_files`) by a search text.

## What this package does not do

It has no graphical editor, no waveform display and no command. It does not
read wave files, so it does not scan folders for usable recordings or
convert between marker positions in a wave and the times stored in
`voice.dvcfg`; marks are written from the times already held in a `DVSym`.
It does not load plug-ins.