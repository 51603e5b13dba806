from datetime import datetime

import pytest

from dvmark.marks import (
    MarkError,
    copy_mark,
    count_by_type,
    delete_mark,
    is_valid_target_name,
    mark_fields,
)
from dvmark.symbols import DVSym
from dvmark.voicecfg import has_mark, load_config, set_mark


@pytest.fixture
def stored(tmp_path):
    marks = [
        DVSym(symbol="ka", pitch="C4", src_type="CV", path=str(tmp_path), wav_name="ka.wav"),
        DVSym(symbol="a_k", pitch="C4", src_type="VX", path=str(tmp_path), wav_name="ak.wav"),
        DVSym(symbol="n", pitch="C4", src_type="INDIE", path=str(tmp_path), wav_name="n.wav"),
    ]
    for mark in marks:
        set_mark(mark)
    return marks


def test_count_by_type():
    marks = [
        DVSym(src_type="CV"), DVSym(src_type="CV"), DVSym(src_type="VX"),
        DVSym(src_type="INDIE"), DVSym(src_type="other"),
    ]
    counts = count_by_type(marks)
    assert (counts.cv, counts.vx, counts.indie) == (2, 1, 2)
    assert counts.total == len(marks)


def test_count_by_type_empty():
    assert count_by_type([]).total == 0


@pytest.mark.parametrize(
    "src_type, name, expected",
    [
        ("CV", "ka", True),
        ("CV", "k_a", False),
        ("VX", "a_k", True),
        ("VX", "ak", False),
        ("VX", "a_k_", False),
        ("INDIE", "n", True),
        ("INDIE", "n_", False),
        ("CV", "", False),
    ],
)
def test_is_valid_target_name(src_type, name, expected):
    assert is_valid_target_name(src_type, name) is expected


def test_copy_mark_appends_and_stores(stored, tmp_path):
    result = copy_mark(stored, 0, "ki")
    assert [m.symbol for m in result] == ["ka", "a_k", "n", "ki"]
    assert result[-1].wav_name == "ka.wav"
    assert has_mark(result[-1], tmp_path)
    assert [m.symbol for m in stored] == ["ka", "a_k", "n"]


def test_copy_mark_refuses_existing_without_overwrite(stored):
    with pytest.raises(MarkError):
        copy_mark(stored, 1, "a_k")


def test_copy_mark_overwrites_in_place(stored, tmp_path):
    extra = DVSym(symbol="ki", pitch="C4", path=str(tmp_path), wav_name="ki.wav")
    set_mark(extra)
    marks = [*stored, extra]
    result = copy_mark(marks, 0, "ki", overwrite=True)
    assert len(result) == len(marks)
    assert result[3].symbol == "ki"
    assert result[3].wav_name == "ka.wav"
    assert load_config(tmp_path)["C4->ki"]["wavName"] == "ka.wav"


@pytest.mark.parametrize("index, target", [(0, ""), (0, "k_a"), (1, "ak"), (5, "x")])
def test_copy_mark_rejects_bad_input(stored, index, target):
    with pytest.raises(MarkError):
        copy_mark(stored, index, target)


def test_delete_mark_removes_from_file(stored, tmp_path):
    result = delete_mark(stored, 1)
    assert [m.symbol for m in result] == ["ka", "n"]
    assert "C4->a_k" not in load_config(tmp_path)
    assert "C4->ka" in load_config(tmp_path)


def test_delete_mark_bad_index(stored):
    with pytest.raises(MarkError):
        delete_mark(stored, -1)


def test_mark_fields_cv():
    mark = DVSym(symbol="ka", src_type="CV", update_time=datetime(2021, 2, 3, 4, 5, 6))
    fields = mark_fields(mark)
    assert fields["symbol"] == "ka"
    assert fields["update_time"] == "2021-02-03 04:05:06"
    assert fields["connect_point"] == "0.06"
    assert fields["start_point"] == "-"
    assert fields["end_point"] == "-"
    assert fields["vowel_end"] == "0"


def test_mark_fields_vx_and_indie_hide_their_missing_fields():
    vx = mark_fields(DVSym(src_type="VX"))
    assert vx["preutterance"] == vx["vowel_start"] == vx["vowel_end"] == "-"
    assert vx["tail_point"] == "0"
    indie = mark_fields(DVSym(src_type="INDIE"))
    assert indie["connect_point"] == indie["tail_point"] == "-"
    assert indie["start_point"] == "0.06"


def test_mark_fields_none_is_all_placeholders():
    fields = mark_fields(None)
    assert len(fields) == 15
    assert set(fields.values()) == {"-"}