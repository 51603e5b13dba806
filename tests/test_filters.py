import pytest

from dvmark.filters import (
    SymbolStatus,
    WavEntry,
    filter_symbols,
    filter_wav_files,
    symbol_status,
)
from dvmark.symbols import MESSAGE_CORRECT, MESSAGE_UNMARKED, CVVCSymbol


@pytest.fixture
def symbols():
    return [
        CVVCSymbol(name="ka"),
        CVVCSymbol(name="-ka"),
        CVVCSymbol(name="a_k", is_cv=0),
        CVVCSymbol(name="KA"),
    ]


def test_empty_text_keeps_all_symbols(symbols):
    assert [s.name for s in filter_symbols(symbols, "")] == ["ka", "-ka", "a_k", "KA"]


def test_symbol_filter_is_case_sensitive(symbols):
    assert [s.name for s in filter_symbols(symbols, "ka")] == ["ka", "-ka"]
    assert [s.name for s in filter_symbols(symbols, "KA")] == ["KA"]


def test_symbol_filter_no_match(symbols):
    assert filter_symbols(symbols, "zz") == []


def test_symbol_filter_result_is_subset(symbols):
    result = filter_symbols(symbols, "a")
    assert all("a" in s.name for s in result)
    assert all(s in symbols for s in result)


@pytest.mark.parametrize(
    "message, status",
    [
        (MESSAGE_CORRECT, SymbolStatus.CORRECT),
        (MESSAGE_UNMARKED, SymbolStatus.UNMARKED),
        ("标记错误", SymbolStatus.WARNING),
        ("", SymbolStatus.WARNING),
    ],
)
def test_symbol_status(message, status):
    assert symbol_status(message) is status


def test_wav_filter_empty_text_keeps_all_in_order():
    result = filter_wav_files(["/a", "/b"], [["x.wav", "y.WAV"], ["z.wav"]], "")
    assert result == [
        WavEntry("/a", "x.wav"),
        WavEntry("/a", "y.WAV"),
        WavEntry("/b", "z.wav"),
    ]


def test_wav_filter_ignores_case():
    result = filter_wav_files(["/a"], [["KA.wav", "sa.wav"]], "ka")
    assert result == [WavEntry("/a", "KA.wav")]


def test_wav_filter_ignores_suffix():
    assert filter_wav_files(["/a"], [["ka.wav", "ka.WAV"]], "wav") == []


def test_wav_filter_keeps_directory_of_each_file():
    result = filter_wav_files(["/a", "/b"], [["ka_1.wav"], ["ka_2.wav", "ta.wav"]], "ka")
    assert [entry.path for entry in result] == ["/a", "/b"]
    assert [entry.file for entry in result] == ["ka_1.wav", "ka_2.wav"]


def test_wav_filter_length_mismatch_raises():
    with pytest.raises(ValueError):
        filter_wav_files(["/a", "/b"], [["ka.wav"]], "")