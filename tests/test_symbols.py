from dataclasses import replace
from datetime import datetime, timedelta

from dvmark.symbols import CVVCSymbol, DVSym


def test_cvvc_defaults():
    sym = CVVCSymbol(name="ka")
    assert sym.pitch == "C4"
    assert sym.mes == "未标记"
    assert sym.is_cv == 1
    assert (sym.l1, sym.l2, sym.l3, sym.l4) == (0.0, 0.0, 0.0, 0.0)


def test_dvsym_defaults():
    mark = DVSym()
    assert mark.src_type == "CV"
    assert mark.pitch == "C4"
    assert mark.connect_point == 0.06
    assert mark.start_point == 0.06
    assert mark.end_time == 0.0


def test_dvsym_update_time_is_now():
    before = datetime.now()
    mark = DVSym()
    after = datetime.now()
    assert before <= mark.update_time <= after + timedelta(seconds=1)


def test_dvsym_key_joins_pitch_and_symbol():
    mark = DVSym(symbol="ka", pitch="D#5")
    assert mark.key() == "D#5->ka"


def test_dvsym_key_follows_changes():
    mark = DVSym(symbol="ka")
    copy = replace(mark, symbol="ki")
    assert copy.key().endswith("->ki")
    assert mark.key().endswith("->ka")


def test_copies_are_independent():
    sym = CVVCSymbol(name="a", path="/x")
    other = replace(sym)
    other.name = "b"
    assert sym.name == "a"
    assert other == CVVCSymbol(name="b", path="/x")