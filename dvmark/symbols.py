"""Marking records and shared constants for voice-bank marking."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

VERSION = "2.4.2-alpha"
LICENSE = "GPLv3"
AU_VERSION = "3.3.1-alpha"

SAMPLE_RATE = 44100
PERP = int(0.06 * SAMPLE_RATE)
STEP = 512
TIMES = 16
MIN_BOUND = -80.0
MAX_BOUND = 0.0
NUM = 3
ENERGY_BOUND = 0.0
RPTZ_BOUND = 1.0
SPEC_CUT = 0.08
MAX_LENGTH = 10 * SAMPLE_RATE
THREADS = 5
TEMPS_GATE = 500.0
TEMPS_STEP = 100.0

DEFAULT_PITCH = "C4"
MESSAGE_CORRECT = "正确"
MESSAGE_UNMARKED = "未标记"

SRC_CV = "CV"
SRC_VX = "VX"
SRC_INDIE = "INDIE"

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class CVVCSymbol:
    """A dictionary entry together with its marker positions in a wave.

    ``is_cv`` is 1 for CV entries, 0 for VX transitions and -1 for
    independent entries.  ``l1``..``l4`` are marker positions given as
    fractions of the wave length.
    """

    name: str = ""
    is_cv: int = 1
    l1: float = 0.0
    l2: float = 0.0
    l3: float = 0.0
    l4: float = 0.0
    path: str = ""
    file: str = ""
    pitch: str = DEFAULT_PITCH
    mes: str = MESSAGE_UNMARKED


@dataclass
class DVSym:
    """One mark as stored in a voice configuration file, times in seconds."""

    symbol: str = ""
    pitch: str = DEFAULT_PITCH
    src_type: str = SRC_CV
    path: str = ""
    wav_name: str = ""
    update_time: datetime = field(default_factory=datetime.now)
    connect_point: float = 0.06
    preutterance: float = 0.0
    start_time: float = 0.0
    start_point: float = 0.06
    end_time: float = 0.0
    end_point: float = 0.0
    tail_point: float = 0.0
    vowel_start: float = 0.0
    vowel_end: float = 0.0

    def key(self) -> str:
        """The key under which this mark is stored: ``pitch->symbol``."""
        return f"{self.pitch}->{self.symbol}"