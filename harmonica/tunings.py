"""
harmonica.tunings

Static tuning tables. Every tuning is written for a C harmonica and transposed
by harmonica.layout; nothing here is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from harmonica.models import HarmonicaKey, TuningType

# Reference octave of the C harmonica's hole 1 blow
C_START_OCTAVE = 4

# Conventional register per key: C..F# start at middle C, G..B one octave lower
KEY_START_OCTAVE: Dict[HarmonicaKey, int] = {
    HarmonicaKey.C: 4,
    HarmonicaKey.Db: 4,
    HarmonicaKey.D: 4,
    HarmonicaKey.Eb: 4,
    HarmonicaKey.E: 4,
    HarmonicaKey.F: 4,
    HarmonicaKey.Fs: 4,
    HarmonicaKey.G: 3,
    HarmonicaKey.Ab: 3,
    HarmonicaKey.A: 3,
    HarmonicaKey.Bb: 3,
    HarmonicaKey.B: 3,
}

OVERBLOW_HOLES = frozenset({1, 4, 5, 6})
OVERDRAW_HOLES = frozenset({7, 9, 10})


@dataclass(frozen=True)
class TuningDefinition:
    blow_notes: Tuple[str, ...]
    draw_notes: Tuple[str, ...]
    description: str = ""


TUNINGS: Dict[TuningType, TuningDefinition] = {
    TuningType.richter: TuningDefinition(
        blow_notes=("C4", "E4", "G4", "C5", "E5", "G5", "C6", "E6", "G6", "C7"),
        draw_notes=("D4", "G4", "B4", "D5", "F5", "A5", "B5", "D6", "F6", "A6"),
        description="Standard tuning for blues and folk",
    ),
    TuningType.paddy_richter: TuningDefinition(
        # hole 3 blow raised G -> A
        blow_notes=("C4", "E4", "A4", "C5", "E5", "G5", "C6", "E6", "G6", "C7"),
        draw_notes=("D4", "G4", "B4", "D5", "F5", "A5", "B5", "D6", "F6", "A6"),
        description="Celtic / Irish melody playing",
    ),
    TuningType.natural_minor: TuningDefinition(
        blow_notes=("C4", "Eb4", "G4", "C5", "Eb5", "G5", "C6", "Eb6", "G6", "C7"),
        draw_notes=("D4", "G4", "Bb4", "D5", "F5", "Ab5", "Bb5", "D6", "F6", "Ab6"),
        description="Minor thirds and sevenths for minor keys",
    ),
    TuningType.country: TuningDefinition(
        # hole 5 draw raised F -> F#
        blow_notes=("C4", "E4", "G4", "C5", "E5", "G5", "C6", "E6", "G6", "C7"),
        draw_notes=("D4", "G4", "B4", "D5", "F#5", "A5", "B5", "D6", "F6", "A6"),
        description="Country / bluegrass",
    ),
    TuningType.melody_maker: TuningDefinition(
        # hole 3 blow raised, holes 5 and 9 draw raised
        blow_notes=("C4", "E4", "A4", "C5", "E5", "G5", "C6", "E6", "G6", "C7"),
        draw_notes=("D4", "G4", "B4", "D5", "F#5", "A5", "B5", "D6", "F#6", "A6"),
        description="Lee Oskar Melody Maker",
    ),
}


def get_tuning(tuning: TuningType) -> TuningDefinition:
    return TUNINGS[tuning]
