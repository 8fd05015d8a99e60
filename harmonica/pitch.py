"""
harmonica.pitch

Note-name arithmetic used by every other module: parsing, chroma, MIDI numbers,
equal-temperament frequency and sharps-preferred respelling.

Spelling rules:
- layout output is one of the 12 canonical names in PITCH_CLASSES (sharps, no doubles)
- scale output keeps one letter per degree (spell_degree), so it follows the key signature
- input accepts naturals, '#', 'b' and double accidentals ('##', 'x', 'bb')
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional, Set, Tuple

# Canonical spellings, index == chroma
PITCH_CLASSES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLAT_PITCH_CLASSES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_LETTER_CHROMA = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTAL_SHIFT = {"": 0, "#": 1, "##": 2, "x": 2, "b": -1, "bb": -2}

_NOTE_RE = re.compile(r"^\s*([A-Ga-g])(##|#|x|bb|b)?(-?\d+)?\s*$")

A4_MIDI = 69
DEFAULT_REFERENCE_HZ = 440.0


def _split(name: str) -> Tuple[int, Optional[int]]:
    """Return (signed chroma offset from C, octave or None). Raises ValueError."""
    if not isinstance(name, str):
        raise ValueError(f"Note name must be a string, got {type(name).__name__}")
    m = _NOTE_RE.match(name)
    if not m:
        raise ValueError(f"Invalid note name: {name!r}")
    letter, acc, octave = m.groups()
    semis = _LETTER_CHROMA[letter.upper()] + _ACCIDENTAL_SHIFT[acc or ""]
    return semis, (int(octave) if octave is not None else None)


def chroma(name: str) -> int:
    """Pitch class 0-11 of a note name, octave ignored ('Db4' -> 1, 'B#' -> 0)."""
    semis, _ = _split(name)
    return semis % 12


def has_octave(name: str) -> bool:
    return _split(name)[1] is not None


def midi(name: str) -> int:
    """
    MIDI number of a note name with octave (C4 = 60).
    Accidentals can cross the octave boundary: 'B#3' == 60, 'Cb4' == 59.
    """
    semis, octave = _split(name)
    if octave is None:
        raise ValueError(f"Note name has no octave: {name!r}")
    return (octave + 1) * 12 + semis


def from_midi(number: int) -> str:
    """Sharps-preferred note name for a MIDI number (61 -> 'C#4')."""
    octave, pc = divmod(int(number), 12)
    return f"{PITCH_CLASSES[pc]}{octave - 1}"


def frequency(name_or_midi, reference_hz: float = DEFAULT_REFERENCE_HZ) -> float:
    """Equal temperament: f = ref * 2^((midi - 69) / 12)."""
    m = name_or_midi if isinstance(name_or_midi, int) else midi(name_or_midi)
    return float(reference_hz) * 2.0 ** ((m - A4_MIDI) / 12.0)


def pitch_class(name: str) -> str:
    """Canonical pitch class name without octave ('Eb5' -> 'D#')."""
    return PITCH_CLASSES[chroma(name)]


def octave_of(name: str) -> int:
    """Octave of the *sounding* pitch ('B#3' -> 4)."""
    return midi(name) // 12 - 1


def simplify(name: str) -> str:
    """
    Respell to the canonical sharps-preferred form.
    Keeps the octave if present ('Fb4' -> 'E4', 'Abb3' -> 'G3', 'Eb' -> 'D#').
    """
    if has_octave(name):
        return from_midi(midi(name))
    return pitch_class(name)


def transpose(name: str, semitones: int) -> str:
    """Shift a note with octave by N semitones and respell."""
    return from_midi(midi(name) + int(semitones))


def note_name(value: Any) -> Any:
    """Objects carrying a `.note` (ScaleNote, Note) are read through it."""
    return getattr(value, "note", value)


def chroma_set(names: Iterable[Any]) -> Set[int]:
    return {chroma(note_name(n)) for n in names}


def spell(chroma_value: int, *, prefer_flats: bool = False) -> str:
    table = FLAT_PITCH_CLASSES if prefer_flats else PITCH_CLASSES
    return table[int(chroma_value) % 12]


def spell_degree(root: str, degree: int, semitones: int) -> str:
    """
    Name the scale degree `degree` (1-based) lying `semitones` above `root`,
    keeping one letter per degree: ('F', 4, 5) -> 'Bb', ('G', 3, 3) -> 'Bb',
    ('A', 5, 6) -> 'Eb'. Accidentals may double ('Gb' locrian gives 'Bbb').
    """
    m = _NOTE_RE.match(root) if isinstance(root, str) else None
    if not m:
        raise ValueError(f"Invalid note name: {root!r}")
    letters = "CDEFGAB"
    letter = letters[(letters.index(m.group(1).upper()) + degree - 1) % 7]
    target = (chroma(root) + semitones) % 12
    shift = (target - _LETTER_CHROMA[letter] + 6) % 12 - 6
    return letter + ("#" * shift if shift > 0 else "b" * -shift)
