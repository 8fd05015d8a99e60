"""
harmonica.naming

Chord names, harmonica positions and Roman numerals.

Positions count fourths around the circle from the harmonica key:
1st is the harp's own key, 2nd is a fourth above it, 3rd two fourths above.
"""

from __future__ import annotations

from typing import Dict, List, Union

from harmonica import pitch
from harmonica.chords import ChordCandidate
from harmonica.models import ChordQuality, ChordVoicing, Harmonica, HarmonicaKey

QUALITY_SUFFIX: Dict[ChordQuality, str] = {
    ChordQuality.major: "",
    ChordQuality.minor: "m",
    ChordQuality.dominant7: "7",
    ChordQuality.diminished: "dim",
}

QUALITY_NAME: Dict[ChordQuality, str] = {
    ChordQuality.major: "Major",
    ChordQuality.minor: "Minor",
    ChordQuality.dominant7: "Dominant 7th",
    ChordQuality.diminished: "Diminished",
}

# C -> F -> Bb -> Eb -> Ab -> Db -> Gb -> B -> E -> A -> D -> G
CIRCLE_OF_FOURTHS: List[str] = ["C", "F", "Bb", "Eb", "Ab", "Db", "Gb", "B", "E", "A", "D", "G"]
_FOURTHS_INDEX: Dict[int, int] = {pitch.chroma(n): i for i, n in enumerate(CIRCLE_OF_FOURTHS)}

# Semitones above the tonic -> degree label; non-diatonic roots get an accidental
DEGREE_LABELS: Dict[int, str] = {
    0: "I",
    1: "bII",
    2: "II",
    3: "bIII",
    4: "III",
    5: "IV",
    6: "#IV",
    7: "V",
    8: "bVI",
    9: "VI",
    10: "bVII",
    11: "VII",
}


def short_name(root: str, quality: ChordQuality) -> str:
    return f"{root}{QUALITY_SUFFIX[quality]}"


def long_name(root: str, quality: ChordQuality) -> str:
    return f"{root} {QUALITY_NAME[quality]}"


def _chroma_of(key_or_note: Union[str, HarmonicaKey]) -> int:
    if isinstance(key_or_note, HarmonicaKey):
        return key_or_note.chroma
    return pitch.chroma(key_or_note)


def get_harmonica_position(
    harmonica_key: Union[str, HarmonicaKey],
    song_key: Union[str, HarmonicaKey],
) -> int:
    """
    Position (1-12) for playing in `song_key` on a harp in `harmonica_key`.
    Enharmonic spellings are equivalent: ('C#', 'F#') == ('Db', 'Gb') == 2.
    """
    harp_idx = _FOURTHS_INDEX[_chroma_of(harmonica_key)]
    song_idx = _FOURTHS_INDEX[_chroma_of(song_key)]
    return ((song_idx - harp_idx + 12) % 12) + 1


def roman_numeral(key: Union[str, HarmonicaKey], root: str, quality: ChordQuality) -> str:
    """
    Degree of `root` in the major scale of `key`, cased by the chord's own
    quality: 'V7' for G7 in C, 'ii' for Dm, 'vii°' for Bdim, 'bVII' for Bb.
    """
    degree = (pitch.chroma(root) - _chroma_of(key)) % 12
    label = DEGREE_LABELS[degree]
    if quality in (ChordQuality.minor, ChordQuality.diminished):
        label = label.lower()
    if quality == ChordQuality.diminished:
        label += "°"
    elif quality == ChordQuality.dominant7:
        label += "7"
    return label


def name_candidate(candidate: ChordCandidate, harmonica: Harmonica) -> ChordVoicing:
    root = candidate.root
    return ChordVoicing(
        name=long_name(root, candidate.quality),
        short_name=short_name(root, candidate.quality),
        quality=candidate.quality,
        root=root,
        holes=candidate.holes,
        breath=candidate.breath,
        notes=candidate.notes,
        position=get_harmonica_position(harmonica.key, root),
        roman_numeral=roman_numeral(harmonica.key, root, candidate.quality),
        is_consecutive=candidate.is_consecutive,
        tuning=harmonica.tuning,
    )


def name_candidates(candidates: List[ChordCandidate], harmonica: Harmonica) -> List[ChordVoicing]:
    return [name_candidate(c, harmonica) for c in candidates]
