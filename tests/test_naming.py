import pytest

from harmonica.chords import ChordCandidate
from harmonica.layout import build_harmonica
from harmonica.models import Breath, ChordQuality, HarmonicaKey
from harmonica.naming import (
    get_harmonica_position,
    long_name,
    name_candidate,
    roman_numeral,
    short_name,
)


def test_names():
    assert short_name("C", ChordQuality.major) == "C"
    assert short_name("D", ChordQuality.minor) == "Dm"
    assert short_name("G", ChordQuality.dominant7) == "G7"
    assert short_name("B", ChordQuality.diminished) == "Bdim"
    assert long_name("G", ChordQuality.dominant7) == "G Dominant 7th"
    assert long_name("C", ChordQuality.major) == "C Major"


# ==========================================
# Positions (circle of fourths)
# ==========================================

def test_first_position_is_own_key():
    assert get_harmonica_position("C", "C") == 1
    assert get_harmonica_position("G", "G") == 1
    assert get_harmonica_position(HarmonicaKey.D, "D") == 1


def test_second_position_is_a_fourth_above():
    assert get_harmonica_position("C", "F") == 2
    assert get_harmonica_position("G", "C") == 2
    assert get_harmonica_position("D", "G") == 2


def test_third_position():
    assert get_harmonica_position("C", "Bb") == 3
    assert get_harmonica_position("G", "F") == 3


def test_position_is_enharmonic_safe():
    assert get_harmonica_position("C#", "F#") == 2
    assert get_harmonica_position("Db", "Gb") == 2
    assert get_harmonica_position("C", "A#") == get_harmonica_position("C", "Bb")


def test_all_twelve_positions_from_c():
    expected = {
        "C": 1, "F": 2, "Bb": 3, "Eb": 4, "Ab": 5, "Db": 6,
        "Gb": 7, "B": 8, "E": 9, "A": 10, "D": 11, "G": 12,
    }
    for song_key, position in expected.items():
        assert get_harmonica_position("C", song_key) == position


# ==========================================
# Roman numerals
# ==========================================

@pytest.mark.parametrize(
    "key,root,quality,expected",
    [
        ("C", "C", ChordQuality.major, "I"),
        ("C", "G", ChordQuality.dominant7, "V7"),
        ("C", "G", ChordQuality.major, "V"),
        ("C", "D", ChordQuality.minor, "ii"),
        ("C", "B", ChordQuality.diminished, "vii°"),
        ("C", "A#", ChordQuality.major, "bVII"),
        ("C", "D#", ChordQuality.major, "bIII"),
        ("G", "D", ChordQuality.dominant7, "V7"),
        ("A", "E", ChordQuality.minor, "v"),
        ("C", "C", ChordQuality.minor, "i"),
    ],
)
def test_roman_numeral_follows_own_quality(key, root, quality, expected):
    assert roman_numeral(key, root, quality) == expected


def test_name_candidate_builds_voicing():
    harp = build_harmonica("C")
    cand = ChordCandidate(
        holes=(2, 3, 4, 5),
        breath=Breath.draw,
        notes=("G4", "B4", "D5", "F5"),
        quality=ChordQuality.dominant7,
        root_chroma=7,
        is_consecutive=True,
    )
    v = name_candidate(cand, harp)
    assert v.short_name == "G7"
    assert v.name == "G Dominant 7th"
    assert v.root == "G"
    assert v.roman_numeral == "V7"
    assert v.position == 12
    assert v.tuning == harp.tuning
