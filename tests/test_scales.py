import pytest

from harmonica.layout import build_harmonica
from harmonica.models import ScaleType
from harmonica.scales import (
    SCALE_DEGREES,
    SCALE_INTERVALS,
    collect_playable_notes,
    ensure_scale_type,
    get_bend_playability,
    get_scale_notes,
    is_note_in_scale,
    summarize_harmonica_scale,
)

C_MAJOR = ["C", "D", "E", "F", "G", "A", "B"]


def test_every_scale_type_has_intervals():
    assert set(SCALE_INTERVALS) == set(ScaleType)
    for steps in SCALE_INTERVALS.values():
        assert steps[0] == 0
        assert list(steps) == sorted(set(steps))
    for st, degrees in SCALE_DEGREES.items():
        assert len(degrees) == len(SCALE_INTERVALS[st])


def test_c_major_scale_notes():
    notes = get_scale_notes("C", "major")
    assert [n.note for n in notes] == C_MAJOR
    assert notes[0].frequency == pytest.approx(261.6256, abs=1e-3)


def test_spelling_follows_key_signature():
    assert [n.note for n in get_scale_notes("F", "major")] == ["F", "G", "A", "Bb", "C", "D", "E"]
    assert [n.note for n in get_scale_notes("Bb", ScaleType.major)] == ["Bb", "C", "D", "Eb", "F", "G", "A"]
    assert [n.note for n in get_scale_notes("G", "minor")] == ["G", "A", "Bb", "C", "D", "Eb", "F"]
    assert [n.note for n in get_scale_notes("D", "dorian")] == ["D", "E", "F", "G", "A", "B", "C"]
    assert [n.note for n in get_scale_notes("E", "major")] == ["E", "F#", "G#", "A", "B", "C#", "D#"]


@pytest.mark.parametrize("root", ["F", "Bb", "Eb", "Ab", "Db", "Gb"])
def test_flat_side_majors_use_no_sharps(root):
    notes = [n.note for n in get_scale_notes(root, "major")]
    assert all("#" not in n for n in notes)
    relative_minor = get_scale_notes(notes[5], "minor")
    assert {n.note for n in relative_minor} == set(notes)


def test_one_letter_per_degree():
    for root in ["C", "C#", "Db", "F#", "Gb", "Cb"]:
        letters = [n.note[0] for n in get_scale_notes(root, "locrian")]
        assert len(set(letters)) == 7


def test_blues_and_pentatonic():
    assert [n.note for n in get_scale_notes("A", "blues")] == ["A", "C", "D", "Eb", "E", "G"]
    assert [n.note for n in get_scale_notes("A", "minor pentatonic")] == ["A", "C", "D", "E", "G"]
    assert len(get_scale_notes("G", "major pentatonic")) == 5
    assert ensure_scale_type("Minor_Pentatonic") == ScaleType.minor_pentatonic
    with pytest.raises(ValueError):
        ensure_scale_type("bebop")


def test_is_note_in_scale():
    assert is_note_in_scale("C4", C_MAJOR)
    assert not is_note_in_scale("F#4", C_MAJOR)
    # chroma comparison, not string comparison
    assert is_note_in_scale("D#5", ["Eb"])
    assert is_note_in_scale("Gb", ["F#4"])


def test_collect_playable_notes_dedupes_and_sorts():
    harp = build_harmonica("C")
    notes = collect_playable_notes(harp.holes, C_MAJOR)
    freqs = [n.frequency for n in notes]
    assert freqs == sorted(freqs)
    assert len(freqs) == len(set(freqs))
    names = {n.note for n in notes}
    # hole 2 draw and hole 3 blow are both G4
    assert "G4" in names
    # bends in scale are included (hole 3 whole-step bend)
    assert "A4" in names
    assert all("#" not in n for n in names)


def test_bend_playability():
    harp = build_harmonica("C")
    p = get_bend_playability(harp.hole(3), C_MAJOR)
    assert p.is_draw_whole_step_playable  # A4
    assert not p.is_draw_half_step_playable  # A#4
    assert not p.is_draw_minor_third_playable  # G#4
    assert not p.is_overblow_playable

    p1 = get_bend_playability(harp.hole(1), ["D#", "C#"])
    assert p1.is_overblow_playable
    assert p1.is_draw_half_step_playable
    assert not p1.is_overdraw_playable


def test_summarize_harmonica_scale():
    harp = build_harmonica("C")
    summary = summarize_harmonica_scale(harp, ["G", "A", "B", "C", "D", "E", "F#"])
    assert summary.all_holes == tuple(range(1, 11))
    assert summary.playable_blow_holes == tuple(range(1, 11))
    # F draw on 5 and 9 is out of G major
    assert 5 not in summary.playable_draw_holes
    assert 9 not in summary.playable_draw_holes
    # F# only via overblow / bends, so nothing is missing
    assert summary.missing_notes == ()


def test_summarize_full_coverage_in_home_key():
    harp = build_harmonica("C")
    summary = summarize_harmonica_scale(harp, C_MAJOR)
    assert summary.missing_notes == ()
    assert summary.playable_holes == tuple(range(1, 11))


def test_scale_note_models_accepted_as_scale_input():
    harp = build_harmonica("C")
    c_major = get_scale_notes("C", "major")
    assert is_note_in_scale("E4", c_major)
    assert not is_note_in_scale("Eb4", c_major)
    summary = summarize_harmonica_scale(harp, get_scale_notes("F", "major"))
    assert summary.scale_notes == ("F", "G", "A", "Bb", "C", "D", "E")
    assert [n.note for n in collect_playable_notes(harp.holes, c_major)] == [
        n.note for n in collect_playable_notes(harp.holes, C_MAJOR)
    ]
