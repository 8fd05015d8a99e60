import pytest

from harmonica.models import NoteType
from harmonica.tabs import get_tab_notation, label_to_note_type


@pytest.mark.parametrize(
    "hole,note_type,expected",
    [
        (4, NoteType.blow, "+4"),
        (4, NoteType.draw, "-4"),
        (3, NoteType.draw_half_bend, "-3'"),
        (3, NoteType.draw_whole_bend, "-3''"),
        (3, NoteType.draw_minor_third_bend, "-3'''"),
        (8, NoteType.blow_half_bend, "+8'"),
        (10, NoteType.blow_whole_bend, "+10''"),
        (6, NoteType.overblow, "OB6"),
        (7, NoteType.overdraw, "OD7"),
        (2, "draw", "-2"),
    ],
)
def test_tab_notation(hole, note_type, expected):
    assert get_tab_notation(hole, note_type) == expected


def test_unknown_note_type_falls_back_to_hole_number():
    assert get_tab_notation(5, "warble") == "5"


def test_labels():
    assert label_to_note_type("Blow") == NoteType.blow
    assert label_to_note_type("↓3") == NoteType.draw_minor_third_bend
    assert label_to_note_type("OD") == NoteType.overdraw
    assert label_to_note_type("???") == NoteType.blow
