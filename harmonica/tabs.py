"""
Harmonica tablature.

  +4 / -4        blow / draw
  -4' -4'' -4''' draw bends (half, whole, minor third)
  +8' +8''       blow bends
  OB6 / OD7      overblow / overdraw
"""

from __future__ import annotations

from typing import Dict, Union

from harmonica.models import NoteType

_TAB_FORMATS: Dict[NoteType, str] = {
    NoteType.blow: "+{}",
    NoteType.draw: "-{}",
    NoteType.blow_half_bend: "+{}'",
    NoteType.blow_whole_bend: "+{}''",
    NoteType.draw_half_bend: "-{}'",
    NoteType.draw_whole_bend: "-{}''",
    NoteType.draw_minor_third_bend: "-{}'''",
    NoteType.overblow: "OB{}",
    NoteType.overdraw: "OD{}",
}

# Display labels used by the hole columns
_LABELS: Dict[str, NoteType] = {
    "Blow": NoteType.blow,
    "Draw": NoteType.draw,
    "↑1": NoteType.blow_half_bend,
    "↑2": NoteType.blow_whole_bend,
    "↓1": NoteType.draw_half_bend,
    "↓2": NoteType.draw_whole_bend,
    "↓3": NoteType.draw_minor_third_bend,
    "OB": NoteType.overblow,
    "OD": NoteType.overdraw,
}


def get_tab_notation(hole_number: int, note_type: Union[str, NoteType]) -> str:
    try:
        nt = NoteType(note_type)
    except ValueError:
        return str(hole_number)
    return _TAB_FORMATS[nt].format(hole_number)


def label_to_note_type(label: str) -> NoteType:
    # unknown labels fall back to blow
    return _LABELS.get(label, NoteType.blow)
