"""
harmonica.scales

Scale spelling and scale-vs-harmonica queries (which holes play in a scale,
which scale notes the harp cannot reach at all).

Membership is always decided by chroma, so 'C#' and 'Db' are the same note.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from harmonica import pitch
from harmonica.config import get_settings
from harmonica.models import (
    BendPlayability,
    Harmonica,
    HarmonicaScaleSummary,
    HoleLayout,
    Note,
    ScaleNote,
    ScaleType,
)

SCALE_INTERVALS: Dict[ScaleType, Tuple[int, ...]] = {
    ScaleType.major: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.minor: (0, 2, 3, 5, 7, 8, 10),
    ScaleType.harmonic_minor: (0, 2, 3, 5, 7, 8, 11),
    ScaleType.melodic_minor: (0, 2, 3, 5, 7, 9, 11),
    ScaleType.dorian: (0, 2, 3, 5, 7, 9, 10),
    ScaleType.phrygian: (0, 1, 3, 5, 7, 8, 10),
    ScaleType.lydian: (0, 2, 4, 6, 7, 9, 11),
    ScaleType.mixolydian: (0, 2, 4, 5, 7, 9, 10),
    ScaleType.locrian: (0, 1, 3, 5, 6, 8, 10),
    ScaleType.major_pentatonic: (0, 2, 4, 7, 9),
    ScaleType.minor_pentatonic: (0, 3, 5, 7, 10),
    ScaleType.blues: (0, 3, 5, 6, 7, 10),
}

# Degree number of each interval above; picks the letter a note is spelled with
_HEPTATONIC = (1, 2, 3, 4, 5, 6, 7)
SCALE_DEGREES: Dict[ScaleType, Tuple[int, ...]] = {
    **{st: _HEPTATONIC for st in SCALE_INTERVALS if len(SCALE_INTERVALS[st]) == 7},
    ScaleType.major_pentatonic: (1, 2, 3, 5, 6),
    ScaleType.minor_pentatonic: (1, 3, 4, 5, 7),
    ScaleType.blues: (1, 3, 4, 5, 5, 7),  # b5 and 5 share a letter
}

ScaleInput = Iterable[Union[str, ScaleNote]]


def ensure_scale_type(scale_type: Union[str, ScaleType]) -> ScaleType:
    if isinstance(scale_type, ScaleType):
        return scale_type
    try:
        return ScaleType(str(scale_type).strip().lower().replace("_", " "))
    except ValueError as e:
        raise ValueError(f"Unknown scale type: {scale_type!r}") from e


def get_scale_notes(
    root: str,
    scale_type: Union[str, ScaleType],
    *,
    reference_hz: Optional[float] = None,
) -> List[ScaleNote]:
    """
    Pitch classes of `root` `scale_type`, one letter per degree, so spelling
    follows the key signature: F major -> F G A Bb C D E, G minor has Bb and Eb,
    A blues -> A C D Eb E G. Frequencies are for octave 4.
    """
    st = ensure_scale_type(scale_type)
    root_chroma = pitch.chroma(root)
    ref = reference_hz if reference_hz is not None else get_settings().reference_hz

    notes = []
    for degree, step in zip(SCALE_DEGREES[st], SCALE_INTERVALS[st]):
        c = (root_chroma + step) % 12
        notes.append(ScaleNote(note=pitch.spell_degree(root, degree, step), frequency=pitch.frequency(60 + c, ref)))
    return notes


def is_note_in_scale(note: str, scale_notes: ScaleInput) -> bool:
    """'C4' in ['C', 'D', ...] -> True; octave and spelling are ignored."""
    return pitch.chroma(note) in pitch.chroma_set(scale_notes)


def _hole_sources(hole: HoleLayout) -> Tuple[Optional[Note], ...]:
    blow_bends = hole.blow_bends.ladder() if hole.blow_bends else ()
    draw_bends = hole.draw_bends.ladder() if hole.draw_bends else ()
    return (hole.blow, hole.draw, *blow_bends, *draw_bends, hole.overblow, hole.overdraw)


def collect_playable_notes(holes: Iterable[HoleLayout], scale_notes: ScaleInput) -> List[Note]:
    """
    Every in-scale note the holes can sound (bends and overblows included),
    de-duplicated by frequency, lowest first.
    """
    chromas = pitch.chroma_set(scale_notes)
    seen: Set[float] = set()
    notes: List[Note] = []
    for hole in holes:
        for src in _hole_sources(hole):
            if src is None or src.chroma not in chromas or src.frequency in seen:
                continue
            seen.add(src.frequency)
            notes.append(src)
    return sorted(notes, key=lambda n: n.frequency)


def _playable(note: Optional[Note], chromas: Set[int]) -> bool:
    return note is not None and note.chroma in chromas


def get_bend_playability(hole: HoleLayout, scale_notes: ScaleInput) -> BendPlayability:
    chromas = pitch.chroma_set(scale_notes)
    bb = hole.blow_bends
    db = hole.draw_bends
    return BendPlayability(
        is_overblow_playable=_playable(hole.overblow, chromas),
        is_blow_half_step_playable=_playable(bb.half_step_bend if bb else None, chromas),
        is_blow_whole_step_playable=_playable(bb.whole_step_bend if bb else None, chromas),
        is_draw_half_step_playable=_playable(db.half_step_bend if db else None, chromas),
        is_draw_whole_step_playable=_playable(db.whole_step_bend if db else None, chromas),
        is_draw_minor_third_playable=_playable(db.minor_third_bend if db else None, chromas),
        is_overdraw_playable=_playable(hole.overdraw, chromas),
    )


def summarize_harmonica_scale(harmonica: Harmonica, scale_notes: ScaleInput) -> HarmonicaScaleSummary:
    """Holes whose plain blow/draw note is in the scale, and scale notes the harp never reaches."""
    names = tuple(pitch.note_name(n) for n in scale_notes)
    chromas = pitch.chroma_set(names)

    blow_holes = tuple(h.hole for h in harmonica.holes if h.blow.chroma in chromas)
    draw_holes = tuple(h.hole for h in harmonica.holes if h.draw.chroma in chromas)
    playable = tuple(sorted(set(blow_holes) | set(draw_holes)))

    available: Set[int] = set()
    for hole in harmonica.holes:
        available.update(src.chroma for src in _hole_sources(hole) if src is not None)
    missing = tuple(n for n in names if pitch.chroma(n) not in available)

    return HarmonicaScaleSummary(
        harmonica=harmonica,
        scale_notes=names,
        playable_blow_holes=blow_holes,
        playable_draw_holes=draw_holes,
        playable_holes=playable,
        all_holes=tuple(h.hole for h in harmonica.holes),
        missing_notes=missing,
    )
