"""
harmonica.grouping

Scale filtering and grouping of named voicings for UI paging.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple, Union

from harmonica import pitch
from harmonica.models import Breath, ChordGroup, ChordVoicing, ScaleNote

_BREATH_ORDER = {Breath.blow: 0, Breath.draw: 1}


def voicing_sort_key(v: ChordVoicing) -> Tuple[int, int, int, Tuple[int, ...]]:
    """blow before draw, then lowest hole, then smaller voicings first."""
    return (_BREATH_ORDER[v.breath], v.holes[0], len(v.holes), v.holes)


def scale_chromas(scale_notes: Iterable[Union[str, ScaleNote]]) -> Set[int]:
    """
    Chroma set of an externally supplied scale. Entries are note names, which
    may carry octaves and either accidental ('C#', 'Db4'), or ScaleNote
    models from get_scale_notes. Invalid names raise ValueError.
    """
    return pitch.chroma_set(scale_notes)


def voicing_in_scale(voicing: ChordVoicing, chromas: Set[int]) -> bool:
    return all(pitch.chroma(n) in chromas for n in voicing.notes)


def filter_by_scale(voicings: Iterable[ChordVoicing], scale_notes: Iterable[Union[str, ScaleNote]]) -> List[ChordVoicing]:
    chromas = scale_chromas(scale_notes)
    return [v for v in voicings if voicing_in_scale(v, chromas)]


def filter_by_position(voicings: Iterable[ChordVoicing], position: int) -> List[ChordVoicing]:
    return [v for v in voicings if v.position == position]


def dedupe_voicings(voicings: Iterable[ChordVoicing]) -> List[ChordVoicing]:
    """Drop repeated hole/breath combinations, keeping the first, then sort."""
    unique: Dict[str, ChordVoicing] = {}
    for v in voicings:
        unique.setdefault(v.chord_key, v)
    return sorted(unique.values(), key=voicing_sort_key)


def group_chords_by_name(voicings: Iterable[ChordVoicing]) -> List[ChordGroup]:
    """
    Bucket voicings by short name.

    Groups keep the order in which their first voicing appears once the
    input is sorted; every group starts at current_index=0.
    """
    buckets: Dict[str, List[ChordVoicing]] = {}
    for v in sorted(voicings, key=voicing_sort_key):
        buckets.setdefault(v.short_name, []).append(v)

    return [
        ChordGroup(name=name, quality=items[0].quality, voicings=tuple(items), current_index=0)
        for name, items in buckets.items()
    ]
