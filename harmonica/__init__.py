"""
harp-chords: diatonic harmonica layouts and chord voicings.
"""

from .models import (
    AVAILABLE_KEYS,
    DEFAULT_TONGUE_BLOCKING,
    SCALE_TYPES,
    TUNING_TYPES,
    Breath,
    ChordGroup,
    ChordQuality,
    ChordVoicing,
    Harmonica,
    HarmonicaKey,
    HoleBends,
    HoleLayout,
    Note,
    NoteType,
    ScaleType,
    TongueBlockingParams,
    TuningType,
)
from .layout import HarmonicaCache, build_harmonica
from .naming import get_harmonica_position
from .grouping import group_chords_by_name
from .scales import get_scale_notes, is_note_in_scale
from .tabs import get_tab_notation
from .engine import (
    HarmonicaEngine,
    get_all_chords,
    get_chord_by_name,
    get_chords_by_position,
    get_harmonica,
    get_scale_filtered_chords,
    get_scale_filtered_tongue_blocking_chords,
    get_tongue_blocking_chords,
)

__all__ = [
    # Models
    "AVAILABLE_KEYS",
    "DEFAULT_TONGUE_BLOCKING",
    "SCALE_TYPES",
    "TUNING_TYPES",
    "Breath",
    "ChordGroup",
    "ChordQuality",
    "ChordVoicing",
    "Harmonica",
    "HarmonicaKey",
    "HoleBends",
    "HoleLayout",
    "Note",
    "NoteType",
    "ScaleType",
    "TongueBlockingParams",
    "TuningType",
    # Layout
    "HarmonicaCache",
    "build_harmonica",
    # Naming / grouping / scales / tabs
    "get_harmonica_position",
    "group_chords_by_name",
    "get_scale_notes",
    "is_note_in_scale",
    "get_tab_notation",
    # Engine
    "HarmonicaEngine",
    "get_all_chords",
    "get_chord_by_name",
    "get_chords_by_position",
    "get_harmonica",
    "get_scale_filtered_chords",
    "get_scale_filtered_tongue_blocking_chords",
    "get_tongue_blocking_chords",
]
