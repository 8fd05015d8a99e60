"""
harmonica.layout

Builds the ten-hole note layout for any key/tuning from the C templates in
harmonica.tunings, and owns the finite (12 keys x 5 tunings) layout cache.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Optional, Tuple, Union

from harmonica import pitch
from harmonica.config import get_settings
from harmonica.models import (
    Harmonica,
    HarmonicaKey,
    HoleBends,
    HoleLayout,
    Note,
    TuningType,
    ensure_key,
    ensure_tuning,
)
from harmonica.tunings import (
    C_START_OCTAVE,
    KEY_START_OCTAVE,
    OVERBLOW_HOLES,
    OVERDRAW_HOLES,
    get_tuning,
)

logger = logging.getLogger(__name__)

# Bend depth (semitones below the higher reed) -> minimum blow/draw gap required
_BEND_THRESHOLDS: Tuple[Tuple[str, int, int], ...] = (
    ("half_step_bend", 1, 2),
    ("whole_step_bend", 2, 3),
    ("minor_third_bend", 3, 4),
)


# ----------------------------
# Note helpers
# ----------------------------
def make_note(name: str, reference_hz: float) -> Note:
    canonical = pitch.simplify(name)
    return Note(note=canonical, frequency=pitch.frequency(canonical, reference_hz))


def transpose_offset(key: HarmonicaKey) -> int:
    """Semitones from the C template to `key`, including the register shift."""
    key_difference = key.chroma
    octave_shift = KEY_START_OCTAVE[key] - C_START_OCTAVE
    return key_difference + 12 * octave_shift


def build_bends(base_note: str, gap: int, reference_hz: float) -> Optional[HoleBends]:
    """
    Bend ladder below `base_note` (the higher reed of the hole).
    gap < 2 -> no bends; 2 -> half step; 3 -> + whole step; >= 4 -> + minor third.
    """
    if gap < 2:
        return None
    bends: Dict[str, Note] = {}
    for field_name, depth, min_gap in _BEND_THRESHOLDS:
        if gap >= min_gap:
            bends[field_name] = make_note(pitch.transpose(base_note, -depth), reference_hz)
    return HoleBends(**bends)


def build_hole(hole_number: int, blow_name: str, draw_name: str, reference_hz: float) -> HoleLayout:
    interval = pitch.midi(draw_name) - pitch.midi(blow_name)

    draw_bends = blow_bends = overblow = overdraw = None
    if interval > 0:
        # draw reed is higher: draw bends, overblow on 1/4/5/6
        draw_bends = build_bends(draw_name, interval, reference_hz)
        if hole_number in OVERBLOW_HOLES:
            overblow = make_note(pitch.transpose(draw_name, 1), reference_hz)
    else:
        # blow reed is higher (or equal): blow bends, overdraw on 7/9/10
        blow_bends = build_bends(blow_name, abs(interval), reference_hz)
        if hole_number in OVERDRAW_HOLES:
            overdraw = make_note(pitch.transpose(blow_name, 1), reference_hz)

    return HoleLayout(
        hole=hole_number,
        blow=make_note(blow_name, reference_hz),
        draw=make_note(draw_name, reference_hz),
        blow_bends=blow_bends,
        draw_bends=draw_bends,
        overblow=overblow,
        overdraw=overdraw,
    )


def build_harmonica(
    key: Union[str, HarmonicaKey],
    tuning: Union[str, TuningType] = TuningType.richter,
    *,
    reference_hz: Optional[float] = None,
) -> Harmonica:
    """
    Create the layout for one key/tuning. Pure: no cache involved.

    1. take the C template for the tuning
    2. shift by the chromatic distance C->key plus the register shift (G..B sit an octave lower)
    3. respell sharps-preferred, then derive bends and overblows per hole
    """
    k = ensure_key(key)
    t = ensure_tuning(tuning)
    ref = float(reference_hz) if reference_hz is not None else get_settings().reference_hz

    definition = get_tuning(t)
    offset = transpose_offset(k)
    blow_notes = [pitch.transpose(n, offset) for n in definition.blow_notes]
    draw_notes = [pitch.transpose(n, offset) for n in definition.draw_notes]

    holes = [
        build_hole(idx + 1, blow, draw, ref)
        for idx, (blow, draw) in enumerate(zip(blow_notes, draw_notes))
    ]
    return Harmonica(key=k, tuning=t, holes=tuple(holes))


# ----------------------------
# Cache
# ----------------------------
def cache_key(key: HarmonicaKey, tuning: TuningType) -> str:
    return f"{key.value}:{tuning.value}"


class HarmonicaCache:
    """
    Finite layout cache keyed by "key:tuning".
    Harmonica values are frozen, so one instance can be shared by every caller.
    """

    def __init__(self, *, reference_hz: Optional[float] = None) -> None:
        self._lock = Lock()
        self._items: Dict[str, Harmonica] = {}
        self._reference_hz = reference_hz

    @property
    def reference_hz(self) -> float:
        if self._reference_hz is not None:
            return float(self._reference_hz)
        return get_settings().reference_hz

    def set_default_reference_hz(self, reference_hz: float) -> None:
        """
        Use `reference_hz` when the cache was created without one.
        Layouts already built at a different pitch are dropped.
        """
        with self._lock:
            if self._reference_hz is not None:
                return
            if self._items and get_settings().reference_hz != float(reference_hz):
                self._items.clear()
            self._reference_hz = float(reference_hz)

    def get_or_build(
        self,
        key: Union[str, HarmonicaKey],
        tuning: Union[str, TuningType] = TuningType.richter,
    ) -> Harmonica:
        k = ensure_key(key)
        t = ensure_tuning(tuning)
        ck = cache_key(k, t)
        with self._lock:
            hit = self._items.get(ck)
            if hit is not None:
                return hit
            harp = build_harmonica(k, t, reference_hz=self.reference_hz)
            self._items[ck] = harp
            logger.debug("built harmonica layout %s", ck)
            return harp

    def precompute(self) -> int:
        """Build every key/tuning combination; returns the number of cached layouts."""
        for k in HarmonicaKey:
            for t in TuningType:
                self.get_or_build(k, t)
        with self._lock:
            n = len(self._items)
        logger.info("🎵 precomputed %d harmonica layouts", n)
        return n

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items


# Singleton Instance
harmonica_cache = HarmonicaCache()
