"""
harmonica.engine

Public entry points consumed by the presentation layer.

HarmonicaEngine owns its layout cache (injectable, so tests and concurrent
hosts can use their own); the module-level functions delegate to a default
engine sharing the process-wide cache.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from harmonica.chords import (
    find_consecutive_chords,
    find_tongue_blocking_chords,
)
from harmonica.config import Settings, get_settings
from harmonica.grouping import (
    filter_by_position,
    group_chords_by_name,
    scale_chromas,
    voicing_sort_key,
)
from harmonica.layout import HarmonicaCache, harmonica_cache as default_harmonica_cache
from harmonica.models import (
    ChordGroup,
    ChordVoicing,
    Harmonica,
    HarmonicaKey,
    HarmonicaScaleSummary,
    TongueBlockingParams,
    TuningType,
    ensure_key,
    ensure_tuning,
)
from harmonica.naming import get_harmonica_position, name_candidates
from harmonica.scales import ScaleInput, summarize_harmonica_scale

logger = logging.getLogger(__name__)

KeyLike = Union[str, HarmonicaKey]
TuningLike = Union[str, TuningType, None]


class HarmonicaEngine:
    """
    Layout + chord queries for one cache.

    Harmonica layouts are cached (finite domain, immutable values); voicing
    lists are rebuilt on every call since scale input is open-ended.
    """

    def __init__(
        self,
        cache: Optional[HarmonicaCache] = None,
        *,
        settings: Optional[Settings] = None,
        precompute: Optional[bool] = None,
    ) -> None:
        self._settings = settings or get_settings()
        if cache is None:
            cache = HarmonicaCache(reference_hz=self._settings.reference_hz)
        else:
            cache.set_default_reference_hz(self._settings.reference_hz)
        self.cache = cache
        if precompute is None:
            precompute = self._settings.precompute_harmonicas
        if precompute:
            self.cache.precompute()

    # ----------------------------
    # Core helpers
    # ----------------------------
    def _tuning(self, tuning: TuningLike) -> TuningType:
        if tuning is None:
            return ensure_tuning(self._settings.default_tuning)
        return ensure_tuning(tuning)

    # ----------------------------
    # Layouts
    # ----------------------------
    def get_harmonica(self, key: KeyLike, tuning: TuningLike = None) -> Harmonica:
        return self.cache.get_or_build(ensure_key(key), self._tuning(tuning))

    # ----------------------------
    # Chords
    # ----------------------------
    def get_all_chords(self, key: KeyLike, tuning: TuningLike = None) -> List[ChordVoicing]:
        """Every classified consecutive (3 or 4 hole) voicing, blow then draw."""
        harp = self.get_harmonica(key, tuning)
        return name_candidates(find_consecutive_chords(harp), harp)

    def get_scale_filtered_chords(
        self,
        key: KeyLike,
        tuning: TuningLike,
        scale_notes: ScaleInput,
    ) -> List[ChordVoicing]:
        """Consecutive voicings whose every note's chroma is in `scale_notes`."""
        harp = self.get_harmonica(key, tuning)
        allowed = scale_chromas(scale_notes)
        voicings = name_candidates(find_consecutive_chords(harp, allowed_chromas=allowed), harp)
        logger.debug("scale filter %s on %s:%s kept %d voicings", sorted(allowed), harp.key.value, harp.tuning.value, len(voicings))
        return voicings

    def get_tongue_blocking_chords(
        self,
        key: KeyLike,
        tuning: TuningLike = None,
        params: Optional[TongueBlockingParams] = None,
    ) -> List[ChordVoicing]:
        harp = self.get_harmonica(key, tuning)
        return name_candidates(find_tongue_blocking_chords(harp, params), harp)

    def get_scale_filtered_tongue_blocking_chords(
        self,
        key: KeyLike,
        tuning: TuningLike,
        scale_notes: ScaleInput,
        params: Optional[TongueBlockingParams] = None,
    ) -> List[ChordVoicing]:
        harp = self.get_harmonica(key, tuning)
        allowed = scale_chromas(scale_notes)
        return name_candidates(find_tongue_blocking_chords(harp, params, allowed_chromas=allowed), harp)

    def get_chords_by_position(self, key: KeyLike, tuning: TuningLike, position: int) -> List[ChordVoicing]:
        return filter_by_position(self.get_all_chords(key, tuning), position)

    def get_chord_by_name(
        self,
        key: KeyLike,
        tuning: TuningLike,
        short_name: str,
        *,
        include_tongue_blocking: bool = False,
    ) -> List[ChordVoicing]:
        """All voicings named `short_name` ('C', 'Dm', 'G7'), sorted for display."""
        voicings = self.get_all_chords(key, tuning)
        if include_tongue_blocking:
            voicings += self.get_tongue_blocking_chords(key, tuning)
        return sorted((v for v in voicings if v.short_name == short_name), key=voicing_sort_key)

    def group_chords_by_name(self, voicings: Iterable[ChordVoicing]) -> List[ChordGroup]:
        return group_chords_by_name(voicings)

    # ----------------------------
    # Scales
    # ----------------------------
    def summarize_scale(
        self,
        key: KeyLike,
        tuning: TuningLike,
        scale_notes: ScaleInput,
    ) -> HarmonicaScaleSummary:
        return summarize_harmonica_scale(self.get_harmonica(key, tuning), scale_notes)


# Singleton Instance
engine = HarmonicaEngine(default_harmonica_cache)


def get_harmonica(key: KeyLike, tuning: TuningLike = None) -> Harmonica:
    return engine.get_harmonica(key, tuning)


def get_all_chords(key: KeyLike, tuning: TuningLike = None) -> List[ChordVoicing]:
    return engine.get_all_chords(key, tuning)


def get_scale_filtered_chords(key: KeyLike, tuning: TuningLike, scale_notes: ScaleInput) -> List[ChordVoicing]:
    return engine.get_scale_filtered_chords(key, tuning, scale_notes)


def get_tongue_blocking_chords(
    key: KeyLike,
    tuning: TuningLike = None,
    params: Optional[TongueBlockingParams] = None,
) -> List[ChordVoicing]:
    return engine.get_tongue_blocking_chords(key, tuning, params)


def get_scale_filtered_tongue_blocking_chords(
    key: KeyLike,
    tuning: TuningLike,
    scale_notes: ScaleInput,
    params: Optional[TongueBlockingParams] = None,
) -> List[ChordVoicing]:
    return engine.get_scale_filtered_tongue_blocking_chords(key, tuning, scale_notes, params)


def get_chords_by_position(key: KeyLike, tuning: TuningLike, position: int) -> List[ChordVoicing]:
    return engine.get_chords_by_position(key, tuning, position)


def get_chord_by_name(
    key: KeyLike,
    tuning: TuningLike,
    short_name: str,
    *,
    include_tongue_blocking: bool = False,
) -> List[ChordVoicing]:
    return engine.get_chord_by_name(key, tuning, short_name, include_tongue_blocking=include_tongue_blocking)


__all__ = [
    "HarmonicaEngine",
    "engine",
    "get_harmonica",
    "get_all_chords",
    "get_scale_filtered_chords",
    "get_tongue_blocking_chords",
    "get_scale_filtered_tongue_blocking_chords",
    "get_chords_by_position",
    "get_chord_by_name",
    "group_chords_by_name",
    "get_harmonica_position",
]
