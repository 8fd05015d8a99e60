"""
harmonica.chords

Chord search over hole windows.

For each breath direction separately:
  - consecutive windows of 3 and 4 holes
  - split (tongue-blocking) windows: one internal run of blocked holes
Each window's notes are reduced to a pitch-class set and matched against
QUALITY_PATTERNS under every rotation, so inversions resolve to one chord.
Windows that match nothing are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from harmonica import pitch
from harmonica.models import (
    DEFAULT_TONGUE_BLOCKING,
    Breath,
    ChordQuality,
    Harmonica,
    TongueBlockingParams,
)

logger = logging.getLogger(__name__)

HOLE_COUNT = 10
CONSECUTIVE_SIZES = (3, 4)
MIN_SOUNDED, MAX_SOUNDED = 3, 4

# Priority order matters: first match wins
QUALITY_PATTERNS: Tuple[Tuple[ChordQuality, FrozenSet[int]], ...] = (
    (ChordQuality.major, frozenset({0, 4, 7})),
    (ChordQuality.minor, frozenset({0, 3, 7})),
    (ChordQuality.dominant7, frozenset({0, 4, 7, 10})),
    (ChordQuality.diminished, frozenset({0, 3, 6})),
)


@dataclass(frozen=True)
class ChordCandidate:
    """A classified, not yet named, hole group."""
    holes: Tuple[int, ...]
    breath: Breath
    notes: Tuple[str, ...]
    quality: ChordQuality
    root_chroma: int
    is_consecutive: bool

    @property
    def root(self) -> str:
        return pitch.spell(self.root_chroma)


# ----------------------------
# Windows
# ----------------------------
def consecutive_windows(sizes: Sequence[int] = CONSECUTIVE_SIZES) -> List[Tuple[int, ...]]:
    """Every contiguous run of the given sizes inside 1..10, ordered by start then size."""
    windows = []
    for start in range(1, HOLE_COUNT + 1):
        for size in sizes:
            end = start + size - 1
            if end <= HOLE_COUNT:
                windows.append(tuple(range(start, end + 1)))
    return windows


def split_windows(params: TongueBlockingParams = DEFAULT_TONGUE_BLOCKING) -> List[Tuple[int, ...]]:
    """
    Hole groups with the two outer holes sounded and one internal run of
    min_skip..max_skip blocked holes, span <= max_span, 3-4 holes sounded.
    With the default params each window spans exactly 5 holes with a 2-hole gap.
    """
    windows = set()
    for start in range(1, HOLE_COUNT + 1):
        for span in range(3, params.max_span + 1):
            end = start + span - 1
            if end > HOLE_COUNT:
                break
            for skip in range(params.min_skip, params.max_skip + 1):
                # gap must leave at least one sounded hole on each side
                for gap_start in range(start + 1, end - skip + 1):
                    gap = range(gap_start, gap_start + skip)
                    holes = tuple(h for h in range(start, end + 1) if h not in gap)
                    if MIN_SOUNDED <= len(holes) <= MAX_SOUNDED:
                        windows.add(holes)
    return sorted(windows, key=lambda w: (w[0], w[-1], len(w), w))


# ----------------------------
# Classification
# ----------------------------
def classify(notes: Iterable[str]) -> Optional[Tuple[ChordQuality, int]]:
    """
    Return (quality, root chroma) or None.

    Each distinct chroma is tried as root, lowest sounding note first; the
    rotated interval set must equal a pattern exactly. Patterns are tried in
    QUALITY_PATTERNS order, so major beats minor beats dominant7 beats diminished.
    """
    ordered = sorted(notes, key=pitch.midi)
    roots: List[int] = []
    for n in ordered:
        c = pitch.chroma(n)
        if c not in roots:
            roots.append(c)
    pcs = set(roots)

    for quality, pattern in QUALITY_PATTERNS:
        if len(pattern) != len(pcs):
            continue
        for root in roots:
            if {(c - root) % 12 for c in pcs} == pattern:
                return quality, root
    return None


def in_chromas(notes: Iterable[str], allowed: AbstractSet[int]) -> bool:
    return all(pitch.chroma(n) in allowed for n in notes)


# ----------------------------
# Search
# ----------------------------
def _search_windows(
    harmonica: Harmonica,
    windows: Sequence[Tuple[int, ...]],
    *,
    is_consecutive: bool,
    allowed_chromas: Optional[AbstractSet[int]] = None,
) -> List[ChordCandidate]:
    found: List[ChordCandidate] = []
    dropped = 0
    for breath in (Breath.blow, Breath.draw):
        row = harmonica.notes(breath)
        for holes in windows:
            notes = tuple(row[h - 1].note for h in holes)
            match = classify(notes)
            if match is None:
                dropped += 1
                continue
            if allowed_chromas is not None and not in_chromas(notes, allowed_chromas):
                continue
            quality, root = match
            found.append(
                ChordCandidate(
                    holes=holes,
                    breath=breath,
                    notes=notes,
                    quality=quality,
                    root_chroma=root,
                    is_consecutive=is_consecutive,
                )
            )
    logger.debug(
        "chord search %s:%s consecutive=%s windows=%d found=%d unclassified=%d",
        harmonica.key.value,
        harmonica.tuning.value,
        is_consecutive,
        len(windows) * 2,
        len(found),
        dropped,
    )
    return found


def find_consecutive_chords(
    harmonica: Harmonica,
    allowed_chromas: Optional[AbstractSet[int]] = None,
) -> List[ChordCandidate]:
    return _search_windows(
        harmonica,
        consecutive_windows(),
        is_consecutive=True,
        allowed_chromas=allowed_chromas,
    )


def find_tongue_blocking_chords(
    harmonica: Harmonica,
    params: Optional[TongueBlockingParams] = None,
    allowed_chromas: Optional[AbstractSet[int]] = None,
) -> List[ChordCandidate]:
    return _search_windows(
        harmonica,
        split_windows(params or DEFAULT_TONGUE_BLOCKING),
        is_consecutive=False,
        allowed_chromas=allowed_chromas,
    )
