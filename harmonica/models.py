from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from harmonica import pitch


# =========================
# Enums (Frozen)
# =========================
class HarmonicaKey(str, Enum):
    C = "C"
    Db = "Db"
    D = "D"
    Eb = "Eb"
    E = "E"
    F = "F"
    Fs = "F#"
    G = "G"
    Ab = "Ab"
    A = "A"
    Bb = "Bb"
    B = "B"

    @property
    def chroma(self) -> int:
        return pitch.chroma(self.value)


class TuningType(str, Enum):
    richter = "richter"
    paddy_richter = "paddy-richter"
    natural_minor = "natural-minor"
    country = "country"
    melody_maker = "melody-maker"


class Breath(str, Enum):
    blow = "blow"
    draw = "draw"


class ChordQuality(str, Enum):
    major = "major"
    minor = "minor"
    dominant7 = "dominant7"
    diminished = "diminished"


class ScaleType(str, Enum):
    major = "major"
    minor = "minor"
    harmonic_minor = "harmonic minor"
    melodic_minor = "melodic minor"
    dorian = "dorian"
    phrygian = "phrygian"
    lydian = "lydian"
    mixolydian = "mixolydian"
    locrian = "locrian"
    major_pentatonic = "major pentatonic"
    minor_pentatonic = "minor pentatonic"
    blues = "blues"


class NoteType(str, Enum):
    blow = "blow"
    draw = "draw"
    blow_half_bend = "blow_half_bend"
    blow_whole_bend = "blow_whole_bend"
    draw_half_bend = "draw_half_bend"
    draw_whole_bend = "draw_whole_bend"
    draw_minor_third_bend = "draw_minor_third_bend"
    overblow = "overblow"
    overdraw = "overdraw"


AVAILABLE_KEYS = list(HarmonicaKey)
TUNING_TYPES = list(TuningType)
SCALE_TYPES = list(ScaleType)

_KEY_BY_CHROMA = {k.chroma: k for k in HarmonicaKey}


# =========================
# Boundary coercion
# =========================
def ensure_key(key: Union[str, HarmonicaKey]) -> HarmonicaKey:
    """
    Accept a HarmonicaKey or its name; enharmonic spellings ('C#', 'Gb', 'A#')
    map onto the one key of that chroma.
    """
    if isinstance(key, HarmonicaKey):
        return key
    try:
        return HarmonicaKey(str(key).strip())
    except ValueError:
        pass
    try:
        if pitch.has_octave(key):
            raise ValueError(f"Harmonica key must not carry an octave: {key!r}")
        return _KEY_BY_CHROMA[pitch.chroma(key)]
    except ValueError as e:
        raise ValueError(f"Unknown harmonica key: {key!r}") from e


def ensure_tuning(tuning: Union[str, TuningType]) -> TuningType:
    if isinstance(tuning, TuningType):
        return tuning
    try:
        return TuningType(str(tuning).strip().lower().replace("_", "-"))
    except ValueError as e:
        valid = ", ".join(t.value for t in TuningType)
        raise ValueError(f"Unknown tuning: {tuning!r} (expected one of: {valid})") from e


# =========================
# Base Model Config (Frozen)
# =========================
class _ContractBaseModel(BaseModel):
    """
    - forbid extra fields
    - frozen: layouts and voicings are derived values, never edited in place
    """
    model_config = ConfigDict(extra="forbid", frozen=True)


# =========================
# Notes & layout
# =========================
class Note(_ContractBaseModel):
    """A sounding note: canonical name with octave + frequency in Hz."""
    note: str = Field(..., min_length=2, description="e.g. 'C4', 'D#5'")
    frequency: float = Field(..., gt=0.0, description="Hz, equal temperament")

    @property
    def pitch_class(self) -> str:
        return pitch.pitch_class(self.note)

    @property
    def octave(self) -> int:
        return pitch.octave_of(self.note)

    @property
    def midi(self) -> int:
        return pitch.midi(self.note)

    @property
    def chroma(self) -> int:
        return pitch.chroma(self.note)


class HoleBends(_ContractBaseModel):
    half_step_bend: Optional[Note] = None
    whole_step_bend: Optional[Note] = None
    minor_third_bend: Optional[Note] = None

    def ladder(self) -> Tuple[Note, ...]:
        """Present bends, shallowest first."""
        return tuple(
            n for n in (self.half_step_bend, self.whole_step_bend, self.minor_third_bend) if n is not None
        )


class HoleLayout(_ContractBaseModel):
    hole: int = Field(..., ge=1, le=10)
    blow: Note
    draw: Note
    blow_bends: Optional[HoleBends] = None
    draw_bends: Optional[HoleBends] = None
    overblow: Optional[Note] = None
    overdraw: Optional[Note] = None

    @property
    def interval(self) -> int:
        """Semitones from blow to draw (negative where blow is higher)."""
        return self.draw.midi - self.blow.midi

    def note_for(self, breath: Breath) -> Note:
        return self.blow if breath == Breath.blow else self.draw


class Harmonica(_ContractBaseModel):
    key: HarmonicaKey
    tuning: TuningType = TuningType.richter
    holes: Tuple[HoleLayout, ...]

    @model_validator(mode="after")
    def _validate_layout(self) -> "Harmonica":
        """
        Invariants:
        - exactly 10 holes numbered 1..10 in order
        - blow and draw frequencies strictly ascending across holes
        """
        if len(self.holes) != 10:
            raise ValueError(f"Harmonica must have 10 holes, got {len(self.holes)}")
        for idx, h in enumerate(self.holes):
            if h.hole != idx + 1:
                raise ValueError(f"Hole at index {idx} is numbered {h.hole}")
        for prev, cur in zip(self.holes, self.holes[1:]):
            if cur.blow.frequency <= prev.blow.frequency:
                raise ValueError(f"Blow notes not ascending at hole {cur.hole}")
            if cur.draw.frequency <= prev.draw.frequency:
                raise ValueError(f"Draw notes not ascending at hole {cur.hole}")
        return self

    def hole(self, number: int) -> HoleLayout:
        return self.holes[number - 1]

    def notes(self, breath: Breath) -> Tuple[Note, ...]:
        return tuple(h.note_for(breath) for h in self.holes)


# =========================
# Chords
# =========================
class TongueBlockingParams(_ContractBaseModel):
    """Window shape for split (tongue-blocked) voicings."""
    max_span: int = Field(5, ge=3, le=6, description="Outer span, lowest to highest hole inclusive")
    min_skip: int = Field(2, ge=1, le=3, description="Minimum holes blocked by the tongue")
    max_skip: int = Field(3, ge=1, le=3, description="Maximum holes blocked by the tongue")

    @model_validator(mode="after")
    def _validate_skips(self) -> "TongueBlockingParams":
        if self.min_skip > self.max_skip:
            raise ValueError("min_skip must be <= max_skip")
        return self


DEFAULT_TONGUE_BLOCKING = TongueBlockingParams()


class ChordVoicing(_ContractBaseModel):
    name: str = Field(..., min_length=1, description="Long name, e.g. 'C Major'")
    short_name: str = Field(..., min_length=1, description="e.g. 'C', 'Dm', 'G7'")
    quality: ChordQuality
    root: str = Field(..., min_length=1)
    holes: Tuple[int, ...]
    breath: Breath
    notes: Tuple[str, ...]
    position: int = Field(..., ge=1, le=12)
    roman_numeral: str = Field(..., min_length=1)
    is_consecutive: bool = True
    tuning: TuningType = TuningType.richter

    @model_validator(mode="after")
    def _validate_shape(self) -> "ChordVoicing":
        """
        - at least 3 holes, all in 1..10, strictly ascending
        - one note per hole
        - consecutive: contiguous run; split: exactly one internal gap
        """
        holes = self.holes
        if len(holes) < 3:
            raise ValueError("A chord voicing needs at least 3 holes")
        if any(h < 1 or h > 10 for h in holes):
            raise ValueError(f"Hole numbers must be within 1..10: {holes}")
        if any(b <= a for a, b in zip(holes, holes[1:])):
            raise ValueError(f"Holes must be ascending and unique: {holes}")
        if len(self.notes) != len(holes):
            raise ValueError("notes and holes must have the same length")

        gaps = [b - a - 1 for a, b in zip(holes, holes[1:]) if b - a > 1]
        if self.is_consecutive and gaps:
            raise ValueError(f"Consecutive voicing has a gap: {holes}")
        if not self.is_consecutive and len(gaps) != 1:
            raise ValueError(f"Split voicing must have exactly one gap: {holes}")
        return self

    @property
    def chord_key(self) -> str:
        """Identity of the voicing on the instrument, e.g. '1,2,3-blow'."""
        return f"{','.join(str(h) for h in self.holes)}-{self.breath.value}"

    @property
    def span(self) -> int:
        return self.holes[-1] - self.holes[0] + 1


def are_chords_same(a: Optional[ChordVoicing], b: ChordVoicing) -> bool:
    return a.chord_key == b.chord_key if a is not None else False


class ChordGroup(_ContractBaseModel):
    """Voicings sharing one short name, with a cursor for UI paging."""
    name: str = Field(..., min_length=1)
    quality: ChordQuality
    voicings: Tuple[ChordVoicing, ...]
    current_index: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _validate_cursor(self) -> "ChordGroup":
        if not self.voicings:
            raise ValueError("ChordGroup requires at least one voicing")
        if self.current_index >= len(self.voicings):
            raise ValueError(
                f"current_index {self.current_index} out of range for {len(self.voicings)} voicings"
            )
        return self

    @property
    def current_voicing(self) -> ChordVoicing:
        return self.voicings[self.current_index]

    def step(self, delta: int = 1) -> "ChordGroup":
        """Move the cursor with wrap-around; returns a new group."""
        idx = (self.current_index + delta) % len(self.voicings)
        return self.model_copy(update={"current_index": idx})


# =========================
# Scales
# =========================
class ScaleNote(_ContractBaseModel):
    note: str = Field(..., min_length=1, description="Pitch class name, no octave")
    frequency: float = Field(..., gt=0.0, description="Frequency of the note at octave 4")


class BendPlayability(_ContractBaseModel):
    is_overblow_playable: bool = False
    is_blow_half_step_playable: bool = False
    is_blow_whole_step_playable: bool = False
    is_draw_half_step_playable: bool = False
    is_draw_whole_step_playable: bool = False
    is_draw_minor_third_playable: bool = False
    is_overdraw_playable: bool = False


class HarmonicaScaleSummary(_ContractBaseModel):
    harmonica: Harmonica
    scale_notes: Tuple[str, ...]
    playable_blow_holes: Tuple[int, ...] = ()
    playable_draw_holes: Tuple[int, ...] = ()
    playable_holes: Tuple[int, ...] = ()
    all_holes: Tuple[int, ...] = ()
    missing_notes: Tuple[str, ...] = ()
