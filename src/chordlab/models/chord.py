"""
Chord models - the values handed to the presentation layer.

Voicing: one playable fingering on a six-string guitar
Chord: a catalog chord with its label, function and voicings
Transition: how the move between two adjacent chords feels

Every model is frozen. Changing the active voicing or placing a chord in a
sequence always produces a new value, so previously rendered views keep
pointing at unchanged data.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chordlab.constants import (
    ChordCategory,
    HarmonicFunction,
    TransitionKind,
    VoicingShape,
)
from chordlab.core.pitch import PitchClass
from chordlab.core.quality import QualityTag

MUTED = -1
STRING_COUNT = 6


class Voicing(BaseModel):
    """
    A fret/string fingering for a chord.

    String order is low to high: index 0 is the 6th (low E) string.
    """

    label: str = Field(..., description="Human label, e.g. 'Open position', 'Barre at fret 5'")
    shape: VoicingShape = Field(..., description="Template family the voicing came from")
    string_frets: tuple[int, ...] = Field(
        ..., description="Fret per string: -1 muted, 0 open, 1+ fretted"
    )
    display_base_fret: int = Field(1, ge=1, description="First fret of the rendering window")

    model_config = {"frozen": True}

    @field_validator("string_frets")
    @classmethod
    def validate_string_frets(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Six strings, nothing below muted, at least one string sounding."""
        if len(v) != STRING_COUNT:
            raise ValueError(f"Voicing needs {STRING_COUNT} strings, got {len(v)}")
        if any(fret < MUTED for fret in v):
            raise ValueError(f"Invalid fret in {v}")
        if all(fret == MUTED for fret in v):
            raise ValueError("Voicing must sound at least one string")
        return v

    @property
    def sounding_strings(self) -> list[int]:
        """Indices of strings that are played."""
        return [i for i, fret in enumerate(self.string_frets) if fret != MUTED]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "label": self.label,
            "shape": self.shape.value,
            "string_frets": list(self.string_frets),
            "display_base_fret": self.display_base_fret,
        }


class Chord(BaseModel):
    """
    A chord in the catalog, or a copy of one placed in a sequence.

    Catalog templates have no instance_id; each sequence copy gets its own,
    so two copies of the same chord stay distinguishable.
    """

    root: PitchClass
    quality: QualityTag
    display_name: str = Field(..., description="Chord symbol, e.g. 'Am7'")
    roman_numeral: str = Field(..., description="Roman numeral relative to the key")
    harmonic_function: HarmonicFunction
    tone_set: tuple[PitchClass, ...] = Field(
        ..., description="Chord tones, root first (3 or 4 tones)"
    )
    scale_degree: int | None = Field(None, ge=1, le=7, description="1-7, None if non-diatonic")
    is_diatonic: bool
    category: ChordCategory
    voicings: tuple[Voicing, ...] = Field(..., min_length=1)
    active_voicing_index: int = Field(0, ge=0)
    instance_id: str | None = Field(None, description="Identity of a sequence copy")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_chord(self) -> Chord:
        """Tone count matches the quality and the voicing index is in range."""
        if not self.tone_set or self.tone_set[0] != self.root:
            raise ValueError(f"tone_set must start with the root {self.root.spell()}")

        expected = len(self.quality.intervals)
        count = len(self.tone_set)
        if self.quality == QualityTag.UNRESOLVED:
            if count not in (3, 4):
                raise ValueError(f"Unresolved chord must have 3 or 4 tones, got {count}")
        elif count != expected:
            raise ValueError(f"{self.quality.value} chord needs {expected} tones, got {count}")

        if self.active_voicing_index >= len(self.voicings):
            raise ValueError(
                f"active_voicing_index {self.active_voicing_index} out of range "
                f"({len(self.voicings)} voicings)"
            )
        return self

    @property
    def active_voicing(self) -> Voicing:
        """The currently selected voicing."""
        return self.voicings[self.active_voicing_index]

    @property
    def tone_names(self) -> list[str]:
        """Display names of the chord tones."""
        return [tone.spell() for tone in self.tone_set]

    def to_dict(self, include_voicings: bool = True) -> dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Pitch classes are spelled; the borrowed function shows as its display name too.
        """
        data: dict[str, Any] = {
            "name": self.display_name,
            "root": self.root.spell(),
            "quality": self.quality.value,
            "roman_numeral": self.roman_numeral,
            "function": self.harmonic_function.value,
            "function_label": self.harmonic_function.display_name,
            "tones": self.tone_names,
            "scale_degree": self.scale_degree,
            "is_diatonic": self.is_diatonic,
            "category": self.category.value,
            "active_voicing_index": self.active_voicing_index,
        }
        if self.instance_id is not None:
            data["instance_id"] = self.instance_id
        if include_voicings:
            data["voicings"] = [voicing.to_dict() for voicing in self.voicings]
        else:
            data["active_voicing"] = self.active_voicing.to_dict()
        return data

    def __str__(self) -> str:
        return self.display_name


class Transition(BaseModel):
    """Classification of the move from one chord to the next."""

    kind: TransitionKind
    label: str

    model_config = {"frozen": True}


class ProgressionContext(BaseModel):
    """
    Plain-data context handed to a natural-language annotator.

    The engine never writes prose; it only describes what was built.
    """

    key: str = Field(..., description="Key name, e.g. 'C Major'")
    style: str
    scale_tones: list[str]
    chords: list[str] = Field(default_factory=list, description="Chord display names in order")
    functions: list[str] = Field(default_factory=list, description="Function display names")
    transitions: list[str | None] = Field(
        default_factory=list, description="Transition label into each chord (None for the first)"
    )

    model_config = {"frozen": True}
