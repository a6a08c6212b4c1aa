"""
Progression model - a user's chord sequence in a key.

A Progression binds a sequence to the key and style its chords came from,
so the host can look chords up in the right catalog and describe the
result to an annotator. Chords in the sequence are frozen; the sequence
itself is replaced wholesale on every edit.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chordlab.constants import Style
from chordlab.core.pitch import PitchClass
from chordlab.core.scale import Scale, build_scale, get_scale_type
from chordlab.models.chord import Chord


class Progression(BaseModel):
    """A named chord sequence in a key and style."""

    name: str = Field(..., description="Progression name")
    root: PitchClass = Field(..., description="Key root")
    pattern_name: str = Field("Major", description="Registered scale name")
    style: Style = Field(Style.POP, description="Playing style")
    chords: list[Chord] = Field(default_factory=list)

    created: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are non-empty."""
        if not v.strip():
            raise ValueError("Progression name cannot be empty")
        return v

    @field_validator("root", mode="before")
    @classmethod
    def parse_root(cls, v: Any) -> PitchClass:
        """Accept pitch names like 'F#' or 'Bb'."""
        return PitchClass.parse(v) if isinstance(v, str) else v

    @field_validator("pattern_name")
    @classmethod
    def canonical_pattern(cls, v: str) -> str:
        """Store the registered spelling of the scale name."""
        return get_scale_type(v).name

    @field_validator("style", mode="before")
    @classmethod
    def parse_style(cls, v: Any) -> Style:
        """Accept case-insensitive style names."""
        return Style.parse(v)

    @property
    def scale(self) -> Scale:
        """The progression's scale."""
        return build_scale(self.root, self.pattern_name)

    @property
    def key_name(self) -> str:
        """Key name, e.g. 'A Natural Minor'."""
        return str(self.scale)

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable summary."""
        return {
            "name": self.name,
            "key": self.key_name,
            "root": self.root.spell(),
            "scale": self.pattern_name,
            "style": self.style.value,
            "scale_tones": self.scale.tone_names,
            "chords": [chord.to_dict(include_voicings=False) for chord in self.chords],
        }
