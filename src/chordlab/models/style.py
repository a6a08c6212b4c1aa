"""
Style models - rule bundles that gate how chords are stacked.

A style does not pick chords, it decides which shapes are allowed:
whether sevenths are stacked, which degrees are forced to dominant 7ths,
and which spice variations are offered.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chordlab.constants import HarmonicFunction


class VariationRules(BaseModel):
    """Which variation siblings a style offers."""

    sus: bool = Field(default=True, description="Offer sus2/sus4 siblings")
    add9: bool = Field(default=False, description="Offer add9 siblings")
    sixth: bool = Field(default=True, description="Offer 6th siblings of plain major chords")
    seventh_sus4: bool = Field(default=True, description="Offer 7sus4 siblings of dominant 7ths")

    model_config = {"frozen": True}


class StyleRules(BaseModel):
    """
    A style rule bundle.

    Loaded from the YAML style library; project styles override
    library styles with the same name.
    """

    # Metadata
    schema_version: str = Field("style/v1", alias="schema")
    name: str = Field(..., description="Style name")
    description: str = Field("", description="Style description")

    # Harmonization
    sevenths: bool = Field(
        default=False,
        description="Stack the scale's 7th on every degree",
    )
    forced_dominant_degrees: list[int] = Field(
        default_factory=list,
        description="Degrees (1-7) forced to dominant 7th regardless of the scale",
    )
    function_overrides: dict[int, HarmonicFunction] = Field(
        default_factory=dict,
        description="Degree to harmonic function overrides",
    )

    # Variations
    variations: VariationRules = Field(default_factory=VariationRules)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("forced_dominant_degrees")
    @classmethod
    def validate_degrees(cls, v: list[int]) -> list[int]:
        """Degrees are 1-7."""
        for degree in v:
            if not 1 <= degree <= 7:
                raise ValueError(f"Degree must be 1-7, got {degree}")
        return v

    @field_validator("function_overrides")
    @classmethod
    def validate_overrides(cls, v: dict[int, HarmonicFunction]) -> dict[int, HarmonicFunction]:
        """Override keys are degrees 1-7 and never borrowed."""
        for degree, function in v.items():
            if not 1 <= degree <= 7:
                raise ValueError(f"Degree must be 1-7, got {degree}")
            if function == HarmonicFunction.BORROWED:
                raise ValueError("Diatonic degrees cannot be overridden to borrowed")
        return v

    def forces_dominant(self, degree: int) -> bool:
        """Whether a 1-indexed degree is forced to a dominant 7th."""
        return degree in self.forced_dominant_degrees

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "harmony": {
                "sevenths": self.sevenths,
                "forced_dominant_degrees": list(self.forced_dominant_degrees),
                "function_overrides": {
                    degree: function.value for degree, function in self.function_overrides.items()
                },
            },
            "variations": {
                "sus": self.variations.sus,
                "add9": self.variations.add9,
                "sixth": self.variations.sixth,
                "seventh_sus4": self.variations.seventh_sus4,
            },
        }


class StyleMetadata(BaseModel):
    """Lightweight metadata for listing styles."""

    name: str
    description: str
    sevenths: bool

    model_config = {"frozen": True}

    @classmethod
    def from_style(cls, style: StyleRules) -> StyleMetadata:
        """Create metadata from a style."""
        return cls(
            name=style.name,
            description=style.description,
            sevenths=style.sevenths,
        )
