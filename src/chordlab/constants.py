"""
Constants and enums for the chord engine.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum


class Style(str, Enum):
    """
    Playing style that gates how the harmonizer stacks chords.

    The concrete rules for each style live in the YAML style library.
    """

    POP = "pop"
    FOLK = "folk"
    JAZZ = "jazz"
    BLUES = "blues"

    @classmethod
    def parse(cls, value: str | Style) -> Style:
        """Parse a style from a case-insensitive name."""
        if isinstance(value, Style):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                ErrorMessages.UNKNOWN_STYLE.format(
                    style=value, valid=", ".join(s.value for s in cls)
                )
            ) from None


class HarmonicFunction(str, Enum):
    """The role a chord plays in resolving tension within a key."""

    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"
    BORROWED = "borrowed"

    @property
    def display_name(self) -> str:
        """Name shown to players (borrowed chords are the 'Stranger')."""
        return _FUNCTION_DISPLAY[self]


_FUNCTION_DISPLAY: dict[HarmonicFunction, str] = {
    HarmonicFunction.TONIC: "Home",
    HarmonicFunction.SUBDOMINANT: "Adventure",
    HarmonicFunction.DOMINANT: "Tension",
    HarmonicFunction.BORROWED: "Stranger",
}


class ChordCategory(str, Enum):
    """Which generator produced a chord."""

    CORE = "core"
    VARIATION = "variation"
    WILDCARD = "wildcard"


class TransitionKind(str, Enum):
    """How the move between two adjacent chords feels."""

    RESOLUTION = "resolution"
    TENSION_BUILD = "tension-build"
    SURPRISE = "surprise"
    NEUTRAL = "neutral"


class ScaleFamily(str, Enum):
    """Whether a mode has a major or a minor third above its root."""

    MAJOR = "major"
    MINOR = "minor"


class VoicingShape(str, Enum):
    """Template family a voicing was built from."""

    E_SHAPE = "E"
    A_SHAPE = "A"
    FIRST_INVERSION = "first-inversion"
    SECOND_INVERSION = "second-inversion"


# Seconds between successive strings when a chord is strummed
STRUM_STAGGER_SECONDS = 0.035

# Standard guitar fretboard length used for overlays
FRETBOARD_FRETS = 15


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_SCALE = "Unknown scale: '{name}'. Valid scales: {valid}."
    UNKNOWN_STYLE = "Unknown style: '{style}'. Valid styles: {valid}."
    UNKNOWN_PITCH = "Unknown pitch class: {name}"
    VOICING_OUT_OF_RANGE = "Voicing index {index} out of range (chord has {count} voicings)."
    SEQUENCE_OUT_OF_RANGE = "Sequence index {index} out of range (sequence has {count} chords)."
    PROGRESSION_NOT_FOUND = "Progression '{name}' not found."
    CHORD_NOT_IN_CATALOG = "Chord '{chord}' is not in the {key} ({style}) catalog."
    STYLE_NOT_FOUND = "Style not found: {name}"


class SuccessMessages:
    """Standardized success messages."""

    PROGRESSION_CREATED = "Created progression '{name}'."
    CHORD_ADDED = "Added {chord} to '{name}'."
    MIDI_EXPORTED = "Exported '{name}' to {path}."
