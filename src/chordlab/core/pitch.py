"""
Pitch primitives - PitchClass and SoundingNote.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
SoundingNote pins a pitch class to an octave so it can be played.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chordlab.constants import ErrorMessages

# Fixed display spelling (module level to avoid IntEnum member issues)
_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is fixed: every pitch class has exactly one display name,
    so transpositions never produce a name outside the 12-symbol alphabet.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> int:
        """Semitones from this pitch class up to another (0-11)."""
        return (other.value - self.value) % 12

    def spell(self) -> str:
        """Get the fixed display name."""
        return _NAMES[self.value]

    @classmethod
    def parse(cls, name: str | PitchClass) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        if isinstance(name, PitchClass):
            return name

        name = name.strip()
        if len(name) > 1:
            name = name[0].upper() + name[1:]
        elif name:
            name = name.upper()

        for names in (_NAMES, _SHARP_NAMES, _FLAT_NAMES):
            if name in names:
                return cls(names.index(name))

        # Enum member names (C, Cs, D, Ds, etc.)
        for member in cls:
            if member.name == name:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))


def index_of(pitch: PitchClass | str) -> int:
    """Chromatic index of a pitch (0-11)."""
    return PitchClass.parse(pitch).value


def transpose(pitch: PitchClass | str, semitones: int) -> PitchClass:
    """Transpose a pitch, wrapping modulo 12."""
    return PitchClass.parse(pitch).transpose(semitones)


def interval_between(a: PitchClass | str, b: PitchClass | str) -> int:
    """Non-negative forward distance from a to b in semitones (0-11)."""
    return PitchClass.parse(a).interval_to(PitchClass.parse(b))


@dataclass(frozen=True)
class SoundingNote:
    """
    A pitch class at a specific octave.

    Octave numbering follows scientific pitch notation (C4 = middle C).
    """

    pitch: PitchClass
    octave: int

    @property
    def midi(self) -> int:
        """MIDI note number. C4 = 60."""
        return self.pitch.value + (self.octave + 1) * 12

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz (A4 = 440)."""
        return 440.0 * 2 ** ((self.midi - 69) / 12)

    @classmethod
    def from_midi(cls, midi_note: int) -> SoundingNote:
        """Build from a MIDI note number."""
        return cls(PitchClass(midi_note % 12), midi_note // 12 - 1)

    def __str__(self) -> str:
        return f"{self.pitch.spell()}{self.octave}"
