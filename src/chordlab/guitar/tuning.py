"""
Guitar tuning - maps strings and frets to pitches.

Strings are indexed low to high: 0 is the 6th (low E) string,
5 is the 1st (high E) string.
"""

from __future__ import annotations

from collections.abc import Sequence

from chordlab.constants import FRETBOARD_FRETS
from chordlab.core.pitch import PitchClass, SoundingNote
from chordlab.core.scale import Scale

# Standard tuning E2 A2 D3 G3 B3 E4
STANDARD_TUNING: tuple[SoundingNote, ...] = (
    SoundingNote(PitchClass.E, 2),
    SoundingNote(PitchClass.A, 2),
    SoundingNote(PitchClass.D, 3),
    SoundingNote(PitchClass.G, 3),
    SoundingNote(PitchClass.B, 3),
    SoundingNote(PitchClass.E, 4),
)

# Anchor strings used by the shape templates
LOW_E_STRING = 0
A_STRING = 1


def open_pitch(string_index: int, tuning: Sequence[SoundingNote] = STANDARD_TUNING) -> PitchClass:
    """Pitch class of an open string."""
    return tuning[string_index].pitch


def fret_pitch(
    string_index: int,
    fret: int,
    tuning: Sequence[SoundingNote] = STANDARD_TUNING,
) -> PitchClass:
    """Pitch class sounded by a string stopped at a fret (0 = open)."""
    return tuning[string_index].pitch.transpose(fret)


def fret_note(
    string_index: int,
    fret: int,
    tuning: Sequence[SoundingNote] = STANDARD_TUNING,
) -> SoundingNote:
    """Pitch and octave sounded by a string stopped at a fret."""
    return SoundingNote.from_midi(tuning[string_index].midi + fret)


def fret_for_pitch(
    string_index: int,
    pitch: PitchClass,
    tuning: Sequence[SoundingNote] = STANDARD_TUNING,
) -> int:
    """Lowest fret (0-11) on a string that sounds a pitch class."""
    return tuning[string_index].pitch.interval_to(pitch)


def sounding_notes(
    string_frets: Sequence[int],
    tuning: Sequence[SoundingNote] = STANDARD_TUNING,
) -> list[SoundingNote]:
    """
    Notes a fingering sounds, low string first.

    Muted strings (-1) are skipped. Octaves follow the open string's octave
    plus the fret offset, so B3 fretted once gives C4.
    """
    return [
        fret_note(string_index, fret, tuning)
        for string_index, fret in enumerate(string_frets)
        if fret >= 0
    ]


def scale_fret_positions(
    scale: Scale,
    frets: int = FRETBOARD_FRETS,
    tuning: Sequence[SoundingNote] = STANDARD_TUNING,
) -> list[list[int]]:
    """
    Frets (0..frets inclusive) on each string whose pitch is in the scale.

    Used to overlay the scale's safe notes on a fretboard.
    """
    tones = set(scale.tones)
    return [
        [fret for fret in range(frets + 1) if fret_pitch(string_index, fret, tuning) in tones]
        for string_index in range(len(tuning))
    ]
