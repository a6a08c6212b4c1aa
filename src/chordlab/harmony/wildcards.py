"""
Wildcard generator - borrowed chords from parallel modes.

The set depends only on the scale family, never on the style:

    Major family: bVII, bIII, iv, bVI
    Minor family: V, IV, bII (Neapolitan)
"""

from __future__ import annotations

from dataclasses import dataclass

from chordlab.constants import ChordCategory, HarmonicFunction, ScaleFamily
from chordlab.core.quality import QualityTag
from chordlab.core.scale import Scale
from chordlab.harmony.chords import make_chord, tones_from_intervals
from chordlab.models.chord import Chord


@dataclass(frozen=True)
class Borrowing:
    """A borrowed chord relative to the key root."""

    numeral: str
    offset: int  # Semitones above the key root
    quality: QualityTag


BORROWINGS: dict[ScaleFamily, tuple[Borrowing, ...]] = {
    ScaleFamily.MAJOR: (
        Borrowing("bVII", 10, QualityTag.MAJOR),
        Borrowing("bIII", 3, QualityTag.MAJOR),
        Borrowing("iv", 5, QualityTag.MINOR),
        Borrowing("bVI", 8, QualityTag.MAJOR),
    ),
    ScaleFamily.MINOR: (
        Borrowing("V", 7, QualityTag.MAJOR),
        Borrowing("IV", 5, QualityTag.MAJOR),
        Borrowing("bII", 1, QualityTag.MAJOR),
    ),
}


def generate_wildcards(scale: Scale) -> list[Chord]:
    """Borrowed chords for the scale's family, in fixed order."""
    chords = []
    for borrowing in BORROWINGS[scale.family]:
        root = scale.root.transpose(borrowing.offset)
        chords.append(
            make_chord(
                root=root,
                quality=borrowing.quality,
                tones=tones_from_intervals(root, borrowing.quality.intervals),
                roman_numeral=borrowing.numeral,
                harmonic_function=HarmonicFunction.BORROWED,
                category=ChordCategory.WILDCARD,
                scale_degree=None,
                is_diatonic=False,
            )
        )
    return chords
