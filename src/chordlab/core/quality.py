"""
Chord quality primitives - QualityTag and the interval classifier.

Chord qualities are a closed set. Every tag carries its interval stack,
its display suffix, its Roman-numeral suffix and the triad family used
when no exact guitar shape exists. The table is checked for totality at
import time so a new tag cannot be added without its data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QualityTag(str, Enum):
    """Chord quality tag."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    DOMINANT_7 = "dominant-7"
    MAJOR_7 = "maj7"
    MINOR_7 = "m7"
    HALF_DIMINISHED_7 = "m7b5"
    DIMINISHED_7 = "dim7"
    MINOR_MAJOR_7 = "m(maj7)"
    SUS2 = "sus2"
    SUS4 = "sus4"
    ADD9 = "add9"
    SIXTH = "6"
    SEVENTH_SUS4 = "7sus4"
    UNRESOLVED = "unresolved"

    @property
    def info(self) -> QualityInfo:
        """Static data for this quality."""
        return QUALITY_TABLE[self]

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitones of each chord tone above the root (root first)."""
        return self.info.intervals

    @property
    def symbol(self) -> str:
        """Suffix used in chord names (C + 'm7' = Cm7)."""
        return self.info.symbol

    @property
    def roman_suffix(self) -> str:
        """Suffix appended to a Roman numeral."""
        return self.info.roman_suffix

    @property
    def family(self) -> QualityTag:
        """Bare triad quality this tag reduces to for voicing purposes."""
        return self.info.family

    @property
    def is_seventh(self) -> bool:
        """Four-note qualities."""
        return len(self.intervals) == 4


@dataclass(frozen=True)
class QualityInfo:
    """Interval stack and spelling data for one quality."""

    intervals: tuple[int, ...]
    symbol: str
    roman_suffix: str
    family: QualityTag


QUALITY_TABLE: dict[QualityTag, QualityInfo] = {
    QualityTag.MAJOR: QualityInfo((0, 4, 7), "", "", QualityTag.MAJOR),
    QualityTag.MINOR: QualityInfo((0, 3, 7), "m", "", QualityTag.MINOR),
    QualityTag.DIMINISHED: QualityInfo((0, 3, 6), "dim", "°", QualityTag.DIMINISHED),
    QualityTag.DOMINANT_7: QualityInfo((0, 4, 7, 10), "7", "7", QualityTag.MAJOR),
    QualityTag.MAJOR_7: QualityInfo((0, 4, 7, 11), "maj7", "Maj7", QualityTag.MAJOR),
    QualityTag.MINOR_7: QualityInfo((0, 3, 7, 10), "m7", "7", QualityTag.MINOR),
    QualityTag.HALF_DIMINISHED_7: QualityInfo((0, 3, 6, 10), "m7b5", "ø", QualityTag.DIMINISHED),
    QualityTag.DIMINISHED_7: QualityInfo((0, 3, 6, 9), "dim7", "°7", QualityTag.DIMINISHED),
    QualityTag.MINOR_MAJOR_7: QualityInfo((0, 3, 7, 11), "m(maj7)", "Maj7", QualityTag.MINOR),
    QualityTag.SUS2: QualityInfo((0, 2, 7), "sus2", "sus2", QualityTag.MAJOR),
    QualityTag.SUS4: QualityInfo((0, 5, 7), "sus4", "sus4", QualityTag.MAJOR),
    QualityTag.ADD9: QualityInfo((0, 4, 7, 2), "add9", "add9", QualityTag.MAJOR),
    QualityTag.SIXTH: QualityInfo((0, 4, 7, 9), "6", "6", QualityTag.MAJOR),
    QualityTag.SEVENTH_SUS4: QualityInfo((0, 5, 7, 10), "7sus4", "7sus4", QualityTag.MAJOR),
    # Intervals are unknown; tone sets come from the scale that produced it
    QualityTag.UNRESOLVED: QualityInfo((), "?", "?", QualityTag.MAJOR),
}

if set(QUALITY_TABLE) != set(QualityTag):
    raise RuntimeError("QUALITY_TABLE must define every QualityTag")


# (third, fifth, seventh) -> quality
_SEVENTH_CHORDS: dict[tuple[int, int, int], QualityTag] = {
    (4, 7, 11): QualityTag.MAJOR_7,
    (4, 7, 10): QualityTag.DOMINANT_7,
    (3, 7, 10): QualityTag.MINOR_7,
    (3, 7, 11): QualityTag.MINOR_MAJOR_7,
    (3, 6, 10): QualityTag.HALF_DIMINISHED_7,
    (3, 6, 9): QualityTag.DIMINISHED_7,
}

# (third, fifth) -> quality
_TRIADS: dict[tuple[int, int], QualityTag] = {
    (4, 7): QualityTag.MAJOR,
    (3, 7): QualityTag.MINOR,
    (3, 6): QualityTag.DIMINISHED,
}


def classify(third: int, fifth: int, seventh: int | None = None) -> QualityTag:
    """
    Classify a chord from the intervals of its 3rd, 5th and optional 7th.

    Only the combinations reachable from the scale catalog are named;
    anything else (an augmented triad from harmonic minor, say) is
    UNRESOLVED and voiced with the nearest triad family.

    Args:
        third: Semitones from root to the 3rd
        fifth: Semitones from root to the 5th
        seventh: Semitones from root to the 7th, if stacked

    Returns:
        The quality tag
    """
    if seventh is None:
        return _TRIADS.get((third, fifth), QualityTag.UNRESOLVED)
    return _SEVENTH_CHORDS.get((third, fifth, seventh), QualityTag.UNRESOLVED)


def nearest_family(quality: QualityTag) -> QualityTag:
    """Bare triad quality used when a quality has no exact voicing."""
    return quality.family
