"""
Chord construction helpers shared by the generators.

Every generator ends up in make_chord, so naming, diatonic checks and
voicing synthesis happen in one place.
"""

from __future__ import annotations

from collections.abc import Sequence

from chordlab.constants import ChordCategory, HarmonicFunction
from chordlab.core.pitch import PitchClass
from chordlab.core.quality import QualityTag
from chordlab.core.scale import Scale
from chordlab.guitar.voicings import synthesize_voicings
from chordlab.models.chord import Chord

ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")

MAJOR_THIRD = 4


def degree_numeral(degree: int, major_third: bool) -> str:
    """Bare Roman numeral for a 1-indexed degree, upper-case for a major 3rd."""
    numeral = ROMAN_NUMERALS[degree - 1]
    return numeral if major_third else numeral.lower()


def display_name(root: PitchClass, quality: QualityTag) -> str:
    """Chord symbol, e.g. 'Am7'."""
    return f"{root.spell()}{quality.symbol}"


def tones_from_intervals(root: PitchClass, intervals: Sequence[int]) -> tuple[PitchClass, ...]:
    """Chord tones stacked above a root, root first."""
    return tuple(root.transpose(interval) for interval in intervals)


def in_scale(tones: Sequence[PitchClass], scale: Scale) -> bool:
    """Whether every tone belongs to the scale."""
    scale_tones = set(scale.tones)
    return all(tone in scale_tones for tone in tones)


def make_chord(
    root: PitchClass,
    quality: QualityTag,
    tones: tuple[PitchClass, ...],
    roman_numeral: str,
    harmonic_function: HarmonicFunction,
    category: ChordCategory,
    scale_degree: int | None,
    is_diatonic: bool,
) -> Chord:
    """Assemble a catalog chord and attach its voicings."""
    return Chord(
        root=root,
        quality=quality,
        display_name=display_name(root, quality),
        roman_numeral=roman_numeral,
        harmonic_function=harmonic_function,
        tone_set=tones,
        scale_degree=scale_degree,
        is_diatonic=is_diatonic,
        category=category,
        voicings=tuple(synthesize_voicings(root, quality, tones)),
    )
