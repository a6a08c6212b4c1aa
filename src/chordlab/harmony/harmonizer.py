"""
Diatonic harmonizer - stacks a chord on every scale degree.

Degree i takes scale tones i, i+2 and i+4 (wrapping within the seven
tones) as root, 3rd and 5th, and tone i+6 as the 7th candidate. The style
decides whether the 7th is kept and which degrees are forced to dominant
7ths.
"""

from __future__ import annotations

import logging

from chordlab.constants import ChordCategory, HarmonicFunction
from chordlab.core.pitch import PitchClass
from chordlab.core.quality import QualityTag, classify
from chordlab.core.scale import Scale
from chordlab.harmony.chords import (
    MAJOR_THIRD,
    degree_numeral,
    in_scale,
    make_chord,
    tones_from_intervals,
)
from chordlab.models.chord import Chord
from chordlab.models.style import StyleRules

logger = logging.getLogger(__name__)

# Degree (1-indexed) -> function
DEGREE_FUNCTIONS: dict[int, HarmonicFunction] = {
    1: HarmonicFunction.TONIC,
    2: HarmonicFunction.SUBDOMINANT,
    3: HarmonicFunction.TONIC,
    4: HarmonicFunction.SUBDOMINANT,
    5: HarmonicFunction.DOMINANT,
    6: HarmonicFunction.TONIC,
    7: HarmonicFunction.DOMINANT,
}

# Modes that pin functions explicitly, on top of the degree table
MODE_FUNCTION_OVERRIDES: dict[str, dict[int, HarmonicFunction]] = {
    "Mixolydian": {
        4: HarmonicFunction.SUBDOMINANT,
        5: HarmonicFunction.DOMINANT,
    },
}


def harmonic_function(degree: int, scale: Scale, rules: StyleRules) -> HarmonicFunction:
    """Function of a 1-indexed degree, after mode and style overrides."""
    function = DEGREE_FUNCTIONS[degree]
    function = MODE_FUNCTION_OVERRIDES.get(scale.pattern_name, {}).get(degree, function)
    return rules.function_overrides.get(degree, function)


def _stack(scale: Scale, index: int, sevenths: bool) -> tuple[QualityTag, tuple[PitchClass, ...], int]:
    """Stack thirds on a 0-based degree index. Returns quality, tones and 3rd interval."""
    root = scale.tone_at(index)
    steps = (2, 4, 6) if sevenths else (2, 4)
    intervals = [root.interval_to(scale.tone_at(index + step)) for step in steps]

    quality = classify(*intervals)
    tones = (root, *(scale.tone_at(index + step) for step in steps))
    return quality, tones, intervals[0]


def harmonize(scale: Scale, rules: StyleRules) -> list[Chord]:
    """
    Build the seven core chords of a scale.

    Args:
        scale: The active scale
        rules: Style rules (sevenths flag, forced dominant degrees, overrides)

    Returns:
        One chord per degree, in degree order
    """
    chords = []
    for index in range(7):
        degree = index + 1
        root = scale.tone_at(index)

        if rules.forces_dominant(degree):
            quality = QualityTag.DOMINANT_7
            tones = tones_from_intervals(root, quality.intervals)
            third = MAJOR_THIRD
        else:
            quality, tones, third = _stack(scale, index, rules.sevenths)

        if quality == QualityTag.UNRESOLVED:
            logger.debug("Degree %d of %s does not classify, keeping it unresolved", degree, scale)

        chords.append(
            make_chord(
                root=root,
                quality=quality,
                tones=tones,
                roman_numeral=degree_numeral(degree, third == MAJOR_THIRD) + quality.roman_suffix,
                harmonic_function=harmonic_function(degree, scale, rules),
                category=ChordCategory.CORE,
                scale_degree=degree,
                is_diatonic=in_scale(tones, scale),
            )
        )

    return chords
