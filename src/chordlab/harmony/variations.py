"""
Variation generator - sus, add9, 6 and 7sus4 siblings of core chords.

Only plain major and dominant 7th chords get siblings. Each sibling keeps
its parent's root, degree and function; its numeral is the parent's bare
numeral plus the sibling's suffix (Isus4, V7sus4).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chordlab.constants import ChordCategory, HarmonicFunction
from chordlab.core.quality import QualityTag
from chordlab.core.scale import Scale
from chordlab.harmony.chords import degree_numeral, in_scale, make_chord, tones_from_intervals
from chordlab.models.chord import Chord
from chordlab.models.style import StyleRules

logger = logging.getLogger(__name__)

PARENT_QUALITIES = (QualityTag.MAJOR, QualityTag.DOMINANT_7)


def sibling_qualities(parent: QualityTag, rules: StyleRules) -> list[QualityTag]:
    """Sibling qualities a parent chord gets under a style, in emission order."""
    if parent not in PARENT_QUALITIES:
        return []

    allowed = rules.variations
    qualities = []
    if allowed.sus:
        qualities += [QualityTag.SUS4, QualityTag.SUS2]
    if allowed.add9:
        qualities.append(QualityTag.ADD9)
    if allowed.sixth and parent == QualityTag.MAJOR:
        qualities.append(QualityTag.SIXTH)
    if allowed.seventh_sus4 and parent == QualityTag.DOMINANT_7:
        qualities.append(QualityTag.SEVENTH_SUS4)
    return qualities


def _sibling(parent: Chord, quality: QualityTag, scale: Scale) -> Chord:
    tones = tones_from_intervals(parent.root, quality.intervals)
    function = (
        HarmonicFunction.DOMINANT
        if quality == QualityTag.SEVENTH_SUS4
        else parent.harmonic_function
    )
    if parent.scale_degree is not None:
        numeral = degree_numeral(parent.scale_degree, major_third=True)
    else:
        numeral = parent.roman_numeral
    return make_chord(
        root=parent.root,
        quality=quality,
        tones=tones,
        roman_numeral=numeral + quality.symbol,
        harmonic_function=function,
        category=ChordCategory.VARIATION,
        scale_degree=parent.scale_degree,
        is_diatonic=in_scale(tones, scale),
    )


def generate_variations(
    core_chords: Iterable[Chord],
    rules: StyleRules,
    scale: Scale,
) -> list[Chord]:
    """
    Emit variation siblings for every eligible core chord.

    Args:
        core_chords: Harmonizer output, in degree order
        rules: Style rules gating which siblings exist
        scale: Active scale (for the diatonic flag)

    Returns:
        Siblings grouped by parent, parents in input order
    """
    variations = []
    for parent in core_chords:
        for quality in sibling_qualities(parent.quality, rules):
            variations.append(_sibling(parent, quality, scale))

    logger.debug("Generated %d variations for %s (%s)", len(variations), scale, rules.name)
    return variations
