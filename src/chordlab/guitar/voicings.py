"""
Voicing synthesizer - turns (root, quality) into playable fingerings.

Output order is fixed:
    E-shape barre, A-shape barre,
    first inversion (bass on 6th string), first inversion (bass on 5th string),
    second inversion (bass on 6th string)

Entries a quality has no template for, or that would need a negative fret,
are left out. The two barre shapes always exist, so the result is never
empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chordlab.constants import VoicingShape
from chordlab.core.pitch import PitchClass
from chordlab.core.quality import QualityTag
from chordlab.guitar.shapes import (
    BARRE_SHAPES,
    INVERSION_SHAPES,
    SHAPE_ANCHORS,
    InversionTemplate,
    ShapeTemplate,
    template_quality,
)
from chordlab.guitar.tuning import fret_for_pitch, fret_pitch
from chordlab.models.chord import MUTED, Voicing

logger = logging.getLogger(__name__)

# Highest fret a shape may start above before it is folded down an octave
FOLD_THRESHOLD = 12

# Open-position shapes keep every fretted note within this many frets
OPEN_POSITION_MAX_FRET = 4


def display_base_fret(string_frets: Iterable[int]) -> int:
    """
    First fret of the rendering window.

    The lowest played fret, but never below 1, so shapes with open
    strings always render from the nut.
    """
    played = [fret for fret in string_frets if fret != MUTED]
    if not played:
        return 1
    return max(1, min(played))


def shift_shape(template: ShapeTemplate, shift: int) -> tuple[tuple[int, ...], int]:
    """
    Move a barre template up the neck.

    Returns a new fret tuple (muted strings as -1) and the effective shift.
    Shapes whose lowest fretted note lands above the 12th fret are folded
    down an octave.
    """
    shifted = [fret + shift for fret in template.frets if fret is not None]
    lowest = min(shifted)
    if lowest > FOLD_THRESHOLD and template.root_offset + shift > FOLD_THRESHOLD:
        shift -= 12

    frets = tuple(MUTED if fret is None else fret + shift for fret in template.frets)
    return frets, shift


def _barre_label(frets: tuple[int, ...], shift: int) -> str:
    fretted = [fret for fret in frets if fret > 0]
    if shift == 0 and all(fret <= OPEN_POSITION_MAX_FRET for fret in fretted):
        return "Open position"
    return f"Barre at fret {shift}"


def _conform(frets: tuple[int, ...], tones: frozenset[PitchClass]) -> tuple[int, ...]:
    """Mute any string whose pitch is not a chord tone."""
    return tuple(
        fret if fret == MUTED or fret_pitch(string_index, fret) in tones else MUTED
        for string_index, fret in enumerate(frets)
    )


def _barre_voicing(
    root: PitchClass,
    shape: VoicingShape,
    template: ShapeTemplate,
    tones: frozenset[PitchClass] | None,
) -> Voicing:
    shift = fret_for_pitch(SHAPE_ANCHORS[shape], root)
    frets, shift = shift_shape(template, shift)
    if tones is not None:
        frets = _conform(frets, tones)
    return Voicing(
        label=_barre_label(frets, shift),
        shape=shape,
        string_frets=frets,
        display_base_fret=display_base_fret(frets),
    )


def _inversion_voicing(
    root: PitchClass,
    quality: QualityTag,
    template: InversionTemplate,
) -> Voicing | None:
    bass = root.transpose(quality.intervals[template.bass_tone])
    bass_fret = fret_for_pitch(template.anchor_string, bass)
    frets = tuple(MUTED if offset is None else bass_fret + offset for offset in template.offsets)

    if any(fret < 0 for fret, offset in zip(frets, template.offsets) if offset is not None):
        logger.debug(
            "Omitting %s of %s%s: needs a negative fret",
            template.shape.value,
            root.spell(),
            quality.symbol,
        )
        return None

    ordinal = "1st" if template.shape == VoicingShape.FIRST_INVERSION else "2nd"
    return Voicing(
        label=(
            f"{ordinal} inversion {root.spell()}{quality.symbol}/{bass.spell()} "
            f"(bass on string {template.string_number})"
        ),
        shape=template.shape,
        string_frets=frets,
        display_base_fret=display_base_fret(frets),
    )


def synthesize_voicings(
    root: PitchClass | str,
    quality: QualityTag | str,
    tones: Iterable[PitchClass] | None = None,
) -> list[Voicing]:
    """
    Build the playable voicings for a chord.

    Args:
        root: Chord root
        quality: Chord quality tag (or its value, e.g. 'm7')
        tones: Chord tones. Only used when the quality has no exact shape:
            strings of the fallback shape that sound anything else are muted.

    Returns:
        Non-empty list of voicings in the fixed order
    """
    root = PitchClass.parse(root)
    quality = QualityTag(quality)
    shape_quality = template_quality(quality)

    conform_to: frozenset[PitchClass] | None = None
    if shape_quality != quality:
        logger.debug("No exact shape for %s, voicing as %s", quality.value, shape_quality.value)
        if tones is not None:
            conform_to = frozenset(tones) | {root}

    voicings = [
        _barre_voicing(root, shape, template, conform_to)
        for shape, template in BARRE_SHAPES[shape_quality].items()
    ]

    for inversion in INVERSION_SHAPES.get(quality, ()):
        voicing = _inversion_voicing(root, quality, inversion)
        if voicing is not None:
            voicings.append(voicing)

    return voicings
