"""
Chord catalog and sequence API.

The catalog is everything a key offers: core chords, then variations, then
wildcards. It is a pure function of (root, scale, style) and is memoized;
the cached tuples hold frozen chords so they can be shared freely.

Sequences are plain lists owned by the caller. Every operation here
returns new values and leaves its inputs untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache
from uuid import uuid4

from chordlab.constants import STRUM_STAGGER_SECONDS, ChordCategory, ErrorMessages, Style
from chordlab.core.errors import IndexOutOfRange
from chordlab.core.pitch import PitchClass, SoundingNote
from chordlab.core.scale import Scale, build_scale, get_scale_type
from chordlab.guitar import tuning
from chordlab.guitar.tuning import scale_fret_positions  # noqa: F401
from chordlab.harmony.harmonizer import harmonize
from chordlab.harmony.transitions import analyze_sequence
from chordlab.harmony.variations import generate_variations
from chordlab.harmony.wildcards import generate_wildcards
from chordlab.models.chord import Chord, ProgressionContext
from chordlab.styles.loader import StyleLoader, get_default_loader

logger = logging.getLogger(__name__)

CATALOG_CACHE_SIZE = 256


# ============================================================================
# Catalog
# ============================================================================


@lru_cache(maxsize=CATALOG_CACHE_SIZE)
def _build_catalog(
    root: PitchClass,
    pattern_name: str,
    style: Style,
    loader: StyleLoader,
) -> tuple[Chord, ...]:
    logger.debug("Catalog cache miss: %s %s (%s)", root.spell(), pattern_name, style.value)

    scale = build_scale(root, pattern_name)
    rules = loader.rules_for(style)

    core = harmonize(scale, rules)
    variations = generate_variations(core, rules, scale)
    wildcards = generate_wildcards(scale)

    logger.debug(
        "Catalog for %s (%s): %d core, %d variations, %d wildcards",
        scale,
        style.value,
        len(core),
        len(variations),
        len(wildcards),
    )
    return (*core, *variations, *wildcards)


def generate_chord_catalog(
    root: PitchClass | str,
    pattern_name: str,
    style: Style | str,
    loader: StyleLoader | None = None,
) -> tuple[Chord, ...]:
    """
    Generate every chord a key offers.

    Args:
        root: Key root (PitchClass or name like 'C', 'F#', 'Bb')
        pattern_name: Registered scale name (e.g. 'Major', 'Dorian')
        style: Playing style (pop, folk, jazz, blues)
        loader: Style loader to read rules from (defaults to the built-in library)

    Returns:
        Core chords, then variations, then wildcards

    Raises:
        UnknownScale: If the pattern name is not registered
        ValueError: If the root or style is unknown
    """
    return _build_catalog(
        PitchClass.parse(root),
        get_scale_type(pattern_name).name,
        Style.parse(style),
        loader or get_default_loader(),
    )


def clear_catalog_cache() -> None:
    """Drop every memoized catalog (e.g. after editing a style file)."""
    _build_catalog.cache_clear()


def find_chord(
    chords: Sequence[Chord],
    name: str,
    category: ChordCategory | str | None = None,
) -> Chord | None:
    """
    Find a catalog chord by symbol ('Am7') or Roman numeral ('vi7').

    Symbols are matched before numerals, and earlier chords win, so a core
    chord shadows a wildcard with the same name unless a category is given.
    """
    if category is not None:
        category = ChordCategory(category)
        chords = [chord for chord in chords if chord.category == category]

    for attribute in ("display_name", "roman_numeral"):
        for chord in chords:
            if getattr(chord, attribute) == name:
                return chord
    return None


def group_by_category(chords: Sequence[Chord]) -> dict[ChordCategory, list[Chord]]:
    """Split a catalog into core, variation and wildcard groups, order preserved."""
    groups: dict[ChordCategory, list[Chord]] = {category: [] for category in ChordCategory}
    for chord in chords:
        groups[chord.category].append(chord)
    return groups


# ============================================================================
# Chords in a sequence
# ============================================================================


def clone_for_sequence(chord: Chord) -> Chord:
    """Copy a chord with a fresh identity and its first voicing selected."""
    return chord.model_copy(update={"instance_id": uuid4().hex, "active_voicing_index": 0})


def set_active_voicing(chord: Chord, index: int) -> Chord:
    """
    Select a voicing.

    Returns a new chord; the input is unchanged.

    Raises:
        IndexOutOfRange: If the index is not a valid voicing index
    """
    count = len(chord.voicings)
    if not 0 <= index < count:
        raise IndexOutOfRange(
            index,
            count,
            ErrorMessages.VOICING_OUT_OF_RANGE.format(index=index, count=count),
        )
    return chord.model_copy(update={"active_voicing_index": index})


def cycle_voicing(chord: Chord, step: int = 1) -> Chord:
    """Move the active voicing forward or back, wrapping around."""
    index = (chord.active_voicing_index + step) % len(chord.voicings)
    return chord.model_copy(update={"active_voicing_index": index})


def _check_sequence_index(sequence: Sequence[Chord], index: int) -> None:
    count = len(sequence)
    if not 0 <= index < count:
        raise IndexOutOfRange(
            index,
            count,
            ErrorMessages.SEQUENCE_OUT_OF_RANGE.format(index=index, count=count),
        )


def add_to_sequence(sequence: Sequence[Chord], chord: Chord) -> list[Chord]:
    """New sequence with a fresh copy of the chord appended."""
    return [*sequence, clone_for_sequence(chord)]


def remove_from_sequence(sequence: Sequence[Chord], index: int) -> list[Chord]:
    """
    New sequence without the chord at an index.

    Raises:
        IndexOutOfRange: If the index is not in the sequence
    """
    _check_sequence_index(sequence, index)
    return [chord for i, chord in enumerate(sequence) if i != index]


def replace_in_sequence(sequence: Sequence[Chord], index: int, chord: Chord) -> list[Chord]:
    """
    New sequence with the chord at an index replaced.

    Used to store a chord whose voicing was changed in place of its old value.

    Raises:
        IndexOutOfRange: If the index is not in the sequence
    """
    _check_sequence_index(sequence, index)
    return [chord if i == index else existing for i, existing in enumerate(sequence)]


# ============================================================================
# Collaborator contracts
# ============================================================================


def sounding_notes(chord: Chord, voicing_index: int | None = None) -> list[SoundingNote]:
    """
    Notes the sound renderer plays for a chord, low string first.

    Uses the active voicing unless an index is given. Muted strings are left out.
    """
    if voicing_index is not None:
        chord = set_active_voicing(chord, voicing_index)
    return tuning.sounding_notes(chord.active_voicing.string_frets)


def strum_notes(
    chord: Chord,
    stagger: float = STRUM_STAGGER_SECONDS,
    voicing_index: int | None = None,
) -> list[tuple[SoundingNote, float]]:
    """Sounding notes paired with strum onsets in seconds (low string first)."""
    notes = sounding_notes(chord, voicing_index)
    return [(note, i * stagger) for i, note in enumerate(notes)]


def foreign_tones(chord: Chord, scale: Scale) -> list[PitchClass]:
    """Chord tones outside the scale (what makes a wildcard sound surprising)."""
    return [tone for tone in chord.tone_set if not scale.contains(tone)]


def annotation_context(
    sequence: Sequence[Chord],
    root: PitchClass | str,
    pattern_name: str,
    style: Style | str,
) -> ProgressionContext:
    """
    Plain-data description of a sequence for a text annotator.

    Raises:
        UnknownScale: If the pattern name is not registered
    """
    scale = build_scale(root, pattern_name)
    transitions = analyze_sequence(sequence)
    return ProgressionContext(
        key=str(scale),
        style=Style.parse(style).value,
        scale_tones=scale.tone_names,
        chords=[chord.display_name for chord in sequence],
        functions=[chord.harmonic_function.display_name for chord in sequence],
        transitions=[t.label if t else None for t in transitions],
    )
