"""
Transition analyzer - classifies the move between adjacent chords.

Kinds follow harmonic function:

    Dominant -> Tonic            resolution
    Tonic -> Dominant            tension-build
    Subdominant -> Dominant      tension-build
    anything -> wildcard         surprise
    otherwise                    neutral

Labels refine the kind using scale degrees where both chords have one.
The analyzer keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

from chordlab.constants import ChordCategory, HarmonicFunction, TransitionKind
from chordlab.models.chord import Chord, Transition

TONIC = HarmonicFunction.TONIC
SUBDOMINANT = HarmonicFunction.SUBDOMINANT
DOMINANT = HarmonicFunction.DOMINANT

# (kind, from degree, to degree) -> label
_DEGREE_LABELS: dict[tuple[TransitionKind, int, int], str] = {
    (TransitionKind.RESOLUTION, 5, 1): "Perfect Resolution",
    (TransitionKind.RESOLUTION, 5, 6): "Deceptive Resolution",
    (TransitionKind.TENSION_BUILD, 1, 5): "Building Tension",
    (TransitionKind.TENSION_BUILD, 2, 5): "Jazz Turn",
    (TransitionKind.NEUTRAL, 4, 1): "Plagal (Amen)",
}


def _kind(prev: Chord, curr: Chord) -> TransitionKind:
    moves = (prev.harmonic_function, curr.harmonic_function)
    if moves == (DOMINANT, TONIC):
        return TransitionKind.RESOLUTION
    if moves in ((TONIC, DOMINANT), (SUBDOMINANT, DOMINANT)):
        return TransitionKind.TENSION_BUILD
    if curr.category == ChordCategory.WILDCARD:
        return TransitionKind.SURPRISE
    return TransitionKind.NEUTRAL


def _label(kind: TransitionKind, prev: Chord, curr: Chord) -> str:
    if prev.scale_degree is not None and curr.scale_degree is not None:
        label = _DEGREE_LABELS.get((kind, prev.scale_degree, curr.scale_degree))
        if label:
            return label

    if kind == TransitionKind.RESOLUTION:
        return "Release"
    if kind == TransitionKind.TENSION_BUILD:
        return "Push" if prev.harmonic_function == SUBDOMINANT else "Building Tension"
    if kind == TransitionKind.SURPRISE:
        return "Exotic"
    if (prev.harmonic_function, curr.harmonic_function) == (TONIC, SUBDOMINANT):
        return "Departure"
    return "Movement"


def classify_transition(prev: Chord, curr: Chord) -> Transition:
    """
    Classify the move from one chord to the next.

    Order matters: V -> I resolves, I -> V builds tension.
    """
    kind = _kind(prev, curr)
    return Transition(kind=kind, label=_label(kind, prev, curr))


def analyze_sequence(sequence: Sequence[Chord]) -> list[Transition | None]:
    """Transition into each chord of a sequence; the first chord has none."""
    if not sequence:
        return []
    return [None] + [
        classify_transition(prev, curr) for prev, curr in zip(sequence, sequence[1:])
    ]
