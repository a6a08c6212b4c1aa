"""
Pydantic models for the chord engine.

This module provides:
- Voicing: Playable guitar fingering
- Chord: Catalog chord with label, function and voicings
- Transition: Classification of a chord-to-chord move
- ProgressionContext: Plain data for an annotator
- Progression: A named chord sequence in a key and style
- StyleRules: Style rule bundle loaded from YAML
"""

from chordlab.models.chord import (
    MUTED,
    STRING_COUNT,
    Chord,
    ProgressionContext,
    Transition,
    Voicing,
)
from chordlab.models.progression import Progression
from chordlab.models.style import StyleMetadata, StyleRules, VariationRules

__all__ = [
    "MUTED",
    "STRING_COUNT",
    "Chord",
    "Progression",
    "ProgressionContext",
    "StyleMetadata",
    "StyleRules",
    "Transition",
    "VariationRules",
    "Voicing",
]
