"""
Harmony layer - generators that turn a scale into chords.

- harmonize: one core chord per scale degree
- generate_variations: sus/add9/6/7sus4 siblings
- generate_wildcards: borrowed chords from parallel modes
- classify_transition: how adjacent chords move
"""

from chordlab.harmony.harmonizer import DEGREE_FUNCTIONS, harmonic_function, harmonize
from chordlab.harmony.transitions import analyze_sequence, classify_transition
from chordlab.harmony.variations import generate_variations, sibling_qualities
from chordlab.harmony.wildcards import BORROWINGS, Borrowing, generate_wildcards

__all__ = [
    # Harmonizer
    "DEGREE_FUNCTIONS",
    "harmonic_function",
    "harmonize",
    # Variations
    "generate_variations",
    "sibling_qualities",
    # Wildcards
    "BORROWINGS",
    "Borrowing",
    "generate_wildcards",
    # Transitions
    "analyze_sequence",
    "classify_transition",
]
