"""
Guitar layer - tuning, shape templates and voicing synthesis.

Everything here assumes a six-string guitar in standard tuning.
"""

from chordlab.guitar.shapes import (
    BARRE_SHAPES,
    INVERSION_SHAPES,
    InversionTemplate,
    ShapeTemplate,
    template_quality,
)
from chordlab.guitar.tuning import (
    STANDARD_TUNING,
    fret_note,
    fret_pitch,
    scale_fret_positions,
    sounding_notes,
)
from chordlab.guitar.voicings import display_base_fret, synthesize_voicings

__all__ = [
    # Tuning
    "STANDARD_TUNING",
    "fret_note",
    "fret_pitch",
    "scale_fret_positions",
    "sounding_notes",
    # Shapes
    "BARRE_SHAPES",
    "INVERSION_SHAPES",
    "InversionTemplate",
    "ShapeTemplate",
    "template_quality",
    # Voicings
    "display_base_fret",
    "synthesize_voicings",
]
