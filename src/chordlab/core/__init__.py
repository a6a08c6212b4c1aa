"""
Core primitives - pitch, scale and chord-quality arithmetic.

Everything above this package is built from these values:
- PitchClass: The 12 chromatic pitch classes (0-11)
- SoundingNote: A pitch class pinned to an octave
- ScaleType: Named step pattern defining a mode
- Scale: Root + scale type, resolves degrees to pitches
- QualityTag: Closed set of chord qualities with their interval stacks
"""

from chordlab.core.errors import ChordLabError, IndexOutOfRange, UnknownScale
from chordlab.core.pitch import (
    PitchClass,
    SoundingNote,
    index_of,
    interval_between,
    transpose,
)
from chordlab.core.quality import (
    QUALITY_TABLE,
    QualityInfo,
    QualityTag,
    classify,
    nearest_family,
)
from chordlab.core.scale import (
    Scale,
    ScaleType,
    build_scale,
    get_scale_type,
    list_scale_names,
)

__all__ = [
    # Errors
    "ChordLabError",
    "IndexOutOfRange",
    "UnknownScale",
    # Pitch
    "PitchClass",
    "SoundingNote",
    "index_of",
    "interval_between",
    "transpose",
    # Scale
    "Scale",
    "ScaleType",
    "build_scale",
    "get_scale_type",
    "list_scale_names",
    # Quality
    "QUALITY_TABLE",
    "QualityInfo",
    "QualityTag",
    "classify",
    "nearest_family",
]
