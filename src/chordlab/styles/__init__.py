"""
Style system - rule bundles that gate chord stacking.

Styles don't pick chords, they decide which shapes are allowed:
triads or sevenths, forced dominants, and which variations to offer.
"""

from chordlab.styles.loader import StyleLoader, get_default_loader

__all__ = [
    "StyleLoader",
    "get_default_loader",
]
