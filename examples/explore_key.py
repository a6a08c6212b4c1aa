#!/usr/bin/env python3
"""
Example: Exploring a Key.

Prints every chord a key offers in each style, with its Roman numeral,
harmonic role and first voicing, then a fretboard map of the scale.

Usage:
    python examples/explore_key.py [root] [scale]
"""

import sys

from chordlab.catalog import foreign_tones, generate_chord_catalog, group_by_category
from chordlab.constants import Style
from chordlab.core.scale import build_scale
from chordlab.guitar.tuning import scale_fret_positions


def format_frets(frets: tuple[int, ...]) -> str:
    """Render frets low to high, x for a muted string."""
    return " ".join("x" if fret < 0 else str(fret) for fret in frets)


def main() -> None:
    """Walk through a key in every style."""
    root = sys.argv[1] if len(sys.argv) > 1 else "C"
    scale_name = sys.argv[2] if len(sys.argv) > 2 else "Major"
    scale = build_scale(root, scale_name)

    print(f"Chord Lab: {scale}")
    print("=" * 40)
    print(f"Scale tones: {' '.join(scale.tone_names)}")
    print()

    for style in Style:
        catalog = generate_chord_catalog(scale.root, scale.pattern_name, style)
        print(f"{style.value.upper()} ({len(catalog)} chords)")
        for category, chords in group_by_category(catalog).items():
            if not chords:
                continue
            print(f"  {category.value}:")
            for chord in chords:
                outside = foreign_tones(chord, scale)
                note = f"  borrows {', '.join(t.spell() for t in outside)}" if outside else ""
                print(
                    f"    {chord.roman_numeral:<10} {chord.display_name:<8} "
                    f"{chord.harmonic_function.display_name:<10} "
                    f"{format_frets(chord.active_voicing.string_frets)}{note}"
                )
        print()

    print("Fretboard (frets in the scale, low E first):")
    for string_name, frets in zip(["E", "A", "D", "G", "B", "e"], scale_fret_positions(scale)):
        print(f"  {string_name}: {frets}")


if __name__ == "__main__":
    main()
