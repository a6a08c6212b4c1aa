#!/usr/bin/env python3
"""
Example: Building and Exporting a Progression.

Builds a four-chord progression with the ProgressionManager, picks a
different voicing for one chord, prints the transitions, and writes
a strummed MIDI file.

Usage:
    python examples/export_progression.py
"""

import asyncio
from pathlib import Path

from chordlab.compiler import progression_to_midi
from chordlab.progression import ProgressionManager


async def main() -> None:
    """Build, analyze and export a progression."""
    manager = ProgressionManager()
    progression = await manager.create("example", "G", "Major", "folk")

    for chord in ("I", "V", "vi", "bVII"):
        await manager.add_chord("example", chord)

    # Play the second chord higher up the neck
    await manager.set_voicing("example", 1, 1)

    context = await manager.context("example")
    print(f"Key: {context.key} ({context.style})")
    for chord, function, transition in zip(
        context.chords, context.functions, context.transitions, strict=True
    ):
        arrow = f"  <- {transition}" if transition else ""
        print(f"  {chord:<6} {function:<10}{arrow}")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "example_progression.mid"

    mid = progression_to_midi(progression.chords, tempo_bpm=80, beats_per_chord=4)
    mid.save(str(output_path))
    print(f"\nSaved {len(progression.chords)} chords to {output_path}")


if __name__ == "__main__":
    asyncio.run(main())
