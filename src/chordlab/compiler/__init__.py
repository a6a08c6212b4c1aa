"""
Compilation - renders chord sequences to MIDI.

The pipeline:
    Sequence (chords with active voicings)
    → strummed note onsets
    → MidiEvent list
    → MIDI file
"""

from chordlab.compiler.midi import (
    DEFAULT_TEMPO_BPM,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    progression_to_midi,
    seconds_to_ticks,
    sequence_to_events,
)

__all__ = [
    "DEFAULT_TEMPO_BPM",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "progression_to_midi",
    "seconds_to_ticks",
    "sequence_to_events",
]
