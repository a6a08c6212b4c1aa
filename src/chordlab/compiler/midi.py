"""
MIDI export - renders a chord sequence as a strummed MIDI file.

Each chord plays its active voicing; strings are struck low to high with a
fixed stagger, like a downstroke. Rendering is deterministic: the same
sequence always produces the same file.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chordlab.catalog import strum_notes
from chordlab.constants import STRUM_STAGGER_SECONDS
from chordlab.models.chord import Chord

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# One chord per second, matching the playback preview
DEFAULT_TEMPO_BPM = 60

DEFAULT_VELOCITY = 90

# General MIDI program 25: Acoustic Guitar (steel), 0-indexed
GUITAR_PROGRAM = 25


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks, absolute from the start of the track.
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def seconds_to_ticks(
    seconds: float,
    tempo_bpm: int,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> int:
    """Convert a wall-clock offset to ticks at a tempo."""
    return round(seconds * tempo_bpm / 60 * ticks_per_beat)


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
    program: int | None = GUITAR_PROGRAM,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Note events
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        program: General MIDI program for channel 0, or None to leave unset

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))
    if program is not None:
        track.append(Message("program_change", channel=0, program=program, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,
                ),
            )
        )

    # note_off before note_on at the same tick, so repeated pitches retrigger cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def sequence_to_events(
    sequence: Sequence[Chord],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    beats_per_chord: float = 1,
    stagger: float = STRUM_STAGGER_SECONDS,
    velocity: int = DEFAULT_VELOCITY,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Strum every chord of a sequence in order.

    Each string rings until the next chord starts.
    """
    chord_ticks = beats_to_ticks(beats_per_chord, ticks_per_beat)
    events = []
    for i, chord in enumerate(sequence):
        chord_start = i * chord_ticks
        for note, onset in strum_notes(chord, stagger):
            offset = min(seconds_to_ticks(onset, tempo_bpm, ticks_per_beat), chord_ticks - 1)
            events.append(
                MidiEvent(
                    pitch=note.midi,
                    start_ticks=chord_start + offset,
                    duration_ticks=chord_ticks - offset,
                    velocity=velocity,
                )
            )
    return events


def progression_to_midi(
    sequence: Sequence[Chord],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    beats_per_chord: float = 1,
    stagger: float = STRUM_STAGGER_SECONDS,
    velocity: int = DEFAULT_VELOCITY,
) -> MidiFile:
    """
    Render a chord sequence to a MidiFile.

    Args:
        sequence: Chords in play order (active voicing of each is used)
        tempo_bpm: Tempo in beats per minute
        beats_per_chord: How long each chord rings
        stagger: Seconds between successive strings of a strum
        velocity: Note velocity (0-127)

    Returns:
        A mido MidiFile ready to be saved
    """
    events = sequence_to_events(sequence, tempo_bpm, beats_per_chord, stagger, velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm)
