"""
Scale primitives - ScaleType, Scale and the scale catalog.

Scales are interval patterns from a root. A Scale is a scale type applied
to a root pitch; it is immutable and rebuilt whenever key or mode changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chordlab.constants import ErrorMessages, ScaleFamily
from chordlab.core.errors import UnknownScale
from chordlab.core.pitch import PitchClass


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its step pattern.

    The steps are from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    name: str
    steps: tuple[int, ...]

    # Registry of every named pattern (filled after class definition)
    REGISTRY: ClassVar[dict[str, ScaleType]]

    def __post_init__(self) -> None:
        if len(self.steps) != 7:
            raise ValueError(f"Scale must have 7 steps, got {len(self.steps)}")
        total = sum(self.steps)
        if total != 12:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")

    @property
    def offsets(self) -> tuple[int, ...]:
        """
        Cumulative semitone offsets of the 7 degrees from the root.

        Major: (0, 2, 4, 5, 7, 9, 11)
        """
        offsets = [0]
        for step in self.steps[:-1]:  # Last step returns to the octave
            offsets.append(offsets[-1] + step)
        return tuple(offsets)

    @property
    def family(self) -> ScaleFamily:
        """Major-family modes have a major third above the root."""
        return ScaleFamily.MAJOR if self.offsets[2] == 4 else ScaleFamily.MINOR

    def __str__(self) -> str:
        return self.name


ScaleType.REGISTRY = {
    scale.name: scale
    for scale in (
        ScaleType("Major", (2, 2, 1, 2, 2, 2, 1)),
        ScaleType("Natural Minor", (2, 1, 2, 2, 1, 2, 2)),
        ScaleType("Harmonic Minor", (2, 1, 2, 2, 1, 3, 1)),
        ScaleType("Melodic Minor", (2, 1, 2, 2, 2, 2, 1)),
        ScaleType("Dorian", (2, 1, 2, 2, 2, 1, 2)),
        ScaleType("Phrygian", (1, 2, 2, 2, 1, 2, 2)),
        ScaleType("Lydian", (2, 2, 2, 1, 2, 2, 1)),
        ScaleType("Mixolydian", (2, 2, 1, 2, 2, 1, 2)),
        ScaleType("Locrian", (1, 2, 2, 1, 2, 2, 2)),
    )
}

_ALIASES: dict[str, str] = {
    "ionian": "Major",
    "minor": "Natural Minor",
    "aeolian": "Natural Minor",
}


def _normalize(name: str) -> str:
    return " ".join(name.replace("_", " ").replace("-", " ").split()).lower()


def get_scale_type(name: str) -> ScaleType:
    """
    Look up a registered scale pattern by name.

    Matching ignores case, underscores and hyphens, so 'natural_minor',
    'Natural Minor' and 'natural-minor' are the same pattern.

    Raises:
        UnknownScale: If the name is not registered
    """
    key = _normalize(name)
    for registered, scale_type in ScaleType.REGISTRY.items():
        if _normalize(registered) == key:
            return scale_type
    if key in _ALIASES:
        return ScaleType.REGISTRY[_ALIASES[key]]
    raise UnknownScale(
        name,
        ErrorMessages.UNKNOWN_SCALE.format(name=name, valid=", ".join(ScaleType.REGISTRY)),
    )


def list_scale_names() -> list[str]:
    """Names of every registered scale pattern, in catalog order."""
    return list(ScaleType.REGISTRY)


@dataclass(frozen=True)
class Scale:
    """
    A root pitch class plus a named interval pattern.

    Examples:
        build_scale("C", "Major").tones = [C, D, E, F, G, A, B]
        build_scale("A", "Natural Minor").tones = [A, B, C, D, E, F, G]
    """

    root: PitchClass
    pattern_name: str
    intervals: tuple[int, ...]

    @property
    def tones(self) -> list[PitchClass]:
        """The 7 pitch classes of the scale, starting from the root."""
        return [self.root.transpose(offset) for offset in self.intervals]

    @property
    def tone_names(self) -> list[str]:
        """Display names of the scale tones."""
        return [tone.spell() for tone in self.tones]

    @property
    def scale_type(self) -> ScaleType:
        """The registered pattern this scale was built from."""
        return get_scale_type(self.pattern_name)

    @property
    def family(self) -> ScaleFamily:
        """Major or minor family, decided by the third degree."""
        return ScaleFamily.MAJOR if self.intervals[2] == 4 else ScaleFamily.MINOR

    def contains(self, pitch: PitchClass) -> bool:
        """Whether a pitch class belongs to the scale."""
        return pitch in self.tones

    def tone_at(self, degree_index: int) -> PitchClass:
        """Tone at a 0-based degree index, wrapping within the 7 tones."""
        return self.tones[degree_index % 7]

    def __str__(self) -> str:
        return f"{self.root.spell()} {self.pattern_name}"


def build_scale(root: PitchClass | str, pattern_name: str) -> Scale:
    """
    Build a scale from a root and a registered pattern name.

    Args:
        root: Root pitch class (or a name like 'C', 'F#', 'Bb')
        pattern_name: Registered pattern name (e.g. 'Major', 'Dorian')

    Returns:
        The immutable Scale

    Raises:
        UnknownScale: If the pattern name is not registered
    """
    scale_type = get_scale_type(pattern_name)
    return Scale(PitchClass.parse(root), scale_type.name, scale_type.offsets)
