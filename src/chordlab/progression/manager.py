"""
Progression Manager - owns user sequences for the host surface.

Progressions live in memory for the life of the server; nothing is
written to disk. Every edit goes through the catalog API, so chords are
copied on insert and never mutated.
"""

from __future__ import annotations

import logging

from chordlab.catalog import (
    add_to_sequence,
    annotation_context,
    cycle_voicing,
    find_chord,
    generate_chord_catalog,
    remove_from_sequence,
    replace_in_sequence,
    set_active_voicing,
)
from chordlab.constants import ChordCategory, ErrorMessages, Style
from chordlab.core.errors import IndexOutOfRange
from chordlab.core.pitch import PitchClass
from chordlab.core.scale import build_scale
from chordlab.harmony.transitions import analyze_sequence
from chordlab.models.chord import Chord, ProgressionContext, Transition
from chordlab.models.progression import Progression
from chordlab.styles.loader import StyleLoader, get_default_loader

logger = logging.getLogger(__name__)


class ProgressionManager:
    """
    Manages progression lifecycle.

    Progressions are keyed by name. Creating a progression with an
    existing name replaces it.
    """

    def __init__(self, style_loader: StyleLoader | None = None):
        """
        Initialize the manager.

        Args:
            style_loader: Loader for style rules (defaults to the built-in library)
        """
        self.style_loader = style_loader or get_default_loader()
        self._progressions: dict[str, Progression] = {}

    async def create(
        self,
        name: str,
        root: PitchClass | str,
        pattern_name: str = "Major",
        style: Style | str = Style.POP,
    ) -> Progression:
        """
        Create an empty progression.

        Raises:
            UnknownScale: If the scale name is not registered
            ValueError: If the root or style is unknown
        """
        scale = build_scale(root, pattern_name)
        progression = Progression(
            name=name,
            root=scale.root,
            pattern_name=scale.pattern_name,
            style=Style.parse(style),
        )
        # Fail now if the style has no rules rather than on first add
        self.style_loader.rules_for(progression.style)

        if name in self._progressions:
            logger.info("Replacing progression %s", name)
        self._progressions[name] = progression
        return progression

    async def get(self, name: str) -> Progression | None:
        """Get a progression by name."""
        return self._progressions.get(name)

    async def require(self, name: str) -> Progression:
        """
        Get a progression by name, failing if it does not exist.

        Raises:
            ValueError: If no progression has that name
        """
        progression = self._progressions.get(name)
        if progression is None:
            raise ValueError(ErrorMessages.PROGRESSION_NOT_FOUND.format(name=name))
        return progression

    async def list_progressions(self) -> list[Progression]:
        """All progressions, in creation order."""
        return list(self._progressions.values())

    async def delete(self, name: str) -> bool:
        """Delete a progression. Returns False if it did not exist."""
        return self._progressions.pop(name, None) is not None

    def catalog(self, progression: Progression) -> tuple[Chord, ...]:
        """The chord catalog for a progression's key and style."""
        return generate_chord_catalog(
            progression.root,
            progression.pattern_name,
            progression.style,
            loader=self.style_loader,
        )

    def find_chord(
        self,
        progression: Progression,
        chord: str,
        category: ChordCategory | str | None = None,
    ) -> Chord:
        """
        Look a chord up in a progression's catalog by symbol or numeral.

        Raises:
            ValueError: If no catalog chord matches
        """
        found = find_chord(self.catalog(progression), chord, category)
        if found is None:
            raise ValueError(
                ErrorMessages.CHORD_NOT_IN_CATALOG.format(
                    chord=chord, key=progression.key_name, style=progression.style.value
                )
            )
        return found

    async def add_chord(
        self,
        name: str,
        chord: str,
        category: ChordCategory | str | None = None,
    ) -> Chord:
        """Append a copy of a catalog chord. Returns the copy."""
        progression = await self.require(name)
        template = self.find_chord(progression, chord, category)
        progression.chords = add_to_sequence(progression.chords, template)
        return progression.chords[-1]

    async def remove_chord(self, name: str, index: int) -> Chord:
        """
        Remove the chord at a sequence index. Returns the removed chord.

        Raises:
            IndexOutOfRange: If the index is not in the sequence
        """
        progression = await self.require(name)
        remaining = remove_from_sequence(progression.chords, index)
        removed = progression.chords[index]
        progression.chords = remaining
        return removed

    def _chord_at(self, progression: Progression, index: int) -> Chord:
        count = len(progression.chords)
        if not 0 <= index < count:
            raise IndexOutOfRange(
                index,
                count,
                ErrorMessages.SEQUENCE_OUT_OF_RANGE.format(index=index, count=count),
            )
        return progression.chords[index]

    async def set_voicing(self, name: str, index: int, voicing_index: int) -> Chord:
        """
        Select a voicing for the chord at a sequence index.

        Raises:
            IndexOutOfRange: If either index is out of range (nothing changes)
        """
        progression = await self.require(name)
        updated = set_active_voicing(self._chord_at(progression, index), voicing_index)
        progression.chords = replace_in_sequence(progression.chords, index, updated)
        return updated

    async def cycle_voicing(self, name: str, index: int, step: int = 1) -> Chord:
        """Step the voicing of the chord at a sequence index, wrapping around."""
        progression = await self.require(name)
        updated = cycle_voicing(self._chord_at(progression, index), step)
        progression.chords = replace_in_sequence(progression.chords, index, updated)
        return updated

    async def clear(self, name: str) -> Progression:
        """Remove every chord from a progression."""
        progression = await self.require(name)
        progression.chords = []
        return progression

    async def analyze(self, name: str) -> list[Transition | None]:
        """Transition into each chord (None for the first)."""
        progression = await self.require(name)
        return analyze_sequence(progression.chords)

    async def context(self, name: str) -> ProgressionContext:
        """Plain-data description for a text annotator."""
        progression = await self.require(name)
        return annotation_context(
            progression.chords,
            progression.root,
            progression.pattern_name,
            progression.style,
        )
