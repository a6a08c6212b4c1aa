"""
Tests for progressions and the progression manager.

Tests cover:
- Progression model parsing and validation
- ProgressionManager lifecycle
- Sequence edits through the manager
"""

import pytest
from pydantic import ValidationError

from chordlab.constants import ChordCategory, Style, TransitionKind
from chordlab.core.errors import IndexOutOfRange, UnknownScale
from chordlab.core.pitch import PitchClass
from chordlab.models.progression import Progression
from chordlab.progression import ProgressionManager
from chordlab.styles import StyleLoader


@pytest.fixture
def manager(style_loader: StyleLoader) -> ProgressionManager:
    """Manager reading the built-in styles."""
    return ProgressionManager(style_loader)


class TestProgressionModel:
    """Tests for the Progression model."""

    def test_parses_strings(self):
        """Root, scale and style accept loose spellings."""
        progression = Progression(name="verse", root="bb", pattern_name="aeolian", style="JAZZ")
        assert progression.root == PitchClass.As
        assert progression.pattern_name == "Natural Minor"
        assert progression.style == Style.JAZZ
        assert progression.key_name == "Bb Natural Minor"

    def test_empty_name(self):
        """Names cannot be blank."""
        with pytest.raises(ValidationError):
            Progression(name="  ", root="C")

    def test_summary(self):
        """Summary lists the key and an empty sequence."""
        data = Progression(name="verse", root="G").to_summary_dict()
        assert data["key"] == "G Major"
        assert data["scale_tones"] == ["G", "A", "B", "C", "D", "E", "F#"]
        assert data["chords"] == []


class TestManagerLifecycle:
    """Tests for create, get, list and delete."""

    @pytest.mark.asyncio
    async def test_create(self, manager: ProgressionManager):
        """Create an empty progression."""
        progression = await manager.create("verse", "E", "Major", "folk")
        assert progression.root == PitchClass.E
        assert progression.style == Style.FOLK
        assert await manager.get("verse") is progression

    @pytest.mark.asyncio
    async def test_create_unknown_scale(self, manager: ProgressionManager):
        """Unregistered scales raise UnknownScale."""
        with pytest.raises(UnknownScale):
            await manager.create("verse", "C", "Bebop")
        assert await manager.get("verse") is None

    @pytest.mark.asyncio
    async def test_create_unknown_style(self, manager: ProgressionManager):
        """Unknown styles raise ValueError."""
        with pytest.raises(ValueError):
            await manager.create("verse", "C", "Major", "polka")

    @pytest.mark.asyncio
    async def test_create_replaces(self, manager: ProgressionManager):
        """Creating with an existing name starts over."""
        await manager.create("verse", "C")
        await manager.add_chord("verse", "C")
        await manager.create("verse", "D")
        progression = await manager.require("verse")
        assert progression.chords == []
        assert progression.root == PitchClass.D

    @pytest.mark.asyncio
    async def test_require_missing(self, manager: ProgressionManager):
        """require fails for unknown names."""
        with pytest.raises(ValueError):
            await manager.require("nope")

    @pytest.mark.asyncio
    async def test_list_and_delete(self, manager: ProgressionManager):
        """List in creation order; delete reports whether anything went."""
        await manager.create("a", "C")
        await manager.create("b", "G")
        assert [p.name for p in await manager.list_progressions()] == ["a", "b"]
        assert await manager.delete("a") is True
        assert await manager.delete("a") is False
        assert [p.name for p in await manager.list_progressions()] == ["b"]


class TestManagerEdits:
    """Tests for editing sequences through the manager."""

    @pytest.mark.asyncio
    async def test_add_copies(self, manager: ProgressionManager):
        """Added chords are copies of catalog chords."""
        progression = await manager.create("verse", "C")
        added = await manager.add_chord("verse", "Am")
        template = manager.find_chord(progression, "Am")
        assert added.instance_id is not None
        assert template.instance_id is None
        assert added.display_name == "Am"

    @pytest.mark.asyncio
    async def test_add_by_numeral_and_category(self, manager: ProgressionManager):
        """Numerals work, and category picks wildcards over core chords."""
        await manager.create("modal", "D", "Dorian")
        await manager.add_chord("modal", "i")
        borrowed = await manager.add_chord("modal", "G", ChordCategory.WILDCARD)
        assert borrowed.category == ChordCategory.WILDCARD

    @pytest.mark.asyncio
    async def test_add_unknown_chord(self, manager: ProgressionManager):
        """Chords outside the catalog are rejected."""
        await manager.create("verse", "C")
        with pytest.raises(ValueError):
            await manager.add_chord("verse", "F#m7b5")

    @pytest.mark.asyncio
    async def test_remove(self, manager: ProgressionManager):
        """Remove returns the chord that was taken out."""
        await manager.create("verse", "C")
        for name in ("C", "F", "G"):
            await manager.add_chord("verse", name)
        removed = await manager.remove_chord("verse", 1)
        assert removed.display_name == "F"
        progression = await manager.require("verse")
        assert [c.display_name for c in progression.chords] == ["C", "G"]

    @pytest.mark.asyncio
    async def test_remove_out_of_range(self, manager: ProgressionManager):
        """Bad indices raise and leave the sequence alone."""
        await manager.create("verse", "C")
        await manager.add_chord("verse", "C")
        with pytest.raises(IndexOutOfRange):
            await manager.remove_chord("verse", 3)
        assert len((await manager.require("verse")).chords) == 1

    @pytest.mark.asyncio
    async def test_set_voicing(self, manager: ProgressionManager):
        """Voicing changes only affect one copy."""
        await manager.create("verse", "C")
        await manager.add_chord("verse", "C")
        await manager.add_chord("verse", "C")
        updated = await manager.set_voicing("verse", 1, 1)
        progression = await manager.require("verse")
        assert updated.active_voicing_index == 1
        assert progression.chords[1] == updated
        assert progression.chords[0].active_voicing_index == 0

    @pytest.mark.asyncio
    async def test_set_voicing_out_of_range(self, manager: ProgressionManager):
        """Bad voicing indices change nothing."""
        await manager.create("verse", "C")
        await manager.add_chord("verse", "C")
        with pytest.raises(IndexOutOfRange):
            await manager.set_voicing("verse", 0, 99)
        with pytest.raises(IndexOutOfRange):
            await manager.set_voicing("verse", 5, 0)
        assert (await manager.require("verse")).chords[0].active_voicing_index == 0

    @pytest.mark.asyncio
    async def test_cycle_voicing(self, manager: ProgressionManager):
        """Cycling back from the first voicing wraps to the last."""
        await manager.create("verse", "C")
        added = await manager.add_chord("verse", "C")
        cycled = await manager.cycle_voicing("verse", 0, -1)
        assert cycled.active_voicing_index == len(added.voicings) - 1
        assert cycled.instance_id == added.instance_id

    @pytest.mark.asyncio
    async def test_clear(self, manager: ProgressionManager):
        """Clear empties the sequence but keeps the key."""
        await manager.create("verse", "A", "Natural Minor")
        await manager.add_chord("verse", "Am")
        progression = await manager.clear("verse")
        assert progression.chords == []
        assert progression.key_name == "A Natural Minor"


class TestManagerAnalysis:
    """Tests for analyze and context."""

    @pytest.mark.asyncio
    async def test_analyze(self, manager: ProgressionManager):
        """Transitions line up with the chords."""
        await manager.create("verse", "C")
        for name in ("Dm", "G", "C"):
            await manager.add_chord("verse", name)
        transitions = await manager.analyze("verse")
        assert transitions[0] is None
        assert transitions[1].label == "Jazz Turn"
        assert transitions[2].kind == TransitionKind.RESOLUTION

    @pytest.mark.asyncio
    async def test_context(self, manager: ProgressionManager):
        """Context describes the whole progression."""
        await manager.create("verse", "C", "Major", "pop")
        for name in ("C", "G", "Am", "F"):
            await manager.add_chord("verse", name)
        context = await manager.context("verse")
        assert context.key == "C Major"
        assert context.chords == ["C", "G", "Am", "F"]
        assert context.transitions[2] == "Deceptive Resolution"
