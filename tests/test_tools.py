"""
Tests for MCP tools.

Tests the MCP tool implementations for theory, styles, progressions,
and MIDI export.
"""

import json
from pathlib import Path

import pytest
from mido import MidiFile

from chordlab.progression import ProgressionManager
from chordlab.styles import StyleLoader


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def theory_tools(style_loader: StyleLoader):
    """Registered theory tools."""
    from chordlab.tools.theory import register_theory_tools

    return register_theory_tools(MockMCPServer("test"), style_loader)


@pytest.fixture
def progression_tools(style_loader: StyleLoader):
    """Registered progression tools and their manager."""
    from chordlab.tools.progression import register_progression_tools

    mcp = MockMCPServer("test")
    manager = ProgressionManager(style_loader)
    tools = register_progression_tools(mcp, manager)
    return tools, manager


class TestTheoryTools:
    """Tests for theory tools."""

    @pytest.mark.asyncio
    async def test_list_scales(self, theory_tools):
        """All nine scales are listed."""
        data = json.loads(await theory_tools["chord_list_scales"]())
        assert data["status"] == "success"
        assert data["count"] == 9
        assert data["scales"][0] == {
            "name": "Major",
            "steps": [2, 2, 1, 2, 2, 2, 1],
            "family": "major",
        }

    @pytest.mark.asyncio
    async def test_build_scale(self, theory_tools):
        """Build a minor scale with its fretboard overlay."""
        result = await theory_tools["chord_build_scale"](
            root="A", scale="Natural Minor", include_fretboard=True
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["tones"] == ["A", "B", "C", "D", "E", "F", "G"]
        assert data["family"] == "minor"
        assert len(data["fretboard"]) == 6
        assert data["fretboard"][0][:3] == [0, 1, 3]

    @pytest.mark.asyncio
    async def test_build_unknown_scale(self, theory_tools):
        """Unknown scales report an error."""
        data = json.loads(await theory_tools["chord_build_scale"](root="C", scale="Bebop"))
        assert data["status"] == "error"
        assert "Bebop" in data["message"]

    @pytest.mark.asyncio
    async def test_generate_catalog(self, theory_tools):
        """Catalog groups chords by category."""
        data = json.loads(await theory_tools["chord_generate_catalog"](root="C"))
        assert data["status"] == "success"
        assert data["count"] == 23
        assert [c["name"] for c in data["chords"]["core"]] == [
            "C",
            "Dm",
            "Em",
            "F",
            "G",
            "Am",
            "Bdim",
        ]
        wildcards = {c["name"]: c for c in data["chords"]["wildcard"]}
        assert wildcards["Bb"]["foreign_tones"] == ["Bb"]
        assert "active_voicing" in data["chords"]["core"][0]

    @pytest.mark.asyncio
    async def test_generate_catalog_with_voicings(self, theory_tools):
        """include_voicings returns every voicing."""
        result = await theory_tools["chord_generate_catalog"](
            root="E", style="jazz", include_voicings=True
        )
        data = json.loads(result)
        assert data["chords"]["core"][0]["name"] == "Emaj7"
        assert len(data["chords"]["core"][0]["voicings"]) >= 2

    @pytest.mark.asyncio
    async def test_generate_catalog_bad_style(self, theory_tools):
        """Unknown styles report an error."""
        data = json.loads(await theory_tools["chord_generate_catalog"](root="C", style="metal"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_get_voicings(self, theory_tools):
        """C major: two barres, an inversion on the 5th string and one on the 6th."""
        data = json.loads(await theory_tools["chord_get_voicings"](root="C", quality="major"))
        assert data["status"] == "success"
        assert data["count"] == 4
        assert data["voicings"][0]["string_frets"] == [8, 10, 10, 9, 8, 8]
        assert data["voicings"][0]["shape"] == "E"

    @pytest.mark.asyncio
    async def test_get_voicings_bad_quality(self, theory_tools):
        """Unknown qualities report an error."""
        data = json.loads(await theory_tools["chord_get_voicings"](root="C", quality="13#11"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_classify_transition(self, theory_tools):
        """G -> C is a perfect resolution."""
        result = await theory_tools["chord_classify_transition"](
            root="C", from_chord="G", to_chord="C"
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["kind"] == "resolution"
        assert data["label"] == "Perfect Resolution"

    @pytest.mark.asyncio
    async def test_classify_unknown_chord(self, theory_tools):
        """Chords outside the catalog report an error."""
        result = await theory_tools["chord_classify_transition"](
            root="C", from_chord="G", to_chord="F#"
        )
        assert json.loads(result)["status"] == "error"


class TestStyleTools:
    """Tests for style tools."""

    @pytest.mark.asyncio
    async def test_list_styles(self, style_loader: StyleLoader):
        """List styles tool."""
        from chordlab.tools.styles import register_style_tools

        tools = register_style_tools(MockMCPServer("test"), style_loader)
        data = json.loads(await tools["chord_list_styles"]())
        assert data["status"] == "success"
        assert data["count"] == 4

    @pytest.mark.asyncio
    async def test_describe_style(self, style_loader: StyleLoader):
        """Describe style returns the rules."""
        from chordlab.tools.styles import register_style_tools

        tools = register_style_tools(MockMCPServer("test"), style_loader)
        data = json.loads(await tools["chord_describe_style"](name="blues"))
        assert data["status"] == "success"
        assert data["style"]["harmony"]["forced_dominant_degrees"] == [1, 4, 5]

        missing = json.loads(await tools["chord_describe_style"](name="polka"))
        assert missing["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_style(self, style_loader: StyleLoader):
        """Copy style tool writes a project file once."""
        from chordlab.tools.styles import register_style_tools

        tools = register_style_tools(MockMCPServer("test"), style_loader)
        data = json.loads(await tools["chord_copy_style_to_project"](name="pop"))
        assert data["status"] == "success"
        assert Path(data["path"]).exists()

        again = json.loads(await tools["chord_copy_style_to_project"](name="pop"))
        assert again["status"] == "error"


class TestProgressionTools:
    """Tests for progression tools."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, progression_tools):
        """Create then get a progression."""
        tools, _ = progression_tools
        created = json.loads(
            await tools["chord_create_progression"](name="verse", root="G", style="folk")
        )
        assert created["status"] == "success"
        assert created["progression"]["key"] == "G Major"

        data = json.loads(await tools["chord_get_progression"](name="verse"))
        assert data["status"] == "success"
        assert data["progression"]["chords"] == []
        assert data["progression"]["transitions"] == []

    @pytest.mark.asyncio
    async def test_get_missing(self, progression_tools):
        """Get progression returns error for missing progression."""
        tools, _ = progression_tools
        data = json.loads(await tools["chord_get_progression"](name="nonexistent"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_create_bad_scale(self, progression_tools):
        """Create reports unknown scales."""
        tools, _ = progression_tools
        result = await tools["chord_create_progression"](name="x", root="C", scale="Bebop")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_add_reports_transition(self, progression_tools):
        """Adding a chord returns its transition from the previous chord."""
        tools, _ = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")

        first = json.loads(await tools["chord_add_to_progression"](name="verse", chord="G"))
        assert first["position"] == 0
        assert first["transition"] is None

        second = json.loads(await tools["chord_add_to_progression"](name="verse", chord="I"))
        assert second["status"] == "success"
        assert second["chord"]["name"] == "C"
        assert second["position"] == 1
        assert second["transition"] == {"kind": "resolution", "label": "Perfect Resolution"}

    @pytest.mark.asyncio
    async def test_add_unknown_chord(self, progression_tools):
        """Unknown chords report an error."""
        tools, _ = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")
        data = json.loads(await tools["chord_add_to_progression"](name="verse", chord="Zz"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_remove(self, progression_tools):
        """Remove returns the removed chord and what is left."""
        tools, _ = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")
        for chord in ("C", "F", "G"):
            await tools["chord_add_to_progression"](name="verse", chord=chord)

        data = json.loads(await tools["chord_remove_from_progression"](name="verse", index=0))
        assert data["removed"] == "C"
        assert data["remaining"] == ["F", "G"]

        bad = json.loads(await tools["chord_remove_from_progression"](name="verse", index=9))
        assert bad["status"] == "error"

    @pytest.mark.asyncio
    async def test_voicing_tools(self, progression_tools):
        """Set and cycle voicings of one chord."""
        tools, _ = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")
        await tools["chord_add_to_progression"](name="verse", chord="C")

        data = json.loads(await tools["chord_set_voicing"](name="verse", index=0, voicing_index=1))
        assert data["chord"]["active_voicing_index"] == 1

        data = json.loads(await tools["chord_cycle_voicing"](name="verse", index=0))
        assert data["chord"]["active_voicing_index"] == 2

        bad = json.loads(
            await tools["chord_set_voicing"](name="verse", index=0, voicing_index=42)
        )
        assert bad["status"] == "error"

    @pytest.mark.asyncio
    async def test_analyze(self, progression_tools):
        """Analyze returns the annotation context."""
        tools, _ = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")
        for chord in ("C", "G", "Am", "F"):
            await tools["chord_add_to_progression"](name="verse", chord=chord)

        data = json.loads(await tools["chord_analyze_progression"](name="verse"))
        assert data["status"] == "success"
        assert data["context"]["functions"] == ["Home", "Tension", "Home", "Adventure"]
        assert data["context"]["transitions"][0] is None

    @pytest.mark.asyncio
    async def test_clear(self, progression_tools):
        """Clear empties the progression."""
        tools, manager = progression_tools
        await tools["chord_create_progression"](name="verse", root="C")
        await tools["chord_add_to_progression"](name="verse", chord="C")

        data = json.loads(await tools["chord_clear_progression"](name="verse"))
        assert data["status"] == "success"
        assert (await manager.require("verse")).chords == []


class TestCompilationTools:
    """Tests for MIDI export tools."""

    @pytest.mark.asyncio
    async def test_export_midi(self, style_loader: StyleLoader, temp_dir: Path):
        """Export a progression to a MIDI file."""
        from chordlab.tools.compilation import register_compilation_tools
        from chordlab.tools.progression import register_progression_tools

        mcp = MockMCPServer("test")
        manager = ProgressionManager(style_loader)
        progression_tools = register_progression_tools(mcp, manager)
        export_tools = register_compilation_tools(mcp, manager, temp_dir / "output")

        await progression_tools["chord_create_progression"](name="verse", root="C")
        for chord in ("C", "G"):
            await progression_tools["chord_add_to_progression"](name="verse", chord=chord)

        data = json.loads(await export_tools["chord_export_midi"](name="verse", tempo=90))
        assert data["status"] == "success"
        assert data["chords"] == 2

        path = Path(data["path"])
        assert path.name == "verse.mid"
        assert MidiFile(str(path)).length > 0

    @pytest.mark.asyncio
    async def test_export_empty(self, style_loader: StyleLoader, temp_dir: Path):
        """Empty progressions cannot be exported."""
        from chordlab.tools.compilation import register_compilation_tools

        mcp = MockMCPServer("test")
        manager = ProgressionManager(style_loader)
        tools = register_compilation_tools(mcp, manager, temp_dir)

        await manager.create("verse", "C")
        data = json.loads(await tools["chord_export_midi"](name="verse"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_export_missing(self, style_loader: StyleLoader, temp_dir: Path):
        """Missing progressions report an error."""
        from chordlab.tools.compilation import register_compilation_tools

        tools = register_compilation_tools(
            MockMCPServer("test"), ProgressionManager(style_loader), temp_dir
        )
        data = json.loads(await tools["chord_export_midi"](name="nope"))
        assert data["status"] == "error"
