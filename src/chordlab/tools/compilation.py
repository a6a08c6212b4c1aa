"""
Compilation tools - MCP tools for MIDI export.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chordlab.compiler import progression_to_midi
from chordlab.constants import SuccessMessages
from chordlab.core.errors import ChordLabError
from chordlab.progression import ProgressionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_compilation_tools(
    mcp: ChukMCPServer,
    manager: ProgressionManager,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The progression manager
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_export_midi(
        name: str,
        output_name: str | None = None,
        tempo: int = 60,
        beats_per_chord: float = 1,
    ) -> str:
        """
        Export a progression as a strummed MIDI file.

        Each chord plays its selected voicing, strings struck low to high.

        Args:
            name: Progression name
            output_name: Optional output filename (without .mid extension)
            tempo: Tempo in BPM (default: 60, one chord per second)
            beats_per_chord: How many beats each chord rings (default: 1)

        Returns:
            JSON string with the file path

        Example:
            chord_export_midi(name="verse", tempo=90, beats_per_chord=4)
        """
        try:
            progression = await manager.require(name)
            if not progression.chords:
                return json.dumps(
                    {"status": "error", "message": f"Progression '{name}' has no chords."}
                )

            midi = progression_to_midi(
                progression.chords,
                tempo_bpm=tempo,
                beats_per_chord=beats_per_chord,
            )

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name or name}.mid"
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": len(progression.chords),
                    "message": SuccessMessages.MIDI_EXPORTED.format(name=name, path=output_path),
                }
            )
        except (ChordLabError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_export_midi"] = chord_export_midi

    return tools
