"""
Progression tools - MCP tools for building chord sequences.

Tools for creating progressions, adding and removing chords, choosing
voicings and reading back the transitions between chords.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chordlab.constants import SuccessMessages
from chordlab.core.errors import ChordLabError
from chordlab.progression import ProgressionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(e: Exception) -> str:
    return json.dumps({"status": "error", "message": str(e)})


def register_progression_tools(
    mcp: ChukMCPServer,
    manager: ProgressionManager,
) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The progression manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_create_progression(
        name: str,
        root: str,
        scale: str = "Major",
        style: str = "pop",
    ) -> str:
        """
        Create an empty chord progression in a key.

        Args:
            name: Unique name for the progression
            root: Key root (e.g., 'C', 'F#', 'Bb')
            scale: Scale name (default: 'Major')
            style: Playing style: pop, folk, jazz or blues (default: 'pop')

        Returns:
            JSON string with the progression

        Example:
            chord_create_progression(name="verse", root="E", scale="Major", style="folk")
        """
        try:
            progression = await manager.create(name, root, scale, style)
            return json.dumps(
                {
                    "status": "success",
                    "progression": progression.to_summary_dict(),
                    "message": SuccessMessages.PROGRESSION_CREATED.format(name=name),
                }
            )
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to create progression")
            return _error(e)

    tools["chord_create_progression"] = chord_create_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_get_progression(name: str) -> str:
        """
        Get a progression with its chords and transitions.

        Args:
            name: Progression name

        Returns:
            JSON string with the progression

        Example:
            chord_get_progression(name="verse")
        """
        try:
            progression = await manager.require(name)
            transitions = await manager.analyze(name)
            data = progression.to_summary_dict()
            data["transitions"] = [t.model_dump(mode="json") if t else None for t in transitions]
            return json.dumps({"status": "success", "progression": data})
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to get progression")
            return _error(e)

    tools["chord_get_progression"] = chord_get_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_add_to_progression(
        name: str,
        chord: str,
        category: str | None = None,
    ) -> str:
        """
        Add a chord from the key's catalog to the end of a progression.

        Chords are named by symbol ('Am', 'G7sus4') or Roman numeral ('vi', 'bVII').
        When a core chord and a wildcard share a name, the core chord is used
        unless category is given.

        Args:
            name: Progression name
            chord: Chord symbol or Roman numeral
            category: Optional category filter: core, variation or wildcard

        Returns:
            JSON string with the added chord and its transition

        Example:
            chord_add_to_progression(name="verse", chord="bVII")
        """
        try:
            added = await manager.add_chord(name, chord, category)
            transitions = await manager.analyze(name)
            transition = transitions[-1]
            return json.dumps(
                {
                    "status": "success",
                    "chord": added.to_dict(),
                    "position": len(transitions) - 1,
                    "transition": transition.model_dump(mode="json") if transition else None,
                    "message": SuccessMessages.CHORD_ADDED.format(
                        chord=added.display_name, name=name
                    ),
                }
            )
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to add chord")
            return _error(e)

    tools["chord_add_to_progression"] = chord_add_to_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_remove_from_progression(name: str, index: int) -> str:
        """
        Remove the chord at a position (0-based) from a progression.

        Args:
            name: Progression name
            index: Position of the chord to remove

        Returns:
            JSON string with the removed chord

        Example:
            chord_remove_from_progression(name="verse", index=2)
        """
        try:
            removed = await manager.remove_chord(name, index)
            progression = await manager.require(name)
            return json.dumps(
                {
                    "status": "success",
                    "removed": removed.display_name,
                    "remaining": [c.display_name for c in progression.chords],
                }
            )
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to remove chord")
            return _error(e)

    tools["chord_remove_from_progression"] = chord_remove_from_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_set_voicing(name: str, index: int, voicing_index: int) -> str:
        """
        Choose the voicing for a chord in a progression.

        Args:
            name: Progression name
            index: Position of the chord (0-based)
            voicing_index: Voicing to select (0-based)

        Returns:
            JSON string with the updated chord

        Example:
            chord_set_voicing(name="verse", index=0, voicing_index=1)
        """
        try:
            chord = await manager.set_voicing(name, index, voicing_index)
            return json.dumps({"status": "success", "chord": chord.to_dict()})
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to set voicing")
            return _error(e)

    tools["chord_set_voicing"] = chord_set_voicing

    @mcp.tool  # type: ignore[arg-type]
    async def chord_cycle_voicing(name: str, index: int, step: int = 1) -> str:
        """
        Step to the next (or previous) voicing of a chord, wrapping around.

        Args:
            name: Progression name
            index: Position of the chord (0-based)
            step: How many voicings to move (negative moves back)

        Returns:
            JSON string with the updated chord

        Example:
            chord_cycle_voicing(name="verse", index=0, step=-1)
        """
        try:
            chord = await manager.cycle_voicing(name, index, step)
            return json.dumps({"status": "success", "chord": chord.to_dict()})
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to cycle voicing")
            return _error(e)

    tools["chord_cycle_voicing"] = chord_cycle_voicing

    @mcp.tool  # type: ignore[arg-type]
    async def chord_analyze_progression(name: str) -> str:
        """
        Describe a progression for a theory lesson.

        Returns the key, chord names, their harmonic roles and the
        transition label into each chord.

        Args:
            name: Progression name

        Returns:
            JSON string with the annotation context

        Example:
            chord_analyze_progression(name="verse")
        """
        try:
            context = await manager.context(name)
            return json.dumps({"status": "success", "context": context.model_dump(mode="json")})
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to analyze progression")
            return _error(e)

    tools["chord_analyze_progression"] = chord_analyze_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chord_clear_progression(name: str) -> str:
        """
        Remove every chord from a progression.

        Args:
            name: Progression name

        Returns:
            JSON string confirming the clear

        Example:
            chord_clear_progression(name="verse")
        """
        try:
            await manager.clear(name)
            return json.dumps({"status": "success", "message": f"Cleared '{name}'."})
        except (ChordLabError, ValueError) as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to clear progression")
            return _error(e)

    tools["chord_clear_progression"] = chord_clear_progression

    return tools
