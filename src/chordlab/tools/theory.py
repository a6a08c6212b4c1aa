"""
Theory tools - MCP tools for scales, catalogs, voicings and transitions.

These tools are stateless: every call derives its answer from
(root, scale, style) through the memoized catalog.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chordlab.catalog import find_chord, foreign_tones, generate_chord_catalog, group_by_category
from chordlab.core.errors import ChordLabError
from chordlab.core.quality import QualityTag
from chordlab.core.scale import ScaleType, build_scale
from chordlab.guitar.tuning import scale_fret_positions
from chordlab.guitar.voicings import synthesize_voicings
from chordlab.harmony.transitions import classify_transition
from chordlab.styles import StyleLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(
    mcp: ChukMCPServer,
    style_loader: StyleLoader,
) -> dict[str, Any]:
    """
    Register music-theory tools with the MCP server.

    Args:
        mcp: The MCP server instance
        style_loader: The style loader used to build catalogs

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_scales() -> str:
        """
        List the registered scales.

        Returns:
            JSON string with scale names, step patterns and families

        Example:
            chord_list_scales()
        """
        try:
            scales = [
                {
                    "name": scale_type.name,
                    "steps": list(scale_type.steps),
                    "family": scale_type.family.value,
                }
                for scale_type in ScaleType.REGISTRY.values()
            ]
            return json.dumps({"status": "success", "scales": scales, "count": len(scales)})
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_scales"] = chord_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def chord_build_scale(
        root: str,
        scale: str = "Major",
        include_fretboard: bool = False,
    ) -> str:
        """
        Build a scale from a root.

        Args:
            root: Root pitch (e.g., 'C', 'F#', 'Bb')
            scale: Scale name (e.g., 'Major', 'Dorian', 'Harmonic Minor')
            include_fretboard: Also return, per string, the frets that are in the scale

        Returns:
            JSON string with the scale's tones

        Example:
            chord_build_scale(root="A", scale="Natural Minor")
        """
        try:
            built = build_scale(root, scale)
            result: dict[str, Any] = {
                "status": "success",
                "key": str(built),
                "tones": built.tone_names,
                "intervals": list(built.intervals),
                "family": built.family.value,
            }
            if include_fretboard:
                result["fretboard"] = scale_fret_positions(built)
            return json.dumps(result)
        except (ChordLabError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_build_scale"] = chord_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def chord_generate_catalog(
        root: str,
        scale: str = "Major",
        style: str = "pop",
        include_voicings: bool = False,
    ) -> str:
        """
        Generate every chord available in a key and style.

        Chords are grouped into core (one per scale degree), variations
        (sus, add9, 6, 7sus4) and wildcards (borrowed chords).

        Args:
            root: Key root (e.g., 'C', 'F#')
            scale: Scale name (default: 'Major')
            style: Playing style: pop, folk, jazz or blues (default: 'pop')
            include_voicings: Return every voicing rather than just the first

        Returns:
            JSON string with grouped chords

        Example:
            chord_generate_catalog(root="G", scale="Mixolydian", style="blues")
        """
        try:
            built = build_scale(root, scale)
            catalog = generate_chord_catalog(built.root, scale, style, loader=style_loader)
            groups = group_by_category(catalog)

            def describe(chord):
                data = chord.to_dict(include_voicings=include_voicings)
                data["foreign_tones"] = [tone.spell() for tone in foreign_tones(chord, built)]
                return data

            return json.dumps(
                {
                    "status": "success",
                    "key": str(built),
                    "style": style.lower(),
                    "scale_tones": built.tone_names,
                    "chords": {
                        category.value: [describe(chord) for chord in chords]
                        for category, chords in groups.items()
                    },
                    "count": len(catalog),
                }
            )
        except (ChordLabError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_generate_catalog"] = chord_generate_catalog

    @mcp.tool  # type: ignore[arg-type]
    async def chord_get_voicings(root: str, quality: str = "major") -> str:
        """
        Get guitar voicings for any chord.

        Args:
            root: Chord root (e.g., 'E', 'Bb')
            quality: Quality tag: major, minor, diminished, dominant-7, maj7,
                m7, m7b5, dim7, m(maj7), sus2, sus4, add9, 6, 7sus4

        Returns:
            JSON string with voicings in fixed order (E-shape, A-shape, inversions)

        Example:
            chord_get_voicings(root="A", quality="m7")
        """
        try:
            voicings = synthesize_voicings(root, QualityTag(quality))
            return json.dumps(
                {
                    "status": "success",
                    "voicings": [voicing.to_dict() for voicing in voicings],
                    "count": len(voicings),
                }
            )
        except (ChordLabError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to get voicings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_get_voicings"] = chord_get_voicings

    @mcp.tool  # type: ignore[arg-type]
    async def chord_classify_transition(
        root: str,
        from_chord: str,
        to_chord: str,
        scale: str = "Major",
        style: str = "pop",
    ) -> str:
        """
        Classify the move between two chords of a key.

        Chords are named by symbol ('G7') or Roman numeral ('V7').

        Args:
            root: Key root
            from_chord: Chord played first
            to_chord: Chord played next
            scale: Scale name (default: 'Major')
            style: Playing style (default: 'pop')

        Returns:
            JSON string with the transition kind and label

        Example:
            chord_classify_transition(root="C", from_chord="G", to_chord="C")
        """
        try:
            catalog = generate_chord_catalog(root, scale, style, loader=style_loader)
            chords = []
            for name in (from_chord, to_chord):
                chord = find_chord(catalog, name)
                if chord is None:
                    return json.dumps(
                        {"status": "error", "message": f"Chord not in catalog: {name}"}
                    )
                chords.append(chord)

            transition = classify_transition(*chords)
            return json.dumps(
                {
                    "status": "success",
                    "from": chords[0].display_name,
                    "to": chords[1].display_name,
                    "kind": transition.kind.value,
                    "label": transition.label,
                }
            )
        except (ChordLabError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to classify transition")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_classify_transition"] = chord_classify_transition

    return tools
