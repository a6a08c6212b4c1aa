#!/usr/bin/env python3
"""
Async ChordLab MCP Server using chuk-mcp-server

This server exposes a generative chord engine: pick a root, a scale and a
style, and it derives the chords of the key, their Roman numerals and
harmonic roles, and playable guitar voicings for each.

The server provides tools for:
- Building scales and chord catalogs (core, variations, wildcards)
- Looking up guitar voicings for any chord quality
- Building progressions and reading back their transitions
- Style discovery and customization
- Exporting progressions as strummed MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chordlab.progression import ProgressionManager
from chordlab.styles import StyleLoader
from chordlab.tools import (
    register_compilation_tools,
    register_progression_tools,
    register_style_tools,
    register_theory_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chordlab")

# Project files live under CHORDLAB_PROJECT_DIR (set by --project-dir) or the cwd
BASE_PATH = Path(os.environ.get("CHORDLAB_PROJECT_DIR") or Path.cwd())
STYLES_DIR = BASE_PATH / "styles"
OUTPUT_DIR = BASE_PATH / "output"
STYLES_LIBRARY_PATH = Path(__file__).parent / "styles" / "library"

# Create managers
style_loader = StyleLoader(
    library_path=STYLES_LIBRARY_PATH,
    project_path=STYLES_DIR,
)
progression_manager = ProgressionManager(style_loader)

# Register all tools
theory_tools = register_theory_tools(mcp, style_loader)
progression_tools = register_progression_tools(mcp, progression_manager)
style_tools = register_style_tools(mcp, style_loader)
compilation_tools = register_compilation_tools(mcp, progression_manager, OUTPUT_DIR)

# Export tool functions for direct access
chord_list_scales = theory_tools["chord_list_scales"]
chord_build_scale = theory_tools["chord_build_scale"]
chord_generate_catalog = theory_tools["chord_generate_catalog"]
chord_get_voicings = theory_tools["chord_get_voicings"]
chord_classify_transition = theory_tools["chord_classify_transition"]

chord_create_progression = progression_tools["chord_create_progression"]
chord_get_progression = progression_tools["chord_get_progression"]
chord_add_to_progression = progression_tools["chord_add_to_progression"]
chord_remove_from_progression = progression_tools["chord_remove_from_progression"]
chord_set_voicing = progression_tools["chord_set_voicing"]
chord_cycle_voicing = progression_tools["chord_cycle_voicing"]
chord_analyze_progression = progression_tools["chord_analyze_progression"]
chord_clear_progression = progression_tools["chord_clear_progression"]

chord_list_styles = style_tools["chord_list_styles"]
chord_describe_style = style_tools["chord_describe_style"]
chord_copy_style_to_project = style_tools["chord_copy_style_to_project"]

chord_export_midi = compilation_tools["chord_export_midi"]

logger.info("ChordLab MCP Server initialized")
logger.info("  Styles dir: %s", STYLES_DIR)
logger.info("  Output dir: %s", OUTPUT_DIR)
