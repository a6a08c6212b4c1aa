"""
MCP tool implementations.

Tools are organized by domain:
- theory - Scales, catalogs, voicings, transitions
- progression - Progression lifecycle and editing
- styles - Style discovery and customization
- compilation - MIDI export
"""

from chordlab.tools.compilation import register_compilation_tools
from chordlab.tools.progression import register_progression_tools
from chordlab.tools.styles import register_style_tools
from chordlab.tools.theory import register_theory_tools

__all__ = [
    "register_compilation_tools",
    "register_progression_tools",
    "register_style_tools",
    "register_theory_tools",
]
