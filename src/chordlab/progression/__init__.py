"""
Progression management - in-memory ownership of user sequences.
"""

from chordlab.progression.manager import ProgressionManager

__all__ = ["ProgressionManager"]
