"""
Shape templates - movable fret patterns for every chord quality.

Barre templates are written for a chord rooted on the open anchor string
(E-shape on the 6th string, A-shape on the 5th). Shifting every fretted
string by the same number of frets moves the shape to any root.

Inversion templates are written relative to the bass note's fret on the
anchor string, so their offsets can be negative.

Frets use None for a muted string; string order is low to high.
"""

from __future__ import annotations

from dataclasses import dataclass

from chordlab.constants import VoicingShape
from chordlab.core.quality import QualityTag, nearest_family
from chordlab.guitar.tuning import A_STRING, LOW_E_STRING


@dataclass(frozen=True)
class ShapeTemplate:
    """A movable barre shape."""

    frets: tuple[int | None, ...]
    root_offset: int = 0  # Fret of the root on the anchor string before shifting


@dataclass(frozen=True)
class InversionTemplate:
    """A fixed inversion shape anchored on the bass note."""

    shape: VoicingShape
    anchor_string: int
    bass_tone: int  # Index into the quality's intervals (1 = 3rd, 2 = 5th)
    offsets: tuple[int | None, ...]

    @property
    def string_number(self) -> int:
        """Conventional string number of the anchor (6 = low E)."""
        return 6 - self.anchor_string


def _shapes(e_shape: tuple[int | None, ...], a_shape: tuple[int | None, ...]):
    return {
        VoicingShape.E_SHAPE: ShapeTemplate(e_shape),
        VoicingShape.A_SHAPE: ShapeTemplate(a_shape),
    }


X = None

BARRE_SHAPES: dict[QualityTag, dict[VoicingShape, ShapeTemplate]] = {
    QualityTag.MAJOR: _shapes((0, 2, 2, 1, 0, 0), (X, 0, 2, 2, 2, 0)),
    QualityTag.MINOR: _shapes((0, 2, 2, 0, 0, 0), (X, 0, 2, 2, 1, 0)),
    QualityTag.DIMINISHED: _shapes((0, 1, 2, 0, X, X), (X, 0, 1, 2, 1, X)),
    QualityTag.DOMINANT_7: _shapes((0, 2, 0, 1, 0, 0), (X, 0, 2, 0, 2, 0)),
    QualityTag.MAJOR_7: _shapes((0, X, 1, 1, 0, X), (X, 0, 2, 1, 2, 0)),
    QualityTag.MINOR_7: _shapes((0, 2, 0, 0, 0, 0), (X, 0, 2, 0, 1, 0)),
    QualityTag.HALF_DIMINISHED_7: _shapes((0, 1, 2, 0, 3, X), (X, 0, 1, 0, 1, X)),
    QualityTag.DIMINISHED_7: _shapes((0, 1, 2, 0, 2, 0), (X, 0, 1, 2, 1, 2)),
    QualityTag.MINOR_MAJOR_7: _shapes((0, 2, 1, 0, 0, 0), (X, 0, 2, 1, 1, 0)),
    QualityTag.SUS2: _shapes((0, 2, 4, 4, 0, 0), (X, 0, 2, 2, 0, 0)),
    QualityTag.SUS4: _shapes((0, 2, 2, 2, 0, 0), (X, 0, 2, 2, 3, 0)),
    QualityTag.ADD9: _shapes((0, 2, 2, 1, 0, 2), (X, 0, 2, 4, 2, 0)),
    QualityTag.SIXTH: _shapes((0, 2, 2, 1, 2, 0), (X, 0, 2, 2, 2, 2)),
    QualityTag.SEVENTH_SUS4: _shapes((0, 2, 0, 2, 0, 0), (X, 0, 2, 0, 3, 0)),
}

# Anchor string for each barre shape
SHAPE_ANCHORS: dict[VoicingShape, int] = {
    VoicingShape.E_SHAPE: LOW_E_STRING,
    VoicingShape.A_SHAPE: A_STRING,
}

INVERSION_SHAPES: dict[QualityTag, tuple[InversionTemplate, ...]] = {
    QualityTag.MAJOR: (
        InversionTemplate(VoicingShape.FIRST_INVERSION, LOW_E_STRING, 1, (0, X, -2, 0, 1, X)),
        InversionTemplate(VoicingShape.FIRST_INVERSION, A_STRING, 1, (X, 0, -2, -2, 1, X)),
        InversionTemplate(VoicingShape.SECOND_INVERSION, LOW_E_STRING, 2, (0, 0, 2, 2, 2, 0)),
    ),
    QualityTag.MINOR: (
        InversionTemplate(VoicingShape.FIRST_INVERSION, LOW_E_STRING, 1, (0, X, -1, 1, 2, X)),
        InversionTemplate(VoicingShape.FIRST_INVERSION, A_STRING, 1, (X, 0, -1, -1, 2, X)),
    ),
}


def template_quality(quality: QualityTag) -> QualityTag:
    """
    Quality whose barre shapes voice the given quality.

    Exact quality first, then its bare triad family, then major.
    """
    if quality in BARRE_SHAPES:
        return quality
    if nearest_family(quality) in BARRE_SHAPES:
        return nearest_family(quality)
    return QualityTag.MAJOR


# Every tag must reach a defined shape
for _tag in QualityTag:
    if template_quality(_tag) not in BARRE_SHAPES:
        raise RuntimeError(f"No shape template reachable for {_tag.value}")
