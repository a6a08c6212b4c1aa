"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chordlab.catalog import clear_catalog_cache
from chordlab.styles import StyleLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def styles_library_path() -> Path:
    """Path to the built-in style library."""
    return Path(__file__).parent.parent / "src" / "chordlab" / "styles" / "library"


@pytest.fixture
def style_loader(styles_library_path: Path, temp_dir: Path) -> StyleLoader:
    """Style loader with an empty project directory."""
    return StyleLoader(library_path=styles_library_path, project_path=temp_dir / "styles")


@pytest.fixture(autouse=True)
def fresh_catalog_cache():
    """Start every test with an empty catalog cache."""
    clear_catalog_cache()
    yield
    clear_catalog_cache()
