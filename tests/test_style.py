"""
Tests for the style system.

Tests cover:
- StyleRules validation
- StyleLoader discovery, overrides and copying
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chordlab.constants import HarmonicFunction, Style
from chordlab.models.style import StyleMetadata, StyleRules, VariationRules
from chordlab.styles import StyleLoader


class TestStyleRules:
    """Tests for the StyleRules model."""

    def test_defaults(self):
        """A bare style stacks triads and offers sus and 6th siblings."""
        rules = StyleRules(name="plain")
        assert rules.sevenths is False
        assert rules.forced_dominant_degrees == []
        assert rules.variations == VariationRules()
        assert rules.variations.add9 is False

    def test_schema_alias(self):
        """The YAML 'schema' key populates schema_version."""
        rules = StyleRules.model_validate({"schema": "style/v2", "name": "x"})
        assert rules.schema_version == "style/v2"

    def test_bad_degree(self):
        """Forced degrees are 1-7."""
        with pytest.raises(ValidationError):
            StyleRules(name="bad", forced_dominant_degrees=[8])

    def test_override_cannot_borrow(self):
        """Diatonic degrees cannot be overridden to borrowed."""
        with pytest.raises(ValidationError):
            StyleRules(name="bad", function_overrides={4: HarmonicFunction.BORROWED})

    def test_forces_dominant(self):
        """forces_dominant checks 1-indexed degrees."""
        rules = StyleRules(name="blues", forced_dominant_degrees=[1, 4, 5])
        assert rules.forces_dominant(4)
        assert not rules.forces_dominant(2)

    def test_frozen(self):
        """Rules cannot be changed after loading."""
        rules = StyleRules(name="pop")
        with pytest.raises(ValidationError):
            rules.sevenths = True

    def test_metadata(self):
        """Metadata carries the listing fields."""
        meta = StyleMetadata.from_style(StyleRules(name="jazz", sevenths=True))
        assert meta.name == "jazz"
        assert meta.sevenths is True


class TestStyleLoader:
    """Tests for StyleLoader."""

    def test_list_styles(self, style_loader: StyleLoader):
        """The library ships one file per style."""
        names = {s.name for s in style_loader.list_styles()}
        assert names == {s.value for s in Style}

    def test_library_rules(self, style_loader: StyleLoader):
        """Library files load with their rules."""
        assert style_loader.rules_for("jazz").sevenths is True
        assert style_loader.rules_for(Style.BLUES).forced_dominant_degrees == [1, 4, 5]
        assert style_loader.rules_for("pop").variations.add9 is True
        assert style_loader.rules_for("folk").sevenths is False

    def test_rules_for_is_case_insensitive(self, style_loader: StyleLoader):
        """Style names are parsed case-insensitively."""
        assert style_loader.rules_for("JAZZ").name == "jazz"

    def test_rules_for_unknown(self, style_loader: StyleLoader):
        """Unknown styles raise ValueError."""
        with pytest.raises(ValueError):
            style_loader.rules_for("metal")

    def test_missing_rule_file(self, temp_dir: Path):
        """A known style without a file fails loudly."""
        empty = temp_dir / "empty"
        empty.mkdir()
        loader = StyleLoader(library_path=empty)
        assert loader.get_style("pop") is None
        with pytest.raises(ValueError):
            loader.rules_for("pop")

    def test_project_override(self, styles_library_path: Path, temp_dir: Path):
        """Project styles win over library styles with the same name."""
        project = temp_dir / "styles"
        project.mkdir()
        (project / "folk.yaml").write_text(
            "name: folk\ndescription: Campfire sevenths\nharmony:\n  sevenths: true\n"
        )
        loader = StyleLoader(library_path=styles_library_path, project_path=project)

        assert loader.rules_for("folk").sevenths is True
        listed = {s.name: s for s in loader.list_styles()}
        assert listed["folk"].description == "Campfire sevenths"
        assert len(listed) == 4

    def test_unreadable_file_skipped(self, styles_library_path: Path, temp_dir: Path):
        """Broken YAML is skipped, not fatal."""
        project = temp_dir / "styles"
        project.mkdir()
        (project / "broken.yaml").write_text("harmony: [unclosed\n")
        loader = StyleLoader(library_path=styles_library_path, project_path=project)
        assert len(loader.list_styles()) == 4

    def test_copy_to_project(self, style_loader: StyleLoader):
        """Library styles can be copied for editing, once."""
        path = style_loader.copy_to_project("blues")
        assert path is not None
        assert path.exists()
        assert path.parent == style_loader.project_path

        with pytest.raises(ValueError):
            style_loader.copy_to_project("blues")

    def test_copy_unknown(self, style_loader: StyleLoader):
        """Copying a style that doesn't exist returns None."""
        assert style_loader.copy_to_project("polka") is None

    def test_copy_without_project(self, styles_library_path: Path):
        """Copying needs a project directory."""
        loader = StyleLoader(library_path=styles_library_path)
        with pytest.raises(ValueError):
            loader.copy_to_project("pop")

    def test_yaml_dict_reloads(self, style_loader: StyleLoader):
        """to_yaml_dict parses back to the same rules."""
        for style in Style:
            rules = style_loader.rules_for(style)
            assert style_loader._parse_style(rules.to_yaml_dict()) == rules

    def test_cache(self, style_loader: StyleLoader):
        """Loaded styles are cached until cleared."""
        first = style_loader.get_style("pop")
        assert style_loader.get_style("pop") is first
        style_loader.clear_cache()
        assert style_loader.get_style("pop") is not first
