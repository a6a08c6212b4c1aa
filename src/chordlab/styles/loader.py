"""
Style loader - discovers and loads style rule bundles.

Styles can come from:
1. Built-in library (shipped with package)
2. Project styles (user's project/styles directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chordlab.constants import ErrorMessages, HarmonicFunction, Style
from chordlab.models.style import StyleMetadata, StyleRules, VariationRules

logger = logging.getLogger(__name__)


class StyleLoader:
    """
    Discovers and loads style definitions.

    Styles are loaded from YAML files in the library and project directories.
    Project styles override library styles with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the style loader.

        Args:
            library_path: Path to built-in style library
            project_path: Path to project styles directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, StyleRules] = {}

    def list_styles(self) -> list[StyleMetadata]:
        """
        List all available styles.

        Returns styles from both library and project, with project
        styles taking precedence.
        """
        styles: dict[str, StyleMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                style = self._load_style_file(path)
                if style:
                    styles[style.name] = StyleMetadata.from_style(style)

        return list(styles.values())

    def get_style(self, name: str) -> StyleRules | None:
        """
        Get a style by name.

        Project styles take precedence over library styles.

        Args:
            name: Style name

        Returns:
            StyleRules if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        candidates = []
        if self.project_path:
            candidates.append(self.project_path / f"{name}.yaml")
        candidates.append(self.library_path / f"{name}.yaml")

        for path in candidates:
            if path.exists():
                style = self._load_style_file(path)
                if style:
                    self._cache[name] = style
                    return style

        return None

    def rules_for(self, style: Style | str) -> StyleRules:
        """
        Get the rules for a style, failing loudly if none are defined.

        Raises:
            ValueError: If the style is unknown or has no rule file
        """
        style = Style.parse(style)
        rules = self.get_style(style.value)
        if rules is None:
            raise ValueError(ErrorMessages.STYLE_NOT_FOUND.format(name=style.value))
        return rules

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library style to the project for customization.

        Args:
            name: Style name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Style already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def _load_style_file(self, path: Path) -> StyleRules | None:
        """Load a style from a YAML file, skipping files that don't parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_style(data)
        except Exception:
            logger.warning("Skipping unreadable style file %s", path, exc_info=True)
            return None

    def _parse_style(self, data: dict[str, Any]) -> StyleRules:
        """Parse style from YAML data."""
        harmony = data.get("harmony", {})
        variations = data.get("variations", {})

        overrides = {
            int(degree): HarmonicFunction(function)
            for degree, function in (harmony.get("function_overrides") or {}).items()
        }

        return StyleRules(
            name=data.get("name", "unknown"),
            description=data.get("description", ""),
            sevenths=harmony.get("sevenths", False),
            forced_dominant_degrees=harmony.get("forced_dominant_degrees") or [],
            function_overrides=overrides,
            variations=VariationRules(
                sus=variations.get("sus", True),
                add9=variations.get("add9", False),
                sixth=variations.get("sixth", True),
                seventh_sus4=variations.get("seventh_sus4", True),
            ),
        )

    def clear_cache(self) -> None:
        """Clear the style cache."""
        self._cache.clear()


_default_loader: StyleLoader | None = None


def get_default_loader() -> StyleLoader:
    """Shared loader for the built-in style library."""
    global _default_loader
    if _default_loader is None:
        _default_loader = StyleLoader()
    return _default_loader
