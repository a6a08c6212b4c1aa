"""
Style tools - MCP tools for style discovery and customization.

Tools for listing styles, describing their rules, and copying a library
style into the project so it can be edited.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chordlab.catalog import clear_catalog_cache
from chordlab.constants import ErrorMessages
from chordlab.styles import StyleLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_style_tools(
    mcp: ChukMCPServer,
    style_loader: StyleLoader,
) -> dict[str, Any]:
    """
    Register style tools with the MCP server.

    Args:
        mcp: The MCP server instance
        style_loader: The style loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_styles() -> str:
        """
        List available styles.

        Returns all styles from the library and project with basic metadata.

        Returns:
            JSON string with list of style summaries

        Example:
            chord_list_styles()
        """
        try:
            styles = style_loader.list_styles()
            return json.dumps(
                {
                    "status": "success",
                    "styles": [
                        {
                            "name": s.name,
                            "description": s.description,
                            "sevenths": s.sevenths,
                        }
                        for s in styles
                    ],
                    "count": len(styles),
                }
            )
        except Exception as e:
            logger.exception("Failed to list styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_styles"] = chord_list_styles

    @mcp.tool  # type: ignore[arg-type]
    async def chord_describe_style(name: str) -> str:
        """
        Get the full rules of a style.

        Args:
            name: Style name (e.g., 'jazz')

        Returns:
            JSON string with harmonization and variation rules

        Example:
            chord_describe_style(name="blues")
        """
        try:
            style = style_loader.get_style(name)
            if style is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STYLE_NOT_FOUND.format(name=name)}
                )
            return json.dumps({"status": "success", "style": style.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_describe_style"] = chord_describe_style

    @mcp.tool  # type: ignore[arg-type]
    async def chord_copy_style_to_project(name: str) -> str:
        """
        Copy a library style into the project for customization.

        The project copy overrides the library style from then on.

        Args:
            name: Style name

        Returns:
            JSON string with the path of the copy

        Example:
            chord_copy_style_to_project(name="pop")
        """
        try:
            path = style_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STYLE_NOT_FOUND.format(name=name)}
                )
            clear_catalog_cache()
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": f"Copied {name} to project. Edit {path.name} to customize.",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_copy_style_to_project"] = chord_copy_style_to_project

    return tools
