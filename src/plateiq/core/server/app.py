"""PlateIQ Menu MCP server factory.

``create_app()`` builds a fresh server per call so tests can inject their own
catalog and profile store. ``mcp`` is resolved lazily for FastMCP discovery.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from plateiq.core.config.settings import Settings, get_settings
from plateiq.domains.menu.connectors import RecipeSource, UserProfileStore
from plateiq.domains.menu.connectors.providers import (
    InMemoryRecipeSource,
    MockRecipeSource,
    create_mock_profile_store,
)
from plateiq.domains.menu.connectors.seasonal import SeasonalCalendar, load_seasonal_calendar
from plateiq.domains.menu.prompts.menu_prompts import register_menu_prompts
from plateiq.domains.menu.resources.knowledge import register_knowledge_resources
from plateiq.domains.menu.tools.menu_tools import register_menu_tools

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.1.0"


def create_app(
    *,
    settings_override: Settings | None = None,
    recipe_source_override: RecipeSource | None = None,
    profile_store_override: UserProfileStore | None = None,
    seasonal_calendar_override: SeasonalCalendar | None = None,
) -> FastMCP:
    """Create and configure the PlateIQ menu MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Loads the seasonal produce calendar
    3. Initializes the recipe source (mock catalog unless overridden)
    4. Initializes the user profile store (mock user unless overridden)
    5. Registers all tools, resources, and prompts
    """
    settings = settings_override or get_settings()

    # --- Server instance ---
    server = FastMCP(
        "PlateIQ Menu",
        instructions=(
            "Personalized menu recommendation server. Scores recipes for taste fit, "
            "biomarker benefit, seasonality and novelty, selects a menu per meal slot, "
            "and predicts energy, inflammation and micronutrient outcomes."
        ),
    )

    # --- Seasonal calendar ---
    if seasonal_calendar_override is not None:
        seasonal_calendar = seasonal_calendar_override
    else:
        seasonal_calendar = load_seasonal_calendar(settings.seasonal_data_path or None)

    # --- Recipe catalog ---
    if recipe_source_override is not None:
        recipe_source = recipe_source_override
    else:
        recipe_source = MockRecipeSource()
        logger.info("Using mock recipe catalog")

    # --- Profile store ---
    if profile_store_override is not None:
        profile_store = profile_store_override
    elif isinstance(recipe_source, InMemoryRecipeSource):
        profile_store = create_mock_profile_store(recipe_source)
        logger.info("Using in-memory profile store seeded with the mock user")
    else:
        raise ValueError("profile_store_override is required with a custom recipe source")

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "PlateIQ Menu",
            "version": SERVER_VERSION,
            "catalog_source": recipe_source.data_source,
            "catalog_size": len(recipe_source.get_candidate_pool(limit=settings.max_candidate_pool)),
            "seasonal_calendar_version": seasonal_calendar.version,
        }

    register_menu_tools(server, settings, recipe_source, profile_store, seasonal_calendar)
    logger.info("Menu tools registered")

    # --- Register resources ---
    register_knowledge_resources(server, seasonal_calendar)

    # --- Register prompts ---
    register_menu_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
