"""MCP tools for personalized menu generation.

The tool layer is the engine's caller: it gathers context from the stores,
runs the pure engine, and merges the returned learning delta back into the
profile store.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from plateiq.core.config.settings import Settings
    from plateiq.domains.menu.connectors import RecipeSource, UserProfileStore
    from plateiq.domains.menu.connectors.seasonal import SeasonalCalendar

from plateiq.domains.menu.domain_logic.engine import generate
from plateiq.domains.menu.domain_logic.errors import (
    InvalidOptionsError,
    MenuEngineError,
    NoCandidatesError,
)
from plateiq.domains.menu.domain_logic.models import SelectionOptions, UserContext

logger = logging.getLogger(__name__)


def _error_payload(exc: Exception, **extra: Any) -> str:
    payload: dict[str, Any] = {
        "status": "error",
        "error_type": type(exc).__name__,
        "message": str(exc),
    }
    payload.update(extra)
    return json.dumps(payload)


def build_selection_options(
    settings: Settings,
    *,
    meal_types: list[str] | None = None,
    optimize_for_biomarkers: bool | None = None,
    seasonal_weight: float | None = None,
    novelty_weight: float | None = None,
    dishes_per_slot: int = 1,
) -> SelectionOptions:
    """Fill unspecified tool arguments from server settings."""
    return SelectionOptions(
        meal_types=tuple(meal_types) if meal_types else tuple(settings.default_meal_types),
        optimize_for_biomarkers=(
            settings.default_optimize_for_biomarkers
            if optimize_for_biomarkers is None
            else optimize_for_biomarkers
        ),
        seasonal_weight=(
            settings.default_seasonal_weight if seasonal_weight is None else seasonal_weight
        ),
        novelty_weight=(
            settings.default_novelty_weight if novelty_weight is None else novelty_weight
        ),
        dishes_per_slot=dishes_per_slot,
    )


def register_menu_tools(
    mcp: FastMCP,
    settings: Settings,
    recipe_source: RecipeSource,
    profile_store: UserProfileStore,
    seasonal_calendar: SeasonalCalendar,
) -> None:
    """Register menu generation and learning-profile tools on the MCP server."""

    @mcp.tool
    async def generate_menu(
        ctx: Context,
        user_id: str = "default",
        meal_types: list[str] | None = None,
        optimize_for_biomarkers: bool | None = None,
        seasonal_weight: float | None = None,
        novelty_weight: float | None = None,
        season: str | None = None,
        dishes_per_slot: int = 1,
        persist_learning: bool = True,
    ) -> str:
        """Generate a personalized menu with health and satisfaction predictions.

        Scores every catalog recipe for taste fit, biomarker benefit,
        seasonality and novelty, picks the best recipe per meal slot, and
        predicts energy, inflammation and micronutrient outcomes.

        Args:
            user_id: Profile to plan for.
            meal_types: Meal slots to fill (default: breakfast, lunch, dinner).
            optimize_for_biomarkers: Weight recipes by biomarker benefit.
            seasonal_weight: 0-1 preference for in-season ingredients.
            novelty_weight: 0-1 preference for new (1) vs familiar (0) ingredients.
            season: spring | summer | fall | winter. Defaults to the current month's season.
            dishes_per_slot: Recipes to return per meal slot.
            persist_learning: Merge the learning update into the user's profile.
        """
        start_time = time.monotonic()

        profile = profile_store.get_profile(user_id)
        if profile is None:
            return json.dumps({
                "status": "error",
                "error_type": "UnknownUserError",
                "message": f"No profile stored for user {user_id!r}",
            })

        try:
            if season:
                seasonal_context = seasonal_calendar.context_for(season)
            else:
                month = datetime.now(timezone.utc).month
                seasonal_context = seasonal_calendar.context_for(
                    seasonal_calendar.season_for_month(month)
                )
        except ValueError as exc:
            logger.warning("Rejected season %r: %s", season, exc)
            return _error_payload(exc)

        options = build_selection_options(
            settings,
            meal_types=meal_types,
            optimize_for_biomarkers=optimize_for_biomarkers,
            seasonal_weight=seasonal_weight,
            novelty_weight=novelty_weight,
            dishes_per_slot=dishes_per_slot,
        )
        learning_profile = profile_store.get_learning_profile(user_id)
        context = UserContext(
            profile=profile,
            recent_meals=tuple(profile_store.get_recent_meals(user_id)),
            seasonal_context=seasonal_context,
            learning_profile=learning_profile,
        )
        candidate_pool = recipe_source.get_candidate_pool(limit=settings.max_candidate_pool)

        try:
            result = generate(
                context,
                candidate_pool,
                options,
                max_workers=settings.enrichment_workers,
            )
        except NoCandidatesError as exc:
            logger.warning("No candidates for %s: %s", user_id, exc)
            return _error_payload(exc, missing_slots=exc.missing_slots)
        except InvalidOptionsError as exc:
            logger.warning("Invalid menu options for %s: %s", user_id, exc)
            return _error_payload(exc, field=exc.field_name)
        except MenuEngineError as exc:
            logger.warning("Menu generation failed for %s: %s", user_id, exc)
            return _error_payload(exc)

        learning_persisted = False
        if persist_learning and result.learning_delta is not None:
            profile_store.merge_learning_delta(user_id, result.learning_delta)
            profile_store.record_meals(user_id, [r.id for r in result.menu.all_recipes()])
            learning_persisted = True

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.info(
            "generate_menu for %s: %d slots in %.1f ms (catalog=%s)",
            user_id,
            len(result.menu.meals),
            elapsed_ms,
            recipe_source.data_source,
        )

        return json.dumps({
            "status": "ok",
            "user_id": user_id,
            "season": seasonal_context.current_season,
            "learning_persisted": learning_persisted,
            "result": result.to_dict(),
        })

    @mcp.tool
    async def get_learning_profile(ctx: Context, user_id: str = "default") -> str:
        """Return the stored learning profile for a user.

        Args:
            user_id: Profile to read.
        """
        learning = profile_store.get_learning_profile(user_id)
        if learning is None:
            return json.dumps({"status": "not_found", "user_id": user_id})
        return json.dumps({
            "status": "ok",
            "user_id": user_id,
            "learning_profile": learning.to_dict(),
        })
