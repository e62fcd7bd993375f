"""Menu engine orchestrator: validate -> enrich -> select -> predict -> learn.

``generate`` is a pure function of its arguments. It reads no stores,
writes no stores, and returns the learning delta for the caller to persist.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from plateiq.domains.menu.domain_logic.errors import InvalidOptionsError, NoCandidatesError
from plateiq.domains.menu.domain_logic.knowledge_base import lookup_biomarker_ingredients
from plateiq.domains.menu.domain_logic.learning_updater import compute_delta, derive_insights
from plateiq.domains.menu.domain_logic.models import (
    EngineResult,
    Recipe,
    SelectionOptions,
    UserContext,
)
from plateiq.domains.menu.domain_logic.predictor import build_menu, predict
from plateiq.domains.menu.domain_logic.recipe_enricher import enrich_candidates
from plateiq.domains.menu.domain_logic.selector import select

logger = logging.getLogger(__name__)


def _check_unit_interval(field_name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOptionsError(field_name, f"must be a number in [0, 1], got {value!r}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidOptionsError(field_name, f"must be in [0, 1], got {value!r}")


def validate_options(options: SelectionOptions) -> None:
    """Reject out-of-range options before any scoring happens."""
    if not options.meal_types:
        raise InvalidOptionsError("meal_types", "at least one meal type is required")
    if any(not isinstance(m, str) or not m.strip() for m in options.meal_types):
        raise InvalidOptionsError("meal_types", "meal types must be non-empty strings")
    _check_unit_interval("seasonal_weight", options.seasonal_weight)
    _check_unit_interval("novelty_weight", options.novelty_weight)
    if (
        isinstance(options.dishes_per_slot, bool)
        or not isinstance(options.dishes_per_slot, int)
        or options.dishes_per_slot < 1
    ):
        raise InvalidOptionsError(
            "dishes_per_slot", f"must be a positive integer, got {options.dishes_per_slot!r}"
        )


def validate_context(context: UserContext) -> None:
    target = context.profile.daily_calories_target
    if math.isnan(target) or target <= 0:
        raise InvalidOptionsError("daily_calories_target", f"must be positive, got {target!r}")


def _unique_slots(meal_types: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    slots: list[str] = []
    for meal_type in meal_types:
        key = meal_type.strip().lower()
        if key not in seen:
            seen.add(key)
            slots.append(meal_type.strip())
    return slots


def generate(
    context: UserContext,
    candidate_pool: Sequence[Recipe],
    options: SelectionOptions,
    *,
    max_workers: int | None = None,
) -> EngineResult:
    """Build a personalized menu with predictions, insights and a learning delta.

    Raises:
        InvalidOptionsError: An option or profile value is out of range.
        NoCandidatesError: Not one requested meal slot has an eligible recipe.
    """
    validate_options(options)
    validate_context(context)

    slots = _unique_slots(options.meal_types)
    biomarker_ingredients = lookup_biomarker_ingredients(context.profile.biomarkers)

    enriched = enrich_candidates(
        candidate_pool, context, biomarker_ingredients, max_workers=max_workers
    )
    selected = select(enriched, slots, options)

    if not selected:
        raise NoCandidatesError(slots)

    missing = [slot for slot in slots if slot not in selected]
    if missing:
        logger.info("Omitting meal slots with no candidates: %s", ", ".join(missing))

    menu = build_menu(selected)
    predictions = predict(menu, context.profile)
    insights = derive_insights(menu, predictions)

    learning_delta = None
    if options.learning_adaptation_enabled:
        learning_delta = compute_delta(context.learning_profile, menu)

    logger.info(
        "Generated menu: %d slots, %d candidates, active biomarker tags=%s, insights=%d",
        len(menu.meals),
        len(enriched),
        sorted(biomarker_ingredients),
        len(insights),
    )

    return EngineResult(
        menu=menu,
        predictions=predictions,
        insights=insights,
        learning_delta=learning_delta,
    )
