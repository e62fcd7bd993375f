"""Per-slot recipe selection by weighted multi-criteria score."""

from __future__ import annotations

import logging
from typing import Sequence

from plateiq.domains.menu.domain_logic.models import EnrichedRecipe, SelectionOptions

logger = logging.getLogger(__name__)

# Weights of the total score. They sum to 1 so the total stays in [0, 100].
PERSONALIZATION_WEIGHT = 0.4
SATISFACTION_WEIGHT = 0.2
BIOMARKER_WEIGHT = 0.2
SEASONAL_WEIGHT = 0.1
NOVELTY_WEIGHT = 0.1


def compute_total_score(recipe: EnrichedRecipe, options: SelectionOptions) -> float:
    """Blend a recipe's sub-scores into one ranking score in [0, 100]."""
    score = recipe.personalization_score * PERSONALIZATION_WEIGHT
    score += (recipe.predicted_satisfaction / 10) * 100 * SATISFACTION_WEIGHT

    if options.optimize_for_biomarkers:
        benefits = recipe.biomarker_benefits
        avg_benefit = sum(benefits.values()) / max(len(benefits), 1)
        score += avg_benefit * BIOMARKER_WEIGHT

    score += recipe.seasonal_appropriateness * options.seasonal_weight * SEASONAL_WEIGHT

    novelty = (
        options.novelty_weight * recipe.novelty_score
        + (1 - options.novelty_weight) * (100 - recipe.novelty_score)
    )
    score += novelty * NOVELTY_WEIGHT

    return max(0.0, min(100.0, score))


def rank_candidates(
    candidates: Sequence[EnrichedRecipe], options: SelectionOptions
) -> list[tuple[float, EnrichedRecipe]]:
    """Score and sort: best total first, ties by recipe id in ascending string order."""
    scored = [(compute_total_score(recipe, options), recipe) for recipe in candidates]
    scored.sort(key=lambda pair: (-pair[0], pair[1].id))
    return scored


def select(
    enriched_candidates: Sequence[EnrichedRecipe],
    meal_types: Sequence[str],
    options: SelectionOptions,
) -> dict[str, list[EnrichedRecipe]]:
    """Pick the top ``options.dishes_per_slot`` recipes for each meal slot.

    Slots with no tagged candidates are left out of the result.
    """
    selected: dict[str, list[EnrichedRecipe]] = {}
    for meal_type in meal_types:
        slot = meal_type.lower()
        slot_candidates = [
            recipe
            for recipe in enriched_candidates
            if slot in {tag.lower() for tag in recipe.recipe.meal_types}
        ]
        if not slot_candidates:
            logger.debug("No candidates tagged for slot %r", meal_type)
            continue

        ranked = rank_candidates(slot_candidates, options)
        selected[meal_type] = [recipe for _, recipe in ranked[: options.dishes_per_slot]]
        logger.debug(
            "Slot %r: picked %s (score %.2f) from %d candidates",
            meal_type,
            ranked[0][1].id,
            ranked[0][0],
            len(ranked),
        )
    return selected
