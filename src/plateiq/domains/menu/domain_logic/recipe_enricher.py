"""Deterministic recipe enrichment: catalog recipe + user context -> scored recipe.

Each compute function is independent of the others and returns a bounded
score. All formulas are deterministic, no randomness, no clock.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from plateiq.domains.menu.domain_logic.knowledge_base import (
    extract_anti_inflammatory_compounds,
    extract_micronutrient_highlights,
    keyword_matches,
    lookup_evidence,
)
from plateiq.domains.menu.domain_logic.models import (
    EnrichedRecipe,
    LearningProfile,
    Recipe,
    SeasonalContext,
    UserContext,
    UserProfile,
)

logger = logging.getLogger(__name__)

DIFFICULTY_LEVELS = {"easy": 1, "medium": 2, "hard": 3}
SKILL_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3}
PREP_TIME_LIMITS = {"quick": 30, "medium": 60, "elaborate": 120}

PERSONALIZATION_BASE = 50.0
SATISFACTION_BASE = 5.0
NOVELTY_MATCH_WINDOW = 0.3
HIGH_COMPLIANCE = 80.0

# Pools smaller than this are always enriched inline.
_PARALLEL_MIN_POOL = 64


def _clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value to [lo, hi]."""
    return max(lo, min(hi, value))


def mean_affinity(recipe: Recipe, learning: LearningProfile) -> float:
    """Mean learned affinity over the recipe's ingredients (unseen -> 0)."""
    names = recipe.ingredient_names
    total = sum(learning.affinity(name) for name in names)
    return total / max(len(names), 1)


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------

def compute_personalization(
    recipe: Recipe, profile: UserProfile, learning: LearningProfile
) -> float:
    """How well a recipe matches the user, 0-100.

    Components:
        +10 per dietary preference the recipe is tagged with
        +30 x mean learned ingredient affinity
        +10 if difficulty is within the user's cooking skill
        +10 if prep + cook time fits the user's time tolerance
    """
    score = PERSONALIZATION_BASE

    recipe_tags = {tag.lower() for tag in recipe.dietary_tags}
    matched = sum(1 for pref in profile.dietary_preferences if pref.lower() in recipe_tags)
    score += matched * 10

    score += mean_affinity(recipe, learning) * 30

    difficulty = DIFFICULTY_LEVELS.get(recipe.difficulty.lower())
    skill = SKILL_LEVELS.get(profile.cooking_skill_level.lower())
    if difficulty is not None and skill is not None and difficulty <= skill:
        score += 10

    time_limit = PREP_TIME_LIMITS.get(profile.meal_prep_time.lower())
    if time_limit is not None and recipe.total_time_minutes <= time_limit:
        score += 10

    return _clamp(score, 0.0, 100.0)


def compute_biomarker_benefits(
    recipe: Recipe, biomarker_ingredients: dict[str, list[str]]
) -> dict[str, float]:
    """Per active biomarker tag: share of its beneficial keywords the recipe covers.

    Inactive tags are absent from the result rather than zero.
    """
    names = recipe.ingredient_names
    benefits: dict[str, float] = {}
    for tag, keywords in biomarker_ingredients.items():
        if not keywords:
            continue
        matched = sum(
            1 for keyword in keywords if any(keyword_matches(keyword, name) for name in names)
        )
        benefits[tag] = _clamp(matched / len(keywords) * 100, 0.0, 100.0)
    return benefits


def compute_seasonal_appropriateness(
    recipe: Recipe, seasonal_context: SeasonalContext | None
) -> float:
    """Share of the recipe's ingredients that are in season locally, 0-100."""
    if seasonal_context is None or not seasonal_context.local_ingredients:
        return 0.0
    names = recipe.ingredient_names
    matches = sum(
        1
        for name in names
        if any(keyword_matches(local, name) for local in seasonal_context.local_ingredients)
    )
    return _clamp(matches / max(len(names), 1) * 100, 0.0, 100.0)


def compute_novelty(recipe: Recipe, recent_meals: Sequence[Recipe]) -> float:
    """How new a recipe is for the user, 0-100.

    A recipe eaten in the recent window scores 0. Otherwise the score is the
    share of its ingredients that appear in none of the recent meals.
    """
    if any(meal.id == recipe.id for meal in recent_meals):
        return 0.0
    recent_ingredients = {name for meal in recent_meals for name in meal.ingredient_names}
    names = recipe.ingredient_names
    novel = sum(1 for name in names if name not in recent_ingredients)
    return _clamp(novel / max(len(names), 1) * 100, 0.0, 100.0)


def predict_satisfaction(recipe: Recipe, learning: LearningProfile) -> float:
    """Predicted satisfaction on a 1-10 scale.

    The novelty term uses the recipe's intrinsic novelty (no recent meals),
    not the recent-meal novelty used for selection.
    """
    satisfaction = SATISFACTION_BASE
    satisfaction += mean_affinity(recipe, learning) * 3

    if learning.dietary_compliance_score > HIGH_COMPLIANCE:
        satisfaction += 1

    intrinsic_novelty = compute_novelty(recipe, ()) / 100
    if abs(intrinsic_novelty - learning.novelty_tolerance) < NOVELTY_MATCH_WINDOW:
        satisfaction += 1

    return _clamp(satisfaction, 1.0, 10.0)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def enrich_recipe(
    recipe: Recipe,
    context: UserContext,
    biomarker_ingredients: dict[str, list[str]],
) -> EnrichedRecipe:
    """Score one catalog recipe for one user."""
    learning = context.learning
    evidence_score, claims = lookup_evidence(recipe)

    return EnrichedRecipe(
        recipe=recipe,
        personalization_score=compute_personalization(recipe, context.profile, learning),
        predicted_satisfaction=predict_satisfaction(recipe, learning),
        biomarker_benefits=compute_biomarker_benefits(recipe, biomarker_ingredients),
        seasonal_appropriateness=compute_seasonal_appropriateness(
            recipe, context.seasonal_context
        ),
        novelty_score=compute_novelty(recipe, context.recent_meals),
        learning_confidence=learning.preference_confidence,
        scientific_evidence_score=evidence_score,
        anti_inflammatory_compounds=tuple(extract_anti_inflammatory_compounds(recipe)),
        micronutrient_highlights=tuple(extract_micronutrient_highlights(recipe)),
        health_claims=tuple(claims),
    )


def enrich_candidates(
    candidate_pool: Iterable[Recipe],
    context: UserContext,
    biomarker_ingredients: dict[str, list[str]],
    *,
    max_workers: int | None = None,
) -> list[EnrichedRecipe]:
    """Enrich every candidate, in input order.

    Candidates share no mutable state, so large pools may be spread over a
    thread pool by passing ``max_workers > 1``.
    """
    pool = list(candidate_pool)
    if max_workers is not None and max_workers > 1 and len(pool) >= _PARALLEL_MIN_POOL:
        logger.debug("Enriching %d candidates on %d workers", len(pool), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(
                executor.map(lambda r: enrich_recipe(r, context, biomarker_ingredients), pool)
            )
    return [enrich_recipe(recipe, context, biomarker_ingredients) for recipe in pool]
