"""Rule-based insights and learning-profile deltas.

The engine only *computes* a delta. Merging it into the persisted profile
is the caller's job (see ``apply_delta``), so a call never changes state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from plateiq.domains.menu.domain_logic.models import (
    Insight,
    LearningDelta,
    LearningProfile,
    Menu,
    NutritionPrediction,
)

logger = logging.getLogger(__name__)

AFFINITY_STEP = 0.1
CONFIDENCE_STEP = 0.05


@dataclass(frozen=True)
class InsightRule:
    name: str
    metric: Callable[[Menu, NutritionPrediction], float]
    threshold: float
    insight_type: str
    description: str
    confidence: float
    impact_on_planning: float


def _mean_personalization(menu: Menu, _: NutritionPrediction) -> float:
    recipes = menu.all_recipes()
    return sum(r.personalization_score for r in recipes) / max(len(recipes), 1)


def _mean_novelty(menu: Menu, _: NutritionPrediction) -> float:
    recipes = menu.all_recipes()
    return sum(r.novelty_score for r in recipes) / max(len(recipes), 1)


def _biomarker_probability(_: Menu, predictions: NutritionPrediction) -> float:
    return predictions.biomarker_improvement_probability


INSIGHT_RULES: tuple[InsightRule, ...] = (
    InsightRule(
        name="strong_preference_match",
        metric=_mean_personalization,
        threshold=80.0,
        insight_type="preference",
        description="Strong preference match detected - continuing to learn your tastes",
        confidence=0.85,
        impact_on_planning=0.9,
    ),
    InsightRule(
        name="open_to_new_ingredients",
        metric=_mean_novelty,
        threshold=70.0,
        insight_type="preference",
        description="You seem open to new ingredients and recipes",
        confidence=0.7,
        impact_on_planning=0.6,
    ),
    InsightRule(
        name="high_improvement_potential",
        metric=_biomarker_probability,
        threshold=0.7,
        insight_type="preference",
        description="Menu optimized for your health biomarkers with high improvement potential",
        confidence=0.8,
        impact_on_planning=0.95,
    ),
)


def derive_insights(menu: Menu, predictions: NutritionPrediction) -> list[Insight]:
    """Return one insight per rule whose metric exceeds its threshold, in table order."""
    insights: list[Insight] = []
    for rule in INSIGHT_RULES:
        value = rule.metric(menu, predictions)
        if value <= rule.threshold:
            continue
        logger.debug("Insight rule %s fired: %.3f > %g", rule.name, value, rule.threshold)
        insights.append(Insight(
            insight_type=rule.insight_type,
            description=rule.description,
            confidence=rule.confidence,
            impact_on_planning=rule.impact_on_planning,
        ))
    return insights


def compute_delta(learning_profile: LearningProfile | None, menu: Menu) -> LearningDelta:
    """Compute the profile update implied by serving this menu.

    - interaction_count + 1
    - preference_confidence + 0.05, capped at 1
    - +0.1 affinity (capped at 1) for every distinct ingredient on the menu
    """
    current = learning_profile if learning_profile is not None else LearningProfile()

    updated_affinities: dict[str, float] = {}
    for enriched in menu.all_recipes():
        for name in enriched.recipe.ingredient_names:
            if name in updated_affinities:
                continue
            updated_affinities[name] = round(
                min(1.0, current.affinity(name) + AFFINITY_STEP), 4
            )

    return LearningDelta(
        interaction_count=current.interaction_count + 1,
        preference_confidence=round(
            min(1.0, current.preference_confidence + CONFIDENCE_STEP), 4
        ),
        meal_preferences_learned=dict(sorted(updated_affinities.items())),
    )


def apply_delta(learning_profile: LearningProfile | None, delta: LearningDelta) -> LearningProfile:
    """Merge a delta into a profile, returning a new profile.

    Affinities and confidence only move upward; a stale delta never lowers them.
    """
    current = learning_profile if learning_profile is not None else LearningProfile()
    preferences = dict(current.meal_preferences_learned)
    for name, affinity in delta.meal_preferences_learned.items():
        preferences[name] = max(preferences.get(name, 0.0), affinity)

    return LearningProfile(
        meal_preferences_learned=preferences,
        novelty_tolerance=current.novelty_tolerance,
        dietary_compliance_score=current.dietary_compliance_score,
        preference_confidence=max(current.preference_confidence, delta.preference_confidence),
        interaction_count=max(current.interaction_count, delta.interaction_count),
    )
