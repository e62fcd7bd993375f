"""Menu aggregation and outcome predictions.

All predictions are pure functions of the selected recipes and the user
profile, so identical menus always produce identical predictions.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from plateiq.domains.menu.domain_logic.knowledge_base import NUTRIENT_DENSE_KEYWORDS
from plateiq.domains.menu.domain_logic.models import (
    EnrichedRecipe,
    HealthBiomarkers,
    Menu,
    NutritionPrediction,
    NutritionTotals,
    ShoppingItem,
    UserProfile,
)

ENERGY_BASE = 5.0
CALORIE_BAND = 0.2          # +/- 20% of the daily target
HIGH_FIBER_G = 5.0
ANTI_INFLAMMATORY_BONUS_THRESHOLD = 5.0
DIVERSITY_TARGET = 20       # distinct ingredients for full diversity credit
NUTRIENT_DENSE_BONUS = 2.0
NO_BIOMARKER_PROBABILITY = 0.5
NEUTRAL_BENEFIT = 50.0
NEUTRAL_SATISFACTION = 5.0


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _mean(values: Sequence[float], default: float = 0.0) -> float:
    return sum(values) / len(values) if values else default


# ---------------------------------------------------------------------------
# Menu assembly
# ---------------------------------------------------------------------------

def build_shopping_list(recipes: Sequence[EnrichedRecipe]) -> tuple[ShoppingItem, ...]:
    """Aggregate ingredient quantities by (name, unit), sorted by name then unit."""
    totals: dict[tuple[str, str], float] = defaultdict(float)
    display: dict[tuple[str, str], str] = {}
    for enriched in recipes:
        for ing in enriched.recipe.ingredients:
            if not ing.name:
                continue
            key = (ing.name.lower(), ing.unit.lower())
            totals[key] += ing.quantity
            display.setdefault(key, ing.name)
    return tuple(
        ShoppingItem(name=display[key], quantity=round(totals[key], 2), unit=key[1])
        for key in sorted(totals)
    )


def build_menu(selected: dict[str, list[EnrichedRecipe]]) -> Menu:
    """Wrap the per-slot selection with nutrition totals and a shopping list."""
    recipes = [recipe for slot_recipes in selected.values() for recipe in slot_recipes]
    catalog = [r.recipe for r in recipes]
    totals = NutritionTotals(
        calories=sum(r.calories_per_serving for r in catalog),
        protein=sum(r.protein_g_per_serving for r in catalog),
        carbs=sum(r.carbs_g_per_serving for r in catalog),
        fat=sum(r.fat_g_per_serving for r in catalog),
        fiber=sum(r.fiber_g_per_serving for r in catalog),
    )
    return Menu(
        meals={slot: list(slot_recipes) for slot, slot_recipes in selected.items()},
        total_nutrition=totals,
        anti_inflammatory_score=_mean([r.anti_inflammatory_score for r in catalog]),
        shopping_list=build_shopping_list(recipes),
    )


# ---------------------------------------------------------------------------
# Predictions
# ---------------------------------------------------------------------------

def predict_energy_level(recipes: Sequence[EnrichedRecipe], profile: UserProfile) -> float:
    """Expected energy on a 1-10 scale from calorie balance, fiber and inflammation."""
    catalog = [r.recipe for r in recipes]
    energy = ENERGY_BASE

    total_calories = sum(r.calories_per_serving for r in catalog)
    target = profile.daily_calories_target
    if target > 0:
        ratio = total_calories / target
        if abs(ratio - 1) <= CALORIE_BAND:
            energy += 1

    if _mean([r.fiber_g_per_serving for r in catalog]) > HIGH_FIBER_G:
        energy += 1

    if _mean([r.anti_inflammatory_score for r in catalog]) > ANTI_INFLAMMATORY_BONUS_THRESHOLD:
        energy += 1

    return _clamp(energy, 1.0, 10.0)


def calculate_inflammation_impact(recipes: Sequence[EnrichedRecipe]) -> float:
    """Mean catalog anti-inflammatory score, -10 (inflammatory) to +10."""
    return _clamp(_mean([r.recipe.anti_inflammatory_score for r in recipes]), -10.0, 10.0)


def calculate_biomarker_improvement_probability(
    recipes: Sequence[EnrichedRecipe], biomarkers: HealthBiomarkers | None
) -> float:
    if biomarkers is None:
        return NO_BIOMARKER_PROBABILITY
    benefits = [value for r in recipes for value in r.biomarker_benefits.values()]
    return _clamp(_mean(benefits, default=NEUTRAL_BENEFIT) / 100, 0.0, 1.0)


def calculate_micronutrient_adequacy(recipes: Sequence[EnrichedRecipe]) -> float:
    """Ingredient diversity plus a bonus per nutrient-dense ingredient, 0-100."""
    names = [name for r in recipes for name in r.recipe.ingredient_names]
    diversity = len(set(names)) / DIVERSITY_TARGET * 100
    dense_count = sum(
        1 for name in names if any(dense in name.lower() for dense in NUTRIENT_DENSE_KEYWORDS)
    )
    return min(100.0, diversity + NUTRIENT_DENSE_BONUS * dense_count)


def predict(menu: Menu, user_profile: UserProfile) -> NutritionPrediction:
    """Aggregate the selected recipes into menu-level outcome predictions."""
    recipes = menu.all_recipes()
    return NutritionPrediction(
        predicted_energy_level=predict_energy_level(recipes, user_profile),
        inflammation_impact_score=calculate_inflammation_impact(recipes),
        biomarker_improvement_probability=calculate_biomarker_improvement_probability(
            recipes, user_profile.biomarkers
        ),
        micronutrient_adequacy_score=calculate_micronutrient_adequacy(recipes),
        meal_satisfaction_prediction=_mean(
            [r.predicted_satisfaction for r in recipes], default=NEUTRAL_SATISFACTION
        ),
    )
