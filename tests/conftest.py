"""Shared test fixtures for PlateIQ menu tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEASONAL_DATA_PATH", "")
    monkeypatch.setenv("ENRICHMENT_WORKERS", "1")
    monkeypatch.setenv("MAX_CANDIDATE_POOL", "500")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from plateiq.domains.menu.connectors.mock_data import (  # noqa: E402
    get_mock_learning_profile_record,
    get_mock_recent_meal_ids,
    get_mock_recipe_records,
    get_mock_user_profile_record,
)
from plateiq.domains.menu.domain_logic.models import (  # noqa: E402
    EnrichedRecipe,
    Ingredient,
    LearningProfile,
    Recipe,
    SeasonalContext,
    UserContext,
    UserProfile,
)


def make_recipe(
    id: str = "r-test",
    ingredients: list[str] | None = None,
    meal_types: tuple[str, ...] = ("lunch",),
    categories: dict[str, str] | None = None,
    **kwargs: Any,
) -> Recipe:
    """Create a test recipe with sensible defaults.

    ``ingredients`` are names; each gets 100 g and an optional category.
    """
    names = ingredients if ingredients is not None else ["Rice", "Carrots"]
    categories = categories or {}
    fields: dict[str, Any] = {
        "title": f"Test recipe {id}",
        "difficulty": "easy",
        "prep_time_minutes": 10,
        "cook_time_minutes": 10,
        "calories_per_serving": 500,
        "fiber_g_per_serving": 4,
    }
    fields.update(kwargs)
    return Recipe(
        id=id,
        meal_types=meal_types,
        ingredients=tuple(
            Ingredient(name=name, quantity=100, unit="g", category=categories.get(name, ""))
            for name in names
        ),
        **fields,
    )


def make_enriched(
    recipe: Recipe | None = None,
    *,
    personalization: float = 50.0,
    satisfaction: float = 5.0,
    benefits: dict[str, float] | None = None,
    seasonal: float = 0.0,
    novelty: float = 50.0,
) -> EnrichedRecipe:
    """Create an EnrichedRecipe with explicit sub-scores."""
    return EnrichedRecipe(
        recipe=recipe or make_recipe(),
        personalization_score=personalization,
        predicted_satisfaction=satisfaction,
        biomarker_benefits=dict(benefits or {}),
        seasonal_appropriateness=seasonal,
        novelty_score=novelty,
        learning_confidence=0.5,
        scientific_evidence_score=50.0,
    )


# ---------------------------------------------------------------------------
# Mock user fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_catalog() -> list[Recipe]:
    """The mock recipe catalog, ordered by id."""
    return sorted((Recipe.from_dict(r) for r in get_mock_recipe_records()), key=lambda r: r.id)


@pytest.fixture
def mock_profile() -> UserProfile:
    return UserProfile.from_dict(get_mock_user_profile_record())


@pytest.fixture
def mock_learning() -> LearningProfile:
    return LearningProfile.from_dict(get_mock_learning_profile_record())


@pytest.fixture
def fall_context() -> SeasonalContext:
    return SeasonalContext(
        current_season="fall",
        local_ingredients=("butternut squash", "pumpkin", "apples", "kale", "carrots", "onions"),
        seasonal_nutrition_focus=("immune support",),
    )


@pytest.fixture
def user_context(mock_catalog, mock_profile, mock_learning, fall_context) -> UserContext:
    """The mock user's full context with their recent meals resolved."""
    recent_ids = set(get_mock_recent_meal_ids())
    return UserContext(
        profile=mock_profile,
        recent_meals=tuple(r for r in mock_catalog if r.id in recent_ids),
        seasonal_context=fall_context,
        learning_profile=mock_learning,
    )
