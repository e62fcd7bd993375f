"""Tests for menu record parsing and normalisation."""

from __future__ import annotations

import json
from dataclasses import asdict

import pytest

from plateiq.domains.menu.domain_logic.models import (
    Ingredient,
    LearningDelta,
    LearningProfile,
    Recipe,
    UserContext,
    UserProfile,
)


class TestRecipeFromDict:
    def test_catalog_aliases_accepted(self):
        recipe = Recipe.from_dict({
            "id": 42,
            "title": "Soup",
            "meal_type": "lunch",
            "difficulty_level": "easy",
            "recipe_ingredients": [
                {"ingredient": {"name": "Kale", "category": "vegetables"}, "quantity": 50, "unit": "g"},
            ],
        })
        assert recipe.id == "42"
        assert recipe.meal_types == ("lunch",)
        assert recipe.difficulty == "easy"
        assert recipe.ingredients == (Ingredient("Kale", 50.0, "g", "vegetables"),)

    def test_missing_numbers_default_to_zero(self):
        recipe = Recipe.from_dict({"id": "x", "calories_per_serving": "n/a"})
        assert recipe.calories_per_serving == 0.0
        assert recipe.total_time_minutes == 0.0
        assert recipe.ingredients == ()

    def test_anti_inflammatory_score_clamped(self):
        assert Recipe.from_dict({"id": "a", "anti_inflammatory_score": 25}).anti_inflammatory_score == 10.0
        assert Recipe.from_dict({"id": "b", "anti_inflammatory_score": -25}).anti_inflammatory_score == -10.0

    def test_blank_ingredient_names_dropped_from_names(self):
        recipe = Recipe.from_dict({"id": "x", "ingredients": [{"name": ""}, {"name": "Oats"}]})
        assert recipe.ingredient_names == ["Oats"]


class TestUserProfileFromDict:
    def test_defaults(self):
        profile = UserProfile.from_dict({})
        assert profile.cooking_skill_level == "intermediate"
        assert profile.meal_prep_time == "medium"
        assert profile.daily_calories_target == 2000.0
        assert profile.biomarkers is None

    def test_health_biomarkers_alias(self):
        profile = UserProfile.from_dict({"health_biomarkers": {"crp_level": 4.2, "vitamin_d": None}})
        assert profile.biomarkers is not None
        assert profile.biomarkers.crp_level == 4.2
        assert profile.biomarkers.vitamin_d is None

    def test_zero_reading_is_kept(self):
        profile = UserProfile.from_dict({"biomarkers": {"vitamin_d": 0}})
        assert profile.biomarkers.vitamin_d == 0.0


class TestLearningProfile:
    def test_values_clamped_on_construction(self):
        profile = LearningProfile(
            meal_preferences_learned={"Kale": 1.7, "Beets": -0.2},
            novelty_tolerance=2.0,
            dietary_compliance_score=140,
            preference_confidence=-1,
            interaction_count=-3,
        )
        assert profile.meal_preferences_learned == {"Kale": 1.0, "Beets": 0.0}
        assert profile.novelty_tolerance == 1.0
        assert profile.dietary_compliance_score == 100.0
        assert profile.preference_confidence == 0.0
        assert profile.interaction_count == 0

    def test_unseen_ingredient_affinity_is_zero(self):
        assert LearningProfile().affinity("Durian") == 0.0

    def test_dict_round_trip(self, mock_learning):
        assert LearningProfile.from_dict(mock_learning.to_dict()) == mock_learning

    def test_context_falls_back_to_default_profile(self, mock_profile):
        context = UserContext(profile=mock_profile)
        assert context.learning == LearningProfile()


def test_learning_delta_to_dict():
    delta = LearningDelta(interaction_count=2, preference_confidence=0.6,
                          meal_preferences_learned={"Kale": 0.1})
    assert delta.to_dict() == {
        "interaction_count": 2,
        "preference_confidence": 0.6,
        "meal_preferences_learned": {"Kale": 0.1},
    }


class TestNonNumericInput:
    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", float("nan"), float("inf")])
    def test_non_finite_recipe_numbers_default_to_zero(self, raw):
        recipe = Recipe.from_dict({
            "id": "x",
            "anti_inflammatory_score": raw,
            "calories_per_serving": raw,
            "ingredients": [{"name": "Kale", "quantity": raw}],
        })
        assert recipe.anti_inflammatory_score == 0.0
        assert recipe.calories_per_serving == 0.0
        assert recipe.ingredients[0].quantity == 0.0

    def test_non_finite_affinity_and_tolerance(self):
        profile = LearningProfile.from_dict({
            "meal_preferences_learned": {"Bread": "nan", "Kale": "inf"},
            "novelty_tolerance": "nan",
            "preference_confidence": float("inf"),
        })
        assert profile.affinity("Bread") == 0.0
        assert profile.affinity("Kale") == 0.0
        assert profile.novelty_tolerance == 0.5
        assert profile.preference_confidence == 0.5

    def test_non_finite_biomarker_is_absent(self):
        profile = UserProfile.from_dict({"biomarkers": {"crp_level": "nan", "vitamin_d": "inf"}})
        assert profile.biomarkers.crp_level is None
        assert profile.biomarkers.vitamin_d is None

    def test_non_finite_input_serializes_as_standard_json(self):
        recipe = Recipe.from_dict({"id": "x", "calories_per_serving": "nan", "fat_g_per_serving": "inf"})
        assert "NaN" not in json.dumps(asdict(recipe))
        assert "Infinity" not in json.dumps(asdict(recipe))

    def test_scalar_where_list_expected(self):
        recipe = Recipe.from_dict({
            "id": "x", "dietary_tags": 3, "meal_types": 7.5, "ingredients": 5,
        })
        assert recipe.dietary_tags == ()
        assert recipe.meal_types == ()
        assert recipe.ingredients == ()
        assert UserProfile.from_dict({"dietary_preferences": 1}).dietary_preferences == ()

    def test_scalar_catalog_alias_ingredients(self):
        assert Recipe.from_dict({"id": "x", "recipe_ingredients": "kale"}).ingredients == ()
