"""Tests for menu assembly and outcome predictions."""

from __future__ import annotations

from dataclasses import replace

import pytest

from plateiq.domains.menu.domain_logic.models import (
    HealthBiomarkers,
    Ingredient,
    Menu,
    UserProfile,
)
from plateiq.domains.menu.domain_logic.predictor import (
    build_menu,
    build_shopping_list,
    calculate_biomarker_improvement_probability,
    calculate_inflammation_impact,
    calculate_micronutrient_adequacy,
    predict,
    predict_energy_level,
)

from conftest import make_enriched, make_recipe


def _with_ingredients(id: str, *ingredients: Ingredient, **kwargs):
    return make_enriched(replace(make_recipe(id=id, **kwargs), ingredients=ingredients))


class TestBuildMenu:
    def test_totals_and_anti_inflammatory_mean(self):
        a = make_enriched(make_recipe(id="a", calories_per_serving=400, protein_g_per_serving=20,
                                      anti_inflammatory_score=8))
        b = make_enriched(make_recipe(id="b", calories_per_serving=600, protein_g_per_serving=30,
                                      anti_inflammatory_score=2))
        menu = build_menu({"lunch": [a], "dinner": [b]})
        assert menu.total_nutrition.calories == 1000
        assert menu.total_nutrition.protein == 50
        assert menu.anti_inflammatory_score == pytest.approx(5.0)
        assert [r.id for r in menu.all_recipes()] == ["a", "b"]

    def test_shopping_list_aggregates_by_name_and_unit(self):
        a = _with_ingredients("a", Ingredient("Spinach", 60, "g"), Ingredient("Lemon", 1, "pcs"))
        b = _with_ingredients("b", Ingredient("spinach", 40, "g"), Ingredient("Spinach", 1, "bunch"))
        items = build_shopping_list([a, b])
        assert [(i.name, i.quantity, i.unit) for i in items] == [
            ("Lemon", 1, "pcs"),
            ("Spinach", 1, "bunch"),
            ("Spinach", 100, "g"),
        ]


class TestPredictEnergyLevel:
    def test_all_bonuses(self):
        recipes = [
            make_enriched(make_recipe(id=str(i), calories_per_serving=500,
                                      fiber_g_per_serving=6, anti_inflammatory_score=6))
            for i in range(4)
        ]
        assert predict_energy_level(recipes, UserProfile(daily_calories_target=2000)) == 8.0

    def test_calorie_band_is_inclusive(self):
        recipes = [make_enriched(make_recipe(calories_per_serving=1600, fiber_g_per_serving=0))]
        assert predict_energy_level(recipes, UserProfile(daily_calories_target=2000)) == 6.0

    def test_outside_band(self):
        recipes = [make_enriched(make_recipe(calories_per_serving=3000, fiber_g_per_serving=0))]
        assert predict_energy_level(recipes, UserProfile(daily_calories_target=2000)) == 5.0


class TestInflammationAndBiomarkers:
    def test_inflammation_is_mean_score(self):
        recipes = [
            make_enriched(make_recipe(id="a", anti_inflammatory_score=9)),
            make_enriched(make_recipe(id="b", anti_inflammatory_score=-5)),
        ]
        assert calculate_inflammation_impact(recipes) == pytest.approx(2.0)

    def test_no_biomarkers_is_even_odds(self):
        recipes = [make_enriched(benefits={"anti_inflammatory": 90})]
        assert calculate_biomarker_improvement_probability(recipes, None) == 0.5

    def test_no_active_tags_is_neutral(self):
        recipes = [make_enriched()]
        assert calculate_biomarker_improvement_probability(recipes, HealthBiomarkers()) == 0.5

    def test_mean_benefit_scaled(self):
        recipes = [
            make_enriched(make_recipe(id="a"), benefits={"anti_inflammatory": 20}),
            make_enriched(make_recipe(id="b"), benefits={"anti_inflammatory": 40}),
        ]
        probability = calculate_biomarker_improvement_probability(
            recipes, HealthBiomarkers(crp_level=4.2)
        )
        assert probability == pytest.approx(0.3)


class TestMicronutrientAdequacy:
    def test_diversity_only(self):
        recipe = make_enriched(make_recipe(ingredients=["Rice", "Carrots", "Peas", "Leek", "Egg"]))
        assert calculate_micronutrient_adequacy([recipe]) == pytest.approx(25.0)

    def test_nutrient_dense_bonus(self):
        recipe = make_enriched(make_recipe(ingredients=["Spinach", "Salmon"]))
        assert calculate_micronutrient_adequacy([recipe]) == pytest.approx(14.0)

    def test_capped_at_hundred(self):
        recipe = make_enriched(make_recipe(ingredients=[f"Kale {i}" for i in range(30)]))
        assert calculate_micronutrient_adequacy([recipe]) == 100.0


class TestPredict:
    def test_empty_menu(self):
        prediction = predict(Menu(meals={}), UserProfile())
        assert prediction.meal_satisfaction_prediction == 5.0
        assert prediction.predicted_energy_level == 5.0
        assert prediction.inflammation_impact_score == 0.0
        assert prediction.micronutrient_adequacy_score == 0.0

    def test_satisfaction_is_mean(self):
        menu = build_menu({
            "lunch": [make_enriched(make_recipe(id="a"), satisfaction=6)],
            "dinner": [make_enriched(make_recipe(id="b"), satisfaction=9)],
        })
        assert predict(menu, UserProfile()).meal_satisfaction_prediction == pytest.approx(7.5)
