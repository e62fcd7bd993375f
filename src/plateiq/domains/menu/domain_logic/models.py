"""Menu engine records: catalog inputs, user context, and engine outputs.

Input records are frozen and built with tolerant ``from_dict`` constructors:
missing or non-numeric fields fall back to zero/empty, never an error.
Output records serialize with ``to_dict()``.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any


def _num(val, default: float = 0.0) -> float:
    """Safely convert to float, returning default for None, non-numeric or non-finite."""
    if val is None or isinstance(val, bool):
        return default
    try:
        result = float(val)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def _opt_num(val) -> float | None:
    if val is None or isinstance(val, bool):
        return None
    try:
        result = float(val)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _str_tuple(val) -> tuple[str, ...]:
    if not val:
        return ()
    if isinstance(val, str):
        return (val,)
    if not isinstance(val, (list, tuple)):
        return ()
    return tuple(str(v) for v in val if v is not None and str(v))


# ---------------------------------------------------------------------------
# Catalog records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Ingredient:
    """One ingredient line of a recipe."""

    name: str
    quantity: float = 0.0
    unit: str = ""
    category: str = ""  # e.g. 'vegetables', 'protein', 'grains'

    @classmethod
    def from_dict(cls, data: dict) -> Ingredient:
        """Parse either the flat shape or the nested catalog shape.

        Flat:   ``{"name": "kale", "quantity": 100, "unit": "g", "category": "vegetables"}``
        Nested: ``{"ingredient": {"name": "kale", "category": "vegetables"}, "quantity": 100, "unit": "g"}``
        """
        nested = data.get("ingredient") or data.get("ingredients")
        source = nested if isinstance(nested, dict) else data
        return cls(
            name=str(source.get("name") or "").strip(),
            quantity=_num(data.get("quantity")),
            unit=str(data.get("unit") or ""),
            category=str(source.get("category") or ""),
        )


@dataclass(frozen=True)
class Recipe:
    """Immutable catalog recipe."""

    id: str
    title: str = ""
    meal_types: tuple[str, ...] = ()
    difficulty: str = ""  # easy | medium | hard
    prep_time_minutes: float = 0.0
    cook_time_minutes: float = 0.0
    dietary_tags: tuple[str, ...] = ()
    calories_per_serving: float = 0.0
    protein_g_per_serving: float = 0.0
    carbs_g_per_serving: float = 0.0
    fat_g_per_serving: float = 0.0
    fiber_g_per_serving: float = 0.0
    ingredients: tuple[Ingredient, ...] = ()
    anti_inflammatory_score: float = 0.0  # -10..10, set at catalog time

    @property
    def total_time_minutes(self) -> float:
        return self.prep_time_minutes + self.cook_time_minutes

    @property
    def ingredient_names(self) -> list[str]:
        """Ingredient names as stored, blanks dropped."""
        return [ing.name for ing in self.ingredients if ing.name]

    @classmethod
    def from_dict(cls, data: dict) -> Recipe:
        raw_ingredients = data.get("ingredients")
        if raw_ingredients is None:
            raw_ingredients = data.get("recipe_ingredients")
        if not isinstance(raw_ingredients, (list, tuple)):
            raw_ingredients = ()
        ingredients = tuple(
            Ingredient.from_dict(item) for item in raw_ingredients if isinstance(item, dict)
        )
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            meal_types=_str_tuple(data.get("meal_types", data.get("meal_type"))),
            difficulty=str(data.get("difficulty", data.get("difficulty_level")) or ""),
            prep_time_minutes=_num(data.get("prep_time_minutes")),
            cook_time_minutes=_num(data.get("cook_time_minutes")),
            dietary_tags=_str_tuple(data.get("dietary_tags")),
            calories_per_serving=_num(data.get("calories_per_serving")),
            protein_g_per_serving=_num(data.get("protein_g_per_serving")),
            carbs_g_per_serving=_num(data.get("carbs_g_per_serving")),
            fat_g_per_serving=_num(data.get("fat_g_per_serving")),
            fiber_g_per_serving=_num(data.get("fiber_g_per_serving")),
            ingredients=ingredients,
            anti_inflammatory_score=_clamp(_num(data.get("anti_inflammatory_score")), -10.0, 10.0),
        )


# ---------------------------------------------------------------------------
# User context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HealthBiomarkers:
    """Lab readings that bias ingredient selection. Every reading is optional."""

    crp_level: float | None = None           # mg/L
    cholesterol_total: float | None = None   # mg/dL
    glucose_fasting: float | None = None     # mg/dL
    vitamin_d: float | None = None           # ng/mL
    iron_serum: float | None = None          # mcg/dL

    @classmethod
    def from_dict(cls, data: dict) -> HealthBiomarkers:
        return cls(
            crp_level=_opt_num(data.get("crp_level")),
            cholesterol_total=_opt_num(data.get("cholesterol_total")),
            glucose_fasting=_opt_num(data.get("glucose_fasting")),
            vitamin_d=_opt_num(data.get("vitamin_d")),
            iron_serum=_opt_num(data.get("iron_serum")),
        )


@dataclass(frozen=True)
class UserProfile:
    dietary_preferences: tuple[str, ...] = ()
    cooking_skill_level: str = "intermediate"  # beginner | intermediate | advanced
    meal_prep_time: str = "medium"             # quick | medium | elaborate
    daily_calories_target: float = 2000.0
    biomarkers: HealthBiomarkers | None = None

    @classmethod
    def from_dict(cls, data: dict) -> UserProfile:
        biomarkers = data.get("biomarkers", data.get("health_biomarkers"))
        return cls(
            dietary_preferences=_str_tuple(data.get("dietary_preferences")),
            cooking_skill_level=str(data.get("cooking_skill_level") or "intermediate"),
            meal_prep_time=str(data.get("meal_prep_time") or "medium"),
            daily_calories_target=_num(data.get("daily_calories_target"), default=2000.0),
            biomarkers=HealthBiomarkers.from_dict(biomarkers) if isinstance(biomarkers, dict) else None,
        )


@dataclass(frozen=True)
class LearningProfile:
    """Per-user learned preferences, persisted by the caller between calls.

    Values are clamped into range on construction.
    """

    meal_preferences_learned: dict[str, float] = field(default_factory=dict)
    novelty_tolerance: float = 0.5
    dietary_compliance_score: float = 75.0
    preference_confidence: float = 0.5
    interaction_count: int = 0

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(
            self,
            "meal_preferences_learned",
            {str(k): _clamp(_num(v), 0.0, 1.0) for k, v in self.meal_preferences_learned.items()},
        )
        object.__setattr__(
            self, "novelty_tolerance", _clamp(_num(self.novelty_tolerance, 0.5), 0.0, 1.0)
        )
        object.__setattr__(
            self,
            "dietary_compliance_score",
            _clamp(_num(self.dietary_compliance_score, 75.0), 0.0, 100.0),
        )
        object.__setattr__(
            self, "preference_confidence", _clamp(_num(self.preference_confidence, 0.5), 0.0, 1.0)
        )
        object.__setattr__(self, "interaction_count", max(0, int(self.interaction_count)))

    def affinity(self, ingredient_name: str) -> float:
        """Learned affinity for an ingredient; unseen ingredients are 0."""
        return self.meal_preferences_learned.get(ingredient_name, 0.0)

    @classmethod
    def from_dict(cls, data: dict) -> LearningProfile:
        prefs = data.get("meal_preferences_learned") or {}
        return cls(
            meal_preferences_learned=dict(prefs) if isinstance(prefs, dict) else {},
            novelty_tolerance=_num(data.get("novelty_tolerance"), default=0.5),
            dietary_compliance_score=_num(data.get("dietary_compliance_score"), default=75.0),
            preference_confidence=_num(data.get("preference_confidence"), default=0.5),
            interaction_count=int(_num(data.get("interaction_count"))),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SeasonalContext:
    current_season: str
    local_ingredients: tuple[str, ...] = ()
    seasonal_nutrition_focus: tuple[str, ...] = ()


@dataclass(frozen=True)
class UserContext:
    """Everything the engine knows about the user for one call."""

    profile: UserProfile
    recent_meals: tuple[Recipe, ...] = ()  # last 7 days
    seasonal_context: SeasonalContext | None = None
    learning_profile: LearningProfile | None = None

    @property
    def learning(self) -> LearningProfile:
        """The learning profile, or a default one for first-time users."""
        return self.learning_profile if self.learning_profile is not None else LearningProfile()


@dataclass(frozen=True)
class SelectionOptions:
    """Caller knobs for one engine call. Validated by the orchestrator."""

    meal_types: tuple[str, ...] = ("breakfast", "lunch", "dinner")
    optimize_for_biomarkers: bool = False
    seasonal_weight: float = 0.5   # 0-1
    novelty_weight: float = 0.5    # 0-1 (0=familiar, 1=novel)
    dishes_per_slot: int = 1
    learning_adaptation_enabled: bool = True


# ---------------------------------------------------------------------------
# Engine outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HealthClaim:
    claim: str
    evidence_level: str  # preliminary | moderate | strong
    research_citations: tuple[str, ...]
    confidence_score: float  # 0-1


@dataclass(frozen=True)
class EnrichedRecipe:
    """A catalog recipe plus the scores computed for one user and one call."""

    recipe: Recipe
    personalization_score: float          # 0-100
    predicted_satisfaction: float         # 1-10
    biomarker_benefits: dict[str, float]  # active tag -> 0-100
    seasonal_appropriateness: float       # 0-100
    novelty_score: float                  # 0-100
    learning_confidence: float            # 0-1
    scientific_evidence_score: float      # 0-100
    anti_inflammatory_compounds: tuple[str, ...] = ()
    micronutrient_highlights: tuple[str, ...] = ()
    health_claims: tuple[HealthClaim, ...] = ()

    @property
    def id(self) -> str:
        return self.recipe.id

    @property
    def title(self) -> str:
        return self.recipe.title


@dataclass(frozen=True)
class NutritionTotals:
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class ShoppingItem:
    name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class Menu:
    meals: dict[str, list[EnrichedRecipe]]
    total_nutrition: NutritionTotals = field(default_factory=NutritionTotals)
    anti_inflammatory_score: float = 0.0
    shopping_list: tuple[ShoppingItem, ...] = ()

    def all_recipes(self) -> list[EnrichedRecipe]:
        """Selected recipes flattened in slot order."""
        return [recipe for recipes in self.meals.values() for recipe in recipes]


@dataclass(frozen=True)
class NutritionPrediction:
    predicted_energy_level: float             # 1-10
    inflammation_impact_score: float          # -10..10
    biomarker_improvement_probability: float  # 0-1
    micronutrient_adequacy_score: float       # 0-100
    meal_satisfaction_prediction: float       # 1-10


@dataclass(frozen=True)
class Insight:
    insight_type: str  # preference | timing | portion | preparation
    description: str
    confidence: float
    impact_on_planning: float


@dataclass(frozen=True)
class LearningDelta:
    """Profile update for the caller to merge; holds new values, not increments."""

    interaction_count: int
    preference_confidence: float
    meal_preferences_learned: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EngineResult:
    menu: Menu
    predictions: NutritionPrediction
    insights: list[Insight]
    learning_delta: LearningDelta | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
