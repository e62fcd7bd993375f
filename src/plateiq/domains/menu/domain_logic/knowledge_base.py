"""Static nutrition knowledge: biomarker triggers, evidence claims, compound tables.

Everything here is immutable reference data plus pure lookups over it.
Thresholds are a fixed contract; changing them changes recommendations.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from plateiq.domains.menu.domain_logic.models import HealthBiomarkers, HealthClaim, Recipe


# ---------------------------------------------------------------------------
# Biomarker triggers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BiomarkerRule:
    """Fires when a reading crosses ``threshold`` in ``direction``."""

    field_name: str   # attribute on HealthBiomarkers
    label: str
    direction: str    # 'above' | 'below'
    threshold: float
    tag: str
    keywords: tuple[str, ...]

    def triggered_by(self, value: float | None) -> bool:
        if value is None:
            return False
        if self.direction == "above":
            return value > self.threshold
        return value < self.threshold


BIOMARKER_RULES: tuple[BiomarkerRule, ...] = (
    BiomarkerRule(
        field_name="crp_level",
        label="CRP",
        direction="above",
        threshold=3.0,
        tag="anti_inflammatory",
        keywords=(
            "turmeric", "ginger", "fatty_fish", "berries", "leafy_greens",
            "nuts", "olive_oil", "tomatoes", "cherries", "green_tea",
        ),
    ),
    BiomarkerRule(
        field_name="cholesterol_total",
        label="Total cholesterol",
        direction="above",
        threshold=200.0,
        tag="cholesterol_lowering",
        keywords=(
            "oats", "beans", "eggplant", "okra", "apples", "grapes",
            "citrus_fruits", "barley", "soy", "almonds",
        ),
    ),
    BiomarkerRule(
        field_name="glucose_fasting",
        label="Fasting glucose",
        direction="above",
        threshold=100.0,
        tag="glucose_stabilizing",
        keywords=(
            "cinnamon", "vinegar", "whole_grains", "legumes", "non_starchy_vegetables",
            "lean_proteins", "nuts", "seeds", "chromium_rich_foods",
        ),
    ),
    BiomarkerRule(
        field_name="vitamin_d",
        label="Vitamin D",
        direction="below",
        threshold=30.0,
        tag="vitamin_d_boosting",
        keywords=("fatty_fish", "egg_yolks", "fortified_foods", "mushrooms"),
    ),
    BiomarkerRule(
        field_name="iron_serum",
        label="Serum iron",
        direction="below",
        threshold=60.0,
        tag="iron_boosting",
        keywords=(
            "red_meat", "spinach", "lentils", "quinoa", "pumpkin_seeds",
            "dark_chocolate", "tofu", "cashews",
        ),
    ),
)


# ---------------------------------------------------------------------------
# Scientific evidence
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EvidenceRule:
    claim: str
    evidence_level: str
    research_citations: tuple[str, ...]
    confidence: int  # 0-100

    def as_claim(self) -> HealthClaim:
        return HealthClaim(
            claim=self.claim,
            evidence_level=self.evidence_level,
            research_citations=self.research_citations,
            confidence_score=self.confidence / 100,
        )


ANTI_INFLAMMATORY_EVIDENCE = EvidenceRule(
    claim="Rich in anti-inflammatory compounds",
    evidence_level="strong",
    research_citations=(
        "Calder, P.C. (2017). Omega-3 fatty acids and inflammatory processes",
        "Schwingshackl, L. (2018). Mediterranean diet and health status",
    ),
    confidence=85,
)

MICRONUTRIENT_EVIDENCE = EvidenceRule(
    claim="High micronutrient density supporting optimal health",
    evidence_level="strong",
    research_citations=(
        "Ames, B.N. (2006). Low micronutrient intake may accelerate aging",
        "Blumberg, J.B. (2018). Impact of frequency of multi-vitamin use",
    ),
    confidence=78,
)

ANTI_INFLAMMATORY_CLAIM_THRESHOLD = 5.0   # catalog score must exceed this
VEGETABLE_FRACTION_THRESHOLD = 70.0       # percent of ingredients
DEFAULT_EVIDENCE_SCORE = 50.0
VEGETABLE_CATEGORIES = frozenset({"vegetables", "vegetable"})


# ---------------------------------------------------------------------------
# Compound / micronutrient tables
# ---------------------------------------------------------------------------

COMPOUND_SOURCES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "curcumin": ("turmeric",),
    "gingerol": ("ginger",),
    "omega-3 fatty acids": ("salmon", "sardines", "mackerel", "walnuts", "flaxseed"),
    "anthocyanins": ("blueberries", "blackberries", "cherries"),
    "quercetin": ("onions", "apples", "berries"),
    "resveratrol": ("grapes", "red wine"),
    "lycopene": ("tomatoes", "watermelon"),
    "catechins": ("green tea", "dark chocolate"),
})

MICRONUTRIENT_HIGHLIGHTS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("High in Vitamin K, Folate, Iron", ("spinach", "kale", "broccoli")),
    ("Rich in Omega-3 fatty acids, Vitamin D", ("salmon", "sardines", "mackerel")),
    ("Good source of Vitamin E, Magnesium", ("nuts", "seeds")),
)

# Leafy greens, fatty fish, nuts, seeds, berries
NUTRIENT_DENSE_KEYWORDS: tuple[str, ...] = (
    "spinach", "kale", "broccoli", "salmon", "nuts", "seeds", "berries",
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def normalize_keyword(keyword: str) -> str:
    """Lower-case and turn table underscores into spaces ('olive_oil' -> 'olive oil')."""
    return keyword.lower().replace("_", " ").strip()


def keyword_matches(keyword: str, ingredient_name: str) -> bool:
    """Case-insensitive substring match in either direction."""
    kw = normalize_keyword(keyword)
    name = normalize_keyword(ingredient_name)
    if not kw or not name:
        return False
    return kw in name or name in kw


def lookup_biomarker_ingredients(biomarkers: HealthBiomarkers | None) -> dict[str, list[str]]:
    """Map each abnormal biomarker's tag to its beneficial ingredient keywords."""
    if biomarkers is None:
        return {}
    optimizations: dict[str, list[str]] = {}
    for rule in BIOMARKER_RULES:
        if rule.triggered_by(getattr(biomarkers, rule.field_name)):
            optimizations[rule.tag] = list(rule.keywords)
    return optimizations


def vegetable_fraction(recipe: Recipe) -> float:
    """Percentage (0-100) of ingredient lines in a vegetable category."""
    total = len(recipe.ingredients)
    vegetables = sum(
        1 for ing in recipe.ingredients if ing.category.lower().strip() in VEGETABLE_CATEGORIES
    )
    return min(100.0, vegetables / max(total, 1) * 100)


def lookup_evidence(recipe: Recipe) -> tuple[float, list[HealthClaim]]:
    """Return (evidence score 0-100, earned claims) for a recipe.

    The score is the mean confidence of earned claims, or 50 when none apply.
    """
    earned: list[EvidenceRule] = []
    if recipe.anti_inflammatory_score > ANTI_INFLAMMATORY_CLAIM_THRESHOLD:
        earned.append(ANTI_INFLAMMATORY_EVIDENCE)
    if vegetable_fraction(recipe) > VEGETABLE_FRACTION_THRESHOLD:
        earned.append(MICRONUTRIENT_EVIDENCE)

    if not earned:
        return DEFAULT_EVIDENCE_SCORE, []
    score = sum(rule.confidence for rule in earned) / len(earned)
    return float(score), [rule.as_claim() for rule in earned]


def extract_anti_inflammatory_compounds(recipe: Recipe) -> list[str]:
    names = [name.lower() for name in recipe.ingredient_names]
    return [
        compound
        for compound, sources in COMPOUND_SOURCES.items()
        if any(source in name for source in sources for name in names)
    ]


def extract_micronutrient_highlights(recipe: Recipe) -> list[str]:
    names = [name.lower() for name in recipe.ingredient_names]
    return [
        highlight
        for highlight, sources in MICRONUTRIENT_HIGHLIGHTS
        if any(source in name for source in sources for name in names)
    ]
