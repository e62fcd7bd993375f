"""Concrete RecipeSource and UserProfileStore implementations."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from plateiq.domains.menu.connectors.mock_data import (
    get_mock_learning_profile_record,
    get_mock_recent_meal_ids,
    get_mock_recipe_records,
    get_mock_user_profile_record,
)
from plateiq.domains.menu.domain_logic.learning_updater import apply_delta
from plateiq.domains.menu.domain_logic.models import (
    LearningDelta,
    LearningProfile,
    Recipe,
    UserProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "default"
RECENT_MEAL_WINDOW = 21  # 7 days x 3 meals


class InMemoryRecipeSource:
    """Recipe catalog held in memory, ordered by recipe id."""

    def __init__(self, recipes: Iterable[Recipe], *, source_label: str = "memory") -> None:
        self._recipes: dict[str, Recipe] = {}
        for recipe in recipes:
            if recipe.id in self._recipes:
                raise ValueError(f"Duplicate recipe id in catalog: {recipe.id!r}")
            self._recipes[recipe.id] = recipe
        self._label = source_label

    @classmethod
    def from_records(cls, records: Iterable[dict], *, source_label: str = "memory") -> InMemoryRecipeSource:
        return cls((Recipe.from_dict(r) for r in records), source_label=source_label)

    def get_candidate_pool(self, *, limit: int = 500) -> list[Recipe]:
        ordered = [self._recipes[rid] for rid in sorted(self._recipes)]
        if len(ordered) > limit:
            logger.info("Candidate pool truncated from %d to %d recipes", len(ordered), limit)
        return ordered[:limit]

    def get_recipes(self, recipe_ids: list[str]) -> list[Recipe]:
        return [self._recipes[rid] for rid in recipe_ids if rid in self._recipes]

    def __len__(self) -> int:
        return len(self._recipes)

    @property
    def data_source(self) -> str:
        return self._label


class MockRecipeSource(InMemoryRecipeSource):
    """Uses the mock catalog. Always available."""

    def __init__(self) -> None:
        super().__init__(
            (Recipe.from_dict(r) for r in get_mock_recipe_records()), source_label="mock"
        )


class InMemoryUserProfileStore:
    """Profiles and learning state kept in process memory.

    Learning deltas are merged under a lock so concurrent tool calls for the
    same user do not lose updates.
    """

    def __init__(
        self,
        recipe_source: InMemoryRecipeSource,
        *,
        profiles: dict[str, UserProfile] | None = None,
        learning_profiles: dict[str, LearningProfile] | None = None,
        recent_meal_ids: dict[str, list[str]] | None = None,
    ) -> None:
        self._recipes = recipe_source
        self._profiles = dict(profiles or {})
        self._learning = dict(learning_profiles or {})
        self._recent = {uid: list(ids) for uid, ids in (recent_meal_ids or {}).items()}
        self._lock = threading.Lock()

    def get_profile(self, user_id: str) -> UserProfile | None:
        return self._profiles.get(user_id)

    def get_recent_meals(self, user_id: str) -> list[Recipe]:
        return self._recipes.get_recipes(self._recent.get(user_id, []))

    def get_learning_profile(self, user_id: str) -> LearningProfile | None:
        with self._lock:
            return self._learning.get(user_id)

    def merge_learning_delta(self, user_id: str, delta: LearningDelta) -> LearningProfile:
        with self._lock:
            merged = apply_delta(self._learning.get(user_id), delta)
            self._learning[user_id] = merged
        logger.info(
            "Merged learning delta for %s: interactions=%d, %d ingredient affinities",
            user_id,
            merged.interaction_count,
            len(delta.meal_preferences_learned),
        )
        return merged

    def record_meals(self, user_id: str, recipe_ids: list[str]) -> None:
        """Append served meals to the user's recent-meal window."""
        with self._lock:
            window = self._recent.setdefault(user_id, [])
            window.extend(recipe_ids)
            del window[:-RECENT_MEAL_WINDOW]


def create_mock_profile_store(recipe_source: InMemoryRecipeSource) -> InMemoryUserProfileStore:
    """Profile store seeded with the mock user under ``DEFAULT_USER_ID``."""
    return InMemoryUserProfileStore(
        recipe_source,
        profiles={DEFAULT_USER_ID: UserProfile.from_dict(get_mock_user_profile_record())},
        learning_profiles={
            DEFAULT_USER_ID: LearningProfile.from_dict(get_mock_learning_profile_record())
        },
        recent_meal_ids={DEFAULT_USER_ID: get_mock_recent_meal_ids()},
    )
