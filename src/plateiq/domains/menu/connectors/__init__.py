"""Menu data connectors: the stores the engine reads from and callers write to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from plateiq.domains.menu.domain_logic.models import (
    LearningDelta,
    LearningProfile,
    Recipe,
    UserProfile,
)


@runtime_checkable
class RecipeSource(Protocol):
    """Read-only recipe catalog.

    Returns fully materialized lists; the engine never pages lazily.
    """

    def get_candidate_pool(self, *, limit: int = 500) -> list[Recipe]:
        """Recipes eligible for recommendation, at most ``limit`` of them."""
        ...

    def get_recipes(self, recipe_ids: list[str]) -> list[Recipe]:
        """Look up recipes by id, skipping unknown ids."""
        ...

    @property
    def data_source(self) -> str:
        """Label for the active catalog: 'memory', 'mock', ..."""
        ...


@runtime_checkable
class UserProfileStore(Protocol):
    """User profiles, recent meals, and the persisted learning profile."""

    def get_profile(self, user_id: str) -> UserProfile | None:
        ...

    def get_recent_meals(self, user_id: str) -> list[Recipe]:
        """Meals eaten in the last 7 days."""
        ...

    def get_learning_profile(self, user_id: str) -> LearningProfile | None:
        ...

    def merge_learning_delta(self, user_id: str, delta: LearningDelta) -> LearningProfile:
        """Merge an engine delta into the stored learning profile and return it."""
        ...

    def record_meals(self, user_id: str, recipe_ids: list[str]) -> None:
        """Add served recipes to the user's recent-meal window."""
        ...
