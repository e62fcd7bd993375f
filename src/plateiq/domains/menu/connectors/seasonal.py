"""Seasonal produce calendar loading and SeasonalContext construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from plateiq.domains.menu.domain_logic.models import SeasonalContext

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_PATH = Path(__file__).resolve().parent.parent / "data" / "seasonal_produce.yaml"


class SeasonalDataError(Exception):
    """Raised when the seasonal produce calendar is missing or malformed."""


@dataclass(frozen=True)
class SeasonEntry:
    name: str
    months: tuple[int, ...]
    local_ingredients: tuple[str, ...]
    seasonal_nutrition_focus: tuple[str, ...] = ()


@dataclass(frozen=True)
class SeasonalCalendar:
    version: str
    hemisphere: str
    seasons: dict[str, SeasonEntry]

    def season_for_month(self, month: int) -> str:
        """Return the season name covering a calendar month (1-12)."""
        for entry in self.seasons.values():
            if month in entry.months:
                return entry.name
        raise ValueError(f"No season covers month {month!r}")

    def context_for(self, season: str) -> SeasonalContext:
        """Build the engine's SeasonalContext for a named season."""
        entry = self.seasons.get(season.lower().strip())
        if entry is None:
            known = ", ".join(sorted(self.seasons))
            raise ValueError(f"Unknown season {season!r}; expected one of: {known}")
        return SeasonalContext(
            current_season=entry.name,
            local_ingredients=entry.local_ingredients,
            seasonal_nutrition_focus=entry.seasonal_nutrition_focus,
        )


def _parse_season(name: str, data: Any) -> SeasonEntry:
    if not isinstance(data, dict):
        raise SeasonalDataError(f"Season {name!r} must be a mapping")
    months = data.get("months") or []
    if not months or not all(isinstance(m, int) and 1 <= m <= 12 for m in months):
        raise SeasonalDataError(f"Season {name!r} needs months in 1-12, got {months!r}")
    ingredients = data.get("local_ingredients") or []
    if not ingredients:
        raise SeasonalDataError(f"Season {name!r} has no local_ingredients")
    return SeasonEntry(
        name=name,
        months=tuple(months),
        local_ingredients=tuple(str(i).strip() for i in ingredients),
        seasonal_nutrition_focus=tuple(
            str(f).strip() for f in data.get("seasonal_nutrition_focus") or []
        ),
    )


def load_seasonal_calendar(path: str | Path | None = None) -> SeasonalCalendar:
    """Parse and validate the seasonal produce calendar.

    Every month must belong to exactly one season.
    """
    path = Path(path) if path else DEFAULT_CALENDAR_PATH
    if not path.is_file():
        raise SeasonalDataError(f"Seasonal calendar not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise SeasonalDataError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("seasons"), dict):
        raise SeasonalDataError(f"{path}: top-level 'seasons' mapping is required")

    seasons = {
        str(name).lower(): _parse_season(str(name).lower(), body)
        for name, body in data["seasons"].items()
    }

    covered = sorted(m for entry in seasons.values() for m in entry.months)
    if covered != list(range(1, 13)):
        raise SeasonalDataError(
            f"{path}: seasons must cover each month exactly once, got {covered}"
        )

    calendar = SeasonalCalendar(
        version=str(data.get("version", "")),
        hemisphere=str(data.get("hemisphere", "")),
        seasons=seasons,
    )
    logger.info("Loaded seasonal calendar v%s (%d seasons) from %s",
                calendar.version, len(seasons), path)
    return calendar
