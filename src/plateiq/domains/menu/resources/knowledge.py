"""MCP Resources for the menu knowledge base."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from plateiq.domains.menu.connectors.seasonal import SeasonalCalendar

from plateiq.domains.menu.domain_logic.knowledge_base import (
    ANTI_INFLAMMATORY_EVIDENCE,
    BIOMARKER_RULES,
    MICRONUTRIENT_EVIDENCE,
)


def register_knowledge_resources(mcp: FastMCP, seasonal_calendar: SeasonalCalendar) -> None:
    """Register read-only knowledge base resources on the MCP server."""

    @mcp.resource("knowledge://menu/biomarkers")
    def biomarker_rules_resource() -> str:
        """Biomarker thresholds, their tags, and the ingredients favoured for each."""
        return json.dumps(
            {
                "rules": [
                    {
                        "biomarker": rule.label,
                        "field": rule.field_name,
                        "trigger": f"{'>' if rule.direction == 'above' else '<'} {rule.threshold:g}",
                        "tag": rule.tag,
                        "beneficial_ingredients": list(rule.keywords),
                    }
                    for rule in BIOMARKER_RULES
                ],
                "evidence_claims": [
                    {
                        "claim": evidence.claim,
                        "evidence_level": evidence.evidence_level,
                        "confidence": evidence.confidence,
                        "research_citations": list(evidence.research_citations),
                    }
                    for evidence in (ANTI_INFLAMMATORY_EVIDENCE, MICRONUTRIENT_EVIDENCE)
                ],
            },
            indent=2,
        )

    @mcp.resource("knowledge://menu/seasons")
    def seasonal_calendar_resource() -> str:
        """Seasonal produce calendar used for seasonal appropriateness scoring."""
        return json.dumps(
            {
                "version": seasonal_calendar.version,
                "hemisphere": seasonal_calendar.hemisphere,
                "seasons": {
                    name: {
                        "months": list(entry.months),
                        "local_ingredients": list(entry.local_ingredients),
                        "seasonal_nutrition_focus": list(entry.seasonal_nutrition_focus),
                    }
                    for name, entry in seasonal_calendar.seasons.items()
                },
            },
            indent=2,
        )
