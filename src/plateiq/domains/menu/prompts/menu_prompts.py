"""MCP prompts: pre-built interaction templates for menu planning journeys."""

from __future__ import annotations

from fastmcp import FastMCP


def register_menu_prompts(mcp: FastMCP) -> None:
    """Register menu planning MCP prompts."""

    @mcp.prompt()
    def weekly_menu_prompt(meal_types: str = "breakfast, lunch and dinner") -> str:
        """Prompt template for planning tomorrow's meals."""
        return f"""Please plan my {meal_types} for tomorrow. I'd like:

1. One recipe per meal that fits my tastes and cooking skill
2. Ingredients that are in season right now
3. A mix of familiar favourites and something new
4. The expected effect on my energy and inflammation
5. A combined shopping list

Keep it realistic for a weekday."""

    @mcp.prompt()
    def biomarker_menu_prompt(focus: str = "inflammation") -> str:
        """Prompt template for a menu optimized around lab results."""
        return f"""My recent lab results flagged {focus}. Please build a menu that:

1. Prioritizes ingredients known to help with {focus}
2. Explains which recipes contribute the most and why
3. Shows the predicted chance of biomarker improvement
4. Still respects my dietary preferences

This is for meal planning only, not medical advice."""
