"""Console entry point listing recipes grouped by mood."""

import logging

from mood_recipes.app_logging import configure_logging
from mood_recipes.containers import build_container
from mood_recipes.services.recipes import RecipeStore

_logger = logging.getLogger(__name__)


def render_recipe_list(store: RecipeStore) -> str:
    """Render the all-recipes list with one section per mood."""
    lines = ["Mood Recipes", ""]
    for mood, recipes in store.grouped_by_mood().items():
        lines.append(mood.label)
        if not recipes:
            lines.append("  (no recipes)")
        for recipe in recipes:
            lines.append(f"  {recipe.name}")
            lines.append(f"    {recipe.summary}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def main() -> None:
    """Print every recipe in the session store."""
    container = build_container()
    configure_logging(debug=container.settings.debug)
    _logger.debug("Loaded %s recipes", len(container.store))
    try:
        print(render_recipe_list(container.store), end="")
    finally:
        container.close_resources()


if __name__ == "__main__":
    main()
