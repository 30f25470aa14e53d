"""Recipe store owning the canonical in-memory recipe collection."""

import dataclasses
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from mood_recipes.domain.recipes import Mood, Recipe

_logger = logging.getLogger(__name__)


class StoreAction(str, Enum):
    """Kind of mutation applied to the store."""

    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    MOOD_CLEARED = "mood_cleared"


@dataclass(frozen=True)
class StoreChange:
    """Notification describing a completed store mutation."""

    action: StoreAction
    recipes: tuple[Recipe, ...]
    previous: Recipe | None = None

    @property
    def moods(self) -> set[Mood]:
        """Return every mood touched by the mutation."""
        moods = {recipe.mood for recipe in self.recipes}
        if self.previous is not None:
            moods.add(self.previous.mood)
        return moods


StoreListener = Callable[[StoreChange], None]


class RecipeStore:
    """Ordered recipe collection with mood queries and change notification.

    Lookups by id that miss are no-ops returning ``None``; listeners are only
    notified for mutations that changed the collection, synchronously and
    before the mutating call returns.
    """

    def __init__(self, recipes: Iterable[Recipe] = (), *, debug: bool = False) -> None:
        self._recipes: list[Recipe] = list(recipes)
        self._listeners: list[StoreListener] = []
        self.debug = debug

    def __len__(self) -> int:
        return len(self._recipes)

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def all(self) -> list[Recipe]:
        """Return every recipe in store order."""
        return list(self._recipes)

    def get(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        index = self._index_of(recipe_id)
        return None if index is None else self._recipes[index]

    def query_by_mood(self, mood: Mood) -> list[Recipe]:
        """Return recipes with the given mood, preserving store order."""
        return [recipe for recipe in self._recipes if recipe.mood == mood]

    def grouped_by_mood(self) -> dict[Mood, list[Recipe]]:
        """Return recipes grouped under every mood, in mood order."""
        return {mood: self.query_by_mood(mood) for mood in Mood}

    def add(self, recipe: Recipe) -> Recipe:
        """Append a recipe to the collection."""
        self._recipes.append(recipe)
        self._log("Recipe added: id=%s mood=%s", recipe.id, recipe.mood.value)
        self._notify(StoreChange(action=StoreAction.ADDED, recipes=(recipe,)))
        return recipe

    def update(self, recipe_id: UUID, new_recipe: Recipe) -> Recipe | None:
        """Replace a recipe in place, keeping its position and identity."""
        index = self._index_of(recipe_id)
        if index is None:
            self._log("Recipe update skipped, unknown id=%s", recipe_id)
            return None
        previous = self._recipes[index]
        stored = dataclasses.replace(new_recipe, id=recipe_id)
        self._recipes[index] = stored
        self._log(
            "Recipe updated: id=%s mood=%s->%s",
            recipe_id,
            previous.mood.value,
            stored.mood.value,
        )
        self._notify(
            StoreChange(
                action=StoreAction.UPDATED, recipes=(stored,), previous=previous
            )
        )
        return stored

    def delete(self, recipe_id: UUID) -> Recipe | None:
        """Remove a recipe by id and return it, if present."""
        index = self._index_of(recipe_id)
        if index is None:
            self._log("Recipe delete skipped, unknown id=%s", recipe_id)
            return None
        removed = self._recipes.pop(index)
        self._log("Recipe deleted: id=%s", recipe_id)
        self._notify(StoreChange(action=StoreAction.DELETED, recipes=(removed,)))
        return removed

    def delete_by_mood(self, mood: Mood) -> list[Recipe]:
        """Remove every recipe with the given mood and return them."""
        removed = [recipe for recipe in self._recipes if recipe.mood == mood]
        if not removed:
            return []
        self._recipes = [recipe for recipe in self._recipes if recipe.mood != mood]
        self._log("Recipes deleted for mood=%s count=%s", mood.value, len(removed))
        self._notify(
            StoreChange(action=StoreAction.MOOD_CLEARED, recipes=tuple(removed))
        )
        return removed

    def _index_of(self, recipe_id: UUID) -> int | None:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return index
        return None

    def _notify(self, change: StoreChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def _log(self, message: str, *args: object) -> None:
        if self.debug:
            _logger.info(message, *args)
        else:
            _logger.debug(message, *args)
