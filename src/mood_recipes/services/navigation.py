"""Mood-scoped carousel navigation over the recipe store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from mood_recipes.domain.recipes import Mood, Recipe
from mood_recipes.domain.swipe import SwipeAction, interpret_swipe
from mood_recipes.services.recipes import RecipeStore, StoreChange

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorState:
    """Immutable view of the cursor: selected mood, snapshot, and position."""

    mood: Mood | None = None
    snapshot: tuple[Recipe, ...] = ()
    position: int = 0

    @property
    def is_browsing(self) -> bool:
        """Return True once a mood has been selected."""
        return self.mood is not None

    @property
    def current(self) -> Recipe | None:
        """Return the recipe at the current position, if any."""
        if not self.snapshot:
            return None
        return self.snapshot[self.position]

    @property
    def next_recipe(self) -> Recipe | None:
        """Return the recipe after the current one, wrapping around."""
        if not self.snapshot:
            return None
        return self.snapshot[(self.position + 1) % len(self.snapshot)]

    @property
    def previous_recipe(self) -> Recipe | None:
        """Return the recipe before the current one, wrapping around."""
        if not self.snapshot:
            return None
        count = len(self.snapshot)
        return self.snapshot[(self.position - 1 + count) % count]


CursorListener = Callable[[CursorState], None]

UNSELECTED = CursorState()


class NavigationCursor:
    """State machine presenting one current recipe within a mood.

    The cursor is either unselected (no mood, nothing displayed) or browsing
    a snapshot of the store filtered by mood. Advancing wraps around without
    end. Every store change while browsing re-derives the snapshot; the
    current recipe keeps its place by identity when it is still present,
    otherwise the position falls back to the first recipe.
    """

    def __init__(
        self,
        store: RecipeStore,
        *,
        swipe_threshold: float = 150,
        swipe_limit: float = 500,
    ) -> None:
        self.store = store
        self.swipe_threshold = swipe_threshold
        self.swipe_limit = swipe_limit
        self._state = UNSELECTED
        self._listeners: list[CursorListener] = []
        self._unsubscribe = store.subscribe(self._on_store_change)

    @property
    def state(self) -> CursorState:
        """Return the current cursor state."""
        return self._state

    @property
    def selected_mood(self) -> Mood | None:
        """Return the mood being browsed, if any."""
        return self._state.mood

    def subscribe(self, listener: CursorListener) -> Callable[[], None]:
        """Register a state listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Stop tracking store changes."""
        self._unsubscribe()

    def current(self) -> Recipe | None:
        """Return the recipe on display, if any."""
        return self._state.current

    def peek_next(self) -> Recipe | None:
        """Return the recipe advance() would show, without moving."""
        return self._state.next_recipe

    def peek_previous(self) -> Recipe | None:
        """Return the recipe shown before the current one, without moving."""
        return self._state.previous_recipe

    def select_mood(self, mood: Mood) -> CursorState:
        """Start browsing the recipes for a mood from the first one."""
        snapshot = tuple(self.store.query_by_mood(mood))
        _logger.debug("Selected mood=%s recipes=%s", mood.value, len(snapshot))
        return self._transition(CursorState(mood=mood, snapshot=snapshot, position=0))

    def advance(self) -> CursorState:
        """Move to the next recipe, wrapping to the first after the last."""
        state = self._state
        if not state.is_browsing or not state.snapshot:
            _logger.debug("Advance ignored, no recipes available")
            return state
        position = (state.position + 1) % len(state.snapshot)
        return self._transition(replace(state, position=position))

    def go_back(self) -> CursorState:
        """Return to mood selection, clearing the snapshot."""
        _logger.debug("Reset to mood selection")
        return self._transition(UNSELECTED)

    def swipe(self, width: float) -> SwipeAction:
        """Apply a horizontal drag to the carousel and return its action."""
        action = interpret_swipe(
            width, threshold=self.swipe_threshold, limit=self.swipe_limit
        )
        if action is SwipeAction.NEXT:
            self.advance()
        return action

    def _on_store_change(self, change: StoreChange) -> None:
        state = self._state
        if state.mood is None or state.mood not in change.moods:
            return
        snapshot = tuple(self.store.query_by_mood(state.mood))
        position = _relocate(state.current, snapshot)
        _logger.debug(
            "Snapshot recomputed after %s: mood=%s recipes=%s position=%s",
            change.action.value,
            state.mood.value,
            len(snapshot),
            position,
        )
        self._transition(
            CursorState(mood=state.mood, snapshot=snapshot, position=position)
        )

    def _transition(self, state: CursorState) -> CursorState:
        if _same_state(self._state, state):
            return self._state
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state


def _same_state(old: CursorState, new: CursorState) -> bool:
    """Return True when nothing visible differs, comparing recipes by object."""
    # Recipe equality is by id, so edited content must be compared with `is`.
    return (
        old.mood == new.mood
        and old.position == new.position
        and len(old.snapshot) == len(new.snapshot)
        and all(a is b for a, b in zip(old.snapshot, new.snapshot))
    )


def _relocate(recipe: Recipe | None, snapshot: tuple[Recipe, ...]) -> int:
    """Return the new index of a recipe in a snapshot, or 0 if it is gone."""
    if recipe is None:
        return 0
    for index, candidate in enumerate(snapshot):
        if candidate.id == recipe.id:
            return index
    return 0
