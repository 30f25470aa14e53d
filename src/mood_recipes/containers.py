"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from mood_recipes.adapters.local_image_storage import LocalImageStorage
from mood_recipes.config import Settings
from mood_recipes.domain.samples import sample_recipes
from mood_recipes.services.forms import RecipeFormService
from mood_recipes.services.images import ImageService
from mood_recipes.services.navigation import NavigationCursor
from mood_recipes.services.recipes import RecipeStore


@dataclass
class AppContainer:
    """Holds the session-wide store, cursor, and services."""

    settings: Settings
    store: RecipeStore
    cursor: NavigationCursor
    image_service: ImageService
    form_service: RecipeFormService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    seed = sample_recipes() if resolved_settings.seed_sample_recipes else []
    store = RecipeStore(seed, debug=resolved_settings.debug)
    cursor = NavigationCursor(
        store,
        swipe_threshold=resolved_settings.swipe_threshold,
        swipe_limit=resolved_settings.swipe_limit,
    )
    image_service = ImageService(LocalImageStorage(resolved_settings.image_dir))
    form_service = RecipeFormService(store=store, image_service=image_service)

    def close_resources() -> None:
        cursor.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        cursor=cursor,
        image_service=image_service,
        form_service=form_service,
        close_resources=close_resources,
    )
