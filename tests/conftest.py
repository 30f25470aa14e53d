"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from mood_recipes.config import Settings
from mood_recipes.domain.recipes import Mood, Recipe
from mood_recipes.services.images import ImageService, ImageStorage
from mood_recipes.services.navigation import NavigationCursor
from mood_recipes.services.recipes import RecipeStore


def make_recipe(name: str, mood: Mood, **overrides: object) -> Recipe:
    """Build a recipe with sensible defaults for tests."""
    fields: dict[str, object] = {
        "name": name,
        "ingredients": ("Flour", "Water"),
        "instructions": ("Mix", "Bake"),
        "mood": mood,
        "prep_time": "5 mins",
        "cook_time": "10 mins",
        "servings": 2,
        "image_ref": name.lower().replace(" ", "_"),
    }
    fields.update(overrides)
    return Recipe(**fields)  # type: ignore[arg-type]


@dataclass
class InMemoryImageStorage(ImageStorage):
    """In-memory image storage for tests."""

    files: dict[str, bytes] = field(default_factory=dict)

    def save_image_bytes(self, data: bytes, suggested_name: str) -> str | None:
        filename = f"{suggested_name}_{len(self.files)}.jpg"
        self.files[filename] = data
        return filename

    def load_image_bytes(self, filename: str) -> bytes | None:
        return self.files.get(filename)


@dataclass
class FailingImageStorage(ImageStorage):
    """Image storage whose writes always fail."""

    attempts: list[str] = field(default_factory=list)

    def save_image_bytes(self, data: bytes, suggested_name: str) -> str | None:
        self.attempts.append(suggested_name)
        return None

    def load_image_bytes(self, filename: str) -> bytes | None:
        return None


@dataclass(eq=False)
class RecordingListener:
    """Collects every notification passed to it."""

    events: list[object] = field(default_factory=list)

    def __call__(self, event: object) -> None:
        self.events.append(event)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(image_dir=tmp_path / "images")


@pytest.fixture
def happy_a() -> Recipe:
    return make_recipe("Buddha Bowl", Mood.HAPPY)


@pytest.fixture
def happy_b() -> Recipe:
    return make_recipe("Fruit Smoothie", Mood.HAPPY)


@pytest.fixture
def sad_c() -> Recipe:
    return make_recipe("Mac and Cheese", Mood.SAD)


@pytest.fixture
def sad_d() -> Recipe:
    return make_recipe("Cookies", Mood.SAD)


@pytest.fixture
def store(
    happy_a: Recipe, sad_c: Recipe, happy_b: Recipe, sad_d: Recipe
) -> RecipeStore:
    return RecipeStore([happy_a, sad_c, happy_b, sad_d])


@pytest.fixture
def cursor(store: RecipeStore) -> NavigationCursor:
    return NavigationCursor(store)


@pytest.fixture
def image_storage() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture
def image_service(image_storage: InMemoryImageStorage) -> ImageService:
    return ImageService(image_storage)
