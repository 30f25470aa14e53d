"""Tests for recipe form drafts and saving."""

import pytest
from pydantic import ValidationError

from mood_recipes.domain.forms import RecipeDraft
from mood_recipes.domain.recipes import Mood, Recipe
from mood_recipes.services.forms import RecipeFormService
from mood_recipes.services.images import ImageService
from mood_recipes.services.navigation import NavigationCursor
from mood_recipes.services.recipes import RecipeStore
from tests.conftest import FailingImageStorage, InMemoryImageStorage


def _draft(**overrides: object) -> RecipeDraft:
    fields: dict[str, object] = {
        "name": "Spicy Thai Curry",
        "ingredients": ["Coconut milk", "Curry paste"],
        "instructions": ["Cook rice", "Simmer curry"],
        "mood": Mood.ENERGETIC,
        "prep_time": "15 mins",
        "cook_time": "25 mins",
        "servings": "4",
        "image_ref": "thai_curry",
    }
    fields.update(overrides)
    return RecipeDraft.model_validate(fields)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"ingredients": []},
        {"instructions": ["Cook rice", ""]},
        {"prep_time": ""},
        {"servings": ""},
        {"image_ref": ""},
        {"mood": "Hungry"},
    ],
)
def test_invalid_drafts_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        _draft(**overrides)


@pytest.mark.parametrize(
    "servings,expected",
    [("4", 4), ("+6", 6), ("four", 1), ("0", 1), ("-2", 1), ("1_000", 1), ("٣", 1)],
)
def test_servings_fall_back_to_one(servings: str, expected: int) -> None:
    assert _draft(servings=servings).to_recipe().servings == expected


def test_draft_accepts_mood_label() -> None:
    assert _draft(mood="Tired").mood is Mood.TIRED


def test_from_recipe_round_trips_fields(happy_a: Recipe) -> None:
    draft = RecipeDraft.from_recipe(happy_a)

    assert draft.servings == "2"
    assert draft.ingredients == list(happy_a.ingredients)
    assert draft.to_recipe().id != happy_a.id


def test_save_adds_new_recipe(
    store: RecipeStore, image_service: ImageService
) -> None:
    service = RecipeFormService(store=store, image_service=image_service)

    saved = service.save(_draft())

    assert saved is not None
    assert store.query_by_mood(Mood.ENERGETIC) == [saved]


def test_save_updates_recipe_being_edited(
    store: RecipeStore, image_service: ImageService, happy_a: Recipe
) -> None:
    cursor = NavigationCursor(store)
    cursor.select_mood(Mood.HAPPY)
    service = RecipeFormService(store=store, image_service=image_service)
    draft = service.new_draft(editing=happy_a)
    assert draft is not None

    saved = service.save(draft.model_copy(update={"name": "Bigger Bowl"}), happy_a)

    assert saved is not None
    assert saved.id == happy_a.id
    assert store.get(happy_a.id).name == "Bigger Bowl"
    assert cursor.current().name == "Bigger Bowl"


def test_save_for_deleted_recipe_is_no_op(
    store: RecipeStore, image_service: ImageService, sad_c: Recipe
) -> None:
    service = RecipeFormService(store=store, image_service=image_service)
    store.delete(sad_c.id)
    before = store.all()

    assert service.save(_draft(), editing=sad_c) is None
    assert store.all() == before


def test_new_draft_without_recipe_is_blank(
    store: RecipeStore, image_service: ImageService
) -> None:
    service = RecipeFormService(store=store, image_service=image_service)

    assert service.new_draft() is None


def test_attach_image_points_draft_at_saved_file(store: RecipeStore) -> None:
    storage = InMemoryImageStorage()
    service = RecipeFormService(store=store, image_service=ImageService(storage))

    draft = service.attach_image(_draft(), b"\xff\xd8\xffjpeg", "curry")

    assert draft.is_custom_image
    assert storage.files[draft.image_ref] == b"\xff\xd8\xffjpeg"


def test_attach_image_keeps_draft_when_save_fails(store: RecipeStore) -> None:
    storage = FailingImageStorage()
    service = RecipeFormService(store=store, image_service=ImageService(storage))
    original = _draft()

    draft = service.attach_image(original, b"bytes", "curry")

    assert draft == original
    assert storage.attempts == ["curry"]
