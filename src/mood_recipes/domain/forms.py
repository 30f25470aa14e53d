"""Form input models for creating and editing recipes."""

import re

from pydantic import BaseModel, Field, field_validator

from mood_recipes.domain.recipes import Mood, Recipe

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class RecipeDraft(BaseModel):
    """User-entered recipe fields as typed into the recipe form."""

    name: str = Field(min_length=1)
    ingredients: list[str] = Field(min_length=1)
    instructions: list[str] = Field(min_length=1)
    mood: Mood = Mood.HAPPY
    prep_time: str = Field(min_length=1)
    cook_time: str = Field(min_length=1)
    servings: str = Field(min_length=1)
    image_ref: str = Field(min_length=1)
    is_custom_image: bool = False

    @field_validator("name", "prep_time", "cook_time", "servings", "image_ref")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned

    @field_validator("ingredients", "instructions")
    @classmethod
    def _reject_blank_entries(cls, value: list[str]) -> list[str]:
        if any(not entry.strip() for entry in value):
            raise ValueError("entries must not be blank")
        return [entry.strip() for entry in value]

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeDraft":
        """Pre-fill a draft from an existing recipe for editing."""
        return cls(
            name=recipe.name,
            ingredients=list(recipe.ingredients),
            instructions=list(recipe.instructions),
            mood=recipe.mood,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            servings=str(recipe.servings),
            image_ref=recipe.image_ref,
            is_custom_image=recipe.is_custom_image,
        )

    @property
    def servings_count(self) -> int:
        """Return servings as a positive integer, defaulting to 1."""
        if not _INTEGER_PATTERN.fullmatch(self.servings):
            return 1
        count = int(self.servings)
        return count if count > 0 else 1

    def to_recipe(self) -> Recipe:
        """Build a new recipe record from the draft."""
        return Recipe(
            name=self.name,
            ingredients=tuple(self.ingredients),
            instructions=tuple(self.instructions),
            mood=self.mood,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            servings=self.servings_count,
            image_ref=self.image_ref,
            is_custom_image=self.is_custom_image,
        )
