"""Saving recipe form drafts into the store."""

from dataclasses import dataclass

from mood_recipes.domain.forms import RecipeDraft
from mood_recipes.domain.recipes import Recipe
from mood_recipes.services.images import ImageService
from mood_recipes.services.recipes import RecipeStore


@dataclass
class RecipeFormService:
    """Application service behind the new and edit recipe forms."""

    store: RecipeStore
    image_service: ImageService

    def new_draft(self, editing: Recipe | None = None) -> RecipeDraft | None:
        """Return a pre-filled draft for editing, or None for a blank form."""
        if editing is None:
            return None
        return RecipeDraft.from_recipe(editing)

    def save(self, draft: RecipeDraft, editing: Recipe | None = None) -> Recipe | None:
        """Add the draft as a new recipe, or apply it to the recipe being edited."""
        recipe = draft.to_recipe()
        if editing is None:
            return self.store.add(recipe)
        return self.store.update(editing.id, recipe)

    def attach_image(
        self, draft: RecipeDraft, data: bytes, suggested_name: str
    ) -> RecipeDraft:
        """Save picked image bytes and point the draft at the stored file."""
        filename = self.image_service.save(data, suggested_name)
        if filename is None:
            return draft
        return draft.model_copy(
            update={"image_ref": filename, "is_custom_image": True}
        )
