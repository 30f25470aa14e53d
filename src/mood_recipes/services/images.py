"""Recipe image resolution backed by a local image store."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from mood_recipes.domain.recipes import Recipe

PLACEHOLDER_ASSET = "photo"

_logger = logging.getLogger(__name__)


class ImageStorage(Protocol):
    """Interface for saving and loading custom recipe images."""

    def save_image_bytes(self, data: bytes, suggested_name: str) -> str | None:
        """Persist image bytes and return the generated filename."""

    def load_image_bytes(self, filename: str) -> bytes | None:
        """Return previously saved image bytes, if present."""


class ImageKind(str, Enum):
    """How a recipe image should be rendered."""

    ASSET = "asset"
    CUSTOM = "custom"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class RecipeImage:
    """Resolved image for a recipe."""

    kind: ImageKind
    asset_name: str | None = None
    data: bytes | None = None


@dataclass
class ImageService:
    """Application service for custom recipe images."""

    storage: ImageStorage

    def save(self, data: bytes, suggested_name: str) -> str | None:
        """Save image bytes and return the filename to use as image_ref."""
        if not data:
            _logger.warning("Refusing to save empty image for %s", suggested_name)
            return None
        filename = self.storage.save_image_bytes(data, suggested_name)
        if filename is None:
            _logger.warning("Failed to save image for %s", suggested_name)
        return filename

    def resolve(self, recipe: Recipe) -> RecipeImage:
        """Resolve a recipe image, substituting a placeholder when missing."""
        if not recipe.is_custom_image:
            return RecipeImage(kind=ImageKind.ASSET, asset_name=recipe.image_ref)
        data = self.storage.load_image_bytes(recipe.image_ref)
        if data is None:
            _logger.warning(
                "Custom image missing for recipe %s: %s", recipe.id, recipe.image_ref
            )
            return RecipeImage(kind=ImageKind.PLACEHOLDER, asset_name=PLACEHOLDER_ASSET)
        return RecipeImage(kind=ImageKind.CUSTOM, data=data)
