"""Filesystem-backed image storage."""

import logging
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from mood_recipes.services.images import ImageStorage

_logger = logging.getLogger(__name__)


@dataclass
class LocalImageStorage(ImageStorage):
    """Stores image bytes as files in a local directory."""

    base_dir: Path

    def save_image_bytes(self, data: bytes, suggested_name: str) -> str | None:
        """Write bytes under a generated unique filename and return it."""
        stem = _safe_stem(suggested_name)
        filename = f"{stem}_{str(uuid4()).upper()}.jpg"
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            (self.base_dir / filename).write_bytes(data)
        except OSError:
            _logger.exception("Error saving image %s", filename)
            return None
        return filename

    def load_image_bytes(self, filename: str) -> bytes | None:
        """Read previously saved bytes, returning None when unavailable."""
        if not filename or Path(filename).name != filename:
            _logger.warning("Rejected image filename: %r", filename)
            return None
        try:
            return (self.base_dir / filename).read_bytes()
        except FileNotFoundError:
            return None
        except OSError:
            _logger.exception("Error loading image %s", filename)
            return None


def _safe_stem(name: str) -> str:
    """Reduce a suggested name to a filesystem-safe stem."""
    cleaned = "".join(
        char if char.isalnum() or char in "-_" else "_" for char in name.strip()
    )
    return cleaned.strip("_") or "image"
