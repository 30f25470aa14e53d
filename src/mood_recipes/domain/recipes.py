"""Domain models for mood-tagged recipes."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4


class Mood(str, Enum):
    """Closed set of moods used to classify recipes."""

    HAPPY = "Happy"
    SAD = "Sad"
    ENERGETIC = "Energetic"
    TIRED = "Tired"
    STRESSED = "Stressed"

    @property
    def icon(self) -> str:
        """Return the display glyph for the mood."""
        return _MOOD_ICONS[self]

    @property
    def label(self) -> str:
        """Return the mood heading shown above its recipes."""
        return f"{self.icon} {self.value}"


_MOOD_ICONS: dict[Mood, str] = {
    Mood.HAPPY: "😊",
    Mood.SAD: "😢",
    Mood.ENERGETIC: "⚡️",
    Mood.TIRED: "😴",
    Mood.STRESSED: "😰",
}


@dataclass(frozen=True, eq=False)
class Recipe:
    """A recipe record; identity is the generated id."""

    name: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    mood: Mood
    prep_time: str
    cook_time: str
    servings: int
    image_ref: str
    is_custom_image: bool = False
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Recipe name must not be blank")
        if self.servings < 1:
            raise ValueError("Recipe servings must be positive")
        # Sequences are stored as tuples so a frozen record stays immutable.
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "instructions", tuple(self.instructions))
        object.__setattr__(self, "mood", Mood(self.mood))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def summary(self) -> str:
        """Return the one-line timing and servings summary."""
        return f"{self.prep_time} • {self.cook_time} • {self.servings} servings"
