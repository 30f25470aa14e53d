"""Swipe gesture interpretation for the recipe carousel."""

from enum import Enum


class SwipeAction(str, Enum):
    """Discrete outcome of a horizontal card drag."""

    NEXT = "next"
    OPEN_DETAIL = "open_detail"
    RESET = "reset"


def interpret_swipe(
    width: float, *, threshold: float = 150, limit: float = 500
) -> SwipeAction:
    """Map a horizontal drag distance to a carousel action.

    Left drags between ``threshold`` and ``limit`` move to the next recipe,
    right drags in the same band open the recipe detail. Shorter drags, and
    drags past ``limit``, snap the card back.
    """
    if -limit <= width <= -threshold:
        return SwipeAction.NEXT
    if threshold <= width <= limit:
        return SwipeAction.OPEN_DETAIL
    return SwipeAction.RESET
