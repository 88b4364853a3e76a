"""Error hierarchy for the CSS selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.builder import Category


class SelectorError(Exception):
    """Base error for all selector builder errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class CardinalityError(SelectorError):
    """An element, id or pseudo-element was written a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, message: str = MESSAGE, **kwargs: Category | None) -> None:
        super().__init__(message, **kwargs)


class OrderError(SelectorError):
    """A selector part was written after a part that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, message: str = MESSAGE, **kwargs: Category | None) -> None:
        super().__init__(message, **kwargs)
