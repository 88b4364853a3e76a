"""Immutable fluent builder for CSS compound and combined selectors.

A compound selector is assembled from six categories that must be written in
a fixed order:

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element may occur once. Every write returns a new builder, so a
partially built selector can be reused as a prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from objtasks.selector.errors import CardinalityError, OrderError

__all__ = [
    "COMBINATORS",
    "Category",
    "SelectorBuilder",
    "css_selector_builder",
]

logger = logging.getLogger(__name__)

# Legal CSS combinators. ``combine`` accepts any token.
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class Category(IntEnum):
    """Selector part categories in the order they must be written."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def single_valued(self) -> bool:
        return self in (Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT)


_FIELDS: dict[Category, str] = {
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "classes",
    Category.ATTRIBUTE: "attributes",
    Category.PSEUDO_CLASS: "pseudo_classes",
    Category.PSEUDO_ELEMENT: "pseudo_element",
}


@dataclass(frozen=True)
class SelectorBuilder:
    """Accumulated selector fragments, each carrying its leading punctuation."""

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None
    combined: str | None = None  # full output of a combine(); overrides the rest

    # --- fragment writers -----------------------------------------------------

    def with_element(self, value: str) -> SelectorBuilder:
        """Return a builder with the type selector set to *value*."""
        return self._write(Category.ELEMENT, value)

    def with_id(self, value: str) -> SelectorBuilder:
        """Return a builder with the ``#value`` id selector."""
        return self._write(Category.ID, f"#{value}")

    def with_class(self, value: str) -> SelectorBuilder:
        """Return a builder with ``.value`` appended to the class list."""
        return self._write(Category.CLASS, f".{value}")

    def with_attribute(self, value: str) -> SelectorBuilder:
        """Return a builder with ``[value]`` appended to the attribute list."""
        return self._write(Category.ATTRIBUTE, f"[{value}]")

    def with_pseudo_class(self, value: str) -> SelectorBuilder:
        """Return a builder with ``:value`` appended to the pseudo-class list."""
        return self._write(Category.PSEUDO_CLASS, f":{value}")

    def with_pseudo_element(self, value: str) -> SelectorBuilder:
        """Return a builder with the ``::value`` pseudo-element set."""
        return self._write(Category.PSEUDO_ELEMENT, f"::{value}")

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*, e.g. ``div + p``.

        The combinator is not checked against :data:`COMBINATORS`.
        """
        value = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", value)
        return SelectorBuilder(combined=value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector in canonical category order."""
        if self.combined is not None:
            return self.combined
        return "".join(
            fragment for category in Category for fragment in self.fragments(category)
        )

    def fragments(self, category: Category) -> tuple[str, ...]:
        """Return the fragments written so far for *category*."""
        value = getattr(self, _FIELDS[category])
        if isinstance(value, tuple):
            return value
        return () if value is None else (value,)

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _check(self, category: Category) -> None:
        if category.single_valued and self.fragments(category):
            logger.debug("Rejected second %s write", category.name.lower())
            raise CardinalityError(category=category)
        for later in Category:
            if later > category and self.fragments(later):
                logger.debug(
                    "Rejected %s write after %s",
                    category.name.lower(),
                    later.name.lower(),
                )
                raise OrderError(category=category)

    def _write(self, category: Category, fragment: str) -> SelectorBuilder:
        self._check(category)
        name = _FIELDS[category]
        if category.single_valued:
            value: str | tuple[str, ...] = fragment
        else:
            value = getattr(self, name) + (fragment,)
        logger.debug("Added %s fragment %r", category.name.lower(), fragment)
        return replace(self, **{name: value})


# Entry point: an empty builder every selector chain starts from.
css_selector_builder = SelectorBuilder()
