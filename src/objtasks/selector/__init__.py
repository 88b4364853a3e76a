from objtasks.selector.builder import (
    COMBINATORS,
    Category,
    SelectorBuilder,
    css_selector_builder,
)
from objtasks.selector.errors import CardinalityError, OrderError, SelectorError

__all__ = [
    "COMBINATORS",
    "Category",
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "CardinalityError",
    "OrderError",
]
