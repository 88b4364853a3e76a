"""objtasks - object creation, JSON round-trips and a fluent CSS selector builder."""

from objtasks.config import ObjtasksConfig
from objtasks.selector import (
    COMBINATORS,
    CardinalityError,
    Category,
    OrderError,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)
from objtasks.serialization import from_json, get_json
from objtasks.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "ObjtasksConfig",
    # shapes
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
    # selector
    "COMBINATORS",
    "Category",
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "CardinalityError",
    "OrderError",
]
