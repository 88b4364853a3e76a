"""JSON helpers: dump any object's data, load data back onto a class."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_serializable(obj: Any) -> Any:
    """``json`` fallback: dataclasses and plain objects dump their fields."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *obj*.

    Output is compact unless *indent* is given::

        get_json([1, 2, 3])          -> '[1,2,3]'
        get_json(Rectangle(10, 20))  -> '{"width":10,"height":20}'
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        obj,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
        default=_to_serializable,
    )


def from_json(cls: type[T], text: str) -> T:
    """Create an instance of *cls* carrying the fields of a JSON object.

    ``cls.__init__`` is not called; every key of the parsed object becomes an
    attribute of the new instance, which keeps all of *cls*'s methods.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        TypeError: *text* does not hold a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    vars(obj).update(data)
    logger.debug("Loaded %s with fields %s", cls.__name__, list(data))
    return obj
