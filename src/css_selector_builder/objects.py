# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Object helpers: a rectangle shape and JSON round-tripping."""

from __future__ import annotations

import json
from typing import Any


class Rectangle:
    """A rectangle with width, height and area.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"Rectangle({self.width!r}, {self.height!r})"

    def get_area(self) -> float:
        return self.width * self.height


def _as_dict(obj: Any) -> dict[str, Any]:
    """Instance attributes of a plain object, for json.dumps(default=...)."""
    if not hasattr(obj, '__dict__'):
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        )
    return {key: value for key, value in vars(obj).items() if not callable(value)}


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of obj.

    Plain objects are written as a mapping of their instance attributes.

    Examples:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json(Rectangle(10, 20))
        '{"width":10,"height":20}'
    """
    return json.dumps(obj, default=_as_dict, separators=(',', ':'), ensure_ascii=False)


def from_json(proto: Any, text: str) -> Any:
    """Build an object of proto's type from its JSON representation.

    The decoded values are passed positionally to the constructor, in the
    order they appear in text, so the constructor's parameter order must
    match the serialized field order.

    Args:
        proto: A class, or an instance whose class is used.
        text: JSON object (or array) text. Any other JSON value yields
            no constructor arguments.

    Returns:
        A new instance of the class.

    Raises:
        json.JSONDecodeError: If text is not valid JSON.

    Example:
        >>> from_json(Rectangle, '{"width":10,"height":20}').get_area()
        200
    """
    cls = proto if isinstance(proto, type) else type(proto)
    params = json.loads(text)
    if isinstance(params, dict):
        values = list(params.values())
    elif isinstance(params, list):
        values = params
    else:
        values = []
    return cls(*values)
