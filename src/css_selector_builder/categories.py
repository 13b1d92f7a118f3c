# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Selector part categories and the decorator that binds methods to them.

A compound selector is made of parts from six categories that must appear
in a fixed order::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              repeatable categories

``type``, ``id`` and ``pseudoElement`` are singletons: at most one part
per selector. The others can occur any number of times.
"""

from __future__ import annotations

from enum import Enum
from functools import wraps
from typing import Any, Callable


class Category(Enum):
    """Selector part category. Definition order is the canonical order."""

    TYPE = 'type'
    ID = 'id'
    CLASS = 'class'
    ATTRIBUTE = 'attribute'
    PSEUDO_CLASS = 'pseudoClass'
    PSEUDO_ELEMENT = 'pseudoElement'

    @property
    def rank(self) -> int:
        """Position of the category in CANONICAL_ORDER."""
        return CANONICAL_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """True if at most one part of this category is allowed."""
        return self in SINGLETON_CATEGORIES


CANONICAL_ORDER: tuple[Category, ...] = tuple(Category)

SINGLETON_CATEGORIES: frozenset[Category] = frozenset({
    Category.TYPE,
    Category.ID,
    Category.PSEUDO_ELEMENT,
})

# descendant, next-sibling, subsequent-sibling, child
COMBINATORS: frozenset[str] = frozenset({' ', '+', '~', '>'})


def selector_part(category: Category) -> Callable:
    """Decorator binding a builder method to a selector part category.

    The decorated method receives the raw value and returns the formatted
    fragment (e.g. ``'.' + value`` for a class). The wrapper hands the
    fragment to ``self._add_part()``, which enforces the grammar, and
    returns the builder itself so calls can be chained.

    The category is stored on the wrapper as ``_selector_category`` so
    that facades can discover part methods by scanning the class.

    Example:
        >>> from css_selector_builder import SelectorBuilder
        >>> class MyBuilder(SelectorBuilder):
        ...     @selector_part(Category.CLASS)
        ...     def state(self, value):
        ...         return f'.is-{value}'
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self: Any, value: Any) -> Any:
            self._add_part(category, func(self, value))
            return self

        wrapper._selector_category = category
        return wrapper

    return decorator
