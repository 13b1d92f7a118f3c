# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SelectorBuilder - Fluent builder for CSS selectors."""

from __future__ import annotations

import logging
from typing import Any

from .categories import CANONICAL_ORDER, COMBINATORS, Category, selector_part
from .combination import Combination
from .exceptions import DuplicateSelectorPartError, InvalidOrderError

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Builder for compound selectors and combinator chains.

    Part methods append a formatted fragment and return the builder, so
    calls chain. The grammar is checked on every call:

    - element, id and pseudo_element can be set only once
      (DuplicateSelectorPartError)
    - categories must be used in canonical order: element, id, class,
      attribute, pseudo-class, pseudo-element (InvalidOrderError)

    Usage:
        >>> SelectorBuilder().id('main').class_('container').stringify()
        '#main.container'
        >>> a = SelectorBuilder().element('ul')
        >>> b = SelectorBuilder().element('li').pseudo_class('first-child')
        >>> SelectorBuilder().combine(a, '>', b).stringify()
        'ul > li:first-child'
    """

    __slots__ = ('_parts', '_combinations')

    def __init__(self) -> None:
        self._parts: dict[Category, Any] = {}
        self._combinations: list[Combination] = []

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    def __str__(self) -> str:
        return self.stringify()

    @selector_part(Category.TYPE)
    def element(self, value: str) -> str:
        """Set the type selector (``value``)."""
        return str(value)

    @selector_part(Category.ID)
    def id(self, value: str) -> str:
        """Set the id selector (``#value``)."""
        return f'#{value}'

    @selector_part(Category.CLASS)
    def class_(self, value: str) -> str:
        """Add a class selector (``.value``)."""
        return f'.{value}'

    @selector_part(Category.ATTRIBUTE)
    def attr(self, value: str) -> str:
        """Add an attribute selector (``[value]``)."""
        return f'[{value}]'

    @selector_part(Category.PSEUDO_CLASS)
    def pseudo_class(self, value: str) -> str:
        """Add a pseudo-class (``:value``)."""
        return f':{value}'

    @selector_part(Category.PSEUDO_ELEMENT)
    def pseudo_element(self, value: str) -> str:
        """Set the pseudo-element (``::value``)."""
        return f'::{value}'

    def _add_part(self, category: Category, fragment: str) -> None:
        """Store a formatted fragment and check the grammar.

        Raises:
            DuplicateSelectorPartError: If a singleton category is already set.
            InvalidOrderError: If the category comes before one already used.
        """
        if category.is_singleton:
            self._check_singleton(category)
            self._parts[category] = fragment
        else:
            self._parts.setdefault(category, []).append(fragment)
        self._check_order()

    def _check_singleton(self, category: Category) -> None:
        """Reject a singleton part that is already set or out of order."""
        if category in self._parts:
            logger.debug("Duplicate %s part", category.value)
            raise DuplicateSelectorPartError(category)
        used = list(self._parts)
        if any(other.rank > category.rank for other in used):
            logger.debug("Out of order %s after %s", category.value, used)
            raise InvalidOrderError(used + [category])

    def _check_order(self) -> None:
        """Check categories, in first-use order, follow CANONICAL_ORDER."""
        used = list(self._parts)
        expected = [category for category in CANONICAL_ORDER if category in self._parts]
        if used != expected:
            logger.debug("Invalid selector order %s", [c.value for c in used])
            raise InvalidOrderError(used)

    def parts(self) -> tuple[str, ...]:
        """Return the compound selector fragments in canonical order."""
        result: list[str] = []
        for category in CANONICAL_ORDER:
            if category not in self._parts:
                continue
            if category.is_singleton:
                result.append(self._parts[category])
            else:
                result.extend(self._parts[category])
        return tuple(result)

    @property
    def combinations(self) -> tuple[Combination, ...]:
        """Combination nodes held by this builder."""
        return tuple(self._combinations)

    def combine(
        self,
        selector_a: SelectorBuilder,
        combinator: str,
        selector_b: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with a combinator.

        The node keeps selector_a's compound parts, selector_b's compound
        parts and selector_b's own combinations. Combinations held by
        selector_a are not carried over, so chains nest on the right::

            builder.combine(a, '+', SelectorBuilder().combine(b, '~', c))

        Args:
            selector_a: Left-hand selector.
            combinator: One of ' ', '+', '~', '>'. Other values are
                used as given and logged as a warning.
            selector_b: Right-hand selector, possibly a combination.

        Returns:
            This builder, now rendering the combination.
        """
        if combinator not in COMBINATORS:
            logger.warning("Unknown combinator %r", combinator)

        self._combinations.append(
            Combination(
                selector_a.parts(),
                combinator,
                selector_b.parts(),
                selector_b.combinations,
            )
        )
        return self

    def stringify(self) -> str:
        """Render the selector.

        Renders the combinations if any were added, the compound selector
        otherwise. Can be called any number of times.
        """
        if self._combinations:
            return ''.join(node.render() for node in self._combinations)
        return ''.join(self.parts())
