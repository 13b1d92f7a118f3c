# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Selector builder exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .categories import Category


class SelectorError(Exception):
    """Base exception for selector builder errors."""

    pass


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is set twice on one selector."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            'Element, id and pseudo-element should not occur more then one time '
            'inside the selector'
        )


class InvalidOrderError(SelectorError):
    """Raised when selector parts are not in canonical category order."""

    def __init__(self, order: list[Category]) -> None:
        self.order = order
        super().__init__(
            'Selector parts should be arranged in the following order: '
            'element, id, class, attribute, pseudo-class, pseudo-element'
        )
