# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""CSS Selector Builder - Fluent, grammar-checked CSS selector construction.

A lightweight, zero-dependency library that assembles compound selectors
(``element#id.class[attr]:pseudo-class::pseudo-element``) and combinator
chains, rejecting duplicate or out-of-order parts as they are added.
"""

__version__ = "0.1.0"

from .builder import SelectorBuilder
from .categories import CANONICAL_ORDER, COMBINATORS, Category, selector_part
from .combination import Combination
from .exceptions import (
    DuplicateSelectorPartError,
    InvalidOrderError,
    SelectorError,
)
from .facade import CssSelectorBuilder, css_selector_builder
from .objects import Rectangle, from_json, get_json

__all__ = [
    # Core classes
    "SelectorBuilder",
    "Combination",
    # Facade
    "CssSelectorBuilder",
    "css_selector_builder",
    # Categories
    "Category",
    "CANONICAL_ORDER",
    "COMBINATORS",
    "selector_part",
    # Exceptions
    "SelectorError",
    "DuplicateSelectorPartError",
    "InvalidOrderError",
    # Object helpers
    "Rectangle",
    "get_json",
    "from_json",
]
