# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""CssSelectorBuilder - Facade starting a new selector on every call."""

from __future__ import annotations

from typing import Any, Callable

from .builder import SelectorBuilder


class CssSelectorBuilder:
    """Facade creating a fresh SelectorBuilder for each call.

    Part methods are discovered on the builder class via the
    @selector_part decorator, so a builder subclass with extra parts
    gets matching facade methods for free. Names with a trailing
    underscore are also reachable without it (``class_`` as ``class``).

    Usage:
        >>> builder = CssSelectorBuilder()
        >>> builder.id('main').class_('container').class_('editable').stringify()
        '#main.container.editable'
        >>> builder.combine(
        ...     builder.element('p'), '~', builder.element('ul')
        ... ).stringify()
        'p ~ ul'
    """

    __slots__ = ('_builder_class', '_part_methods')

    def __init__(self, builder_class: type[SelectorBuilder] = SelectorBuilder) -> None:
        self._builder_class = builder_class
        self._part_methods = self._collect_part_methods(builder_class)

    @staticmethod
    def _collect_part_methods(builder_class: type[SelectorBuilder]) -> dict[str, str]:
        """Map facade names to @selector_part method names."""
        part_methods: dict[str, str] = {}
        for name in dir(builder_class):
            if name.startswith('_'):
                continue
            method = getattr(builder_class, name, None)
            if getattr(method, '_selector_category', None) is None:
                continue
            part_methods[name] = name
            part_methods.setdefault(name.rstrip('_'), name)
        return part_methods

    def __getattr__(self, name: str) -> Callable[[Any], SelectorBuilder]:
        """Return a callable starting a new selector with the named part."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        if name in self._part_methods:
            return self._make_part_method(self._part_methods[name])

        raise AttributeError(
            f"'{type(self).__name__}' has no selector part '{name}'"
        )

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._part_methods))

    def _make_part_method(self, method_name: str) -> Callable[[Any], SelectorBuilder]:
        """Create the facade method for one part."""
        builder_class = self._builder_class

        def part_method(value: Any) -> SelectorBuilder:
            return getattr(builder_class(), method_name)(value)

        part_method.__name__ = method_name
        return part_method

    def combine(
        self,
        selector_a: SelectorBuilder,
        combinator: str,
        selector_b: SelectorBuilder,
    ) -> SelectorBuilder:
        """Start a new selector combining two others."""
        return self._builder_class().combine(selector_a, combinator, selector_b)


css_selector_builder = CssSelectorBuilder()
