# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Combination node - two selectors joined by a combinator."""

from __future__ import annotations


class Combination:
    """Two compound selectors joined by a combinator.

    Each node holds:
    - left: compound parts of the left selector
    - combinator: the combinator token (' ', '+', '~', '>')
    - right: compound parts of the right selector
    - nested: combinations already held by the right selector

    Only the right side carries nested combinations, so a chain built by
    nesting combine() calls on the right renders left to right.

    Example:
        >>> node = Combination(('div', '.main'), '>', ('p',))
        >>> node.render()
        'div.main > p'
    """

    __slots__ = ('left', 'combinator', 'right', 'nested')

    def __init__(
        self,
        left: tuple[str, ...],
        combinator: str,
        right: tuple[str, ...],
        nested: tuple[Combination, ...] = (),
    ) -> None:
        self.left = left
        self.combinator = combinator
        self.right = right
        self.nested = nested

    def __repr__(self) -> str:
        return f"Combination({self.render()!r})"

    @property
    def separator(self) -> str:
        """The combinator surrounded by single spaces."""
        return f' {self.combinator} '

    def render(self) -> str:
        """Concatenate left, separator, right and nested nodes, depth first."""
        chunks: list[str] = []
        stack: list[Combination] = [self]
        while stack:
            node = stack.pop()
            chunks.append(''.join(node.left))
            chunks.append(node.separator)
            chunks.append(''.join(node.right))
            stack.extend(reversed(node.nested))
        return ''.join(chunks)
