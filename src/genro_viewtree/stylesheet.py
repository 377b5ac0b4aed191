# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stylesheet - a minimal in-memory style resolver.

The layout machinery never looks inside a stylesheet: it only stores the
reference and hands it to nodes, which call query(stylename). This class
is the resolver shipped with the package; any object with a compatible
query() method can be used instead.

Example:
    >>> base = Stylesheet('base')
    >>> base.style('label', color='black', size=12)
    >>> sheet = Stylesheet('ipad')
    >>> sheet.import_stylesheet(base)
    >>> sheet.style('title', extends='label', size=18)
    >>> sheet.query('title')
    {'color': 'black', 'size': 18}
"""

from __future__ import annotations

from typing import Any, Iterator


class Stylesheet:
    """Named styles, each a property dict with optional inheritance.

    Lookup order for query(name), later entries winning:
    - imported stylesheets, in import order
    - the style named in extends (recursively)
    - the properties declared for name in this sheet
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._styles: dict[str, dict[str, Any]] = {}
        self._extends: dict[str, str] = {}
        self._imports: list[Stylesheet] = []

    def __repr__(self) -> str:
        return f"Stylesheet({self.name!r}, {list(self._styles)})"

    def __contains__(self, stylename: str) -> bool:
        if stylename in self._styles:
            return True
        return any(stylename in imported for imported in self._imports)

    def __iter__(self) -> Iterator[str]:
        return iter(self.stylenames())

    def stylenames(self) -> list[str]:
        """All stylenames known to this sheet, imported ones included."""
        names: dict[str, None] = {}
        for imported in self._imports:
            names.update(dict.fromkeys(imported.stylenames()))
        names.update(dict.fromkeys(self._styles))
        return list(names)

    def style(self, *stylenames: str, extends: str | None = None, **properties: Any) -> None:
        """Declare properties for one or more stylenames.

        Repeated declarations for the same name are merged.

        Args:
            *stylenames: Names receiving the properties.
            extends: Name of a style whose properties these inherit.
            **properties: Property values.

        Example:
            >>> sheet.style('button', 'link', color='blue')
            >>> sheet.style('big_button', extends='button', height=60)
        """
        if not stylenames:
            raise ValueError("style() needs at least one stylename")
        for name in stylenames:
            self._styles.setdefault(name, {}).update(properties)
            if extends is not None:
                self._extends[name] = extends

    def import_stylesheet(self, other: Stylesheet) -> None:
        """Fall back to other for anything this sheet does not declare.

        Raises:
            ValueError: If other is this sheet or already imports it.
        """
        if other is self:
            raise ValueError("A stylesheet cannot import itself")
        if other._imports_transitively(self):
            raise ValueError(f"Import cycle: {other!r} already imports {self!r}")
        self._imports.append(other)

    def _imports_transitively(self, sheet: Stylesheet) -> bool:
        return any(
            imported is sheet or imported._imports_transitively(sheet)
            for imported in self._imports
        )

    def query(self, stylename: str) -> dict[str, Any]:
        """Return the resolved properties for stylename.

        Unknown names resolve to an empty dict.

        Raises:
            ValueError: If extends chains form a cycle.
        """
        return self._query(stylename, ())

    def _query(self, stylename: str, seen: tuple[str, ...]) -> dict[str, Any]:
        if stylename in seen:
            chain = ' -> '.join((*seen, stylename))
            raise ValueError(f"Style inheritance cycle: {chain}")
        seen = (*seen, stylename)

        result: dict[str, Any] = {}
        for imported in self._imports:
            result.update(imported._query(stylename, ()))

        parent = self._extends.get(stylename)
        if parent is not None:
            result.update(self._query(parent, seen))

        result.update(self._styles.get(stylename, {}))
        return result
