# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ViewNode - an element of the view tree."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Protocol

from .exceptions import InvalidNodeType

logger = logging.getLogger(__name__)


class StyleResolver(Protocol):
    """Anything that maps a stylename to a property mapping."""

    def query(self, stylename: str) -> dict[str, Any]: ...


class ViewNode:
    """A node in a view hierarchy.

    Each node has:
    - stylename: Symbolic name looked up in the stylesheet
    - stylesheet: The resolver used for the stylename
    - overrides: Properties set explicitly on the node
    - style_properties: Properties derived from stylename + stylesheet
    - children: Ordered child nodes
    - parent: The node this one is attached to

    Effective properties are the style-derived ones updated with the
    overrides, so explicit properties always win.

    Example:
        >>> sheet = Stylesheet()
        >>> sheet.style('title', size=18, color='black')
        >>> node = ViewNode('title', color='red')
        >>> node.set_stylesheet(sheet)
        >>> node.properties
        {'size': 18, 'color': 'red'}
    """

    __slots__ = ('_stylename', '_stylesheet', '_overrides', '_resolved', '_children', 'parent')

    def __init__(self, stylename: str | None = None, **properties: Any) -> None:
        """Initialize a ViewNode.

        Args:
            stylename: Optional stylename.
            **properties: Explicit properties.
        """
        self._stylename: str | None = None
        self._stylesheet: StyleResolver | None = None
        self._overrides: dict[str, Any] = {}
        self._resolved: dict[str, Any] = {}
        self._children: list[ViewNode] = []
        self.parent: ViewNode | None = None
        if properties:
            self.apply_properties(properties)
        if stylename is not None:
            self.stylename = stylename

    def __repr__(self) -> str:
        name = f" {self._stylename!r}" if self._stylename else ""
        return f"{type(self).__name__}({len(self._children)}{name})"

    @classmethod
    def from_type(cls, node_type: Any) -> ViewNode:
        """Instantiate node_type after checking it is a ViewNode subclass.

        Raises:
            InvalidNodeType: If node_type is not a subclass of this class.
        """
        if not (isinstance(node_type, type) and issubclass(node_type, cls)):
            raise InvalidNodeType(
                f"Expected subclass of {cls.__name__}, got: {node_type!r}"
            )
        return node_type()

    @classmethod
    def from_instance(cls, node: Any) -> ViewNode:
        """Return node after checking it is a ViewNode.

        Raises:
            InvalidNodeType: If node is not an instance of this class.
        """
        if not isinstance(node, cls):
            raise InvalidNodeType(f"Expected a {cls.__name__}, got: {node!r}")
        return node

    # ==================== Tree ====================

    @property
    def children(self) -> list[ViewNode]:
        """Child nodes in insertion order (a copy)."""
        return list(self._children)

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def add_child(self, child: ViewNode) -> ViewNode:
        """Append child and set its parent.

        Raises:
            ValueError: If child already has a parent, or if child is this
                        node or one of its ancestors.
        """
        if child.parent is not None:
            raise ValueError(f"{child!r} is already attached to {child.parent!r}")
        ancestor: ViewNode | None = self
        while ancestor is not None:
            if ancestor is child:
                raise ValueError(f"{child!r} cannot be attached below itself")
            ancestor = ancestor.parent
        self._children.append(child)
        child.parent = self
        logger.debug("attached %r under %r", child, self)
        return child

    def walk(
        self, callback: Callable[[ViewNode], Any] | None = None
    ) -> Iterator[ViewNode] | None:
        """Walk the subtree below this node, depth first.

        Args:
            callback: Optional function to call on each node.
                      If provided, walk returns None.

        Yields:
            Descendant nodes if no callback provided.
        """
        if callback is not None:
            for child in self._children:
                callback(child)
                child.walk(callback)
            return None

        def _walk_gen(node: ViewNode) -> Iterator[ViewNode]:
            for child in node._children:
                yield child
                yield from _walk_gen(child)

        return _walk_gen(self)

    # ==================== Style ====================

    @property
    def stylename(self) -> str | None:
        return self._stylename

    @stylename.setter
    def stylename(self, stylename: str | None) -> None:
        self._stylename = stylename
        self._resolve_style()

    @property
    def stylesheet(self) -> StyleResolver | None:
        return self._stylesheet

    @stylesheet.setter
    def stylesheet(self, stylesheet: StyleResolver | None) -> None:
        self.set_stylesheet(stylesheet)

    def set_stylesheet(self, stylesheet: StyleResolver | None) -> None:
        """Assign the stylesheet reference and re-resolve this node only."""
        self._stylesheet = stylesheet
        self._resolve_style()

    def apply_stylesheet(self, stylesheet: StyleResolver | None) -> None:
        """Assign stylesheet to this node and every descendant."""
        self.set_stylesheet(stylesheet)
        for child in self._children:
            child.apply_stylesheet(stylesheet)

    def apply_properties(self, _properties: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Set explicit properties on the node.

        Args:
            _properties: Dictionary of properties to set.
            **kwargs: Additional properties as keyword arguments.
        """
        if _properties:
            self._overrides.update(_properties)
        self._overrides.update(kwargs)

    @property
    def overrides(self) -> dict[str, Any]:
        """Explicit properties (a copy)."""
        return dict(self._overrides)

    @property
    def style_properties(self) -> dict[str, Any]:
        """Properties derived from the stylename (a copy)."""
        return dict(self._resolved)

    @property
    def properties(self) -> dict[str, Any]:
        """Effective properties: style-derived, overridden by explicit ones."""
        return {**self._resolved, **self._overrides}

    def get_property(self, name: str, default: Any = None) -> Any:
        """Get an effective property value."""
        if name in self._overrides:
            return self._overrides[name]
        return self._resolved.get(name, default)

    def _resolve_style(self) -> None:
        if self._stylesheet is None or self._stylename is None:
            self._resolved = {}
            return
        self._resolved = dict(self._stylesheet.query(self._stylename))
