# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Layout - declarative construction of a styled view hierarchy.

Layout is a mixin providing layout() and subview(). It is combined with a
root provider, the object that knows the root node of the tree:

- RootView: a ViewNode that builds its own subtree (root is itself)
- ViewController: a container holding one ViewNode as its view

Example:
    >>> sheet = Stylesheet()
    >>> sheet.style('title', size=18)
    >>> root = RootView(stylesheet=sheet)
    >>> def header(box):
    ...     root.subview(Label, 'title')
    ...     root.subview(Label, text='Hello')
    ...
    >>> box = root.subview(Container, block=header)
    >>> [type(n).__name__ for n in root.walk()]
    ['Container', 'Label', 'Label']

The same hierarchy with a with statement::

    box = root.subview(Container)
    with root.nested(box):
        root.subview(Label, 'title')
        root.subview(Label, text='Hello')
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from .arguments import StyleArgs
from .context import ContextStack
from .exceptions import InvalidLayoutArguments
from .node import StyleResolver, ViewNode

logger = logging.getLogger(__name__)

Block = Callable[[ViewNode], Any]


class Layout(ABC):
    """Builder mixin for view hierarchies.

    Subclasses provide root_node() and own two fields, initialized with
    _init_layout(): the context stack and the stylesheet reference.
    """

    __slots__ = ()

    _context: ContextStack
    _stylesheet: StyleResolver | None

    def _init_layout(self, stylesheet: StyleResolver | None = None) -> None:
        self._context = ContextStack()
        self._stylesheet = stylesheet

    @abstractmethod
    def root_node(self) -> ViewNode:
        """Return the node new top-level subviews are attached to."""

    @property
    def context(self) -> ContextStack:
        """The stack of nodes whose layout blocks are running."""
        return self._context

    # ==================== Stylesheet ====================

    @property
    def stylesheet(self) -> StyleResolver | None:
        """The stylesheet applied by layout() and restyle().

        Override this property to compute the stylesheet (e.g. per device
        orientation) and call restyle() when its value would change.
        """
        return self._stylesheet

    @stylesheet.setter
    def stylesheet(self, stylesheet: StyleResolver | None) -> None:
        self._stylesheet = stylesheet
        self.restyle()

    def restyle(self) -> None:
        """Reapply the current stylesheet to the whole tree."""
        root = self.root_node()
        stylesheet = self.stylesheet
        logger.debug("restyle %r with %r", root, stylesheet)
        root.apply_stylesheet(stylesheet)

    # ==================== Building ====================

    def layout(
        self,
        node: ViewNode,
        name_or_properties: str | dict[str, Any] | None = None,
        properties: dict[str, Any] | None = None,
        block: Block | None = None,
        **attr: Any,
    ) -> ViewNode:
        """Configure node and optionally build its children.

        Args:
            node: The node to configure.
            name_or_properties: A stylename, or a dict of properties.
            properties: A dict of properties when a stylename is given.
            block: Called with node as its argument. Every subview()
                   issued while it runs is attached to node.
            **attr: Additional properties, applied over the dict ones.

        Returns:
            node.

        Examples:
            >>> root.layout(carousel, width=500, height=100)
            >>> root.layout(carousel, 'default_carousel')
            >>> root.layout(carousel, block=lambda c: root.subview(Image))
        """
        style_args = StyleArgs.parse(name_or_properties, properties, attr)
        return self._layout(node, style_args, block)

    def _layout(
        self, node: ViewNode, style_args: StyleArgs, block: Block | None
    ) -> ViewNode:
        node.set_stylesheet(self.stylesheet)
        if style_args.has_properties:
            node.apply_properties(style_args.properties)
        if style_args.has_stylename:
            node.stylename = style_args.stylename

        if block is not None:
            with self._context.scope(node):
                block(node)

        return node

    def subview(
        self,
        class_or_instance: type[ViewNode] | ViewNode,
        *args: Any,
        block: Block | None = None,
        **attr: Any,
    ) -> ViewNode:
        """Add a node to the hierarchy and lay it out.

        The node goes under the node whose layout block is running, or
        under root_node() outside any block.

        Args:
            class_or_instance: A ViewNode subclass (instantiated with no
                               arguments) or a detached ViewNode instance.
            *args: Stylename and/or properties, as for layout().
            block: See layout().
            **attr: Additional properties.

        Returns:
            The attached node.

        Raises:
            InvalidNodeType: If class_or_instance is not a ViewNode class
                             or instance. Nothing is attached.
            InvalidLayoutArguments: If args has an unsupported shape.
                                    Nothing is attached.

        Example:
            >>> controller.subview(Label, text='Test')
            >>> controller.subview(Label, 'styled_label')
        """
        if len(args) > 2:
            raise InvalidLayoutArguments(
                f"subview() takes at most 2 style arguments, got {len(args)}"
            )
        style_args = StyleArgs.parse(*args, extra=attr)

        if isinstance(class_or_instance, type):
            node = ViewNode.from_type(class_or_instance)
        else:
            node = ViewNode.from_instance(class_or_instance)

        parent = self._context.top()
        if parent is None:
            parent = self.root_node()
        parent.add_child(node)

        return self._layout(node, style_args, block)

    @contextmanager
    def nested(self, node: ViewNode) -> Iterator[ViewNode]:
        """Attach subviews created in the with block to node.

        Example:
            >>> with root.nested(toolbar):
            ...     root.subview(Button, 'back')
        """
        with self._context.scope(node):
            yield node


class RootView(Layout, ViewNode):
    """A ViewNode that lays out its own subtree."""

    __slots__ = ('_context',)

    def __init__(
        self,
        stylename: str | None = None,
        stylesheet: StyleResolver | None = None,
        **properties: Any,
    ) -> None:
        """Initialize a RootView.

        Args:
            stylename: Optional stylename for the root itself.
            stylesheet: Initial stylesheet, applied to the root at once.
            **properties: Explicit properties for the root itself.
        """
        ViewNode.__init__(self, stylename, **properties)
        self._init_layout()
        if stylesheet is not None:
            self.stylesheet = stylesheet

    def root_node(self) -> ViewNode:
        return self


class ViewController(Layout):
    """A container exposing one ViewNode as the root of its hierarchy.

    Attributes:
        view_class: Node type created when no view is passed.
        view: The root node.

    Example:
        >>> class SettingsController(ViewController):
        ...     def load_view(self):
        ...         self.subview(Label, 'heading', text='Settings')
        ...
        >>> controller = SettingsController(stylesheet=sheet)
        >>> controller.load_view()
    """

    __slots__ = ('view', '_context', '_stylesheet')

    view_class: type[ViewNode] = ViewNode

    def __init__(
        self,
        view: ViewNode | None = None,
        stylesheet: StyleResolver | None = None,
    ) -> None:
        self.view = ViewNode.from_instance(view) if view is not None else self.view_class()
        self._init_layout()
        if stylesheet is not None:
            self.stylesheet = stylesheet

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.view!r})"

    def root_node(self) -> ViewNode:
        return self.view
