# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ContextStack - the chain of nodes currently being laid out.

Each builder owns one ContextStack. While a layout block runs, the node
being configured sits on top of the stack and every subview() call made
inside the block attaches to it.

Example:
    >>> stack = ContextStack()
    >>> with stack.scope(container):
    ...     stack.top() is container
    True
    >>> stack.top() is None
    True
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from .exceptions import StackUnderflow

if TYPE_CHECKING:
    from .node import ViewNode

logger = logging.getLogger(__name__)


class ContextStack:
    """Ordered stack of attachment points for nested layout calls.

    Not thread-safe: one construction pass at a time per builder.
    """

    __slots__ = ('_nodes',)

    def __init__(self) -> None:
        self._nodes: list[ViewNode] = []

    def __repr__(self) -> str:
        return f"ContextStack({self._nodes!r})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ViewNode]:
        """Iterate from the outermost scope to the innermost."""
        return iter(self._nodes)

    @property
    def depth(self) -> int:
        """Number of open scopes."""
        return len(self._nodes)

    def push(self, node: ViewNode) -> None:
        """Make node the current attachment point."""
        self._nodes.append(node)

    def pop(self) -> ViewNode:
        """Remove and return the current attachment point.

        Raises:
            StackUnderflow: If there is no open scope.
        """
        if not self._nodes:
            raise StackUnderflow("pop() called on an empty context stack")
        return self._nodes.pop()

    def top(self) -> ViewNode | None:
        """Return the current attachment point, or None at rest."""
        return self._nodes[-1] if self._nodes else None

    @contextmanager
    def scope(self, node: ViewNode) -> Iterator[ViewNode]:
        """Push node for the duration of a with block.

        The pop runs on every exit path, so an exception raised inside
        the block leaves the stack as it was found.
        """
        self.push(node)
        logger.debug("enter scope %r (depth %d)", node, len(self._nodes))
        try:
            yield node
        finally:
            self.pop()
            logger.debug("leave scope %r (depth %d)", node, len(self._nodes))
