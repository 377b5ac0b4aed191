# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ViewTree exceptions."""

from __future__ import annotations


class ViewTreeError(Exception):
    """Base exception for ViewTree errors."""

    pass


class InvalidNodeType(ViewTreeError, TypeError):
    """Raised when subview() receives something that is not a ViewNode."""

    pass


class InvalidLayoutArguments(ViewTreeError, TypeError):
    """Raised when layout() or subview() receive an unsupported argument shape."""

    pass


class StackUnderflow(ViewTreeError):
    """Raised when the context stack is popped without a matching push.

    This signals a bug in the builder itself, never bad user input.
    """

    pass
