# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ViewTree - Declarative view hierarchies with stylesheet binding.

A lightweight, zero-dependency library for describing a tree of view nodes
and the style of each node in one nested expression, for the Genro
ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

import logging

from .arguments import StyleArgs, StyleArgsKind
from .context import ContextStack
from .exceptions import (
    InvalidLayoutArguments,
    InvalidNodeType,
    StackUnderflow,
    ViewTreeError,
)
from .layout import Layout, RootView, ViewController
from .node import StyleResolver, ViewNode
from .stylesheet import Stylesheet

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Nodes
    "ViewNode",
    "StyleResolver",
    # Builders
    "Layout",
    "RootView",
    "ViewController",
    "ContextStack",
    "StyleArgs",
    "StyleArgsKind",
    # Styles
    "Stylesheet",
    # Exceptions
    "ViewTreeError",
    "InvalidNodeType",
    "InvalidLayoutArguments",
    "StackUnderflow",
]
