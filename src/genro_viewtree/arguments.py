# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Normalization of the style arguments accepted by layout() and subview()."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidLayoutArguments


class StyleArgsKind(Enum):
    """Which style information a layout call carries."""

    NEITHER = 'neither'
    NAME_ONLY = 'name_only'
    PROPERTIES_ONLY = 'properties_only'
    NAME_AND_PROPERTIES = 'name_and_properties'


@dataclass(frozen=True)
class StyleArgs:
    """Stylename and explicit properties resolved from a layout call.

    Example:
        >>> StyleArgs.parse('card').kind
        <StyleArgsKind.NAME_ONLY: 'name_only'>
        >>> StyleArgs.parse({'width': 100}).properties
        {'width': 100}
        >>> StyleArgs.parse('card', {'width': 100}).kind
        <StyleArgsKind.NAME_AND_PROPERTIES: 'name_and_properties'>
    """

    kind: StyleArgsKind
    stylename: str | None = None
    properties: dict[str, Any] | None = None

    @classmethod
    def parse(
        cls,
        name_or_properties: str | Mapping[str, Any] | None = None,
        properties: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> StyleArgs:
        """Resolve the call shape of layout().

        Precedence:
            1. properties given: name_or_properties is the stylename.
            2. name_or_properties is a mapping: it is the properties.
            3. name_or_properties is a string: it is the stylename.
            4. nothing given.

        Args:
            name_or_properties: A stylename or a properties mapping.
            properties: Explicit properties, when a stylename is also given.
            extra: Keyword properties, merged over the positional ones.

        Raises:
            InvalidLayoutArguments: For any other combination.
        """
        stylename: Any = None
        merged: dict[str, Any] | None = None

        if properties is not None:
            if not isinstance(properties, Mapping):
                raise InvalidLayoutArguments(
                    f"Expected a mapping of properties, got: {properties!r}"
                )
            if isinstance(name_or_properties, Mapping):
                raise InvalidLayoutArguments(
                    "Expected a stylename before the properties, got a second mapping"
                )
            stylename = name_or_properties
            merged = dict(properties)
        elif isinstance(name_or_properties, Mapping):
            merged = dict(name_or_properties)
        else:
            stylename = name_or_properties

        if stylename is not None and not isinstance(stylename, str):
            raise InvalidLayoutArguments(
                f"Expected a stylename or a mapping, got: {stylename!r}"
            )

        if extra:
            merged = {**(merged or {}), **extra}

        if stylename is not None and merged is not None:
            kind = StyleArgsKind.NAME_AND_PROPERTIES
        elif stylename is not None:
            kind = StyleArgsKind.NAME_ONLY
        elif merged is not None:
            kind = StyleArgsKind.PROPERTIES_ONLY
        else:
            kind = StyleArgsKind.NEITHER

        return cls(kind, stylename, merged)

    @property
    def has_stylename(self) -> bool:
        return self.kind in (StyleArgsKind.NAME_ONLY, StyleArgsKind.NAME_AND_PROPERTIES)

    @property
    def has_properties(self) -> bool:
        return self.kind in (StyleArgsKind.PROPERTIES_ONLY, StyleArgsKind.NAME_AND_PROPERTIES)
