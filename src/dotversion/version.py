# SPDX-License-Identifier: MIT
"""Dot-separated version parsing and the Version value type.

A version is any positive number of ``.``-separated components, each either a
non-negative integer or the wildcard ``*``:

- Concrete versions: ``1``, ``1.2``, ``1.2.3.4``
- Patterns: ``*``, ``1.*``, ``2.*.*``, ``1.*.3``
"""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass
from typing import Any, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import (
    EmptyVersionError,
    InvalidComponentError,
    ParseError,
    WildcardComparisonError,
)

SEPARATOR = "."
WILDCARD_TEXT = "*"

# Components are stored as Python ints but capped at the unsigned 64-bit range
MAX_COMPONENT = 2**64 - 1

_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Textual grammar, used for the JSON schema of pydantic fields
VERSION_PATTERN = r"^(\*|[0-9]+)(\.(\*|[0-9]+))*$"


class Wildcard(enum.Enum):
    """Marker for a ``*`` component."""

    WILDCARD = WILDCARD_TEXT

    def __str__(self) -> str:
        return WILDCARD_TEXT

    def __repr__(self) -> str:
        return "WILDCARD"


WILDCARD = Wildcard.WILDCARD

Component = Union[int, Wildcard]


def is_wildcard_component(component: Component) -> bool:
    """Return True if the component is the wildcard marker."""
    return component is WILDCARD


def _parse_component(text: str, position: int, component: str) -> Component:
    if component == WILDCARD_TEXT:
        return WILDCARD
    if not _DIGITS_PATTERN.fullmatch(component):
        raise InvalidComponentError(text, position, component)
    try:
        value = int(component)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        raise InvalidComponentError(text, position, component) from None
    if value > MAX_COMPONENT:
        raise InvalidComponentError(text, position, component)
    return value


def _parse(text: str, separator: str) -> Version:
    if not isinstance(text, str):
        raise ParseError(str(text), f"Version must be a string, got {type(text).__name__}")
    if not text:
        raise EmptyVersionError(text)

    components = tuple(
        _parse_component(text, position, component)
        for position, component in enumerate(text.split(separator))
    )
    return Version(components)


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """An immutable sequence of version components.

    Equality and ordering pad the shorter version with zeros, so
    ``1.2 == 1.2.0`` and ``1.2 < 1.2.0.1``. Both are only defined between
    concrete versions; comparing a pattern raises WildcardComparisonError.

    Attributes:
        components: Components in most-significant-first order
    """

    components: tuple[Component, ...]

    def __post_init__(self) -> None:
        components = tuple(self.components)
        if not components:
            raise EmptyVersionError()
        for position, component in enumerate(components):
            if component is WILDCARD:
                continue
            if (
                isinstance(component, bool)
                or not isinstance(component, int)
                or not 0 <= component <= MAX_COMPONENT
            ):
                raise InvalidComponentError(
                    SEPARATOR.join(str(c) for c in components), position, str(component)
                )
        object.__setattr__(self, "components", components)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse dotted version text such as ``1.2.3`` or ``2.*``.

        Raises:
            EmptyVersionError: If the text is empty
            InvalidComponentError: If a component is not ``*`` or a
                non-negative integer
        """
        return _parse(text, SEPARATOR)

    @classmethod
    def of(cls, *numbers: int) -> Version:
        """Build a concrete version directly from integers."""
        return cls(numbers)

    @classmethod
    def wildcard(cls) -> Version:
        """Build the ``*`` pattern, which every concrete version matches."""
        return cls((WILDCARD,))

    def __str__(self) -> str:
        return SEPARATOR.join(str(component) for component in self.components)

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def __len__(self) -> int:
        return len(self.components)

    @property
    def has_wildcards(self) -> bool:
        """Return True if any component is a wildcard."""
        return any(component is WILDCARD for component in self.components)

    @property
    def is_concrete(self) -> bool:
        """Return True if every component is a number."""
        return not self.has_wildcards

    @property
    def is_wildcard(self) -> bool:
        """Return True if every component is a wildcard."""
        return all(component is WILDCARD for component in self.components)

    def _comparison_key(self, operation: str) -> tuple[int, ...]:
        # Trailing zeros are dropped so that zero-padded versions share a key.
        if self.has_wildcards:
            raise WildcardComparisonError(self, operation)
        key = list(self.components)
        while key and key[-1] == 0:
            key.pop()
        return tuple(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._comparison_key("compare") == other._comparison_key("compare")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._comparison_key("order") < other._comparison_key("order")

    def __hash__(self) -> int:
        if self.has_wildcards:
            return hash(self.components)
        return hash(self._comparison_key("hash"))

    def is_compatible_with(self, pattern: Version) -> bool:
        """Check whether this concrete version satisfies ``pattern``.

        Positions shared by both versions must match exactly unless the
        pattern has a wildcard there. A shorter pattern acts as a prefix
        (``1.2.3`` satisfies ``1.2``); a shorter concrete version is
        zero-extended (``1.2`` satisfies ``1.2.0`` but not ``1.2.1``).

        Raises:
            WildcardComparisonError: If this version contains a wildcard
        """
        if self.has_wildcards:
            raise WildcardComparisonError(self, "test compatibility of")

        for position, expected in enumerate(pattern.components):
            if expected is WILDCARD:
                continue
            actual = self.components[position] if position < len(self.components) else 0
            if actual != expected:
                return False
        return True

    @classmethod
    def _validate(cls, value: Any) -> Version:
        if isinstance(value, Version):
            return value
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Allow Version as a pydantic field, validated from dotted text."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe Version fields as dotted version strings."""
        return {"type": "string", "pattern": VERSION_PATTERN}


def parse_version(version_string: str, separator: str = SEPARATOR) -> Version:
    """Parse a dotted version string into a Version object.

    Args:
        version_string: Dot-separated components, each digits or ``*``
        separator: Text between components, ``.`` unless reading another form

    Returns:
        A Version object with parsed components

    Raises:
        EmptyVersionError: If the string is empty
        InvalidComponentError: If any component is invalid

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("2.*").components
        (2, WILDCARD)
    """
    return _parse(version_string, separator)


def render_version(version: Version) -> str:
    """Render a Version back to its dotted text form."""
    return str(version)


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version or pattern.

    Examples:
        >>> is_valid_version("1.2.*")
        True
        >>> is_valid_version("1.2.")
        False
    """
    try:
        _parse(version_string, SEPARATOR)
    except ParseError:
        return False
    return True

