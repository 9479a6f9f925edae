# SPDX-License-Identifier: MIT
"""Exception classes raised by version parsing and comparison."""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all errors raised by dotversion."""

    pass


class ParseError(VersionError, ValueError):
    """Raised when text cannot be parsed into a Version."""

    def __init__(self, text: str, message: str = ""):
        self.text = text
        self.message = message or f"Invalid version: {text!r}"
        super().__init__(self.message)


class EmptyVersionError(ParseError):
    """Raised when the version text contains no components."""

    def __init__(self, text: str = ""):
        super().__init__(text, "Version string cannot be empty")


class InvalidComponentError(ParseError):
    """Raised when a component is neither ``*`` nor a non-negative integer.

    Attributes:
        position: Zero-based index of the offending component
        component: The offending component text
    """

    def __init__(self, text: str, position: int, component: str):
        self.position = position
        self.component = component
        super().__init__(
            text,
            f"Invalid component {component!r} at position {position} in version {text!r}",
        )


class WildcardComparisonError(VersionError, TypeError):
    """Raised when a pattern is used where a concrete version is required.

    Patterns (versions containing ``*``) can only be matched against, never
    ordered, compared for equality, or tested for compatibility themselves.
    """

    def __init__(self, version: object, operation: str):
        self.version = version
        self.operation = operation
        super().__init__(f"Cannot {operation} a version pattern: {version}")
