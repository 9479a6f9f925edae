# SPDX-License-Identifier: MIT
"""Underscore-separated serialized form of versions.

The serialized form replaces the ``.`` separator with ``_`` (``1.2.3`` becomes
``1_2_3``) so versions can be embedded in identifiers and key names.
"""

from __future__ import annotations

from .version import SEPARATOR, Version, parse_version

SERIALIZED_SEPARATOR = "_"


def to_serialized(version: Version) -> str:
    """Render a version in serialized form, e.g. ``0_1_2`` or ``1_*``.

    Pydantic fields dump the dotted form instead, so JSON documents carry the
    same text users write. Use this form only where ``.`` is not allowed.
    """
    return str(version).replace(SEPARATOR, SERIALIZED_SEPARATOR)


def parse_serialized(serialized: str) -> Version:
    """Parse the serialized form produced by to_serialized.

    Raises:
        EmptyVersionError: If the string is empty
        InvalidComponentError: If any component is invalid
    """
    return parse_version(serialized, SERIALIZED_SEPARATOR)
