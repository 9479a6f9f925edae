# SPDX-License-Identifier: MIT
"""Dot-separated version parsing, comparison and wildcard matching.

Versions have any number of non-negative integer components. Patterns use
``*`` for components that may take any value, and a short pattern matches
any version it is a prefix of.

Example:
    >>> from dotversion import parse_version, is_compatible_with, latest_compatible_version
    >>> 
    >>> parse_version("1.2") == parse_version("1.2.0")
    True
    >>> 
    >>> is_compatible_with("2.3.4", "2.*.*")
    True
    >>> 
    >>> candidates = [parse_version(v) for v in ["1.0.0", "1.0.1", "1.1.0", "1.0.2"]]
    >>> latest_compatible_version("1.0", candidates)
    Version('1.0.2')
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ParseError,
    EmptyVersionError,
    InvalidComponentError,
    WildcardComparisonError,
)
from .version import (
    Version,
    Component,
    Wildcard,
    WILDCARD,
    MAX_COMPONENT,
    is_wildcard_component,
    parse_version,
    render_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    version_key,
    is_compatible_with,
    latest_compatible_version,
    latest_version,
    latest_compatible,
)
from .serialize import (
    SERIALIZED_SEPARATOR,
    to_serialized,
    parse_serialized,
)

__all__ = [
    # Errors
    "VersionError",
    "ParseError",
    "EmptyVersionError",
    "InvalidComponentError",
    "WildcardComparisonError",
    # Version parsing
    "Version",
    "Component",
    "Wildcard",
    "WILDCARD",
    "MAX_COMPONENT",
    "is_wildcard_component",
    "parse_version",
    "render_version",
    "is_valid_version",
    # Comparison and matching
    "compare_versions",
    "version_key",
    "is_compatible_with",
    "latest_compatible_version",
    "latest_version",
    "latest_compatible",
    # Serialized form
    "SERIALIZED_SEPARATOR",
    "to_serialized",
    "parse_serialized",
]
