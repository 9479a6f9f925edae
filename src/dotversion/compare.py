# SPDX-License-Identifier: MIT
"""Version comparison, compatibility matching and latest-version selection.

Ordering pads the shorter version with zeros: 1.2 == 1.2.0 < 1.2.0.1
Patterns (versions containing ``*``) are never ordered, only matched against.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from .errors import ParseError
from .version import Version, parse_version

logger = logging.getLogger(__name__)


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two concrete versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid
        WildcardComparisonError: If either version contains a wildcard

    Examples:
        >>> compare_versions("1.2", "1.2.0")
        0
        >>> compare_versions("2.1.4", "2.2.3")
        -1
        >>> compare_versions("1.10.2", "1.4.22")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)
    if v1 == v2:
        return 0
    return -1 if v1 < v2 else 1


def version_key(version: Union[str, Version]) -> Version:
    """Return a sort key for a concrete version.

    Examples:
        >>> sorted(["1.10", "1.2.1", "1.2"], key=version_key)
        ['1.2', '1.2.1', '1.10']
    """
    return _coerce(version)


def is_compatible_with(concrete: Union[str, Version], pattern: Union[str, Version]) -> bool:
    """Check whether a concrete version satisfies a version pattern.

    Examples:
        >>> is_compatible_with("2.3.4", "2.*.*")
        True
        >>> is_compatible_with("1.2.3", "1.2")
        True
        >>> is_compatible_with("1.2", "1.2.1")
        False

    Raises:
        WildcardComparisonError: If ``concrete`` contains a wildcard
    """
    return _coerce(concrete).is_compatible_with(_coerce(pattern))


def latest_compatible_version(
    pattern: Union[str, Version], candidates: Iterable[Version]
) -> Optional[Version]:
    """Select the greatest candidate compatible with ``pattern``.

    Candidates containing wildcards are skipped. When several candidates are
    equal the first one encountered is returned.

    Args:
        pattern: Requirement to match (string or Version object)
        candidates: Versions to choose from; not modified

    Returns:
        The greatest compatible candidate, or None if none is compatible
    """
    pattern = _coerce(pattern)
    latest: Optional[Version] = None

    for candidate in candidates:
        if candidate.has_wildcards:
            logger.debug("Skipping pattern candidate %s", candidate)
            continue
        if not candidate.is_compatible_with(pattern):
            continue
        if latest is None or latest < candidate:
            latest = candidate

    return latest


def latest_version(version_strings: Iterable[str]) -> Optional[Version]:
    """Return the greatest concrete version among ``version_strings``.

    Unparseable strings and patterns are ignored.
    """
    latest: Optional[Version] = None

    for text in version_strings:
        try:
            version = parse_version(text)
        except ParseError as e:
            logger.debug("Skipping unparseable version %r: %s", text, e)
            continue
        if version.has_wildcards:
            logger.debug("Skipping pattern %s", version)
            continue
        if latest is None or latest < version:
            latest = version

    return latest


def latest_compatible(
    pattern: Union[str, Version], version_strings: Iterable[str]
) -> Optional[str]:
    """Return the string of the greatest version compatible with ``pattern``.

    Works like latest_compatible_version but on unparsed strings, returning
    the matching string exactly as given. Unparseable strings are ignored.

    Examples:
        >>> latest_compatible("1.*.*", ["1.0.1", "1.0.2", "1.1.0", "2.0.0"])
        '1.1.0'
    """
    pattern = _coerce(pattern)
    latest: Optional[Version] = None
    latest_text: Optional[str] = None

    for text in version_strings:
        try:
            version = parse_version(text)
        except ParseError as e:
            logger.debug("Skipping unparseable version %r: %s", text, e)
            continue
        if version.has_wildcards:
            logger.debug("Skipping pattern candidate %s", version)
            continue
        if not version.is_compatible_with(pattern):
            continue
        if latest is None or latest < version:
            latest, latest_text = version, text

    return latest_text
