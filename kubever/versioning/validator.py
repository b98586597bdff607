"""Version validation utilities.

Pure checks on version strings; no file or network access.
"""

import logging
from typing import Optional, Tuple

from ..exceptions import InvalidVersionError
from .patterns import DIRTY_SUFFIX, RELEASE_BUILD_PATTERN, SEMVER_PATTERN

logger = logging.getLogger('kubever.validator')


def is_valid_release_build(version: str) -> bool:
    """Check if version is a kube release build identifier.

    A leading ``v`` is mandatory, so a bare ``1.1.1`` is rejected.
    """
    return bool(RELEASE_BUILD_PATTERN.fullmatch(version))


def is_dirty_build(version: str) -> bool:
    """Check if version was built from a tree with uncommitted changes."""
    return version.endswith(DIRTY_SUFFIX)


def is_valid_semver(version: str) -> bool:
    """Check if version matches semantic versioning format."""
    return bool(SEMVER_PATTERN.fullmatch(version))


def parse_semver(version: str) -> Optional[Tuple[int, int, int]]:
    """Parse version string to (major, minor, patch) tuple.

    Returns None if invalid format.
    """
    match = SEMVER_PATTERN.fullmatch(version)
    if not match:
        return None
    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def to_semver(version: str) -> str:
    """Convert a kube release version to canonical semver text.

    Examples:
        "v1.13.12" -> "1.13.12"
        "v1.14.11-beta.1.2+c8b135d0b49c44" -> "1.14.11-beta.1.2+c8b135d0b49c44"

    Only a single leading ``v`` is removed.

    Raises:
        InvalidVersionError: the remainder is not a valid semver string
    """
    candidate = version[1:] if version.startswith('v') else version
    if not is_valid_semver(candidate):
        logger.debug('semver coercion rejected version=%r', version)
        raise InvalidVersionError(version)
    return candidate
