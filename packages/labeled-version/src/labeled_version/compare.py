# SPDX-License-Identifier: MIT
"""Version comparison over the (major, minor, patch) triple.

Labels never take part in ordering: two versions with the same triple
compare as equal here even when ``==`` says they differ.
"""

from __future__ import annotations

from typing import Union

from .errors import InvalidArgumentError
from .version import Version

VersionLike = Union[Version, tuple]


def _as_triple(version: VersionLike) -> tuple[int, int, int]:
    if isinstance(version, Version):
        return version.triple
    if isinstance(version, tuple) and len(version) in (2, 3):
        # Validate through Version so bad components raise the usual error
        return Version("", *version).triple
    raise InvalidArgumentError(
        "version",
        f"Expected a Version or a (major, minor[, patch]) tuple, got {version!r}",
    )


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by their triples.

    Args:
        version1: First version (Version object or integer tuple)
        version2: Second version (Version object or integer tuple)

    Returns:
        -1 if version1 is older than version2
        0 if both triples are equal
        1 if version1 is newer than version2

    Raises:
        InvalidArgumentError: If either argument is not a Version or tuple

    Examples:
        >>> compare_versions(Version("a", 1), Version("b", 2))
        -1
        >>> compare_versions(Version("a", 1, 2), (1, 2))
        0
    """
    v1 = _as_triple(version1)
    v2 = _as_triple(version2)

    for val1, val2 in zip(v1, v2):
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> versions = [Version("a", 2), Version("b", 1, 5)]
        >>> [str(v) for v in sorted(versions, key=version_key)]
        ['b-1.5.0', 'a-2.0.0']
    """
    return _as_triple(version)
