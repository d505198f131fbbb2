# SPDX-License-Identifier: MIT
"""Labeled semantic versions.

This package provides an immutable MAJOR.MINOR.PATCH version tagged with an
identifying label, plus helpers for comparing and sorting such versions.

Example:
    >>> from labeled_version import Version, parse_version
    >>>
    >>> version = parse_version("engine", "2.5")
    >>> version.full_version
    '2.5.0'
    >>> str(version)
    'engine-2.5.0'
    >>> version.is_older_than(Version("engine", 2, 6))
    True
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidArgumentError,
    VersionFormatError,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    SEGMENT_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidArgumentError",
    "VersionFormatError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "SEGMENT_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
]
