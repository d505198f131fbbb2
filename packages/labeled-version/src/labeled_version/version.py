# SPDX-License-Identifier: MIT
"""Labeled version value type.

A ``Version`` pairs an identifying label with a MAJOR.MINOR.PATCH triple.
The label takes part in equality and hashing but never in ordering:

    >>> v = Version("engine", 2, 5)
    >>> str(v)
    'engine-2.5.0'
    >>> v.is_newer_than(2, 4)
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidArgumentError, VersionFormatError

logger = logging.getLogger(__name__)

# A single numeric segment: optionally signed, ASCII digits only
SEGMENT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Only the first three dot-separated segments are significant
_MAX_SEGMENTS = 3


def _check_label(label: object) -> str:
    if label is None:
        raise InvalidArgumentError("label")
    if not isinstance(label, str):
        raise InvalidArgumentError(
            "label", f"Label must be a string, got {type(label).__name__}"
        )
    return label


def _check_component(name: str, value: object) -> int:
    if value is None:
        raise InvalidArgumentError(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            name, f"{name.capitalize()} must be an integer, got {type(value).__name__}"
        )
    return value


def _parse_segment(segment: str, version_string: str) -> int:
    if not SEGMENT_PATTERN.fullmatch(segment):
        logger.debug("Rejecting segment %r of version %r", segment, version_string)
        raise VersionFormatError(
            version_string, f"Invalid version segment {segment!r} in {version_string!r}"
        )
    return int(segment)


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable version number tagged with a label.

    Attributes:
        label: Identifier of the object this version belongs to
        major: Major version number
        minor: Minor version number (defaults to 0)
        patch: Patch level (defaults to 0)

    Raises:
        InvalidArgumentError: If the label is None or a component is not an int
    """

    label: str
    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        _check_label(self.label)
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)

    @classmethod
    def parse(cls, label: str, version_string: str) -> Version:
        """Build a version from its dotted representation.

        Args:
            label: Identifier of the versioned object
            version_string: ``MAJOR[.MINOR[.PATCH]]``; anything after the
                third segment is ignored

        Returns:
            A new Version with missing minor/patch set to 0

        Raises:
            InvalidArgumentError: If label or version_string is None
            VersionFormatError: If a present segment is not an integer

        Examples:
            >>> Version.parse("engine", "7")
            Version(label='engine', major=7, minor=0, patch=0)
            >>> Version.parse("engine", "1.2.3.4")
            Version(label='engine', major=1, minor=2, patch=3)
        """
        _check_label(label)
        if version_string is None:
            raise InvalidArgumentError("version_string")
        if not isinstance(version_string, str):
            raise InvalidArgumentError(
                "version_string",
                f"Version must be a string, got {type(version_string).__name__}",
            )

        segments = version_string.split(".")[:_MAX_SEGMENTS]
        numbers = [_parse_segment(segment, version_string) for segment in segments]
        numbers.extend([0] * (_MAX_SEGMENTS - len(numbers)))
        major, minor, patch = numbers
        return cls(label, major, minor, patch)

    def __str__(self) -> str:
        return self.display_string()

    def __hash__(self) -> int:
        # Hash of the display string, never a field-wise combination
        return hash(self.display_string())

    def display_string(self) -> str:
        """Return ``LABEL-MAJOR.MINOR.PATCH``."""
        return f"{self.label}-{self.full_version}"

    @property
    def short_version(self) -> str:
        """Return the version without the patch level."""
        return f"{self.major}.{self.minor}"

    @property
    def full_version(self) -> str:
        """Return the full ``MAJOR.MINOR.PATCH`` version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def is_newer_than(
        self,
        major: Union[int, Version],
        minor: Optional[int] = None,
        patch: Optional[int] = None,
    ) -> bool:
        """Return True if this version is strictly newer than the given one.

        Accepts another Version, a ``(major, minor)`` pair or a
        ``(major, minor, patch)`` triple. The pair form ignores the patch
        level entirely.

        Examples:
            >>> Version("a", 2, 5).is_newer_than(2, 4)
            True
            >>> Version("a", 2, 5, 9).is_newer_than(2, 5)
            False
        """
        other_major, other_minor, other_patch = _other_components(major, minor, patch)
        if self.major > other_major or (
            self.major == other_major and self.minor > other_minor
        ):
            return True
        if other_patch is None:
            return False
        return (
            self.major == other_major
            and self.minor == other_minor
            and self.patch > other_patch
        )

    def is_older_than(
        self,
        major: Union[int, Version],
        minor: Optional[int] = None,
        patch: Optional[int] = None,
    ) -> bool:
        """Return True if this version is strictly older than the given one.

        Mirror image of :meth:`is_newer_than`.
        """
        other_major, other_minor, other_patch = _other_components(major, minor, patch)
        if self.major < other_major or (
            self.major == other_major and self.minor < other_minor
        ):
            return True
        if other_patch is None:
            return False
        return (
            self.major == other_major
            and self.minor == other_minor
            and self.patch < other_patch
        )


def _other_components(
    major: Union[int, Version], minor: Optional[int], patch: Optional[int]
) -> tuple[int, int, Optional[int]]:
    """Normalize predicate arguments to (major, minor, patch-or-None)."""
    if isinstance(major, Version):
        if minor is not None or patch is not None:
            raise InvalidArgumentError(
                "minor", "Cannot combine a Version with explicit components"
            )
        return major.major, major.minor, major.patch

    if minor is None:
        raise InvalidArgumentError(
            "minor", "Comparison requires at least major and minor components"
        )
    _check_component("major", major)
    _check_component("minor", minor)
    if patch is not None:
        _check_component("patch", patch)
    return major, minor, patch


def parse_version(label: str, version_string: str) -> Version:
    """Parse a dotted version string into a labeled Version.

    Args:
        label: Identifier of the versioned object
        version_string: ``MAJOR[.MINOR[.PATCH]]``

    Returns:
        A Version object with parsed components

    Raises:
        InvalidArgumentError: If label or version_string is None
        VersionFormatError: If the string does not start with integer segments

    Examples:
        >>> parse_version("engine", "2.5")
        Version(label='engine', major=2, minor=5, patch=0)
    """
    return Version.parse(label, version_string)


def is_valid_version(version_string: str) -> bool:
    """Check whether a string would be accepted by :func:`parse_version`.

    Examples:
        >>> is_valid_version("1.2")
        True
        >>> is_valid_version("1.x")
        False
    """
    if not isinstance(version_string, str):
        return False
    segments = version_string.split(".")[:_MAX_SEGMENTS]
    return all(SEGMENT_PATTERN.fullmatch(segment) for segment in segments)
