# SPDX-License-Identifier: MIT
"""Errors raised while constructing or parsing labeled versions."""

from __future__ import annotations


class VersionError(ValueError):
    """Base class for all labeled version errors."""

    pass


class InvalidArgumentError(VersionError):
    """Raised when a required argument is missing or of the wrong type."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        self.message = message or f"Argument {argument!r} must not be None"
        super().__init__(self.message)


class VersionFormatError(VersionError):
    """Raised when a version string cannot be parsed into integer components."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version string: {version!r}"
        super().__init__(self.message)
