"""Library version numbers."""

from __future__ import annotations

__all__ = ["version", "version_major", "version_minor", "version_patch"]

_MAJOR = 1
_MINOR = 0
_PATCH = 0


def version() -> str:
    """Return the version as ``"major.minor.patch"``."""
    return f"{_MAJOR}.{_MINOR}.{_PATCH}"


def version_major() -> int:
    """Return the major version number."""
    return _MAJOR


def version_minor() -> int:
    """Return the minor version number."""
    return _MINOR


def version_patch() -> int:
    """Return the patch version number."""
    return _PATCH