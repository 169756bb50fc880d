"""Identifier validation and casing helpers for generated artifacts.

A module name such as ``user-profile`` appears in several forms across the
generated files: ``userprofile`` as a Java package segment, ``UserProfile``
as a class-name prefix and ``user profile`` in human-readable descriptions.
"""

from __future__ import annotations

import re

from .errors import InvalidNameError

GROUP_ID_PATTERN = r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)+$"
ARTIFACT_ID_PATTERN = r"^[a-z][a-z0-9-]*$"
MODULE_NAME_PATTERN = r"^[a-z][a-z0-9-]*$"

_GROUP_ID_RE = re.compile(GROUP_ID_PATTERN)
_ARTIFACT_ID_RE = re.compile(ARTIFACT_ID_PATTERN)
_MODULE_NAME_RE = re.compile(MODULE_NAME_PATTERN)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def is_valid_group_id(value: str) -> bool:
    """Return ``True`` for dotted lowercase ids such as ``com.mycompany``."""
    return _GROUP_ID_RE.fullmatch(value) is not None


def is_valid_artifact_id(value: str) -> bool:
    """Return ``True`` for hyphenated lowercase ids such as ``my-app``."""
    return _ARTIFACT_ID_RE.fullmatch(value) is not None


def is_valid_module_name(value: str) -> bool:
    """Return ``True`` for hyphenated lowercase names such as ``user-profile``."""
    return _MODULE_NAME_RE.fullmatch(value) is not None


def validate_module_name(value: str) -> str:
    """Return *value* unchanged, or raise ``InvalidNameError``."""
    if not is_valid_module_name(value):
        raise InvalidNameError("module name", value, MODULE_NAME_PATTERN)
    return value


# ---------------------------------------------------------------------------
# Casing transforms
# ---------------------------------------------------------------------------


def to_package_segment(name: str) -> str:
    """``user-profile`` -> ``userprofile``."""
    return name.replace("-", "")


def to_class_name(name: str) -> str:
    """``user-profile`` -> ``UserProfile``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-") if part)


def to_description(name: str) -> str:
    """``user-profile`` -> ``user profile``."""
    return name.replace("-", " ")


def to_package_path(package_name: str) -> str:
    """``com.example.demo`` -> ``com/example/demo``."""
    return package_name.replace(".", "/")
