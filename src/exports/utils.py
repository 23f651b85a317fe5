"""Shared naming helpers."""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")


def to_kebab_case(name: str) -> str:
    """Convert a library or entity name to a kebab-case path segment.

    A hyphen goes between a lowercase letter and a following uppercase
    letter; runs of whitespace and underscores become a single hyphen. Other
    characters, digits included, are kept as they are.

    Examples:
        >>> to_kebab_case("UserProfile")
        'user-profile'
        >>> to_kebab_case("data_access user")
        'data-access-user'
        >>> to_kebab_case("Product2Variant")
        'product2variant'
    """
    kebab = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    kebab = _SEPARATORS.sub("-", kebab).lower()
    return kebab.strip("-")
