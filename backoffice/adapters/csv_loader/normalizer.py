"""CSV value normalization: handles BOM, stray whitespace and role spellings."""

from __future__ import annotations

import re

from backoffice.domain.value_objects.enums import UserRole

# Keys are role names lowercased with separators removed
ROLE_ALIASES: dict[str, UserRole] = {
    "accountant": UserRole.ACCOUNTANT,
    "corporatesecretary": UserRole.CORPORATE_SECRETARY,
    "secretary": UserRole.CORPORATE_SECRETARY,
    "director": UserRole.DIRECTOR,
}


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Removes BOM characters (\\ufeff)
    - Strips leading/trailing whitespace
    - Replaces runs of spaces / non-breaking spaces with a single underscore
    - Lowercases
    - Drops anything that is not alphanumeric or underscore
    """
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0]+", "_", name)
    name = name.lower()
    return re.sub(r"[^\w]", "", name, flags=re.UNICODE)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def parse_role(raw: str | None) -> UserRole | None:
    """Map 'Corporate Secretary', 'corporate_secretary', 'corporateSecretary'... to a UserRole."""
    if not raw:
        return None
    key = re.sub(r"[\s_\-]+", "", raw.strip().lower())
    return ROLE_ALIASES.get(key)
