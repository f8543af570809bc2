"""Catalog of available checks, their metadata and their categories."""
from __future__ import annotations

from typing import Mapping, Optional

from prosestyle.models import CheckCategory, CheckFunction, CheckMetadata, validate_severity


def format_category_name(category_id: str) -> str:
    """Return a display name for a category key, e.g. ``weasel_words`` -> ``Weasel Words``."""

    return " ".join(word[:1].upper() + word[1:] for word in category_id.split("_"))


class CheckRegistry:
    """Maps check ids to their functions and metadata.

    Ids, categories and each category's check list keep insertion order.
    Registering an id a second time replaces its function and metadata but
    lists it under its category again; the duplicate listing is intentional.
    """

    def __init__(self) -> None:
        self._checks: dict[str, CheckFunction] = {}
        self._metadata: dict[str, CheckMetadata] = {}
        self._categories: dict[str, CheckCategory] = {}

    def register_check(
        self,
        check_id: str,
        check_function: CheckFunction,
        *,
        name: str,
        category: str,
        severity: str,
        description: str = "",
        enabled: bool = True,
        source: Optional[str] = None,
        source_url: Optional[str] = None,
    ) -> None:
        metadata = CheckMetadata(
            id=check_id,
            name=name,
            category=category,
            severity=validate_severity(severity),
            description=description,
            enabled=enabled,
            source=source,
            source_url=source_url,
        )
        self._checks[check_id] = check_function
        self._metadata[check_id] = metadata

        if category not in self._categories:
            self._categories[category] = CheckCategory(
                id=category,
                name=format_category_name(category),
                description=f"Checks related to {category}",
            )
        self._categories[category].checks.append(metadata)

    def unregister_check(self, check_id: str) -> None:
        self._checks.pop(check_id, None)
        metadata = self._metadata.pop(check_id, None)

        if metadata is not None:
            category = self._categories.get(metadata.category)
            if category is not None:
                category.checks = [check for check in category.checks if check.id != check_id]

    def get_check(self, check_id: str) -> Optional[CheckFunction]:
        return self._checks.get(check_id)

    def get_check_metadata(self, check_id: str) -> Optional[CheckMetadata]:
        return self._metadata.get(check_id)

    def get_all_check_ids(self) -> list[str]:
        return list(self._checks)

    def get_checks_by_category(self, category_id: str) -> list[CheckMetadata]:
        category = self._categories.get(category_id)
        return list(category.checks) if category is not None else []

    def get_all_categories(self) -> list[CheckCategory]:
        return list(self._categories.values())

    def get_enabled_checks(self, checks: Mapping[str, bool]) -> list[str]:
        """Return every registered id not explicitly disabled in ``checks``."""

        return [check_id for check_id in self._checks if checks.get(check_id) is not False]

    def default_checks_map(self) -> dict[str, bool]:
        """Return ``{id: enabled}`` from the registration-time defaults."""

        return {check_id: metadata.enabled for check_id, metadata in self._metadata.items()}

    def has_check(self, check_id: str) -> bool:
        return check_id in self._checks

    def get_check_count(self) -> int:
        return len(self._checks)

    def clear(self) -> None:
        self._checks.clear()
        self._metadata.clear()
        self._categories.clear()

    def __len__(self) -> int:
        return self.get_check_count()

    def __contains__(self, check_id: object) -> bool:
        return check_id in self._checks
