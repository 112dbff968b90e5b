"""Page generation option structures."""

from __future__ import annotations

from dataclasses import dataclass

from .naming import normalize_page_path, to_pascal_case


@dataclass(frozen=True)
class PageOptions:
    """Where a page lives and what its generated symbols are called."""

    page_path: str
    page_name: str

    @classmethod
    def from_input(cls, page_path: str, page_name: str) -> "PageOptions":
        """Normalise raw user input into path segments and an identifier prefix."""
        return cls(
            page_path=normalize_page_path(page_path),
            page_name=to_pascal_case(page_name.strip()),
        )


@dataclass(frozen=True)
class FeatureFlags:
    """Optional pieces of the page skeleton."""

    search_condition: bool = False
    interfaces: bool = False
    types: bool = False
    hooks: bool = False
