"""pagegen package root exposing the page scaffolding core."""

from .core import (  # isort: skip
    FeatureFlags,
    PageGenerator,
    PageOptions,
    to_camel_case,
    to_pascal_case,
)

__all__ = [
    "FeatureFlags",
    "PageGenerator",
    "PageOptions",
    "to_camel_case",
    "to_pascal_case",
]
