"""pagegen core package - page scaffolding utilities."""

from .config import ConfigLoader, GeneratorConfig
from .errors import PageGenerationError
from .generator import GenerationResult, PageGenerator
from .materializer import ensure_directory_exists, ensure_parent_index_files
from .naming import normalize_page_path, to_camel_case, to_pascal_case
from .options import FeatureFlags, PageOptions
from .prompts import QUESTIONS, Question, collect_answers

__all__ = [
    "ConfigLoader",
    "FeatureFlags",
    "GenerationResult",
    "GeneratorConfig",
    "PageGenerationError",
    "PageGenerator",
    "PageOptions",
    "QUESTIONS",
    "Question",
    "collect_answers",
    "ensure_directory_exists",
    "ensure_parent_index_files",
    "normalize_page_path",
    "to_camel_case",
    "to_pascal_case",
]
