"""Page generator: writes the page skeleton and patches ancestor barrels."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorConfig
from .errors import PageGenerationError
from .materializer import ensure_directory_exists, ensure_parent_index_files, write_file
from .options import FeatureFlags, PageOptions
from .templates import (
    generate_component,
    generate_component_index,
    generate_condition,
    generate_model_index,
    generate_page,
    generate_page_index,
    generate_view_model,
)

logger = logging.getLogger("pagegen.generator")

OPTIONAL_ROOTS = ("interfaces", "types", "hooks")


def _default_paths() -> list[Path]:
    return []


@dataclass
class GenerationResult:
    """Files produced by a single generator run."""

    options: PageOptions
    generated_files: list[Path] = field(default_factory=_default_paths)
    patched_indexes: list[Path] = field(default_factory=_default_paths)


class PageGenerator:
    """Create component, view-model and page files for one page."""

    def __init__(self, project_root: Path, config: GeneratorConfig | None = None) -> None:
        self.project_root = project_root
        self.config = config or GeneratorConfig()

    def root_dir(self, kind: str) -> Path:
        return self.project_root / self.config.root(kind)

    def page_dir(self, kind: str, options: PageOptions) -> Path:
        return self.root_dir(kind) / options.page_path

    def _enabled_optional_roots(self, flags: FeatureFlags) -> list[str]:
        return [kind for kind in OPTIONAL_ROOTS if getattr(flags, kind)]

    def generate(self, options: PageOptions, flags: FeatureFlags) -> GenerationResult:
        if not options.page_name:
            raise PageGenerationError("A page name is required.")

        result = GenerationResult(options=options)
        index_filename = self.config.index_filename
        name = options.page_name
        component_dir = self.page_dir("components", options)
        pages_dir = self.page_dir("pages", options)
        optional_roots = self._enabled_optional_roots(flags)

        logger.info("Generating page %s at %s", name, options.page_path or ".")
        ensure_directory_exists(component_dir)
        ensure_directory_exists(pages_dir)

        for kind in optional_roots:
            target_dir = self.page_dir(kind, options)
            ensure_directory_exists(target_dir)
            result.generated_files.append(
                write_file(target_dir / index_filename, generate_model_index(options))
            )

        if flags.search_condition:
            result.generated_files.append(
                write_file(
                    component_dir / f"{name}Condition.tsx", generate_condition(options)
                )
            )

        result.generated_files.extend(
            [
                write_file(
                    component_dir / f"{name}Component.tsx",
                    generate_component(options, flags.search_condition),
                ),
                write_file(
                    component_dir / f"{name}ViewModel.tsx",
                    generate_view_model(options),
                ),
                write_file(
                    component_dir / index_filename, generate_component_index(options)
                ),
                write_file(
                    pages_dir / f"{name}Page.tsx",
                    generate_page(options, self.config.component_alias),
                ),
                write_file(pages_dir / index_filename, generate_page_index(options)),
            ]
        )

        for kind in ("components", "pages", *optional_roots):
            result.patched_indexes.extend(
                ensure_parent_index_files(
                    self.root_dir(kind), options.page_path, index_filename
                )
            )

        logger.info(
            "Generated %d files, patched %d barrels",
            len(result.generated_files),
            len(result.patched_indexes),
        )
        return result
