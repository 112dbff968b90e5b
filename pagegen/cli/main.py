#!/usr/bin/env python3
"""CLI for scaffolding front-end pages."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from pagegen.core import (
    QUESTIONS,
    ConfigLoader,
    FeatureFlags,
    GenerationResult,
    PageGenerationError,
    PageGenerator,
    PageOptions,
    collect_answers,
)
from pagegen.core.prompts import Reader

logger = logging.getLogger("pagegen.cli")


def _configure_logging() -> None:
    level = os.environ.get("PAGEGEN_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def split_combined_target(target: str) -> tuple[str, str]:
    """Split ``path/to/Name`` into ``("path/to", "Name")``."""
    page_path, _, page_name = target.strip("/").rpartition("/")
    return page_path, page_name


def _provided_values(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> dict[str, Any]:
    targets: list[str] = args.target
    if args.combined:
        if len(targets) > 1:
            parser.error("--combined takes a single path/name argument")
        page_path, page_name = split_combined_target(targets[0]) if targets else ("", "")
    else:
        if len(targets) > 2:
            parser.error("expected at most two arguments: path and name")
        page_path = targets[0] if targets else ""
        page_name = targets[1] if len(targets) > 1 else ""

    return {
        "page_path": page_path,
        "page_name": page_name,
        "search_condition": args.search,
        "interfaces": args.interfaces,
        "types": args.types,
        "hooks": args.hooks,
    }


def _needs_prompt(provided: dict[str, Any]) -> bool:
    return any(provided.get(question.key) in (None, "") for question in QUESTIONS)


def report(result: GenerationResult, project_root: Path) -> None:
    def _display(path: Path) -> str:
        try:
            return str(path.relative_to(project_root))
        except ValueError:
            return str(path)

    print(f"[pagegen] Generated page {result.options.page_name}")
    print("Generated files:")
    for generated in result.generated_files:
        print("  ·", _display(generated))
    if result.patched_indexes:
        print("Updated parent index files:")
        for patched in result.patched_indexes:
            print("  ·", _display(patched))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pagegen", description=__doc__)
    parser.add_argument(
        "target",
        nargs="*",
        help="Page path and page name (or a single path/name with --combined)",
    )
    parser.add_argument(
        "--combined",
        action="store_true",
        help="Read the path and name from one 'path/Name' argument",
    )
    parser.add_argument(
        "--search",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a search condition component",
    )
    parser.add_argument(
        "--interfaces",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create a models/interfaces directory for the page",
    )
    parser.add_argument(
        "--types",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create a models/types directory for the page",
    )
    parser.add_argument(
        "--hooks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create a hooks/client directory for the page",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root the source roots are resolved against",
    )
    parser.add_argument(
        "--config",
        help="Path to a pagegen.yml configuration file",
    )
    return parser


def main(argv: list[str] | None = None, reader: Reader = input) -> int:
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    project_root = Path(args.root).expanduser()
    provided = _provided_values(args, parser)

    try:
        config = ConfigLoader().load(
            project_root, Path(args.config).expanduser() if args.config else None
        )
        if _needs_prompt(provided):
            print("\nSelect the page generation options:")
        answers = collect_answers(provided, reader)
        options = PageOptions.from_input(answers["page_path"], answers["page_name"])
        flags = FeatureFlags(
            search_condition=answers["search_condition"],
            interfaces=answers["interfaces"],
            types=answers["types"],
            hooks=answers["hooks"],
        )
        result = PageGenerator(project_root, config).generate(options, flags)
    except EOFError:
        logger.error("Input ended before every question was answered")
        return 1
    except (PageGenerationError, OSError) as exc:
        logger.error("Page generation failed: %s", exc)
        return 1

    report(result, project_root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
