"""Filesystem helpers that turn generated text into files and barrels."""

from __future__ import annotations

import logging
from pathlib import Path

from .templates import generate_parent_index

logger = logging.getLogger("pagegen.materializer")

DEFAULT_INDEX_FILENAME = "index.ts"


def ensure_directory_exists(path: Path) -> None:
    if path.exists():
        return
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory %s", path)


def write_file(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, replacing whatever was there."""
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path


def ensure_parent_index_files(
    base_path: Path,
    relative_path: str,
    index_filename: str = DEFAULT_INDEX_FILENAME,
) -> list[Path]:
    """Make every ancestor of ``relative_path`` re-export its child directory.

    ``base_path`` itself is left alone, as is the leaf directory, which owns a
    generated index of its own. An existing barrel is only appended to when it
    does not already mention the child name anywhere in its text, so a barrel
    exporting ``./userList`` also hides a missing ``./user`` export.

    Returns the barrel files that were created or appended to.
    """
    parts = relative_path.split("/")
    current = base_path
    touched: list[Path] = []

    for index, part in enumerate(parts[:-1]):
        current = current / part
        ensure_directory_exists(current)

        index_path = current / index_filename
        child = parts[index + 1]

        if not index_path.exists():
            write_file(index_path, generate_parent_index(child))
            logger.info("Created barrel %s exporting %s", index_path, child)
            touched.append(index_path)
            continue

        content = index_path.read_text(encoding="utf-8")
        if child in content:
            logger.debug("Barrel %s already mentions %s", index_path, child)
            continue
        separator = "" if not content or content.endswith("\n") else "\n"
        with index_path.open("a", encoding="utf-8") as handle:
            handle.write(separator + generate_parent_index(child))
        logger.info("Appended export of %s to %s", child, index_path)
        touched.append(index_path)

    return touched
