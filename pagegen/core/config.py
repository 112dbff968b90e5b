"""Configuration loading for pagegen."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import yaml  # type: ignore[import-not-found]
from jsonschema import Draft202012Validator  # type: ignore[import-not-found]
from jsonschema.exceptions import ValidationError  # type: ignore[import-not-found]

from .errors import PageGenerationError
from .materializer import DEFAULT_INDEX_FILENAME
from .templates import DEFAULT_COMPONENT_ALIAS

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA = PACKAGE_ROOT / "schemas" / "pagegen-config.schema.json"
CONFIG_FILENAME = "pagegen.yml"

DEFAULT_ROOTS = {
    "components": "src/components/pages",
    "pages": "src/pages",
    "interfaces": "src/models/interfaces",
    "types": "src/models/types",
    "hooks": "src/hooks/client",
}


def _default_roots() -> dict[str, str]:
    return dict(DEFAULT_ROOTS)


@dataclass
class GeneratorConfig:
    """Root directories and naming conventions used when generating a page."""

    roots: dict[str, str] = field(default_factory=_default_roots)
    index_filename: str = DEFAULT_INDEX_FILENAME
    component_alias: str = DEFAULT_COMPONENT_ALIAS

    def root(self, kind: str) -> str:
        return self.roots[kind]

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GeneratorConfig":
        roots = _default_roots()
        roots.update(data.get("roots") or {})
        return cls(
            roots=roots,
            index_filename=str(data.get("index_filename") or DEFAULT_INDEX_FILENAME),
            component_alias=str(
                data.get("component_alias") or DEFAULT_COMPONENT_ALIAS
            ),
        )


class ConfigLoader:
    """Read ``pagegen.yml`` and validate it against the bundled JSON Schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        self.schema_path = schema_path or DEFAULT_SCHEMA
        self.validator = self._build_validator()

    def _build_validator(self) -> Draft202012Validator:
        if not self.schema_path.exists():
            raise PageGenerationError(
                f"Configuration schema missing at {self.schema_path}."
            )
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        return Draft202012Validator(schema)

    def load(self, project_root: Path, config_path: Path | None = None) -> GeneratorConfig:
        """Load the config for ``project_root``.

        An explicit ``config_path`` must exist; the implicit ``pagegen.yml``
        is optional and falls back to the built-in defaults.
        """
        if config_path is None:
            candidate = project_root / CONFIG_FILENAME
            if not candidate.exists():
                return GeneratorConfig()
            config_path = candidate
        elif not config_path.exists():
            raise PageGenerationError(f"Config file not found: {config_path}")

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise PageGenerationError(f"Unable to parse {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PageGenerationError(f"{config_path} must contain a mapping")

        errors = list(self._iter_error_messages(data))
        if errors:
            raise PageGenerationError(
                f"Invalid configuration in {config_path}:\n" + "\n".join(errors)
            )
        return GeneratorConfig.from_mapping(data)

    def _iter_error_messages(self, payload: dict[str, Any]) -> Iterable[str]:
        for error in self.validator.iter_errors(payload):
            path = ".".join(str(idx) for idx in error.path) or "config"
            if isinstance(error, ValidationError):
                yield f"{path}: {error.message}"
            else:
                yield f"{path}: {error}"
