"""Load verifier and logging settings from a YAML document."""
from __future__ import annotations
from pathlib import Path
import re
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

from pydantic import ValidationError
from dotenv import dotenv_values
import yaml
from patch_chunk.domain.models import Settings, VerifierConfig
from patch_chunk.log import configure_logging
__all__ = [
    "LoadError",
    "apply_settings",
    "load_environment",
    "load_settings",
]

PLACEHOLDER_PATTERN = re.compile(r"\$\{(?P<key>[^}:]+)(?::-(?P<default>[^}]*))?\}")
"""``${NAME}`` or ``${NAME:-default}``."""

class LoadError(RuntimeError):
    """Raised when a settings document fails to load."""

def load_environment(
    env_files: Sequence[str | Path] | None = None,
    *,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merge ``base`` with ``.env`` files in order; later files win."""
    combined: dict[str, str] = dict(base or {})
    for env_file in env_files or ():
        path = Path(env_file)
        if not path.exists():
            message = f"Environment file not found: {path}"
            raise LoadError(message)
        combined.update({k: v for k, v in dotenv_values(path, encoding="utf-8").items() if v is not None})
    return combined

def load_settings(
    yaml_path: str | Path,
    *,
    env_files: Sequence[str | Path] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> Settings:
    """Load :class:`Settings` from ``yaml_path``, resolving ``${VAR}`` placeholders."""
    path = Path(yaml_path)
    sections = _read_sections(path)
    env = load_environment(env_files, base=overrides)
    resolved = {
        name: {key: _resolve(value, env, path) for key, value in fields.items()}
        for name, fields in sections.items()
    }
    try:
        return Settings.model_validate(resolved)
    except ValidationError as exc:
        message = f"Invalid settings in {path}: {exc}"
        raise LoadError(message) from exc

def apply_settings(settings: Settings) -> VerifierConfig:
    """Configure logging from ``settings`` and return the verifier section for ``Chunk.verify``."""
    configure_logging(settings.logging)
    return settings.verifier

def _read_sections(path: Path) -> dict[str, dict[str, Any]]:
    if not path.exists():
        message = f"Configuration file not found: {path}"
        raise LoadError(message)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        message = f"Invalid YAML in configuration file: {path}"
        raise LoadError(message) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        message = f"Settings in {path} must be a mapping"
        raise LoadError(message)
    sections: dict[str, dict[str, Any]] = {}
    for name, fields in cast("dict[Any, Any]", raw).items():
        if not isinstance(fields, dict):
            message = f"Section '{name}' in {path} must be a mapping"
            raise LoadError(message)
        sections[str(name)] = {str(key): value for key, value in cast("dict[Any, Any]", fields).items()}
    return sections


def _resolve(value: Any, env: Mapping[str, str], source: Path) -> Any:
    if not isinstance(value, str):
        return value

    def substitute(match: re.Match[str]) -> str:
        key, default = match.group("key"), match.group("default")
        if key in env:
            return env[key]
        if default is not None:
            return default
        message = f"Missing environment variable '{key}' referenced in {source}"
        raise LoadError(message)

    if "${" in PLACEHOLDER_PATTERN.sub("", value):
        message = f"Malformed environment placeholder in '{value}'"
        raise LoadError(message)
    return PLACEHOLDER_PATTERN.sub(substitute, value)
