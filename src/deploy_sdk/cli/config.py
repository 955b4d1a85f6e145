"""Configuration helpers for the deploy CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path.home() / ".deploy" / "config.toml"
DEFAULT_API_URL = "https://api.zeit.co"
API_URL_ENV_VAR = "DEPLOY_API_URL"
TOKEN_ENV_VAR = "DEPLOY_TOKEN"
TEAM_ENV_VAR = "DEPLOY_TEAM"


@dataclass(frozen=True)
class CLIConfig:
    api_url: str = DEFAULT_API_URL
    token: str | None = None
    current_team: str | None = None


@dataclass(frozen=True)
class ExecutionContext:
    """Per-invocation auth and endpoint settings handed to a command."""

    token: str | None
    api_url: str
    current_team: str | None = None


class ConfigError(ValueError):
    """Raised when CLI config is invalid."""


def _load_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")

    try:  # Python 3.11+
        import tomllib  # type: ignore[attr-defined]
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except ModuleNotFoundError:
        try:
            import tomli
        except ModuleNotFoundError as exc:
            raise ConfigError("toml parser unavailable; install tomli for Python < 3.11") from exc
        try:
            return tomli.loads(raw)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def load_cli_config(path: str | Path | None = None) -> CLIConfig:
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    source: dict[str, Any] = {}
    if config_path.exists():
        parsed = _load_toml(config_path)
        section = parsed.get("cli")
        if isinstance(section, dict):
            source = section
        elif section is None:
            source = parsed
        else:
            raise ConfigError("[cli] must be a table")

    env_api_url = os.getenv(API_URL_ENV_VAR)
    configured_api_url = str(source.get("api_url", DEFAULT_API_URL)).strip()
    api_url = env_api_url.strip() if env_api_url else configured_api_url
    if not api_url:
        raise ConfigError("api_url must not be empty")

    env_token = _optional_str(os.getenv(TOKEN_ENV_VAR))
    token = env_token or _optional_str(source.get("token"))

    env_team = _optional_str(os.getenv(TEAM_ENV_VAR))
    current_team = env_team or _optional_str(source.get("current_team"))

    return CLIConfig(api_url=api_url, token=token, current_team=current_team)


def build_execution_context(
    config: CLIConfig,
    *,
    token: str | None = None,
    team: str | None = None,
    api_url: str | None = None,
) -> ExecutionContext:
    return ExecutionContext(
        token=token or config.token,
        api_url=api_url or config.api_url,
        current_team=team or config.current_team,
    )
