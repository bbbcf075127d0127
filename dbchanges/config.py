"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIGRATIONS_PREFIX = "database/rentec/schema/migrations/"
LABEL_NAME = "Database changes"
LABEL_COLOR = "1778d3"
LABEL_DESCRIPTION = "PR introduces database migration files"


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so validators can read env/file
_current_env: dict[str, str] = {}


class BotConfig(BaseSettings):
    """Target repo and webhook verification."""

    model_config = SettingsConfigDict(env_prefix="BOT_", extra="ignore")

    repository: str = Field(default="", description="Target repo e.g. owner/repo; empty accepts any")
    webhook_secret: str = Field(default="", description="Secret for webhook verification")


class GitHubConfig(BaseSettings):
    """GitHub API and webhook settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    html_url: str = Field(default="https://github.com", description="Web base URL for blob links")
    webhook_path: str = Field(default="/webhook/github", description="Webhook URL path")


class MigrationsConfig(BaseSettings):
    """Which files count as migrations and how they are reported."""

    model_config = SettingsConfigDict(env_prefix="MIGRATIONS_", extra="ignore")

    path_prefix: str = Field(default=MIGRATIONS_PREFIX, description="Added files under this path are migrations")
    # pairs: single do/undo pair gets a one-line summary; list: always a bullet list
    summary_format: Literal["list", "pairs"] = Field(default="pairs", description="list or pairs")
    label_name: str = Field(default=LABEL_NAME, description="Label applied while migrations are present")
    label_color: str = Field(default=LABEL_COLOR, description="Label color (hex, no #)")
    label_description: str = Field(default=LABEL_DESCRIPTION, description="Label description")


class WebhookConfig(BaseSettings):
    """Webhook server settings."""

    model_config = SettingsConfigDict(env_prefix="WEBHOOK_", extra="ignore")

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    enabled: bool = Field(default=True, description="Enable webhook server")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    bot: BotConfig = Field(default_factory=BotConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    migrations: MigrationsConfig = Field(default_factory=MigrationsConfig)
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    @property
    def webhook_secret_resolved(self) -> str:
        """Resolve webhook secret from config, env or Docker secret file."""
        s = self.bot.webhook_secret
        if s and not s.startswith("${") and s != "your-webhook-secret-here":
            return s
        return _read_secret("WEBHOOK_SECRET", "WEBHOOK_SECRET_FILE") or ""


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (plus env overrides per section).
    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE, WEBHOOK_SECRET or WEBHOOK_SECRET_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    raw: dict[str, Any] = {}
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
        raw = _substitute_env(raw)

    # GitHub Actions exposes the repository as GITHUB_REPOSITORY
    bot_raw = raw.get("bot") or {}
    if not bot_raw.get("repository") and _current_env.get("GITHUB_REPOSITORY"):
        bot_raw = {**bot_raw, "repository": _current_env["GITHUB_REPOSITORY"]}

    return AppConfig(
        bot=BotConfig(**bot_raw),
        github=GitHubConfig(**(raw.get("github") or {})),
        migrations=MigrationsConfig(**(raw.get("migrations") or {})),
        webhook=WebhookConfig(**(raw.get("webhook") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
