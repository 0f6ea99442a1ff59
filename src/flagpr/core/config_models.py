"""
Settings for flagpr, read from a .flagpr.yml file in the project root.

Example YAML:

    branch_prefix: flag-update
    github_token: ghp_xxx        # optional, GITHUB_TOKEN is used when unset
    github_api_url: https://api.github.com
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


DEFAULT_BRANCH_PREFIX = "flag-update"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
TOKEN_ENV_VAR = "GITHUB_TOKEN"

# Settings file locations to try (in order), relative to the project root
CONFIG_PATHS = [
    ".flagpr.yml",
    ".github/.flagpr.yml",
]


class FlagPrSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    branch_prefix: str = DEFAULT_BRANCH_PREFIX
    github_token: Optional[str] = None
    github_api_url: str = DEFAULT_GITHUB_API_URL

    @field_validator("branch_prefix", mode="before")
    @classmethod
    def default_empty_prefix(cls, prefix: Optional[str]) -> str:
        """An empty or missing prefix means the default one."""
        if prefix is None or not str(prefix).strip():
            return DEFAULT_BRANCH_PREFIX
        return str(prefix).strip().strip("/")

    @field_validator("github_token", mode="before")
    @classmethod
    def empty_token_is_unset(cls, token: Optional[str]) -> Optional[str]:
        if token is None or not str(token).strip():
            return None
        return str(token).strip()

    @field_validator("github_api_url")
    @classmethod
    def strip_trailing_slash(cls, url: str) -> str:
        return url.rstrip("/")


def resolve_credential(settings: FlagPrSettings, environ: Mapping[str, str]) -> Optional[str]:
    """
    Pick the forge token: the configured one first, then GITHUB_TOKEN from
    the given environment snapshot. Returns None when neither is set.
    """
    if settings.github_token:
        return settings.github_token
    env_token = (environ.get(TOKEN_ENV_VAR) or "").strip()
    return env_token or None


def load_settings(root: Path, config_path: Optional[Path] = None) -> FlagPrSettings:
    """
    Load settings for a project root.

    Uses config_path when given, otherwise the first existing file out of
    CONFIG_PATHS. Falls back to defaults when nothing usable is found.
    """
    candidates = [config_path] if config_path is not None else [root / rel for rel in CONFIG_PATHS]

    for candidate in candidates:
        if not candidate.is_file():
            continue
        settings = _try_load_settings(candidate)
        if settings is not None:
            return settings

    return FlagPrSettings()


def _try_load_settings(path: Path) -> Optional[FlagPrSettings]:
    """
    Attempt to read and validate a single settings file.

    Returns None if the file is unreadable, invalid YAML, or fails validation.
    """
    try:
        content_text = path.read_text(encoding="utf-8")
    except OSError as read_error:
        print(f"[FlagPR] ⚠️ Failed to read settings from {path}: {read_error}")
        return None

    try:
        yaml_data = yaml.safe_load(content_text)
    except yaml.YAMLError as yaml_error:
        print(f"[FlagPR] ⚠️ Invalid YAML in {path}: {yaml_error}")
        return None

    if yaml_data is None:
        print(f"[FlagPR] ⚠️ Settings file {path} is empty, using defaults")
        return FlagPrSettings()

    try:
        settings = FlagPrSettings.model_validate(yaml_data)
    except ValidationError as validation_error:
        print(f"[FlagPR] ⚠️ Invalid settings structure in {path}: {validation_error}")
        return None

    print(f"[FlagPR] 📋 Loaded settings from {path}")
    return settings
