"""Tool configuration loaded from WSM_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from workspace_manager.folders import DEFAULT_CURRENT_EMBLEM, DEFAULT_FOLDER_EMBLEM


class WorkspaceSettings(BaseSettings):
    """workspace-manager settings.

    All fields are read from environment variables with the ``WSM_`` prefix.
    For example, ``WSM_LOG_LEVEL=DEBUG`` maps to ``log_level``.

    Command-line flags take precedence where both exist.
    """

    model_config = SettingsConfigDict(
        env_prefix="WSM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "WARNING"

    # -- Folder entries --------------------------------------------------------
    folder_emblem: str = DEFAULT_FOLDER_EMBLEM
    """Prefix for the display name of every scanned folder."""

    current_emblem: str = DEFAULT_CURRENT_EMBLEM
    """Prefix for the display name of the current-directory entry."""

    # -- Existing files --------------------------------------------------------
    strict_parse: bool = False
    """Fail instead of replacing an existing workspace file that cannot be parsed."""


@lru_cache(maxsize=1)
def get_settings() -> WorkspaceSettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return WorkspaceSettings()
