"""
SVCS process settings

Environment-based configuration for the ``svcs`` command-line tool.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SVCS_*`` environment variables."""

    debug: bool = False

    # Working directory override. Tests set SVCS_WORK_DIR instead of os.chdir.
    work_dir: Optional[Path] = None

    # Name of the repository directory created inside the working directory.
    repo_dir_name: str = "vcs"

    @field_validator("repo_dir_name")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        """Reject names that would escape the working directory."""
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"repo_dir_name must be a single directory name, got {value!r}")
        return value

    model_config = SettingsConfigDict(
        env_prefix="SVCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
