"""Configuration management for file-changelog."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LABEL = "file"


class BaseLocation(BaseModel):
    """A directory and the URL that serves the same files."""

    dir: Path
    url: str = ""

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ChangelogConfig(BaseSettings):
    """Configuration for a changelog session."""

    # Contextual label included in log messages
    label: str = DEFAULT_LABEL

    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory where tracked files are placed",
    )
    base_url: str = Field(default="", description="URL where base_dir is served")

    # Re-check a cached diff against the filesystem before committing it
    verify_before_commit: bool = True

    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="FILE_CHANGELOG_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def base(self) -> BaseLocation:
        """The base directory and URL pair."""
        return BaseLocation(dir=self.base_dir, url=self.base_url)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


def get_config(**overrides) -> ChangelogConfig:
    """Load configuration from the environment, applying explicit overrides."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return ChangelogConfig(**values)
