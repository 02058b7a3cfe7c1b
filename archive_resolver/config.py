"""Centralized configuration management using Pydantic Settings."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defines application settings, loaded from environment variables or .env file.

    Attributes
    ----------
    library_dirs : list of str
        Directories scanned for archive roots; every archive found is
        registered under its POSIX path.
    source_folders : list of str
        Plain directories registered as non-archive package roots.
    archive_extensions : list of str
        File extensions recognized as archives during discovery.
    workspace_dir : str or None
        Directory holding the workspace projects, one per sub-directory.
    log_level : str
        Initial logger level name.
    """

    library_dirs: List[str] = []
    source_folders: List[str] = []
    archive_extensions: List[str] = [".jar", ".zip", ".rar", ".7z"]
    workspace_dir: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ARCHIVE_RESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
