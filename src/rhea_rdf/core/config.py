"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path("rhea.toml")


class Settings(BaseSettings):
    """Central configuration for reading and resolving Rhea dumps."""

    dump_path: Path = Path("data/rhea.rdf.gz")
    artifacts_dir: Path = Path("artifacts")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "json"
    resolve_max_workers: int = 1
    resolve_partition_size: int = 50_000

    model_config = SettingsConfigDict(env_prefix="RHEA_", env_file=(), extra="ignore")

    @property
    def effective_workers(self) -> int:
        return max(1, self.resolve_max_workers)

    @property
    def effective_partition_size(self) -> int:
        return max(1, self.resolve_partition_size)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    overrides = _load_settings_overrides()
    return Settings(**overrides)


def _load_settings_overrides(config_path: Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load configuration overrides from the `[rhea]` table of the TOML file."""
    if not config_path.exists():
        return {}
    data = _read_toml(config_path)
    section = data.get("rhea")
    if not isinstance(section, dict):
        return {}
    return {
        key: value
        for key, value in section.items()
        if key in Settings.model_fields and value is not None
    }


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)
