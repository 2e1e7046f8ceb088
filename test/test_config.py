from __future__ import annotations

from pathlib import Path

import pytest

from rhea_rdf.core import config


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RHEA_RESOLVE_MAX_WORKERS", "4")
    monkeypatch.setenv("RHEA_LOG_LEVEL", "DEBUG")

    settings = config.Settings()

    assert settings.resolve_max_workers == 4
    assert settings.log_level == "DEBUG"


def test_effective_limits_never_drop_below_one() -> None:
    settings = config.Settings(resolve_max_workers=0, resolve_partition_size=-5)

    assert settings.effective_workers == 1
    assert settings.effective_partition_size == 1


def test_overrides_are_loaded_from_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "rhea.toml"
    config_path.write_text(
        '[rhea]\ndump_path = "dumps/rhea.rdf.gz"\nresolve_partition_size = 10\nunknown = 1\n',
        encoding="utf-8",
    )

    overrides = config._load_settings_overrides(config_path)

    assert overrides == {"dump_path": "dumps/rhea.rdf.gz", "resolve_partition_size": 10}
    assert config.Settings(**overrides).dump_path == Path("dumps/rhea.rdf.gz")


def test_missing_toml_yields_no_overrides(tmp_path: Path) -> None:
    assert config._load_settings_overrides(tmp_path / "absent.toml") == {}
