from __future__ import annotations

from pathlib import Path

import pytest

from libsweep.config import (
    DEFAULT_CATALOG_PATH,
    CatalogConfig,
    ConfigurationError,
    ReconcileConfig,
    get_catalog_config,
    get_preflight_config,
    get_reconcile_config,
)


def test_catalog_config_defaults_to_server_location() -> None:
    config = get_catalog_config()

    assert config.sqlite_path() == DEFAULT_CATALOG_PATH.resolve()


def test_catalog_config_prefers_uri_env_over_path_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("LIBSWEEP_CATALOG_PATH", str(tmp_path / "library.db"))
    monkeypatch.setenv("LIBSWEEP_DATABASE_URI", "postgresql://catalog/db")

    config = get_catalog_config()

    assert config.uri == "postgresql://catalog/db"
    assert config.sqlite_path() is None


def test_catalog_config_explicit_arguments_beat_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("LIBSWEEP_DATABASE_URI", "postgresql://catalog/db")

    config = get_catalog_config(path=tmp_path / "library.db")

    assert config.sqlite_path() == (tmp_path / "library.db").resolve()


def test_catalog_config_memory_uri_has_no_path() -> None:
    assert CatalogConfig(uri="sqlite+pysqlite:///:memory:").sqlite_path() is None


def test_catalog_config_rejects_invalid_uri() -> None:
    with pytest.raises(ConfigurationError):
        CatalogConfig(uri="not a uri")


def test_reconcile_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIBSWEEP_CONCURRENCY", "3")
    monkeypatch.setenv("LIBSWEEP_CHECK_TIMEOUT", "2.5")
    monkeypatch.setenv("LIBSWEEP_TYPE_SUFFIXES", ".Episode, .Movie ,.Audio")
    monkeypatch.setenv("LIBSWEEP_BASE_DIR", "/srv/media")

    config = get_reconcile_config()

    assert config.concurrency == 3
    assert config.check_timeout == 2.5
    assert config.type_suffixes == (".Episode", ".Movie", ".Audio")
    assert config.base_dir == Path("/srv/media")
    assert config.eligibility_policy().type_suffixes == config.type_suffixes


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("LIBSWEEP_CONCURRENCY", "many"),
        ("LIBSWEEP_CONCURRENCY", "0"),
        ("LIBSWEEP_CHECK_TIMEOUT", "-1"),
        ("LIBSWEEP_TYPE_SUFFIXES", " , "),
    ],
)
def test_reconcile_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_reconcile_config()


def test_reconcile_config_defaults() -> None:
    config = ReconcileConfig()

    assert config.concurrency == 8
    assert config.metadata_marker == "%MetadataPath%"


def test_preflight_config_reads_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("LIBSWEEP_SERVICE_NAME", "emby")
    monkeypatch.setenv("LIBSWEEP_BACKUP_DIR", str(tmp_path))

    config = get_preflight_config()

    assert config.service_name == "emby"
    assert config.backup_dir == tmp_path
