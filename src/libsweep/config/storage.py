"""Catalog store configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .env import optional_env
from .errors import ConfigurationError

if TYPE_CHECKING:
    from sqlalchemy.engine import URL

DEFAULT_CATALOG_PATH: Final[Path] = Path("/var/lib/jellyfin/data/library.db")


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    uri: str

    def __post_init__(self) -> None:
        self.url()

    @classmethod
    def from_path(cls, path: Path | str) -> CatalogConfig:
        resolved = Path(path).expanduser().resolve()
        return cls(uri=f"sqlite+pysqlite:///{resolved}")

    def url(self) -> URL:
        try:
            return make_url(self.uri)
        except ArgumentError as exc:
            raise ConfigurationError(f"Invalid database URI: {self.uri!r}") from exc

    def sqlite_path(self) -> Path | None:
        """Return the local database file for SQLite URIs, ``None`` otherwise."""

        url = self.url()
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return Path(url.database)


def get_catalog_config(
    *,
    path: Path | str | None = None,
    uri: str | None = None,
) -> CatalogConfig:
    """Resolve the catalog location; explicit arguments beat the environment."""

    if uri:
        return CatalogConfig(uri=uri)
    if path is not None:
        return CatalogConfig.from_path(path)
    env_uri = optional_env("LIBSWEEP_DATABASE_URI")
    if env_uri:
        return CatalogConfig(uri=env_uri)
    env_path = optional_env("LIBSWEEP_CATALOG_PATH")
    return CatalogConfig.from_path(env_path or DEFAULT_CATALOG_PATH)
