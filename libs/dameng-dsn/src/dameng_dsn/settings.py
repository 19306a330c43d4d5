"""DM connection settings via environment variables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings

from dameng_dsn.config import ConnectionConfig

if TYPE_CHECKING:
    from dameng_dsn.config import PropOption


class DamengSettings(BaseSettings):
    """DM connection settings, loaded from DAMENG_DB_* env vars.

    Defaults match a local DM8 install with the stock SYSDBA account.
    ``DAMENG_DB_PROPS`` takes a JSON object of key to list of values.
    """

    model_config = {"env_prefix": "DAMENG_DB_"}

    host: str = "127.0.0.1"
    port: int = 5236
    user: str = "SYSDBA"
    password: str = "SYSDBA"  # noqa: S105
    schema_name: str = ""
    props: dict[str, list[str]] = Field(default_factory=dict)

    def to_connection_config(self, *options: PropOption) -> ConnectionConfig:
        """Seed a ConnectionConfig from these settings, then run ``options``."""
        config = ConnectionConfig(
            user=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            schema_name=self.schema_name,
            props={key: list(values) for key, values in self.props.items()},
        )
        for option in options:
            option(config)
        config.apply_defaults()
        return config

    @property
    def dsn(self) -> str:
        """DM connection string."""
        return self.to_connection_config().build_url()
