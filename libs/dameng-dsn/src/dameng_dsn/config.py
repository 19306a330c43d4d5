"""Connection options for the DM driver, accumulated before rendering a URL."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Self

from pydantic import BaseModel, Field

from dameng_dsn.url import build_url, redact_url

logger = logging.getLogger(__name__)

SCHEMA = "schema"
COLUMN_NAME_CASE = "columnNameCase"
ESCAPE_PROCESS = "escapeProcess"

DEFAULT_COLUMN_NAME_CASE = "lower"
DEFAULT_ESCAPE_PROCESS = "true"


class ConnectionConfig(BaseModel):
    """Credentials and driver properties for a DM connection string.

    ``props`` is multi-valued: appending to a key never replaces earlier
    values. Build instances with :meth:`create` so the driver defaults are
    filled in, e.g.::

        config = ConnectionConfig.create(
            "SYSDBA", "SYSDBA", "127.0.0.1", 5236, "SYSDBA",
            with_prop("autoCommit", "false"),
        )
        config.build_url()
    """

    user: str
    password: str = Field(repr=False)
    host: str
    port: int
    schema_name: str = ""
    props: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        user: str,
        password: str,
        host: str,
        port: int,
        schema: str,
        *options: PropOption,
    ) -> Self:
        """Run ``options`` in order, then apply the driver defaults.

        An empty ``schema`` leaves the login user's default schema in effect.
        """
        config = cls(user=user, password=password, host=host, port=port, schema_name=schema)
        for option in options:
            option(config)
        config.apply_defaults()
        return config

    def append_prop(self, key: str, value: str) -> None:
        """Append ``value`` to the values of ``key``."""
        self.props.setdefault(key, []).append(value)

    def apply_defaults(self) -> None:
        """Fill in defaults for properties the caller has not set."""
        if self.schema_name and SCHEMA not in self.props:
            self.props[SCHEMA] = [self.schema_name]
        if COLUMN_NAME_CASE not in self.props:
            self.props[COLUMN_NAME_CASE] = [DEFAULT_COLUMN_NAME_CASE]
        if ESCAPE_PROCESS not in self.props:
            self.props[ESCAPE_PROCESS] = [DEFAULT_ESCAPE_PROCESS]

    def build_url(self) -> str:
        """Render the ``dm://`` connection string."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Building DM connection url %s", self.redacted_url())
        return build_url(self.user, self.password, self.host, self.port, self.props)

    def redacted_url(self) -> str:
        """The connection string with the password masked."""
        return redact_url(self.user, self.host, self.port, self.props)

    @property
    def dsn(self) -> str:
        """DM connection string."""
        return self.build_url()


PropOption = Callable[[ConnectionConfig], None]


def with_prop(key: str, value: str) -> PropOption:
    """Option for :meth:`ConnectionConfig.create` that appends one property value."""

    def _apply(config: ConnectionConfig) -> None:
        config.append_prop(key, value)

    return _apply
