"""dameng-dsn — connection strings for the DM database driver."""

__version__ = "0.1.0"

from dameng_dsn.config import ConnectionConfig, PropOption, with_prop
from dameng_dsn.settings import DamengSettings
from dameng_dsn.url import DRIVER_NAME, build_url, redact_url

__all__ = [
    "DRIVER_NAME",
    "ConnectionConfig",
    "DamengSettings",
    "PropOption",
    "build_url",
    "redact_url",
    "with_prop",
]
