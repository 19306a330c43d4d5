"""URL serialization for DM connection strings."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

DRIVER_NAME = "dm"
"""Scheme token of the connection string and the driver registration name."""

REDACTED = "***"

# Sub-delims allowed unescaped in userinfo. ':' '@' '/' '?' are always escaped.
_USERINFO_SAFE = "$&+,;="
_HOST_SAFE = "!$&'()*+,;=:[]<>\""


def _escape(value: str, safe: str) -> str:
    # Undecodable bytes read from the environment arrive as lone surrogates.
    return quote(value, safe=safe, errors="surrogateescape")


def _join_host_port(host: str, port: int) -> str:
    """Render the authority's host:port, bracketing IPv6 literals."""
    if ":" in host:
        host = f"[{host}]"
    return f"{_escape(host, _HOST_SAFE)}:{port}"


def _encode_query(props: Mapping[str, Sequence[str]]) -> str:
    pairs = [(key, value) for key in sorted(props) for value in props[key]]
    return urlencode(pairs, errors="surrogateescape")


def _render(userinfo: str, host: str, port: int, props: Mapping[str, Sequence[str]]) -> str:
    url = f"{DRIVER_NAME}://{userinfo}@{_join_host_port(host, port)}"
    query = _encode_query(props)
    if query:
        url = f"{url}?{query}"
    return url


def build_url(
    user: str,
    password: str,
    host: str,
    port: int,
    props: Mapping[str, Sequence[str]],
) -> str:
    """Build a ``dm://user:password@host:port?props`` connection string.

    Query keys are sorted; values of a repeated key keep their order. No input
    is rejected: empty strings and out-of-range ports render as given.
    """
    userinfo = f"{_escape(user, _USERINFO_SAFE)}:{_escape(password, _USERINFO_SAFE)}"
    return _render(userinfo, host, port, props)


def redact_url(
    user: str,
    host: str,
    port: int,
    props: Mapping[str, Sequence[str]],
) -> str:
    """Same as :func:`build_url` but with the password masked, for logs."""
    userinfo = f"{_escape(user, _USERINFO_SAFE)}:{REDACTED}"
    return _render(userinfo, host, port, props)
