"""Core data models used across config, dispatcher, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_PORT = 9999


def split_address(address: str) -> tuple[str, int]:
    """Split ``host[:port]`` into a host and port, defaulting to 9999.

    Bracketed IPv6 literals are accepted as ``[::1]:9999``.
    """
    value = address.strip()
    if value.startswith("["):
        host, sep, rest = value[1:].partition("]")
        if not sep:
            raise ValueError(f"Unterminated IPv6 literal in address '{address}'")
        port_text = rest[1:] if rest.startswith(":") else rest
    elif value.count(":") == 1:
        host, _, port_text = value.partition(":")
    else:
        host, port_text = value, ""

    if not host:
        raise ValueError(f"Missing host in address '{address}'")
    if not port_text:
        return host, DEFAULT_PORT
    if not port_text.isdigit() or not 0 < int(port_text) < 65536:
        raise ValueError(f"Invalid port '{port_text}' in address '{address}'")
    return host, int(port_text)


@dataclass(frozen=True)
class Device:
    name: str
    address: str

    @property
    def endpoint(self) -> tuple[str, int]:
        return split_address(self.address)


@dataclass(frozen=True)
class Command:
    name: str
    request: str
    response: str
    description: str = ""


@dataclass(frozen=True)
class ParsedResult:
    action: str
    lines: tuple[str, ...]
    err_code: int = 0
    data: dict[str, Any] = field(default_factory=dict)
    pretty: bool = False


@dataclass(frozen=True)
class DeviceResult:
    device: Device
    action: str
    result: ParsedResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
