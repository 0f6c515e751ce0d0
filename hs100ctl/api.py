"""Stable public API for building tooling on top of hs100ctl.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from pathlib import Path

from hs100ctl.core.catalog import COMMANDS, action_names, lookup
from hs100ctl.core.codec import decode, decode_reply, encode, frame, repair
from hs100ctl.core.config import Config, load_config
from hs100ctl.core.dispatcher import Dispatcher
from hs100ctl.core.errors import (
    ConfigLoadError,
    ConfigurationError,
    ConfigValidationError,
    DecodeError,
    DeviceSelectionError,
    Hs100Error,
    TransportConnectError,
    TransportError,
    UnknownActionError,
)
from hs100ctl.core.model import Command, Device, DeviceResult, ParsedResult
from hs100ctl.transports.base import Transport
from hs100ctl.transports.tcp import TCPTransport

__all__ = [
    "Hs100Error",
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigValidationError",
    "UnknownActionError",
    "DeviceSelectionError",
    "TransportError",
    "TransportConnectError",
    "DecodeError",
    "Command",
    "Config",
    "Device",
    "DeviceResult",
    "ParsedResult",
    "COMMANDS",
    "TCPTransport",
    "Transport",
    "encode",
    "decode",
    "frame",
    "repair",
    "decode_reply",
    "Client",
]


class Client:
    """Public client for querying plugs without going through the CLI.

    Results are returned as `DeviceResult` values instead of being printed.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        config_path: Path | str | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._dispatcher = Dispatcher(
            config or load_config(config_path),
            transport=transport,
        )

    @property
    def config(self) -> Config:
        return self._dispatcher.config

    def list_actions(self) -> tuple[str, ...]:
        return action_names()

    def list_devices(self) -> list[Device]:
        return self.config.device_list()

    def query(
        self,
        action: str,
        *,
        device_name: str | None = None,
    ) -> list[DeviceResult]:
        command = lookup(action)
        devices = self._dispatcher.resolve_devices(device_name)
        return [self._dispatcher.query(command, device) for device in devices]
