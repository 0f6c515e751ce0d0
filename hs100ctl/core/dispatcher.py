"""Dispatcher used by the CLI and the public API."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

import typer

from hs100ctl.core.catalog import lookup
from hs100ctl.core.codec import build_request, decode_reply
from hs100ctl.core.config import Config
from hs100ctl.core.errors import DecodeError, DeviceSelectionError, TransportError
from hs100ctl.core.model import Command, Device, DeviceResult
from hs100ctl.core.parser import parse
from hs100ctl.transports.base import Transport
from hs100ctl.transports.tcp import TCPTransport

ALL_DEVICES = "all"
LOGGER = logging.getLogger(__name__)


class Dispatcher:
    def __init__(
        self,
        config: Config,
        *,
        transport: Transport | None = None,
        debug: bool = False,
        echo: Callable[..., Any] = typer.echo,
    ) -> None:
        self.config = config
        self.transport = transport or TCPTransport()
        self.debug = debug
        self.echo = echo

    def resolve_devices(
        self,
        device_name: str | None = None,
        all_devices: bool = False,
    ) -> list[Device]:
        devices = self.config.device_list()
        if not devices:
            raise DeviceSelectionError(f"No devices configured in {self.config.path}")

        if device_name and device_name.strip().lower() != ALL_DEVICES:
            return [_find_device(devices, device_name)]
        if all_devices or device_name:
            return devices
        if self.config.device and self.config.device.strip().lower() != ALL_DEVICES:
            return [_find_device(devices, self.config.device)]
        return devices

    def query(self, command: Command, device: Device) -> DeviceResult:
        request = build_request(command)
        try:
            reply = self.transport.send(device.address, request, timeout_s=self.config.timeout_s)
        except TransportError as exc:
            return DeviceResult(device=device, action=command.name, error=str(exc))

        try:
            data = decode_reply(reply)
        except DecodeError as exc:
            LOGGER.warning("Could not decode reply from %s: %s", device.name, exc)
            data = {}

        return DeviceResult(device=device, action=command.name, result=parse(command, data))

    def run(self, action: str, devices: Sequence[Device]) -> int:
        command = lookup(action)
        batch = len(devices) > 1
        if batch:
            self.echo(f"Devices: {', '.join(d.name for d in devices)}")

        exit_code = 0
        for device in devices:
            if batch:
                self.echo(f"--- {device.name} ({device.address}) ---")
            outcome = self.query(command, device)
            if not outcome.ok:
                self.echo(f"Error: {outcome.error}", err=True)
                exit_code = 1
                continue
            self._print_result(outcome)
        return exit_code

    def _print_result(self, outcome: DeviceResult) -> None:
        result = outcome.result
        if result is None:
            return
        for line in result.lines:
            self.echo(line)
        if result.pretty or self.debug:
            self.echo(json.dumps(result.data, indent=1))


def _find_device(devices: Sequence[Device], name: str) -> Device:
    for device in devices:
        if device.name == name:
            return device
    known = ", ".join(d.name for d in devices)
    raise DeviceSelectionError(f"Unknown device '{name}'. Configured: {known}")
