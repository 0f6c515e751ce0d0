"""Turn decoded plug replies into console-ready results.

Each catalog command names a response shape; this module maps shapes to extractors.
Replies from different firmware revisions vary, so every lookup tolerates missing
or mistyped fields and falls back to zero values instead of raising.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hs100ctl.core.model import Command, ParsedResult

RELAY_STATES = {0: "OFF", 1: "ON"}


def _dig(data: Any, *keys: str) -> Any:
    node = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _err_code_lines(err_code: int) -> tuple[str, ...]:
    return ("OK",) if err_code == 0 else (f"Error code: {err_code}",)


def _err_code_shape(*path: str) -> Callable[[Command, dict[str, Any]], ParsedResult]:
    def extract(command: Command, data: dict[str, Any]) -> ParsedResult:
        err_code = _int(_dig(data, *path, "err_code"))
        return ParsedResult(
            action=command.name,
            lines=_err_code_lines(err_code),
            err_code=err_code,
            data=data,
        )

    return extract


def _status(command: Command, data: dict[str, Any]) -> ParsedResult:
    sysinfo = _dig(data, "system", "get_sysinfo")
    relay_state = _int(_dig(sysinfo, "relay_state"))
    label = RELAY_STATES.get(relay_state, f"UNKNOWN ({relay_state})")
    return ParsedResult(
        action=command.name,
        lines=(label,),
        err_code=_int(_dig(sysinfo, "err_code")),
        data=data,
    )


def _time(command: Command, data: dict[str, Any]) -> ParsedResult:
    clock = _dig(data, "time", "get_time")
    err_code = _int(_dig(clock, "err_code"))
    if err_code != 0:
        lines = _err_code_lines(err_code)
    else:
        year, month, mday, hour, minute, sec = (
            _int(_dig(clock, key)) for key in ("year", "month", "mday", "hour", "min", "sec")
        )
        lines = (f"{year:04d}-{month:02d}-{mday:02d} {hour:02d}:{minute:02d}:{sec:02d}",)
    return ParsedResult(action=command.name, lines=lines, err_code=err_code, data=data)


def _scan(command: Command, data: dict[str, Any]) -> ParsedResult:
    scan = _dig(data, "netif", "get_scaninfo")
    err_code = _int(_dig(scan, "err_code"))
    if err_code != 0:
        lines = _err_code_lines(err_code)
    else:
        ap_list = _dig(scan, "ap_list")
        if not isinstance(ap_list, list):
            ap_list = []
        lines = tuple(str(_dig(ap, "ssid") or "") for ap in ap_list)
    return ParsedResult(action=command.name, lines=lines, err_code=err_code, data=data)


def _raw(command: Command, data: dict[str, Any]) -> ParsedResult:
    return ParsedResult(action=command.name, lines=(), data=data, pretty=True)


_SHAPES: dict[str, Callable[[Command, dict[str, Any]], ParsedResult]] = {
    "relay": _err_code_shape("system", "set_relay_state"),
    "led": _err_code_shape("system", "set_led_off"),
    "reboot": _err_code_shape("system", "reboot"),
    "status": _status,
    "time": _time,
    "scan": _scan,
    "raw": _raw,
}


def parse(command: Command, data: dict[str, Any]) -> ParsedResult:
    extract = _SHAPES.get(command.response, _raw)
    return extract(command, data if isinstance(data, dict) else {})
