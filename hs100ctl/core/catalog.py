"""Static catalog of plug actions and their JSON request templates."""

from __future__ import annotations

from hs100ctl.core.errors import UnknownActionError
from hs100ctl.core.model import Command

# further commands: https://github.com/softScheck/tplink-smartplug/blob/master/tplink-smarthome-commands.txt
_ENTRIES = (
    ("on", '{"system":{"set_relay_state":{"state":1}}}', "relay", "Turn the relay on"),
    ("off", '{"system":{"set_relay_state":{"state":0}}}', "relay", "Turn the relay off"),
    ("info", '{"system":{"get_sysinfo":{}}}', "raw", "Show full system information"),
    ("status", '{"system":{"get_sysinfo":{}}}', "status", "Show relay state"),
    ("wifiscan", '{"netif":{"get_scaninfo":{"refresh":1}}}', "scan", "List visible access points"),
    ("getaction", '{"schedule":{"get_next_action":null}}', "raw", "Show the next scheduled action"),
    ("getrules", '{"schedule":{"get_rules":null}}', "raw", "Show schedule rules"),
    ("getaway", '{"anti_theft":{"get_rules":null}}', "raw", "Show away-mode rules"),
    ("reboot", '{"system":{"reboot":{"delay":1}}}', "reboot", "Reboot the plug"),
    ("ledon", '{"system":{"set_led_off":{"off":0}}}', "led", "Turn the status LED on"),
    ("ledoff", '{"system":{"set_led_off":{"off":1}}}', "led", "Turn the status LED off"),
    ("cloudinfo", '{"cnCloud":{"get_info":{}}}', "raw", "Show cloud connection info"),
    ("gettime", '{"time":{"get_time":{}}}', "time", "Show the plug clock"),
)

COMMANDS: dict[str, Command] = {
    name: Command(name=name, request=request, response=response, description=description)
    for name, request, response, description in _ENTRIES
}


def action_names() -> tuple[str, ...]:
    return tuple(COMMANDS)


def lookup(action: str) -> Command:
    command = COMMANDS.get(action.strip().lower())
    if command is None:
        allowed = ", ".join(COMMANDS)
        raise UnknownActionError(f"Invalid action '{action}'. Allowed: {allowed}")
    return command
