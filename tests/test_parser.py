from __future__ import annotations

from hs100ctl.core.catalog import lookup
from hs100ctl.core.parser import parse


def test_relay_success_and_error_code() -> None:
    ok = parse(lookup("on"), {"system": {"set_relay_state": {"err_code": 0}}})
    assert ok.lines == ("OK",)
    assert ok.err_code == 0

    failed = parse(lookup("off"), {"system": {"set_relay_state": {"err_code": -3}}})
    assert failed.lines == ("Error code: -3",)
    assert failed.err_code == -3


def test_led_uses_set_led_off_path() -> None:
    result = parse(lookup("ledoff"), {"system": {"set_led_off": {"err_code": 2}}})
    assert result.lines == ("Error code: 2",)


def test_status_reports_relay_state() -> None:
    on = parse(lookup("status"), {"system": {"get_sysinfo": {"relay_state": 1}}})
    off = parse(lookup("status"), {"system": {"get_sysinfo": {"relay_state": 0}}})
    assert on.lines == ("ON",)
    assert off.lines == ("OFF",)


def test_status_missing_field_defaults_to_off() -> None:
    assert parse(lookup("status"), {}).lines == ("OFF",)
    assert parse(lookup("status"), {"system": {"get_sysinfo": None}}).lines == ("OFF",)
    assert parse(lookup("status"), {"system": "garbage"}).lines == ("OFF",)


def test_non_finite_numbers_default_to_zero() -> None:
    status = parse(lookup("status"), {"system": {"get_sysinfo": {"relay_state": float("inf")}}})
    assert status.lines == ("OFF",)

    relay = parse(lookup("on"), {"system": {"set_relay_state": {"err_code": float("nan")}}})
    assert relay.lines == ("OK",)

    clock = parse(lookup("gettime"), {"time": {"get_time": {"year": float("-inf"), "month": 2}}})
    assert clock.lines == ("0000-02-00 00:00:00",)


def test_gettime_formats_timestamp() -> None:
    data = {
        "time": {
            "get_time": {
                "year": 2024,
                "month": 3,
                "mday": 7,
                "hour": 9,
                "min": 5,
                "sec": 2,
                "err_code": 0,
            }
        }
    }
    assert parse(lookup("gettime"), data).lines == ("2024-03-07 09:05:02",)


def test_gettime_error_and_defaults() -> None:
    failed = parse(lookup("gettime"), {"time": {"get_time": {"err_code": -1}}})
    assert failed.lines == ("Error code: -1",)

    empty = parse(lookup("gettime"), {"time": {"get_time": {"year": "bad"}}})
    assert empty.lines == ("0000-00-00 00:00:00",)


def test_wifiscan_lists_ssids() -> None:
    data = {
        "netif": {
            "get_scaninfo": {
                "ap_list": [{"ssid": "home", "key_type": 3}, {"ssid": "guest"}, {"key_type": 0}],
                "err_code": 0,
            }
        }
    }
    assert parse(lookup("wifiscan"), data).lines == ("home", "guest", "")


def test_wifiscan_error_code_replaces_list() -> None:
    data = {"netif": {"get_scaninfo": {"ap_list": [{"ssid": "home"}], "err_code": -2}}}
    assert parse(lookup("wifiscan"), data).lines == ("Error code: -2",)


def test_wifiscan_missing_list_is_empty() -> None:
    assert parse(lookup("wifiscan"), {"netif": {"get_scaninfo": {"ap_list": "x"}}}).lines == ()


def test_catalog_wide_actions_are_pretty_printed() -> None:
    data = {"schedule": {"get_rules": {"rule_list": [], "err_code": 0}}}
    for action in ("info", "cloudinfo", "getaction", "getrules", "getaway"):
        result = parse(lookup(action), data)
        assert result.pretty
        assert result.lines == ()
        assert result.data == data


def test_reboot_reads_err_code() -> None:
    assert parse(lookup("reboot"), {"system": {"reboot": {"err_code": 0}}}).lines == ("OK",)
