from pathlib import Path

import pytest

from services.rssi import calculate_distance_from_rssi, get_station_rssi

WIRELESS_SAMPLE = """\
Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE
 face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22
 wlan0: 0000   54.  -56.  -256        0      0      0      0      0        0
"""


def test_distance_at_reference_rssi_is_one_metre() -> None:
    assert calculate_distance_from_rssi(-35) == pytest.approx(1.0)


def test_distance_grows_with_weaker_signal() -> None:
    assert calculate_distance_from_rssi(-70) == pytest.approx(10.0)
    assert calculate_distance_from_rssi(-60) < calculate_distance_from_rssi(-80)


def test_distance_is_clamped() -> None:
    assert calculate_distance_from_rssi(0) == 0.1
    assert calculate_distance_from_rssi(-127) == 200.0


def test_station_rssi_from_proc_file(tmp_path: Path) -> None:
    proc = tmp_path / "wireless"
    proc.write_text(WIRELESS_SAMPLE)
    assert get_station_rssi(proc) == -56


def test_station_rssi_none_without_interfaces(tmp_path: Path) -> None:
    proc = tmp_path / "wireless"
    proc.write_text("\n".join(WIRELESS_SAMPLE.splitlines()[:2]) + "\n")
    assert get_station_rssi(proc) is None
    assert get_station_rssi(tmp_path / "absent") is None
