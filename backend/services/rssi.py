"""Signal strength telemetry and distance estimation."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

WIRELESS_PROC_PATH = "/proc/net/wireless"

# Log-distance path loss model. An exponent of 3.5 assumes an indoor
# environment with walls; RSSI_AT_1M is the typical reading at 1 metre.
PATH_LOSS_EXPONENT = 3.5
REFERENCE_DISTANCE = 1.0
RSSI_AT_1M = -35.0

MIN_DISTANCE = 0.1
MAX_DISTANCE = 200.0


def calculate_distance_from_rssi(rssi: int) -> float:
    """Estimate distance in metres from an RSSI reading in dBm."""
    distance = REFERENCE_DISTANCE * 10.0 ** ((RSSI_AT_1M - rssi) / (10.0 * PATH_LOSS_EXPONENT))
    logger.info("[rssi] RSSI: %d dBm, calculated distance (before clamp): %.2f m", rssi, distance)

    clamped = max(MIN_DISTANCE, min(distance, MAX_DISTANCE))
    if distance > MAX_DISTANCE:
        logger.warning(
            "[rssi] Distance calculated as %.2fm, clamped to %.0fm. Signal very weak.",
            distance,
            MAX_DISTANCE,
        )
    return clamped


def get_station_rssi(path: str | Path = WIRELESS_PROC_PATH) -> int | None:
    """
    Signal level (dBm) of the first wireless interface in /proc/net/wireless.

    Returns None when the file is absent or lists no interface.
    """
    try:
        lines = Path(path).read_text().splitlines()
    except OSError as exc:
        logger.warning("[rssi] Cannot read %s: %s", path, exc)
        return None

    # Two header lines, then "iface: status link level noise ..."
    for line in lines[2:]:
        name, sep, rest = line.partition(":")
        fields = rest.split()
        if not sep or len(fields) < 3:
            continue
        try:
            level = int(float(fields[2].rstrip(".")))
        except ValueError:
            logger.warning("[rssi] Unparseable level %r for %s", fields[2], name.strip())
            continue
        logger.info("[rssi] Station RSSI on %s: %d dBm", name.strip(), level)
        return level

    logger.warning("[rssi] No connected stations in %s", path)
    return None
