"""Fixed-width byte-rate formatting for the network field."""
from ..config.signs_config import SignsConfig

KIB = 1024
MIB = 1024 * 1024
RATE_CEILING = 1000 * MIB  # 1000 MiB/s no longer fits the field


def format_rate(label: str, rate: int, signs: SignsConfig) -> str:
    """Render rate (bytes per tick) behind label with a fitting unit suffix.

    Values keep a constant width so the bar does not jitter:
    "RX500B/s", "RX 2.0KiB/s", "RX10.5MiB/s".
    """
    if rate < 0:
        return label + " ERR"
    if rate >= RATE_CEILING:
        return label + "ERR"

    speed = float(rate)
    suffix = signs.bps
    if rate >= 1000 * KIB:
        speed /= MIB
        suffix = signs.mibps
    elif rate >= 1000:
        speed /= KIB
        suffix = signs.kibps

    if speed >= 100:
        number = f"{speed:3.0f}"
    elif speed >= 10:
        number = f"{speed:4.1f}"
    else:
        number = f" {speed:3.1f}"
    return label + number.replace(".", signs.float_separator, 1) + suffix
