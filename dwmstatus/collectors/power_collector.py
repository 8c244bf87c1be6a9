"""Battery and AC status collector reading /sys/class/power_supply."""
import os
from dataclasses import dataclass
from typing import Sequence

from ..config import Config
from ..core.metric_result import ErrorKind, Level, MetricResult
from ..core.value_store import ValueStore
from ..utils import get_logger

log = get_logger("power")

BATTERY_PREFIX = "BAT"

# sysfs names the same quantity differently depending on the hardware
UEVENT_FULL = ("POWER_SUPPLY_ENERGY_FULL", "POWER_SUPPLY_CHARGE_FULL")
UEVENT_NOW = ("POWER_SUPPLY_ENERGY_NOW", "POWER_SUPPLY_CHARGE_NOW")
UEVENT_CURRENT = ("POWER_SUPPLY_CURRENT_NOW", "POWER_SUPPLY_POWER_NOW")
FILE_FULL = ("energy_full", "charge_full")
FILE_NOW = ("energy_now", "charge_now")
FILE_CURRENT = ("current_now", "power_now")


@dataclass
class BatteryAggregate:
    """Energy figures summed over every battery found."""
    energy_full: int = 0
    energy_now: int = 0
    current_now: int = 0

    def add(self, full: int, now: int, current: int):
        self.energy_full += full
        self.energy_now += now
        self.current_now += current


class PowerCollector:
    """Reports charge percentage, plug state and estimated time remaining."""

    def __init__(self, config: Config):
        """Initialize the power collector."""
        self.config = config
        self.root = config.paths.power_supply_root

    def sample(self) -> MetricResult:
        """Aggregate all batteries into one status field."""
        signs = self.config.signs
        error_text = signs.unplugged + "ERR"
        try:
            with open(self.config.paths.ac_online, 'r') as f:
                plugged = f.read().strip() == "1"
            entries = sorted(os.listdir(self.root))
        except OSError as e:
            log.debug("metric_unavailable", path=self.root, error=str(e))
            return MetricResult.failed(error_text, ErrorKind.UNREADABLE)
        except UnicodeDecodeError:
            log.debug("metric_malformed", path=self.config.paths.ac_online, error="undecodable bytes")
            return MetricResult.failed(error_text, ErrorKind.MALFORMED)

        aggregate = BatteryAggregate()
        for name in entries:
            if name.startswith(BATTERY_PREFIX):
                self._read_battery(os.path.join(self.root, name), aggregate)

        if aggregate.energy_full == 0:
            log.debug("metric_invalid", path=self.root, batteries=entries)
            return MetricResult.failed(error_text, ErrorKind.INVALID)

        percent = aggregate.energy_now * 100 // aggregate.energy_full
        icon = signs.plugged if plugged else signs.unplugged
        remaining = ""
        if not plugged and aggregate.current_now != 0:
            remaining = " " + format_remaining(aggregate.energy_now, aggregate.current_now)

        return MetricResult(f"{icon} {percent:3d}{remaining}", level=self._level(percent, plugged))

    def _level(self, percent: int, plugged: bool) -> Level:
        """Urgency of the charge level; the rendered text does not change."""
        thresholds = self.config.thresholds
        if plugged:
            return Level.OK
        if percent <= thresholds.battery_critical:
            return Level.ERROR
        if percent <= thresholds.battery_low:
            return Level.WARN
        return Level.OK

    def _read_battery(self, path: str, aggregate: BatteryAggregate):
        """Add one battery, preferring uevent keys over the discrete files.

        The fallback is per quantity: a uevent lacking the energy keys still
        lets energy_full and friends be read.
        """
        store = ValueStore.parse(os.path.join(path, "uevent"))
        aggregate.add(*(
            read_quantity(store, path, keys, files)
            for keys, files in (
                (UEVENT_FULL, FILE_FULL),
                (UEVENT_NOW, FILE_NOW),
                (UEVENT_CURRENT, FILE_CURRENT),
            )
        ))


def read_quantity(store: ValueStore, path: str, keys: Sequence[str], files: Sequence[str]) -> int:
    """Value of the first uevent key present, else of the first discrete file."""
    if any(key in store for key in keys):
        return store.search_int(keys)
    return read_first_int(path, files)


def read_first_int(path: str, names: Sequence[str]) -> int:
    """Integer in the first readable file of names under path, else 0."""
    for name in names:
        try:
            with open(os.path.join(path, name), 'r') as f:
                content = f.read()
        except OSError:
            continue
        except UnicodeDecodeError:
            return 0
        try:
            return int(content.strip())
        except ValueError:
            return 0
    return 0


def format_remaining(energy_now: int, current_now: int) -> str:
    """Time left at the present draw as "[H:MM]"."""
    # some drivers report the discharge current as a negative number
    minutes = int(energy_now / abs(current_now) * 60)
    hours, minutes = divmod(minutes, 60)
    return f"[{hours}:{minutes:02d}]"
