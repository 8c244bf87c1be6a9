"""The poll, format and publish loop."""
import time
from datetime import datetime
from typing import Callable, Dict, Optional

from .collectors.cpu_collector import CpuCollector
from .collectors.host_collector import HostCollector
from .collectors.memory_collector import MemoryCollector
from .collectors.network_collector import NetworkCollector, NetworkSample
from .collectors.power_collector import PowerCollector
from .config import Config
from .core.metric_result import MetricResult
from .utils import get_logger

log = get_logger("publisher")

FIELD_ORDER = ("hostname", "network", "cpu", "memory", "power", "timestamp")


def seconds_to_next_second(now: float) -> float:
    """Time left until the next whole-second boundary."""
    return float(int(now) + 1) - now


class StatusPublisher:
    """Samples every collector once per tick and hands the joined line to a sink.

    The previous network counters are the only state kept between ticks.
    All collectors degrade to inline error markers, so a tick never raises
    for a missing or unreadable source.
    """

    def __init__(self, config: Config, sink,
                 clock: Callable[[], float] = time.time,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize the publisher with its collectors."""
        self.config = config
        self.sink = sink
        self.clock = clock
        self.sleep = sleep
        self.host = HostCollector(config)
        self.network = NetworkCollector(config)
        self.cpu = CpuCollector(config)
        self.memory = MemoryCollector(config)
        self.power = PowerCollector(config)
        self.network_state = NetworkSample()
        self.last_results: Dict[str, MetricResult] = {}

    def collect(self, now: Optional[datetime] = None) -> Dict[str, MetricResult]:
        """Sample all fields in display order."""
        hostname = MetricResult(self.host.hostname())
        network, self.network_state = self.network.sample(self.network_state)
        return {
            "hostname": hostname,
            "network": network,
            "cpu": self.cpu.sample(),
            "memory": self.memory.sample(),
            "power": self.power.sample(),
            "timestamp": MetricResult(self.host.timestamp(now)),
        }

    def compose(self, results: Dict[str, MetricResult]) -> str:
        return self.config.signs.field_separator.join(results[name].text for name in FIELD_ORDER)

    def tick(self, now: Optional[datetime] = None) -> str:
        """Run one poll-format-publish cycle and return the published line."""
        results = self.collect(now)
        line = self.compose(results)
        self._log_transitions(results)
        self.last_results = results
        self.sink.publish(line, results)
        return line

    def run(self, max_ticks: Optional[int] = None):
        """Publish until interrupted, or max_ticks times.

        Sleeps to the start of the next second instead of a flat second so
        the clock field does not drift.
        """
        ticks = 0
        log.info("publisher_started", interfaces=self.config.interfaces, cores=self.config.cores)
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.sleep(seconds_to_next_second(self.clock()))

    def _log_transitions(self, results: Dict[str, MetricResult]):
        """Log when a field starts or stops failing, not on every tick."""
        for name, result in results.items():
            before = self.last_results.get(name)
            was_ok = before is None or before.ok
            if was_ok and not result.ok:
                log.warning("metric_degraded", metric=name, kind=result.error.value)
            elif not was_ok and result.ok:
                log.info("metric_recovered", metric=name)
