"""Network throughput collector reading /proc/net/dev."""
from dataclasses import dataclass
from typing import Tuple

from ..config import Config
from ..core.metric_result import ErrorKind, MetricResult
from ..core.rate_formatter import format_rate
from ..utils import get_logger

log = get_logger("network")

RX_COLUMN = 0  # counters after the interface name
TX_COLUMN = 8


@dataclass(frozen=True)
class NetworkSample:
    """Cumulative byte counters summed over the watched interfaces."""
    rx_bytes: int = 0
    tx_bytes: int = 0


class NetworkCollector:
    """Derives receive/transmit rates from consecutive counter samples."""

    def __init__(self, config: Config):
        """Initialize the network collector."""
        self.config = config
        self.interfaces = frozenset(config.interfaces)

    def sample(self, previous: NetworkSample) -> Tuple[MetricResult, NetworkSample]:
        """Format the traffic since previous and return the new counters."""
        signs = self.config.signs
        try:
            current = self._read_counters()
        except OSError as e:
            log.debug("metric_unavailable", path=self.config.paths.net_dev, error=str(e))
            text = f"{signs.net_received} ERR {signs.net_transmitted} ERR"
            return MetricResult.failed(text, ErrorKind.UNREADABLE), previous
        except UnicodeDecodeError:
            log.debug("metric_malformed", path=self.config.paths.net_dev, error="undecodable bytes")
            text = f"{signs.net_received} ERR {signs.net_transmitted} ERR"
            return MetricResult.failed(text, ErrorKind.MALFORMED), previous

        # counters restart on interface reset; show that as no traffic
        rx_delta = max(current.rx_bytes - previous.rx_bytes, 0)
        tx_delta = max(current.tx_bytes - previous.tx_bytes, 0)
        text = (
            f"{format_rate(signs.net_received, rx_delta, signs)} "
            f"{format_rate(signs.net_transmitted, tx_delta, signs)}"
        )
        return MetricResult(text), current

    def _read_counters(self) -> NetworkSample:
        """Sum rx/tx bytes of the configured interfaces."""
        rx_total = tx_total = 0
        with open(self.config.paths.net_dev, 'r') as f:
            for line in f:
                name, sep, counters = line.partition(":")
                if not sep or name.strip() not in self.interfaces:
                    continue
                fields = counters.split()
                try:
                    rx, tx = int(fields[RX_COLUMN]), int(fields[TX_COLUMN])
                except (IndexError, ValueError):
                    log.debug("net_dev_row_skipped", interface=name.strip())
                    continue
                rx_total += rx
                tx_total += tx
        return NetworkSample(rx_total, tx_total)
