"""CPU load collector reading /proc/loadavg."""
from ..config import Config
from ..core.metric_result import ErrorKind, MetricResult, level_for
from ..utils import get_logger

log = get_logger("cpu")


class CpuCollector:
    """Scales the one-minute load average by the core count."""

    def __init__(self, config: Config):
        """Initialize the cpu collector."""
        self.config = config

    def sample(self) -> MetricResult:
        """Load as a percentage of all cores; may exceed 100 under heavy load."""
        sign = self.config.signs.cpu
        try:
            with open(self.config.paths.loadavg, 'r') as f:
                load = float(f.read().split()[0])
        except OSError as e:
            log.debug("metric_unavailable", path=self.config.paths.loadavg, error=str(e))
            return MetricResult.failed(sign + "ERR", ErrorKind.UNREADABLE)
        except (IndexError, ValueError):
            log.debug("metric_malformed", path=self.config.paths.loadavg)
            return MetricResult.failed(sign + "ERR", ErrorKind.MALFORMED)

        percent = int(load * 100.0 / self.config.cores)
        thresholds = self.config.thresholds
        return MetricResult(
            f"{sign}{percent:3d}",
            level=level_for(percent, thresholds.cpu_warn, thresholds.cpu_error),
        )
