"""Memory usage collector reading /proc/meminfo."""
from ..config import Config
from ..core.metric_result import ErrorKind, MetricResult, level_for
from ..utils import get_logger

log = get_logger("memory")

REQUIRED_FIELDS = ("MemTotal:", "MemFree:", "Buffers:", "Cached:")


class MemoryCollector:
    """Reports memory held by applications as a share of the total."""

    def __init__(self, config: Config):
        """Initialize the memory collector."""
        self.config = config

    def sample(self) -> MetricResult:
        """Used percentage, where used excludes free, buffers and page cache."""
        sign = self.config.signs.mem
        path = self.config.paths.meminfo
        found = {}
        try:
            with open(path, 'r') as f:
                for line in f:
                    if len(found) == len(REQUIRED_FIELDS):
                        break
                    parts = line.split()
                    try:
                        key, value = parts[0], int(parts[1])
                    except (IndexError, ValueError):
                        log.debug("metric_malformed", path=path, line=line.rstrip())
                        return MetricResult.failed(sign + "ERR", ErrorKind.MALFORMED)
                    if key in REQUIRED_FIELDS:
                        found[key] = value
        except OSError as e:
            log.debug("metric_unavailable", path=path, error=str(e))
            return MetricResult.failed(sign + "ERR", ErrorKind.UNREADABLE)
        except UnicodeDecodeError:
            log.debug("metric_malformed", path=path, error="undecodable bytes")
            return MetricResult.failed(sign + "ERR", ErrorKind.MALFORMED)

        total = found.get("MemTotal:", 0)
        if total <= 0:
            log.debug("metric_invalid", path=path, total=total)
            return MetricResult.failed(sign + "ERR", ErrorKind.INVALID)

        used = total - found.get("MemFree:", 0) - found.get("Buffers:", 0) - found.get("Cached:", 0)
        percent = used * 100 // total
        thresholds = self.config.thresholds
        return MetricResult(
            f"{sign}{percent:3d}",
            level=level_for(percent, thresholds.memory_warn, thresholds.memory_error),
        )
