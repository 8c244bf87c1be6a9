"""Threshold configuration data structure."""
from dataclasses import dataclass


@dataclass
class ThresholdConfig:
    """Severity breakpoints for the percentage-style metrics."""
    cpu_warn: int = 70
    cpu_error: int = 100
    memory_warn: int = 70
    memory_error: int = 100
    battery_low: int = 10
    battery_critical: int = 5

    def __post_init__(self):
        """Fix invalid values."""
        if self.cpu_warn <= 0:
            self.cpu_warn = 70
        if self.cpu_error < self.cpu_warn:
            self.cpu_error = max(100, self.cpu_warn)
        if self.memory_warn <= 0 or self.memory_warn > 100:
            self.memory_warn = 70
        if self.memory_error < self.memory_warn or self.memory_error > 100:
            self.memory_error = 100
        if self.battery_low < 0 or self.battery_low > 100:
            self.battery_low = 10
        if self.battery_critical < 0 or self.battery_critical > self.battery_low:
            self.battery_critical = min(5, self.battery_low)
