"""Main configuration data structure."""
from dataclasses import dataclass, field
from typing import List

import psutil

from .paths_config import SourcePaths
from .signs_config import SignsConfig
from .threshold_config import ThresholdConfig


def _default_interfaces() -> List[str]:
    return ["enp0s25", "wlp4s0"]


@dataclass
class Config:
    """Main configuration class."""
    interfaces: List[str] = field(default_factory=_default_interfaces)
    cores: int = 0
    time_format: str = "%a %d {sep} %H:%M:%S"
    publish_command: List[str] = field(default_factory=lambda: ["xsetroot", "-name"])
    signs: SignsConfig = field(default_factory=SignsConfig)
    paths: SourcePaths = field(default_factory=SourcePaths)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self):
        """Fix invalid values."""
        # /proc/net/dev writes the name with a trailing colon
        self.interfaces = [name.rstrip(":") for name in self.interfaces if name.rstrip(":")]
        if self.cores <= 0:
            self.cores = psutil.cpu_count() or 1
        if not self.publish_command:
            self.publish_command = ["xsetroot", "-name"]

    @property
    def clock_format(self) -> str:
        """strftime pattern with the date separator filled in."""
        return self.time_format.replace("{sep}", self.signs.date_separator)
