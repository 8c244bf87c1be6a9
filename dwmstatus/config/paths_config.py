"""Locations of the pseudo-files the collectors read."""
import os
from dataclasses import dataclass


@dataclass
class SourcePaths:
    """Roots of the kernel-exposed files, overridable for fabricated trees."""
    proc_root: str = "/proc"
    power_supply_root: str = "/sys/class/power_supply"
    hostname_path: str = "/etc/hostname"

    @property
    def net_dev(self) -> str:
        return os.path.join(self.proc_root, "net", "dev")

    @property
    def loadavg(self) -> str:
        return os.path.join(self.proc_root, "loadavg")

    @property
    def meminfo(self) -> str:
        return os.path.join(self.proc_root, "meminfo")

    @property
    def ac_online(self) -> str:
        return os.path.join(self.power_supply_root, "AC", "online")
