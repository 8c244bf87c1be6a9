"""Labels, units and separators used in the status line."""
from dataclasses import dataclass


@dataclass
class SignsConfig:
    """Icons and separators rendered into the status line."""
    bps: str = "B/s"
    kibps: str = "KiB/s"
    mibps: str = "MiB/s"
    unplugged: str = "BAT"
    plugged: str = "AC"
    cpu: str = "CPU"
    mem: str = "MEM"
    net_received: str = "RX"
    net_transmitted: str = "TX"
    float_separator: str = "."
    date_separator: str = "|"
    field_separator: str = " | "

    def __post_init__(self):
        """Fix invalid values."""
        if not self.float_separator:
            self.float_separator = "."
        if not self.field_separator:
            self.field_separator = " | "
