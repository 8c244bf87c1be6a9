"""Hostname and clock fields."""
from datetime import datetime
from typing import Optional

from ..config import Config


class HostCollector:
    """Supplies the hostname and local time strings."""

    def __init__(self, config: Config):
        self.config = config

    def hostname(self) -> str:
        """Trimmed contents of the hostname file, empty if it cannot be read."""
        try:
            with open(self.config.paths.hostname_path, 'r') as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError):
            return ""

    def timestamp(self, now: Optional[datetime] = None) -> str:
        if now is None:
            now = datetime.now()
        return now.strftime(self.config.clock_format)
