"""Shared fixtures - fabricated /proc and /sys trees under tmp_path.

Markers
-------
unit        fast, touches only tmp_path
"""

import textwrap
from pathlib import Path

import pytest
import structlog

from dwmstatus.config import Config, SourcePaths


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests on fabricated pseudo-files")


NET_DEV_HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast|"
    "bytes    packets errs drop fifo colls carrier compressed\n"
)


def net_dev_row(name: str, rx: int, tx: int) -> str:
    return f"{name:>6}: {rx} 10 0 0 0 0 0 0 {tx} 5 0 0 0 0 0 0\n"


class FakeSystem:
    """Writes pseudo-files under a temporary root."""

    def __init__(self, root: Path):
        self.root = root
        self.proc = root / "proc"
        self.power = root / "power_supply"
        self.hostname_path = root / "hostname"
        (self.proc / "net").mkdir(parents=True)
        self.power.mkdir()

    @property
    def paths(self) -> SourcePaths:
        return SourcePaths(
            proc_root=str(self.proc),
            power_supply_root=str(self.power),
            hostname_path=str(self.hostname_path),
        )

    def config(self, **overrides) -> Config:
        overrides.setdefault("interfaces", ["eth0", "wlan0"])
        overrides.setdefault("cores", 4)
        return Config(paths=self.paths, **overrides)

    def write_net_dev(self, rows):
        body = NET_DEV_HEADER + "".join(net_dev_row(*row) for row in rows)
        (self.proc / "net" / "dev").write_text(body)

    def write_loadavg(self, text: str):
        (self.proc / "loadavg").write_text(text)

    def write_meminfo(self, total, free, buffers, cached, extra=""):
        (self.proc / "meminfo").write_text(textwrap.dedent(f"""\
            MemTotal:       {total} kB
            MemFree:        {free} kB
            MemAvailable:   {free} kB
            Buffers:        {buffers} kB
            Cached:         {cached} kB
            """) + extra)

    def write_ac(self, online: bool):
        ac = self.power / "AC"
        ac.mkdir(exist_ok=True)
        (ac / "online").write_text("1\n" if online else "0\n")

    def write_uevent(self, name: str, values: dict):
        battery = self.power / name
        battery.mkdir(exist_ok=True)
        lines = [f"POWER_SUPPLY_NAME={name}"] + [f"{key}={value}" for key, value in values.items()]
        (battery / "uevent").write_text("\n".join(lines) + "\n")

    def write_battery_files(self, name: str, files: dict):
        battery = self.power / name
        battery.mkdir(exist_ok=True)
        for file_name, value in files.items():
            (battery / file_name).write_text(f"{value}\n")

    def write_hostname(self, name: str):
        self.hostname_path.write_text(name)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so later tests do not write to a closed capture stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_system(tmp_path) -> FakeSystem:
    return FakeSystem(tmp_path)


class RecordingSink:
    """Collects published lines instead of calling xsetroot."""

    def __init__(self):
        self.lines = []
        self.results = []

    def publish(self, line, results=None):
        self.lines.append(line)
        self.results.append(results)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
