"""Destinations for the composed status line."""
import subprocess
from typing import Dict, List, Optional

from rich.console import Console
from rich.text import Text

from .core.metric_result import Level, MetricResult
from .utils import get_logger

log = get_logger("sink")

LEVEL_STYLES = {
    Level.OK: "",
    Level.WARN: "yellow",
    Level.ERROR: "bold red",
}


class XSetRootSink:
    """Sets the X root window name, which dwm shows in its bar."""

    def __init__(self, command: List[str]):
        self.command = list(command)

    def publish(self, line: str, results: Optional[Dict[str, MetricResult]] = None):
        """Fire and forget; a failed invocation only shows up in the debug log."""
        try:
            completed = subprocess.run(
                self.command + [line],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            log.debug("publish_failed", command=self.command[0], error=str(e))
            return
        if completed.returncode != 0:
            log.debug("publish_failed", command=self.command[0], returncode=completed.returncode)


class ConsoleSink:
    """Prints each status line to the terminal, styled by metric severity."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def publish(self, line: str, results: Optional[Dict[str, MetricResult]] = None):
        if not results:
            self.console.print(line, markup=False, soft_wrap=True)
            return
        self.console.print(self._styled(line, results), soft_wrap=True)

    def _styled(self, line: str, results: Dict[str, MetricResult]) -> Text:
        """Colour the fields whose result is at WARN or ERROR level."""
        text = Text(line)
        cursor = 0
        for result in results.values():
            start = line.find(result.text, cursor)
            if start < 0:
                continue
            end = start + len(result.text)
            style = LEVEL_STYLES[result.level]
            if style:
                text.stylize(style, start, end)
            cursor = end
        return text
