"""Tests for the xsetroot and console sinks."""

import io
import subprocess
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from dwmstatus.core.metric_result import ErrorKind, Level, MetricResult
from dwmstatus.sinks import ConsoleSink, XSetRootSink

pytestmark = pytest.mark.unit


def test_xsetroot_receives_line_as_single_argument():
    with patch("dwmstatus.sinks.subprocess.run") as run:
        run.return_value = MagicMock(returncode=0)
        XSetRootSink(["xsetroot", "-name"]).publish("host | CPU 50")
    assert run.call_args.args[0] == ["xsetroot", "-name", "host | CPU 50"]
    assert run.call_args.kwargs["check"] is False


def test_xsetroot_missing_binary_is_ignored():
    with patch("dwmstatus.sinks.subprocess.run", side_effect=FileNotFoundError("xsetroot")):
        XSetRootSink(["xsetroot", "-name"]).publish("line")


def test_xsetroot_failure_exit_is_ignored():
    with patch("dwmstatus.sinks.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(["xsetroot"], 1)
        XSetRootSink(["xsetroot", "-name"]).publish("line")
    run.assert_called_once()


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200), buffer


def test_console_prints_plain_line():
    console, buffer = make_console()
    ConsoleSink(console).publish("host | [CPU] 50")
    assert buffer.getvalue() == "host | [CPU] 50\n"


def test_console_styles_by_level():
    console, buffer = make_console()
    sink = ConsoleSink(console)
    results = {
        "hostname": MetricResult("host"),
        "cpu": MetricResult("CPU 80", level=Level.WARN),
        "memory": MetricResult.failed("MEMERR", ErrorKind.UNREADABLE),
    }
    text = sink._styled("host | CPU 80 | MEMERR", results)
    assert text.plain == "host | CPU 80 | MEMERR"
    styles = {str(span.style) for span in text.spans}
    assert styles == {"yellow", "bold red"}

    sink.publish("host | CPU 80 | MEMERR", results)
    assert buffer.getvalue() == "host | CPU 80 | MEMERR\n"
