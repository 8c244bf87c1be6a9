"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from dwmstatus import main as main_module

pytestmark = pytest.mark.unit


def write_config(tmp_path, fake_system):
    path = tmp_path / "config.yaml"
    path.write_text(
        "cores: 1\n"
        "paths:\n"
        f"  proc_root: {fake_system.proc}\n"
        f"  power_supply_root: {fake_system.power}\n"
        f"  hostname_path: {fake_system.hostname_path}\n"
    )
    return path


def test_once_stdout_prints_one_line(tmp_path, fake_system, capsys):
    fake_system.write_hostname("box")
    path = write_config(tmp_path, fake_system)

    assert main_module.main(["--config", str(path), "--stdout", "--once"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("box | RX ERR TX ERR | CPUERR | MEMERR | BATERR | ")
    assert out.count("\n") == 1


def test_once_calls_xsetroot(tmp_path, fake_system):
    path = write_config(tmp_path, fake_system)
    with patch("dwmstatus.sinks.subprocess.run") as run:
        assert main_module.main(["--config", str(path), "--once"]) == 0
    command = run.call_args.args[0]
    assert command[:2] == ["xsetroot", "-name"]
    assert "CPUERR" in command[2]


def test_missing_config_exits_with_error(tmp_path):
    assert main_module.main(["--config", str(tmp_path / "nope.yaml"), "--once"]) == 1


def test_interrupt_exits_cleanly(tmp_path, fake_system):
    path = write_config(tmp_path, fake_system)
    with patch.object(main_module.StatusPublisher, "run", side_effect=KeyboardInterrupt):
        assert main_module.main(["--config", str(path), "--stdout"]) == 0


def test_log_level_error_keeps_stdout_to_the_line(tmp_path, fake_system, capsys):
    """Degraded metrics log warnings; at error level nothing but the line is printed."""
    path = write_config(tmp_path, fake_system)

    assert main_module.main(["--config", str(path), "--stdout", "--once", "--log-level", "error"]) == 0

    captured = capsys.readouterr()
    assert captured.out.count("\n") == 1
    assert captured.out.startswith(" | RX ERR TX ERR | CPUERR")
    assert captured.err == ""


def test_logs_are_written_to_stderr(tmp_path, fake_system, capsys):
    path = write_config(tmp_path, fake_system)

    assert main_module.main(["--config", str(path), "--stdout", "--once", "--log-level", "debug"]) == 0

    captured = capsys.readouterr()
    assert captured.out.count("\n") == 1
    assert "metric_unavailable" in captured.err
    assert "config_loaded" in captured.err
