"""Main entry point for the dwmstatus status line."""
import argparse
import sys

import yaml

from .config import ConfigManager
from .publisher import StatusPublisher
from .sinks import ConsoleSink, XSetRootSink
from .utils import get_logger, setup_logging

log = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Status line for the dwm bar")
    parser.add_argument("--config", default=None, help="YAML file overriding the built-in defaults")
    parser.add_argument("--stdout", action="store_true", help="print lines instead of calling xsetroot")
    parser.add_argument("--once", action="store_true", help="publish a single line and exit")
    parser.add_argument("--log-level", default="warning")
    parser.add_argument("--log-format", choices=["console", "json"], default="console")
    return parser


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    # Load configuration - bad files stop us before the loop starts
    try:
        config = ConfigManager.load_config(args.config)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        log.error("config_invalid", path=args.config, error=str(e))
        return 1

    if args.stdout:
        sink = ConsoleSink()
    else:
        sink = XSetRootSink(config.publish_command)

    publisher = StatusPublisher(config, sink)
    try:
        publisher.run(max_ticks=1 if args.once else None)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
