"""Configuration loading and management."""
from typing import Any, Dict, Optional

import yaml

from ..utils import get_logger
from .config import Config
from .paths_config import SourcePaths
from .signs_config import SignsConfig
from .threshold_config import ThresholdConfig

log = get_logger("config")


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Config:
        """Load configuration from a YAML file - let it crash if bad.

        Without a path the built-in defaults are used. Sections missing
        from the file keep their defaults; unknown keys raise TypeError.
        """
        if config_path is None:
            log.info("config_defaults")
            return Config()

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ValueError(f"{config_path}: top level must be a mapping")

        config = ConfigManager.from_dict(config_data)
        log.info("config_loaded", path=config_path, interfaces=config.interfaces, cores=config.cores)
        return config

    @staticmethod
    def from_dict(config_data: Dict[str, Any]) -> Config:
        """Build a Config from already-parsed YAML data."""
        data = dict(config_data)

        signs = SignsConfig(**(data.pop('signs', None) or {}))
        paths = SourcePaths(**(data.pop('paths', None) or {}))
        thresholds = ThresholdConfig(**(data.pop('thresholds', None) or {}))

        return Config(signs=signs, paths=paths, thresholds=thresholds, **data)
