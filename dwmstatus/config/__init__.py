"""Configuration data structures and loading."""
from .config import Config
from .config_manager import ConfigManager
from .paths_config import SourcePaths
from .signs_config import SignsConfig
from .threshold_config import ThresholdConfig

__all__ = ["Config", "ConfigManager", "SourcePaths", "SignsConfig", "ThresholdConfig"]
