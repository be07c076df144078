"""
Configuration manager for dead reckoning engines.
"""

import copy
import json
import logging
import os
from typing import Dict, Any

from .math.constants import (
    INTERPOLATION_WINDOW_S,
    ACCELERATION_DECAY_INTERVAL_S,
    CIRCULAR_MOTION_THRESHOLD_RAD_S,
)

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager for the dead reckoning engines."""

    DEFAULT_CONFIG = {
        # Blend and decay windows
        "interpolation_window_s": INTERPOLATION_WINDOW_S,
        "acceleration_decay_interval_s": ACCELERATION_DECAY_INTERVAL_S,
        "use_acceleration_decay": True,

        # Non-uniform motion model
        "circular_motion_threshold_rad_s": CIRCULAR_MOTION_THRESHOLD_RAD_S,

        # Logging
        "log_level": "INFO"
    }

    def __init__(self, config_file: str = None):
        """
        Initialize configuration.

        Args:
            config_file: Optional path to a JSON configuration file
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file is None:
            return

        if os.path.exists(config_file):
            self.load_config()
        else:
            logger.info(f"Config file {config_file} not found, using defaults")

    def load_config(self) -> bool:
        """
        Load configuration from file.

        Returns:
            True if loaded successfully
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config from {self.config_file}: {e}")
            return False

        # Merge with defaults (file config overrides defaults)
        self._merge_config(self.config, file_config)

        logger.info(f"Configuration loaded from {self.config_file}")
        return True

    def save_config(self, config_file: str = None) -> bool:
        """
        Save current configuration to file.

        Args:
            config_file: Destination path (defaults to the loaded file)

        Returns:
            True if saved successfully
        """
        path = config_file or self.config_file
        if path is None:
            logger.warning("No config file path given, nothing saved")
            return False

        try:
            with open(path, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            logger.warning(f"Failed to save config to {path}: {e}")
            return False

        logger.info(f"Configuration saved to {path}")
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default=None):
        """Get configuration value with optional default."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set configuration value."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def configure_logging(self):
        """Apply log_level to the root logger."""
        logging.basicConfig(
            level=getattr(logging, str(self.log_level).upper(), logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s"
        )

    # Property accessors for common configuration values
    @property
    def interpolation_window_s(self) -> float:
        return float(self.config["interpolation_window_s"])

    @property
    def acceleration_decay_interval_s(self) -> float:
        return float(self.config["acceleration_decay_interval_s"])

    @property
    def use_acceleration_decay(self) -> bool:
        return bool(self.config["use_acceleration_decay"])

    @property
    def circular_motion_threshold_rad_s(self) -> float:
        return float(self.config["circular_motion_threshold_rad_s"])

    @property
    def log_level(self) -> str:
        return self.config["log_level"]
