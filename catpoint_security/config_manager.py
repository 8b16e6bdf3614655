"""Configuration management with JSON persistence and validation."""

import json
import os
from dataclasses import asdict
from typing import Optional, Dict, Any, Callable, List

from .config.defaults import DEFAULT_PATHS, DETECTOR_BACKENDS, LOG_LEVELS
from .logging_config import get_logger
from .models.config import SecurityConfig

logger = get_logger("config_manager")


class ConfigManager:
    """Manages system configuration with file persistence and change callbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_PATHS["config_file"]
        self._config: Optional[SecurityConfig] = None
        self._config_change_callbacks: List[Callable[[SecurityConfig], None]] = []

        self.load_config()

    def load_config(self) -> SecurityConfig:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    config_dict = json.load(f)
                self._config = SecurityConfig(**config_dict)
            except (json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Error loading config: {e}. Using defaults.")
                self._config = SecurityConfig()
        else:
            self._config = SecurityConfig()
            self.save_config()

        return self._config

    def save_config(self) -> None:
        """Save current configuration to file."""
        if self._config is None:
            return

        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.export_config(), f, indent=2)

    def get_config(self) -> SecurityConfig:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values. Unknown keys are ignored."""
        if self._config is None:
            self.load_config()

        for key, value in kwargs.items():
            if hasattr(self._config, key):
                setattr(self._config, key, value)
            else:
                logger.debug(f"Ignoring unknown config key: {key}")

        self.save_config()
        self._notify_callbacks()

    def validate_config(self) -> bool:
        """Validate current configuration."""
        if self._config is None:
            return False

        config = self._config

        if not isinstance(config.confidence_threshold, (int, float)):
            return False
        if not 0.0 <= config.confidence_threshold <= 1.0:
            return False

        if config.detector_backend not in DETECTOR_BACKENDS:
            return False

        if config.scale_factor <= 1.0 or config.min_neighbors < 0:
            return False

        if not config.database_path:
            return False

        if str(config.log_level).upper() not in LOG_LEVELS:
            return False

        return True

    def register_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        """Register a callback to be called when config changes."""
        if callback not in self._config_change_callbacks:
            self._config_change_callbacks.append(callback)

    def unregister_change_callback(self, callback: Callable[[SecurityConfig], None]) -> None:
        """Unregister a config change callback."""
        if callback in self._config_change_callbacks:
            self._config_change_callbacks.remove(callback)

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self._config = SecurityConfig()
        self.save_config()
        self._notify_callbacks()

    def export_config(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        if not self._config:
            return {}
        return asdict(self._config)

    def import_config(self, config_dict: Dict[str, Any]) -> bool:
        """
        Import configuration from a dictionary.

        Args:
            config_dict: Dictionary containing configuration values

        Returns:
            True if import was successful, False otherwise
        """
        try:
            temp_config = SecurityConfig(**config_dict)
        except (TypeError, ValueError) as e:
            logger.warning(f"Error importing config: {e}")
            return False

        old_config = self._config
        self._config = temp_config

        if not self.validate_config():
            self._config = old_config
            return False

        self.save_config()
        self._notify_callbacks()
        return True

    def _notify_callbacks(self) -> None:
        for callback in self._config_change_callbacks:
            try:
                callback(self._config)
            except Exception as e:
                logger.error(f"Error in config change callback: {e}")
