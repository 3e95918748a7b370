import json
import logging
import os
from pathlib import Path

from utilisation.models.config_data import RunConfig
from utilisation.models.decode_policy import DecodeErrorPolicy
from utilisation.models.ingestion_mode import IngestionMode

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "UTILISATION_CONFIG_FILE"

# Only present in a source checkout; installed copies run on built-in defaults
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "utilisation_config.json"


class ConfigLoader:
    """Loads run defaults from a JSON file."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = RunConfig()
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._get_default_config()
            self.load_config()
            self._initialized = True

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to utilisation_config.json, unless overridden by environment."""
        override = os.getenv(CONFIG_PATH_ENV)
        if override:
            return Path(override)
        return DEFAULT_CONFIG_PATH

    def load_config(self):
        """Load configuration from JSON file."""
        config_path = self.get_config_path()

        # Start from defaults so a bad file never leaves a half-built config
        self._config = self._get_default_config()

        if not config_path.exists():
            if os.getenv(CONFIG_PATH_ENV):
                logger.error(f"Configuration file not found: {config_path}")
            else:
                logger.info(f"No configuration file at {config_path}, using built-in defaults")
            return

        try:
            with open(config_path, 'r') as f:
                json_data = json.load(f)
            defaults = self._config
            self._config = RunConfig(
                in_file=str(json_data.get("in_file", defaults.in_file)),
                out_file=str(json_data.get("out_file", defaults.out_file)),
                trigger_level=float(json_data.get("trigger_level", defaults.trigger_level)),
                capacity=int(json_data.get("capacity", defaults.capacity)),
                max_token_length=int(json_data.get("max_token_length", defaults.max_token_length)),
                ingestion_mode=IngestionMode(json_data.get("ingestion_mode", defaults.ingestion_mode.value)),
                on_decode_error=DecodeErrorPolicy(json_data.get("on_decode_error", defaults.on_decode_error.value)),
                debug=bool(json_data.get("debug", defaults.debug)),
                dump_values=bool(json_data.get("dump_values", defaults.dump_values)),
            )
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse configuration file: {e}")
            self._config = self._get_default_config()

        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Invalid value in configuration file {config_path}: {e}")
            self._config = self._get_default_config()

    @staticmethod
    def _get_default_config() -> RunConfig:
        """Return default configuration."""
        return RunConfig(
            in_file="data.txt",
            out_file="results.txt",
            trigger_level=10.0,
            capacity=255,
            max_token_length=63,
            ingestion_mode=IngestionMode.REVERSED,
            on_decode_error=DecodeErrorPolicy.ABORT,
            debug=False,
            dump_values=False,
        )

    def get_config(self) -> RunConfig:
        """Get the loaded run defaults."""
        return self._config

    def reload_config(self):
        """Reload configuration from file."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()
