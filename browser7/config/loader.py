"""Configuration file loading for YAML and JSON formats."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Union

import structlog
import yaml

from ..core.config import ClientConfig, PollingPolicy
from ..core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class ConfigLoader:
    """Load client configuration from YAML/JSON files."""

    @staticmethod
    def load_config(
        config_path: Union[str, Path], config_type: Optional[str] = None
    ) -> dict[str, Any]:
        """Load configuration from file.

        Args:
            config_path: Path to configuration file
            config_type: Optional type override ('yaml', 'json')

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config format is unsupported or malformed
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_type:
            file_type = config_type.lower()
        else:
            file_type = config_path.suffix.lower().lstrip(".")

        if file_type in ("yaml", "yml"):
            return ConfigLoader._load_yaml(config_path)
        elif file_type == "json":
            return ConfigLoader._load_json(config_path)
        else:
            raise ValueError(f"Unsupported config format: {file_type}")

    @staticmethod
    def _load_yaml(config_path: Path) -> dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
                logger.info("Loaded YAML config", path=str(config_path), keys=list(config.keys()))
                return config
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    @staticmethod
    def _load_json(config_path: Path) -> dict[str, Any]:
        """Load JSON configuration file."""
        try:
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
                logger.info("Loaded JSON config", path=str(config_path), keys=list(config.keys()))
                return config
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    @staticmethod
    def create_client_config(
        config_dict: dict[str, Any], base_config: Optional[ClientConfig] = None
    ) -> ClientConfig:
        """Create ClientConfig from the ``client`` section of a dictionary.

        Values in the file override ``base_config``; without a base config
        the API key falls back to the ``BROWSER7_API_KEY`` environment
        variable.

        Args:
            config_dict: Configuration dictionary
            base_config: Base config to extend

        Returns:
            ClientConfig instance
        """
        client_settings = dict(config_dict.get("client") or {})
        polling_settings = client_settings.pop("polling", None) or {}

        unknown = set(client_settings) - set(ClientConfig.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown client settings: {', '.join(sorted(unknown))}")

        if base_config is not None:
            base_dict = asdict(base_config)
            base_polling = base_dict.pop("polling")
        else:
            base_dict = {}
            base_polling = asdict(PollingPolicy())

        polling = PollingPolicy(**{**base_polling, **polling_settings})
        merged = {**base_dict, **client_settings, "polling": polling}

        logger.debug(
            "Created client config",
            settings=list(client_settings.keys()),
            polling=list(polling_settings.keys()),
        )
        if base_config is None:
            return ClientConfig.from_env(**merged)
        return ClientConfig(**merged)

    @staticmethod
    def save_example_config(output_path: Union[str, Path], format: str = "yaml") -> None:
        """Save an example configuration file.

        Args:
            output_path: Path to save example config
            format: Format to save ('yaml' or 'json')
        """
        output_path = Path(output_path)

        # API key left out on purpose, set BROWSER7_API_KEY instead
        example_config = {
            "client": {
                "base_url": "https://api.browser7.com/v1",
                "request_timeout": 30.0,
                "polling": {
                    "initial_delay": 2.0,
                    "default_interval": 1.0,
                    "max_attempts": 60,
                },
            }
        }

        if format.lower() == "yaml":
            with open(output_path, "w", encoding="utf-8") as f:
                yaml.dump(example_config, f, default_flow_style=False, sort_keys=False, indent=2)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(example_config, f, indent=2, sort_keys=True)
        else:
            raise ValueError(f"Unsupported format: {format}")

        logger.info("Saved example config", path=str(output_path), format=format)


def load_config_from_file(
    config_path: Union[str, Path], base_config: Optional[ClientConfig] = None
) -> ClientConfig:
    """Convenience function to load a ClientConfig from file.

    Args:
        config_path: Path to configuration file
        base_config: Base config to extend

    Returns:
        ClientConfig instance
    """
    config_dict = ConfigLoader.load_config(config_path)
    return ConfigLoader.create_client_config(config_dict, base_config)
