"""Configuration management for Minecraft Data Extractor."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional
import yaml
import structlog

from mcdata_extractor import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"


@dataclass
class DataConfig:
    """Game-data source configuration."""
    version: str = "1.21.8"
    edition: str = "pc"


@dataclass
class OutputConfig:
    """Output file configuration."""
    directory: str = "minecraft_data_output"
    indent: int = 2


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = False
    log_level: str = "INFO"
    data: DataConfig = field(default_factory=DataConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


class ConfigManager:
    """Manages application configuration from YAML files and environment variables."""

    def __init__(self, config_path: Optional[Path] = None, logger: Optional[structlog.BoundLogger] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file
            logger: Structured logger instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.logger = logger or structlog.get_logger(__name__)
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config = self._load_config()

    def _load_config(self) -> AppConfig:
        """Load configuration from file and environment variables.

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If configuration cannot be loaded or is invalid
        """
        try:
            config_data = {}

            if self.config_path.exists():
                self.logger.debug("Loading configuration", config_path=str(self.config_path))
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    config_data = yaml.safe_load(f) or {}
            else:
                self.logger.warning("Configuration file not found, using defaults",
                                    config_path=str(self.config_path))

            if not isinstance(config_data, dict):
                raise ConfigurationError("configuration root must be a mapping")

            config_data = self._apply_env_overrides(config_data)

            app_section = config_data.get("app", {}) or {}
            config = AppConfig(
                debug=bool(app_section.get("debug", False)),
                log_level=str(app_section.get("log_level", "INFO")),
                data=DataConfig(
                    **{k: v for k, v in (config_data.get("data", {}) or {}).items()
                       if k in ['version', 'edition']}
                ),
                output=OutputConfig(
                    **{k: v for k, v in (config_data.get("output", {}) or {}).items()
                       if k in ['directory', 'indent']}
                )
            )

            self._validate_config(config)

            self.logger.debug("Configuration loaded successfully",
                              version=config.data.version,
                              output_dir=config.output.directory)

            return config

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration.

        Args:
            config_data: Base configuration data

        Returns:
            Configuration with environment overrides applied
        """
        env_mappings = {
            "MCDATA_VERSION": ["data", "version"],
            "MCDATA_EDITION": ["data", "edition"],
            "MCDATA_OUTPUT_DIR": ["output", "directory"],
            "MCDATA_LOG_LEVEL": ["app", "log_level"],
            "MCDATA_DEBUG": ["app", "debug"]
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})

                final_key = config_path[-1]
                if final_key == "debug":
                    current[final_key] = env_value.lower() in ("true", "1", "yes")
                else:
                    current[final_key] = env_value

                self.logger.debug("Applied environment override",
                                  env_var=env_var, value=env_value, config_path=config_path)

        return config_data

    def _validate_config(self, config: AppConfig) -> None:
        """Validate configuration values.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not str(config.data.version).strip():
            raise ConfigurationError("data.version must not be empty")

        if config.data.edition not in ("pc", "bedrock"):
            raise ConfigurationError("data.edition must be 'pc' or 'bedrock'")

        if config.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log_level: {config.log_level}")

        if not str(config.output.directory).strip():
            raise ConfigurationError("output.directory must not be empty")

        if not isinstance(config.output.indent, int) or config.output.indent < 0:
            raise ConfigurationError("output.indent must be a non-negative integer")

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config
