import json
import logging
from typing import Any, Dict

from models.config import DEFAULT_MAX_DOCUMENTS, DEFAULT_TARGET_FIELDS, RunConfig
from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

BOOLEAN_OPTIONS = ("include_inline_styles", "include_css_classes", "extract_from_rich_text")
OPTIONAL_STRING_OPTIONS = ("document_type", "search", "custom_query")


class ConfigLoader:
    """Handles loading and validation of run configuration files."""

    @staticmethod
    def load_config(config_path: str) -> RunConfig:
        """
        Load and validate configuration from JSON file.

        Args:
            config_path: Path to configuration file

        Returns:
            Validated run configuration

        Raises:
            ConfigurationError: If the file is invalid JSON or validation fails
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            logger.info(f"Configuration loaded from {config_path}")
        except FileNotFoundError:
            logger.warning(f"Config file not found at {config_path}. Using default settings.")
            config = {}
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing config file: {e}")
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

        return RunConfig.from_dict(ConfigLoader.validate_config(config))

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and set default configuration values.

        Args:
            config: Configuration dictionary to validate

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a JSON object.")

        default_config = {
            "target_field_names": DEFAULT_TARGET_FIELDS,
            "include_inline_styles": True,
            "include_css_classes": True,
            "extract_from_rich_text": True,
            "max_documents": DEFAULT_MAX_DOCUMENTS,
            "document_type": None,
            "search": None,
            "custom_query": None,
            "output_format": ["json"],
            "output_dir": ".",
        }

        merged_config = default_config.copy()
        for key in default_config:
            if key in config:
                merged_config[key] = config[key]
            else:
                logger.warning(f"Missing '{key}' in config. Using default value.")

        for key in config:
            if key not in default_config:
                logger.warning(f"Unknown config option '{key}' ignored.")

        # Validate types
        fields = merged_config["target_field_names"]
        if not isinstance(fields, (str, list)) or \
                (isinstance(fields, list) and not all(isinstance(f, str) for f in fields)):
            raise ConfigurationError(
                "'target_field_names' should be a comma-separated string or a list of strings.")
        for key in BOOLEAN_OPTIONS:
            if not isinstance(merged_config[key], bool):
                raise ConfigurationError(f"'{key}' should be a boolean.")
        max_documents = merged_config["max_documents"]
        if isinstance(max_documents, bool) or not isinstance(max_documents, int) \
                or max_documents < 1:
            raise ConfigurationError("'max_documents' should be a positive integer.")
        for key in OPTIONAL_STRING_OPTIONS:
            if merged_config[key] is not None and not isinstance(merged_config[key], str):
                raise ConfigurationError(f"'{key}' should be a string.")
        if not isinstance(merged_config["output_format"], list):
            raise ConfigurationError("'output_format' should be a list.")
        if not isinstance(merged_config["output_dir"], str):
            raise ConfigurationError("'output_dir' should be a string.")

        return merged_config
