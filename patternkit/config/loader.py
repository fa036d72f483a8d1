"""Configuration loading from files and environment variables."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from patternkit.config.utils.env_expansion import expand_env_vars
from patternkit.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERNKIT_"
CONFIG_FILE_ENV = "PATTERNKIT_CONFIG"
# Variables under the prefix that are not configuration overrides
_RESERVED_ENV_NAMES = {"CONFIG", "WORKDIR"}


class ConfigurationLoader:
    """
    Loads raw configuration data.

    Sources, lowest precedence first:
    - configuration file (JSON or YAML, picked by extension)
    - PATTERNKIT_<SECTION>__<FIELD> environment variables

    String values have $VAR, ${VAR} and ${VAR:default} expanded.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration data from a JSON or YAML file.

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )

        logger.debug("Loaded configuration from %s", config_file)
        return data

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given file, the PATTERNKIT_CONFIG file, or nothing."""
        config_file = config_file or self._environ.get(CONFIG_FILE_ENV)
        data = self.load_from_file(config_file) if config_file else {}
        data = self.apply_environment_overrides(data)
        return expand_env_vars(data, self._environ)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply PATTERNKIT_* environment variables on top of configuration data.

        PATTERNKIT_LOGGING__LEVEL=DEBUG sets config_data["logging"]["level"].
        """
        result = _deep_copy(config_data)
        for name, value in sorted(self._environ.items()):
            if not name.startswith(ENV_PREFIX):
                continue
            key = name[len(ENV_PREFIX):]
            if not key or key in _RESERVED_ENV_NAMES:
                continue

            path = [part.lower() for part in key.split("__") if part]
            if not path:
                continue
            target = result
            for part in path[:-1]:
                existing = target.get(part)
                if not isinstance(existing, dict):
                    existing = {}
                    target[part] = existing
                target = existing
            target[path[-1]] = value
            logger.debug("Applied environment override %s", name)
        return result


def _deep_copy(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: _deep_copy(value) if isinstance(value, dict) else value
        for key, value in data.items()
    }
