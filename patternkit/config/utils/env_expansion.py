"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict, Mapping, Optional

# $VAR, ${VAR} and ${VAR:default}
_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _expand_string(value: str, environ: Mapping[str, str]) -> str:
    def replace(match: "re.Match[str]") -> str:
        name = match.group("braced") or match.group("bare")
        if name in environ:
            return environ[name]
        default = match.group("default")
        if default is not None:
            return default
        # Unknown variables are left untouched
        return match.group(0)

    return _ENV_PATTERN.sub(replace, value)


def expand_env_vars(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Recursively expand environment variables in strings, dicts and lists.

    Non-string scalars are returned unchanged.
    """
    env = os.environ if environ is None else environ
    if isinstance(value, str):
        return _expand_string(value, env)
    if isinstance(value, dict):
        return {key: expand_env_vars(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item, env) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables in a whole configuration dictionary."""
    return expand_env_vars(config)
