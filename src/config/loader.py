import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.config.models import ConsoleConfig

logger = logging.getLogger(__name__)

API_URL_ENV = "TINYLINK_API_URL"
SETTINGS_PATH_ENV = "TINYLINK_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = "settings.yaml"


class ConfigError(ValueError):
    """Raised when the settings file cannot be parsed or validated."""


def _extract_yaml(content: str) -> str:
    # Accept settings pasted inside a ```yaml fence.
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConsoleConfig:
    """
    Load console settings.

    Resolution: explicit path, else $TINYLINK_SETTINGS_PATH, else
    ./settings.yaml. A missing file yields defaults. $TINYLINK_API_URL
    overrides api.base_url.
    Raises ConfigError if the file is invalid.
    """
    env = os.environ if environ is None else environ
    if path is None:
        path = Path(env.get(SETTINGS_PATH_ENV, DEFAULT_SETTINGS_PATH))

    data: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            content = f.read()
        try:
            loaded = yaml.safe_load(_extract_yaml(content))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in settings file: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError("Settings file must contain a mapping")
        data = loaded or {}
    else:
        logger.info(f"Settings file {path} not found, using defaults")

    api_url = env.get(API_URL_ENV)
    if api_url:
        data = {**data, "api": {**(data.get("api") or {}), "base_url": api_url}}

    try:
        return ConsoleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Settings validation failed:\n{e}") from e
