from pathlib import Path
import json
import logging
import os
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    'prefix': '? ',
    'active_color': 'green',
    'help_color': 'bright_black',
    'marker': '‣',
}

# environment overrides, checked last
ENV_VARS = {
    'prefix': 'SINGLESELECT_PREFIX',
    'active_color': 'SINGLESELECT_ACTIVE_COLOR',
    'help_color': 'SINGLESELECT_HELP_COLOR',
    'marker': 'SINGLESELECT_MARKER',
}


def _get_config_dir() -> Path:
    """Return the directory path where the prompt config file lives.

    The config is kept under the user's home folder in a folder named
    `.singleselect`.
    """
    return Path.home() / '.singleselect'


def get_config_file() -> Path:
    """Return the full path to the config file."""
    return _get_config_dir() / 'config.json'


def load_config_file() -> Dict[str, Any]:
    """Load the config file and return its known keys, or {} if unavailable.

    A missing, unreadable or malformed file is ignored so a broken config
    never prevents the prompt from showing.
    """
    path = get_config_file()
    if not path.exists():
        return {}
    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", path)
        return {}
    return {k: v for k, v in data.items() if k in DEFAULT_CONFIG and isinstance(v, str)}


def load_prompt_config() -> Dict[str, Any]:
    """Return the ambient prompt settings.

    Built-in defaults, then the config file, then SINGLESELECT_* env vars.
    """
    config = dict(DEFAULT_CONFIG)
    config.update(load_config_file())
    for key, var in ENV_VARS.items():
        value = os.environ.get(var)
        if value:
            config[key] = value
    return config
