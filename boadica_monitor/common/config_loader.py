"""
Configuration Loader

Loads YAML configuration for the monitor: own-store name patterns,
monitored product URLs, and run settings (delay, timeout, user agent).
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIG_DIR_ENV = "BOADICA_CONFIG_DIR"
MONITOR_CONFIG_FILE = "boadica.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "base_url": "https://boadica.com.br",
    "delay": 2.0,
    "timeout": 10,
    "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        override_dir = Path(override)
        if override_dir.exists():
            return override_dir
        raise FileNotFoundError(f"Config directory from {CONFIG_DIR_ENV} not found: {override_dir}")

    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str, config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'boadica.yaml')
        config_dir: Directory to read from (default: discovered config dir)

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    base_dir = Path(config_dir) if config_dir is not None else _get_config_dir()
    config_path = base_dir / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _string_list(config: Dict[str, Any], key: str) -> List[str]:
    value = config.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return [str(item).strip() for item in value if str(item).strip()]


def load_own_stores(config_dir: Optional[Path] = None) -> List[str]:
    """
    Load the operator's own store name patterns.

    Patterns are matched case-insensitively as substrings of store names.

    Returns:
        List of patterns

    Example:
        ['TI e CIA Centro', 'TI e CIA Itaipu']
    """
    config = load_config(MONITOR_CONFIG_FILE, config_dir)
    return _string_list(config, 'own_stores')


def load_monitored_products(config_dir: Optional[Path] = None) -> List[str]:
    """
    Load product page URLs to monitor.

    Example:
        ['https://boadica.com.br/produtos/p144528', ...]
    """
    config = load_config(MONITOR_CONFIG_FILE, config_dir)
    return _string_list(config, 'products')


def load_monitor_settings(config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load run settings, with defaults for anything the file leaves out.

    Returns:
        Dictionary with base_url, delay, timeout and user_agent
    """
    config = load_config(MONITOR_CONFIG_FILE, config_dir)
    settings = dict(DEFAULT_SETTINGS)
    settings.update(config.get('settings') or {})
    return settings
