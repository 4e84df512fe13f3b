"""
Settings Resolution

Builds the runtime settings from three layers, later layers overriding earlier ones:

1. DEFAULT_SETTINGS below
2. Optional YAML file (argument, or QUILL_CONFIG_PATH from the environment / .env)
3. Individual environment variables (see ENV_OVERRIDES)

Examples:
    >>> settings = load_settings()
    >>> settings["store"]["backend"]
    'memory'

    >>> settings = load_settings(Path("configs/settings.yaml"))
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

DEFAULT_SETTINGS = {
    "store": {
        "backend": "memory",
        "db_path": "outs/quill.db",
    },
    "logs": {
        "path": "outs/logs",
        "events_file": None,
    },
    "export": {
        "pdf_font": "Helvetica",
        "pdf_font_size": 10,
    },
}

# Environment variable -> dotted settings key
ENV_OVERRIDES = {
    "QUILL_STORE_BACKEND": "store.backend",
    "QUILL_DB_PATH": "store.db_path",
    "QUILL_LOGS_PATH": "logs.path",
    "RESUME_EVENTS_FILE": "logs.events_file",
}

STORE_BACKENDS = ("memory", "sqlite")


def load_settings(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings, merging defaults, an optional YAML file and env overrides.

    Args:
        config_path: Optional YAML settings file (defaults to QUILL_CONFIG_PATH env variable)

    Returns:
        Plain nested dict of settings

    Raises:
        FileNotFoundError: If an explicit or configured settings file does not exist
        ValueError: If store.backend is not a known backend
    """
    load_dotenv()

    settings = OmegaConf.create(DEFAULT_SETTINGS)

    if config_path is None and os.getenv("QUILL_CONFIG_PATH"):
        config_path = Path(os.getenv("QUILL_CONFIG_PATH"))

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")
        settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            OmegaConf.update(settings, key, value)

    resolved = OmegaConf.to_container(settings, resolve=True)

    backend = resolved["store"]["backend"]
    if backend not in STORE_BACKENDS:
        raise ValueError(f"Invalid store backend: {backend}. Must be one of {STORE_BACKENDS}")

    return resolved
