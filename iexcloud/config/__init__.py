"""Locate and read iexcloud YAML settings."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent
DEFAULT_NAME = "iexcloud"


def get_config_path(name: str = DEFAULT_NAME) -> Path:
    """Default location of a settings file: ``iexcloud/config/<name>.yaml``."""
    return CONFIG_DIR / f"{name}.yaml"


def load_config(name: str = DEFAULT_NAME, path: Path | None = None) -> dict[str, Any]:
    """Read client settings as a plain mapping.

    An explicit ``path`` (the CLI's ``--config``) wins; otherwise the file is
    looked up next to this module by ``name``. The packaged
    ``<name>.sample.yaml`` is a template only and is never read implicitly.
    An empty file yields ``{}`` so ``IexCloudConfig.from_yaml`` reports the
    missing token.

    Raises:
        FileNotFoundError: No settings file at the resolved location
        yaml.YAMLError: The file is not valid YAML
    """
    config_path = path or get_config_path(name)
    if not config_path.is_file():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Start from {CONFIG_DIR / f'{name}.sample.yaml'} and set your API token."
        )

    return yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
