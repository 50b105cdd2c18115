"""
Configuration Loader.

Reads the optional YAML configuration file and validates its `gpio` section:

    gpio:
      helper: gpio-admin
      sysfs_root: /sys/devices/virtual/gpio
      cpuinfo_path: /proc/cpuinfo
      revision: 2          # skips detection when set
      export_mode: auto    # auto | off | force
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pi_gpio.errors import ValidationError
from pi_gpio.helper import DEFAULT_HELPER
from pi_gpio.models import ExportMode
from pi_gpio.revision import CPUINFO_PATH
from pi_gpio.sanitize import sanitize_export_mode
from pi_gpio.sysfs import SYSFS_ROOT

DEFAULT_SETTINGS: Dict[str, Any] = {
    "helper": DEFAULT_HELPER,
    "sysfs_root": SYSFS_ROOT,
    "cpuinfo_path": CPUINFO_PATH,
    "revision": None,
    "export_mode": ExportMode.AUTO,
}

_PATH_KEYS = ("helper", "sysfs_root", "cpuinfo_path")

logger = logging.getLogger(__name__)


def load_config(config_path: str | Path) -> Dict[str, Any]:
    """
    Loads the YAML configuration file.
    A missing file is not an error: an empty configuration is returned.
    """
    path = Path(config_path)
    if not path.is_file():
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return {}

    try:
        config = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse config file {path}: {e}")
        raise

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValidationError(f"{path}: expected a mapping at the top level")
    logger.info(f"Loaded configuration from {path}")
    return config


def gpio_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Returns the validated `gpio` section of `config`, defaults filled in.
    Unknown keys, a revision other than 1 or 2, non-string paths and an
    unknown export mode raise ValidationError.
    """
    section = (config or {}).get("gpio") or {}
    if not isinstance(section, dict):
        raise ValidationError("The 'gpio' section must be a mapping")

    unknown = sorted(str(key) for key in set(section) - set(DEFAULT_SETTINGS))
    if unknown:
        raise ValidationError(f"Unknown gpio setting(s): {', '.join(unknown)}")

    settings = {**DEFAULT_SETTINGS, **section}

    revision = settings["revision"]
    if revision is not None and (not isinstance(revision, int) or isinstance(revision, bool)
                                 or revision not in (1, 2)):
        raise ValidationError(f"gpio.revision must be 1 or 2, got {revision!r}")

    for key in _PATH_KEYS:
        if not isinstance(settings[key], str) or not settings[key]:
            raise ValidationError(f"gpio.{key} must be a non-empty string, got {settings[key]!r}")

    settings["export_mode"] = sanitize_export_mode(settings["export_mode"])
    return settings
