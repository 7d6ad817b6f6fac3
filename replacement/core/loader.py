# replacement/core/loader.py

"""Loader for the default target and replacement values."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from replacement.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

REQUIRED_KEYS = ("target_value", "replacement_value")


def load_defaults(path: Union[str, Path]) -> Dict[str, Any]:
    """Reads and validates a defaults file.

    Args:
        path: Location of the YAML defaults file

    Returns:
        Mapping holding at least ``target_value`` and ``replacement_value``

    Raises:
        ConfigurationError: If file is missing, invalid, or incomplete.
    """
    config_path = Path(path)

    if not config_path.exists():
        error_msg = f"Defaults file not found: {config_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to parse {config_path.name}: {e}") from e
    except OSError as e:
        logger.error(f"Defaults loading failed: {e}", exc_info=True)
        raise ConfigurationError(f"Failed to read defaults: {e}") from e

    if not data:
        raise ConfigurationError("Defaults file is empty or invalid")

    if not isinstance(data, dict):
        raise ConfigurationError("Defaults file must contain a mapping")

    # Null is a legitimate target, so check presence rather than truthiness
    missing = [k for k in REQUIRED_KEYS if k not in data]
    if missing:
        error_msg = f"Missing required defaults: {missing}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    logger.info(
        "Defaults loaded successfully",
        extra={"config_path": str(config_path), "key_count": len(data)},
    )
    return data


class DefaultsLoader:
    """Singleton holder for the default target and replacement values.

    Loads the defaults file once and caches it for the application
    lifecycle. The cached mapping is never written after loading.
    """

    _instance: Optional["DefaultsLoader"] = None

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path else DEFAULTS_PATH
        self._config: Dict[str, Any] = load_defaults(self.path)

    @classmethod
    def get_instance(
        cls, path: Optional[Union[str, Path]] = None
    ) -> "DefaultsLoader":
        """Returns the singleton instance of DefaultsLoader.

        Args:
            path: Defaults file used on first load; bundled file if omitted
        """
        if cls._instance is None:
            cls._instance = cls(path)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the cached instance so the next access reloads the file."""
        cls._instance = None

    @property
    def target_value(self) -> Any:
        """Value replaced when a request does not name one."""
        return self._config["target_value"]

    @property
    def replacement_value(self) -> Any:
        """Value written when a request does not name one."""
        return self._config["replacement_value"]
