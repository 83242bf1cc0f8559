"""Configuration loader for the mirror service."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from folder_mirror.logging_setup import get_logger

logger = get_logger()

CONFIG_ENV_VAR = "FOLDER_MIRROR_CONFIG"

# Settings a YAML file may provide; roots and interval come from the command line
OPTIONAL_KEYS = ("log_level", "log_backup_count", "bootstrap", "chunk_size")


class ConfigError(Exception):
    """Raised when config validation fails."""

    pass


class Config:
    """Configuration object for the mirror service."""

    def __init__(self, config_dict: Dict[str, Any]):
        """Initialize config from dictionary."""
        self._config = config_dict
        self._validate()

    def _validate(self) -> None:
        """Validate required configuration fields."""
        for key in ("source_root", "target_root"):
            if key not in self._config:
                raise ConfigError(f"Missing required config key: {key}")
            if not isinstance(self._config[key], str):
                raise ConfigError(f"Config key '{key}' must be a string")

        if "interval_ms" not in self._config:
            raise ConfigError("Missing required config key: interval_ms")
        interval = self._config["interval_ms"]
        try:
            interval = int(interval)
        except (TypeError, ValueError):
            raise ConfigError(f"Sync interval must be an integer, got {interval!r}") from None
        if interval <= 0:
            raise ConfigError(f"Sync interval must be a positive number of ms, got {interval}")
        self._config["interval_ms"] = interval

        level = self.log_level
        if not isinstance(level, str) or level.upper() not in (
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ):
            raise ConfigError(f"Unknown log level: {level!r}")

        # bool is a subclass of int, so "chunk_size: true" must be rejected explicitly
        chunk_size = self.chunk_size
        if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
            raise ConfigError("chunk_size must be a positive integer")

        backup_count = self.log_backup_count
        if (
            not isinstance(backup_count, int)
            or isinstance(backup_count, bool)
            or backup_count < 0
        ):
            raise ConfigError("log_backup_count must be a non-negative integer")

        if not isinstance(self._config.get("bootstrap", True), bool):
            raise ConfigError("bootstrap must be true or false")

    @property
    def source_root(self) -> str:
        """Get absolute source root path."""
        return os.path.abspath(self._config["source_root"])

    @property
    def target_root(self) -> str:
        """Get absolute target root path."""
        return os.path.abspath(self._config["target_root"])

    @property
    def interval_ms(self) -> int:
        """Get sync interval in milliseconds."""
        return self._config["interval_ms"]

    @property
    def interval_seconds(self) -> float:
        """Get sync interval in seconds."""
        return self.interval_ms / 1000

    @property
    def log_file(self) -> Optional[str]:
        """Get absolute log file path, if any."""
        log_file = self._config.get("log_file")
        return os.path.abspath(log_file) if log_file else None

    @property
    def log_level(self) -> str:
        """Get log level."""
        return self._config.get("log_level", "DEBUG")

    @property
    def log_backup_count(self) -> int:
        """Get number of daily log files to keep."""
        return self._config.get("log_backup_count", 7)

    @property
    def bootstrap(self) -> bool:
        """Whether to seed the snapshot from the target tree on startup."""
        return self._config.get("bootstrap", True)

    @property
    def chunk_size(self) -> int:
        """Get read chunk size for fingerprinting."""
        return self._config.get("chunk_size", 64 * 1024)

    def to_dict(self) -> Dict[str, Any]:
        """Return config as dictionary."""
        return self._config.copy()


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load optional settings from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dict of recognised settings

    Raises:
        ConfigError: If config file doesn't exist, is not valid YAML or is not a mapping
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    unknown = sorted(set(data) - set(OPTIONAL_KEYS))
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    return {key: data[key] for key in OPTIONAL_KEYS if key in data}


def build_config(
    source_root: str,
    target_root: str,
    interval_ms: Any,
    log_file: Optional[str] = None,
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Config:
    """Build a Config from command line values and an optional YAML file.

    Command line overrides take precedence over file settings.

    Args:
        source_root: Source directory
        target_root: Target directory
        interval_ms: Sync interval in milliseconds
        log_file: Log file path
        config_path: Optional YAML file with extra settings
        overrides: Extra settings given on the command line

    Returns:
        Config object
    """
    config_dict: Dict[str, Any] = {}
    if config_path:
        config_dict.update(load_config_file(config_path))
    config_dict.update({k: v for k, v in (overrides or {}).items() if v is not None})
    config_dict.update(
        {
            "source_root": source_root,
            "target_root": target_root,
            "interval_ms": interval_ms,
            "log_file": log_file,
        }
    )
    return Config(config_dict)


def config_path_from_env(env_var: str = CONFIG_ENV_VAR) -> Optional[str]:
    """Get config file path from environment variable, if set."""
    return os.getenv(env_var) or None


def validate_folders(source_root: str, target_root: str) -> None:
    """Check that both folders exist and are not the same directory.

    Args:
        source_root: Source directory
        target_root: Target directory

    Raises:
        ConfigError: If a folder is missing, both resolve to the same path,
            or one folder lies inside the other
    """
    for root in (source_root, target_root):
        if not Path(root).is_dir():
            raise ConfigError(f"The specified directory doesn't exist ['{root}']")

    source = Path(source_root).resolve()
    target = Path(target_root).resolve()
    if source == target:
        raise ConfigError("Folders are identical! Check the specified folders.")

    # A nested target would be walked as part of the source and copied into itself
    if target.is_relative_to(source):
        raise ConfigError(f"Target folder {target} is inside source folder {source}")
    if source.is_relative_to(target):
        raise ConfigError(f"Source folder {source} is inside target folder {target}")

    logger.debug("Valid folders, source and target are different.")
