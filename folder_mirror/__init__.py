"""Folder mirror modules."""

from folder_mirror.config_loader import Config, ConfigError, build_config, validate_folders
from folder_mirror.logging_setup import get_logger, setup_logging
from folder_mirror.replica_snapshot import ReplicaSnapshot
from folder_mirror.sync_logic import CycleReport, SyncAction, SyncEngine

__all__ = [
    "Config",
    "ConfigError",
    "build_config",
    "validate_folders",
    "setup_logging",
    "get_logger",
    "ReplicaSnapshot",
    "CycleReport",
    "SyncAction",
    "SyncEngine",
]
