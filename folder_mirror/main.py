"""Main entry point for the folder mirror."""

import argparse
import sys
import threading
from typing import List, Optional

from folder_mirror.bootstrap import TargetBootstrapper
from folder_mirror.config_loader import (
    Config,
    ConfigError,
    build_config,
    config_path_from_env,
    validate_folders,
)
from folder_mirror.logging_setup import get_logger, setup_logging
from folder_mirror.replica_snapshot import ReplicaSnapshot
from folder_mirror.scanner import Scanner
from folder_mirror.sync_logic import CycleReport, SyncEngine

logger = get_logger()

USAGE_LINES = (
    "Wrong arguments!",
    "arg1 & arg2: The two arguments are 'origin directory' and 'target directory'",
    "arg3: Third argument is the sync time in milliseconds.",
    "arg4: File location to save logs",
    "example: folder-mirror /data/source /data/replica 1000 /var/log/mirror.log",
)


class SyncRunner:
    """Orchestrates the periodic mirror loop."""

    def __init__(self, config: Config, snapshot: Optional[ReplicaSnapshot] = None):
        """Initialize sync runner.

        Args:
            config: Validated configuration
            snapshot: Snapshot to use; a fresh empty one by default
        """
        self.config = config
        self.snapshot = snapshot if snapshot is not None else ReplicaSnapshot()
        self.scanner = Scanner()
        self.engine = SyncEngine(
            config.source_root,
            config.target_root,
            self.snapshot,
            scanner=self.scanner,
            chunk_size=config.chunk_size,
        )
        self._stop_event = threading.Event()

    def bootstrap(self) -> int:
        """Seed the snapshot from the target tree, if enabled.

        Returns:
            Number of entries added
        """
        if not self.config.bootstrap:
            logger.info("Bootstrap disabled, starting with an empty snapshot")
            return 0
        bootstrapper = TargetBootstrapper(
            self.snapshot, scanner=self.scanner, chunk_size=self.config.chunk_size
        )
        try:
            return bootstrapper.bootstrap(self.config.target_root)
        except OSError as e:
            logger.error(f"Bootstrap failed, starting with an empty snapshot: {e}")
            return 0

    def run_once(self) -> Optional[CycleReport]:
        """Execute one sync cycle.

        Returns:
            The cycle report, or None if the cycle failed as a whole
        """
        logger.info("-----------BEGIN----------")
        logger.info("Starting Sync Folders")
        try:
            return self.engine.run_cycle()
        except Exception as e:
            logger.exception(f"Sync cycle failed: {e}")
            return None
        finally:
            logger.info("-----------END----------")

    def run(self, max_cycles: Optional[int] = None) -> int:
        """Run cycles until stopped.

        Args:
            max_cycles: Stop after this many cycles (None = until stop())

        Returns:
            Number of cycles executed
        """
        cycles = 0
        while not self._stop_event.is_set():
            self.run_once()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            logger.debug(f"Waiting {self.config.interval_seconds} seconds")
            self._stop_event.wait(self.config.interval_seconds)
        return cycles

    def stop(self) -> None:
        """Ask the loop to stop after the current cycle."""
        self._stop_event.set()


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="folder-mirror",
        description="Folder Mirror - one-way periodic folder synchronization",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="ARG",
        help="SOURCE TARGET INTERVAL_MS LOG_FILE",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML file with extra settings",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--no-bootstrap",
        action="store_true",
        help="Do not fingerprint existing target files on startup",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single sync cycle and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for configuration errors, 130 if interrupted)
    """
    setup_logging()
    args = build_parser().parse_args(argv)

    if len(args.arguments) != 4:
        for line in USAGE_LINES:
            logger.info(line)
        return 0

    source, target, interval, log_file = args.arguments
    overrides = {"log_level": args.log_level}
    if args.no_bootstrap:
        overrides["bootstrap"] = False

    try:
        config = build_config(
            source,
            target,
            interval,
            log_file=log_file,
            config_path=args.config or config_path_from_env(),
            overrides=overrides,
        )
        try:
            setup_logging(config.log_file, config.log_level, config.log_backup_count)
        except OSError as e:
            setup_logging(None, config.log_level)
            logger.warning(
                f"Could not open log file {config.log_file}, logging to console only: {e}"
            )

        logger.debug(f"Source Dir {config.source_root}")
        logger.debug(f"Target Dir {config.target_root}")
        logger.debug(f"SyncInterval {config.interval_ms}")
        logger.debug(f"Log File {config.log_file}")

        validate_folders(config.source_root, config.target_root)
    except ConfigError as e:
        logger.error(f"Config error: {e}")
        return 1

    runner = SyncRunner(config)
    try:
        runner.bootstrap()
        runner.run(max_cycles=1 if args.once else None)
    except KeyboardInterrupt:
        logger.info("Sync interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
