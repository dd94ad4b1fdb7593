"""
Main entry point for the log sync service.
"""
import argparse
import json
import sys
from typing import List, Optional

from loguru import logger

from .clients.s3_manager import S3Manager
from .exceptions import LogSyncError
from .models.config import DEFAULT_CONFIG_FILE, SyncConfig
from .services.sync_service import SyncService


def setup_logging(debug: bool = False, log_file: Optional[str] = None):
    """Configure logging for the log sync service."""
    # Remove default logger
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if debug else "INFO"
    )

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG"
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="log-sync",
        description="Upload today's log files to S3, skipping files already uploaded."
    )
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Config file location (default: {DEFAULT_CONFIG_FILE})"
    )
    return parser.parse_args(argv)


def run_sync(config: SyncConfig):
    """Build the S3 client and run one sync pass."""
    store = S3Manager(region=config.region, profile=config.credential_profile)
    sync_service = SyncService(config, store)
    report = sync_service.run()
    logger.debug(f"Sync Results: {json.dumps(report.to_dict(), indent=2, default=str)}")
    return report


def main(argv: Optional[List[str]] = None):
    """Main entry point. Exits 0 on success and 1 on any error."""
    args = parse_args(argv)

    # Stderr sink before the config is known, so load errors are reported
    setup_logging()

    try:
        config = SyncConfig.from_file(args.config)
        setup_logging(config.debug_enabled, config.log_file)
        logger.info(f"Loaded configuration from {args.config} - bucket: {config.remote_bucket}")

        run_sync(config)

    except KeyboardInterrupt:
        logger.warning("Received interrupt signal, stopping")
        sys.exit(130)
    except LogSyncError as e:
        logger.error(f"Log sync failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
