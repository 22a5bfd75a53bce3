"""Command-line entry point for KubeDeck."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from kubedeck import __version__
from kubedeck.constants.defaults import LOG_FILE_DEFAULT
from kubedeck.controllers.commands.validation import is_valid_k8s_name
from kubedeck.models.state.app_settings import AppSettings, ConfigError
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubedeck",
        description="Watch Deployments, their pods, Helm releases, Secrets and ConfigMaps.",
    )
    parser.add_argument("context", help="kubectl context to use")
    parser.add_argument("namespace", help="Namespace of the deployments")
    parser.add_argument(
        "deployments", nargs="+", metavar="deployment", help="Deployments to monitor"
    )
    parser.add_argument(
        "--refresh-interval",
        type=float,
        default=None,
        help="Seconds between refreshes (default: stored setting or 1.0)",
    )
    parser.add_argument(
        "--log-file", default=LOG_FILE_DEFAULT, help="Where to write application logs"
    )
    parser.add_argument("--config", default=None, help="Settings file to read")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store the effective settings for the next launch",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_settings(args: argparse.Namespace, stored: AppSettings) -> AppSettings:
    """Overlay command-line values on stored settings.

    Raises:
        ValidationError: The resulting settings are invalid.
    """
    overrides: dict[str, object] = {
        "context": args.context,
        "namespace": args.namespace,
        "targets": list(args.deployments),
    }
    if args.refresh_interval is not None:
        overrides["refresh_interval"] = args.refresh_interval
    return AppSettings.model_validate({**stored.model_dump(), **overrides})


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    invalid = [name for name in args.deployments if not is_valid_k8s_name(name)]
    if invalid:
        parser.error(f"invalid deployment name(s): {', '.join(invalid)}")

    setup_logging(args.log_file)
    manager = ConfigManager(args.config)
    try:
        stored = manager.load()
    except ConfigError as e:
        logger.warning("%s; using defaults", e)
        stored = AppSettings()

    try:
        settings = build_settings(args, stored)
    except ValidationError as e:
        parser.error(str(e))

    if args.save_settings:
        try:
            manager.save(settings)
        except ConfigError as e:
            logger.error("%s", e)

    from kubedeck.app import KubeDeckApp

    logger.info(
        "Starting KubeDeck for %s in %s/%s",
        ", ".join(settings.targets),
        settings.context,
        settings.namespace,
    )
    KubeDeckApp(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
