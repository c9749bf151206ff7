from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from loguru import logger

from deployment_info import __version__
from deployment_info.infrastructure.loader import DeploymentInfoLoader
from deployment_info.infrastructure.logging import init_logging
from deployment_info.infrastructure.settings import DeploymentInfoSettings, load_settings

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_KEY_NOT_FOUND = 2

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deployment-info",
        description="Inspect the deployment info JSON written by a deployment pipeline.",
    )
    parser.add_argument("--file", help="Path to the deployment info JSON file.")
    parser.add_argument("--version-key", help="Dotted key holding the app version.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Loguru level for stderr.",
    )
    parser.add_argument("--log-dir", help="Also write rotating log files here.")
    parser.add_argument("-V", "--tool-version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("status", help="Print load status, error and value count (default).")
    g = sub.add_parser("get", help="Print the value at a dotted key.")
    g.add_argument("key")
    sub.add_parser("version", help="Print the value at the version key.")
    sub.add_parser("dump", help="Print the full deployment info tree.")
    return parser


def _resolve_settings(args: argparse.Namespace) -> DeploymentInfoSettings:
    settings = load_settings()
    return DeploymentInfoSettings(
        json_file_path=Path(args.file) if args.file else settings.json_file_path,
        version_key=args.version_key or settings.version_key,
    )


def _emit(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def run_command(loader: DeploymentInfoLoader, cmd: str | None, key: str | None = None) -> int:
    """Run one query against an already-built loader and return the exit code."""
    if cmd in (None, "status"):
        _emit(loader.result.summary())
        return EXIT_OK if loader.result.ok else EXIT_LOAD_FAILED

    if not loader.result.ok:
        _emit(loader.result.summary())
        return EXIT_LOAD_FAILED

    if cmd == "get":
        if not loader.has_key(key or ""):
            logger.warning("Key not found: {}", key)
            return EXIT_KEY_NOT_FOUND
        _emit(loader.get_deployment_info_value_by_key(key))
        return EXIT_OK

    if cmd == "version":
        _emit(loader.get_version())
        return EXIT_OK

    if cmd == "dump":
        _emit(loader.get_deployment_info())
        return EXIT_OK

    raise ValueError(f"Unknown command: {cmd}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    init_logging(args.log_dir, level=args.log_level)
    settings = _resolve_settings(args)
    logger.debug("Using {} (version key {})", settings.json_file_path, settings.version_key)

    loader = DeploymentInfoLoader(settings.json_file_path, settings.version_key)
    return run_command(loader, args.cmd, getattr(args, "key", None))


if __name__ == "__main__":
    raise SystemExit(main())
