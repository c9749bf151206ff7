"""Settings access helpers for locating the deployment info file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

JSON_FILE_PATH_ENV = "DEPLOYMENT_INFO_JSON_FILE_PATH"
VERSION_KEY_ENV = "DEPLOYMENT_INFO_VERSION_KEY"

DEFAULT_JSON_FILE_NAME = "deployment-info.json"
# GitLab CI variable holding the release tag
DEFAULT_VERSION_KEY = "CI_COMMIT_TAG"


@dataclass(frozen=True)
class DeploymentInfoSettings:
    """Where the deployment info file lives and which key holds the version."""

    json_file_path: Path
    version_key: str = DEFAULT_VERSION_KEY


def load_settings(
    env: Mapping[str, str] | None = None,
    base_dir: str | Path | None = None,
) -> DeploymentInfoSettings:
    """Resolve settings from environment variables.

    Args:
        env: Variables to read (defaults to `os.environ`).
        base_dir: Directory that relative file paths are resolved against
            (defaults to the current working directory).
    """
    if env is None:
        env = os.environ
    root = Path(base_dir) if base_dir is not None else Path.cwd()

    raw_path = env.get(JSON_FILE_PATH_ENV) or DEFAULT_JSON_FILE_NAME
    json_path = Path(raw_path).expanduser()
    if not json_path.is_absolute():
        json_path = root / json_path

    version_key = env.get(VERSION_KEY_ENV) or DEFAULT_VERSION_KEY
    return DeploymentInfoSettings(json_file_path=json_path, version_key=version_key)
