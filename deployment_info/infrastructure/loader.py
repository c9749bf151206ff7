"""Deployment info loader for pipeline-generated JSON files.

The deployment script writes a JSON file of variables related to the
deployment (typically GitLab CI/CD vars such as `CI_COMMIT_SHA`). This module
reads it, counts its leaf values and serves dotted-key lookups over it.

Failures never raise out of the loader. Callers branch on `get_status()` and
read `get_error()` instead.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from deployment_info.core.models import (
    DeploymentTree,
    LoadErrorKind,
    LoadResult,
    LoadStatus,
)
from deployment_info.core.tree import count_leaves, has_path, is_container, resolve

JSON_EXTENSION = "json"


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which Python accepts but JSON does not."""
    raise ValueError(f"Invalid JSON constant: {name}")


class DeploymentInfoLoader:
    """Load a deployment info JSON file and expose its values.

    One instance is meant to be built at startup and passed to whatever needs
    it. Not thread-safe; concurrent `reset` calls must be serialized by the
    caller.
    """

    def __init__(self, json_path: str | Path, version_key: str) -> None:
        self._version_key = ""
        self._json_path: Path | None = None
        self._result = LoadResult(status=LoadStatus.ERROR)
        self.set_version_key(version_key)
        self.reset(json_path)

    # ----- loading -----

    @staticmethod
    def is_json_path_valid(json_path: str | Path) -> bool:
        """True iff `json_path` exists and its extension is exactly `.json`."""
        path = Path(json_path)
        # Text after the last dot, so a file named ".json" still qualifies
        _, dot, extension = path.name.rpartition(".")
        if not dot or extension != JSON_EXTENSION:
            return False
        try:
            return path.exists()
        except OSError:
            return False

    def reset(self, json_path: str | Path) -> None:
        """Set the JSON file path, then load the deployment info from it.

        State is replaced as a whole: the new tree, status, error and total are
        published together once the attempt has finished.
        """
        logger.debug("Loading deployment info from {}", json_path)
        self._json_path = Path(json_path)
        self._result = self._load(self._json_path)

    def _load(self, path: Path) -> LoadResult:
        if not self.is_json_path_valid(path):
            return self._fail(LoadErrorKind.INVALID_PATH, path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw = f.read().strip()
        except (OSError, UnicodeDecodeError) as ex:
            # Unreadable content is treated like empty content
            logger.debug("Read failed for {}: {}", path, ex)
            return self._fail(LoadErrorKind.INVALID_JSON, path)

        try:
            tree = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as ex:
            logger.debug("JSON parse failed for {}: {}", path, ex)
            return self._fail(LoadErrorKind.INVALID_JSON, path)

        # A deployment tree is rooted in an object or array
        if not is_container(tree):
            return self._fail(LoadErrorKind.INVALID_JSON, path)

        total = count_leaves(tree)
        logger.info("Loaded deployment info from {} ({} values)", path, total)
        return LoadResult.success(tree, total)

    @staticmethod
    def _fail(kind: LoadErrorKind, path: Path) -> LoadResult:
        logger.warning("Deployment info load failed [{}]: {}", kind.name, path)
        return LoadResult.failure(kind)

    # ----- version key -----

    def set_version_key(self, version_key: str) -> None:
        """Set the dotted key that identifies the app version in the JSON file."""
        self._version_key = version_key

    @property
    def version_key(self) -> str:
        return self._version_key

    @property
    def json_path(self) -> Path | None:
        """Path passed to the most recent `reset`."""
        return self._json_path

    # ----- queries -----

    @property
    def result(self) -> LoadResult:
        return self._result

    def get_status(self) -> str:
        """Return `success` or `error` for the last load attempt."""
        return self._result.status.value

    def get_error(self) -> str:
        """Return the last load error message, empty after a successful load."""
        return self._result.error

    def get_total(self) -> int:
        """Return the number of leaf values loaded, 0 after a failed load."""
        return self._result.total

    def get_deployment_info(self) -> DeploymentTree:
        return self._result.tree

    def get_deployment_info_value_by_key(self, key: str, default: Any = None) -> Any:
        """Return the value at dotted `key`, or `default` if it does not resolve.

        With the default `default`, a missing key and a key holding JSON null
        both give None. Pass a sentinel or use `has_key` to tell them apart.
        """
        return resolve(self._result.tree, key, default)

    def has_key(self, key: str) -> bool:
        return has_path(self._result.tree, key)

    def get_version(self) -> Any:
        """Return the value at the version key; None when it does not resolve."""
        return self.get_deployment_info_value_by_key(self._version_key)
