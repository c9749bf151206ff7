"""Core domain models for deployment info load results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Parsed JSON: nested dicts/lists with str/int/float/bool/None leaves
DeploymentTree = dict[str, Any] | list[Any]


class LoadStatus(str, Enum):
    """Outcome of the most recent load attempt."""

    SUCCESS = "success"
    ERROR = "error"


class LoadErrorKind(Enum):
    """Recoverable load failures and their user-facing messages."""

    INVALID_PATH = "Deployment info file does not exist or does not have a .json extension"
    INVALID_JSON = "Deployment info file does not contain valid JSON"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class LoadResult:
    """Snapshot of a single load attempt.

    Attributes:
        status: `success` or `error`.
        error: Human-readable message, empty on success.
        total: Number of leaf values in the tree, 0 on error.
        tree: Parsed deployment data, empty on error.
        error_kind: Which failure occurred, None on success.
    """

    status: LoadStatus
    error: str = ""
    total: int = 0
    tree: DeploymentTree = field(default_factory=dict)
    error_kind: LoadErrorKind | None = None

    @classmethod
    def success(cls, tree: DeploymentTree, total: int) -> LoadResult:
        return cls(status=LoadStatus.SUCCESS, total=total, tree=tree)

    @classmethod
    def failure(cls, kind: LoadErrorKind) -> LoadResult:
        return cls(status=LoadStatus.ERROR, error=kind.message, error_kind=kind)

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.SUCCESS

    def summary(self) -> dict[str, Any]:
        """Return status/error/total as a plain dict."""
        return {"status": self.status.value, "error": self.error, "total": self.total}
