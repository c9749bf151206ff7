"""Load pipeline-generated deployment info JSON and query it by dotted key."""

from deployment_info.core.models import LoadErrorKind, LoadResult, LoadStatus
from deployment_info.infrastructure.loader import DeploymentInfoLoader

__version__ = "1.0.0"

__all__ = [
    "DeploymentInfoLoader",
    "LoadErrorKind",
    "LoadResult",
    "LoadStatus",
    "__version__",
]
