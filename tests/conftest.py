from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from deployment_info.infrastructure.loader import DeploymentInfoLoader

MOCKS_DIR = Path(__file__).parent / "fixtures" / "mocks"

MOCK_JSON_FILES = {
    "valid_one_dimensional": MOCKS_DIR / "valid_one_dimensional.json",
    "valid_two_dimensional": MOCKS_DIR / "valid_two_dimensional.json",
    "valid_three_dimensional": MOCKS_DIR / "valid_three_dimensional.json",
    "invalid_trailing_comma": MOCKS_DIR / "invalid_trailing_comma.json",
    "invalid_not_object": MOCKS_DIR / "invalid_not_object.json",
    "not_a_json_file_extension": MOCKS_DIR / "not_a_json_file_extension.txt",
    "empty_string": MOCKS_DIR / "empty_string.json",
}


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop sinks added during a test so none outlives a captured stream."""
    yield
    logger.remove()


@pytest.fixture
def mock_files() -> dict[str, Path]:
    return dict(MOCK_JSON_FILES)


@pytest.fixture
def loader() -> DeploymentInfoLoader:
    """Loader primed with the flat five-value fixture."""
    return DeploymentInfoLoader(MOCK_JSON_FILES["valid_one_dimensional"], "CI_COMMIT_TAG")
