"""
Global pytest configuration and fixtures for the Crowdin client tests.

This file contains shared fixtures that are available to all test modules
without explicit import. No test talks to the real API: HTTP traffic goes
to an in-process MockAPI through httpx.MockTransport.
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Dict, Generator

import pytest  # type: ignore
import pytest_asyncio  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from crowdin_api.sources.client.crowdin.crowdin import CrowdinClient, CrowdinRESTClientViaToken  # noqa: E402
from crowdin_api.sources.external.crowdin.crowdin import CrowdinDataSource  # noqa: E402
from tests.utils.mock_api import MockAPI  # noqa: E402

# Initialize Faker for generating test data
fake: Faker = Faker()

TEST_TOKEN = "test-token"


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state before each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def mock_api() -> MockAPI:
    """Fresh fake API with no routes."""
    return MockAPI()


@pytest_asyncio.fixture
async def crowdin_client(mock_api: MockAPI) -> AsyncGenerator[CrowdinRESTClientViaToken, None]:
    """
    REST client wired to `mock_api`.

    Yields:
        CrowdinRESTClientViaToken using https://api.crowdin.com
    """
    client = CrowdinRESTClientViaToken(TEST_TOKEN, transport=mock_api.transport())
    yield client
    await client.close()


@pytest_asyncio.fixture
async def data_source(crowdin_client: CrowdinRESTClientViaToken) -> AsyncGenerator[CrowdinDataSource, None]:
    """All resource services sharing `crowdin_client`."""
    yield CrowdinDataSource(CrowdinClient(crowdin_client))


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """Auto-mark everything under tests/unit as a unit test."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
