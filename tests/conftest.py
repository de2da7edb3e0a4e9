"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from metaverse_realty.app_context import AppContext, create_app_context
from metaverse_realty.auth.adapters.static import VALID_CREDENTIAL
from metaverse_realty.config import Settings


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=False)


@pytest.fixture
def app_context(settings: Settings) -> AppContext:
    return create_app_context(settings)


@pytest.fixture
def valid_credential() -> str:
    return VALID_CREDENTIAL


@pytest.fixture
def execute(app_context: AppContext):
    """Execute an operation against the schema with a freshly built context."""
    from metaverse_realty.auth.context import build_request_context

    async def _execute(
        query: str,
        authorization: str | None = None,
        variables: dict[str, Any] | None = None,
    ):
        context = await build_request_context(authorization, app_context)
        return await app_context.schema.execute(
            query, variable_values=variables, context_value=context
        )

    return _execute


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
