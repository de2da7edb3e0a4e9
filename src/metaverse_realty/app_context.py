"""
Application context

Everything a request needs from the process is built once at start-up and
passed explicitly to the request handling layer.
"""

from __future__ import annotations

from dataclasses import dataclass

import strawberry

from .auth.adapters.base import Authenticator
from .auth.adapters.static import StaticTokenAuthenticator
from .config import Settings, get_settings
from .graphql.mocks import MockGenerator
from .graphql.schema import INTERFACE_VARIANTS, SCHEMA_TYPES, create_schema


@dataclass(frozen=True)
class AppContext:
    """Collaborators shared by all requests. None of them hold mutable state."""

    settings: Settings
    schema: strawberry.Schema
    authenticator: Authenticator
    mocks: MockGenerator


def create_app_context(
    settings: Settings | None = None,
    authenticator: Authenticator | None = None,
    mocks: MockGenerator | None = None,
) -> AppContext:
    """Build the application context, filling in defaults for anything not given."""
    settings = settings or get_settings()
    return AppContext(
        settings=settings,
        schema=create_schema(),
        authenticator=authenticator or StaticTokenAuthenticator(),
        mocks=mocks
        or MockGenerator(
            SCHEMA_TYPES, max_depth=settings.mock_max_depth, variants=INTERFACE_VARIANTS
        ),
    )
