from __future__ import annotations

from typing import Any

import strawberry

from ...logging import get_logger

logger = get_logger(__name__)


def resolve_mock(info: strawberry.Info) -> Any:
    """Answer a field with data generated for its declared return type."""
    mocks = info.context["mocks"]
    logger.debug("Resolving field from mocks", field=info.field_name)
    return mocks.generate(info.return_type)
