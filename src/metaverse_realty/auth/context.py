"""Per-request context handed to every resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logging import bind_user, get_logger

if TYPE_CHECKING:
    from ..app_context import AppContext

logger = get_logger(__name__)


async def build_request_context(
    authorization: str | None, app_context: AppContext
) -> dict[str, Any]:
    """
    Authenticate the request and build the resolver context.

    Runs once per operation, before any resolver executes.

    Args:
        authorization: The ``authorization`` header, possibly empty or missing
        app_context: Collaborators shared by all requests

    Returns:
        Context with the authenticated ``user`` (or None) and the ``mocks``
        generator used for fields without explicit resolvers
    """
    user = await app_context.authenticator.authenticate(authorization or "")

    bind_user(str(user.id) if user else None)
    logger.debug("Request context built", authenticated=user is not None)

    return {
        "user": user,
        "mocks": app_context.mocks,
    }
