from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..errors import UnauthenticatedError

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


def resolve_current_user(info: strawberry.Info) -> User:
    """Return the user attached to the request context.

    Raises:
        UnauthenticatedError: If the request carried no valid credential
    """
    user = info.context.get("user")
    if user is None:
        logger.info("Rejected unauthenticated request for the current user")
        raise UnauthenticatedError()
    return user
