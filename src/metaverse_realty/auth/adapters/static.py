"""Single hard-coded bearer token, for mock and demo deployments."""

from __future__ import annotations

from ...graphql.types.user import User
from ...logging import get_logger

logger = get_logger(__name__)

VALID_CREDENTIAL = "Bearer token"


def default_user() -> User:
    """The user that the static token authenticates as."""
    return User(
        id="1",
        first_name="Peyton",
        last_name="Cleveland",
        email="peyton.cleveland.1@gmail.com",
        wallet_address="1x3vk08a2c",
        properties=[],
        property_count=0,
    )


class StaticTokenAuthenticator:
    """
    Accepts exactly one literal credential and maps it to a fixed user.

    The comparison is exact: scheme casing, extra whitespace or a different
    token all authenticate to no user.
    """

    def __init__(self, credential: str = VALID_CREDENTIAL, user: User | None = None):
        self.credential = credential
        self.user = user or default_user()

    async def authenticate(self, credential: str | None) -> User | None:
        if credential == self.credential:
            return self.user

        if credential:
            logger.debug("Credential not recognised, continuing unauthenticated")
        return None
