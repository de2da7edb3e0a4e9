"""Base authenticator interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...graphql.types.user import User


class Authenticator(Protocol):
    """Maps a credential to a user.

    Implementations may call out to an identity provider, which is why the
    interface is asynchronous even when the lookup is in-memory.
    """

    async def authenticate(self, credential: str | None) -> User | None:
        """
        Resolve the user behind a credential.

        Args:
            credential: Raw value of the ``authorization`` header, if any

        Returns:
            The authenticated user, or None when the credential is missing or
            not recognised. Rejection is not an error.
        """
        ...
