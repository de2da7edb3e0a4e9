"""Authentication adapters."""

from .base import Authenticator
from .static import StaticTokenAuthenticator

__all__ = [
    "Authenticator",
    "StaticTokenAuthenticator",
]
