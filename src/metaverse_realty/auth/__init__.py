"""Authentication for the Metaverse Realty API."""

from .adapters.base import Authenticator
from .adapters.static import StaticTokenAuthenticator
from .context import build_request_context

__all__ = [
    "Authenticator",
    "StaticTokenAuthenticator",
    "build_request_context",
]
