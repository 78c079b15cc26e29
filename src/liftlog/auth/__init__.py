"""Identity service for liftlog."""

from .identity import IdentityService, hash_password, verify_password

__all__ = ["hash_password", "IdentityService", "verify_password"]
