"""Identity service package."""

from .identity_service import IdentityService, derive_identifier

__all__ = ["IdentityService", "derive_identifier"]
