"""Domain services."""

from .identity_projector import IdentityService, project
from .reverse_resolver import KNOWN_PROVIDERS, ReverseResolver, diagnose

__all__ = [
    "IdentityService",
    "KNOWN_PROVIDERS",
    "ReverseResolver",
    "diagnose",
    "project",
]
