"""Clients for the external collaborators of the wizard."""

from .api_client import API_URL_ENV, ContractApiClient, EditResult, GenerationResult
from .exceptions import CollaboratorError

__all__ = [
    "API_URL_ENV",
    "ContractApiClient",
    "EditResult",
    "GenerationResult",
    "CollaboratorError",
]
