"""SDK credential provider adapters."""

from .base import CredentialProviderFactory
from .boto3_provider import Boto3CredentialProviderFactory
from .factory import create_boto3_session, create_credential_provider

__all__ = [
    "Boto3CredentialProviderFactory",
    "CredentialProviderFactory",
    "create_boto3_session",
    "create_credential_provider",
]
