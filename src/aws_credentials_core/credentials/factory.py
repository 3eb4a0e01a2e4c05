"""Credential provider factory functions.

This module provides one-call helpers that resolve a CredentialConfig and
build the matching boto3 provider or session from the resulting handle.
"""

import boto3
from botocore.credentials import CredentialProvider

from aws_credentials_core.config import CredentialConfig
from aws_credentials_core.resolver import CredentialResolver

from .base import CredentialProviderFactory
from .boto3_provider import Boto3CredentialProviderFactory


def create_credential_provider(
    config: CredentialConfig,
    resolver: CredentialResolver | None = None,
    provider_factory: CredentialProviderFactory | None = None,
) -> CredentialProvider:
    """Resolve ``config`` and build its botocore credential provider.

    Args:
        config: Credential configuration to resolve.
        resolver: Resolver to validate with. Defaults to CredentialResolver().
        provider_factory: Adapter building the provider.
            Defaults to Boto3CredentialProviderFactory().

    Returns:
        Configured botocore credential provider.
    """
    resolver = resolver or CredentialResolver()
    provider_factory = provider_factory or Boto3CredentialProviderFactory()
    return provider_factory.create_provider(resolver.resolve(config))


def create_boto3_session(
    config: CredentialConfig,
    region_name: str | None = None,
    resolver: CredentialResolver | None = None,
    provider_factory: CredentialProviderFactory | None = None,
) -> boto3.session.Session:
    """Resolve ``config`` and build a boto3 session authenticating with it.

    Args:
        config: Credential configuration to resolve.
        region_name: Optional default region for the session.
        resolver: Resolver to validate with. Defaults to CredentialResolver().
        provider_factory: Adapter building the session.
            Defaults to Boto3CredentialProviderFactory().
    """
    resolver = resolver or CredentialResolver()
    provider_factory = provider_factory or Boto3CredentialProviderFactory()
    return provider_factory.create_session(
        resolver.resolve(config), region_name=region_name
    )
