"""Base credential provider factory interface.

This module defines the CredentialProviderFactory protocol that SDK adapters
implement to turn resolved handles into concrete credential providers.
"""

from typing import Any, Protocol

from aws_credentials_core.handles import CredentialProviderHandle


class CredentialProviderFactory(Protocol):
    """Interface for building SDK credential providers from handles."""

    def create_provider(self, handle: CredentialProviderHandle) -> Any:
        """Build the SDK credential provider for a resolved handle.

        Args:
            handle: The handle returned by CredentialResolver.resolve.

        Returns:
            An SDK object able to produce current credentials on demand.
        """
        ...

    def create_session(
        self, handle: CredentialProviderHandle, region_name: str | None = None
    ) -> Any:
        """Build an SDK session that authenticates with the handle's strategy.

        Args:
            handle: The handle returned by CredentialResolver.resolve.
            region_name: Optional default region for clients of the session.
        """
        ...
