"""boto3 credential provider adapter.

This module provides the Boto3CredentialProviderFactory class, which builds
botocore credential providers and boto3 sessions from resolved credential
handles. It is the only place in the core package that touches the AWS SDK.
"""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import boto3
import botocore.session
import structlog
from botocore import UNSIGNED
from botocore.client import BaseClient
from botocore.config import Config
from botocore.credentials import (
    ConfigProvider,
    CredentialProvider,
    CredentialResolver,
    Credentials,
    EnvProvider,
    InstanceMetadataProvider,
    RefreshableCredentials,
)
from botocore.exceptions import CredentialRetrievalError
from botocore.utils import InstanceMetadataFetcher

from aws_credentials_core.auth_method import AuthMethod
from aws_credentials_core.exceptions import ProviderCreationError
from aws_credentials_core.handles import (
    CredentialProviderHandle,
    ProfileCredentialsHandle,
    SessionCredentialsHandle,
    StaticCredentialsHandle,
)

# Get logger for this module
logger = structlog.get_logger(__name__)

# Property names used for auth_method "properties", as in the Java SDK
SYSTEM_PROPERTY_MAPPING = {
    "access_key": "aws.accessKeyId",
    "secret_key": "aws.secretAccessKey",
    "token": "aws.sessionToken",
}


class StaticProvider(CredentialProvider):
    """Provider returning fixed credentials given in configuration."""

    METHOD = "explicit"
    CANONICAL_NAME = "customStatic"

    def __init__(
        self, access_key: str, secret_key: str, token: str | None = None
    ) -> None:
        super().__init__()
        self._access_key = access_key
        self._secret_key = secret_key
        self._token = token

    def load(self) -> Credentials:
        return Credentials(
            self._access_key, self._secret_key, self._token, method=self.METHOD
        )


class AnonymousProvider(CredentialProvider):
    """Provider that never yields credentials.

    Clients built for anonymous access must also disable request signing,
    see ``Boto3CredentialProviderFactory.client_config``.
    """

    METHOD = "custom-anonymous"
    CANONICAL_NAME = "customAnonymous"

    def load(self) -> None:
        return None


class NamedProfileProvider(CredentialProvider):
    """Provider for a named profile in the SDK's default profile files."""

    METHOD = "custom-named-profile"
    CANONICAL_NAME = "customNamedProfile"

    def __init__(self, profile_name: str) -> None:
        super().__init__()
        self.profile_name = profile_name

    def load(self) -> Credentials | None:
        return botocore.session.Session(profile=self.profile_name).get_credentials()


class DefaultChainProvider(CredentialProvider):
    """Provider delegating to botocore's default credential chain."""

    METHOD = "custom-default-chain"
    CANONICAL_NAME = "customDefaultChain"

    def load(self) -> Credentials | None:
        return botocore.session.get_session().get_credentials()


class ReloadingProfileFileProvider(CredentialProvider):
    """Provider for a profile in an explicit config-format profile file.

    The returned credentials refresh themselves every
    ``RELOAD_CHECK_INTERVAL`` seconds. A refresh only re-parses the file
    when its modification time has changed since the last parse.
    """

    METHOD = "custom-profile-file"
    CANONICAL_NAME = "customProfileFile"
    RELOAD_CHECK_INTERVAL = 60
    ADVISORY_REFRESH_TIMEOUT = 30

    def __init__(self, profile_file: Path, profile_name: str) -> None:
        super().__init__()
        self.profile_file = profile_file
        self.profile_name = profile_name
        self._loaded_mtime: float | None = None
        self._credentials: Credentials | None = None

    def load(self) -> RefreshableCredentials | None:
        metadata = self._load_metadata()
        if metadata is None:
            return None
        return RefreshableCredentials.create_from_metadata(
            metadata,
            refresh_using=self._refresh,
            method=self.METHOD,
            advisory_timeout=self.ADVISORY_REFRESH_TIMEOUT,
            mandatory_timeout=0,
        )

    def _refresh(self) -> dict[str, Any]:
        metadata = self._load_metadata()
        if metadata is None:
            raise CredentialRetrievalError(
                provider=self.METHOD,
                error_msg=(
                    f"profile '{self.profile_name}' has no credentials in "
                    f"{self.profile_file}"
                ),
            )
        return metadata

    def _load_metadata(self) -> dict[str, Any] | None:
        try:
            mtime = self.profile_file.stat().st_mtime
        except FileNotFoundError:
            logger.warning("PROFILE_FILE_NOT_FOUND", profile_file=str(self.profile_file))
            return None

        if self._credentials is None or mtime != self._loaded_mtime:
            self._credentials = ConfigProvider(
                str(self.profile_file), self.profile_name
            ).load()
            self._loaded_mtime = mtime
            logger.info(
                "PROFILE_FILE_LOADED",
                profile_file=str(self.profile_file),
                profile_name=self.profile_name,
                found=self._credentials is not None,
            )

        if self._credentials is None:
            return None
        frozen = self._credentials.get_frozen_credentials()
        expiry_time = datetime.now(tz=UTC) + timedelta(
            seconds=self.RELOAD_CHECK_INTERVAL
        )
        return {
            "access_key": frozen.access_key,
            "secret_key": frozen.secret_key,
            "token": frozen.token,
            "expiry_time": expiry_time.isoformat(),
        }


class Boto3CredentialProviderFactory:
    """Builds botocore providers and boto3 sessions from credential handles."""

    def __init__(self, system_properties: Mapping[str, str] | None = None) -> None:
        """Initialize the factory.

        Args:
            system_properties: Process-level properties consulted for the
                ``properties`` method, keyed by ``aws.accessKeyId``,
                ``aws.secretAccessKey`` and ``aws.sessionToken``.
        """
        self.system_properties: Mapping[str, str] = (
            system_properties if system_properties is not None else {}
        )
        self._builders: dict[
            AuthMethod, Callable[[CredentialProviderHandle], CredentialProvider]
        ] = {
            AuthMethod.BASIC: self._build_static,
            AuthMethod.SESSION: self._build_static,
            AuthMethod.ENV: lambda _: EnvProvider(),
            AuthMethod.INSTANCE: lambda _: InstanceMetadataProvider(
                iam_role_fetcher=InstanceMetadataFetcher()
            ),
            AuthMethod.PROFILE: self._build_profile,
            AuthMethod.PROPERTIES: lambda _: EnvProvider(
                environ=self.system_properties, mapping=SYSTEM_PROPERTY_MAPPING
            ),
            AuthMethod.ANONYMOUS: lambda _: AnonymousProvider(),
            AuthMethod.DEFAULT: lambda _: DefaultChainProvider(),
        }

    def create_provider(self, handle: CredentialProviderHandle) -> CredentialProvider:
        """Build the botocore credential provider for a handle.

        Raises:
            ProviderCreationError: When the handle type is not recognized.
        """
        method = getattr(handle, "method", None)
        builder = self._builders.get(method) if method is not None else None
        if builder is None:
            raise ProviderCreationError(
                f"No boto3 provider for handle {type(handle).__name__}",
                str(method) if method is not None else None,
            )
        provider = builder(handle)
        logger.debug(
            "CREDENTIAL_PROVIDER_CREATED",
            auth_method=str(method),
            provider=provider.METHOD,
        )
        return provider

    def create_session(
        self, handle: CredentialProviderHandle, region_name: str | None = None
    ) -> boto3.session.Session:
        """Build a boto3 session that authenticates through the handle's provider.

        The default chain keeps botocore's own resolver so that its full
        lookup order applies.
        """
        botocore_session = botocore.session.get_session()
        if getattr(handle, "method", None) is not AuthMethod.DEFAULT:
            botocore_session.register_component(
                "credential_provider",
                CredentialResolver([self.create_provider(handle)]),
            )
        return boto3.session.Session(
            botocore_session=botocore_session, region_name=region_name
        )

    def client_config(self, handle: CredentialProviderHandle) -> Config | None:
        """Return the client config a handle requires, if any."""
        if getattr(handle, "method", None) is AuthMethod.ANONYMOUS:
            return Config(signature_version=UNSIGNED)
        return None

    def create_client(
        self,
        handle: CredentialProviderHandle,
        service_name: str,
        region_name: str | None = None,
        **client_kwargs: Any,
    ) -> BaseClient:
        """Create a boto3 client for ``service_name`` using the handle's credentials."""
        session = self.create_session(handle, region_name=region_name)
        config = self.client_config(handle)
        if config is not None:
            existing = client_kwargs.pop("config", None)
            client_kwargs["config"] = existing.merge(config) if existing else config
        return session.client(service_name, **client_kwargs)  # type: ignore[call-overload]

    def _build_static(self, handle: CredentialProviderHandle) -> CredentialProvider:
        if isinstance(handle, SessionCredentialsHandle):
            return StaticProvider(
                handle.access_key_id, handle.secret_access_key, handle.session_token
            )
        if isinstance(handle, StaticCredentialsHandle):
            return StaticProvider(handle.access_key_id, handle.secret_access_key)
        # basic without keys resolves to an anonymous handle, never here
        raise ProviderCreationError(
            f"Unexpected handle {type(handle).__name__}", str(handle.method)
        )

    def _build_profile(self, handle: CredentialProviderHandle) -> CredentialProvider:
        if not isinstance(handle, ProfileCredentialsHandle):
            raise ProviderCreationError(
                f"Unexpected handle {type(handle).__name__}", str(handle.method)
            )
        if handle.profile_file is None:
            return NamedProfileProvider(handle.profile_name)
        if handle.reload_when_modified:
            return ReloadingProfileFileProvider(handle.profile_file, handle.profile_name)
        return ConfigProvider(str(handle.profile_file), handle.profile_name)
