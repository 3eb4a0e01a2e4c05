"""Credential provider handles.

A handle is the result of resolving a CredentialConfig. Each handle type
carries exactly the parameters its strategy needs and is tagged with the
AuthMethod that produced it. Handles are plain values: they hold no SDK
objects and compare equal when their parameters are equal.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from aws_credentials_core.auth_method import AuthMethod
from aws_credentials_core.config import DEFAULT_PROFILE_NAME


@dataclass(frozen=True)
class StaticCredentialsHandle:
    """A fixed access key pair."""

    method: ClassVar[AuthMethod] = AuthMethod.BASIC

    access_key_id: str
    secret_access_key: str = field(repr=False)


@dataclass(frozen=True)
class SessionCredentialsHandle:
    """A fixed access key pair plus a session token."""

    method: ClassVar[AuthMethod] = AuthMethod.SESSION

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)


@dataclass(frozen=True)
class ProfileCredentialsHandle:
    """A named profile, optionally in an explicit profile file.

    When ``profile_file`` is None the profile is looked up in the SDK's
    default profile locations.
    """

    method: ClassVar[AuthMethod] = AuthMethod.PROFILE

    profile_name: str = DEFAULT_PROFILE_NAME
    profile_file: Path | None = None
    reload_when_modified: bool = False


@dataclass(frozen=True)
class EnvironmentCredentialsHandle:
    """Credentials read from AWS_* environment variables."""

    method: ClassVar[AuthMethod] = AuthMethod.ENV


@dataclass(frozen=True)
class InstanceCredentialsHandle:
    """Credentials from the host's instance metadata service."""

    method: ClassVar[AuthMethod] = AuthMethod.INSTANCE


@dataclass(frozen=True)
class SystemPropertyCredentialsHandle:
    """Credentials from process-level properties supplied by the host."""

    method: ClassVar[AuthMethod] = AuthMethod.PROPERTIES


@dataclass(frozen=True)
class AnonymousCredentialsHandle:
    """No credentials; requests are sent unsigned."""

    method: ClassVar[AuthMethod] = AuthMethod.ANONYMOUS


@dataclass(frozen=True)
class DefaultChainCredentialsHandle:
    """The SDK's default lookup chain (environment, profile, instance metadata)."""

    method: ClassVar[AuthMethod] = AuthMethod.DEFAULT


CredentialProviderHandle = (
    StaticCredentialsHandle
    | SessionCredentialsHandle
    | ProfileCredentialsHandle
    | EnvironmentCredentialsHandle
    | InstanceCredentialsHandle
    | SystemPropertyCredentialsHandle
    | AnonymousCredentialsHandle
    | DefaultChainCredentialsHandle
)
