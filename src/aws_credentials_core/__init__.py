"""Resolve AWS credential configuration into a credential provider handle."""

from .auth_method import AuthMethod
from .config import CredentialConfig
from .exceptions import (
    AwsCredentialsError,
    ConfigurationError,
    ConflictingFieldError,
    MissingRequiredFieldError,
    ProviderCreationError,
    UnknownMethodError,
    UnsupportedMethodError,
)
from .handles import (
    AnonymousCredentialsHandle,
    CredentialProviderHandle,
    DefaultChainCredentialsHandle,
    EnvironmentCredentialsHandle,
    InstanceCredentialsHandle,
    ProfileCredentialsHandle,
    SessionCredentialsHandle,
    StaticCredentialsHandle,
    SystemPropertyCredentialsHandle,
)
from .resolver import (
    CredentialResolver,
    DiagnosticSink,
    get_aws_credentials_provider,
    get_prefixed_aws_credentials_provider,
    reject_field,
    require_field,
)

__all__ = [
    "AnonymousCredentialsHandle",
    "AuthMethod",
    "AwsCredentialsError",
    "ConfigurationError",
    "ConflictingFieldError",
    "CredentialConfig",
    "CredentialProviderHandle",
    "CredentialResolver",
    "DefaultChainCredentialsHandle",
    "DiagnosticSink",
    "EnvironmentCredentialsHandle",
    "InstanceCredentialsHandle",
    "MissingRequiredFieldError",
    "ProfileCredentialsHandle",
    "ProviderCreationError",
    "SessionCredentialsHandle",
    "StaticCredentialsHandle",
    "SystemPropertyCredentialsHandle",
    "UnknownMethodError",
    "UnsupportedMethodError",
    "get_aws_credentials_provider",
    "get_prefixed_aws_credentials_provider",
    "reject_field",
    "require_field",
]
