"""CLI configuration using environ-config.

This module defines the configuration classes the CLI reads from
environment variables prefixed with ``AWS_CREDENTIALS_``.
"""

import os
from collections.abc import Mapping

import environ

from aws_credentials_core.config import DEFAULT_AUTH_METHOD, CredentialConfig


@environ.config(prefix="AWS_CREDENTIALS")
class CheckConfig:
    """Configuration for the check command."""

    auth_method: str = environ.var(
        default=DEFAULT_AUTH_METHOD, help="Authentication method to resolve"
    )
    access_key_id: str | None = environ.var(default=None, help="AWS access key ID")
    secret_access_key: str | None = environ.var(
        default=None, help="AWS secret access key"
    )
    session_token: str | None = environ.var(default=None, help="AWS session token")
    profile_file: str | None = environ.var(
        default=None, help="Path to a profile file (auth_method profile)"
    )
    profile_name: str | None = environ.var(
        default=None, help="Profile name (auth_method profile)"
    )
    option_prefix: str = environ.var(
        default="", help="Option name prefix used in error messages, e.g. aws_"
    )
    region: str | None = environ.var(
        default=None, help="Region for the boto3 session built from the credentials"
    )
    log_level: str = environ.var(default="INFO", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )

    def to_credential_config(self) -> CredentialConfig:
        """Return the CredentialConfig described by this configuration."""
        return CredentialConfig(
            auth_method=self.auth_method,
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            session_token=self.session_token,
            profile_file=self.profile_file,
            profile_name=self.profile_name,
            prefix=self.option_prefix,
        )


@environ.config(prefix="AWS_CREDENTIALS")
class MethodsConfig:
    """Configuration for the methods command."""

    log_level: str = environ.var(default="INFO", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


def create_check_config(env: Mapping[str, str] | None = None) -> CheckConfig:
    """Create a CheckConfig from environment variables.

    Args:
        env: Environment mapping. If None, uses os.environ.
    """
    return environ.to_config(CheckConfig, environ=os.environ if env is None else env)


def create_methods_config(env: Mapping[str, str] | None = None) -> MethodsConfig:
    """Create a MethodsConfig from environment variables.

    Args:
        env: Environment mapping. If None, uses os.environ.
    """
    return environ.to_config(
        MethodsConfig, environ=os.environ if env is None else env
    )
