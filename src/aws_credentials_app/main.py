"""Command-line interface and main entry point.

This module provides a small CLI for checking AWS credential configuration
read from ``AWS_CREDENTIALS_*`` environment variables.
"""
# ruff: noqa: T201

import dataclasses
import sys

import structlog

from aws_credentials_app.cli_config import create_check_config, create_methods_config
from aws_credentials_core.auth_method import AuthMethod
from aws_credentials_core.credentials import Boto3CredentialProviderFactory
from aws_credentials_core.exceptions import AwsCredentialsError
from aws_credentials_core.handles import CredentialProviderHandle
from aws_credentials_core.observability import configure_logging
from aws_credentials_core.resolver import CredentialResolver

# Get logger for this module
logger = structlog.get_logger(__name__)

VERSION = "0.1.0"


def describe_handle(handle: CredentialProviderHandle) -> dict[str, str]:
    """Return the non-secret parameters of a handle as strings."""
    return {
        field.name: str(getattr(handle, field.name))
        for field in dataclasses.fields(handle)
        if field.repr
    }


def check_command() -> None:
    """Resolve the configured credentials and print the selected strategy.

    Exits with status 1 when the configuration is invalid.
    """
    try:
        config = create_check_config()
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        handle = CredentialResolver().resolve(config.to_credential_config())
        provider = Boto3CredentialProviderFactory().create_provider(handle)
        logger.info(
            "CREDENTIALS_RESOLVED",
            auth_method=str(handle.method),
            provider=provider.METHOD,
            region=config.region,
        )

        print(f"auth_method: {handle.method}")
        print(f"provider: {provider.METHOD}")
        for name, value in describe_handle(handle).items():
            print(f"{name}: {value}")
    except AwsCredentialsError as e:
        print(f"Error: {e.message}")
        logger.exception("CHECK_COMMAND_ERROR", error_code=e.error_code)
        sys.exit(1)


def methods_command() -> None:
    """List the supported auth methods."""
    config = create_methods_config()
    configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

    print("Supported auth methods:")
    for name in AuthMethod.names():
        print(f"  {name}")


def show_help() -> None:
    """Show help information for the CLI."""
    help_text = """
AWS credential configuration checker

Usage:
    aws-credentials <command>

Commands:
    check              Resolve credentials from AWS_CREDENTIALS_* variables
    methods            List supported auth methods
    --help, -h         Show this help message
    --version, -v      Show version information

Environment variables for check:
    AWS_CREDENTIALS_AUTH_METHOD        basic (default), env, instance, profile,
                                       properties, anonymous, session, default
    AWS_CREDENTIALS_ACCESS_KEY_ID      Access key ID (basic, session)
    AWS_CREDENTIALS_SECRET_ACCESS_KEY  Secret access key (basic, session)
    AWS_CREDENTIALS_SESSION_TOKEN      Session token (session)
    AWS_CREDENTIALS_PROFILE_FILE       Profile file path (profile)
    AWS_CREDENTIALS_PROFILE_NAME       Profile name (profile)
    AWS_CREDENTIALS_OPTION_PREFIX      Prefix for option names in messages
    AWS_CREDENTIALS_LOG_LEVEL          Log level (DEBUG, INFO, WARNING, ERROR)
    AWS_CREDENTIALS_DEV_MODE           Enable development mode logging

Examples:
    AWS_CREDENTIALS_AUTH_METHOD=profile aws-credentials check
    aws-credentials methods
"""
    print(help_text)


def main() -> None:
    """Main entry point for the CLI."""
    min_args = 2
    if len(sys.argv) < min_args:
        show_help()
        sys.exit(1)

    command = sys.argv[1]

    if command == "check":
        check_command()
    elif command == "methods":
        methods_command()
    elif command in ["--help", "-h", "help"]:
        show_help()
        sys.exit(0)
    elif command in ["--version", "-v", "version"]:
        print(f"aws-credentials-resolver, version {VERSION}")
        sys.exit(0)
    else:
        show_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
