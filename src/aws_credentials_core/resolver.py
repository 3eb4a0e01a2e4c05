"""Credential configuration resolution.

This module turns a CredentialConfig into exactly one credential provider
handle. Each auth method permits a fixed set of options and forbids the
rest; an option set that the selected method forbids is an error rather
than something silently ignored.
"""

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

import structlog

from aws_credentials_core.auth_method import AuthMethod
from aws_credentials_core.config import (
    ACCESS_KEY_ID,
    AUTH_METHOD,
    AWS_OPTION_PREFIX,
    DEFAULT_PROFILE_NAME,
    PROFILE_FILE,
    PROFILE_NAME,
    SECRET_ACCESS_KEY,
    SESSION_TOKEN,
    CredentialConfig,
)
from aws_credentials_core.exceptions import (
    ConflictingFieldError,
    MissingRequiredFieldError,
    UnsupportedMethodError,
)
from aws_credentials_core.handles import (
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

# Get logger for this module
logger = structlog.get_logger(__name__)


class DiagnosticSink(Protocol):
    """Receiver for the warnings emitted during resolution."""

    def warning(self, event: str, **kw: Any) -> Any:
        """Record a warning event with key/value context."""
        ...


def require_field(value: str | None, option_names: tuple[str, ...]) -> str:
    """Return ``value`` or fail naming the options that still need to be set."""
    if value is None:
        raise MissingRequiredFieldError(option_names)
    return value


def reject_field(value: str | None, option_name: str) -> None:
    """Fail if an option forbidden by the selected method is set."""
    if value is not None:
        raise ConflictingFieldError(option_name)


class CredentialResolver:
    """Resolves credential configuration into a provider handle.

    Resolution is a pure function of the config apart from the single
    deprecation warning on the ``basic``-without-keys path, which goes to
    ``diagnostics``.
    """

    def __init__(
        self,
        diagnostics: DiagnosticSink | None = None,
        disabled_methods: Iterable[AuthMethod | str] = (),
    ) -> None:
        """Initialize the resolver.

        Args:
            diagnostics: Sink for deprecation warnings. Defaults to this
                module's structlog logger.
            disabled_methods: Methods that are recognized but rejected with
                UnsupportedMethodError, for hosts whose SDK cannot serve them.
        """
        self.diagnostics = diagnostics if diagnostics is not None else logger
        self.disabled_methods = frozenset(
            AuthMethod.parse(method) for method in disabled_methods
        )
        self._branches: dict[
            AuthMethod, Callable[[CredentialConfig], CredentialProviderHandle]
        ] = {
            AuthMethod.BASIC: self._resolve_basic,
            AuthMethod.ENV: self._resolve_env,
            AuthMethod.INSTANCE: self._resolve_instance,
            AuthMethod.PROFILE: self._resolve_profile,
            AuthMethod.PROPERTIES: self._resolve_properties,
            AuthMethod.ANONYMOUS: self._resolve_anonymous,
            AuthMethod.SESSION: self._resolve_session,
            AuthMethod.DEFAULT: self._resolve_default,
        }

    def resolve(self, config: CredentialConfig) -> CredentialProviderHandle:
        """Validate ``config`` and return the handle for its auth method.

        Raises:
            UnknownMethodError: auth_method is not a supported method.
            UnsupportedMethodError: auth_method is disabled on this resolver.
            MissingRequiredFieldError: a required option is not set.
            ConflictingFieldError: a forbidden option is set.
        """
        method_option = config.option_name(AUTH_METHOD)
        method = AuthMethod.parse(config.auth_method, method_option)
        if method in self.disabled_methods:
            raise UnsupportedMethodError(method.value, method_option)
        return self._branches[method](config)

    def _reject_all(self, config: CredentialConfig) -> None:
        reject_field(config.access_key_id, config.option_name(ACCESS_KEY_ID))
        reject_field(config.secret_access_key, config.option_name(SECRET_ACCESS_KEY))
        reject_field(config.session_token, config.option_name(SESSION_TOKEN))
        reject_field(config.profile_file, config.option_name(PROFILE_FILE))
        reject_field(config.profile_name, config.option_name(PROFILE_NAME))

    def _resolve_basic(self, config: CredentialConfig) -> CredentialProviderHandle:
        access_key_id_option = config.option_name(ACCESS_KEY_ID)
        secret_access_key_option = config.option_name(SECRET_ACCESS_KEY)

        reject_field(config.session_token, config.option_name(SESSION_TOKEN))
        reject_field(config.profile_file, config.option_name(PROFILE_FILE))
        reject_field(config.profile_name, config.option_name(PROFILE_NAME))

        # Deprecated: basic without keys used to mean anonymous access.
        if config.access_key_id is None and config.secret_access_key is None:
            method_option = config.option_name(AUTH_METHOD)
            self.diagnostics.warning(
                "BASIC_AUTH_WITHOUT_KEYS_DEPRECATED",
                auth_method_option=method_option,
                access_key_id_option=access_key_id_option,
                secret_access_key_option=secret_access_key_option,
                recommendation=(
                    f"Set '{method_option}: anonymous' to use anonymous "
                    "authentication. This fallback will be removed in a "
                    "future release."
                ),
            )
            return AnonymousCredentialsHandle()

        access_key_id = require_field(
            config.access_key_id, (access_key_id_option, secret_access_key_option)
        )
        secret_access_key = require_field(
            config.secret_access_key, (secret_access_key_option,)
        )
        return StaticCredentialsHandle(
            access_key_id=access_key_id, secret_access_key=secret_access_key
        )

    def _resolve_env(self, config: CredentialConfig) -> CredentialProviderHandle:
        self._reject_all(config)
        return EnvironmentCredentialsHandle()

    def _resolve_instance(self, config: CredentialConfig) -> CredentialProviderHandle:
        self._reject_all(config)
        return InstanceCredentialsHandle()

    def _resolve_profile(self, config: CredentialConfig) -> CredentialProviderHandle:
        reject_field(config.access_key_id, config.option_name(ACCESS_KEY_ID))
        reject_field(config.secret_access_key, config.option_name(SECRET_ACCESS_KEY))
        reject_field(config.session_token, config.option_name(SESSION_TOKEN))

        profile_name = (
            config.profile_name
            if config.profile_name is not None
            else DEFAULT_PROFILE_NAME
        )
        if config.profile_file is not None:
            return ProfileCredentialsHandle(
                profile_name=profile_name,
                profile_file=Path(config.profile_file),
                reload_when_modified=True,
            )
        return ProfileCredentialsHandle(profile_name=profile_name)

    def _resolve_properties(
        self, config: CredentialConfig
    ) -> CredentialProviderHandle:
        self._reject_all(config)
        return SystemPropertyCredentialsHandle()

    def _resolve_anonymous(
        self, config: CredentialConfig
    ) -> CredentialProviderHandle:
        self._reject_all(config)
        return AnonymousCredentialsHandle()

    def _resolve_session(self, config: CredentialConfig) -> CredentialProviderHandle:
        access_key_id_option = config.option_name(ACCESS_KEY_ID)
        secret_access_key_option = config.option_name(SECRET_ACCESS_KEY)
        session_token_option = config.option_name(SESSION_TOKEN)

        access_key_id = require_field(
            config.access_key_id,
            (access_key_id_option, secret_access_key_option, session_token_option),
        )
        secret_access_key = require_field(
            config.secret_access_key,
            (secret_access_key_option, session_token_option),
        )
        session_token = require_field(config.session_token, (session_token_option,))
        reject_field(config.profile_file, config.option_name(PROFILE_FILE))
        reject_field(config.profile_name, config.option_name(PROFILE_NAME))
        return SessionCredentialsHandle(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
        )

    def _resolve_default(self, config: CredentialConfig) -> CredentialProviderHandle:
        self._reject_all(config)
        return DefaultChainCredentialsHandle()


def get_aws_credentials_provider(
    task: Mapping[str, Any],
    *,
    prefix: str = "",
    resolver: CredentialResolver | None = None,
) -> CredentialProviderHandle:
    """Resolve a handle from task options named ``{prefix}auth_method`` etc.

    Args:
        task: Deserialized task options.
        prefix: Option name prefix.
        resolver: Resolver to use. A default CredentialResolver if omitted.
    """
    if resolver is None:
        resolver = CredentialResolver()
    return resolver.resolve(CredentialConfig.from_task(task, prefix))


def get_prefixed_aws_credentials_provider(
    task: Mapping[str, Any], resolver: CredentialResolver | None = None
) -> CredentialProviderHandle:
    """Resolve a handle from task options prefixed with ``aws_``."""
    return get_aws_credentials_provider(
        task, prefix=AWS_OPTION_PREFIX, resolver=resolver
    )
