"""Credential configuration value object.

This module defines CredentialConfig, the immutable input to credential
resolution, and the helpers that read it from an already-deserialized task
mapping.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_AUTH_METHOD = "basic"
DEFAULT_PROFILE_NAME = "default"

# Prefix used by tasks that address every option as aws_<name>
AWS_OPTION_PREFIX = "aws_"

AUTH_METHOD = "auth_method"
ACCESS_KEY_ID = "access_key_id"
SECRET_ACCESS_KEY = "secret_access_key"  # noqa: S105
SESSION_TOKEN = "session_token"  # noqa: S105
PROFILE_FILE = "profile_file"
PROFILE_NAME = "profile_name"

OPTIONAL_FIELDS = (
    ACCESS_KEY_ID,
    SECRET_ACCESS_KEY,
    SESSION_TOKEN,
    PROFILE_FILE,
    PROFILE_NAME,
)


@dataclass(frozen=True)
class CredentialConfig:
    """Credential configuration for a single resolution call.

    ``prefix`` does not change semantics. It is prepended to option names in
    error and warning messages so they match what the user wrote.
    """

    auth_method: str = DEFAULT_AUTH_METHOD
    access_key_id: str | None = field(default=None, repr=False)
    secret_access_key: str | None = field(default=None, repr=False)
    session_token: str | None = field(default=None, repr=False)
    profile_file: str | None = None
    profile_name: str | None = None
    prefix: str = ""

    def option_name(self, name: str) -> str:
        """Return the user-facing name of an option."""
        return f"{self.prefix}{name}"

    @classmethod
    def from_task(cls, task: Mapping[str, Any], prefix: str = "") -> "CredentialConfig":
        """Build a config from a task mapping keyed by (prefixed) option names.

        Missing keys and ``None`` values are treated as absent. Any other
        value, including an empty string, counts as set.

        Args:
            task: Deserialized task options.
            prefix: Option name prefix, e.g. ``"aws_"``.
        """

        def _get(name: str) -> str | None:
            value = task.get(f"{prefix}{name}")
            return None if value is None else str(value)

        auth_method = _get(AUTH_METHOD)
        return cls(
            auth_method=DEFAULT_AUTH_METHOD if auth_method is None else auth_method,
            access_key_id=_get(ACCESS_KEY_ID),
            secret_access_key=_get(SECRET_ACCESS_KEY),
            session_token=_get(SESSION_TOKEN),
            profile_file=_get(PROFILE_FILE),
            profile_name=_get(PROFILE_NAME),
            prefix=prefix,
        )
