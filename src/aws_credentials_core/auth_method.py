"""Supported authentication methods."""

from enum import StrEnum

from aws_credentials_core.exceptions import UnknownMethodError


class AuthMethod(StrEnum):
    """Credential resolution strategies selectable through ``auth_method``."""

    BASIC = "basic"
    ENV = "env"
    INSTANCE = "instance"
    PROFILE = "profile"
    PROPERTIES = "properties"
    ANONYMOUS = "anonymous"
    SESSION = "session"
    DEFAULT = "default"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return every supported method name in declaration order."""
        return tuple(method.value for method in cls)

    @classmethod
    def parse(cls, value: str, option_name: str = "auth_method") -> "AuthMethod":
        """Convert an external string into an AuthMethod.

        Args:
            value: The configured method name. Matching is exact.
            option_name: Option name used in the error message.

        Raises:
            UnknownMethodError: When the value is not a supported method.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownMethodError(value, cls.names(), option_name) from None
