"""Standardized exceptions for AWS credential resolution.

This module provides the exception types raised while turning credential
configuration into a provider handle, and while building SDK providers from
those handles.
"""


class AwsCredentialsError(Exception):
    """Base exception for all credential resolution errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the error with a message and optional error code.

        Args:
            message: Human-readable error message.
            error_code: Optional error code for programmatic handling.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(AwsCredentialsError):
    """Raised when credential configuration has an invalid shape."""

    def __init__(self, message: str, option_names: tuple[str, ...] = ()) -> None:
        """Initialize configuration error.

        Args:
            message: Error message describing the configuration issue.
            option_names: Names of the offending options, prefix included.
        """
        super().__init__(message, "CONFIG_ERROR")
        self.option_names = option_names


class UnknownMethodError(ConfigurationError):
    """Raised when auth_method is not one of the supported methods."""

    def __init__(
        self,
        auth_method: str,
        supported_methods: tuple[str, ...],
        option_name: str = "auth_method",
    ) -> None:
        """Initialize the unknown method error.

        Args:
            auth_method: The unrecognized method value.
            supported_methods: Every method name the resolver accepts.
            option_name: The (possibly prefixed) auth method option name.
        """
        supported = ", ".join(supported_methods)
        super().__init__(
            f"Unknown {option_name} '{auth_method}'. "
            f"Supported methods are {supported}.",
            (option_name,),
        )
        self.auth_method = auth_method
        self.supported_methods = supported_methods


class MissingRequiredFieldError(ConfigurationError):
    """Raised when an option required by the selected method is not set."""

    def __init__(self, option_names: tuple[str, ...]) -> None:
        """Initialize the missing field error.

        Args:
            option_names: Options that must be set, in priority order.
        """
        listed = ", ".join(f"'{name}'" for name in option_names)
        super().__init__(f"Required option is not set: {listed}", option_names)


class ConflictingFieldError(ConfigurationError):
    """Raised when an option forbidden by the selected method is set."""

    def __init__(self, option_name: str) -> None:
        """Initialize the conflicting field error.

        Args:
            option_name: The option that must not be set.
        """
        super().__init__(f"Invalid option is set: '{option_name}'", (option_name,))


class UnsupportedMethodError(ConfigurationError):
    """Raised when a recognized auth_method has been disabled for this target."""

    def __init__(self, auth_method: str, option_name: str = "auth_method") -> None:
        """Initialize the unsupported method error.

        Args:
            auth_method: The disabled method value.
            option_name: The (possibly prefixed) auth method option name.
        """
        super().__init__(
            f"{option_name} '{auth_method}' is not supported by this configuration",
            (option_name,),
        )
        self.auth_method = auth_method


class ProviderCreationError(AwsCredentialsError):
    """Raised when an SDK credential provider cannot be built from a handle."""

    def __init__(self, message: str, auth_method: str | None = None) -> None:
        """Initialize provider creation error.

        Args:
            message: Error message describing the failure.
            auth_method: Optional method of the handle that failed.
        """
        super().__init__(message, "PROVIDER_ERROR")
        self.auth_method = auth_method
