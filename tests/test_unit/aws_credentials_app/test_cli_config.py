"""Unit tests for environment-driven CLI configuration."""

from aws_credentials_app.cli_config import create_check_config, create_methods_config
from aws_credentials_core.config import CredentialConfig


class TestCheckConfig:
    """Test CheckConfig loading and conversion."""

    def test_defaults(self) -> None:
        config = create_check_config({})

        assert config.auth_method == "basic"
        assert config.access_key_id is None
        assert config.profile_file is None
        assert config.option_prefix == ""
        assert config.region is None
        assert config.log_level == "INFO"
        assert config.dev_mode is False

    def test_reads_prefixed_environment(self) -> None:
        config = create_check_config(
            {
                "AWS_CREDENTIALS_AUTH_METHOD": "profile",
                "AWS_CREDENTIALS_PROFILE_FILE": "/etc/aws/config",
                "AWS_CREDENTIALS_PROFILE_NAME": "etl",
                "AWS_CREDENTIALS_OPTION_PREFIX": "aws_",
                "AWS_CREDENTIALS_REGION": "eu-west-2",
                "AWS_CREDENTIALS_DEV_MODE": "true",
            }
        )

        assert config.auth_method == "profile"
        assert config.profile_file == "/etc/aws/config"
        assert config.profile_name == "etl"
        assert config.region == "eu-west-2"
        assert config.dev_mode is True

    def test_to_credential_config(self) -> None:
        config = create_check_config(
            {
                "AWS_CREDENTIALS_AUTH_METHOD": "session",
                "AWS_CREDENTIALS_ACCESS_KEY_ID": "AKID",
                "AWS_CREDENTIALS_SECRET_ACCESS_KEY": "SECRET",
                "AWS_CREDENTIALS_SESSION_TOKEN": "TOKEN",
                "AWS_CREDENTIALS_OPTION_PREFIX": "aws_",
            }
        )

        assert config.to_credential_config() == CredentialConfig(
            auth_method="session",
            access_key_id="AKID",
            secret_access_key="SECRET",
            session_token="TOKEN",
            prefix="aws_",
        )


class TestMethodsConfig:
    """Test MethodsConfig loading."""

    def test_reads_log_level(self) -> None:
        config = create_methods_config({"AWS_CREDENTIALS_LOG_LEVEL": "DEBUG"})

        assert config.log_level == "DEBUG"
        assert config.dev_mode is False
