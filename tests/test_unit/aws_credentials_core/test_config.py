"""Unit tests for the credential configuration value object."""

import dataclasses

import pytest

from aws_credentials_core.auth_method import AuthMethod
from aws_credentials_core.config import CredentialConfig
from aws_credentials_core.exceptions import UnknownMethodError


class TestCredentialConfig:
    """Test CredentialConfig defaults and behaviour."""

    def test_defaults(self) -> None:
        config = CredentialConfig()

        assert config.auth_method == "basic"
        assert config.access_key_id is None
        assert config.secret_access_key is None
        assert config.session_token is None
        assert config.profile_file is None
        assert config.profile_name is None
        assert config.prefix == ""

    def test_is_immutable(self) -> None:
        config = CredentialConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.auth_method = "env"  # type: ignore[misc]

    def test_option_name_applies_prefix(self) -> None:
        assert CredentialConfig().option_name("profile_file") == "profile_file"
        assert (
            CredentialConfig(prefix="aws_").option_name("profile_file")
            == "aws_profile_file"
        )

    def test_repr_hides_secrets(self) -> None:
        config = CredentialConfig(
            access_key_id="AKID", secret_access_key="SECRET", session_token="TOKEN"
        )

        text = repr(config)
        assert "SECRET" not in text
        assert "TOKEN" not in text


class TestFromTask:
    """Test reading CredentialConfig from task mappings."""

    def test_empty_task_uses_defaults(self) -> None:
        assert CredentialConfig.from_task({}) == CredentialConfig()

    def test_reads_unprefixed_options(self) -> None:
        config = CredentialConfig.from_task(
            {
                "auth_method": "profile",
                "profile_file": "/tmp/config",
                "profile_name": "etl",
            }
        )

        assert config.auth_method == "profile"
        assert config.profile_file == "/tmp/config"
        assert config.profile_name == "etl"

    def test_reads_prefixed_options(self) -> None:
        config = CredentialConfig.from_task(
            {
                "aws_auth_method": "session",
                "aws_access_key_id": "AKID",
                "aws_secret_access_key": "SECRET",
                "aws_session_token": "TOKEN",
            },
            prefix="aws_",
        )

        assert config.auth_method == "session"
        assert config.access_key_id == "AKID"
        assert config.secret_access_key == "SECRET"
        assert config.session_token == "TOKEN"
        assert config.prefix == "aws_"

    def test_none_values_are_absent(self) -> None:
        config = CredentialConfig.from_task(
            {"auth_method": None, "access_key_id": None}
        )

        assert config.auth_method == "basic"
        assert config.access_key_id is None

    def test_empty_string_is_present(self) -> None:
        config = CredentialConfig.from_task({"auth_method": "", "profile_name": ""})

        assert config.auth_method == ""
        assert config.profile_name == ""


class TestAuthMethod:
    """Test AuthMethod parsing."""

    def test_names_in_declaration_order(self) -> None:
        assert AuthMethod.names() == (
            "basic",
            "env",
            "instance",
            "profile",
            "properties",
            "anonymous",
            "session",
            "default",
        )

    @pytest.mark.parametrize("name", AuthMethod.names())
    def test_parse_known_names(self, name: str) -> None:
        assert AuthMethod.parse(name).value == name

    def test_parse_unknown_name(self) -> None:
        with pytest.raises(UnknownMethodError) as exc_info:
            AuthMethod.parse("kerberos", "aws_auth_method")

        assert exc_info.value.auth_method == "kerberos"
        assert exc_info.value.option_names == ("aws_auth_method",)
        assert "Unknown aws_auth_method 'kerberos'" in str(exc_info.value)
