"""PyTest configuration and shared test fixtures.

This module provides fixtures shared by the credential resolution tests.
"""

from collections.abc import Generator
from typing import Any

import pytest
import structlog

from aws_credentials_core.resolver import CredentialResolver


class RecordingSink:
    """Diagnostic sink that records warnings instead of logging them."""

    def __init__(self) -> None:
        self.warnings: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.warnings.append((event, kw))


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sink() -> RecordingSink:
    """Create a recording diagnostic sink."""
    return RecordingSink()


@pytest.fixture
def resolver(sink: RecordingSink) -> CredentialResolver:
    """Create a resolver that reports warnings to the recording sink."""
    return CredentialResolver(diagnostics=sink)


@pytest.fixture
def clean_aws_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Remove ambient AWS configuration so providers only see test input."""
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_SECURITY_TOKEN",
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_CREDENTIAL_EXPIRATION",
        "AWS_ACCOUNT_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))
    monkeypatch.setenv(
        "AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials")
    )
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
