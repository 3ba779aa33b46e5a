"""
Pytest configuration and shared fixtures for versioned_uri tests.
"""

import pytest

from versioned_uri.config import VersionedURIConfig


@pytest.fixture
def version() -> str:
    """Application version used across tests."""
    return "1.2.3"


@pytest.fixture
def query_config(version: str) -> VersionedURIConfig:
    """Query parameter mode on the static/ prefix."""
    return VersionedURIConfig(uri="static/", version=version)


@pytest.fixture
def path_config(version: str) -> VersionedURIConfig:
    """Path segment mode on the static/ prefix."""
    return VersionedURIConfig(uri="static/", in_path=True, version=version)


@pytest.fixture
def param_config(version: str) -> VersionedURIConfig:
    """Custom parameter name over two prefixes."""
    return VersionedURIConfig(uri=["foo/", "bar"], param="version", version=version)
