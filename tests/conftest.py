"""
Shared test fixtures and configuration for entire test suite.

Provides: settings for both environments, app/client factories, in-memory
logger streams
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import io

import pytest
from fastapi.testclient import TestClient

from serverless_api.api.main import create_app
from serverless_api.configs import Settings
from serverless_api.configs.server import ServerSettings
from serverless_api.observability.logger import LoggerConfig, StructuredLogger


@pytest.fixture
def dev_settings() -> Settings:
    """Development settings: pretty logs, detailed errors."""
    return Settings(environment="development", log_level="debug")


@pytest.fixture
def prod_settings() -> Settings:
    """Production settings: compact logs, generic errors."""
    return Settings(
        environment="production",
        log_level="info",
        server=ServerSettings(cors_origins="https://app.example.com"),
    )


@pytest.fixture
def app(dev_settings):
    """Fresh application with its own seeded stores."""
    return create_app(dev_settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def prod_client(prod_settings):
    return TestClient(create_app(prod_settings))


@pytest.fixture
def make_logger():
    """
    Build a StructuredLogger writing to in-memory streams.

    Returns:
        Callable returning (logger, stdout, stderr)
    """

    def factory(**config):
        stdout, stderr = io.StringIO(), io.StringIO()
        logger = StructuredLogger(
            LoggerConfig(**config),
            stdout=stdout,
            stderr=stderr,
        )
        return logger, stdout, stderr

    return factory
