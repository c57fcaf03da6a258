"""Settings stand-in for the logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    settings = Mock(spec=Settings)
    settings.PREFIX = ""
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc1234"
    settings.is_production = False
    return settings
