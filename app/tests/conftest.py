import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.localization`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.localization import LocalizationOptions  # noqa: E402
from infrastructure.services import (  # noqa: E402
    get_localization_options,
    get_settings,
)
from tests.factories.localization import make_localization_options  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_service_caches():
    """Application-scoped singletons are rebuilt for every test."""
    get_settings.cache_clear()
    get_localization_options.cache_clear()
    yield
    get_settings.cache_clear()
    get_localization_options.cache_clear()


@pytest.fixture
def localization_options() -> LocalizationOptions:
    """Options with the built-in defaults: vi, [en, vi], route provider."""
    return make_localization_options()


@pytest.fixture
def all_providers_options() -> LocalizationOptions:
    """Options consulting every built-in provider, headers enabled."""
    return make_localization_options(
        providers=["query_string", "cookie", "accept_language", "route"],
        supported_cultures=["en", "en-US", "vi", "fr"],
        supported_ui_cultures=["en", "vi", "fr"],
        apply_headers=True,
    )
