"""Unit tests for per-request culture negotiation."""

import pytest

from infrastructure.localization.models import RequestCulture
from infrastructure.localization.negotiation import negotiate
from tests.factories.localization import (
    StaticCultureProvider,
    make_localization_options,
    make_request,
)


@pytest.mark.unit
class TestNegotiateDefaults:
    """Negotiation with the built-in defaults: vi, [en, vi], route provider."""

    def test_route_culture_is_used(self, localization_options):
        feature = negotiate(make_request("/en/Home/Index"), localization_options)

        assert feature.request_culture == RequestCulture("en", "en")
        assert feature.provider_name == "route"

    def test_route_parent_culture_is_used(self, localization_options):
        feature = negotiate(make_request("/en-US/Home"), localization_options)

        assert feature.request_culture == RequestCulture("en", "en")

    def test_route_culture_without_cldr_data_uses_parent(self, localization_options):
        feature = negotiate(make_request("/en-VN/Home/Index"), localization_options)

        assert feature.request_culture == RequestCulture("en", "en")
        assert feature.provider_name == "route"

    def test_unsupported_route_culture_defaults(self, localization_options):
        feature = negotiate(make_request("/fr/Home"), localization_options)

        assert feature.request_culture == RequestCulture("vi", "vi")
        assert feature.provider is None

    def test_non_culture_segment_defaults(self, localization_options):
        feature = negotiate(make_request("/health"), localization_options)

        assert feature.request_culture == RequestCulture("vi", "vi")
        assert feature.provider_name is None

    def test_root_path_defaults(self, localization_options):
        feature = negotiate(make_request("/"), localization_options)

        assert feature.request_culture == RequestCulture("vi", "vi")


@pytest.mark.unit
class TestNegotiateProviderOrder:
    """The first provider with a usable result decides."""

    def test_first_matching_provider_wins(self):
        first = StaticCultureProvider(["en"], name="first")
        second = StaticCultureProvider(["vi"], name="second")
        options = make_localization_options(providers=[first, second])

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en")
        assert feature.provider is first
        assert second.calls == 0

    def test_provider_without_signal_is_skipped(self):
        silent = StaticCultureProvider(name="silent")
        second = StaticCultureProvider(["vi"], name="second")
        options = make_localization_options(providers=[silent, second])

        feature = negotiate(make_request(), options)

        assert feature.provider is second
        assert silent.calls == 1

    def test_unmatched_provider_is_skipped(self):
        unmatched = StaticCultureProvider(["fr", "de"], name="unmatched")
        second = StaticCultureProvider(["en"], name="second")
        options = make_localization_options(providers=[unmatched, second])

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en")
        assert feature.provider is second

    def test_partial_match_stops_negotiation(self):
        # culture matches, UI culture does not: the default fills the UI side
        partial = StaticCultureProvider(["en"], ["fr"], name="partial")
        full = StaticCultureProvider(["vi"], ["en"], name="full")
        options = make_localization_options(providers=[partial, full])

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en", "vi")
        assert feature.provider is partial
        assert full.calls == 0

    def test_ui_culture_only_match_defaults_culture(self):
        provider = StaticCultureProvider(["fr"], ["en"])
        options = make_localization_options(providers=[provider])

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("vi", "en")

    def test_candidates_tried_in_order(self):
        provider = StaticCultureProvider(["fr", "vi-VN", "en"])
        options = make_localization_options(providers=[provider])

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("vi")

    def test_no_providers_defaults(self):
        options = make_localization_options(providers=[])

        feature = negotiate(make_request("/en"), options)

        assert feature.request_culture == RequestCulture("vi")
        assert feature.provider is None

    def test_default_ui_culture_is_used(self):
        options = make_localization_options(
            default_culture="en", default_ui_culture="vi", providers=[]
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en", "vi")


@pytest.mark.unit
class TestNegotiateSupportedCultures:
    """Supported lists and fallback flags."""

    def test_supported_spelling_is_returned(self):
        provider = StaticCultureProvider(["EN-us"])
        options = make_localization_options(
            supported_cultures=["en-US"], supported_ui_cultures=["en-US"],
            providers=[provider],
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en-US")

    def test_fallback_disabled_for_cultures(self):
        provider = StaticCultureProvider(["en-US"])
        options = make_localization_options(
            fallback_to_parent_cultures=False, providers=[provider]
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("vi", "en")

    def test_fallback_disabled_for_ui_cultures(self):
        provider = StaticCultureProvider(["en-US"])
        options = make_localization_options(
            fallback_to_parent_ui_cultures=False, providers=[provider]
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("en", "vi")

    def test_unset_supported_cultures_disable_matching(self):
        provider = StaticCultureProvider(["en"])
        options = make_localization_options(
            supported_cultures=None, providers=[provider]
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("vi", "en")
        assert feature.provider is provider

    def test_no_supported_cultures_at_all_defaults(self):
        provider = StaticCultureProvider(["en"])
        options = make_localization_options(
            supported_cultures=None, supported_ui_cultures=None, providers=[provider]
        )

        feature = negotiate(make_request(), options)

        assert feature.request_culture == RequestCulture("vi")
        assert feature.provider is None


@pytest.mark.unit
class TestNegotiateBuiltInProviders:
    """End-to-end negotiation through the built-in providers."""

    def test_query_string_beats_later_providers(self, all_providers_options):
        request = make_request(
            "/vi/Home",
            query={"culture": "fr"},
            headers={"Accept-Language": "en"},
            cookies={"request-culture": "c=en|uic=en"},
        )

        feature = negotiate(request, all_providers_options)

        assert feature.request_culture == RequestCulture("fr")
        assert feature.provider_name == "query_string"

    def test_cookie_used_without_query_string(self, all_providers_options):
        request = make_request(
            "/vi/Home",
            headers={"Accept-Language": "fr"},
            cookies={"request-culture": "c=en-US|uic=en-US"},
        )

        feature = negotiate(request, all_providers_options)

        # en-US is supported as a culture, only its parent as a UI culture
        assert feature.request_culture == RequestCulture("en-US", "en")
        assert feature.provider_name == "cookie"

    def test_accept_language_used_before_route(self, all_providers_options):
        request = make_request(
            "/vi/Home", headers={"Accept-Language": "de, fr-CA;q=0.8"}
        )

        feature = negotiate(request, all_providers_options)

        assert feature.request_culture == RequestCulture("fr")
        assert feature.provider_name == "accept_language"

    def test_route_used_last(self, all_providers_options):
        feature = negotiate(make_request("/vi/Home"), all_providers_options)

        assert feature.request_culture == RequestCulture("vi")
        assert feature.provider_name == "route"

    def test_malformed_signals_default(self, all_providers_options):
        request = make_request(
            "/not-a-culture",
            query={"culture": "%%%"},
            headers={"Accept-Language": "123, ;q=x"},
            cookies={"request-culture": "garbage"},
        )

        feature = negotiate(request, all_providers_options)

        assert feature.request_culture == RequestCulture("vi")
        assert feature.provider is None

    def test_negotiation_does_not_modify_request(self, localization_options):
        request = make_request("/en")

        negotiate(request, localization_options)

        assert "state" not in request.scope
