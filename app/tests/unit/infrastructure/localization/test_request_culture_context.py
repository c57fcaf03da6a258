"""Unit tests for publishing and reading the request culture."""

import pytest
from starlette.datastructures import MutableHeaders

from infrastructure.localization.context import (
    CONTENT_LANGUAGE_HEADER,
    REQUEST_CULTURE_STATE_KEY,
    apply_request_culture,
    get_current_culture,
    get_current_request_culture,
    get_current_ui_culture,
    get_request_culture,
    reset_request_culture,
    write_content_language,
)
from infrastructure.localization.errors import (
    CultureNegotiationNotRunError,
    LocalizationError,
    RequestCultureAlreadySetError,
    RequestCultureNotSetError,
)
from infrastructure.localization.models import RequestCulture, RequestCultureFeature
from tests.factories.localization import make_localization_options, make_request


@pytest.fixture
def feature():
    return RequestCultureFeature(RequestCulture("en-US", "vi"))


@pytest.mark.unit
class TestApplyRequestCulture:
    """Tests for apply_request_culture() and reset_request_culture()."""

    def test_publishes_feature_and_ambient_culture(self, feature):
        request = make_request("/en-US")

        token = apply_request_culture(request, feature)
        try:
            assert request.scope["state"][REQUEST_CULTURE_STATE_KEY] is feature
            assert get_request_culture(request) is feature
            assert get_current_request_culture() == RequestCulture("en-US", "vi")
            assert get_current_culture() == "en-US"
            assert get_current_ui_culture() == "vi"
        finally:
            reset_request_culture(token)

    def test_reset_restores_previous_ambient_culture(self, feature):
        assert get_current_culture() is None

        token = apply_request_culture(make_request(), feature)
        reset_request_culture(token)

        assert get_current_request_culture() is None
        assert get_current_ui_culture() is None

    def test_feature_visible_through_request_state(self, feature):
        request = make_request()

        token = apply_request_culture(request, feature)
        try:
            assert getattr(request.state, REQUEST_CULTURE_STATE_KEY) is feature
        finally:
            reset_request_culture(token)

    def test_second_apply_raises(self, feature):
        request = make_request()
        token = apply_request_culture(request, feature)
        try:
            with pytest.raises(RequestCultureAlreadySetError):
                apply_request_culture(
                    request, RequestCultureFeature(RequestCulture("vi"))
                )

            assert get_request_culture(request) is feature
            assert get_current_culture() == "en-US"
        finally:
            reset_request_culture(token)

    def test_apply_without_result_raises(self):
        request = make_request()

        with pytest.raises(CultureNegotiationNotRunError):
            apply_request_culture(request, None)

        assert "state" not in request.scope or (
            REQUEST_CULTURE_STATE_KEY not in request.scope["state"]
        )

    def test_invariant_culture_is_published(self):
        request = make_request()
        token = apply_request_culture(
            request, RequestCultureFeature(RequestCulture(""))
        )
        try:
            assert get_current_culture() == ""
            assert get_current_ui_culture() == ""
        finally:
            reset_request_culture(token)

    def test_errors_share_base_class(self):
        for error in (
            CultureNegotiationNotRunError,
            RequestCultureAlreadySetError,
            RequestCultureNotSetError,
        ):
            assert issubclass(error, LocalizationError)


@pytest.mark.unit
class TestGetRequestCulture:
    """Tests for get_request_culture()."""

    def test_raises_when_nothing_published(self):
        with pytest.raises(RequestCultureNotSetError, match="middleware"):
            get_request_culture(make_request())

    def test_ambient_culture_is_none_outside_requests(self):
        assert get_current_request_culture() is None
        assert get_current_culture() is None


@pytest.mark.unit
class TestWriteContentLanguage:
    """Tests for write_content_language()."""

    def test_writes_ui_culture_when_enabled(self, feature):
        headers = MutableHeaders()
        options = make_localization_options(apply_headers=True)

        write_content_language(headers, feature, options)

        assert headers[CONTENT_LANGUAGE_HEADER] == "vi"

    def test_replaces_existing_header(self, feature):
        headers = MutableHeaders({"Content-Language": "fr"})
        options = make_localization_options(apply_headers=True)

        write_content_language(headers, feature, options)

        assert headers.getlist("content-language") == ["vi"]

    def test_leaves_headers_untouched_when_disabled(self, feature):
        headers = MutableHeaders({"Content-Type": "text/plain"})
        options = make_localization_options(apply_headers=False)

        write_content_language(headers, feature, options)

        assert CONTENT_LANGUAGE_HEADER not in headers
        assert dict(headers) == {"content-type": "text/plain"}
