import json

import pytest

import grabpic.utils.unsplash_utils as uu
from grabpic.core.exceptions import (
    ApiError,
    ApiErrorReason,
    InvalidAccessKeyError,
    NoResultsFoundError,
    RateLimitExceededError,
)
from grabpic.core.pyd_schemas import ImageSize, Orientation, SearchOptions


def test_build_search_params_without_orientation():
    params = uu.build_search_params("mountains", "KEY", SearchOptions(count=3))
    assert params == {"query": "mountains", "per_page": "3", "client_id": "KEY"}


def test_build_search_params_with_orientation():
    params = uu.build_search_params(
        "mountains", "KEY", SearchOptions(orientation=Orientation.squarish)
    )
    assert params["orientation"] == "squarish"
    assert params["per_page"] == "5"


def test_build_search_params_trims_query_and_key():
    params = uu.build_search_params("  mountains ", " KEY  ", SearchOptions())
    assert params["query"] == "mountains"
    assert params["client_id"] == "KEY"


def test_build_headers():
    assert uu.build_headers("v1", "GrabPic-Library/1.0") == {
        "Accept-Version": "v1",
        "User-Agent": "GrabPic-Library/1.0",
    }
    assert uu.build_headers("v1", "") == {"Accept-Version": "v1"}
    assert uu.build_headers("v1") == {"Accept-Version": "v1"}


class TestCheckResponseStatus:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_passes(self, status):
        assert uu.check_response_status(status, "OK") is None

    def test_401_is_invalid_access_key(self):
        with pytest.raises(InvalidAccessKeyError) as e:
            uu.check_response_status(401, "Unauthorized")
        assert e.value.status_code == 401

    def test_403_is_rate_limit(self):
        with pytest.raises(RateLimitExceededError) as e:
            uu.check_response_status(403, "Forbidden")
        assert e.value.status_code == 429

    def test_404_is_endpoint_not_found(self):
        with pytest.raises(ApiError) as e:
            uu.check_response_status(404, "Not Found")
        assert e.value.reason is ApiErrorReason.NOT_FOUND
        assert e.value.status_code == 404

    @pytest.mark.parametrize("status,reason", [(500, "Internal Server Error"), (502, "Bad Gateway"), (418, "I'm a Teapot")])
    def test_other_status_is_api_error_with_code_and_text(self, status, reason):
        with pytest.raises(ApiError) as e:
            uu.check_response_status(status, reason)
        assert e.value.reason is ApiErrorReason.HTTP_ERROR
        assert e.value.status_code == status
        assert str(status) in e.value.message
        assert reason in e.value.message

    def test_missing_reason_phrase(self):
        with pytest.raises(ApiError) as e:
            uu.check_response_status(500, None)
        assert e.value.message == "Unsplash API error: 500"


class TestParseSearchBody:
    def test_returns_results(self, photo_factory):
        body = json.dumps({"results": [photo_factory("a")], "total": 1, "total_pages": 1})
        assert uu.parse_search_body(body) == [photo_factory("a")]

    def test_accepts_bytes(self):
        assert uu.parse_search_body(b'{"results": []}') == []

    @pytest.mark.parametrize("body", ["<html>oops</html>", "", b"\xff\xfe\x00garbage", "{'results': []}"])
    def test_unparseable_body_is_parse_error(self, body):
        with pytest.raises(ApiError) as e:
            uu.parse_search_body(body)
        assert e.value.reason is ApiErrorReason.PARSE_ERROR
        assert e.value.status_code == 500
        assert isinstance(e.value.cause, ValueError)

    @pytest.mark.parametrize(
        "payload",
        [{}, {"results": None}, {"results": {"id": "a"}}, {"results": "a,b"}, [], ["results"], 42],
    )
    def test_missing_or_non_list_results_is_malformed(self, payload):
        with pytest.raises(ApiError) as e:
            uu.parse_search_body(json.dumps(payload))
        assert e.value.reason is ApiErrorReason.MALFORMED_RESPONSE


class TestExtractPhotoUrls:
    def test_picks_requested_size_in_order(self, photo_factory):
        results = [photo_factory("a"), photo_factory("b"), photo_factory("c")]
        urls = uu.extract_photo_urls(results, ImageSize.thumb)
        assert urls == [
            "https://images.unsplash.com/a?size=thumb",
            "https://images.unsplash.com/b?size=thumb",
            "https://images.unsplash.com/c?size=thumb",
        ]

    def test_falls_back_to_regular_then_full(self, photo_factory):
        results = [
            photo_factory("a", small=None),
            photo_factory("b", small=None, regular=None),
        ]
        urls = uu.extract_photo_urls(results, ImageSize.small)
        assert urls == [
            "https://images.unsplash.com/a?size=regular",
            "https://images.unsplash.com/b?size=full",
        ]

    def test_records_without_usable_url_are_dropped(self, photo_factory):
        results = [
            {"id": "no-urls"},
            photo_factory("ok"),
            photo_factory("only-raw", full=None, regular=None, small=None, thumb=None),
            "not-a-photo",
            None,
            {"id": "empty", "urls": {"regular": ""}},
        ]
        assert uu.extract_photo_urls(results, ImageSize.small) == [
            "https://images.unsplash.com/ok?size=small"
        ]

    @pytest.mark.parametrize(
        "record",
        [
            {"id": 12345, "urls": {"small": "https://x/small"}},
            {"id": "a", "urls": {"small": "https://x/small", "raw": 7}},
            {"id": "a", "urls": {"small": "https://x/small"}, "description": 3},
            {"id": None, "urls": {"small": "https://x/small", "thumb": None}, "alt_description": ["x"]},
        ],
    )
    def test_unrelated_fields_do_not_drop_the_record(self, record):
        assert uu.extract_photo_urls([record], ImageSize.small) == ["https://x/small"]

    def test_non_string_requested_tier_falls_back(self):
        record = {"id": "a", "urls": {"small": 42, "regular": "https://x/regular"}}
        assert uu.extract_photo_urls([record], ImageSize.small) == ["https://x/regular"]

    def test_normalize_empty_results_is_no_results_with_query(self):
        with pytest.raises(NoResultsFoundError) as e:
            uu.normalize_search_results([], "purple unicorns", ImageSize.regular)
        assert "purple unicorns" in e.value.message
        assert e.value.query == "purple unicorns"
        assert e.value.status_code == 404

    def test_normalize_without_any_url_is_no_valid_urls(self):
        with pytest.raises(ApiError) as e:
            uu.normalize_search_results([{"id": "x"}, {"id": "y"}], "cats", ImageSize.raw)
        assert e.value.reason is ApiErrorReason.NO_VALID_URLS
        assert "raw" in e.value.message
