"""
Unsplash search utilities.

Request construction, status/body interpretation and URL extraction for the
``/search/photos`` endpoint. Transport errors are left to the caller.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from grabpic.core.exceptions import (
    ApiError,
    ApiErrorReason,
    InvalidAccessKeyError,
    NoResultsFoundError,
    RateLimitExceededError,
)
from grabpic.core.pyd_schemas import (
    ImageSize,
    SearchOptions,
    UnsplashPhoto,
    UnsplashSearchResponse,
)

logger = logging.getLogger(__name__)

# Tried in order when a photo lacks the requested size
FALLBACK_SIZES = (ImageSize.regular, ImageSize.full)


def build_search_params(
    query: str, access_key: str, options: SearchOptions
) -> Dict[str, str]:
    """Query-string parameters for one search request; query and key are sent trimmed."""
    params = {
        "query": query.strip(),
        "per_page": str(options.count),
        "client_id": access_key.strip(),
    }
    if options.orientation is not None:
        params["orientation"] = options.orientation.value
    return params


def build_headers(accept_version: str, user_agent: Optional[str] = None) -> Dict[str, str]:
    headers = {"Accept-Version": accept_version}
    if user_agent:
        headers["User-Agent"] = user_agent
    return headers


def check_response_status(status: int, reason: Optional[str] = None) -> None:
    """Raise the matching ``GrabPicError`` for a non-2xx status.

    Args:
        status: HTTP status code
        reason: HTTP reason phrase, e.g. "Internal Server Error"
    """
    if 200 <= status < 300:
        return

    logger.warning("Unsplash API responded with %s %s", status, reason or "")

    if status == 401:
        raise InvalidAccessKeyError(
            "Invalid Unsplash access key. Please check your API credentials",
            status_code=401,
        )
    if status == 403:
        raise RateLimitExceededError(
            "Rate limit exceeded or access denied. Please try again later",
            status_code=429,
        )
    if status == 404:
        raise ApiError(
            "Unsplash API endpoint not found",
            status_code=404,
            reason=ApiErrorReason.NOT_FOUND,
        )
    raise ApiError(
        f"Unsplash API error: {status} {reason or ''}".rstrip(),
        status_code=status,
        reason=ApiErrorReason.HTTP_ERROR,
    )


def parse_search_body(body: Union[str, bytes]) -> List[Any]:
    """Decode a search response body and return its ``results`` list.

    Raises:
        ApiError: ``PARSE_ERROR`` if the body isn't JSON,
            ``MALFORMED_RESPONSE`` if ``results`` is missing or not a list.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ApiError(
            "Failed to parse API response",
            reason=ApiErrorReason.PARSE_ERROR,
        ) from e

    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise ApiError(
            "Invalid response structure from Unsplash API",
            reason=ApiErrorReason.MALFORMED_RESPONSE,
        )

    try:
        response = UnsplashSearchResponse.model_validate(data)
    except ValidationError as e:
        raise ApiError(
            "Invalid response structure from Unsplash API",
            reason=ApiErrorReason.MALFORMED_RESPONSE,
        ) from e

    return response.results


def _usable_url(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def extract_photo_url(item: Any, size: ImageSize) -> Optional[str]:
    """URL of ``item`` at ``size``, falling back to regular then full.

    Only the tier URLs are inspected; an odd ``id`` or ``description`` does
    not cost a record its URL.
    """
    try:
        photo = UnsplashPhoto.model_validate(item)
    except ValidationError:
        logger.warning("Skipping unreadable photo record: %r", item)
        return None

    if photo.urls is None:
        logger.warning(f"Missing urls for photo {photo.id}")
        return None

    url = _usable_url(photo.urls.get(size.value))
    if url:
        return url

    logger.warning(f"Missing {size.value} URL for photo {photo.id}")
    for fallback in FALLBACK_SIZES:
        url = _usable_url(photo.urls.get(fallback.value))
        if url:
            return url
    return None


def extract_photo_urls(results: List[Any], size: ImageSize) -> List[str]:
    """One URL per usable record, in the order given."""
    urls: List[str] = []
    for item in results:
        url = extract_photo_url(item, size)
        if url:
            urls.append(url)
    return urls


def normalize_search_results(results: List[Any], query: str, size: ImageSize) -> List[str]:
    """Turn the raw ``results`` list into the final URL list.

    Raises:
        NoResultsFoundError: if the API found nothing.
        ApiError: ``NO_VALID_URLS`` if no record carried a usable URL.
    """
    if not results:
        raise NoResultsFoundError(
            f'No images found for query: "{query}". Try a different search term',
            query=query,
        )

    urls = extract_photo_urls(results, size)
    if not urls:
        raise ApiError(
            f"No valid image URLs found for size: {size.value}",
            reason=ApiErrorReason.NO_VALID_URLS,
        )
    return urls
