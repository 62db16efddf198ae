"""
Input validation for photo searches.

Checks run in a fixed order (query, access key, options) and the first
violation is raised; nothing is aggregated.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from grabpic.core.exceptions import (
    InvalidAccessKeyError,
    InvalidCountError,
    MissingAccessKeyError,
    MissingQueryError,
)
from grabpic.core.pyd_schemas import ImageSize, Orientation, SearchOptions

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 200
MIN_ACCESS_KEY_LENGTH = 20
MIN_COUNT = 1
MAX_COUNT = 30
DEFAULT_COUNT = 5
DEFAULT_SIZE = ImageSize.regular

OptionsInput = Union[SearchOptions, Mapping[str, Any], None]


def validate_query(query: Any) -> None:
    """Validate the search query.

    Raises:
        MissingQueryError: if the query is absent, not a string, blank, or
            longer than 200 characters once trimmed.
    """
    if not query or not isinstance(query, str):
        raise MissingQueryError(
            "Query parameter is required and must be a non-empty string"
        )

    trimmed = query.strip()
    if not trimmed:
        raise MissingQueryError(
            "Query parameter cannot be empty or contain only whitespace"
        )

    if len(trimmed) > MAX_QUERY_LENGTH:
        raise MissingQueryError(
            f"Query parameter is too long (maximum {MAX_QUERY_LENGTH} characters)"
        )


def validate_access_key(access_key: Any) -> None:
    """Validate the Unsplash access key.

    The length check is a structural heuristic (real keys are 43-64 chars),
    not a proof the key works.
    """
    if not access_key or not isinstance(access_key, str):
        raise MissingAccessKeyError(
            "Unsplash access key is required and must be a string"
        )

    trimmed = access_key.strip()
    if not trimmed:
        raise MissingAccessKeyError(
            "Unsplash access key cannot be empty or contain only whitespace"
        )

    if len(trimmed) < MIN_ACCESS_KEY_LENGTH:
        raise InvalidAccessKeyError(
            "Unsplash access key appears to be invalid (too short)"
        )


def _validate_count(count: Any) -> int:
    if count is None:
        return DEFAULT_COUNT
    # bool is an int subclass; True must not pass as count=1
    if isinstance(count, float) and count.is_integer():
        count = int(count)
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError("Count parameter must be an integer")
    if count < MIN_COUNT or count > MAX_COUNT:
        raise InvalidCountError(
            f"Count parameter must be between {MIN_COUNT} and {MAX_COUNT} "
            "(Unsplash API limitation)"
        )
    return count


def _validate_orientation(orientation: Any) -> Optional[Orientation]:
    if orientation is None:
        return None
    try:
        return Orientation(orientation)
    except ValueError:
        allowed = ", ".join(o.value for o in Orientation)
        raise InvalidCountError(
            f'Invalid orientation "{orientation}". Must be one of: {allowed}'
        ) from None


def _validate_size(size: Any) -> ImageSize:
    if size is None:
        return DEFAULT_SIZE
    try:
        return ImageSize(size)
    except ValueError:
        allowed = ", ".join(s.value for s in ImageSize)
        raise InvalidCountError(
            f'Invalid size "{size}". Must be one of: {allowed}'
        ) from None


def validate_and_normalize_options(options: OptionsInput = None) -> SearchOptions:
    """Validate ``count``, ``orientation`` and ``size`` and apply defaults.

    Args:
        options: ``None``, a mapping with any of the three keys, or an
            existing :class:`SearchOptions`. The mapping is never modified.

    Returns:
        SearchOptions: ``count`` defaults to 5, ``size`` to ``regular``;
        ``orientation`` stays ``None`` (no filter) unless supplied.

    Raises:
        InvalidCountError: for any invalid option, including orientation and size.
    """
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        options = options.model_dump()
    if not isinstance(options, Mapping):
        raise InvalidCountError("Options must be a mapping of count, orientation and size")

    unknown = set(options) - {"count", "orientation", "size"}
    if unknown:
        logger.debug("Ignoring unknown search options: %s", sorted(unknown))

    count = _validate_count(options.get("count"))
    orientation = _validate_orientation(options.get("orientation"))
    size = _validate_size(options.get("size"))

    return SearchOptions(count=count, orientation=orientation, size=size)


def validate_search_request(
    query: Any, access_key: Any, options: OptionsInput = None
) -> SearchOptions:
    """Run every check in order and return the normalized options."""
    validate_query(query)
    validate_access_key(access_key)
    return validate_and_normalize_options(options)
