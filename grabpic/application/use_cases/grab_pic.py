from __future__ import annotations

import logging
from typing import Any

from grabpic.application.interfaces import IPhotoSearch
from grabpic.application.result import GrabPictureResult
from grabpic.application.validators import OptionsInput, validate_search_request
from grabpic.core.exceptions import GrabPicError, UnknownError
from grabpic.core.pyd_schemas import GrabPicResponse

logger = logging.getLogger(__name__)


class GrabPicUseCase:
    """Validate a search, run it through the photo-search adapter, wrap the URLs.

    Two entry points, one contract each:
    - ``execute`` raises ``GrabPicError`` on every failure.
    - ``execute_envelope`` never raises and reports failures in a
      ``GrabPicResponse``.
    """

    def __init__(self, photo_search: IPhotoSearch) -> None:
        self._photo_search = photo_search

    async def execute(
        self, query: Any, access_key: Any, options: OptionsInput = None
    ) -> GrabPictureResult:
        options_ = validate_search_request(query, access_key, options)

        try:
            # Passed as given; the adapter trims what it sends and reports
            # the caller's query in its errors
            urls = await self._photo_search.search_photos(query, access_key, options_)
        except GrabPicError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while searching photos")
            raise UnknownError(
                str(e) or "An unexpected error occurred while fetching images"
            ) from e

        return GrabPictureResult(urls)

    async def execute_envelope(
        self, query: Any, access_key: Any, options: OptionsInput = None
    ) -> GrabPicResponse:
        try:
            result = await self.execute(query, access_key, options)
        except GrabPicError as e:
            return error_response(e)

        return GrabPicResponse(
            success=True,
            data=result.all(),
            status_code=200,
            message=f"Successfully fetched {len(result)} image(s)",
        )


def error_response(error: GrabPicError) -> GrabPicResponse:
    """Envelope describing a failed search."""
    return GrabPicResponse(
        success=False,
        error=error.message,
        status_code=error.status_code,
        message=error.summary,
        error_type=error.error_type.value,
    )
