"""
Library entry points.

``grab_pic`` raises ``GrabPicError`` on failure; ``grab_pic_response`` returns
a ``GrabPicResponse`` envelope and never raises. Both take the access key as
an argument; use ``grabpic.core.config.resolve_access_key`` to source it from
the environment.
"""

from __future__ import annotations

from typing import Any, Optional

import aiohttp

from grabpic.application.result import GrabPictureResult
from grabpic.application.use_cases.grab_pic import GrabPicUseCase
from grabpic.application.validators import OptionsInput
from grabpic.core.pyd_schemas import GrabPicResponse
from grabpic.infrastructure.adapters import UnsplashPhotoSearch


def get_grab_pic_use_case(
    session: Optional[aiohttp.ClientSession] = None,
) -> GrabPicUseCase:
    """Compose the use case with the Unsplash adapter."""
    return GrabPicUseCase(UnsplashPhotoSearch(session))


async def grab_pic(
    query: Any,
    access_key: Any,
    options: OptionsInput = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> GrabPictureResult:
    """Search Unsplash and return the photo URLs.

    Args:
        query: Search term, at most 200 characters
        access_key: Unsplash access key
        options: Mapping with optional ``count`` (1-30, default 5),
            ``orientation`` (landscape/portrait/squarish) and ``size``
            (raw/full/regular/small/thumb, default regular)
        session: Optional aiohttp session to issue the request on

    Returns:
        GrabPictureResult with the URLs in relevance order

    Raises:
        GrabPicError: one subclass per failure kind

    Example:
        >>> photos = await grab_pic("mountains", key, {"count": 2, "size": "small"})
        >>> photos.one()
    """
    return await get_grab_pic_use_case(session).execute(query, access_key, options)


async def grab_pic_response(
    query: Any,
    access_key: Any,
    options: OptionsInput = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> GrabPicResponse:
    """Same search as :func:`grab_pic`, reported as an envelope."""
    return await get_grab_pic_use_case(session).execute_envelope(query, access_key, options)
