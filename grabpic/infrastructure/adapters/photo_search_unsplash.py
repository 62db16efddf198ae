from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import aiohttp

from grabpic.application.interfaces import IPhotoSearch
from grabpic.core.config import settings
from grabpic.core.exceptions import NetworkError
from grabpic.core.pyd_schemas import SearchOptions
from grabpic.utils.unsplash_utils import (
    build_headers,
    build_search_params,
    check_response_status,
    normalize_search_results,
    parse_search_body,
)

logger = logging.getLogger(__name__)


class UnsplashPhotoSearch(IPhotoSearch):
    """IPhotoSearch implementation using the Unsplash search API.

    Issues exactly one GET per search. When no ``session`` is given a
    short-lived ``aiohttp.ClientSession`` is opened and closed around the
    request; a caller-supplied session is used as-is and left open, which is
    how callers attach their own timeout or connector.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        *,
        api_url: Optional[str] = None,
        accept_version: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.session = session
        self.api_url = api_url or settings.unsplash_api_url
        self.accept_version = accept_version or settings.unsplash_accept_version
        self.user_agent = (
            settings.unsplash_user_agent if user_agent is None else user_agent
        )

    async def search_photos(
        self, query: str, access_key: str, options: SearchOptions
    ) -> List[str]:
        params = build_search_params(query, access_key, options)
        headers = build_headers(self.accept_version, self.user_agent)
        logger.debug(
            "Searching Unsplash: query=%r per_page=%s orientation=%s size=%s",
            query,
            options.count,
            options.orientation.value if options.orientation else None,
            options.size.value,
        )

        try:
            if self.session is not None:
                body = await self._fetch(self.session, params, headers)
            else:
                async with aiohttp.ClientSession() as session:
                    body = await self._fetch(session, params, headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Failed to reach Unsplash API: %s", str(e) or type(e).__name__)
            raise NetworkError(
                "Network error: Unable to connect to Unsplash API. "
                "Please check your internet connection",
                details={"exception": type(e).__name__},
            ) from e

        results = parse_search_body(body)
        urls = normalize_search_results(results, query, options.size)
        logger.debug("Unsplash returned %d usable URL(s) for %r", len(urls), query)
        return urls

    async def _fetch(self, session, params: dict, headers: dict) -> bytes:
        """GET the search endpoint; return the body of a 2xx response."""
        async with session.get(self.api_url, params=params, headers=headers) as response:
            check_response_status(response.status, response.reason)
            return await response.read()
