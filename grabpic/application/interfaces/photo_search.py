from __future__ import annotations

from typing import List, Protocol

from grabpic.core.pyd_schemas import SearchOptions


class IPhotoSearch(Protocol):
    """Adapter for searching photo URLs by query.

    Implementations call Unsplash (or a fake in tests). The application layer
    hands over validated but untrimmed input and gets back the ordered URL
    list, or a ``GrabPicError`` describing why there is none. Implementations
    trim what they send and quote the query as given in their errors.
    """

    async def search_photos(
        self, query: str, access_key: str, options: SearchOptions
    ) -> List[str]:
        """Return one URL per result at ``options.size``, in API order."""
        ...
