import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from grabpic.application.use_cases.grab_pic import GrabPicUseCase, error_response
from grabpic.core.exceptions import MissingAccessKeyError
from grabpic.core.pyd_schemas import GrabPicResponse
from grabpic.presentation.api.v1.dependencies.photos import (
    get_access_key,
    get_grab_pic_use_case,
)
from grabpic.presentation.api.v1.schemas.photos import RandomPhotoResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/photos", tags=["photos"])


def _count(raw: Optional[str]) -> Union[int, str, None]:
    # Non-numeric text goes through as-is so the validator reports INVALID_COUNT
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


def _options(count: Optional[str], orientation: Optional[str], size: Optional[str]) -> dict:
    # Omitted query params fall back to the validator defaults
    return {"count": _count(count), "orientation": orientation, "size": size}


def _key_not_configured() -> MissingAccessKeyError:
    logger.error("Unsplash access key is not configured")
    return MissingAccessKeyError(
        "Unsplash access key not configured. Please set UNSPLASH_ACCESS_KEY "
        "or NEXT_PUBLIC_UNSPLASH_ACCESS_KEY environment variable",
        status_code=500,
    )


@router.get("/search", response_model=GrabPicResponse)
async def search_photos(
    query: str = Query(""),
    count: Optional[str] = Query(None),
    orientation: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    access_key: str = Depends(get_access_key),
    use_case: GrabPicUseCase = Depends(get_grab_pic_use_case),
):
    """Search photos and answer with the envelope; HTTP status mirrors ``status_code``."""
    if not access_key:
        envelope = error_response(_key_not_configured())
    else:
        envelope = await use_case.execute_envelope(
            query, access_key, _options(count, orientation, size)
        )

    return JSONResponse(
        status_code=envelope.status_code,
        content=envelope.model_dump(exclude_none=True),
    )


@router.get("/random", response_model=RandomPhotoResponse)
async def random_photo(
    query: str = Query(""),
    count: Optional[str] = Query(None),
    orientation: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    access_key: str = Depends(get_access_key),
    use_case: GrabPicUseCase = Depends(get_grab_pic_use_case),
):
    """Pick one photo at random; failures go through the GrabPicError handler."""
    if not access_key:
        raise _key_not_configured()
    result = await use_case.execute(query, access_key, _options(count, orientation, size))
    return RandomPhotoResponse(url=result.random())
