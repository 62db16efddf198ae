from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Orientation(str, Enum):
    landscape = "landscape"
    portrait = "portrait"
    squarish = "squarish"


class ImageSize(str, Enum):
    raw = "raw"
    full = "full"
    regular = "regular"
    small = "small"
    thumb = "thumb"


class SearchOptions(BaseModel):
    """Validated, defaulted search options. Built by the validators."""

    model_config = ConfigDict(frozen=True)

    count: int = 5
    orientation: Optional[Orientation] = None
    size: ImageSize = ImageSize.regular


class UnsplashPhoto(BaseModel):
    """One entry of the search ``results`` list."""

    model_config = ConfigDict(extra="ignore")

    id: Any = None
    # Tier name to URL; only the tier being extracted has to be a string
    urls: Optional[Dict[str, Any]] = None
    alt_description: Any = None
    description: Any = None


class UnsplashSearchResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: List[Any]
    total: Optional[int] = None
    total_pages: Optional[int] = None


class GrabPicResponse(BaseModel):
    """Uniform envelope returned by the non-raising entry points."""

    success: bool
    data: Optional[List[str]] = None
    error: Optional[str] = None
    status_code: int
    message: Optional[str] = None
    error_type: Optional[str] = None
