from .application.result import GrabPictureResult
from .client import grab_pic, grab_pic_response
from .core.exceptions import (
    ApiError,
    ApiErrorReason,
    GrabPicError,
    GrabPicErrorType,
    InvalidAccessKeyError,
    InvalidCountError,
    MissingAccessKeyError,
    MissingQueryError,
    NetworkError,
    NoResultsFoundError,
    RateLimitExceededError,
    UnknownError,
)
from .core.pyd_schemas import GrabPicResponse, ImageSize, Orientation, SearchOptions

__all__ = [
    "grab_pic",
    "grab_pic_response",
    "GrabPictureResult",
    "GrabPicResponse",
    "SearchOptions",
    "Orientation",
    "ImageSize",
    "GrabPicError",
    "GrabPicErrorType",
    "ApiErrorReason",
    "MissingQueryError",
    "MissingAccessKeyError",
    "InvalidAccessKeyError",
    "InvalidCountError",
    "RateLimitExceededError",
    "NoResultsFoundError",
    "NetworkError",
    "ApiError",
    "UnknownError",
]
