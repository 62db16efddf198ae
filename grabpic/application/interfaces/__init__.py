from .photo_search import IPhotoSearch

__all__ = [
    "IPhotoSearch",
]
