from .photo_search_unsplash import UnsplashPhotoSearch

__all__ = [
    "UnsplashPhotoSearch",
]
