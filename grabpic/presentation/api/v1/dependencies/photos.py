from grabpic.application.use_cases.grab_pic import GrabPicUseCase
from grabpic.core.config import resolve_access_key
from grabpic.infrastructure.adapters import UnsplashPhotoSearch


def get_grab_pic_use_case() -> GrabPicUseCase:
    """Compose the GrabPicUseCase at Presentation layer with the Unsplash adapter."""
    return GrabPicUseCase(UnsplashPhotoSearch())


def get_access_key() -> str:
    """Server-side credential; empty string when none is configured."""
    return resolve_access_key()
