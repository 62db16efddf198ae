from pydantic import BaseModel


class RandomPhotoResponse(BaseModel):
    url: str
