from pydantic import Field, computed_field

from app.models.camel_model import CamelModel


class Post(CamelModel):
    id: int
    titulo: str
    img: str
    descripcion: str
    likes: int = Field(default=0, ge=0)


class ShortenedUrl(CamelModel):
    url: str
    original_url: str

    @computed_field
    @property
    def shortened(self) -> bool:
        return self.url != self.original_url

    @classmethod
    def unchanged(cls, url: str) -> "ShortenedUrl":
        return cls.model_construct(url=url, original_url=url)
