from pydantic import ConfigDict

from app.models.camel_model import CamelModel


class CreatePost(CamelModel):
    titulo: str | None = None
    img: str | None = None
    descripcion: str | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def missing_fields(self) -> list[str]:
        return [name for name in ("titulo", "img", "descripcion") if not getattr(self, name)]
