"""
Blocs de base pour page_builder.
BaseBlock discriminé par `type` + sous-éléments partagés (slots image, entrées vidéo).

Sérialisation JSON en camelCase (textSide, videoUrl, objectX…) — les noms de champs
et les valeurs d'enum doivent rester stables entre save/load.
"""
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]


class CamelModel(BaseModel):
    """Modèle à alias camelCase, alimentable par nom Python ou par alias."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _clamp(value: Optional[Number], low: int, high: int) -> Optional[Number]:
    if value is None:
        return None
    return max(low, min(high, value))


class ImageSlot(CamelModel):
    """Image d'une grille / galerie. zoom en %, objectX/objectY = point focal du recadrage (%)."""
    url: str = ""
    caption: Optional[str] = None
    zoom: Optional[Number] = None
    object_x: Optional[Number] = None
    object_y: Optional[Number] = None

    # Hors bornes → ramené dans l'intervalle (un slot invalide ne casse pas la page)
    @field_validator("zoom")
    @classmethod
    def _clamp_zoom(cls, v):
        return _clamp(v, 100, 200)

    @field_validator("object_x", "object_y")
    @classmethod
    def _clamp_focus(cls, v):
        return _clamp(v, 0, 100)


class VideoEntry(CamelModel):
    url: str = ""
    caption: Optional[str] = None


class BaseBlock(CamelModel):
    """Bloc de base (classe parente de toutes les variantes)."""
    model_config = ConfigDict(extra="allow")

    id: str
    type: str


class UnknownBlock(BaseBlock):
    """Bloc de type inconnu ou mal formé — conservé tel quel, jamais rendu."""
    id: str = ""
    type: str = ""
