"""
Schémas Pydantic du site studio.
Structure : SiteContent + TeamMember → WorkItem → contentBlocks (BaseBlock…)

Aller-retour JSON sans perte : dump via `to_json_dict()` (alias camelCase, champs None omis).
"""
from typing import Any, List, Optional
from pydantic import Field, SerializeAsAny, field_validator

from ..blocks import BaseBlock, CamelModel, parse_block


class LightboxImage(CamelModel):
    """Image navigable dans la lightbox (dérivée des blocs, jamais stockée)."""
    url: str
    caption: Optional[str] = None


class WorkItem(CamelModel):
    """Étude de cas portfolio. Sans contentBlocks → rendu AutoLayout (image + description)."""
    id: str
    title: str = ""
    description: str = ""
    tools: List[str] = Field(default_factory=list)
    image: str = ""
    content_blocks: Optional[List[SerializeAsAny[BaseBlock]]] = None

    @field_validator("content_blocks", mode="before")
    @classmethod
    def _parse_blocks(cls, v: Any):
        if v is None:
            return None
        if not isinstance(v, list):
            return []
        return [b for b in (parse_block(item) for item in v) if b is not None]

    @property
    def blocks(self) -> List[BaseBlock]:
        return list(self.content_blocks or [])

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Social(CamelModel):
    platform: str
    url: str = "#"


class TeamMember(CamelModel):
    id: str
    name: str = ""
    first_name: str = ""
    role: str = ""
    tagline: str = ""
    skills: List[str] = Field(default_factory=list)
    accent_color: str = "#6366F1"
    accent_color_rgb: str = Field(default="99, 102, 241", alias="accentColorRGB")
    email: str = ""
    socials: List[Social] = Field(default_factory=list)
    works: List[WorkItem] = Field(default_factory=list)
    avatar: str = ""

    def get_work(self, work_id: str) -> Optional[WorkItem]:
        return next((w for w in self.works if w.id == work_id), None)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SiteContent(CamelModel):
    """Textes éditables du site (hero, sections, contact)."""
    studio_name: str = "Aurora"
    studio_tagline: str = "Creative Multimedia Studio"
    hero_subtitle: str = "We design, animate, capture, and create."
    hero_description: str = "Five creatives. One vision."
    contact_email: str = "hello@aurorastudio.com"
    contact_heading: str = "Let's Create"
    contact_description: str = "Have a project in mind? We'd love to hear from you."
    disciplines: List[str] = Field(default_factory=lambda: ["Design", "3D", "Video", "Modelling", "Photo"])
    team_section_title: str = "Meet the Team"
    team_section_subtitle: str = "The Collective"
    team_section_description: str = "Five creatives, each mastering their craft."
    works_section_title: str = "Selected Works"
    works_section_subtitle: str = "Portfolio"

    def merged(self, partial: dict) -> "SiteContent":
        """Nouvelle instance = valeurs courantes + champs fournis (clés camelCase ou snake_case)."""
        data = self.model_dump(by_alias=True)
        fields = SiteContent.model_fields
        for key, value in (partial or {}).items():
            field = fields.get(key)
            data[field.alias if field is not None and field.alias else key] = value
        return SiteContent.model_validate(data)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
