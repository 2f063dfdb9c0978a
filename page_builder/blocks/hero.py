"""Bloc Hero Image — image pleine largeur avec titre/sous-titre en surimpression."""
from typing import Literal, Optional
from .base import BaseBlock


class HeroImageBlock(BaseBlock):
    type: Literal["hero-image"] = "hero-image"
    image: str = ""
    heading: Optional[str] = None
    body: Optional[str] = None
    caption: Optional[str] = None
