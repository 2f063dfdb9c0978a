"""Blocs image seule — Image Full (image + légende) et Image + Text (deux colonnes)."""
from typing import Literal, Optional
from .base import BaseBlock


class ImageFullBlock(BaseBlock):
    type: Literal["image-full"] = "image-full"
    image: str = ""
    heading: Optional[str] = None
    body: Optional[str] = None
    caption: Optional[str] = None


class ImageTextBlock(BaseBlock):
    type: Literal["image-text"] = "image-text"
    image: str = ""
    heading: Optional[str] = None
    body: Optional[str] = None
    caption: Optional[str] = None
    text_side: Literal["left", "right"] = "right"
