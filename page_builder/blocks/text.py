"""Blocs texte — Text (titre + corps), Quote (citation), Spacer (séparateur)."""
from typing import Literal, Optional
from .base import BaseBlock


class TextBlock(BaseBlock):
    type: Literal["text"] = "text"
    heading: Optional[str] = None
    body: Optional[str] = None
    alignment: Literal["left", "center", "right"] = "center"


class QuoteBlock(BaseBlock):
    type: Literal["quote"] = "quote"
    quote: Optional[str] = None
    author: Optional[str] = None


class SpacerBlock(BaseBlock):
    """Pas de contenu — uniquement un espacement vertical."""
    type: Literal["spacer"] = "spacer"
    size: Literal["sm", "md", "lg"] = "md"
