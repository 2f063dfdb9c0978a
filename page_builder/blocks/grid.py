"""
Blocs grille — Image Grid 2/3/6 (nombre de slots fixe) et Gallery (slots illimités).

SLOTS : nombre de cellules d'une grille ; None pour la galerie.
L'éditeur complète `images` jusqu'à SLOTS ; le rendu et la lightbox parcourent toutes les entrées.
"""
from typing import ClassVar, List, Literal, Optional
from pydantic import Field
from .base import BaseBlock, ImageSlot


class ImageCollectionBlock(BaseBlock):
    """Parent commun des variantes portant une liste d'images."""
    SLOTS: ClassVar[Optional[int]] = None

    images: List[ImageSlot] = Field(default_factory=list)
    gap: int = 4


class ImageGrid2Block(ImageCollectionBlock):
    SLOTS: ClassVar[Optional[int]] = 2
    type: Literal["image-grid-2"] = "image-grid-2"
    gap: int = 8


class ImageGrid3Block(ImageCollectionBlock):
    SLOTS: ClassVar[Optional[int]] = 3
    type: Literal["image-grid-3"] = "image-grid-3"
    gap: int = 6


class ImageGrid6Block(ImageCollectionBlock):
    SLOTS: ClassVar[Optional[int]] = 6
    type: Literal["image-grid-6"] = "image-grid-6"
    gap: int = 4


class GalleryBlock(ImageCollectionBlock):
    type: Literal["gallery"] = "gallery"
    gap: int = 4
