"""
Blocs — exports publics, BlockUnion discriminé par `type` et registry des variantes.
"""
import logging
from typing import Annotated, Any, Dict, Union
from pydantic import Field, TypeAdapter, ValidationError

from .base import BaseBlock, CamelModel, ImageSlot, VideoEntry, UnknownBlock
from .hero import HeroImageBlock
from .text import TextBlock, QuoteBlock, SpacerBlock
from .image import ImageFullBlock, ImageTextBlock
from .grid import ImageCollectionBlock, ImageGrid2Block, ImageGrid3Block, ImageGrid6Block, GalleryBlock
from .video import VideoBlock, VideoGridBlock

log = logging.getLogger(__name__)

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeroImageBlock,
        TextBlock,
        ImageFullBlock,
        ImageGrid2Block,
        ImageGrid3Block,
        ImageGrid6Block,
        ImageTextBlock,
        QuoteBlock,
        SpacerBlock,
        GalleryBlock,
        VideoBlock,
        VideoGridBlock,
    ],
    Field(discriminator="type"),
]

# Ordre = ordre du menu "Add Content Block" de l'éditeur
BLOCK_REGISTRY: Dict[str, type] = {
    "hero-image":   HeroImageBlock,
    "text":         TextBlock,
    "image-full":   ImageFullBlock,
    "image-grid-2": ImageGrid2Block,
    "image-grid-3": ImageGrid3Block,
    "image-grid-6": ImageGrid6Block,
    "image-text":   ImageTextBlock,
    "quote":        QuoteBlock,
    "spacer":       SpacerBlock,
    "gallery":      GalleryBlock,
    "video":        VideoBlock,
    "video-grid":   VideoGridBlock,
}

BLOCK_TYPES = tuple(BLOCK_REGISTRY)

BLOCK_CATALOG: Dict[str, Dict[str, str]] = {
    "hero-image":   {"label": "Hero Image",    "description": "Full-width hero with title overlay"},
    "text":         {"label": "Text",          "description": "Heading and body text"},
    "image-full":   {"label": "Full Image",    "description": "Full-width single image"},
    "image-grid-2": {"label": "2-Column Grid", "description": "Two images side by side"},
    "image-grid-3": {"label": "3-Column Grid", "description": "Three images in a row"},
    "image-grid-6": {"label": "6-Image Grid",  "description": "Six images in two rows"},
    "image-text":   {"label": "Image + Text",  "description": "Image and text side by side"},
    "quote":        {"label": "Quote",         "description": "Pull quote with author"},
    "spacer":       {"label": "Spacer",        "description": "Visual spacer / divider"},
    "gallery":      {"label": "Photo Gallery", "description": "Masonry photo gallery"},
    "video":        {"label": "Video",         "description": "Embedded video (YouTube, Vimeo, file)"},
    "video-grid":   {"label": "Video Grid",    "description": "Several videos in a grid"},
}


_BLOCK_ADAPTER = TypeAdapter(BlockUnion)


def block_label(block_type: str) -> str:
    return BLOCK_CATALOG.get(block_type, {}).get("label", block_type)


def parse_block(data: Any) -> BaseBlock | None:
    """
    Instancie un bloc depuis son dict JSON.

    Type inconnu ou champs invalides → UnknownBlock (champs bruts conservés, rendu vide).
    Valeur qui n'est pas un objet → None (ignorée par l'appelant).
    """
    if isinstance(data, BaseBlock):
        return data
    if not isinstance(data, dict):
        log.warning("Bloc ignoré (pas un objet JSON) : %r", data)
        return None

    block_type = data.get("type")
    if isinstance(block_type, str) and block_type in BLOCK_REGISTRY:
        try:
            return _BLOCK_ADAPTER.validate_python(data)
        except ValidationError as e:
            log.warning("Bloc %s (%s) mal formé : %s", data.get("id"), data.get("type"), e.error_count())
    else:
        log.warning("Type de bloc inconnu : %r (id=%s)", data.get("type"), data.get("id"))

    try:
        return UnknownBlock.model_validate(data)
    except ValidationError:
        # id/type eux-mêmes invalides : on ne garde que l'identité
        return UnknownBlock(id=str(data.get("id", "")), type=str(data.get("type", "")))


__all__ = [
    "BaseBlock", "CamelModel", "ImageSlot", "VideoEntry", "UnknownBlock",
    "HeroImageBlock", "TextBlock", "QuoteBlock", "SpacerBlock",
    "ImageFullBlock", "ImageTextBlock",
    "ImageCollectionBlock", "ImageGrid2Block", "ImageGrid3Block", "ImageGrid6Block", "GalleryBlock",
    "VideoBlock", "VideoGridBlock",
    "BlockUnion", "BLOCK_REGISTRY", "BLOCK_TYPES", "BLOCK_CATALOG",
    "block_label", "parse_block",
]
