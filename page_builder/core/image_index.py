"""
Index d'images — liste aplatie et ordonnée de toutes les images d'une œuvre (navigation lightbox).

Ordre : ordre des blocs, puis ordre des slots dans le bloc. Jamais de tri.
Aucune image → couverture seule, légende "Cover".
"""
from typing import List, Optional, Sequence

from ..blocks import BaseBlock, HeroImageBlock, ImageFullBlock, ImageTextBlock, ImageCollectionBlock
from .schemas import LightboxImage

COVER_CAPTION = "Cover"
HERO_CAPTION = "Hero"


def _single_image_caption(block: BaseBlock) -> Optional[str]:
    if isinstance(block, HeroImageBlock):
        return block.heading if block.heading is not None else HERO_CAPTION
    return block.caption or block.heading or None


def collect_all_images(blocks: Sequence[BaseBlock], cover_image: str = "") -> List[LightboxImage]:
    images: List[LightboxImage] = []

    for block in blocks or []:
        if isinstance(block, (HeroImageBlock, ImageFullBlock, ImageTextBlock)):
            if block.image:
                images.append(LightboxImage(url=block.image, caption=_single_image_caption(block)))
        elif isinstance(block, ImageCollectionBlock):
            for slot in block.images:
                if slot.url:
                    images.append(LightboxImage(url=slot.url, caption=slot.caption))

    if not images and cover_image:
        images.append(LightboxImage(url=cover_image, caption=COVER_CAPTION))
    return images


def get_image_index(images: Sequence[LightboxImage], url: str) -> int:
    """Position de la première image d'URL `url` ; 0 si absente (référence périmée tolérée)."""
    for i, img in enumerate(images):
        if img.url == url:
            return i
    return 0
