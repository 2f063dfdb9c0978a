"""
Factory de blocs — instance par défaut bien formée pour chaque variante.
"""
import logging
import uuid
from typing import Iterable

from ..blocks import (
    BaseBlock, UnknownBlock, ImageSlot, VideoEntry, ImageCollectionBlock,
    HeroImageBlock, TextBlock, ImageFullBlock, ImageTextBlock,
    ImageGrid2Block, ImageGrid3Block, ImageGrid6Block, GalleryBlock,
    QuoteBlock, SpacerBlock, VideoBlock, VideoGridBlock,
)

log = logging.getLogger(__name__)


def new_block_id(taken: Iterable[str] = ()) -> str:
    """Identifiant `blk_xxxxxxx` absent de `taken`."""
    taken = set(taken)
    while True:
        bid = "blk_" + uuid.uuid4().hex[:7]
        if bid not in taken:
            return bid


def _empty_slots(count: int) -> list:
    return [ImageSlot(url="", caption="") for _ in range(count)]


def create_block(block_type: str, taken: Iterable[str] = ()) -> BaseBlock:
    """
    Crée un bloc neuf (id unique + valeurs par défaut de la variante).

    Type inconnu → bloc minimal {id, type} : jamais d'exception,
    le jeu de types peut s'étendre plus tard.
    """
    bid = new_block_id(taken)

    if block_type == "hero-image":
        return HeroImageBlock(id=bid, image="", heading="", body="")
    if block_type == "text":
        return TextBlock(id=bid, heading="", body="", alignment="center")
    if block_type == "image-full":
        return ImageFullBlock(id=bid, image="", caption="")
    if block_type == "image-grid-2":
        return ImageGrid2Block(id=bid, images=_empty_slots(2))
    if block_type == "image-grid-3":
        return ImageGrid3Block(id=bid, images=_empty_slots(3))
    if block_type == "image-grid-6":
        return ImageGrid6Block(id=bid, images=_empty_slots(6))
    if block_type == "image-text":
        return ImageTextBlock(id=bid, image="", heading="", body="", text_side="right")
    if block_type == "quote":
        return QuoteBlock(id=bid, quote="", author="")
    if block_type == "spacer":
        return SpacerBlock(id=bid, size="md")
    if block_type == "gallery":
        return GalleryBlock(id=bid, images=_empty_slots(1))
    if block_type == "video":
        return VideoBlock(id=bid, video_url="", heading="", body="", caption="", autoplay=False, loop=False)
    if block_type == "video-grid":
        return VideoGridBlock(id=bid, heading="", videos=[VideoEntry(url="", caption="")])

    log.warning("create_block : type inconnu %r, bloc minimal créé", block_type)
    return UnknownBlock(id=bid, type=str(block_type))


def pad_slots(block: BaseBlock) -> BaseBlock:
    """
    Grilles : complète `images` jusqu'au nombre de slots fixe (sans jamais tronquer).
    Autres variantes : retournées telles quelles.
    """
    if not isinstance(block, ImageCollectionBlock) or block.SLOTS is None:
        return block
    missing = block.SLOTS - len(block.images)
    if missing <= 0:
        return block
    return block.model_copy(update={"images": list(block.images) + _empty_slots(missing)})
