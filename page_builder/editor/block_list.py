"""
Éditeur de liste de blocs — CRUD + déplacement sur une séquence ordonnée.

Aucune opération ne modifie la liste reçue : chacune retourne une nouvelle liste.
L'identité d'un bloc est toujours son `id`, jamais sa position.
`expanded_id` (bloc déplié dans l'UI) n'est pas persisté ; au plus un bloc déplié.
"""
import logging
from typing import List, Literal, Optional, Sequence

from ..blocks import BaseBlock, ImageCollectionBlock, ImageSlot, block_label
from ..core.factory import create_block, pad_slots
from ..core.reorder import move_to
from .drag import DragController

log = logging.getLogger(__name__)


# ── Opérations pures sur la séquence ─────────────────────────────────────────

def add_block(blocks: Sequence[BaseBlock], block_type: str) -> tuple[List[BaseBlock], BaseBlock]:
    new_block = create_block(block_type, taken=(b.id for b in blocks))
    return [*blocks, new_block], new_block


def update_block(blocks: Sequence[BaseBlock], block_id: str, updated: BaseBlock) -> List[BaseBlock]:
    if not any(b.id == block_id for b in blocks):
        log.debug("update_block : id %s absent, séquence inchangée", block_id)
    return [updated if b.id == block_id else b for b in blocks]


def remove_block(blocks: Sequence[BaseBlock], block_id: str) -> List[BaseBlock]:
    return [b for b in blocks if b.id != block_id]


def move_block(blocks: Sequence[BaseBlock], block_id: str, direction: Literal["up", "down"]) -> List[BaseBlock]:
    """Déplace d'un cran ; no-op aux extrémités ou si l'id est absent."""
    index = next((i for i, b in enumerate(blocks) if b.id == block_id), None)
    if index is None:
        return list(blocks)
    swap = index - 1 if direction == "up" else index + 1
    if swap < 0 or swap >= len(blocks):
        return list(blocks)
    return move_to(blocks, index, swap)


# ── Opérations sur les images d'un bloc grille / galerie ─────────────────────

def update_image(block: ImageCollectionBlock, index: int, slot: ImageSlot) -> ImageCollectionBlock:
    block = pad_slots(block)
    images = list(block.images)
    if not 0 <= index < len(images):
        return block
    images[index] = slot
    return block.model_copy(update={"images": images})


def add_image(block: ImageCollectionBlock) -> ImageCollectionBlock:
    """Galerie uniquement : les grilles ont un nombre de slots fixe."""
    if block.SLOTS is not None:
        return block
    return block.model_copy(update={"images": [*block.images, ImageSlot(url="", caption="")]})


def remove_image(block: ImageCollectionBlock, index: int) -> ImageCollectionBlock:
    """Galerie uniquement, et jamais la dernière image."""
    if block.SLOTS is not None or len(block.images) <= 1 or not 0 <= index < len(block.images):
        return block
    return block.model_copy(update={"images": [img for i, img in enumerate(block.images) if i != index]})


def summary(block: BaseBlock) -> str:
    """Ligne de description affichée sous le libellé du bloc dans l'éditeur."""
    for field in ("heading", "quote", "caption"):
        value = getattr(block, field, None)
        if value:
            return value
    if getattr(block, "image", None):
        return "Has image"
    if getattr(block, "video_url", None):
        return "Has video"
    images = getattr(block, "images", None)
    if images:
        return f"{len(images)} images"
    videos = getattr(block, "videos", None)
    if videos:
        return f"{len(videos)} videos"
    size = getattr(block, "size", None)
    if size:
        return f"Size: {size}"
    return "Empty"


# ── Session d'édition ────────────────────────────────────────────────────────

class BlockListEditor:
    """
    Éditeur stateful d'une séquence de blocs : la liste est remplacée
    (jamais modifiée) à chaque opération ; état de dépliage + drag en cours.
    """

    def __init__(self, blocks: Sequence[BaseBlock] = ()):
        self.blocks: List[BaseBlock] = list(blocks)
        self.expanded_id: Optional[str] = None
        self.drag = DragController()

    def get(self, block_id: str) -> Optional[BaseBlock]:
        return next((b for b in self.blocks if b.id == block_id), None)

    def add(self, block_type: str) -> BaseBlock:
        self.blocks, new_block = add_block(self.blocks, block_type)
        self.expanded_id = new_block.id
        return new_block

    def update(self, block_id: str, updated: BaseBlock) -> List[BaseBlock]:
        self.blocks = update_block(self.blocks, block_id, pad_slots(updated))
        return self.blocks

    def remove(self, block_id: str) -> List[BaseBlock]:
        self.blocks = remove_block(self.blocks, block_id)
        if self.expanded_id == block_id:
            self.expanded_id = None
        return self.blocks

    def move(self, block_id: str, direction: Literal["up", "down"]) -> List[BaseBlock]:
        self.blocks = move_block(self.blocks, block_id, direction)
        return self.blocks

    def toggle(self, block_id: str) -> Optional[str]:
        """Déplie `block_id` (replie l'éventuel autre) ; le replie s'il l'était déjà."""
        if self.expanded_id == block_id:
            self.expanded_id = None
        else:
            block = self.get(block_id)
            if block is None:
                return self.expanded_id
            # ouverture d'une grille : slots complétés pour l'édition
            self.blocks = update_block(self.blocks, block_id, pad_slots(block))
            self.expanded_id = block_id
        return self.expanded_id

    def drop(self) -> List[BaseBlock]:
        self.blocks = self.drag.drop(self.blocks)
        return self.blocks

    def items(self) -> List[dict]:
        """Vue liste de l'éditeur (libellé, résumé, état déplié)."""
        return [
            {
                "id": b.id,
                "type": b.type,
                "label": block_label(b.type),
                "summary": summary(b),
                "expanded": b.id == self.expanded_id,
            }
            for b in self.blocks
        ]
