"""
Aurora Page Builder — blocs de contenu des études de cas portfolio.

Usage (lecture / rendu):
    >>> from page_builder import WorkItem, TeamMember, render_work_page
    >>> member = TeamMember.model_validate(json.load(f))
    >>> html = render_work_page(member.works[0], member)

Usage (édition):
    >>> from page_builder import WorkDraft
    >>> draft = WorkDraft(work)
    >>> block = draft.editor.add("image-grid-3")
    >>> draft.editor.drag.start(2, len(draft.editor.blocks))
    >>> draft.editor.drag.over(0, "above")
    >>> draft.editor.drop()
    >>> work = draft.save()
"""

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, CamelModel, ImageSlot, VideoEntry, UnknownBlock,
    HeroImageBlock, TextBlock, QuoteBlock, SpacerBlock,
    ImageFullBlock, ImageTextBlock,
    ImageCollectionBlock, ImageGrid2Block, ImageGrid3Block, ImageGrid6Block, GalleryBlock,
    VideoBlock, VideoGridBlock,
    BlockUnion, BLOCK_REGISTRY, BLOCK_TYPES, BLOCK_CATALOG,
    block_label, parse_block,
)

# ── Core ─────────────────────────────────────────────────────────────────────
from .core import (
    LightboxImage, WorkItem, TeamMember, Social, SiteContent,
    create_block, new_block_id, pad_slots,
    collect_all_images, get_image_index,
    LightboxController,
    compute_insert_index, is_noop_drop, drop_side, should_show_indicator,
    reorder, move_to,
)

# ── Éditeur ──────────────────────────────────────────────────────────────────
from .editor import BlockListEditor, DragController, DragPhase, DragState, WorkDraft

# ── Rendu ────────────────────────────────────────────────────────────────────
from .renderer.html import render_block, render_blocks, render_work, render_work_page

__version__ = "0.3.0"

__all__ = [
    # blocs
    "BaseBlock", "CamelModel", "ImageSlot", "VideoEntry", "UnknownBlock",
    "HeroImageBlock", "TextBlock", "QuoteBlock", "SpacerBlock",
    "ImageFullBlock", "ImageTextBlock",
    "ImageCollectionBlock", "ImageGrid2Block", "ImageGrid3Block", "ImageGrid6Block", "GalleryBlock",
    "VideoBlock", "VideoGridBlock",
    "BlockUnion", "BLOCK_REGISTRY", "BLOCK_TYPES", "BLOCK_CATALOG",
    "block_label", "parse_block",
    # core
    "LightboxImage", "WorkItem", "TeamMember", "Social", "SiteContent",
    "create_block", "new_block_id", "pad_slots",
    "collect_all_images", "get_image_index",
    "LightboxController",
    "compute_insert_index", "is_noop_drop", "drop_side", "should_show_indicator",
    "reorder", "move_to",
    # éditeur
    "BlockListEditor", "DragController", "DragPhase", "DragState", "WorkDraft",
    # rendu
    "render_block", "render_blocks", "render_work", "render_work_page",
]
