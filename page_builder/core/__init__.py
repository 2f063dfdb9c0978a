"""Core module pour page_builder — schémas, factory, index d'images, lightbox, réordonnancement."""
from .schemas import LightboxImage, WorkItem, TeamMember, Social, SiteContent
from .factory import create_block, new_block_id, pad_slots
from .image_index import collect_all_images, get_image_index
from .lightbox import LightboxController
from .reorder import (
    DropSide,
    compute_insert_index,
    is_noop_drop,
    drop_side,
    should_show_indicator,
    reorder,
    move_to,
)

__all__ = [
    "LightboxImage",
    "WorkItem",
    "TeamMember",
    "Social",
    "SiteContent",
    "create_block",
    "new_block_id",
    "pad_slots",
    "collect_all_images",
    "get_image_index",
    "LightboxController",
    "DropSide",
    "compute_insert_index",
    "is_noop_drop",
    "drop_side",
    "should_show_indicator",
    "reorder",
    "move_to",
]
