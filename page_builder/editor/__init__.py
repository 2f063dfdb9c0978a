"""Éditeur — CRUD de blocs, glisser-déposer, brouillon."""
from .block_list import (
    BlockListEditor,
    add_block,
    update_block,
    remove_block,
    move_block,
    update_image,
    add_image,
    remove_image,
    summary,
)
from .drag import DragController, DragPhase, DragState, can_transition
from .draft import WorkDraft

__all__ = [
    "BlockListEditor",
    "add_block",
    "update_block",
    "remove_block",
    "move_block",
    "update_image",
    "add_image",
    "remove_image",
    "summary",
    "DragController",
    "DragPhase",
    "DragState",
    "can_transition",
    "WorkDraft",
]
