"""
Brouillon d'édition d'une œuvre — copie distincte de la valeur validée jusqu'au "Save".
"""
from typing import Optional

from ..core.schemas import WorkItem
from .block_list import BlockListEditor

_EDITABLE_FIELDS = ("title", "description", "tools", "image")


class WorkDraft:
    """
    Brouillon d'un WorkItem : champs + séquence de blocs (via BlockListEditor).

    `committed` n'est jamais touché par l'édition ; `save()` produit le nouveau
    WorkItem validé, `discard()` revient à `committed`.
    """

    def __init__(self, work: WorkItem):
        self.committed = work
        self._reset()

    def _reset(self):
        self.fields = {name: getattr(self.committed, name) for name in _EDITABLE_FIELDS}
        self.fields["tools"] = list(self.fields["tools"])
        self.editor = BlockListEditor(self.committed.blocks)
        self._had_blocks = self.committed.content_blocks is not None

    def update_fields(self, **changes) -> dict:
        for name, value in changes.items():
            if name in _EDITABLE_FIELDS and value is not None:
                self.fields[name] = list(value) if name == "tools" else value
        return self.fields

    def to_work(self) -> WorkItem:
        blocks = self.editor.blocks
        content_blocks: Optional[list] = list(blocks) if (blocks or self._had_blocks) else None
        return self.committed.model_copy(update={**self.fields, "content_blocks": content_blocks})

    @property
    def has_changes(self) -> bool:
        return self.to_work().to_json_dict() != self.committed.to_json_dict()

    def save(self) -> WorkItem:
        self.committed = self.to_work()
        self._reset()
        return self.committed

    def discard(self) -> WorkItem:
        self._reset()
        return self.committed
