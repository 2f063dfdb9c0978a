"""
Machine à états du glisser-déposer de l'éditeur de blocs.

    idle ──start──▶ dragging(source) ──over──▶ hovering(source, target, side)
      ▲                 │  ▲                      │ over (autre cible) / leave
      └──end/cancel─────┘  └──────────────────────┘
      └──drop (toujours retour à idle)────────────┘

L'algorithme lui-même (core.reorder) reste indépendant de cet état.
Un drag terminé sans drop valide laisse la séquence strictement inchangée.
"""
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

from ..core.reorder import DropSide, reorder, should_show_indicator

log = logging.getLogger(__name__)

T = TypeVar("T")


class DragPhase(str, Enum):
    IDLE     = "idle"
    DRAGGING = "dragging"
    HOVERING = "hovering"


_TRANSITIONS: Dict[str, List[str]] = {
    "idle":     ["dragging"],
    "dragging": ["dragging", "hovering", "idle"],
    "hovering": ["hovering", "dragging", "idle"],
}


def can_transition(current: str, target: str) -> bool:
    return target in _TRANSITIONS.get(current, [])


class DragState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: DragPhase = DragPhase.IDLE
    source: Optional[int] = None
    target: Optional[int] = None
    side: Optional[DropSide] = None

    @property
    def indicator(self) -> Optional[Tuple[int, DropSide]]:
        """(cible, côté) de l'indicateur de dépôt, ou None s'il doit être masqué."""
        if self.phase != DragPhase.HOVERING:
            return None
        if not should_show_indicator(self.source, self.target, self.side):
            return None
        return self.target, self.side


_IDLE = DragState()


class DragController:
    """Pilote DragState à partir des événements drag-start / drag-over / drop / drag-end."""

    def __init__(self):
        self.state: DragState = _IDLE

    @property
    def phase(self) -> DragPhase:
        return self.state.phase

    @property
    def indicator(self) -> Optional[Tuple[int, DropSide]]:
        return self.state.indicator

    def _go(self, new_state: DragState) -> bool:
        if not can_transition(self.state.phase.value, new_state.phase.value):
            log.debug("drag : transition %s → %s refusée", self.state.phase.value, new_state.phase.value)
            return False
        self.state = new_state
        return True

    def start(self, source_index: int, length: int) -> bool:
        """Nouveau geste : remplace tout drag en cours."""
        if not 0 <= source_index < length:
            return False
        return self._go(DragState(phase=DragPhase.DRAGGING, source=source_index))

    def over(self, target_index: int, side: DropSide) -> bool:
        if self.state.phase == DragPhase.IDLE:
            return False
        return self._go(DragState(
            phase=DragPhase.HOVERING, source=self.state.source, target=target_index, side=side,
        ))

    def leave(self) -> bool:
        """Le pointeur quitte le bloc survolé : retour à dragging, indicateur effacé."""
        if self.state.phase != DragPhase.HOVERING:
            return False
        return self._go(DragState(phase=DragPhase.DRAGGING, source=self.state.source))

    def drop(self, items: Sequence[T]) -> List[T]:
        """Applique le dépôt s'il y a une cible ; sinon séquence inchangée. Toujours retour à idle."""
        state = self.state
        self.state = _IDLE
        if state.phase != DragPhase.HOVERING:
            log.debug("drop sans cible : drag annulé")
            return list(items)
        return reorder(items, state.source, state.target, state.side)

    def end(self):
        """Fin de drag sans drop (relâché hors cible, annulation plateforme)."""
        self.state = _IDLE

    cancel = end
