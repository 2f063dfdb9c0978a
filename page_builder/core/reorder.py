"""
Algorithme de réordonnancement (glisser-déposer) — fonctions pures.

    insert = target si side == "above" sinon target + 1
    insert == dragged ou dragged + 1  → no-op (drag annulé)
    sinon : retrait à dragged, insert -= 1 si dragged < insert, insertion.

Les listes d'entrée ne sont jamais modifiées : chaque appel retourne une nouvelle liste.
"""
import logging
from typing import List, Literal, Sequence, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")
DropSide = Literal["above", "below"]


def compute_insert_index(target_index: int, side: DropSide) -> int:
    return target_index if side == "above" else target_index + 1


def is_noop_drop(dragged_index: int, insert_index: int) -> bool:
    return insert_index == dragged_index or insert_index == dragged_index + 1


def drop_side(pointer_y: float, target_top: float, target_height: float) -> DropSide:
    """Au-dessus du milieu vertical du bloc survolé → "above", sinon "below"."""
    return "above" if pointer_y < target_top + target_height / 2 else "below"


def should_show_indicator(dragged_index: int, target_index: int, side: DropSide) -> bool:
    """Indicateur de dépôt masqué sur le bloc traîné lui-même et sur tout dépôt no-op."""
    if target_index == dragged_index:
        return False
    return not is_noop_drop(dragged_index, compute_insert_index(target_index, side))


def reorder(items: Sequence[T], dragged_index: int, target_index: int, side: DropSide) -> List[T]:
    result = list(items)
    n = len(result)
    if not (0 <= dragged_index < n and 0 <= target_index < n):
        log.debug("reorder : indices hors bornes (%s → %s, n=%d), drag annulé", dragged_index, target_index, n)
        return result

    insert_index = compute_insert_index(target_index, side)
    if is_noop_drop(dragged_index, insert_index):
        return result

    moved = result.pop(dragged_index)
    if dragged_index < insert_index:
        insert_index -= 1
    result.insert(insert_index, moved)
    return result


def move_to(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """L'élément en `from_index` se retrouve en `to_index` (exprimé via reorder)."""
    if to_index > from_index:
        return reorder(items, from_index, to_index, "below")
    if to_index < from_index:
        return reorder(items, from_index, to_index, "above")
    return list(items)
