"""
Contrôleur lightbox — visionneuse plein écran au-dessus de l'index d'images.

État : images, current_index, is_open. next/prev bouclent aux deux extrémités ;
close() ne vide pas l'état (une réouverture pendant l'animation ne clignote pas).
"""
from typing import List, Optional, Sequence

from .image_index import get_image_index
from .schemas import LightboxImage

KEY_NEXT = "ArrowRight"
KEY_PREV = "ArrowLeft"
KEY_CLOSE = "Escape"


class LightboxController:

    def __init__(self):
        self.images: List[LightboxImage] = []
        self.current_index: int = 0
        self.is_open: bool = False

    @property
    def current(self) -> Optional[LightboxImage]:
        if not self.images:
            return None
        return self.images[self.current_index]

    def open(self, images: Sequence[LightboxImage], start_index: int = 0):
        self.images = list(images)
        if self.images:
            self.current_index = max(0, min(start_index, len(self.images) - 1))
        else:
            self.current_index = 0
        self.is_open = True

    def open_at(self, images: Sequence[LightboxImage], url: str):
        """Ouvre sur l'image d'URL `url` (première occurrence, 0 si absente)."""
        self.open(images, get_image_index(images, url))

    def close(self):
        self.is_open = False

    def next(self):
        n = len(self.images)
        if n == 0:
            return
        self.current_index = (self.current_index + 1) % n

    def prev(self):
        n = len(self.images)
        if n == 0:
            return
        self.current_index = (self.current_index - 1 + n) % n

    def handle_key(self, key: str) -> bool:
        """
        Clavier. Ouverte : ←/→/Échap sont consommées (True) pour ne pas
        atteindre la vue parente. Fermée : rien n'est intercepté.
        """
        if not self.is_open:
            return False
        if key == KEY_NEXT:
            self.next()
        elif key == KEY_PREV:
            self.prev()
        elif key == KEY_CLOSE:
            self.close()
        else:
            return False
        return True
