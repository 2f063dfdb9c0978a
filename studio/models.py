"""
Data models — stockage clé/valeur du contenu du site
SQLAlchemy (SQLite) : une ligne par document JSON (site, équipe)
"""
from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ── ENUMS ──────────────────────────────────────────────────────────────

class DataSource(str, Enum):
    """Origine du contenu courant (affichée dans l'admin)."""
    DEFAULT   = "default"
    STORE     = "localStorage"
    DATA_JSON = "data.json"


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class KeyValueDB(Base):
    __tablename__ = "kv_store"
    key:        Mapped[str]      = mapped_column(sa.String, primary_key=True)
    value:      Mapped[str]      = mapped_column(sa.Text, nullable=False, default="null")
    updated_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
