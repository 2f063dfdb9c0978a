"""SQLite — engine + session + helpers clé/valeur"""
import json, os
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base, KeyValueDB

DATA_DIR = Path(__file__).parent.parent / "data"


def db_path() -> str:
    return os.getenv("DB_PATH", str(DATA_DIR / "studio.db"))


def make_engine(path: Optional[str] = None) -> Engine:
    path = path or db_path()
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})


def init_db(engine: Engine) -> sessionmaker:
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ── JSON helpers ──
def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Key / value ──
def db_get_value(db: Session, key: str) -> Optional[str]:
    row = db.get(KeyValueDB, key)
    return row.value if row else None

def db_set_value(db: Session, key: str, value: Any) -> KeyValueDB:
    row = db.get(KeyValueDB, key)
    if row is None:
        row = KeyValueDB(key=key, value=jd(value))
        db.add(row)
    else:
        row.value = jd(value)
    db.commit(); db.refresh(row); return row

def db_delete_value(db: Session, key: str):
    row = db.get(KeyValueDB, key)
    if row is not None:
        db.delete(row); db.commit()
