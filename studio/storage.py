"""
ContentStore — contenu du site (réglages + équipe) persisté en SQLite.

Deux documents JSON sous des clés fixes :
  aurora_site_content  → SiteContent (fusionné sur les valeurs d'usine à la lecture)
  aurora_team_members  → [TeamMember]

Cycle de vie explicite : open() / close() (injecté dans l'app au startup).
Un document illisible est journalisé puis remplacé par les valeurs d'usine.
"""
import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from page_builder.core.schemas import SiteContent, TeamMember, WorkItem

from .database import db_delete_value, db_get_value, db_set_value, init_db, make_engine
from .models import DataSource
from .seed import default_site_content, default_team_members

log = logging.getLogger(__name__)

SITE_CONTENT_KEY = "aurora_site_content"
TEAM_MEMBERS_KEY = "aurora_team_members"


def _decode(raw: Optional[str], key: str) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        log.warning("Store : document %s illisible, valeurs d'usine utilisées", key)
        return None


class ContentStore:

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._engine: Optional[Engine] = None
        self._sessions: Optional[sessionmaker] = None
        self._site: SiteContent = default_site_content()
        self._team: List[TeamMember] = default_team_members()
        self.data_source: DataSource = DataSource.DEFAULT

    # ── Cycle de vie ──────────────────────────────────────────────────────

    def open(self) -> "ContentStore":
        if self._engine is not None:
            return self
        self._engine = make_engine(self.path)
        self._sessions = init_db(self._engine)
        self._load()
        log.info("ContentStore ouvert (%s, source=%s)", self._engine.url.database, self.data_source.value)
        return self

    def close(self):
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        log.info("ContentStore fermé")

    def __enter__(self) -> "ContentStore":
        return self.open()

    def __exit__(self, *exc):
        self.close()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _session(self) -> Session:
        if self._sessions is None:
            raise RuntimeError("ContentStore non ouvert")
        return self._sessions()

    def _load(self):
        with self._session() as db:
            site = _decode(db_get_value(db, SITE_CONTENT_KEY), SITE_CONTENT_KEY)
            team = _decode(db_get_value(db, TEAM_MEMBERS_KEY), TEAM_MEMBERS_KEY)

        loaded = False
        self._site = default_site_content()
        if isinstance(site, dict):
            try:
                self._site = self._site.merged(site)
                loaded = True
            except ValidationError as e:
                log.warning("Store : réglages du site invalides (%d erreurs), valeurs d'usine", e.error_count())

        self._team = default_team_members()
        if isinstance(team, list):
            try:
                self._team = [TeamMember.model_validate(m) for m in team]
                loaded = True
            except ValidationError as e:
                log.warning("Store : équipe invalide (%d erreurs), valeurs d'usine", e.error_count())

        self.data_source = DataSource.STORE if loaded else DataSource.DEFAULT

    def _persist_site(self):
        with self._session() as db:
            db_set_value(db, SITE_CONTENT_KEY, self._site.to_json_dict())

    def _persist_team(self):
        with self._session() as db:
            db_set_value(db, TEAM_MEMBERS_KEY, [m.to_json_dict() for m in self._team])

    # ── Lecture ───────────────────────────────────────────────────────────

    @property
    def site_content(self) -> SiteContent:
        return self._site

    @property
    def team_members(self) -> List[TeamMember]:
        return list(self._team)

    def get_member(self, member_id: str) -> Optional[TeamMember]:
        return next((m for m in self._team if m.id == member_id), None)

    def get_work(self, member_id: str, work_id: str) -> Optional[WorkItem]:
        member = self.get_member(member_id)
        return member.get_work(work_id) if member else None

    # ── Écriture ──────────────────────────────────────────────────────────

    def update_site_content(self, partial: dict) -> SiteContent:
        """Fusion superficielle : seuls les champs fournis changent."""
        self._site = self._site.merged(partial)
        self._persist_site()
        self.data_source = DataSource.STORE
        return self._site

    def update_team_members(self, members: List[Any]) -> List[TeamMember]:
        self._team = [m if isinstance(m, TeamMember) else TeamMember.model_validate(m) for m in members]
        self._persist_team()
        self.data_source = DataSource.STORE
        return self.team_members

    def update_team_member(self, member_id: str, partial: dict) -> Optional[TeamMember]:
        """Fusionne `partial` (clés JSON) sur le membre `member_id` ; None si absent."""
        member = self.get_member(member_id)
        if member is None:
            return None
        updated = TeamMember.model_validate({**member.to_json_dict(), **partial, "id": member_id})
        self._team = [updated if m.id == member_id else m for m in self._team]
        self._persist_team()
        self.data_source = DataSource.STORE
        return updated

    def replace_work(self, member_id: str, work: WorkItem) -> Optional[TeamMember]:
        """Remplace l'œuvre de même id chez `member_id` ; None si membre ou œuvre absent."""
        member = self.get_member(member_id)
        if member is None or member.get_work(work.id) is None:
            return None
        works = [work if w.id == work.id else w for w in member.works]
        updated = member.model_copy(update={"works": works})
        self._team = [updated if m.id == member_id else m for m in self._team]
        self._persist_team()
        self.data_source = DataSource.STORE
        return updated

    def reset_to_defaults(self):
        with self._session() as db:
            db_delete_value(db, SITE_CONTENT_KEY)
            db_delete_value(db, TEAM_MEMBERS_KEY)
        self._site = default_site_content()
        self._team = default_team_members()
        self.data_source = DataSource.DEFAULT
        log.info("ContentStore réinitialisé aux valeurs d'usine")

    def mark_source(self, source: DataSource):
        self.data_source = source
