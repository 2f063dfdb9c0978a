"""
Tests ContentStore — SQLite temporaire, fusion sur les valeurs d'usine, reset.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_builder.core.schemas import WorkItem
from studio.database import db_set_value
from studio.models import DataSource
from studio.storage import ContentStore, SITE_CONTENT_KEY, TEAM_MEMBERS_KEY


@pytest.fixture
def db_file(tmp_path):
    return str(tmp_path / "studio.db")


@pytest.fixture
def store(db_file):
    s = ContentStore(db_file).open()
    yield s
    s.close()


class TestLifecycle:
    def test_fresh_store_uses_defaults(self, store):
        assert store.data_source == DataSource.DEFAULT
        assert store.site_content.studio_name == "Aurora"
        assert [m.id for m in store.team_members] == ["gian", "sergs", "lorie", "rica", "erin"]

    def test_closed_store_cannot_write(self, db_file):
        s = ContentStore(db_file)
        with pytest.raises(RuntimeError):
            s.update_site_content({"studioName": "X"})

    def test_context_manager(self, db_file):
        with ContentStore(db_file) as s:
            assert s.is_open
        assert not s.is_open

    def test_db_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "env" / "store.db"
        monkeypatch.setenv("DB_PATH", str(path))
        with ContentStore():
            pass
        assert path.exists()


class TestPersistence:
    def test_site_content_persisted(self, db_file):
        with ContentStore(db_file) as s:
            s.update_site_content({"studioName": "Nova"})
        with ContentStore(db_file) as s:
            assert s.site_content.studio_name == "Nova"
            assert s.site_content.studio_tagline == "Creative Multimedia Studio"
            assert s.data_source == DataSource.STORE

    def test_partial_site_merged_over_defaults(self, store):
        with store._session() as db:
            db_set_value(db, SITE_CONTENT_KEY, {"heroSubtitle": "Hello"})
        store._load()
        assert store.site_content.hero_subtitle == "Hello"
        assert store.site_content.contact_email == "hello@aurorastudio.com"

    def test_corrupt_document_falls_back(self, store):
        from studio.models import KeyValueDB
        with store._session() as db:
            db.add(KeyValueDB(key=TEAM_MEMBERS_KEY, value="{not json"))
            db.commit()
        store._load()
        assert len(store.team_members) == 5
        assert store.data_source == DataSource.DEFAULT

    def test_team_member_partial_update(self, db_file):
        with ContentStore(db_file) as s:
            updated = s.update_team_member("erin", {"tagline": "Light first"})
            assert updated.tagline == "Light first"
            assert updated.name == "Erin Margarette Pasamba"
        with ContentStore(db_file) as s:
            assert s.get_member("erin").tagline == "Light first"

    def test_update_unknown_member(self, store):
        assert store.update_team_member("nobody", {"name": "X"}) is None

    def test_replace_work(self, db_file):
        with ContentStore(db_file) as s:
            work = s.get_work("sergs", "s1")
            new = work.model_copy(update={"title": "Celestial Drift II"})
            assert s.replace_work("sergs", new) is not None
        with ContentStore(db_file) as s:
            assert s.get_work("sergs", "s1").title == "Celestial Drift II"

    def test_replace_missing_work(self, store):
        assert store.replace_work("sergs", WorkItem(id="zz")) is None
        assert store.replace_work("nobody", WorkItem(id="s1")) is None

    def test_content_blocks_survive_reload(self, db_file):
        with ContentStore(db_file) as s:
            before = s.get_work("gian", "g1").to_json_dict()
            s.update_team_members(s.team_members)
        with ContentStore(db_file) as s:
            assert s.get_work("gian", "g1").to_json_dict() == before

    def test_reset_to_defaults(self, db_file):
        with ContentStore(db_file) as s:
            s.update_site_content({"studioName": "Nova"})
            s.update_team_members([])
            s.reset_to_defaults()
            assert s.site_content.studio_name == "Aurora"
            assert len(s.team_members) == 5
            assert s.data_source == DataSource.DEFAULT
        with ContentStore(db_file) as s:
            assert s.data_source == DataSource.DEFAULT
