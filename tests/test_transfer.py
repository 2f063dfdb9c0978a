"""
Tests export / import — backup, bundle GitHub, fichier membre, réglages du site.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import ValidationError

from studio.storage import ContentStore
from studio.transfer import (
    TransferError, export_backup, export_bundle, import_payload, member_file_name,
)


@pytest.fixture
def store(tmp_path):
    s = ContentStore(str(tmp_path / "studio.db")).open()
    yield s
    s.close()


class TestExport:
    def test_member_file_name(self):
        assert member_file_name("gian") == "gian"
        assert member_file_name("Rica Mea") == "rica-mea"
        assert member_file_name("") == "member"

    def test_backup_shape(self, store):
        backup = export_backup(store)
        assert backup["siteContent"]["studioName"] == "Aurora"
        assert len(backup["teamMembers"]) == 5

    def test_bundle_paths(self, store):
        bundle = export_bundle(store)
        assert bundle["public/data/team/index.json"] == {"members": ["gian", "sergs", "lorie", "rica", "erin"]}
        assert bundle["public/data/site.json"]["studioName"] == "Aurora"
        assert bundle["public/data/team/erin.json"]["firstName"] == "Erin"


class TestImport:
    def test_backup(self, store):
        backup = export_backup(store)
        backup["siteContent"]["studioName"] = "Nova"
        backup["teamMembers"] = backup["teamMembers"][:2]
        assert import_payload(store, backup) == "Imported from backup!"
        assert store.site_content.studio_name == "Nova"
        assert len(store.team_members) == 2

    def test_bundle(self, store):
        bundle = export_bundle(store)
        bundle["public/data/team/index.json"] = {"members": ["erin", "gian", "missing"]}
        bundle["public/data/team/erin.json"] = {**bundle["public/data/team/erin.json"], "firstName": "",
                                                "shortName": "E."}
        assert import_payload(store, bundle) == "Imported from GitHub bundle!"
        assert [m.id for m in store.team_members] == ["erin", "gian"]
        assert store.get_member("erin").first_name == "E."

    def test_single_member_merged(self, store):
        member = store.get_member("lorie").to_json_dict()
        member["tagline"] = "Frame by frame"
        assert import_payload(store, member) == "Imported Lorie Jane's profile!"
        assert store.get_member("lorie").tagline == "Frame by frame"
        assert len(store.team_members) == 5

    def test_single_member_unknown_id(self, store):
        with pytest.raises(TransferError, match="Member ID not found"):
            import_payload(store, {"id": "ghost", "name": "Ghost", "works": []})

    def test_site_settings(self, store):
        assert import_payload(store, {"studioName": "Nova", "contactEmail": "a@b.c"}) == "Site settings imported!"
        assert store.site_content.contact_email == "a@b.c"

    @pytest.mark.parametrize("payload", [{}, {"foo": 1}, [], "text"])
    def test_unrecognized(self, store, payload):
        with pytest.raises(TransferError, match="Unrecognized JSON format"):
            import_payload(store, payload)


class TestImportAtomic:
    def test_invalid_backup_writes_nothing(self, store, tmp_path):
        payload = {"siteContent": {"studioName": "Replaced"}, "teamMembers": [{"name": "no id"}]}
        with pytest.raises(ValidationError):
            import_payload(store, payload)
        assert store.site_content.studio_name == "Aurora"
        store.close()

        with ContentStore(str(tmp_path / "studio.db")) as reopened:
            assert reopened.site_content.studio_name == "Aurora"
            assert len(reopened.team_members) == 5
            assert reopened.data_source.value == "default"

    def test_invalid_bundle_writes_nothing(self, store):
        bundle = export_bundle(store)
        bundle["public/data/site.json"] = {**bundle["public/data/site.json"], "studioName": "Replaced"}
        bundle["public/data/team/gian.json"] = {"name": "no id"}
        with pytest.raises(ValidationError):
            import_payload(store, bundle)
        assert store.site_content.studio_name == "Aurora"
        assert store.get_member("gian") is not None

    def test_backup_with_non_list_team(self, store):
        with pytest.raises(TransferError):
            import_payload(store, {"siteContent": {"studioName": "X"}, "teamMembers": {"gian": {}}})
        assert store.site_content.studio_name == "Aurora"
