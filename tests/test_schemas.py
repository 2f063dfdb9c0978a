"""
Tests schémas — union de blocs, aller-retour JSON, blocs inconnus, bornes des slots.
"""
import sys, os, json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import TypeAdapter

from page_builder.blocks import (
    BlockUnion, BLOCK_REGISTRY, BLOCK_TYPES, ImageSlot, UnknownBlock, VideoBlock, parse_block,
)
from page_builder.core.factory import create_block
from page_builder.core.schemas import SiteContent, TeamMember, WorkItem

_WORK_JSON = {
    "id": "g1",
    "title": "Neon Horizons",
    "description": "Brand identity",
    "tools": ["Illustrator"],
    "image": "cover.jpg",
    "contentBlocks": [
        {"id": "blk_a", "type": "hero-image", "image": "h.jpg", "heading": "Neon"},
        {"id": "blk_b", "type": "image-text", "image": "i.jpg", "body": "Body", "textSide": "left"},
        {"id": "blk_c", "type": "image-grid-2", "gap": 8,
         "images": [{"url": "1.jpg", "caption": "One", "zoom": 150, "objectX": 20, "objectY": 80}, {"url": ""}]},
        {"id": "blk_d", "type": "video", "videoUrl": "https://vimeo.com/123", "autoplay": True, "loop": False},
        {"id": "blk_e", "type": "carousel", "slides": [1, 2, 3]},
    ],
}


class TestParseBlock:
    def test_known_types(self):
        for block_type, cls in BLOCK_REGISTRY.items():
            block = parse_block({"id": "x", "type": block_type})
            assert isinstance(block, cls)

    def test_unknown_type_kept(self):
        block = parse_block({"id": "x", "type": "carousel", "slides": [1]})
        assert isinstance(block, UnknownBlock)
        assert block.model_dump(by_alias=True) == {"id": "x", "type": "carousel", "slides": [1]}

    def test_malformed_known_type_kept_as_unknown(self):
        block = parse_block({"id": "x", "type": "spacer", "size": "huge"})
        assert isinstance(block, UnknownBlock)
        assert block.type == "spacer"

    def test_non_string_type(self):
        block = parse_block({"id": "x", "type": ["text"]})
        assert isinstance(block, UnknownBlock)
        assert block.id == "x"

    def test_non_object_ignored(self):
        assert parse_block("spacer") is None
        assert parse_block(None) is None

    def test_discriminated_union(self):
        adapter = TypeAdapter(BlockUnion)
        block = adapter.validate_python({"id": "v", "type": "video", "videoUrl": "a.mp4"})
        assert isinstance(block, VideoBlock)
        assert block.video_url == "a.mp4"


class TestRoundTrip:
    def test_work_json_round_trip_lossless(self):
        work = WorkItem.model_validate(_WORK_JSON)
        assert work.to_json_dict() == _WORK_JSON

    def test_round_trip_through_text(self):
        work = WorkItem.model_validate(json.loads(json.dumps(_WORK_JSON)))
        again = WorkItem.model_validate(json.loads(json.dumps(work.to_json_dict())))
        assert again.to_json_dict() == _WORK_JSON

    def test_every_factory_block_round_trips(self):
        for block_type in BLOCK_TYPES:
            data = create_block(block_type).model_dump(by_alias=True, exclude_none=True)
            assert parse_block(data).model_dump(by_alias=True, exclude_none=True) == data

    def test_absent_blocks_stay_absent(self):
        work = WorkItem.model_validate({"id": "w", "title": "T"})
        assert work.content_blocks is None
        assert work.blocks == []
        assert "contentBlocks" not in work.to_json_dict()

    def test_non_list_blocks_become_empty(self):
        assert WorkItem.model_validate({"id": "w", "contentBlocks": "oops"}).content_blocks == []


class TestImageSlot:
    def test_zoom_clamped(self):
        assert ImageSlot(url="a", zoom=50).zoom == 100
        assert ImageSlot(url="a", zoom=500).zoom == 200
        assert ImageSlot(url="a", zoom=150).zoom == 150

    def test_focus_clamped(self):
        slot = ImageSlot.model_validate({"url": "a", "objectX": -10, "objectY": 140})
        assert (slot.object_x, slot.object_y) == (0, 100)

    def test_unset_stays_unset(self):
        assert ImageSlot(url="a").model_dump(by_alias=True, exclude_none=True) == {"url": "a"}


class TestTeamMember:
    def test_accent_rgb_alias(self):
        member = TeamMember.model_validate({"id": "m", "accentColorRGB": "1, 2, 3"})
        assert member.accent_color_rgb == "1, 2, 3"
        assert member.to_json_dict()["accentColorRGB"] == "1, 2, 3"

    def test_get_work(self):
        member = TeamMember.model_validate({"id": "m", "works": [{"id": "w1"}, {"id": "w2"}]})
        assert member.get_work("w2").id == "w2"
        assert member.get_work("w9") is None


class TestSiteContent:
    def test_defaults(self):
        site = SiteContent()
        assert site.studio_name == "Aurora"
        assert site.disciplines == ["Design", "3D", "Video", "Modelling", "Photo"]

    def test_merged_camel_and_snake(self):
        site = SiteContent().merged({"studioName": "Nova", "contact_email": "hi@nova.io"})
        assert site.studio_name == "Nova"
        assert site.contact_email == "hi@nova.io"
        assert site.studio_tagline == "Creative Multimedia Studio"
