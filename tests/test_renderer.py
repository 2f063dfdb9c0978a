"""
Tests renderer HTML — dispatch par variante, lightbox, page projet.
"""
import sys, os, json, re
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch
import pytest

from page_builder.blocks import (
    BLOCK_REGISTRY, GalleryBlock, HeroImageBlock, ImageGrid2Block, ImageSlot, SpacerBlock,
    TextBlock, UnknownBlock, VideoBlock, VideoGridBlock, VideoEntry, QuoteBlock, ImageTextBlock,
)
from page_builder.core.factory import create_block
from page_builder.core.image_index import collect_all_images
from page_builder.core.schemas import TeamMember, WorkItem
from page_builder.renderer.html import (
    BLOCK_RENDERERS, SPACER_SIZES, RenderContext, render_block, render_blocks, render_work, render_work_page,
)

MEMBER = TeamMember.model_validate({
    "id": "gian", "name": "Gian Carlo Sambayan", "firstName": "Gian Carlo",
    "role": "Graphic Design", "accentColor": "#6366F1",
})


def _lightbox_indexes(html):
    return [int(i) for i in re.findall(r'data-lightbox-index="(\d+)"', html)]


class TestDispatch:
    def test_every_variant_has_renderer(self):
        for cls in BLOCK_REGISTRY.values():
            assert cls in BLOCK_RENDERERS

    @pytest.mark.parametrize("block_type", list(BLOCK_REGISTRY))
    def test_default_blocks_render(self, block_type):
        html = render_block(create_block(block_type))
        assert isinstance(html, str)
        assert 'class="block' in html

    def test_unknown_renders_nothing(self):
        assert render_block(UnknownBlock(id="u", type="carousel")) == ""

    def test_unknown_skipped_in_sequence(self):
        blocks = [TextBlock(id="t", heading="Hi"), UnknownBlock(id="u", type="x")]
        html = render_blocks(blocks)
        assert "Hi" in html
        assert 'id="u"' not in html


class TestVariants:
    def test_text_alignment(self):
        assert "text-block--left" in render_block(TextBlock(id="t", body="x", alignment="left"))

    def test_text_escaped(self):
        html = render_block(TextBlock(id="t", heading="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_spacer_sizes_increase(self):
        assert SPACER_SIZES["sm"] < SPACER_SIZES["md"] < SPACER_SIZES["lg"]
        assert f'height:{SPACER_SIZES["lg"]}px' in render_block(SpacerBlock(id="s", size="lg"))

    def test_image_text_side(self):
        html = render_block(ImageTextBlock(id="it", image="a.jpg", text_side="left"))
        assert "image-text--text-left" in html

    def test_quote_author(self):
        html = render_block(QuoteBlock(id="q", quote="Less", author="Rams"))
        assert "Less" in html and "Rams" in html

    def test_slot_focus_and_zoom(self):
        block = ImageGrid2Block(id="g", images=[ImageSlot(url="a.jpg", zoom=150, object_x=20, object_y=80)])
        html = render_block(block)
        assert "object-position:20% 80%" in html
        assert "transform:scale(1.5)" in html

    def test_overfull_grid_renders_every_image(self):
        block = ImageGrid2Block(id="g", images=[ImageSlot(url=f"{i}.jpg") for i in (1, 2, 3)])
        images = collect_all_images([block])
        html = render_block(block, RenderContext(images=images))
        assert "3.jpg" in html
        assert _lightbox_indexes(html) == [0, 1, 2]

    def test_video_youtube_autoplay_loop(self):
        html = render_block(VideoBlock(id="v", video_url="https://youtu.be/dQw4w9WgXcQ", autoplay=True, loop=True))
        assert "youtube.com/embed/dQw4w9WgXcQ" in html
        assert "autoplay=1" in html
        assert "playlist=dQw4w9WgXcQ" in html

    def test_video_file_uses_video_tag(self):
        html = render_block(VideoBlock(id="v", video_url="https://cdn.example.com/reel.mp4", loop=True))
        assert "<video" in html and " loop" in html

    def test_video_grid_skips_empty(self):
        block = VideoGridBlock(id="vg", videos=[VideoEntry(url="https://vimeo.com/1"), VideoEntry(url="")])
        assert render_block(block).count("<iframe") == 1


class TestLightboxIndexes:
    def test_indexes_follow_image_index(self):
        blocks = [
            HeroImageBlock(id="h", image="hero.jpg"),
            ImageGrid2Block(id="g", images=[ImageSlot(url="a.jpg"), ImageSlot(url="b.jpg")]),
            GalleryBlock(id="ga", images=[ImageSlot(url="c.jpg")]),
        ]
        ctx = RenderContext(images=collect_all_images(blocks))
        assert _lightbox_indexes(render_blocks(blocks, ctx)) == [1, 2, 3]


@pytest.fixture
def no_scss():
    with patch("page_builder.renderer.html.generate_page_css", return_value=":root{}"):
        yield


class TestRenderWork:
    def test_auto_layout_without_blocks(self):
        work = WorkItem(id="w", title="Botanical", description="Posters", image="cover.jpg")
        html = render_work(work, MEMBER)
        assert "auto-layout" in html
        assert 'data-lightbox-index="0"' in html
        assert "project__header" not in html

    def test_title_header_when_first_block_not_hero(self):
        work = WorkItem.model_validate({"id": "w", "title": "Neon", "contentBlocks": [{"id": "t", "type": "text"}]})
        assert "project__header" in render_work(work, MEMBER)

    def test_no_title_header_when_hero_first(self):
        work = WorkItem.model_validate({"id": "w", "title": "Neon",
                                        "contentBlocks": [{"id": "h", "type": "hero-image", "image": "h.jpg"}]})
        assert "project__header" not in render_work(work, MEMBER)

    def test_tools_and_credits(self):
        work = WorkItem(id="w", title="Neon", tools=["Figma", "Blender"])
        html = render_work(work, MEMBER)
        assert "Figma" in html and "Blender" in html
        assert "Gian Carlo Sambayan" in html

    def test_lightbox_json(self):
        work = WorkItem.model_validate({"id": "w", "title": "Neon", "image": "cover.jpg",
                                        "contentBlocks": [{"id": "t", "type": "text"}]})
        html = render_work(work, MEMBER)
        data = re.search(r'<script type="application/json" id="lightbox-images">(.*?)</script>', html).group(1)
        assert json.loads(data) == [{"url": "cover.jpg", "caption": "Cover"}]

    def test_full_page(self, no_scss):
        work = WorkItem(id="w", title="Neon", description="Brand")
        html = render_work_page(work, MEMBER, site_name="Aurora")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Neon — Aurora</title>" in html
        assert "Back to Gian Carlo" in html
