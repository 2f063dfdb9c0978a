"""
Tests parsing URL vidéo → embed
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_builder.renderer.video import parse_video_url


class TestParseVideoUrl:
    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    ])
    def test_youtube_variants(self, url):
        source = parse_video_url(url)
        assert source.kind == "youtube"
        assert source.embed_url == "https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0"

    def test_youtube_loop_needs_playlist(self):
        source = parse_video_url("https://youtu.be/dQw4w9WgXcQ", autoplay=True, loop=True)
        assert "autoplay=1" in source.embed_url
        assert "loop=1" in source.embed_url
        assert "playlist=dQw4w9WgXcQ" in source.embed_url

    def test_vimeo(self):
        source = parse_video_url("https://vimeo.com/76979871", autoplay=True)
        assert source.kind == "vimeo"
        assert source.embed_url == "https://player.vimeo.com/video/76979871?autoplay=1"

    def test_vimeo_plain(self):
        assert parse_video_url("https://vimeo.com/76979871").embed_url == "https://player.vimeo.com/video/76979871"

    def test_drive(self):
        source = parse_video_url("https://drive.google.com/file/d/1AbC_dEf/view?usp=sharing")
        assert source.kind == "drive"
        assert source.embed_url == "https://drive.google.com/file/d/1AbC_dEf/preview"

    @pytest.mark.parametrize("url", ["https://cdn.x.io/a.mp4", "https://cdn.x.io/b.WEBM", "/media/c.mov?t=1"])
    def test_direct_files(self, url):
        source = parse_video_url(url)
        assert source.kind == "file"
        assert source.embed_url == url

    def test_fallback_iframe(self):
        source = parse_video_url("https://player.twitch.tv/?video=1")
        assert source.kind == "iframe"

    def test_empty(self):
        assert parse_video_url("") is None
