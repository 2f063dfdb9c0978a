"""
Parsing des URLs vidéo → URL d'embed (YouTube, Vimeo, Google Drive, fichier direct).
"""
import re
from typing import Literal, NamedTuple, Optional
from urllib.parse import urlencode

_YOUTUBE_RE = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/|shorts/)|youtu\.be/)([a-zA-Z0-9_-]{11})")
_VIMEO_RE   = re.compile(r"vimeo\.com/(\d+)")
_DRIVE_RE   = re.compile(r"drive\.google\.com/file/d/([^/]+)")
_FILE_RE    = re.compile(r"\.(mp4|webm|mov|ogg)(\?|$)", re.IGNORECASE)


class VideoSource(NamedTuple):
    kind: Literal["youtube", "vimeo", "drive", "file", "iframe"]
    embed_url: str


def parse_video_url(url: str, autoplay: bool = False, loop: bool = False) -> Optional[VideoSource]:
    if not url:
        return None

    m = _YOUTUBE_RE.search(url)
    if m:
        params = {"rel": "0"}
        if autoplay:
            params["autoplay"] = "1"
        if loop:
            # la boucle YouTube exige playlist=<id>
            params["loop"] = "1"
            params["playlist"] = m.group(1)
        return VideoSource("youtube", f"https://www.youtube.com/embed/{m.group(1)}?{urlencode(params)}")

    m = _VIMEO_RE.search(url)
    if m:
        params = {}
        if autoplay:
            params["autoplay"] = "1"
        if loop:
            params["loop"] = "1"
        query = f"?{urlencode(params)}" if params else ""
        return VideoSource("vimeo", f"https://player.vimeo.com/video/{m.group(1)}{query}")

    m = _DRIVE_RE.search(url)
    if m:
        return VideoSource("drive", f"https://drive.google.com/file/d/{m.group(1)}/preview")

    if _FILE_RE.search(url):
        return VideoSource("file", url)

    return VideoSource("iframe", url)
