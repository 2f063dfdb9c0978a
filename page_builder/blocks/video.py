"""Blocs vidéo — Video (embed unique, autoplay/loop) et Video Grid (plusieurs embeds)."""
from typing import List, Literal, Optional
from pydantic import Field
from .base import BaseBlock, VideoEntry


class VideoBlock(BaseBlock):
    type: Literal["video"] = "video"
    video_url: Optional[str] = None
    heading: Optional[str] = None
    body: Optional[str] = None
    caption: Optional[str] = None
    autoplay: bool = False
    loop: bool = False


class VideoGridBlock(BaseBlock):
    type: Literal["video-grid"] = "video-grid"
    heading: Optional[str] = None
    videos: List[VideoEntry] = Field(default_factory=list)
    gap: int = 8
