from .html import (
    BLOCK_RENDERERS,
    RenderContext,
    render_block,
    render_blocks,
    render_lightbox,
    render_work,
    render_work_page,
)
from .css import generate_css_variables, generate_page_css, invalidate_scss_cache
from .video import VideoSource, parse_video_url

__all__ = [
    "BLOCK_RENDERERS", "RenderContext",
    "render_block", "render_blocks", "render_lightbox", "render_work", "render_work_page",
    "generate_css_variables", "generate_page_css", "invalidate_scss_cache",
    "VideoSource", "parse_video_url",
]
