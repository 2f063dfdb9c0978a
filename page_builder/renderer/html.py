"""
Renderer HTML — blocs de contenu → HTML, et page projet complète.
Dispatch par registry variante → renderer ; type inconnu → rien (la page ne casse pas).
"""
import json
from html import escape as _e
from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from ..blocks import (
    BaseBlock, ImageSlot,
    HeroImageBlock, TextBlock, ImageFullBlock, ImageTextBlock,
    ImageGrid2Block, ImageGrid3Block, ImageGrid6Block, GalleryBlock,
    QuoteBlock, SpacerBlock, VideoBlock, VideoGridBlock, ImageCollectionBlock,
)
from ..core.image_index import collect_all_images, get_image_index
from ..core.schemas import LightboxImage, TeamMember, WorkItem
from .css import generate_page_css
from .video import parse_video_url

SPACER_SIZES = {"sm": 32, "md": 64, "lg": 112}


class RenderContext(BaseModel):
    """Index d'images de l'œuvre (positions lightbox) + couleur d'accent du membre."""
    images: List[LightboxImage] = Field(default_factory=list)
    accent_color: str = "#6366F1"

    def lightbox_index(self, url: str) -> int:
        return get_image_index(self.images, url)


# ── Helpers ─────────────────────────────────────────────────────────────────

def _img_style(slot: ImageSlot) -> str:
    styles = []
    if slot.object_x is not None or slot.object_y is not None:
        x = slot.object_x if slot.object_x is not None else 50
        y = slot.object_y if slot.object_y is not None else 50
        styles.append(f"object-position:{x:g}% {y:g}%")
    if slot.zoom is not None and slot.zoom != 100:
        styles.append(f"transform:scale({slot.zoom / 100:g})")
    return f' style="{";".join(styles)}"' if styles else ""


def _clickable_img(url: str, alt: str, ctx: RenderContext, style: str = "") -> str:
    return (
        f'<img src="{_e(url)}" alt="{_e(alt)}" loading="lazy" class="lightbox-trigger"'
        f' data-lightbox-index="{ctx.lightbox_index(url)}"{style}>'
    )


def _caption(text: Optional[str], css: str = "block__caption") -> str:
    return f'<p class="{css}">{_e(text)}</p>' if text else ""


def _heading(text: Optional[str], tag: str = "h3", css: str = "block__heading") -> str:
    return f'<{tag} class="{css}">{_e(text)}</{tag}>' if text else ""


def _body(text: Optional[str], css: str = "block__body") -> str:
    return f'<p class="{css}">{_e(text)}</p>' if text else ""


# ── Renderers par variante ──────────────────────────────────────────────────

def render_hero_image_block(b: HeroImageBlock, ctx: RenderContext) -> str:
    img = f'<img src="{_e(b.image)}" alt="{_e(b.heading or "")}" class="hero-image__img" loading="lazy">' if b.image else ""
    overlay = ""
    if b.heading or b.body:
        overlay = (
            '<div class="hero-image__overlay">'
            f'{_heading(b.heading, "h2", "hero-image__title")}{_body(b.body, "hero-image__subtitle")}'
            '</div>'
        )
    return f"""<div class="block hero-image" id="{_e(b.id)}">
  {img}
  <div class="hero-image__shade"></div>
  {overlay}
</div>"""


def render_text_block(b: TextBlock, ctx: RenderContext) -> str:
    return f"""<div class="block text-block text-block--{b.alignment}" id="{_e(b.id)}">
  {_heading(b.heading)}
  {_body(b.body, "block__body block__body--pre")}
</div>"""


def render_image_full_block(b: ImageFullBlock, ctx: RenderContext) -> str:
    img = _clickable_img(b.image, b.caption or "", ctx) if b.image else ""
    return f"""<figure class="block image-full" id="{_e(b.id)}">
  {img}
  {_caption(b.caption)}
</figure>"""


def _render_image_cells(b: ImageCollectionBlock, ctx: RenderContext, cell_css: str) -> str:
    cells = []
    for slot in b.images:
        if not slot.url:
            continue
        cells.append(
            f'<div class="{cell_css}">'
            f'{_clickable_img(slot.url, slot.caption or "", ctx, _img_style(slot))}'
            f'{_caption(slot.caption, "block__caption block__caption--sm")}'
            '</div>'
        )
    return "".join(cells)


def _render_grid(b: ImageCollectionBlock, ctx: RenderContext) -> str:
    cells = _render_image_cells(b, ctx, "image-grid__cell")
    return (
        f'<div class="block image-grid image-grid--{b.SLOTS}" id="{_e(b.id)}" style="gap:{b.gap}px">'
        f'{cells}</div>'
    )


def render_image_grid_2_block(b: ImageGrid2Block, ctx: RenderContext) -> str:
    return _render_grid(b, ctx)


def render_image_grid_3_block(b: ImageGrid3Block, ctx: RenderContext) -> str:
    return _render_grid(b, ctx)


def render_image_grid_6_block(b: ImageGrid6Block, ctx: RenderContext) -> str:
    return _render_grid(b, ctx)


def render_image_text_block(b: ImageTextBlock, ctx: RenderContext) -> str:
    img = _clickable_img(b.image, b.heading or "", ctx) if b.image else ""
    return f"""<div class="block image-text image-text--text-{b.text_side}" id="{_e(b.id)}">
  <div class="image-text__media">{img}</div>
  <div class="image-text__content">
    {_heading(b.heading)}
    {_body(b.body)}
    <div class="accent-line" style="background:{_e(ctx.accent_color)}"></div>
  </div>
</div>"""


def render_quote_block(b: QuoteBlock, ctx: RenderContext) -> str:
    quote = f'<blockquote class="quote__text">{_e(b.quote)}</blockquote>' if b.quote else ""
    author = f'<p class="quote__author" style="color:{_e(ctx.accent_color)}">— {_e(b.author)}</p>' if b.author else ""
    return f"""<div class="block quote" id="{_e(b.id)}">
  <span class="quote__mark" style="color:{_e(ctx.accent_color)}">&ldquo;</span>
  {quote}
  {author}
</div>"""


def render_spacer_block(b: SpacerBlock, ctx: RenderContext) -> str:
    height = SPACER_SIZES.get(b.size, SPACER_SIZES["md"])
    return f'<div class="block spacer spacer--{b.size}" id="{_e(b.id)}" style="height:{height}px"><div class="spacer__line"></div></div>'


def render_gallery_block(b: GalleryBlock, ctx: RenderContext) -> str:
    cells = _render_image_cells(b, ctx, "gallery__item")
    return (
        f'<div class="block gallery" id="{_e(b.id)}" style="column-gap:{b.gap}px">'
        f'{cells}</div>'
    )


def render_video_embed(url: str, caption: Optional[str] = None, autoplay: bool = False, loop: bool = False) -> str:
    source = parse_video_url(url, autoplay=autoplay, loop=loop)
    if source is None:
        return ""
    if source.kind == "file":
        flags = " autoplay muted" if autoplay else ""
        flags += " loop" if loop else ""
        player = (
            f'<video src="{_e(source.embed_url)}" controls playsinline preload="metadata"{flags}>'
            'Your browser does not support the video tag.</video>'
        )
    else:
        player = (
            f'<div class="video__frame"><iframe src="{_e(source.embed_url)}" title="{_e(caption or "Video")}"'
            ' allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"'
            ' allowfullscreen></iframe></div>'
        )
    return f'<div class="video">{player}{_caption(caption)}</div>'


def render_video_block(b: VideoBlock, ctx: RenderContext) -> str:
    embed = render_video_embed(b.video_url, b.caption, b.autoplay, b.loop) if b.video_url else ""
    return f"""<div class="block video-block" id="{_e(b.id)}">
  {_heading(b.heading)}
  {embed}
  {_body(b.body)}
</div>"""


def render_video_grid_block(b: VideoGridBlock, ctx: RenderContext) -> str:
    videos = [v for v in b.videos if v.url]
    cols = 2 if len(videos) <= 2 else 3
    cells = "".join(f'<div class="video-grid__cell">{render_video_embed(v.url, v.caption)}</div>' for v in videos)
    return f"""<div class="block video-grid" id="{_e(b.id)}">
  {_heading(b.heading)}
  <div class="video-grid__grid video-grid__grid--{cols}" style="gap:{b.gap}px">{cells}</div>
</div>"""


# ── Dispatch ────────────────────────────────────────────────────────────────

BLOCK_RENDERERS: Dict[type, Callable[..., str]] = {
    HeroImageBlock:  render_hero_image_block,
    TextBlock:       render_text_block,
    ImageFullBlock:  render_image_full_block,
    ImageGrid2Block: render_image_grid_2_block,
    ImageGrid3Block: render_image_grid_3_block,
    ImageGrid6Block: render_image_grid_6_block,
    ImageTextBlock:  render_image_text_block,
    QuoteBlock:      render_quote_block,
    SpacerBlock:     render_spacer_block,
    GalleryBlock:    render_gallery_block,
    VideoBlock:      render_video_block,
    VideoGridBlock:  render_video_grid_block,
}


def render_block(block: BaseBlock, ctx: Optional[RenderContext] = None) -> str:
    """Rend un bloc ; variante inconnue (UnknownBlock…) → chaîne vide."""
    renderer = BLOCK_RENDERERS.get(type(block))
    if renderer is None:
        return ""
    return renderer(block, ctx or RenderContext())


def render_blocks(blocks: Sequence[BaseBlock], ctx: Optional[RenderContext] = None) -> str:
    ctx = ctx or RenderContext(images=collect_all_images(blocks))
    return "\n".join(html for html in (render_block(b, ctx) for b in blocks) if html)


# ── Page projet ─────────────────────────────────────────────────────────────

def render_auto_layout(work: WorkItem, ctx: RenderContext) -> str:
    """Œuvre sans blocs : couverture + titre + description."""
    cover = _clickable_img(work.image, work.title, ctx) if work.image else ""
    return f"""<div class="auto-layout">
  <div class="block hero-image">
    {cover}
    <div class="hero-image__shade"></div>
    <div class="hero-image__overlay"><h2 class="hero-image__title">{_e(work.title)}</h2></div>
  </div>
  <div class="auto-layout__text">
    {_body(work.description, "auto-layout__description")}
    <div class="accent-line accent-line--center" style="background:{_e(ctx.accent_color)}"></div>
  </div>
</div>"""


def render_lightbox(images: Sequence[LightboxImage]) -> str:
    """Markup lightbox + liste JSON des images (navigation côté client)."""
    data = json.dumps([img.model_dump(exclude_none=True) for img in images]).replace("</", "<\\/")
    return f"""<div class="lightbox" id="lightbox" hidden>
  <button class="lightbox__close" data-lightbox="close" aria-label="Close">&times;</button>
  <button class="lightbox__prev" data-lightbox="prev" aria-label="Previous">&lsaquo;</button>
  <figure class="lightbox__figure"><img class="lightbox__img" alt=""><figcaption class="lightbox__caption"></figcaption></figure>
  <button class="lightbox__next" data-lightbox="next" aria-label="Next">&rsaquo;</button>
</div>
<script type="application/json" id="lightbox-images">{data}</script>
<script>{_LIGHTBOX_JS}</script>"""


def render_work(work: WorkItem, member: TeamMember) -> str:
    """Vue projet : en-tête, blocs (ou AutoLayout), outils, crédits, lightbox."""
    blocks = work.blocks
    images = collect_all_images(blocks, work.image)
    ctx = RenderContext(images=images, accent_color=member.accent_color)

    header = ""
    if blocks and not isinstance(blocks[0], HeroImageBlock):
        header = f"""<header class="project__header">
  <h1 class="project__title">{_e(work.title)}</h1>
  {_body(work.description, "project__description")}
</header>"""

    content = render_blocks(blocks, ctx) if blocks else render_auto_layout(work, ctx)
    tools = "".join(
        f'<span class="project__tool" style="color:{_e(member.accent_color)}">{_e(t)}</span>'
        for t in work.tools
    )

    return f"""<article class="project" id="work-{_e(work.id)}">
{header}
<div class="project__blocks">
{content}
</div>
<div class="project__divider"></div>
<footer class="project__meta">
  <p class="project__tools-label">Tools Used</p>
  <div class="project__tools">{tools}</div>
  <p class="project__credit">{_e(work.title)} — by <span style="color:{_e(member.accent_color)}">{_e(member.name)}</span></p>
  <p class="project__role">{_e(member.role)}</p>
</footer>
</article>
{render_lightbox(images)}"""


def render_work_page(work: WorkItem, member: TeamMember, site_name: str = "Aurora",
                     back_href: str = "/", extra_head: str = "") -> str:
    """Document HTML complet de la vue projet."""
    css = generate_page_css(member.accent_color)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_e(work.title)} — {_e(site_name)}</title>
  {f'<meta name="description" content="{_e(work.description)}">' if work.description else ''}
  <style>{css}</style>
  {extra_head}
</head>
<body>
<nav class="project__nav">
  <a href="{_e(back_href)}" class="project__back">&larr; Back to {_e(member.first_name or member.name)}&#39;s Portfolio</a>
  <span class="project__member">{_e(member.first_name or member.name)} · {_e(member.role)}</span>
</nav>
<main class="container">
{render_work(work, member)}
</main>
</body>
</html>"""


# Navigation lightbox côté client : même arithmétique que core.lightbox.LightboxController
_LIGHTBOX_JS = """(function(){
var box=document.getElementById('lightbox');if(!box)return;
var imgs=JSON.parse(document.getElementById('lightbox-images').textContent||'[]');
var cur=0,n=imgs.length,im=box.querySelector('.lightbox__img'),cap=box.querySelector('.lightbox__caption');
function show(){if(!n)return;im.src=imgs[cur].url;cap.textContent=imgs[cur].caption||'';}
function open(i){if(n){cur=Math.max(0,Math.min(i,n-1));}else{cur=0;}box.hidden=false;show();}
function close(){box.hidden=true;}
function next(){if(!n)return;cur=(cur+1)%n;show();}
function prev(){if(!n)return;cur=(cur-1+n)%n;show();}
document.addEventListener('click',function(e){
  var t=e.target.closest('[data-lightbox-index]');
  if(t){open(parseInt(t.getAttribute('data-lightbox-index'),10)||0);return;}
  var a=e.target.closest('[data-lightbox]');if(!a)return;
  var act=a.getAttribute('data-lightbox');if(act==='next')next();else if(act==='prev')prev();else close();
});
document.addEventListener('keydown',function(e){
  if(box.hidden)return;
  if(e.key==='ArrowRight')next();else if(e.key==='ArrowLeft')prev();else if(e.key==='Escape')close();else return;
  e.preventDefault();e.stopPropagation();
},true);
})();"""
